import copy

import pytest

from mazesearch.constants import DX, DY, END_TURN, H, W
from mazesearch.mcts_sim import (
    AlternateMazeState,
    Node,
    mcts_sim_action,
    playout,
    random_action,
)
from mazesearch.util import WinningStatus, seed_random


class FakeSimMaze:
    def __init__(self, points=None, positions=((0, 0), (4, 4)), scores=(0, 0), turn=0):
        self.points = [list(r) for r in points] if points else [[0] * W for _ in range(H)]
        self.positions = [list(p) for p in positions]
        self.scores = list(scores)
        self.turn = turn

    def clone(self):
        return copy.deepcopy(self)

    def is_done(self):
        return self.turn >= END_TURN

    def legal_actions(self, player_id):
        y, x = self.positions[player_id]
        return [a for a in range(4) if 0 <= y + DY[a] < H and 0 <= x + DX[a] < W]

    def point(self, y, x):
        return self.points[y][x]

    def player_y(self, player_id):
        return self.positions[player_id][0]

    def player_x(self, player_id):
        return self.positions[player_id][1]

    def player_score(self, player_id):
        return self.scores[player_id]


def _grid(**cells):
    grid = [[0] * W for _ in range(H)]
    for (y, x), value in cells.values():
        grid[y][x] = value
    return grid


def test_conversion_puts_searching_player_first():
    base = FakeSimMaze(positions=((0, 0), (4, 4)), scores=(2, 5))
    mine = AlternateMazeState(base, 0)
    theirs = AlternateMazeState(base, 1)
    assert (mine.players[0].y, mine.players[0].x, mine.players[0].game_score) == (0, 0, 2)
    assert (theirs.players[0].y, theirs.players[0].x, theirs.players[0].game_score) == (4, 4, 5)
    assert theirs.players[1].game_score == base.player_score(0)


def test_last_simultaneous_turn_takes_two_plies():
    state = AlternateMazeState(FakeSimMaze(turn=END_TURN - 1), 0)
    assert not state.is_done()
    state.advance(state.legal_actions()[0])
    assert not state.is_done()
    state.advance(state.legal_actions()[0])
    assert state.is_done()


def test_advance_collects_point_and_swaps_players():
    state = AlternateMazeState(FakeSimMaze(points=_grid(a=((0, 1), 7))), 0)
    state.advance(0)
    assert state.points[0][1] == 0
    assert (state.players[1].y, state.players[1].x) == (0, 1)
    assert state.players[1].game_score == 7
    assert (state.players[0].y, state.players[0].x) == (4, 4)


def test_advance_off_board_raises():
    state = AlternateMazeState(FakeSimMaze(), 0)
    with pytest.raises(ValueError):
        state.advance(1)


def test_legal_actions_stay_on_board():
    state = AlternateMazeState(FakeSimMaze(positions=((0, 0), (2, 2))), 0)
    for action in state.legal_actions():
        y, x = state.players[0].y + DY[action], state.players[0].x + DX[action]
        assert 0 <= y < H and 0 <= x < W
    assert len(state.legal_actions()) == 2
    assert len(AlternateMazeState(FakeSimMaze(positions=((0, 0), (2, 2))), 1).legal_actions()) == 4


@pytest.mark.parametrize(
    "scores, status",
    [((3, 1), WinningStatus.WIN), ((1, 3), WinningStatus.LOSE), ((2, 2), WinningStatus.DRAW)],
)
def test_winning_status_when_done(scores, status):
    state = AlternateMazeState(FakeSimMaze(scores=scores, turn=END_TURN), 0)
    assert state.winning_status() is status
    assert playout(state) == {WinningStatus.WIN: 1.0, WinningStatus.LOSE: 0.0, WinningStatus.DRAW: 0.5}[status]


def test_winning_status_none_while_running():
    assert AlternateMazeState(FakeSimMaze(), 0).winning_status() is WinningStatus.NONE


def test_playout_value_in_range_and_finishes_game():
    seed_random(3)
    state = AlternateMazeState(FakeSimMaze(points=_grid(a=((1, 1), 4), b=((3, 2), 6))), 0)
    value = playout(state)
    assert value in (0.0, 0.5, 1.0)
    assert state.is_done()


def test_random_action_is_legal():
    seed_random(1)
    state = AlternateMazeState(FakeSimMaze(positions=((2, 2), (0, 0))), 0)
    for _ in range(20):
        assert random_action(state) in state.legal_actions()


def test_node_expand_one_child_per_action():
    state = AlternateMazeState(FakeSimMaze(), 0)
    node = Node(state)
    node.expand()
    assert len(node.children) == len(state.legal_actions())
    assert all(child.state.turn == state.turn + 1 for child in node.children)
    assert node.next_child_node() is node.children[0]


def test_player0_takes_winning_point():
    seed_random(0)
    state = FakeSimMaze(points=_grid(a=((0, 1), 9)), turn=END_TURN - 1)
    assert mcts_sim_action(state, 0, 200) == 0


def test_player1_takes_winning_point():
    seed_random(0)
    state = FakeSimMaze(points=_grid(a=((4, 3), 9)), turn=END_TURN - 1)
    assert mcts_sim_action(state, 1, 200) == 1


def test_action_is_legal_and_reproducible():
    state = FakeSimMaze(points=_grid(a=((1, 1), 4), b=((3, 3), 6)))
    seed_random(11)
    first = mcts_sim_action(state, 0, 60)
    seed_random(11)
    second = mcts_sim_action(state, 0, 60)
    assert first == second
    assert first in state.legal_actions(0)