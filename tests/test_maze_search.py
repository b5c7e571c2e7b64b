import copy

from mazesearch.constants import DX, DY
from mazesearch.maze_search import (
    BeamConfig,
    ChokudaiConfig,
    beam_search_action,
    chokudai_search_action,
    greedy_action,
    maze_random_action,
)
from mazesearch.util import seed_random


class GridMaze:
    def __init__(self, points, y, x, end_turn=4):
        self.points = [row[:] for row in points]
        self.y = y
        self.x = x
        self.turn = 0
        self.end_turn = end_turn
        self.game_score = 0
        self.evaluated_score = 0
        self.first_action = -1

    def legal_actions(self):
        height, width = len(self.points), len(self.points[0])
        return [
            a
            for a in range(4)
            if 0 <= self.y + DY[a] < height and 0 <= self.x + DX[a] < width
        ]

    def progress(self, action):
        self.y += DY[action]
        self.x += DX[action]
        self.game_score += self.points[self.y][self.x]
        self.points[self.y][self.x] = 0
        self.turn += 1

    def is_done(self):
        return self.turn >= self.end_turn

    def evaluate_score(self):
        self.evaluated_score = self.game_score
        return self.evaluated_score

    def clone(self):
        return copy.deepcopy(self)

    def __lt__(self, other):
        return self.evaluated_score < other.evaluated_score


def trap_maze():
    # Left looks better at first, right pays off one step later.
    return GridMaze([[0, 5, 0, 1, 20]], 0, 2)


def test_greedy_takes_best_immediate_move():
    assert greedy_action(trap_maze()) == 1


def test_greedy_tie_keeps_first_legal_action():
    state = GridMaze([[0, 0, 0], [0, 0, 0], [0, 0, 0]], 1, 1)
    assert greedy_action(state) == state.legal_actions()[0]


def test_greedy_without_moves_returns_minus_one():
    assert greedy_action(GridMaze([[0]], 0, 0)) == -1


def test_random_without_moves_returns_zero():
    assert maze_random_action(GridMaze([[0]], 0, 0)) == 0


def test_random_action_is_legal_and_reproducible():
    state = GridMaze([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 1, 1)
    seed_random(3)
    first = [maze_random_action(state) for _ in range(8)]
    seed_random(3)
    second = [maze_random_action(state) for _ in range(8)]
    assert first == second
    assert set(first) <= set(state.legal_actions())


def test_beam_search_does_not_modify_state():
    state = trap_maze()
    beam_search_action(state, BeamConfig(time_threshold=0))
    assert (state.x, state.turn, state.game_score) == (2, 0, 0)
    assert state.points == [[0, 5, 0, 1, 20]]


def test_beam_search_without_moves_returns_minus_one():
    assert beam_search_action(GridMaze([[0]], 0, 0), BeamConfig(time_threshold=0)) == -1


def test_beam_search_with_time_limit_returns_legal_or_none():
    state = trap_maze()
    action = beam_search_action(state, BeamConfig())
    assert action in state.legal_actions() + [-1]


def test_chokudai_zero_depth_returns_initial_first_action():
    state = trap_maze()
    config = ChokudaiConfig(search_depth=0, time_threshold=0)
    assert chokudai_search_action(state, config) == state.first_action


def test_chokudai_finished_state_is_not_expanded():
    state = trap_maze()
    state.turn = state.end_turn
    config = ChokudaiConfig(time_threshold=0)
    assert chokudai_search_action(state, config) == state.first_action


def test_chokudai_agrees_with_greedy_on_single_step():
    state = GridMaze([[0, 0, 0], [0, 0, 9], [0, 0, 0]], 1, 1, end_turn=1)
    config = ChokudaiConfig(search_width=1, search_depth=1, search_number=1, time_threshold=0)
    assert chokudai_search_action(state, config) == greedy_action(state)