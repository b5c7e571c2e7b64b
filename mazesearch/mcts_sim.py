"""MCTS for the simultaneous maze, searched as if the players moved in turn."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .constants import DX, DY, END_TURN, H, INF, W
from .util import WinningStatus, next_random

# One simultaneous turn is two alternating plies.
END_TURN_MULTIPLIER = 2
# UCB1 exploration constant.
C = 1.0
# Number of visits after which a leaf is expanded.
EXPAND_THRESHOLD = 10


@dataclass
class _Character:
    y: int = 0
    x: int = 0
    game_score: int = 0


def _status_value(status: WinningStatus) -> float:
    if status is WinningStatus.WIN:
        return 1.0
    if status is WinningStatus.LOSE:
        return 0.0
    return 0.5


class AlternateMazeState:
    """A simultaneous maze position recast so that players move one after the other.

    ``players[0]`` is always the player to move.
    """

    def __init__(self, base_state, player_id: int) -> None:
        self.points = [[base_state.point(y, x) for x in range(W)] for y in range(H)]
        self.turn = base_state.turn * END_TURN_MULTIPLIER
        order = (0, 1) if player_id == 0 else (1, 0)
        self.players = [
            _Character(
                base_state.player_y(i), base_state.player_x(i), base_state.player_score(i)
            )
            for i in order
        ]

    def _clone(self) -> "AlternateMazeState":
        copy = object.__new__(AlternateMazeState)
        copy.points = [row[:] for row in self.points]
        copy.turn = self.turn
        copy.players = [replace(player) for player in self.players]
        return copy

    def winning_status(self) -> WinningStatus:
        """Result for the player to move, or NONE while the game is running."""
        if not self.is_done():
            return WinningStatus.NONE
        mine, theirs = self.players[0].game_score, self.players[1].game_score
        if mine > theirs:
            return WinningStatus.WIN
        if mine < theirs:
            return WinningStatus.LOSE
        return WinningStatus.DRAW

    def is_done(self) -> bool:
        return self.turn >= END_TURN * END_TURN_MULTIPLIER

    def advance(self, action: int) -> None:
        """Move the player to move, collect the point under it and pass the turn."""
        player = self.players[0]
        y, x = player.y + DY[action], player.x + DX[action]
        if not (0 <= y < H and 0 <= x < W):
            raise ValueError(f"action {action} leaves the board")
        player.y, player.x = y, x
        point = self.points[y][x]
        if point > 0:
            player.game_score += point
            self.points[y][x] = 0
        self.turn += 1
        self.players.reverse()

    def legal_actions(self) -> list[int]:
        player = self.players[0]
        return [
            action
            for action in range(4)
            if 0 <= player.y + DY[action] < H and 0 <= player.x + DX[action] < W
        ]


class Node:
    """A node of the UCB1 tree over alternating plies; values are for the player to move."""

    def __init__(self, state: AlternateMazeState) -> None:
        self.state = state
        self.w = 0.0
        self.n = 0
        self.children: list[Node] = []

    def _record(self, value: float) -> None:
        self.w += value
        self.n += 1

    def evaluate(self) -> float:
        """Run one simulation through this node and return its value for the player to move."""
        if self.state.is_done():
            value = _status_value(self.state.winning_status())
            self._record(value)
            return value

        if not self.children:
            value = playout(self.state._clone())
            self._record(value)
            if self.n == EXPAND_THRESHOLD:
                self.expand()
            return value

        value = 1.0 - self.next_child_node().evaluate()
        self._record(value)
        return value

    def expand(self) -> None:
        """Create one child per legal action, replacing any existing children."""
        self.children = []
        for action in self.state.legal_actions():
            successor = self.state._clone()
            successor.advance(action)
            self.children.append(Node(successor))

    def next_child_node(self) -> "Node":
        """Return the first unvisited child, otherwise the child with the best UCB1 value."""
        for child in self.children:
            if child.n == 0:
                return child

        total = float(sum(child.n for child in self.children))
        best_value = -INF
        best_index = 0
        for index, child in enumerate(self.children):
            ucb1 = 1.0 - child.w / child.n + C * math.sqrt(2.0 * math.log(total) / child.n)
            if ucb1 > best_value:
                best_value = ucb1
                best_index = index
        return self.children[best_index]


def random_action(state: AlternateMazeState) -> int:
    """Pick a legal action uniformly at random, or 0 when none exists."""
    actions = state.legal_actions()
    if not actions:
        return 0
    return actions[next_random() % len(actions)]


def playout(state: AlternateMazeState) -> float:
    """Play ``state`` out at random in place; return the result for the player to move now."""
    plies = 0
    status = state.winning_status()
    while status is WinningStatus.NONE:
        state.advance(random_action(state))
        plies += 1
        status = state.winning_status()
    value = _status_value(status)
    return 1.0 - value if plies % 2 else value


def mcts_sim_action(state, player_id: int, playout_number: int) -> int:
    """Choose ``player_id``'s most visited action after ``playout_number`` MCTS simulations."""
    alternate = AlternateMazeState(state, player_id)
    actions = alternate.legal_actions()
    if not actions:
        raise ValueError(f"player {player_id} has no legal action")

    root = Node(alternate)
    root.expand()
    for _ in range(playout_number):
        root.evaluate()

    best_index = max(range(len(root.children)), key=lambda i: root.children[i].n)
    return actions[best_index]