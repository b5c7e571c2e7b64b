"""Decoupled UCT search for the simultaneous two-player maze."""

from __future__ import annotations

import math

from .constants import INF
from .simultaneous import sim_playout
from .util import WinningStatus

# UCB1 exploration constant.
C = 1.0
# Number of visits after which a leaf is expanded.
EXPAND_THRESHOLD = 5


def _terminal_value(status: WinningStatus) -> float:
    if status is WinningStatus.WIN:
        return 1.0
    if status is WinningStatus.LOSE:
        return 0.0
    return 0.5


class DuctNode:
    """A node whose children form a matrix indexed by [player 0 action][player 1 action].

    Values are always kept from player 0's point of view.
    """

    def __init__(self, state) -> None:
        self.state = state
        self.w = 0.0
        self.n = 0
        self.children: list[list[DuctNode]] = []

    def _record(self, value: float) -> None:
        self.w += value
        self.n += 1

    def evaluate(self) -> float:
        """Run one simulation through this node and return player 0's value."""
        if self.state.is_done():
            value = _terminal_value(self.state.winning_status())
            self._record(value)
            return value

        if not self.children:
            value = sim_playout(self.state.clone())
            self._record(value)
            if self.n == EXPAND_THRESHOLD:
                self.expand()
            return value

        value = self.next_child_node().evaluate()
        self._record(value)
        return value

    def expand(self) -> None:
        """Create a child for every pair of legal actions, replacing any existing children."""
        actions0 = self.state.legal_actions(0)
        actions1 = self.state.legal_actions(1)
        self.children = []
        for action0 in actions0:
            row = []
            for action1 in actions1:
                successor = self.state.clone()
                successor.advance(action0, action1)
                row.append(DuctNode(successor))
            self.children.append(row)

    def next_child_node(self) -> "DuctNode":
        """Return the first unvisited child, otherwise the pair chosen by each player's UCB1."""
        for row in self.children:
            for child in row:
                if child.n == 0:
                    return child

        total = float(sum(child.n for row in self.children for child in row))
        log_total = math.log(total)

        def ucb1(w: float, n: float) -> float:
            return w / n + C * math.sqrt(2.0 * log_total / n)

        best_row = -1
        best_value = -INF
        for i, row in enumerate(self.children):
            w = sum(child.w for child in row)
            n = float(sum(child.n for child in row))
            value = ucb1(w, n)
            if value > best_value:
                best_row = i
                best_value = value

        best_column = -1
        best_value = -INF
        for j, column in enumerate(zip(*self.children)):
            w = sum(child.w for child in column)
            n = float(sum(child.n for child in column))
            # Player 1 wants the opposite of player 0.
            value = ucb1(n - w, n)
            if value > best_value:
                best_column = j
                best_value = value

        return self.children[best_row][best_column]


def duct_action(state, player_id: int, simulation_number: int) -> int:
    """Choose ``player_id``'s most visited action after ``simulation_number`` DUCT simulations."""
    actions = state.legal_actions(player_id)
    if not actions:
        raise ValueError(f"player {player_id} has no legal action")

    root = DuctNode(state.clone())
    root.expand()
    for _ in range(simulation_number):
        root.evaluate()

    if player_id == 0:
        visits = [sum(child.n for child in row) for row in root.children]
    else:
        visits = [sum(child.n for child in column) for column in zip(*root.children)]
    best_index = max(range(len(visits)), key=visits.__getitem__)
    return actions[best_index]