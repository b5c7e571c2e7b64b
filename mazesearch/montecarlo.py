"""Monte Carlo action selection for the alternating two-player maze: plain, MCTS and Thunder."""

from __future__ import annotations

import math

from .constants import INF
from .util import TimeKeeper, WinningStatus

# UCB1 exploration constant.
C = 1.0
# Number of visits after which an MCTS leaf is expanded.
EXPAND_THRESHOLD = 10


def _status_value(status: WinningStatus, default: float) -> float:
    if status is WinningStatus.WIN:
        return 1.0
    if status is WinningStatus.LOSE:
        return 0.0
    if status is WinningStatus.DRAW:
        return 0.5
    return default


def _successor(state, action):
    successor = state.clone()
    successor.progress(action)
    return successor


def _most_visited_index(children) -> int:
    return max(range(len(children)), key=lambda i: children[i].n)


def playout(state) -> float:
    """Value of ``state`` for the player to move: 1 for a win, 0 for a loss, 0.5 otherwise.

    The result is read from the state as it stands; the position is not played out.
    """
    return _status_value(state.winning_status(), 0.5)


def monte_carlo_action(state, playout_number: int) -> int:
    """Spread ``playout_number`` playouts over the legal actions in turn; pick the best average.

    Returns -1 when there is no legal action.
    """
    actions = state.legal_actions()
    if not actions:
        return -1

    totals = [0.0] * len(actions)
    counts = [0] * len(actions)
    for i in range(playout_number):
        index = i % len(actions)
        totals[index] += 1.0 - playout(_successor(state, actions[index]))
        counts[index] += 1

    best_index = 0
    best_value = -1.0
    for index, (total, count) in enumerate(zip(totals, counts)):
        if count > 0 and total / count > best_value:
            best_value = total / count
            best_index = index
    return actions[best_index]


class MctsNode:
    """A node of the UCB1 search tree; it owns the state it is given."""

    def __init__(self, state) -> None:
        self.state = state
        self.w = 0.0
        self.n = 0
        self.children: list[MctsNode] = []

    def evaluate(self) -> float:
        """Run one simulation through this node and return its value for the player to move."""
        if self.state.is_done():
            value = _status_value(self.state.winning_status(), 0.5)
            self.w += value
            self.n += 1
            return value

        if not self.children:
            value = playout(self.state.clone())
            self.w += value
            self.n += 1
            if self.n == EXPAND_THRESHOLD:
                self.expand()
            return value

        value = 1.0 - self.next_child_node().evaluate()
        self.w += value
        self.n += 1
        return value

    def expand(self) -> None:
        """Create one child per legal action, replacing any existing children."""
        self.children = [
            MctsNode(_successor(self.state, action)) for action in self.state.legal_actions()
        ]

    def next_child_node(self) -> "MctsNode":
        """Return the first unvisited child, otherwise the child with the best UCB1 value."""
        for child in self.children:
            if child.n == 0:
                return child

        total = float(sum(child.n for child in self.children))
        best_value = -INF
        best_index = 0
        for index, child in enumerate(self.children):
            ucb1 = 1.0 - child.w / child.n + C * math.sqrt(math.log(total) / child.n)
            if ucb1 > best_value:
                best_value = ucb1
                best_index = index
        return self.children[best_index]


def mcts_action(state, playout_number: int) -> int:
    """Choose the most visited action after ``playout_number`` MCTS simulations, or -1."""
    actions = state.legal_actions()
    if not actions:
        return -1

    root = MctsNode(state.clone())
    root.expand()
    for _ in range(playout_number):
        root.evaluate()
    return actions[_most_visited_index(root.children)]


class ThunderNode:
    """A node of the Thunder search tree; leaves are scored by the state's score rate."""

    def __init__(self, state) -> None:
        self.state = state
        self.w = 0.0
        self.n = 0
        self.children: list[ThunderNode] = []

    def evaluate(self) -> float:
        """Run one simulation through this node and return its value for the player to move."""
        if self.state.is_done():
            value = _status_value(self.state.winning_status(), 0.0)
            self.w += value
            self.n += 1
            return value

        if not self.children:
            value = self.state.score_rate()
            self.w += value
            self.n += 1
            self.expand()
            return value

        value = 1.0 - self.next_child_node().evaluate()
        self.w += value
        self.n += 1
        return value

    def expand(self) -> None:
        """Create one child per legal action, replacing any existing children."""
        self.children = [
            ThunderNode(_successor(self.state, action)) for action in self.state.legal_actions()
        ]

    def next_child_node(self) -> "ThunderNode":
        """Return the first unvisited child, otherwise the one with the best win rate."""
        for child in self.children:
            if child.n == 0:
                return child

        best_value = -INF
        best_index = -1
        for index, child in enumerate(self.children):
            value = 1.0 - child.w / child.n
            if value > best_value:
                best_value = value
                best_index = index
        return self.children[best_index]


def thunder_action(state, simulation_number: int) -> int:
    """Choose the most visited action after ``simulation_number`` Thunder simulations, or -1."""
    actions = state.legal_actions()
    if not actions:
        return -1

    root = ThunderNode(state.clone())
    root.expand()
    for _ in range(simulation_number):
        root.evaluate()
    return actions[_most_visited_index(root.children)]


def thunder_action_with_time(state, time_ms: int) -> int:
    """Run Thunder simulations for ``time_ms`` milliseconds; return the most visited action, or -1."""
    actions = state.legal_actions()
    if not actions:
        return -1

    root = ThunderNode(state.clone())
    root.expand()
    keeper = TimeKeeper(time_ms)
    while not keeper.is_time_over():
        root.evaluate()
    return actions[_most_visited_index(root.children)]