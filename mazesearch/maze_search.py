"""Action selection for the single-player maze: random, greedy, beam and Chokudai search."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

from .constants import INF, SEARCH_DEPTH, SEARCH_NUMBER, SEARCH_WIDTH, TIME_THRESHOLD
from .util import TimeKeeper, next_random


@dataclass
class BeamConfig:
    """Parameters of beam search; a time threshold of 0 disables the time limit."""

    search_width: int = SEARCH_WIDTH
    search_depth: int = SEARCH_DEPTH
    time_threshold: int = TIME_THRESHOLD  # milliseconds


@dataclass
class ChokudaiConfig:
    """Parameters of Chokudai search; a time threshold of 0 disables the time limit."""

    search_width: int = SEARCH_WIDTH
    search_depth: int = SEARCH_DEPTH
    search_number: int = SEARCH_NUMBER
    time_threshold: int = TIME_THRESHOLD  # milliseconds


class _Entry:
    __slots__ = ("state",)

    def __init__(self, state) -> None:
        self.state = state

    def __lt__(self, other: "_Entry") -> bool:
        # Inverted so that heapq yields the greatest state first.
        return other.state < self.state


class _MaxHeap:
    """Priority queue returning the greatest state according to its ``<``."""

    def __init__(self) -> None:
        self._items: list[_Entry] = []

    def push(self, state) -> None:
        heapq.heappush(self._items, _Entry(state))

    def top(self):
        return self._items[0].state

    def pop(self):
        return heapq.heappop(self._items).state

    def __bool__(self) -> bool:
        return bool(self._items)


def _time_over(keeper: TimeKeeper | None) -> bool:
    return keeper is not None and keeper.is_time_over()


def _expand_into(state, beam: _MaxHeap, record_first: bool) -> None:
    for action in state.legal_actions():
        successor = state.clone()
        successor.progress(action)
        successor.evaluate_score()
        if record_first:
            successor.first_action = action
        beam.push(successor)


def maze_random_action(state) -> int:
    """Pick a legal action uniformly at random, or 0 when none exists."""
    actions = state.legal_actions()
    if not actions:
        return 0
    return actions[next_random() % len(actions)]


def greedy_action(state) -> int:
    """Pick the action whose successor scores highest, or -1 when none exists."""
    best_score = -INF
    best_action = -1
    for action in state.legal_actions():
        successor = state.clone()
        successor.progress(action)
        score = successor.evaluate_score()
        if score > best_score:
            best_score = score
            best_action = action
    return best_action


def beam_search_action(state, config: BeamConfig | None = None) -> int:
    """Choose the first action of the best line found by beam search."""
    config = config or BeamConfig()
    keeper = TimeKeeper(config.time_threshold) if config.time_threshold > 0 else None

    now_beam = _MaxHeap()
    now_beam.push(state)
    best_state = None

    for depth in range(config.search_depth):
        next_beam = _MaxHeap()
        for _ in range(config.search_width):
            if _time_over(keeper) or not now_beam:
                break
            _expand_into(now_beam.pop(), next_beam, depth == 0)

        if _time_over(keeper):
            break

        now_beam = next_beam
        if now_beam:
            best_state = now_beam.top()

        if best_state is not None and best_state.is_done():
            break

    return best_state.first_action if best_state is not None else -1


def chokudai_search_action(state, config: ChokudaiConfig | None = None) -> int:
    """Choose an action by Chokudai search: repeated narrow beams over all depths."""
    config = config or ChokudaiConfig()
    beams = [_MaxHeap() for _ in range(config.search_depth + 1)]
    beams[0].push(state)
    keeper = TimeKeeper(config.time_threshold) if config.time_threshold > 0 else None

    for _ in range(config.search_number):
        for depth in range(config.search_depth):
            now_beam, next_beam = beams[depth], beams[depth + 1]
            for _ in range(config.search_width):
                if _time_over(keeper) or not now_beam:
                    break
                if now_beam.top().is_done():
                    break
                _expand_into(now_beam.pop(), next_beam, depth == 0)
            if _time_over(keeper):
                break
        if _time_over(keeper):
            break

    for beam in reversed(beams):
        if beam:
            return beam.top().first_action
    return -1