"""Shared helpers: timing, the action random source, rendering and game running."""

from __future__ import annotations

import random
import time
from enum import Enum

from .constants import H, W
from .state import Coord

_MASK32 = 0xFFFFFFFF
_MT_SIZE = 624


def _mt19937(seed: int) -> random.Random:
    """Return a Mersenne Twister seeded the way the standard 32-bit engine seeds."""
    words = [seed & _MASK32]
    for i in range(1, _MT_SIZE):
        prev = words[-1]
        words.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    rng = random.Random()
    rng.setstate((3, tuple(words) + (_MT_SIZE,), None))
    return rng


_action_rng = _mt19937(0)


def seed_random(seed: int) -> None:
    """Reseed the random source used by the action-choosing algorithms."""
    global _action_rng
    _action_rng = _mt19937(seed)


def next_random() -> int:
    """Return the next unsigned 32-bit value from the action random source."""
    return _action_rng.getrandbits(32)


class TimeKeeper:
    """Tracks whether a millisecond budget has been used up."""

    def __init__(self, time_threshold: int) -> None:
        self._start = time.perf_counter()
        self._threshold = time_threshold

    def is_time_over(self) -> bool:
        elapsed_ms = int((time.perf_counter() - self._start) * 1000)
        return elapsed_ms >= self._threshold


class WinningStatus(Enum):
    """Outcome of a two-player game from the first player's point of view."""

    WIN = 0
    LOSE = 1
    DRAW = 2
    NONE = 3


def _cell_text(value: int, empty_char: str) -> str:
    return str(value) if value > 0 else empty_char


def render_single_char_maze(points, character: Coord, empty_char: str = ".") -> str:
    """Render a board of points with a single character shown as '@'."""
    lines = []
    for y, row in enumerate(points):
        cells = (
            "@" if (character.y, character.x) == (y, x) else _cell_text(value, empty_char)
            for x, value in enumerate(row)
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def render_multi_char_maze(points, characters, empty_char: str = ".") -> str:
    """Render a board of points with every character shown as '@'."""
    occupied = {(c.y, c.x) for c in characters}
    lines = []
    for y, row in enumerate(points):
        cells = (
            "@" if (y, x) in occupied else _cell_text(value, empty_char)
            for x, value in enumerate(row)
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def is_valid_coord(coord: Coord, height: int = H, width: int = W) -> bool:
    """Return True if ``coord`` lies on a ``height`` x ``width`` board."""
    return 0 <= coord.y < height and 0 <= coord.x < width


def generate_random_points(height, width, rng, min_point=0, max_point=9):
    """Return a ``height`` x ``width`` grid of points drawn from ``rng``."""
    span = max_point - min_point + 1
    return [
        [min_point + rng.getrandbits(32) % span for _ in range(width)]
        for _ in range(height)
    ]


def play_game_with_strategy(state_type, seed, strategy):
    """Play one game, printing every position, and return the final state."""
    state = state_type(seed)
    print(str(state))
    while not state.is_done():
        state.progress(strategy(state))
        print(str(state))
    return state


_RESULT_MESSAGES = {
    WinningStatus.WIN: "플레이어 A가 승리했습니다!",
    WinningStatus.LOSE: "플레이어 B가 승리했습니다!",
    WinningStatus.DRAW: "무승부입니다!",
}
_UNFINISHED_MESSAGE = "게임이 정상적으로 종료되지 않았습니다."


def game_result_message(status: WinningStatus) -> str:
    """Return the message announcing the result ``status``."""
    return _RESULT_MESSAGES.get(status, _UNFINISHED_MESSAGE)


def print_game_result(status: WinningStatus) -> None:
    """Print the message announcing the result ``status``."""
    print(game_result_message(status))