"""Board coordinates and the abstract game state interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coord:
    """A board position, ordered by row and then by column."""

    y: int = 0
    x: int = 0


class GameState(ABC):
    """Interface every game state implements."""

    @abstractmethod
    def is_done(self) -> bool:
        """Return True once the game has ended."""

    @abstractmethod
    def progress(self, action: int) -> None:
        """Advance the game by applying ``action``."""

    @abstractmethod
    def legal_actions(self) -> list[int]:
        """Return every action allowed in the current position."""

    @abstractmethod
    def evaluate_score(self) -> int:
        """Evaluate the current position and return its score."""

    @abstractmethod
    def clone(self) -> "GameState":
        """Return an independent copy of this state."""

    @abstractmethod
    def __lt__(self, other: "GameState") -> bool:
        """Order states by how promising they are."""

    @abstractmethod
    def __str__(self) -> str:
        """Render the current position as text."""


def next_states(state):
    """Return the states reached by each legal action, in action order."""
    result = []
    for action in state.legal_actions():
        successor = state.clone()
        successor.progress(action)
        result.append(successor)
    return result