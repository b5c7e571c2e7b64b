"""Character placement for the automatic maze: random, hill climbing and simulated annealing."""

from __future__ import annotations

import math

from .constants import CHARACTER_N, H, INF, W
from .util import next_random

# Beyond this exponent math.exp overflows; any larger value is accepted anyway.
_MAX_EXPONENT = 700.0


def _random_coordinates() -> tuple[int, int]:
    y = next_random() % H
    x = next_random() % W
    return y, x


def _place_all_randomly(state):
    placed = state.clone()
    for character_id in range(CHARACTER_N):
        y, x = _random_coordinates()
        placed.set_character(character_id, y, x)
    return placed


def _random_neighbour(state):
    neighbour = state.clone()
    character_id = next_random() % CHARACTER_N
    y, x = _random_coordinates()
    neighbour.set_character(character_id, y, x)
    return neighbour


def random_placement(state):
    """Return a copy of ``state`` with every character put on a random cell."""
    return _place_all_randomly(state)


def hill_climb_placement(state, number):
    """Start from a random placement and keep strictly improving moves for ``number`` steps."""
    now_state = _place_all_randomly(state)
    best_score = now_state.get_score()

    for _ in range(number):
        next_state = _random_neighbour(now_state)
        next_score = next_state.get_score()
        if next_score > best_score:
            best_score = next_score
            now_state = next_state

    return now_state


def simulated_annealing_placement(state, number, start_temp, end_temp):
    """Anneal the placement with a linearly falling temperature; return the best seen."""
    now_state = _place_all_randomly(state)
    best_score = now_state.get_score()
    now_score = best_score
    best_state = now_state

    for i in range(number):
        next_state = _random_neighbour(now_state)
        next_score = next_state.get_score()

        temp = start_temp + (end_temp - start_temp) * (i / number)
        exponent = (next_score - now_score) / temp
        probability = math.exp(min(exponent, _MAX_EXPONENT))
        threshold = (next_random() % INF) / INF
        is_force_next = probability > threshold

        if next_score > now_score or is_force_next:
            now_score = next_score
            now_state = next_state

        if next_score > best_score:
            best_score = next_score
            best_state = next_state

    return best_state


def play_auto_maze_game(state_type, ai_func, seed):
    """Build a game from ``seed``, let ``ai_func`` place the characters and return the score."""
    state = state_type(seed)
    state = ai_func(state)
    return state.get_score(True)