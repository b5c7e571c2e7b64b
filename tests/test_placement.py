import pytest

from mazesearch.constants import CHARACTER_N, H, W
from mazesearch.placement import (
    hill_climb_placement,
    play_auto_maze_game,
    random_placement,
    simulated_annealing_placement,
)
from mazesearch.state import Coord
from mazesearch.util import seed_random


class FakeAutoMaze:
    def __init__(self, seed=0):
        self.points = [[(seed + y * W + x) % 10 for x in range(W)] for y in range(H)]
        self.characters = [Coord(0, 0) for _ in range(CHARACTER_N)]
        self.print_calls = []

    def clone(self):
        other = FakeAutoMaze.__new__(FakeAutoMaze)
        other.points = [row[:] for row in self.points]
        other.characters = list(self.characters)
        other.print_calls = []
        return other

    def set_character(self, character_id, y, x):
        self.characters[character_id] = Coord(y, x)

    def get_score(self, is_print=False):
        self.print_calls.append(is_print)
        cells = {(c.y, c.x) for c in self.characters}
        return sum(self.points[y][x] for y, x in cells)


def _positions(state):
    return [(c.y, c.x) for c in state.characters]


def test_random_placement_stays_on_board():
    seed_random(3)
    placed = random_placement(FakeAutoMaze(1))
    assert len(placed.characters) == CHARACTER_N
    assert all(0 <= y < H and 0 <= x < W for y, x in _positions(placed))


def test_random_placement_leaves_original_untouched():
    original = FakeAutoMaze(1)
    seed_random(3)
    random_placement(original)
    assert _positions(original) == [(0, 0)] * CHARACTER_N


def test_random_placement_is_deterministic_after_reseed():
    seed_random(11)
    first = random_placement(FakeAutoMaze(2))
    seed_random(11)
    second = random_placement(FakeAutoMaze(2))
    assert _positions(first) == _positions(second)


def test_hill_climb_with_zero_steps_equals_random_placement():
    seed_random(5)
    expected = random_placement(FakeAutoMaze(4))
    seed_random(5)
    result = hill_climb_placement(FakeAutoMaze(4), 0)
    assert _positions(result) == _positions(expected)


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_hill_climb_never_worse_than_start(seed):
    seed_random(seed)
    start_score = random_placement(FakeAutoMaze(seed)).get_score()
    seed_random(seed)
    result = hill_climb_placement(FakeAutoMaze(seed), 200)
    assert result.get_score() >= start_score


@pytest.mark.parametrize("seed", [0, 2, 9])
def test_simulated_annealing_never_worse_than_start(seed):
    seed_random(seed)
    start_score = random_placement(FakeAutoMaze(seed)).get_score()
    seed_random(seed)
    result = simulated_annealing_placement(FakeAutoMaze(seed), 200, 500.0, 10.0)
    assert result.get_score() >= start_score


def test_simulated_annealing_result_on_board():
    seed_random(8)
    result = simulated_annealing_placement(FakeAutoMaze(3), 50, 500.0, 10.0)
    assert all(0 <= y < H and 0 <= x < W for y, x in _positions(result))


def test_play_auto_maze_game_returns_printed_score():
    seen = []

    def ai(state):
        placed = random_placement(state)
        seen.append(placed)
        return placed

    seed_random(0)
    score = play_auto_maze_game(FakeAutoMaze, ai, 6)
    placed = seen[0]
    assert placed.print_calls == [True]
    assert score == placed.get_score()