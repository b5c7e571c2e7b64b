"""Named search algorithms behind one interface, built by name from shared parameters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, NamedTuple, Optional

from .adversarial import alpha_beta_action, iterative_deepening_action, minimax_action
from .constants import (
    END_TEMPERATURE,
    PLAYOUT_NUMBER,
    SEARCH_DEPTH,
    SEARCH_NUMBER,
    SEARCH_WIDTH,
    START_TEMPERATURE,
    TIME_THRESHOLD,
)
from .duct import duct_action
from .maze_search import (
    BeamConfig,
    ChokudaiConfig,
    beam_search_action,
    chokudai_search_action,
    greedy_action,
    maze_random_action,
)
from .mcts_sim import mcts_sim_action
from .montecarlo import mcts_action, monte_carlo_action, thunder_action, thunder_action_with_time
from .placement import hill_climb_placement, random_placement, simulated_annealing_placement
from .simultaneous import pmc_action, sim_random_action
from .util import next_random

# Placement games have no per-turn actions; their algorithms report this one.
PLACEMENT_ACTION = 0


@dataclass
class AlgorithmParams:
    """Parameters shared by every algorithm; each uses only the ones it needs."""

    search_width: int = SEARCH_WIDTH
    search_depth: int = SEARCH_DEPTH
    search_number: int = SEARCH_NUMBER
    time_threshold: int = TIME_THRESHOLD  # milliseconds
    playout_number: int = PLAYOUT_NUMBER
    start_temperature: int = int(START_TEMPERATURE)
    end_temperature: int = int(END_TEMPERATURE)
    player_id: int = 0  # simultaneous games only


Selector = Callable[[Any, AlgorithmParams], int]
Transition = Callable[[Any, int, AlgorithmParams], Any]


class Algorithm:
    """A named algorithm that chooses actions and applies them to copies of a state."""

    def __init__(self, name: str, selector: Optional[Selector], transition: Transition,
                 params: AlgorithmParams | None = None) -> None:
        self.name = name
        self.params = params if params is not None else AlgorithmParams()
        self._selector = selector
        self._transition = transition

    def select_action(self, state) -> int:
        """Choose an action for ``state``; placement algorithms always give ``PLACEMENT_ACTION``."""
        if self._selector is None:
            return PLACEMENT_ACTION
        return self._selector(state, self.params)

    def run_and_evaluate(self, state, action: int):
        """Return a new state reached from ``state`` by ``action``; ``state`` is left alone."""
        return self._transition(state, action, self.params)

    def __repr__(self) -> str:
        return f"Algorithm({self.name!r}, {self.params!r})"


# ----- transitions -----

def _progressed(state, action, _params):
    successor = state.clone()
    successor.progress(action)
    return successor


def _advanced(state, encoded_action, _params):
    action0, action1 = type(state).decode_actions(encoded_action)
    successor = state.clone()
    successor.advance(action0, action1)
    return successor


def _placed_randomly(state, _action, _params):
    return random_placement(state)


def _placed_by_hill_climb(state, _action, params):
    return hill_climb_placement(state, params.search_number)


def _placed_by_annealing(state, _action, params):
    return simulated_annealing_placement(
        state, params.search_number, params.start_temperature, params.end_temperature
    )


# ----- selectors -----

def _two_maze_random(state, _params) -> int:
    actions = state.legal_actions()
    if not actions:
        return -1
    return actions[next_random() % len(actions)]


def _beam(state, params) -> int:
    config = BeamConfig(
        search_width=params.search_width,
        search_depth=params.search_depth,
        time_threshold=params.time_threshold,
    )
    return beam_search_action(state, config)


def _chokudai(state, params) -> int:
    config = ChokudaiConfig(
        search_width=params.search_width,
        search_depth=params.search_depth,
        search_number=params.search_number,
        time_threshold=params.time_threshold,
    )
    return chokudai_search_action(state, config)


class _Spec(NamedTuple):
    display_name: str
    selector: Optional[Selector]
    transition: Transition


_REGISTRY: dict[str, _Spec] = {
    # Single player, without context.
    "AutoMazeRandom": _Spec("Random (AutoMaze)", None, _placed_randomly),
    "HillClimb": _Spec("HillClimb", None, _placed_by_hill_climb),
    "SimulatedAnnealing": _Spec("SimulatedAnnealing", None, _placed_by_annealing),
    # Single player, with context.
    "MazeRandom": _Spec("Random (Maze)", lambda s, p: maze_random_action(s), _progressed),
    "Greedy": _Spec("Greedy", lambda s, p: greedy_action(s), _progressed),
    "BeamSearch": _Spec("BeamSearch", _beam, _progressed),
    "Chokudai": _Spec("Chokudai", _chokudai, _progressed),
    # Two players, alternating.
    "TwoMazeRandom": _Spec("Random (TwoMaze)", _two_maze_random, _progressed),
    "Minimax": _Spec("Minimax", lambda s, p: minimax_action(s, p.search_depth), _progressed),
    "AlphaBeta": _Spec(
        "AlphaBeta", lambda s, p: alpha_beta_action(s, p.search_depth), _progressed
    ),
    "IterativeDeepening": _Spec(
        "IterativeDeepening",
        lambda s, p: iterative_deepening_action(s, p.time_threshold),
        _progressed,
    ),
    "MonteCarlo": _Spec(
        "MonteCarlo", lambda s, p: monte_carlo_action(s, p.playout_number), _progressed
    ),
    "MCTS": _Spec("MCTS", lambda s, p: mcts_action(s, p.playout_number), _progressed),
    "Thunder": _Spec("Thunder", lambda s, p: thunder_action(s, p.playout_number), _progressed),
    "ThunderTime": _Spec(
        "ThunderTime", lambda s, p: thunder_action_with_time(s, p.time_threshold), _progressed
    ),
    # Two players, simultaneous.
    "SimMazeRandom": _Spec(
        "Random (SimMaze)", lambda s, p: sim_random_action(s, p.player_id), _advanced
    ),
    "SimMazeDUCT": _Spec(
        "DUCT (SimMaze)",
        lambda s, p: duct_action(s, p.player_id, p.playout_number),
        _advanced,
    ),
    "SimMazePMC": _Spec(
        "Primitive Monte Carlo (SimMaze)",
        lambda s, p: pmc_action(s, p.player_id, p.playout_number),
        _advanced,
    ),
    "SimMazeMCTS": _Spec(
        "MCTS Simulation (SimMaze)",
        lambda s, p: mcts_sim_action(s, p.player_id, p.playout_number),
        _advanced,
    ),
}


def algorithm_names() -> list[str]:
    """Return the names ``create_algorithm`` accepts, in a fixed order."""
    return list(_REGISTRY)


def create_algorithm(name: str, params: AlgorithmParams | None = None) -> Algorithm:
    """Build the algorithm registered under ``name`` with a copy of ``params``."""
    try:
        spec = _REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name}") from None
    own_params = replace(params) if params is not None else AlgorithmParams()
    return Algorithm(spec.display_name, spec.selector, spec.transition, own_params)