# mazesearch

Search and planning algorithms for small grid maze games: a 5 × 5 board of
point cells (`mazesearch.constants.H`, `W`) that characters walk over to
collect points. The algorithms cover four kinds of game:

* **Single player, step by step** – random, greedy, beam search and Chokudai
  search (`mazesearch.maze_search`).
* **Single player, placement** – characters are placed once: random
  placement, hill climbing and simulated annealing (`mazesearch.placement`).
* **Two players, alternating turns** – random, minimax, alpha-beta and
  iterative deepening (`mazesearch.adversarial`); Monte Carlo, MCTS and
  Thunder search (`mazesearch.montecarlo`).
* **Two players, simultaneous moves** – random and primitive Monte Carlo
  (`mazesearch.simultaneous`), DUCT (`mazesearch.duct`) and MCTS over an
  alternating view of the game (`mazesearch.mcts_sim`).

The package has no dependencies outside the standard library.

## What the package does not include

The package holds the algorithms only. It has no maze game states of its
own, no command-line programs and no benchmark runners: you supply the game
state objects, and the algorithms work on any objects with the methods listed
below.

## Game states you supply

`mazesearch.state.GameState` is an abstract base class with `is_done()`,
`progress(action)`, `legal_actions()`, `evaluate_score()`, `clone()`,
`__lt__` and `__str__`. Actions are integers indexing the four directions in
`mazesearch.constants.DX` / `DY` (right, left, down, up).
`mazesearch.state.next_states(state)` returns a list of the states reached by
each legal action. `mazesearch.state.Coord` is a frozen, ordered `(y, x)`
position.

Beyond that interface, each family of algorithms uses a few more members:

* **Step-by-step maze** (`maze_search`): states are compared with `<` (the
  greatest is searched first) and beam and Chokudai search set and read a
  `first_action` attribute.
* **Placement** (`placement`): `clone()`, `set_character(character_id, y, x)`
  and `get_score()`; `play_auto_maze_game` calls `get_score(True)`.
* **Alternating two-player** (`adversarial`, `montecarlo`): `winning_status()`
  returning a `mazesearch.util.WinningStatus`; Thunder search also uses
  `score_rate()`.
* **Simultaneous two-player** (`simultaneous`, `duct`): `legal_actions(player_id)`,
  `advance(action0, action1)`, `is_done()`, `winning_status()` and `clone()`.
  `mcts_sim.AlternateMazeState` additionally reads `point(y, x)`, `turn`,
  `player_y(i)`, `player_x(i)` and `player_score(i)`.

## Random source and timing

Every randomised choice draws from one shared Mersenne Twister in
`mazesearch.util`, seeded with 0 at import. Reseed it for repeatable runs:

```python
from mazesearch.util import next_random, seed_random

seed_random(0)
next_random()  # next unsigned 32-bit value
```

Time-limited searches use `mazesearch.util.TimeKeeper(time_threshold)`, whose
`is_time_over()` is true once that many milliseconds have passed since it was
created.

## Choosing an algorithm by name

```python
from mazesearch.factory import AlgorithmParams, algorithm_names, create_algorithm

print(algorithm_names())
# AutoMazeRandom, HillClimb, SimulatedAnnealing, MazeRandom, Greedy,
# BeamSearch, Chokudai, TwoMazeRandom, Minimax, AlphaBeta, IterativeDeepening,
# MonteCarlo, MCTS, Thunder, ThunderTime, SimMazeRandom, SimMazeDUCT,
# SimMazePMC, SimMazeMCTS

params = AlgorithmParams(search_depth=4)
minimax = create_algorithm("Minimax", params)

action = minimax.select_action(state)
next_state = minimax.run_and_evaluate(state, action)  # a new state; `state` is unchanged
```

`AlgorithmParams` holds `search_width`, `search_depth`, `search_number`,
`time_threshold` (milliseconds), `playout_number`, `start_temperature`,
`end_temperature` and `player_id` (simultaneous games); each algorithm uses
the fields it needs. `create_algorithm` keeps its own copy of the parameters,
and an unknown name raises `ValueError`.

The placement algorithms (`AutoMazeRandom`, `HillClimb`,
`SimulatedAnnealing`) always return `factory.PLACEMENT_ACTION` (0) from
`select_action`; their `run_and_evaluate` returns the placed state. For the
simultaneous algorithms, `run_and_evaluate` splits the action with the state
class's `decode_actions(encoded_action)` and calls `advance` on a copy.

## Calling algorithms directly

```python
from mazesearch.maze_search import BeamConfig, beam_search_action, greedy_action
from mazesearch.placement import hill_climb_placement
from mazesearch.adversarial import alpha_beta_action, iterative_deepening_action
from mazesearch.montecarlo import mcts_action
from mazesearch.duct import duct_action

greedy_action(maze_state)
beam_search_action(maze_state, BeamConfig(search_width=2, search_depth=4, time_threshold=0))

placed = hill_climb_placement(auto_maze_state, 1000)

alpha_beta_action(two_player_state, 4)
iterative_deepening_action(two_player_state, 100)   # time budget in milliseconds
mcts_action(two_player_state, 1000)

duct_action(simultaneous_state, 0, 1000)             # choose for player 0
```

In `BeamConfig` and `ChokudaiConfig` a `time_threshold` of 0 turns the time
limit off; the default is 1 millisecond.

Some behaviours worth knowing:

* `montecarlo.playout(state)` reads the result of the state as it stands
  (1 win, 0 loss, 0.5 otherwise) without playing further moves, so
  `monte_carlo_action` and the MCTS leaves are scored that way.
  `simultaneous.sim_playout` and `mcts_sim.playout` do play random moves to
  the end, advancing the state in place.
* `maze_random_action` and `two_maze_random_action` return 0 when there is no
  legal action; `greedy_action`, `minimax_action`, `alpha_beta_action`,
  `iterative_deepening_action`, `monte_carlo_action`, `mcts_action` and the
  Thunder functions return -1. `pmc_action`, `duct_action` and
  `mcts_sim_action` raise `ValueError`.

## Playing whole games

`util.play_game_with_strategy(state_type, seed, strategy)`,
`adversarial.play_two_maze_game(state_type, action_func, seed)` and
`simultaneous.play_sim_maze_game(state_type, action0_func, action1_func, seed)`
build a state with `state_type(seed)`, print each position as the game is
played and return the final state; the two-player ones also print the result.
`placement.play_auto_maze_game(state_type, ai_func, seed)` returns the score
of the placed state.

`util.WinningStatus` holds `WIN`, `LOSE`, `DRAW` and `NONE`, seen from the
first player. `game_result_message(status)` gives the (Korean) text that
`print_game_result(status)` prints.