"""Action selection for the simultaneous two-player maze: random play and primitive Monte Carlo."""

from __future__ import annotations

from .util import WinningStatus, next_random, print_game_result

_DIRECTIONS = ("RIGHT", "LEFT", "DOWN", "UP")


def sim_random_action(state, player_id: int) -> int:
    """Pick a legal action of ``player_id`` uniformly at random, or 0 when none exists."""
    actions = state.legal_actions(player_id)
    if not actions:
        return 0
    return actions[next_random() % len(actions)]


def play_sim_maze_game(state_type, action0_func, action1_func, seed):
    """Play one game with a function per player, printing it; return the final state."""
    state = state_type(seed)
    while not state.is_done():
        print(str(state))
        action0 = action0_func(state, 0)
        action1 = action1_func(state, 1)
        print(
            f"actions: Player 0: {_DIRECTIONS[action0]} Player 1: {_DIRECTIONS[action1]}"
        )
        state.advance(action0, action1)
    print(str(state))
    print_game_result(state.winning_status())
    return state


def sim_playout(state) -> float:
    """Play ``state`` out with random moves; return player 0's result (1, 0 or 0.5).

    The state is advanced in place.
    """
    while not state.is_done():
        action0 = sim_random_action(state, 0)
        action1 = sim_random_action(state, 1)
        state.advance(action0, action1)
    status = state.winning_status()
    if status is WinningStatus.WIN:
        return 1.0
    if status is WinningStatus.LOSE:
        return 0.0
    return 0.5


def pmc_action(state, player_id: int, playout_number: int) -> int:
    """Primitive Monte Carlo: score each own action by ``playout_number`` random playouts."""
    my_actions = state.legal_actions(player_id)
    opponent_actions = state.legal_actions((player_id + 1) % 2)
    if not my_actions:
        raise ValueError(f"player {player_id} has no legal action")

    values = []
    for my_action in my_actions:
        total = 0.0
        for _ in range(playout_number):
            opponent_action = opponent_actions[next_random() % len(opponent_actions)]
            next_state = state.clone()
            if player_id == 0:
                next_state.advance(my_action, opponent_action)
            else:
                next_state.advance(opponent_action, my_action)
            player0_rate = sim_playout(next_state)
            total += player0_rate if player_id == 0 else 1.0 - player0_rate
        values.append(total)

    best_index = max(range(len(values)), key=values.__getitem__)
    return my_actions[best_index]