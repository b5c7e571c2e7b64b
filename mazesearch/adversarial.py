"""Action selection for the alternating two-player maze: random, minimax, alpha-beta, deepening."""

from __future__ import annotations

from .constants import END_TURN, INF
from .util import TimeKeeper, next_random, print_game_result


def _evaluate(state) -> int:
    return state.clone().evaluate_score()


def _successor(state, action):
    successor = state.clone()
    successor.progress(action)
    return successor


def two_maze_random_action(state) -> int:
    """Pick a legal action uniformly at random, or 0 when none exists."""
    actions = state.legal_actions()
    if not actions:
        return 0
    return actions[next_random() % len(actions)]


def play_two_maze_game(state_type, action_func, seed):
    """Play one game with ``action_func`` for both sides, printing it; return the final state."""
    state = state_type(seed)
    while not state.is_done():
        print(str(state))
        state.progress(action_func(state))
    print(str(state))
    print_game_result(state.winning_status())
    return state


def minimax_score(state, depth: int) -> int:
    """Negamax value of ``state`` for the player to move, searched ``depth`` plies."""
    if state.is_done() or depth == 0:
        return _evaluate(state)
    actions = state.legal_actions()
    if not actions:
        return _evaluate(state)
    return max(
        (-minimax_score(_successor(state, action), depth - 1) for action in actions),
        default=-INF,
    )


def minimax_action(state, depth: int) -> int:
    """Return the action with the best minimax value, or -1 when none exists."""
    best_action = -1
    best_score = -INF
    for action in state.legal_actions():
        score = -minimax_score(_successor(state, action), depth - 1)
        if score > best_score:
            best_action = action
            best_score = score
    return best_action


def alpha_beta_score(state, alpha: int, beta: int, depth: int) -> int:
    """Negamax value with alpha-beta pruning within the window (alpha, beta)."""
    if state.is_done() or depth == 0:
        return _evaluate(state)
    actions = state.legal_actions()
    if not actions:
        return _evaluate(state)
    for action in actions:
        score = -alpha_beta_score(_successor(state, action), -beta, -alpha, depth - 1)
        if score > alpha:
            alpha = score
        if alpha >= beta:
            return alpha
    return alpha


def alpha_beta_action(state, depth: int) -> int:
    """Return the action preferred by the alpha-beta search, or -1 when none exists.

    Successor scores are compared as returned, without changing perspective.
    """
    best_action = -1
    alpha = -INF
    beta = INF
    for action in state.legal_actions():
        score = alpha_beta_score(_successor(state, action), alpha, beta, depth - 1)
        if score > alpha:
            best_action = action
            alpha = score
    return best_action


def alpha_beta_score_timed(state, alpha: int, beta: int, depth: int, time_keeper: TimeKeeper) -> int:
    """Alpha-beta value that gives up with 0 once ``time_keeper`` runs out."""
    if time_keeper.is_time_over():
        return 0
    if state.is_done() or depth == 0:
        return _evaluate(state)
    actions = state.legal_actions()
    if not actions:
        return _evaluate(state)
    for action in actions:
        score = -alpha_beta_score_timed(
            _successor(state, action), -beta, -alpha, depth - 1, time_keeper
        )
        if score > alpha:
            alpha = score
        if alpha >= beta:
            return alpha
    return alpha


def alpha_beta_action_with_time_threshold(state, depth: int, time_keeper: TimeKeeper) -> int:
    """Best action of a time-limited alpha-beta search to ``depth``.

    Falls back to the first legal action, or -1 when there is none.
    """
    best_action = -1
    alpha = -INF
    beta = INF
    actions = state.legal_actions()
    for action in actions:
        score = -alpha_beta_score_timed(
            _successor(state, action), -beta, -alpha, depth - 1, time_keeper
        )
        if score > alpha:
            best_action = action
            alpha = score
    if best_action != -1:
        return best_action
    return actions[0] if actions else -1


def iterative_deepening_action(state, time_threshold: int) -> int:
    """Deepen alpha-beta search until ``time_threshold`` milliseconds pass."""
    time_keeper = TimeKeeper(time_threshold)
    actions = state.legal_actions()
    if not actions:
        return -1

    best_action = actions[0]
    for depth in range(1, END_TURN * 2 + 1):
        action = alpha_beta_action_with_time_threshold(state, depth, time_keeper)
        if time_keeper.is_time_over():
            break
        best_action = action
    return best_action