"""
Negamax search with alpha-beta pruning and a null-window exact solver.

Values are always from the point of view of the player to move. The
transposition table only ever tightens ``beta``: every value stored by a
null-window search is an upper bound on the true value of that state.

Search depth equals the number of moves left in the game and uses the Python
call stack, so games longer than the interpreter recursion limit cannot be
solved.
"""

import logging

from ..core import Game
from ..storage import TranspositionTable

logger = logging.getLogger(__name__)


def negamax(game: Game, table: TranspositionTable, alpha: int, beta: int) -> int:
    """
    Fail-soft negamax search of ``game`` within the window ``[alpha, beta]``.

    Args:
        game: Position to search (never mutated)
        table: Transposition table shared by the whole search
        alpha: Lower bound of the window
        beta: Upper bound of the window (alpha < beta)

    Returns:
        Value of the position, or the bound that cut the search off
    """
    if game.is_draw():
        return 0

    player = game.player()
    outcomes = [(move, game.is_winning_move(move)) for move in game.possible_moves()]

    # Last ply: no need to recurse
    for move, winner in outcomes:
        if winner == player:
            board = game.clone()
            board.make_move(move)
            return board.score()

    bound = table.get(game)
    if bound is None:
        bound = game.max_score()
    if bound < beta:
        beta = bound
        if alpha >= beta:
            return beta

    for move, winner in outcomes:
        board = game.clone()
        board.make_move(move)

        if winner is not None:
            # Game ends with the opponent winning
            score = -board.score()
        else:
            score = -negamax(board, table, -beta, -alpha)

        if score >= beta:
            return beta

        if score > alpha:
            alpha = score

    table.insert(game, alpha)

    return alpha


def solve(game: Game, table: TranspositionTable) -> int:
    """
    Solve a game, returning its exact value.

    Binary-searches the value range with null-window negamax searches.
    A positive value means the player to move has a winning strategy, a
    negative value means they lose against perfect play, and zero is a draw.

    Args:
        game: Position to solve
        table: Transposition table (may be reused across calls)

    Returns:
        Exact game-theoretic value for the player to move
    """
    alpha = game.min_score()
    beta = game.max_score() + 1
    searches = 0

    while alpha < beta:
        med = alpha + (beta - alpha) // 2
        r = negamax(game, table, med, med + 1)
        searches += 1
        logger.debug(f"Search {searches}: window [{med}, {med + 1}] -> {r}")

        if r <= med:
            beta = r
        else:
            alpha = r

    logger.debug(
        f"Solved in {searches} searches: value {alpha} ({len(table):,} table entries)"
    )
    return alpha
