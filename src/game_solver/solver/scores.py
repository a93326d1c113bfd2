"""
Per-move scoring of a position, sequential or fanned out to a worker pool.

Root moves are independent subtrees, so each one can be solved on its own.
Process workers cannot share a table, so every task builds a private one
from ``table_factory``. Thread workers may share a single table, as long as it
is safe for concurrent use.
"""

import logging
from multiprocessing import Pool, cpu_count
from multiprocessing.pool import ThreadPool
from typing import Callable, Iterator, List, Optional, Tuple

from tqdm import tqdm

from ..core import Game, Move
from ..storage import HashMapTable, TranspositionTable
from .negamax import solve

logger = logging.getLogger(__name__)


def move_scores(game: Game, table: TranspositionTable) -> Iterator[Tuple[Move, int]]:
    """
    Lazily score every legal move of a position.

    The score is from the point of view of the player making the move
    (higher is better for them). Moves come out in ``possible_moves()`` order.

    Args:
        game: Position to analyse (never mutated)
        table: Transposition table shared across all moves

    Yields:
        (move, score) pairs
    """
    for move in game.possible_moves():
        board = game.clone()
        board.make_move(move)
        # Flip the sign: solve() answers for the player whose turn it now is
        yield move, -solve(board, table)


def _score_move(
    task: Tuple[Game, Move, Callable[[], TranspositionTable], Optional[TranspositionTable]],
) -> Tuple[Move, int]:
    """
    Worker: solve the position reached by one root move.

    Returns:
        (move, score) from the mover's point of view
    """
    game, move, table_factory, shared_table = task
    table = shared_table if shared_table is not None else table_factory()

    board = game.clone()
    board.make_move(move)
    return move, -solve(board, table)


def par_move_scores(
    game: Game,
    table_factory: Callable[[], TranspositionTable] = HashMapTable,
    num_workers: Optional[int] = None,
    table: Optional[TranspositionTable] = None,
    use_threads: bool = False,
    progress: bool = False,
) -> List[Tuple[Move, int]]:
    """
    Score every legal move of a position in parallel.

    Same contract as :func:`move_scores`, but results come back in completion
    order. Sort them if a stable presentation is needed.

    Args:
        game: Position to analyse (must be picklable for process workers)
        table_factory: Builds a private table for each task
        num_workers: Pool size (default: CPU count, capped at the move count)
        table: Table shared by every task (thread workers only, must be thread-safe)
        use_threads: Use a thread pool instead of worker processes
        progress: Show a tqdm progress bar while collecting results

    Returns:
        List of (move, score) pairs, one per legal move
    """
    if table is not None:
        if not use_threads:
            raise ValueError("A shared table can only be used with thread workers")
        if not table.thread_safe:
            raise ValueError(
                f"{type(table).__name__} is not thread-safe; wrap it in a LockedTable"
            )

    moves = list(game.possible_moves())
    if not moves:
        return []

    num_workers = min(num_workers or cpu_count(), len(moves))
    pool_type = ThreadPool if use_threads else Pool
    tasks = [(game, move, table_factory, table) for move in moves]

    logger.info(
        f"Scoring {len(moves)} moves with {num_workers} "
        f"{'threads' if use_threads else 'worker processes'}"
    )

    results = []
    with pool_type(processes=num_workers) as pool:
        with tqdm(
            total=len(moves), desc="Moves", unit=" move", disable=not progress
        ) as pbar:
            for move, score in pool.imap_unordered(_score_move, tasks):
                results.append((move, score))
                pbar.update(1)

    return results
