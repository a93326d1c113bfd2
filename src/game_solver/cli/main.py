"""
Main CLI for the game solver.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..core import Game
from ..games import Chomp, Domineering, Nim, TicTacToe
from ..solver import move_scores, par_move_scores, solve
from ..storage import HashMapTable, LockedTable
from ..utils import SolverDisplay, log_memory_status


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_game(args) -> Game:
    """Create the starting position for the selected game."""
    if args.game == "nim":
        return Nim(args.heaps)
    if args.game == "tic-tac-toe":
        return TicTacToe(args.size, args.win_length)
    if args.game == "chomp":
        return Chomp(args.width, args.height)
    return Domineering(args.width, args.height)


def solve_command(args, parser: argparse.ArgumentParser) -> int:
    """Solve a game and print its move scores."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        game = build_game(args)
    except ValueError as e:
        parser.error(str(e))

    display = SolverDisplay()
    display.show_header(
        f"Game Solver - {args.game}",
        game.player(),
        args.workers if args.parallel else None,
    )

    # Thread workers share one table, so it has to be locked
    table = LockedTable() if args.parallel and args.threads else HashMapTable()

    value = solve(game, table)
    logger.info(f"Starting position value: {value}")
    display.show_value(value)

    if not list(game.possible_moves()):
        display.show_game_over(game.is_draw())
        return 0

    if args.parallel:
        scores = par_move_scores(
            game,
            num_workers=args.workers,
            table=table if args.threads else None,
            use_threads=args.threads,
            progress=not args.no_progress,
        )
    else:
        scores = list(move_scores(game, table))

    display.show_move_scores(scores)
    if args.parallel and not args.threads:
        # Worker processes keep their own tables; only the root solve counts here
        log_memory_status(len(table), label="root table entries")
    else:
        log_memory_status(len(table))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Two-player game solver")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--parallel", action="store_true", help="Score root moves in a worker pool"
    )
    common.add_argument(
        "--threads",
        action="store_true",
        help="With --parallel, use threads sharing one table instead of processes",
    )
    common.add_argument(
        "--workers", type=int, default=None, help="Number of parallel workers (default: CPU count)"
    )
    common.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )

    subparsers = parser.add_subparsers(dest="game", help="Game to solve")

    nim_parser = subparsers.add_parser("nim", parents=[common], help="Solve Nim")
    nim_parser.add_argument(
        "--heaps", type=int, nargs="+", default=[3, 5, 7], help="Objects in each heap"
    )

    ttt_parser = subparsers.add_parser(
        "tic-tac-toe", parents=[common], help="Solve tic-tac-toe"
    )
    ttt_parser.add_argument("--size", type=int, default=3, help="Board width and height")
    ttt_parser.add_argument(
        "--win-length", type=int, default=None, help="Marks in a row to win (default: size)"
    )

    chomp_parser = subparsers.add_parser("chomp", parents=[common], help="Solve Chomp")
    chomp_parser.add_argument("--width", type=int, default=4)
    chomp_parser.add_argument("--height", type=int, default=3)

    dom_parser = subparsers.add_parser(
        "domineering", parents=[common], help="Solve Domineering"
    )
    dom_parser.add_argument("--width", type=int, default=4)
    dom_parser.add_argument("--height", type=int, default=4)

    args = parser.parse_args(argv)

    if not args.game:
        parser.print_help()
        return 1

    return solve_command(args, parser)


if __name__ == "__main__":
    sys.exit(main())
