"""Rich-based console output for solver results."""

from itertools import groupby
from typing import Iterable, Optional, Tuple

from rich.console import Console
from rich.table import Table

from ..core import Move, Player


class SolverDisplay:
    """Prints solve results and move score tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_header(self, title: str, player: Player, workers: Optional[int] = None):
        """Show solver header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Player to move: {player.name}")
        if workers is not None:
            self.console.print(f"Workers: {workers}")
        self.console.print()

    def show_value(self, value: int):
        """Show the exact value of the root position."""
        if value > 0:
            verdict = "[green]winning[/green]"
        elif value < 0:
            verdict = "[red]losing[/red]"
        else:
            verdict = "[yellow]drawn[/yellow]"
        self.console.print(f"Position value: [bold]{value}[/bold] ({verdict} for the player to move)")

    def show_move_scores(self, scores: Iterable[Tuple[Move, int]]) -> Table:
        """
        Show move scores, best first, grouped by score.

        Args:
            scores: (move, score) pairs in any order

        Returns:
            The rendered table
        """
        ranked = sorted(scores, key=lambda pair: pair[1], reverse=True)

        table = Table(title="Move scores")
        table.add_column("Score", justify="right", style="cyan")
        table.add_column("Best moves @ score", style="white")

        for score, group in groupby(ranked, key=lambda pair: pair[1]):
            color = "green" if score > 0 else "red" if score < 0 else "yellow"
            table.add_row(
                f"[{color}]{score}[/{color}]",
                ", ".join(str(move) for move, _ in group),
            )

        self.console.print(table)
        return table

    def show_game_over(self, draw: bool):
        """Report a finished game (no moves left)."""
        if draw:
            self.console.print("[yellow]Game tied![/yellow]")
        else:
            self.console.print("[bold]Game over: the player to move has no moves.[/bold]")
