"""
Chomp: players eat squares off a rectangular chocolate bar.

Eating square (x, y) also eats every square to its right and below. The
top-left square (0, 0) is poisoned, so the player who leaves only the poison
for the opponent wins.
"""

from typing import List, Optional, Tuple

from ..core import Game, Player

ChompMove = Tuple[int, int]  # (x, y)


class Chomp(Game):
    """Chomp position."""

    def __init__(self, width: int, height: int):
        """
        Create a full chocolate bar.

        Args:
            width: Number of columns
            height: Number of rows
        """
        if width < 1 or height < 1 or width * height < 2:
            raise ValueError(
                f"Board must hold more than the poisoned square, got {width}x{height}"
            )

        self.width = width
        self.height = height
        # Remaining squares in each row. Always non-increasing from top to bottom.
        self.rows: List[int] = [width] * height
        self.move_count = 0

    def player(self) -> Player:
        return Player.from_move_count(self.move_count)

    def score(self) -> int:
        return self.max_score() - self.move_count + 1

    def max_score(self) -> int:
        # Each move eats at least one non-poisoned square
        return self.width * self.height - 1

    def min_score(self) -> int:
        return -self.max_score()

    def has_square(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.rows[y]

    def make_move(self, move: ChompMove) -> bool:
        x, y = move
        if (x, y) == (0, 0) or not self.has_square(x, y):
            return False

        for row in range(y, self.height):
            self.rows[row] = min(self.rows[row], x)
        self.move_count += 1
        return True

    def possible_moves(self) -> List[ChompMove]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.rows[y])
            if (x, y) != (0, 0)
        ]

    def is_winning_move(self, move: ChompMove) -> Optional[Player]:
        board = self.clone()
        if not board.make_move(move):
            return None
        # Only the poison left
        if board.rows[0] == 1 and (board.height == 1 or board.rows[1] == 0):
            return self.player()
        return None

    def is_draw(self) -> bool:
        return False

    def clone(self) -> "Chomp":
        board = Chomp.__new__(Chomp)
        board.width = self.width
        board.height = self.height
        board.rows = list(self.rows)
        board.move_count = self.move_count
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chomp):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.rows == other.rows
            and self.move_count == other.move_count
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, tuple(self.rows), self.move_count))
