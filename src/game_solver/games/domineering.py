"""
Domineering: players take turns placing dominoes on a grid.

P1 places dominoes vertically, P2 horizontally. The first player unable to
place a domino loses.
"""

from typing import List, Optional, Tuple

from ..core import Game, Player

DomineeringMove = Tuple[int, int]  # top-left cell (x, y) of the domino


class Domineering(Game):
    """Domineering position."""

    def __init__(self, width: int, height: int):
        """
        Create an empty grid.

        Args:
            width: Number of columns
            height: Number of rows (at least 2, so P1 has a first move)
        """
        if width < 1 or height < 2:
            raise ValueError(
                f"Grid must be at least 1 wide and 2 high, got {width}x{height}"
            )

        self.width = width
        self.height = height
        self.cells: List[bool] = [False] * (width * height)
        self.move_count = 0

    def player(self) -> Player:
        return Player.from_move_count(self.move_count)

    def score(self) -> int:
        return self.max_score() - self.move_count + 1

    def max_score(self) -> int:
        return (self.width * self.height) // 2

    def min_score(self) -> int:
        return -self.max_score()

    def _free(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height and not self.cells[y * self.width + x]

    def _domino(self, move: DomineeringMove, player: Player) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        x, y = move
        if player == Player.P1:
            return (x, y), (x, y + 1)
        return (x, y), (x + 1, y)

    def _moves_for(self, player: Player) -> List[DomineeringMove]:
        moves = []
        for y in range(self.height):
            for x in range(self.width):
                first, second = self._domino((x, y), player)
                if self._free(*first) and self._free(*second):
                    moves.append((x, y))
        return moves

    def make_move(self, move: DomineeringMove) -> bool:
        first, second = self._domino(move, self.player())
        if not (self._free(*first) and self._free(*second)):
            return False

        for x, y in (first, second):
            self.cells[y * self.width + x] = True
        self.move_count += 1
        return True

    def possible_moves(self) -> List[DomineeringMove]:
        return self._moves_for(self.player())

    def is_winning_move(self, move: DomineeringMove) -> Optional[Player]:
        board = self.clone()
        if not board.make_move(move):
            return None
        # Opponent is stuck
        if not board.possible_moves():
            return self.player()
        return None

    def is_draw(self) -> bool:
        return False

    def clone(self) -> "Domineering":
        board = Domineering.__new__(Domineering)
        board.width = self.width
        board.height = self.height
        board.cells = list(self.cells)
        board.move_count = self.move_count
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Domineering):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.cells == other.cells
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, tuple(self.cells)))
