"""
Nim: players take turns removing objects from heaps.

Normal play: whoever takes the last object wins. A position is lost for the
player to move exactly when the XOR of the heap sizes is zero.
"""

from typing import List, Optional, Sequence, Tuple

from ..core import Game, Player

NimMove = Tuple[int, int]  # (heap index, number of objects removed)


class Nim(Game):
    """Nim position."""

    def __init__(self, heaps: Sequence[int]):
        """
        Create a new game of Nim.

        Args:
            heaps: Number of objects in each heap
        """
        if any(h < 0 for h in heaps):
            raise ValueError(f"Heap sizes must be non-negative, got {list(heaps)}")
        if sum(heaps) == 0:
            raise ValueError("Nim needs at least one object to take")

        self.heaps: List[int] = list(heaps)
        self.move_count = 0
        # Every move removes at least one object
        self._max_score = sum(self.heaps)

    def player(self) -> Player:
        return Player.from_move_count(self.move_count)

    def score(self) -> int:
        return self._max_score - self.move_count + 1

    def max_score(self) -> int:
        return self._max_score

    def min_score(self) -> int:
        return -self._max_score

    def make_move(self, move: NimMove) -> bool:
        heap, amount = move
        if not 0 <= heap < len(self.heaps):
            return False
        if not 1 <= amount <= self.heaps[heap]:
            return False

        self.heaps[heap] -= amount
        self.move_count += 1
        return True

    def possible_moves(self) -> List[NimMove]:
        return [
            (i, amount)
            for i, heap in enumerate(self.heaps)
            for amount in range(1, heap + 1)
        ]

    def is_winning_move(self, move: NimMove) -> Optional[Player]:
        board = self.clone()
        if not board.make_move(move):
            return None
        # Next player can't move: this player took the last object
        if not any(board.heaps):
            return self.player()
        return None

    def is_draw(self) -> bool:
        return False

    def clone(self) -> "Nim":
        board = Nim.__new__(Nim)
        board.heaps = list(self.heaps)
        board.move_count = self.move_count
        board._max_score = self._max_score
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Nim):
            return NotImplemented
        return (
            self.heaps == other.heaps
            and self.move_count == other.move_count
            and self._max_score == other._max_score
        )

    def __hash__(self) -> int:
        return hash((tuple(self.heaps), self.move_count, self._max_score))

    def __repr__(self) -> str:
        return f"Nim(heaps={self.heaps}, move_count={self.move_count})"
