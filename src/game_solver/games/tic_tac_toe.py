"""
Generalized tic-tac-toe on a ``size`` x ``size`` board.

A player wins by completing ``win_length`` marks in a row, column or diagonal.
A full board without a line is a draw.
"""

from typing import List, Optional, Tuple

from ..core import Game, Player

Cell = Optional[Player]
TicTacToeMove = Tuple[int, int]  # (row, col)

# Line directions checked from each placed mark
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


class TicTacToe(Game):
    """Tic-tac-toe position."""

    def __init__(self, size: int = 3, win_length: Optional[int] = None):
        """
        Create an empty board.

        Args:
            size: Board width and height
            win_length: Marks in a row needed to win (default: size)
        """
        if win_length is None:
            win_length = size
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        if not 1 <= win_length <= size:
            raise ValueError(
                f"Win length {win_length} must be between 1 and board size {size}"
            )

        self.size = size
        self.win_length = win_length
        self.board: List[Cell] = [None] * (size * size)
        self.move_count = 0
        self._winner: Optional[Player] = None

    def player(self) -> Player:
        return Player.from_move_count(self.move_count)

    def score(self) -> int:
        return self.max_score() - self.move_count + 1

    def max_score(self) -> int:
        return self.size * self.size

    def min_score(self) -> int:
        return -self.max_score()

    def get(self, row: int, col: int) -> Cell:
        return self.board[row * self.size + col]

    def make_move(self, move: TicTacToeMove) -> bool:
        row, col = move
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        if self.get(row, col) is not None or self._winner is not None:
            return False

        player = self.player()
        self.board[row * self.size + col] = player
        self.move_count += 1
        # Only a line through the new mark can be new
        if self._completes_line(row, col, player):
            self._winner = player
        return True

    def possible_moves(self) -> List[TicTacToeMove]:
        if self._winner is not None:
            return []

        # Centre first: central cells take part in the most lines
        centre = (self.size - 1) / 2
        moves = [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.get(row, col) is None
        ]
        moves.sort(key=lambda m: abs(m[0] - centre) + abs(m[1] - centre))
        return moves

    def _completes_line(self, row: int, col: int, player: Player) -> bool:
        """Check whether ``player`` owns a winning line through (row, col)."""
        for dr, dc in _DIRECTIONS:
            count = 1
            for sign in (1, -1):
                r, c = row + sign * dr, col + sign * dc
                while 0 <= r < self.size and 0 <= c < self.size and self.get(r, c) == player:
                    count += 1
                    r += sign * dr
                    c += sign * dc
            if count >= self.win_length:
                return True
        return False

    def winner(self) -> Optional[Player]:
        """Return the player owning a complete line, if any."""
        return self._winner

    def is_winning_move(self, move: TicTacToeMove) -> Optional[Player]:
        board = self.clone()
        if not board.make_move(move):
            return None
        return board.winner()

    def is_draw(self) -> bool:
        return self.move_count == self.size * self.size and self._winner is None

    def clone(self) -> "TicTacToe":
        board = TicTacToe.__new__(TicTacToe)
        board.size = self.size
        board.win_length = self.win_length
        board.board = list(self.board)
        board.move_count = self.move_count
        board._winner = self._winner
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToe):
            return NotImplemented
        return (
            self.size == other.size
            and self.win_length == other.win_length
            and self.board == other.board
        )

    def __hash__(self) -> int:
        return hash((self.size, self.win_length, tuple(self.board)))
