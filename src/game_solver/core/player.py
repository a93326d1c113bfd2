"""Player identities for two-player combinatorial games."""

from enum import Enum


class Player(Enum):
    """The two sides of a zero-sum game. P1 moves first."""

    P1 = 1
    P2 = 2

    def opposite(self) -> "Player":
        """Get the player opposite to this one."""
        return Player.P2 if self is Player.P1 else Player.P1

    @classmethod
    def from_move_count(cls, move_count: int) -> "Player":
        """Player to move after ``move_count`` moves have been made."""
        return cls.P1 if move_count % 2 == 0 else cls.P2
