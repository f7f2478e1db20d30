"""Core data structures for weighted tic-tac-toe.

Rule reminders:
- Board is n x n with coordinates (x, y); x is the column, y the row, from top-left.
- A cell holds 0 or the oriented strength of a piece (negative for Black, positive for White).
- A piece may land on an empty cell or capture a strictly weaker opposing piece.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import InvalidValueError


Coord = Tuple[int, int]


class Side(Enum):
    """Players in the game. Values are the sign used on the board."""

    BLACK = -1
    WHITE = 1

    def opponent(self) -> "Side":
        """Return the opposing side."""

        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @classmethod
    def of_value(cls, oriented_strength: int) -> "Side":
        """Return the owner of an oriented strength."""

        if oriented_strength == 0:
            raise InvalidValueError("an empty cell has no owner")
        return cls.BLACK if oriented_strength < 0 else cls.WHITE


class Outcome(Enum):
    """Terminal result of a board. ``None`` stands for an ongoing game."""

    BLACK = -1
    DRAW = 0
    WHITE = 1

    @property
    def side(self) -> Optional[Side]:
        if self is Outcome.DRAW:
            return None
        return Side(self.value)

    @classmethod
    def for_side(cls, side: Side) -> "Outcome":
        return cls(side.value)


@dataclass(eq=False)
class Piece:
    """A physical piece.

    ``owner`` and ``strength`` are fixed at construction. ``used`` and ``killed``
    only ever go from False to True; a new game builds new pieces.
    """

    owner: Side
    strength: int
    used: bool = False
    killed: bool = False
    position: Optional[Coord] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.owner, Side):
            raise InvalidValueError(f"owner must be a Side, got {self.owner!r}")
        if self.strength is None or isinstance(self.strength, bool) or not isinstance(self.strength, int):
            raise InvalidValueError(f"strength must be an integer, got {self.strength!r}")
        if self.strength <= 0:
            raise InvalidValueError(f"strength must be > 0, got {self.strength}")

    @property
    def oriented_strength(self) -> int:
        return self.owner.value * self.strength

    def use(self) -> None:
        self.used = True

    def kill(self) -> None:
        self.killed = True

    def stronger_than(self, other: Optional["Piece"]) -> bool:
        """Whether this piece may capture ``other``."""

        if other is None:
            return False
        return other.owner is not self.owner and self.strength > other.strength


@dataclass(frozen=True)
class Move:
    """A candidate placement.

    ``strength`` is oriented. ``variant_id`` is the index of the placed value in
    the side's remaining-values snapshot, so that duplicates of equal strength
    are each spent at most once along a line of play.
    """

    x: int
    y: int
    strength: int
    variant_id: int = -1

    @property
    def side(self) -> Side:
        return Side.of_value(self.strength)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class RemainingValues:
    """Oriented strengths of each side's unused pieces, in pool order."""

    black: Tuple[int, ...]
    white: Tuple[int, ...]

    def for_side(self, side: Side) -> Tuple[int, ...]:
        return self.black if side is Side.BLACK else self.white
