"""Game roster: the live board plus both sides' piece pools."""

from __future__ import annotations

from typing import List, Optional, Sequence

from . import engine
from .board import Board
from .errors import InvalidValueError
from .types import Move, Piece, RemainingValues, Side

DEFAULT_DIM = 3
DEFAULT_STRENGTHS = (1, 1, 1, 2, 2, 2, 3, 3, 3)


class Game:
    """Own the board and the per-side pools of pieces.

    Each side gets one piece per entry of ``strengths``. Pool order is stable and
    is what the search treats as variant ids.
    """

    def __init__(self, dim: int = DEFAULT_DIM, strengths: Sequence[int] = DEFAULT_STRENGTHS) -> None:
        if not strengths:
            raise InvalidValueError("strengths must not be empty")
        self.dim = dim
        self.strengths = tuple(strengths)
        self.board: Board
        self.black_pieces: List[Piece]
        self.white_pieces: List[Piece]
        self.reset()

    def reset(self) -> None:
        """Start over with a clean board and fresh pieces."""

        self.board = Board(self.dim)
        self.black_pieces = [Piece(Side.BLACK, strength) for strength in self.strengths]
        self.white_pieces = [Piece(Side.WHITE, strength) for strength in self.strengths]

    @property
    def total_pieces(self) -> int:
        """Pieces per side."""

        return len(self.strengths)

    @property
    def max_strength(self) -> int:
        return max(self.strengths)

    def pieces_for(self, side: Side) -> List[Piece]:
        return self.black_pieces if side is Side.BLACK else self.white_pieces

    def all_pieces(self) -> List[Piece]:
        return self.black_pieces + self.white_pieces

    def find_unused_pieces(self, side: Optional[Side] = None) -> List[Piece]:
        """Pieces not yet placed, Black first then White, each in pool order."""

        sides = (Side.BLACK, Side.WHITE) if side is None else (side,)
        return [piece for s in sides for piece in self.pieces_for(s) if not piece.used]

    def find_piece_at(self, x: int, y: int) -> Optional[Piece]:
        """Return the live piece occupying a cell, if any."""

        for piece in self.all_pieces():
            if piece.used and not piece.killed and piece.position == (x, y):
                return piece
        return None

    def remaining_values(self) -> RemainingValues:
        """Snapshot of unused oriented strengths for the search."""

        return RemainingValues(
            black=tuple(p.oriented_strength for p in self.find_unused_pieces(Side.BLACK)),
            white=tuple(p.oriented_strength for p in self.find_unused_pieces(Side.WHITE)),
        )

    def has_pieces_on_board(self) -> bool:
        return any(piece.used for piece in self.all_pieces())

    def play_move(self, move: Move) -> bool:
        """Place the first unused piece matching ``move.strength``.

        Captured occupants are killed. Returns False, leaving everything untouched,
        when no such piece is left or the target cell is not a legal placement.
        """

        if move.strength == 0:
            return False
        side = Side.of_value(move.strength)
        piece = next(
            (p for p in self.find_unused_pieces(side) if p.oriented_strength == move.strength),
            None,
        )
        if piece is None:
            return False
        existing = self.board.get(move.x, move.y)
        if not engine.is_legal_placement(existing, move.strength):
            return False
        captured = self.find_piece_at(move.x, move.y)
        if captured is not None:
            captured.kill()
        self.put_piece_in_board(move.x, move.y, piece)
        return True

    def put_piece_in_board(self, x: int, y: int, piece: Piece) -> None:
        """Place ``piece`` and mark it used.

        Callers capturing an occupant must kill it themselves.
        """

        self.board.put_piece(x, y, piece)
        piece.position = (x, y)
        piece.use()
