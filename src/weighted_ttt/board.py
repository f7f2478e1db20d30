"""Board model for weighted tic-tac-toe.

The board stores only oriented strengths. Piece identity lives in
:class:`weighted_ttt.game.Game`.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from .errors import InvalidValueError, OutOfRangeError
from .types import Coord, Outcome, Piece

EMPTY = 0


class Board:
    """Square grid of signed integers, indexed ``(x, y)``."""

    def __init__(self, dim: int) -> None:
        if dim is None or isinstance(dim, bool) or not isinstance(dim, int):
            raise InvalidValueError(f"dim must be an integer, got {dim!r}")
        if dim <= 0:
            raise InvalidValueError("dim should be greater than 0")
        self.dim = dim
        self._cells: List[List[int]] = [[EMPTY for _ in range(dim)] for _ in range(dim)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from row lists, ``rows[y][x]``."""

        board = cls(len(rows))
        for y, row in enumerate(rows):
            if len(row) != board.dim:
                raise InvalidValueError(f"row {y} has {len(row)} cells, expected {board.dim}")
            for x, value in enumerate(row):
                board.set(x, y, value)
        return board

    def _check(self, x: int, y: int) -> None:
        for coord in (x, y):
            if coord is None or not 0 <= coord < self.dim:
                raise OutOfRangeError(f"0 <= coord < {self.dim} expected, got {coord}")

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        if value is None or isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(f"cell value must be an integer, got {value!r}")
        self._cells[y][x] = value

    def empty(self, x: int, y: int) -> None:
        self.set(x, y, EMPTY)

    def put_piece(self, x: int, y: int, piece: Piece) -> None:
        """Write the piece's oriented strength into a cell."""

        self.set(x, y, piece.oriented_strength)

    def sign(self, x: int, y: int) -> int:
        """Return -1, 0 or +1 for the owner of a cell."""

        value = self.get(x, y)
        if value == EMPTY:
            return 0
        return -1 if value < 0 else 1

    def _lines(self) -> Iterator[List[Coord]]:
        n = self.dim
        for i in range(n):
            yield [(x, i) for x in range(n)]
            yield [(i, y) for y in range(n)]
        yield [(i, i) for i in range(n)]
        yield [(i, n - i - 1) for i in range(n)]

    def winner(self) -> Optional[Outcome]:
        """Return the winner, ``Outcome.DRAW`` for a full board, or None while ongoing.

        Only signs matter: a line wins when every one of its cells has the same
        non-zero sign, whatever the strengths.
        """

        for line in self._lines():
            total = 0
            for x, y in line:
                value = self._cells[y][x]
                if value:
                    total += 1 if value > 0 else -1
            if abs(total) == self.dim:
                return Outcome.WHITE if total > 0 else Outcome.BLACK
        return None if self.has_empty_cell() else Outcome.DRAW

    def has_empty_cell(self) -> bool:
        return any(cell == EMPTY for row in self._cells for cell in row)

    def is_full(self) -> bool:
        return not self.has_empty_cell()

    def is_empty(self) -> bool:
        return all(cell == EMPTY for row in self._cells for cell in row)

    def empty_cells(self) -> List[Coord]:
        """Empty cells in row-major order."""

        return [(x, y) for y in range(self.dim) for x in range(self.dim) if self._cells[y][x] == EMPTY]

    def rows(self) -> List[List[int]]:
        """Return a copy of the cells as row lists."""

        return [row[:] for row in self._cells]

    def copy(self) -> "Board":
        clone = Board(self.dim)
        clone._cells = self.rows()
        return clone

    def render(self) -> str:
        """Text grid with column letters and 1-based row numbers."""

        width = max(2, max(len(str(cell)) for row in self._cells for cell in row))
        header = "   " + " ".join(chr(ord("a") + x).rjust(width) for x in range(self.dim))
        lines = [header]
        for y, row in enumerate(self._cells):
            cells = [".".rjust(width) if cell == EMPTY else str(cell).rjust(width) for cell in row]
            lines.append(f"{y + 1:>2} " + " ".join(cells))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.dim == other.dim and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board(dim={self.dim}, rows={self._cells!r})"
