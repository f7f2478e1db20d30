"""Utilities for parsing user-entered moves."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import OutOfRangeError


@dataclass
class ParsedInputMove:
    """Result of parsing a user-supplied move string. Coordinates are 0-based."""

    x: int
    y: int
    strength: int


_SQUARE_PATTERN = re.compile(r"^\(?\s*([A-Z])\s*(\d+)\s*[,\s]\s*(\d+)\s*\)?$")
_NUMERIC_PATTERN = re.compile(r"^\(?\s*(\d+)\s*[,\s]\s*(\d+)\s*[,\s]\s*(\d+)\s*\)?$")


def parse_move_text(raw: str, dim: Optional[int] = None) -> ParsedInputMove:
    """Parse a move string.

    Accepted examples (case-insensitive):
    - "b2 3", "b2,3", "(B2, 3)"   # column letter, 1-based row, strength
    - "1 1 3" or "1,1,3"           # 0-based x, 0-based y, strength

    Raises:
        ValueError: if the text cannot be parsed or the strength is not positive.
        OutOfRangeError: if ``dim`` is given and the cell falls outside the board.
    """

    text = raw.strip().upper()
    if not text:
        raise ValueError("Move text is empty")

    match = _SQUARE_PATTERN.match(text)
    if match:
        x = ord(match.group(1)) - ord("A")
        y = int(match.group(2)) - 1
        strength = int(match.group(3))
    else:
        match = _NUMERIC_PATTERN.match(text)
        if not match:
            raise ValueError("Could not parse move; use formats like 'b2 3' or '1 1 3'")
        x, y, strength = (int(match.group(i)) for i in range(1, 4))

    if strength <= 0:
        raise ValueError("Strength must be positive")
    if y < 0:
        raise OutOfRangeError("Rows are numbered from 1")
    if dim is not None and not (0 <= x < dim and 0 <= y < dim):
        raise OutOfRangeError(f"cell ({x}, {y}) is outside a {dim}x{dim} board")
    return ParsedInputMove(x=x, y=y, strength=strength)
