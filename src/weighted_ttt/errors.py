"""Exceptions raised by the game model, the search and the controller."""

from __future__ import annotations


class GameError(ValueError):
    """Base class for game errors."""


class OutOfRangeError(GameError):
    """Raised when a coordinate falls outside the board."""


class InvalidValueError(GameError):
    """Raised when a cell value, strength or setting is missing or malformed."""


class IllegalMoveError(GameError):
    """Raised when a requested placement breaks turn order or the capture rule."""


class NoLegalMoveError(GameError):
    """Raised when a move is requested but nothing can be placed."""
