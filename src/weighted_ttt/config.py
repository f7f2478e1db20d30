"""Game settings and difficulty presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .errors import InvalidValueError
from .game import DEFAULT_DIM, DEFAULT_STRENGTHS
from .types import Side

DIFFICULTY_LEVELS: Dict[str, int] = {"easy": 3, "medium": 4, "hard": 5}
DEFAULT_LEVEL = "medium"


@dataclass
class GameConfig:
    dim: int = DEFAULT_DIM
    strengths: Tuple[int, ...] = DEFAULT_STRENGTHS
    max_depth: int = DIFFICULTY_LEVELS[DEFAULT_LEVEL]
    first: Side = Side.WHITE
    random_opening: bool = True
    seed: Optional[int] = None
    level: str = DEFAULT_LEVEL

    def validate(self) -> "GameConfig":
        if self.dim is None or self.dim <= 0:
            raise InvalidValueError("dim should be greater than 0")
        if not self.strengths:
            raise InvalidValueError("strengths must not be empty")
        if any(s <= 0 for s in self.strengths):
            raise InvalidValueError("strengths must be > 0")
        if self.max_depth < 1:
            raise InvalidValueError("max_depth must be at least 1")
        return self


def preset_config(level: str) -> GameConfig:
    """Default game settings for a named difficulty level."""

    name = level.lower()
    if name not in DIFFICULTY_LEVELS:
        raise ValueError(f"Unknown difficulty level '{level}'")
    return GameConfig(max_depth=DIFFICULTY_LEVELS[name], level=name)


def parse_strengths(raw: str) -> Tuple[int, ...]:
    """Parse a comma-separated strength multiset such as ``1,1,1,2,2,2,3,3,3``."""

    parts = [p.strip() for p in raw.split(",") if p.strip()]
    try:
        strengths = tuple(int(p) for p in parts)
    except ValueError as exc:
        raise InvalidValueError(f"strengths must be integers: {raw!r}") from exc
    if not strengths:
        raise InvalidValueError("strengths must not be empty")
    if any(s <= 0 for s in strengths):
        raise InvalidValueError("strengths must be > 0")
    return strengths


def parse_side(raw: str) -> Side:
    try:
        return Side[raw.upper()]
    except KeyError as exc:
        raise InvalidValueError(f"Unknown side '{raw}'") from exc
