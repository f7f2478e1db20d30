"""Depth-limited minimax with alpha-beta pruning.

Scores are always from Black's point of view: Black maximizes, White minimizes.
A decisive result at depth ``d`` is worth ``horizon - d`` so quicker wins and
slower losses are preferred. Running out of depth scores one point less than a
decisive result at the same ply, signed by the side to move.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from . import engine
from .board import Board
from .engine import UsedKey
from .errors import NoLegalMoveError
from .stats import SearchStats
from .types import Move, Outcome, RemainingValues, Side

MAX_DEPTH = 8
DRAW_SCORE = 0
STALEMATE_SCORE = 0


@dataclass
class SearchContext:
    """Everything one search call mutates.

    ``board`` and ``used`` are modified in place during the search and restored
    before every return.
    """

    board: Board
    remaining: RemainingValues
    max_depth: int = 4
    rng: Optional[random.Random] = None
    prune: bool = True
    collapse_duplicates: bool = True
    used: Set[UsedKey] = field(default_factory=set)
    stats: SearchStats = field(default_factory=SearchStats)

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @property
    def horizon(self) -> int:
        return max(MAX_DEPTH, self.max_depth + 1)

    @classmethod
    def from_game(cls, game, max_depth: int = 4, **kwargs) -> "SearchContext":
        """Snapshot a live game: a copy of its board and its unused pieces."""

        return cls(board=game.board.copy(), remaining=game.remaining_values(), max_depth=max_depth, **kwargs)


def static_score(ctx: SearchContext, outcome: Optional[Outcome], maximizing: bool, depth: int) -> int:
    score = ctx.horizon - depth
    if outcome is None:
        return (score - 1) if maximizing else -(score - 1)
    if outcome is Outcome.DRAW:
        return DRAW_SCORE
    return score if outcome is Outcome.BLACK else -score


def _moves_for(ctx: SearchContext, side: Side):
    return engine.generate_moves(
        ctx.board,
        side,
        ctx.remaining,
        ctx.used,
        rng=ctx.rng,
        collapse_duplicates=ctx.collapse_duplicates,
    )


def minimax(ctx: SearchContext, alpha: float, beta: float, maximizing: bool, depth: int) -> float:
    """Return the value of the position for the side to move.

    When a cutoff happens the value is only a bound.
    """

    outcome = ctx.board.winner()
    if outcome is not None or depth >= ctx.max_depth:
        return static_score(ctx, outcome, maximizing, depth)

    ctx.stats.nodes += 1
    side = Side.BLACK if maximizing else Side.WHITE
    moves = _moves_for(ctx, side)
    if not moves:
        # Side to move has no piece that fits anywhere.
        return STALEMATE_SCORE

    best = float("-inf") if maximizing else float("inf")
    for move in moves:
        undo = engine.apply_move_inplace(ctx.board, ctx.used, move)
        try:
            value = minimax(ctx, alpha, beta, not maximizing, depth + 1)
        finally:
            engine.undo_move_inplace(ctx.board, ctx.used, undo)
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, best)
        else:
            best = min(best, value)
            beta = min(beta, best)
        if ctx.prune and beta <= alpha:
            ctx.stats.pruned += 1
            break
    return best


def best_move(ctx: SearchContext, side: Side = Side.BLACK) -> Tuple[float, Move]:
    """Search every legal move of ``side`` and return ``(score, move)``.

    The first move to strictly beat the running best is kept. The running best is
    handed down as a bound, which only ever hides moves that could not beat it.
    """

    start = time.monotonic()
    ctx.stats.max_depth = ctx.max_depth
    moves = _moves_for(ctx, side)
    if not moves:
        raise NoLegalMoveError(f"no legal move for {side.name}")

    maximizing = side is Side.BLACK
    best_score = float("-inf") if maximizing else float("inf")
    chosen: Optional[Move] = None
    for move in moves:
        if ctx.prune:
            alpha, beta = (best_score, float("inf")) if maximizing else (float("-inf"), best_score)
        else:
            alpha, beta = float("-inf"), float("inf")
        undo = engine.apply_move_inplace(ctx.board, ctx.used, move)
        try:
            score = minimax(ctx, alpha, beta, not maximizing, 1)
        finally:
            engine.undo_move_inplace(ctx.board, ctx.used, undo)
        if (maximizing and score > best_score) or (not maximizing and score < best_score):
            best_score, chosen = score, move

    ctx.stats.elapsed_ms = (time.monotonic() - start) * 1000.0
    assert chosen is not None
    return best_score, chosen


def random_move(board: Board, remaining: RemainingValues, side: Side, rng: random.Random) -> Move:
    """Uniform empty cell and uniform remaining strength of ``side``."""

    cells = board.empty_cells()
    if not cells:
        raise NoLegalMoveError("Unable to find a random move, no empty cell")
    values = remaining.for_side(side)
    if not values:
        raise NoLegalMoveError(f"{side.name} has no piece left")
    x, y = rng.choice(cells)
    variant_id = rng.randrange(len(values))
    return Move(x=x, y=y, strength=values[variant_id], variant_id=variant_id)
