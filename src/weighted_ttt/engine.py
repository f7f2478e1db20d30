"""Move generation for weighted tic-tac-toe.

Rules:
- A piece may be placed on an empty cell.
- A piece may capture an opposing piece of strictly lower strength by landing on it.
- Same-side cells and equal-or-stronger opposing pieces are never valid targets.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import groupby
from typing import List, Optional, Set, Tuple

from .board import EMPTY, Board
from .types import Move, RemainingValues, Side

UsedKey = Tuple[Side, int]


def is_legal_placement(existing: int, value: int) -> bool:
    """Whether oriented ``value`` may be placed on a cell holding ``existing``."""

    if existing == EMPTY:
        return True
    opposed = existing * value < 0
    return opposed and abs(value) > abs(existing)


def generate_moves(
    board: Board,
    side: Side,
    remaining: RemainingValues,
    used: Optional[Set[UsedKey]] = None,
    rng: Optional[random.Random] = None,
    collapse_duplicates: bool = True,
) -> List[Move]:
    """Generate legal placements for ``side``, ordered for alpha-beta.

    Variants already in ``used`` are skipped. With ``collapse_duplicates`` only
    the first unused variant of each strength is offered per cell; equal-strength
    pieces are interchangeable so the search values do not change.
    """

    used = used if used is not None else set()
    values = remaining.for_side(side)
    candidates: List[Tuple[int, int]] = []
    seen_values = set()
    for variant_id, value in enumerate(values):
        if (side, variant_id) in used:
            continue
        if collapse_duplicates:
            if value in seen_values:
                continue
            seen_values.add(value)
        candidates.append((variant_id, value))

    moves: List[Move] = []
    for y in range(board.dim):
        for x in range(board.dim):
            existing = board.get(x, y)
            for variant_id, value in candidates:
                if is_legal_placement(existing, value):
                    moves.append(Move(x=x, y=y, strength=value, variant_id=variant_id))
    return order_moves(moves, rng)


def order_moves(moves: List[Move], rng: Optional[random.Random] = None) -> List[Move]:
    """Sort by descending absolute strength, shuffling inside each strength group.

    Strong placements first tend to reach cutoffs sooner. The shuffle only varies
    play between games; without ``rng`` the stable order is kept.
    """

    ordered = sorted(moves, key=lambda mv: -abs(mv.strength))
    if rng is None:
        return ordered
    result: List[Move] = []
    for _, group in groupby(ordered, key=lambda mv: mv.strength):
        cluster = list(group)
        rng.shuffle(cluster)
        result.extend(cluster)
    return result


@dataclass
class UndoRecord:
    """Information needed to undo an in-place placement."""

    move: Move
    previous_value: int
    used_key: UsedKey


def apply_move_inplace(board: Board, used: Set[UsedKey], move: Move) -> UndoRecord:
    """Place a move on the board and spend its variant, returning data required for undo."""

    key = (move.side, move.variant_id)
    previous = board.get(move.x, move.y)
    board.set(move.x, move.y, move.strength)
    used.add(key)
    return UndoRecord(move=move, previous_value=previous, used_key=key)


def undo_move_inplace(board: Board, used: Set[UsedKey], undo: UndoRecord) -> None:
    """Revert a prior call to :func:`apply_move_inplace`."""

    board.set(undo.move.x, undo.move.y, undo.previous_value)
    used.discard(undo.used_key)


def format_moves(moves: List[Move]) -> str:
    """Human-readable listing of candidate moves."""

    lines = [f"{len(moves)} moves :"]
    for mv in moves:
        lines.append(f" x = {mv.x}, y = {mv.y} | strength : {mv.strength} (v_id = {mv.variant_id})")
    return "\n".join(lines)
