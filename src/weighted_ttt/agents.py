"""Agents for playing weighted tic-tac-toe."""

from __future__ import annotations

import random
from typing import Optional

from . import search
from .game import Game
from .stats import SearchStats
from .types import Move, Side


class Agent:
    """Base class for agents."""

    last_stats: Optional[SearchStats] = None

    def choose_move(self, game: Game, side: Side) -> Move:  # noqa: D401
        """Return a move for ``side`` on the live game."""

        raise NotImplementedError


class RandomAgent(Agent):
    """Agent that drops a random remaining piece on a random empty cell, with reproducible seeding."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choose_move(self, game: Game, side: Side) -> Move:
        return search.random_move(game.board, game.remaining_values(), side, self._rng)


class MinimaxAgent(Agent):
    """Agent using depth-limited minimax with alpha-beta pruning.

    ``seed`` drives the shuffle inside equal-strength move groups, the only source
    of variety between games.
    """

    def __init__(
        self,
        max_depth: int = 4,
        seed: Optional[int] = None,
        prune: bool = True,
        collapse_duplicates: bool = True,
    ):
        self.max_depth = max_depth
        self.prune = prune
        self.collapse_duplicates = collapse_duplicates
        self._rng = random.Random(seed)
        self.last_stats: Optional[SearchStats] = None
        self.last_score: Optional[float] = None

    def choose_move(self, game: Game, side: Side) -> Move:
        self.last_stats = None
        ctx = search.SearchContext.from_game(
            game,
            max_depth=self.max_depth,
            rng=self._rng,
            prune=self.prune,
            collapse_duplicates=self.collapse_duplicates,
        )
        try:
            score, move = search.best_move(ctx, side)
        finally:
            self.last_stats = ctx.stats
        self.last_score = score
        return move
