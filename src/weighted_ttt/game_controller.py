"""Game controller utilities for UI-driven or scripted play.

This module keeps presentation concerns separate from the game model so that
turn order, move validation and computer moves can be tested without a UI.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from . import engine, search
from .agents import Agent
from .config import GameConfig
from .errors import IllegalMoveError
from .game import Game
from .stats import StatisticsCollector
from .types import Move, Outcome, Piece, Side


class GameController:
    """Manage one game at a time: turn order, agents, history and score.

    An agent of ``None`` means that side is played by a human through
    :meth:`apply_human_move`.
    """

    def __init__(
        self,
        black_agent: Optional[Agent] = None,
        white_agent: Optional[Agent] = None,
        config: Optional[GameConfig] = None,
        statistics: Optional[StatisticsCollector] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.black_agent = black_agent
        self.white_agent = white_agent
        self.statistics = statistics or StatisticsCollector()
        self.score: Dict[Side, int] = {Side.BLACK: 0, Side.WHITE: 0}
        self._rng = random.Random(self.config.seed)
        self.game = Game(self.config.dim, self.config.strengths)
        self.turn: Side = self.config.first
        self.history: List[Tuple[Side, Move]] = []
        self._scored = False

    def new_game(self, first: Optional[Side] = None) -> None:
        """Start a new game; the score carries over."""

        self.game.reset()
        self.turn = self.config.first if first is None else first
        self.history = []
        self._scored = False

    @property
    def board(self):
        return self.game.board

    def winner(self) -> Optional[Outcome]:
        """Board result, or a draw when the side to move has nothing left to place."""

        outcome = self.game.board.winner()
        if outcome is None and not self.legal_moves():
            return Outcome.DRAW
        return outcome

    def is_over(self) -> bool:
        return self.winner() is not None

    def agent_for(self, side: Side) -> Optional[Agent]:
        return self.black_agent if side is Side.BLACK else self.white_agent

    def is_human_turn(self) -> bool:
        return self.agent_for(self.turn) is None

    def legal_moves(self) -> List[Move]:
        return engine.generate_moves(self.game.board, self.turn, self.game.remaining_values())

    def _find_unused(self, side: Side, strength: int) -> Optional[Piece]:
        for piece in self.game.find_unused_pieces(side):
            if piece.strength == strength:
                return piece
        return None

    def apply_human_move(self, x: int, y: int, strength: int, side: Optional[Side] = None) -> Move:
        """Validate and place a piece of ``strength`` for the side to move.

        Raises :class:`IllegalMoveError` before touching any state when the game is
        over, it is not ``side``'s turn, no such piece is left, or the target cell
        is not empty and not a capturable weaker opponent.
        """

        side = self.turn if side is None else side
        if self.is_over():
            raise IllegalMoveError("game is over")
        if side is not self.turn:
            raise IllegalMoveError(f"Illegal move: it is {self.turn.name}'s turn")
        piece = self._find_unused(side, strength)
        if piece is None:
            raise IllegalMoveError(f"{side.name} has no unused piece of strength {strength}")
        existing = self.game.board.get(x, y)
        if not engine.is_legal_placement(existing, piece.oriented_strength):
            raise IllegalMoveError("Not empty")

        captured = self.game.find_piece_at(x, y)
        if captured is not None:
            captured.kill()
        self.game.put_piece_in_board(x, y, piece)
        move = Move(x=x, y=y, strength=piece.oriented_strength)
        self._after_move(side, move)
        return move

    def compute_ai_move(self) -> Move:
        """Ask the current side's agent for a move, without applying it."""

        agent = self.agent_for(self.turn)
        if agent is None:
            raise ValueError("No agent configured for current player")
        if self.config.random_opening and not self.game.has_pieces_on_board():
            agent.last_stats = None
            return search.random_move(self.game.board, self.game.remaining_values(), self.turn, self._rng)
        move = agent.choose_move(self.game, self.turn)
        if agent.last_stats is not None:
            self.statistics.record(agent.last_stats)
        return move

    def step_ai(self) -> Move:
        if self.is_over():
            raise IllegalMoveError("game is over")
        move = self.compute_ai_move()
        if not self.game.play_move(move):
            raise IllegalMoveError(f"agent produced an unplayable move {move}")
        self._after_move(self.turn, move)
        return move

    def _after_move(self, side: Side, move: Move) -> None:
        self.history.append((side, move))
        self.turn = side.opponent()
        outcome = self.winner()
        if outcome is not None and not self._scored:
            if outcome.side is not None:
                self.score[outcome.side] += 1
            self._scored = True

    def finish_game(self):
        """Archive this game's search statistics."""

        return self.statistics.finish_game()
