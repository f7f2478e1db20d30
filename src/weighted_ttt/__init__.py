"""Weighted tic-tac-toe package."""

from .types import Move, Outcome, Piece, RemainingValues, Side
from .errors import (
    GameError,
    IllegalMoveError,
    InvalidValueError,
    NoLegalMoveError,
    OutOfRangeError,
)
from .board import Board
from .engine import (
    apply_move_inplace,
    generate_moves,
    is_legal_placement,
    order_moves,
    undo_move_inplace,
)
from .game import Game
from .search import MAX_DEPTH, SearchContext, best_move, minimax, random_move
from .stats import GameStatistics, SearchStats, StatisticsCollector
from .agents import Agent, MinimaxAgent, RandomAgent
from .config import DIFFICULTY_LEVELS, GameConfig, preset_config
from .game_controller import GameController

__all__ = [
    "Agent",
    "Board",
    "DIFFICULTY_LEVELS",
    "Game",
    "GameConfig",
    "GameController",
    "GameError",
    "GameStatistics",
    "IllegalMoveError",
    "InvalidValueError",
    "MAX_DEPTH",
    "MinimaxAgent",
    "Move",
    "NoLegalMoveError",
    "Outcome",
    "OutOfRangeError",
    "Piece",
    "RandomAgent",
    "RemainingValues",
    "SearchContext",
    "SearchStats",
    "Side",
    "StatisticsCollector",
    "apply_move_inplace",
    "best_move",
    "generate_moves",
    "is_legal_placement",
    "minimax",
    "order_moves",
    "preset_config",
    "random_move",
    "undo_move_inplace",
]
