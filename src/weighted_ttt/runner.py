"""CLI runner for weighted tic-tac-toe.

Usage examples:
- Play White against the computer: ``python -m weighted_ttt.runner --white human --black minimax --level hard``
- Watch the computer play itself: ``python -m weighted_ttt.runner --white minimax --black minimax --games 3 --stats``
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

from . import engine
from .agents import MinimaxAgent, RandomAgent
from .config import DIFFICULTY_LEVELS, GameConfig, parse_side, parse_strengths, preset_config
from .errors import GameError
from .game_controller import GameController
from .move_input import parse_move_text
from .types import Outcome, Side

AGENT_CHOICES = ["human", "random", "minimax"]


@dataclass
class GameSummary:
    outcome: Outcome
    plies: int


def _build_agent(name: str, max_depth: int, seed: Optional[int]):
    if name == "human":
        return None
    if name == "random":
        return RandomAgent(seed=seed)
    if name == "minimax":
        return MinimaxAgent(max_depth=max_depth, seed=seed)
    raise ValueError(f"Unknown agent '{name}'")


def _describe(outcome: Outcome, controller: GameController) -> str:
    stat_text = f"Score {controller.score[Side.WHITE]} : {controller.score[Side.BLACK]}"
    if outcome is Outcome.DRAW:
        return f"Draw - {stat_text}"
    return f"{outcome.name.capitalize()} wins - {stat_text}"


def _read_human_move(
    controller: GameController,
    read_line: Callable[[], str],
    out: TextIO,
) -> None:
    """Prompt until the human enters a legal move."""

    while True:
        out.write(f"{controller.turn.name} to move (e.g. 'b2 3'): ")
        out.flush()
        raw = read_line()
        if not raw:
            raise EOFError("input closed")
        try:
            parsed = parse_move_text(raw, dim=controller.game.dim)
            controller.apply_human_move(parsed.x, parsed.y, parsed.strength)
            return
        except GameError as exc:
            print(str(exc), file=out)
        except ValueError as exc:
            print(f"Invalid input: {exc}", file=out)


def play_game(
    controller: GameController,
    show_board: bool = True,
    show_moves: bool = False,
    read_line: Optional[Callable[[], str]] = None,
    out: Optional[TextIO] = None,
) -> GameSummary:
    out = out or sys.stdout
    read_line = read_line or sys.stdin.readline
    print(f"=== New game initialized - level set to {controller.config.level} ===", file=out)
    if show_board:
        print(controller.board.render(), file=out)
        print(file=out)

    while True:
        outcome = controller.winner()
        if outcome is not None:
            print(f"=== {_describe(outcome, controller)} ===", file=out)
            return GameSummary(outcome=outcome, plies=len(controller.history))

        side = controller.turn
        if controller.is_human_turn():
            if show_moves:
                print(engine.format_moves(controller.legal_moves()), file=out)
            _read_human_move(controller, read_line, out)
        else:
            move = controller.step_ai()
            print(f"{side.name.capitalize()} plays x = {move.x}, y = {move.y}, strength {move.strength}", file=out)
        if show_board:
            print(controller.board.render(), file=out)
            print(file=out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weighted tic-tac-toe runner")
    parser.add_argument("--black", choices=AGENT_CHOICES, default="minimax")
    parser.add_argument("--white", choices=AGENT_CHOICES, default="human")
    parser.add_argument("--level", choices=sorted(DIFFICULTY_LEVELS), default="medium")
    parser.add_argument("--depth", type=int, default=None, help="Search depth, overrides --level")
    parser.add_argument("--dim", type=int, default=3)
    parser.add_argument("--strengths", type=str, default=None, help="Comma-separated multiset like 1,1,1,2,2,2,3,3,3")
    parser.add_argument("--first", type=str, default="white", help="Side that moves first")
    parser.add_argument("--no-random-opening", dest="random_opening", action="store_false")
    parser.add_argument("--games", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--quiet", action="store_true", help="Do not print the board after each move")
    parser.add_argument("--show-moves", action="store_true", help="List legal moves before each human turn")
    parser.add_argument("--stats", action="store_true", help="Print search statistics after each game")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    config = preset_config(args.level)
    config.dim = args.dim
    if args.strengths:
        config.strengths = parse_strengths(args.strengths)
    if args.depth is not None:
        config.max_depth = args.depth
    config.first = parse_side(args.first)
    config.random_opening = args.random_opening
    config.seed = args.seed
    return config.validate()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        raise SystemExit(1)

    black = _build_agent(args.black, config.max_depth, args.seed)
    white = _build_agent(args.white, config.max_depth, None if args.seed is None else args.seed + 1)
    controller = GameController(black_agent=black, white_agent=white, config=config)

    try:
        for game_index in range(args.games):
            if game_index:
                controller.new_game()
            play_game(controller, show_board=not args.quiet, show_moves=args.show_moves)
            controller.finish_game()
            if args.stats:
                for line in controller.statistics.report():
                    print(line)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
