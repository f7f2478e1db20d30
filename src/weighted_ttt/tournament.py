"""Tournament/benchmark runner for weighted tic-tac-toe.

Usage example:
- python -m weighted_ttt.tournament --games 20 --black minimax --white random --seed 1
"""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from .agents import MinimaxAgent, RandomAgent
from .config import DIFFICULTY_LEVELS, GameConfig, preset_config
from .game_controller import GameController
from .stats import SearchStats, StatisticsCollector
from .types import Outcome, Side


@dataclass
class SideSearchSummary:
    samples: int
    avg_nodes: float
    avg_pruned: float
    avg_move_time_ms: float


@dataclass
class TournamentResult:
    games: int
    black_wins: int
    white_wins: int
    draws: int
    avg_plies: float
    side_stats: Dict[Side, SideSearchSummary]


def _build_agent(name: str, max_depth: int, seed: Optional[int]):
    if name == "random":
        return RandomAgent(seed=seed)
    if name == "minimax":
        return MinimaxAgent(max_depth=max_depth, seed=seed)
    raise ValueError(f"Unknown agent '{name}'")


def _average(values):
    return 0.0 if not values else sum(values) / len(values)


def _summarize(records: List[SearchStats], move_times: List[float]) -> SideSearchSummary:
    return SideSearchSummary(
        samples=len(records),
        avg_nodes=_average([s.nodes for s in records]),
        avg_pruned=_average([s.pruned for s in records]),
        avg_move_time_ms=_average(move_times),
    )


def run_tournament(
    black_agent,
    white_agent,
    games: int = 20,
    config: Optional[GameConfig] = None,
    seed: int = 0,
    statistics: Optional[StatisticsCollector] = None,
) -> TournamentResult:
    """Play ``games`` computer-vs-computer games, alternating the first side."""

    base = config or GameConfig()
    rng = random.Random(seed)
    counts = {Outcome.BLACK: 0, Outcome.WHITE: 0, Outcome.DRAW: 0}
    total_plies = 0
    records: Dict[Side, List[SearchStats]] = {Side.BLACK: [], Side.WHITE: []}
    move_times: Dict[Side, List[float]] = {Side.BLACK: [], Side.WHITE: []}

    cfg = GameConfig(
        dim=base.dim,
        strengths=base.strengths,
        max_depth=base.max_depth,
        first=base.first,
        random_opening=base.random_opening,
        seed=rng.randint(0, 2**31 - 1),
        level=base.level,
    )
    controller = GameController(black_agent=black_agent, white_agent=white_agent, config=cfg, statistics=statistics)

    for game_index in range(games):
        first = base.first if game_index % 2 == 0 else base.first.opponent()
        controller.new_game(first=first)
        while True:
            outcome = controller.winner()
            if outcome is not None:
                break
            side = controller.turn
            agent = controller.agent_for(side)
            start = time.monotonic()
            controller.step_ai()
            move_times[side].append((time.monotonic() - start) * 1000.0)
            if agent is not None and agent.last_stats is not None:
                records[side].append(agent.last_stats)
        counts[outcome] += 1
        total_plies += len(controller.history)
        controller.finish_game()

    return TournamentResult(
        games=games,
        black_wins=counts[Outcome.BLACK],
        white_wins=counts[Outcome.WHITE],
        draws=counts[Outcome.DRAW],
        avg_plies=total_plies / games if games else 0.0,
        side_stats={side: _summarize(records[side], move_times[side]) for side in (Side.BLACK, Side.WHITE)},
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Weighted tic-tac-toe tournament/benchmark runner")
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--black", choices=["random", "minimax"], default="minimax")
    parser.add_argument("--white", choices=["random", "minimax"], default="random")
    parser.add_argument("--level", choices=sorted(DIFFICULTY_LEVELS), default="easy")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--stats", action="store_true", help="Print search statistics for the last game")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = preset_config(args.level)
    black_agent = _build_agent(args.black, config.max_depth, seed=args.seed)
    white_agent = _build_agent(args.white, config.max_depth, seed=args.seed + 1)
    statistics = StatisticsCollector()

    result = run_tournament(
        black_agent=black_agent,
        white_agent=white_agent,
        games=args.games,
        config=config,
        seed=args.seed,
        statistics=statistics,
    )

    print(f"Black wins: {result.black_wins}, White wins: {result.white_wins}, Draws: {result.draws}")
    if result.games:
        print(f"Win rate (Black): {result.black_wins / result.games:.3f}")
    print(f"Average plies: {result.avg_plies:.2f}")
    for side in (Side.BLACK, Side.WHITE):
        summary = result.side_stats[side]
        if summary.samples == 0:
            print(f"{side.name} search stats: (no data)")
            continue
        print(
            f"{side.name} search stats: samples={summary.samples} avg_nodes={summary.avg_nodes:.1f} "
            f"avg_pruned={summary.avg_pruned:.1f} avg_move_time_ms={summary.avg_move_time_ms:.2f}"
        )
    if args.stats:
        for line in statistics.report():
            print(line)


if __name__ == "__main__":
    main()
