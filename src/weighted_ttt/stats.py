"""Search statistics for diagnostics. Nothing here feeds back into search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SearchStats:
    """Counters for a single decision."""

    nodes: int = 0
    pruned: int = 0
    max_depth: int = 0
    elapsed_ms: float = 0.0

    @property
    def prune_ratio(self) -> float:
        """Lower bound on the share of pruned branches, in percent."""

        total = self.nodes + self.pruned
        return 0.0 if total == 0 else 100.0 * self.pruned / total


@dataclass
class GameStatistics:
    """Decisions recorded during one game."""

    decisions: List[SearchStats] = field(default_factory=list)

    @property
    def total_nodes(self) -> int:
        return sum(s.nodes for s in self.decisions)

    @property
    def total_pruned(self) -> int:
        return sum(s.pruned for s in self.decisions)

    @property
    def max_depth(self) -> int:
        return max((s.max_depth for s in self.decisions), default=0)

    @property
    def last(self) -> Optional[SearchStats]:
        return self.decisions[-1] if self.decisions else None


def _average(values):
    return 0.0 if not values else sum(values) / len(values)


class StatisticsCollector:
    """Collect decisions for the current game and archive finished games.

    Owned by whoever drives the games, so separate controllers never share counts.
    """

    def __init__(self) -> None:
        self.current = GameStatistics()
        self.games: List[GameStatistics] = []

    def record(self, stats: SearchStats) -> None:
        self.current.decisions.append(stats)

    def finish_game(self) -> GameStatistics:
        """Archive the current game and start a fresh one."""

        finished = self.current
        self.games.append(finished)
        self.current = GameStatistics()
        return finished

    def average_total_nodes(self) -> float:
        return _average([g.total_nodes for g in self.games])

    def report(self) -> List[str]:
        """Lines describing the latest finished game and the running average."""

        if not self.games:
            return ["=== No data ==="]
        latest = self.games[-1]
        last = latest.last
        lines = [
            f"Minimax stats: total calls {latest.total_nodes}, "
            f"last call {0 if last is None else last.nodes}, max depth {latest.max_depth}",
            "History:",
        ]
        for idx, stats in enumerate(latest.decisions, start=1):
            lines.append(
                f" #{idx} move => {stats.nodes} calls | pruned {stats.pruned} "
                f"(>={stats.prune_ratio:.2f} %) | {stats.elapsed_ms:.1f} ms"
            )
        lines.append(f"Average total: {self.average_total_nodes():.2f} calls ({len(self.games)} game(s))")
        return lines
