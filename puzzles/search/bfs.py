from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterator, List, Tuple

from puzzles.search.state import Configuration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStats:
    """Exploration volume of one search.

    total_generated counts the start state plus every state any neighbors()
    call produced, duplicates included; unique_visited counts distinct states
    that entered the visited map, start included.
    """
    total_generated: int = 0
    unique_visited: int = 0


@dataclass(frozen=True)
class SearchResult:
    path: Tuple[Configuration, ...] = ()
    stats: SearchStats = field(default_factory=SearchStats)
    termination: str = "exhausted"

    @property
    def solved(self) -> bool:
        return bool(self.path)

    @property
    def moves(self) -> int | None:
        """Number of transitions on the path, None when there is no path."""
        return len(self.path) - 1 if self.path else None

    def __iter__(self) -> Iterator:
        # path, stats = solve(start)
        yield self.path
        yield self.stats


def reconstruct_path(parent: Dict[Configuration, Configuration],
                     goal: Configuration) -> List[Configuration]:
    """Follow predecessor links back to the start (which maps to itself)."""
    path = [goal]
    s = goal
    while parent[s] is not s:
        s = parent[s]
        path.append(s)
    path.reverse()
    return path


def solve(start: Configuration) -> SearchResult:
    """
    Breadth-first search from `start` to the nearest goal configuration.
    Goals are tested when a configuration is discovered, so the first goal
    found is at minimum depth; ties go to neighbors() order.
    Returns SearchResult(path, stats, termination); path is empty when the
    reachable component holds no goal.
    """
    logger.debug("bfs start: %r", start)
    if start.is_goal():
        return SearchResult((start,), SearchStats(1, 1), "ok")

    q: Deque[Configuration] = deque([start])
    parent: Dict[Configuration, Configuration] = {start: start}
    generated = 1
    while q:
        s = q.popleft()
        for s2 in s.neighbors():
            generated += 1
            if s2 in parent:
                continue
            parent[s2] = s
            if s2.is_goal():
                path = reconstruct_path(parent, s2)
                stats = SearchStats(generated, len(parent))
                logger.debug("bfs ok: %d moves, %s", len(path) - 1, stats)
                return SearchResult(tuple(path), stats, "ok")
            q.append(s2)

    stats = SearchStats(generated, len(parent))
    logger.debug("bfs exhausted: %s", stats)
    return SearchResult((), stats, "exhausted")
