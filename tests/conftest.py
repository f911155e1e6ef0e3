"""
Pytest fixtures: a synthetic graph configuration and board files on disk.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Hashable, List

import pytest

DATA = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class Node:
    """Configuration over an explicit adjacency table; equality is by name only."""
    name: Hashable
    adj: Dict[Hashable, List[Hashable]] = field(compare=False, repr=False)
    goals: FrozenSet[Hashable] = field(compare=False, repr=False)
    expansions: Counter = field(compare=False, repr=False, default_factory=Counter)

    def is_goal(self) -> bool:
        return self.name in self.goals

    def neighbors(self):
        self.expansions[self.name] += 1
        return [Node(n, self.adj, self.goals, self.expansions) for n in self.adj.get(self.name, ())]

    def render(self) -> str:
        return str(self.name)


def make_node(adj, start, goals):
    return Node(start, adj, frozenset(goals), Counter())


def brute_distance(adj, start, goals):
    """Unit-weight relaxation until fixpoint; independent of the BFS engine."""
    inf = float("inf")
    dist = {start: 0}
    changed = True
    while changed:
        changed = False
        for u, vs in adj.items():
            if u not in dist:
                continue
            for v in vs:
                if dist.get(v, inf) > dist[u] + 1:
                    dist[v] = dist[u] + 1
                    changed = True
    found = [dist[g] for g in goals if g in dist]
    return (min(found) if found else None), set(dist)


@pytest.fixture
def graph():
    return make_node


@pytest.fixture
def data_dir() -> Path:
    return DATA


@pytest.fixture
def board_file(tmp_path):
    """Write board text to a temp file and return its path."""
    def _write(text: str, name: str = "board.txt") -> Path:
        p = tmp_path / name
        p.write_text(text)
        return p
    return _write


@pytest.fixture
def brute():
    return brute_distance
