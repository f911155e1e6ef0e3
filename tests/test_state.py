"""
Tests for the configuration protocol helpers.
"""

from dataclasses import dataclass, field

from puzzles.domains.clock import ClockConfig
from puzzles.search.state import Configuration, contract_violations, render


class ByIdentity:
    def is_goal(self):
        return False

    def neighbors(self):
        return []


class Leaky:
    """neighbors() grows the source in place."""

    def __init__(self):
        self.items = [1]

    def __eq__(self, other):
        return isinstance(other, Leaky) and self.items == other.items

    def __hash__(self):
        return hash(tuple(self.items))

    def is_goal(self):
        return False

    def neighbors(self):
        self.items.append(0)
        return []


@dataclass(frozen=True)
class IntGoal:
    n: int

    def is_goal(self):
        return self.n

    def neighbors(self):
        return []


@dataclass(frozen=True)
class Drifting:
    n: int
    calls: list = field(default_factory=list, compare=False)

    def is_goal(self):
        return False

    def neighbors(self):
        self.calls.append(None)
        return [Drifting(len(self.calls))]


@dataclass(frozen=True)
class BadRender:
    def is_goal(self):
        return False

    def neighbors(self):
        return []

    def render(self):
        return 42


def test_clean_state_passes():
    assert contract_violations(ClockConfig(6, 2, 5), depth=3) == []


def test_identity_equality_is_caught():
    assert any("copy is not equal" in p for p in contract_violations(ByIdentity()))


def test_mutating_neighbors_is_caught():
    assert any("mutated the source" in p for p in contract_violations(Leaky()))


def test_non_bool_goal_is_caught():
    assert contract_violations(IntGoal(0)) == ["'IntGoal(n=0)': is_goal() returned int"]


def test_unrepeatable_neighbors_is_caught():
    assert any("not repeatable" in p for p in contract_violations(Drifting(0), depth=0))


def test_render_must_return_text():
    assert any("render() did not return str" in p for p in contract_violations(BadRender()))


def test_render_falls_back_to_str():
    assert render(7) == "7"
    assert render(ClockConfig(12, 3, 4)) == "3"


def test_protocol_is_structural():
    assert isinstance(ClockConfig(12, 1, 2), Configuration)
    assert not isinstance(42, Configuration)
