from __future__ import annotations
import copy
from typing import Hashable, List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Configuration(Protocol):
    """Anything the BFS engine can search.

    A configuration is an immutable value: equality and hashing reflect its
    full content, never its identity or how it was reached. `neighbors()`
    returns the configurations one move away and must not touch `self`.
    Duplicates and already-seen configurations are fine, the engine dedups.
    """

    def is_goal(self) -> bool: ...

    def neighbors(self) -> Sequence["Configuration"]: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


def render(state: Hashable) -> str:
    """Human readable form; falls back to str() for states without render()."""
    fn = getattr(state, "render", None)
    return fn() if callable(fn) else str(state)


def contract_violations(state: Configuration, depth: int = 2) -> List[str]:
    """
    Walk `depth` levels of neighbors from `state` and report contract breaches:
    impure neighbors(), hash/eq disagreement, identity-based equality,
    non-bool goal test, non-str render. Empty list means nothing was caught.
    """
    problems: List[str] = []
    level = [state]
    seen = set()
    for _ in range(depth + 1):
        nxt_level = []
        for s in level:
            if s in seen:
                continue
            seen.add(s)
            snapshot = copy.deepcopy(s)
            if not (snapshot == s and hash(snapshot) == hash(s)):
                problems.append(f"{render(s)!r}: copy is not equal (or hashes differently)")
            goal = s.is_goal()
            if not isinstance(goal, bool):
                problems.append(f"{render(s)!r}: is_goal() returned {type(goal).__name__}")
            if hasattr(s, "render") and not isinstance(s.render(), str):
                problems.append(f"{render(s)!r}: render() did not return str")
            first = list(s.neighbors())
            second = list(s.neighbors())
            if s != snapshot:
                problems.append(f"{render(snapshot)!r}: neighbors() mutated the source")
            if first != second:
                problems.append(f"{render(s)!r}: neighbors() is not repeatable")
            for a in first:
                for b in first:
                    if a == b and hash(a) != hash(b):
                        problems.append(f"{render(a)!r}: equal neighbors hash differently")
            nxt_level.extend(first)
        level = nxt_level
    return problems
