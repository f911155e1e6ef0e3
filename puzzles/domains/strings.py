from __future__ import annotations
import random
import string
from dataclasses import dataclass
from typing import List

ALPHABET = string.ascii_uppercase


def _shift(ch: str, step: int) -> str:
    return ALPHABET[(ALPHABET.index(ch) + step) % len(ALPHABET)]


@dataclass(frozen=True)
class StringsConfig:
    """
    Word ladder over A..Z: one move changes a single letter to the previous
    or next letter of the alphabet (A and Z are adjacent).

    Both words must be non-empty, A-Z only and of equal length; anything
    else raises ValueError. The empty word is rejected rather than treated
    as already solved.
    """
    current: str
    end: str

    def __post_init__(self):
        for name in ("current", "end"):
            v = getattr(self, name)
            if not v or any(ch not in ALPHABET for ch in v):
                raise ValueError(f"{name}={v!r} must be a non-empty A-Z string")
        if len(self.current) != len(self.end):
            raise ValueError(f"length mismatch: {self.current!r} vs {self.end!r}")

    def is_goal(self) -> bool:
        return self.current == self.end

    def neighbors(self) -> List[StringsConfig]:
        out: List[StringsConfig] = []
        s = self.current
        for i, ch in enumerate(s):
            for step in (-1, 1):
                out.append(StringsConfig(s[:i] + _shift(ch, step) + s[i + 1:], self.end))
        return out

    def render(self) -> str:
        return self.current


def random_word(length: int, rng: random.Random) -> str:
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def random_strings(length: int, seed: int) -> StringsConfig:
    rng = random.Random(seed)
    return StringsConfig(random_word(length, rng), random_word(length, rng))
