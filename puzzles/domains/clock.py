from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ClockConfig:
    """Hand on a clock with positions 1..hours; one move turns it one hour either way."""
    hours: int
    current: int
    end: int

    def __post_init__(self):
        if self.hours < 1:
            raise ValueError(f"hours must be positive, got {self.hours}")
        for name in ("current", "end"):
            v = getattr(self, name)
            if not 1 <= v <= self.hours:
                raise ValueError(f"{name}={v} is not on a {self.hours}-hour clock")

    def is_goal(self) -> bool:
        return self.current == self.end

    def neighbors(self) -> List[ClockConfig]:
        """Backward then forward, wrapping 1 <-> hours."""
        back = self.current - 1 if self.current > 1 else self.hours
        fwd = self.current + 1 if self.current < self.hours else 1
        return [ClockConfig(self.hours, back, self.end),
                ClockConfig(self.hours, fwd, self.end)]

    def render(self) -> str:
        return str(self.current)


def random_clock(hours: int, seed: int) -> ClockConfig:
    rng = random.Random(seed)
    return ClockConfig(hours, rng.randint(1, hours), rng.randint(1, hours))
