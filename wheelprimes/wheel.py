# wheelprimes/wheel.py
# Modulo-30 wheel: candidates coprime to 2, 3 and 5, in ascending order.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

WHEEL_PRIMES = (2, 3, 5)
WHEEL_MODULUS = 30
WHEEL = (1, 7, 11, 13, 17, 19, 23, 29)

# (base=0, index=1) -> first candidate is 7, right after the seeded 2, 3, 5
START_BASE = 0
START_INDEX = 1


@dataclass
class WheelCursor:
    """Position on the wheel; the candidate is base + WHEEL[index]."""
    base: int = START_BASE
    index: int = START_INDEX

    @property
    def candidate(self) -> int:
        return self.base + WHEEL[self.index]

    def advance(self) -> int:
        """Return the current candidate and step past it."""
        c = self.base + WHEEL[self.index]
        self.index += 1
        if self.index == len(WHEEL):
            self.index = 0
            self.base += WHEEL_MODULUS
        return c

    def reset(self) -> None:
        self.base, self.index = START_BASE, START_INDEX


def wheel_candidates(start: Optional[WheelCursor] = None) -> Iterator[int]:
    # works on a copy; the caller's cursor is left alone
    cur = WheelCursor() if start is None else WheelCursor(start.base, start.index)
    while True:
        yield cur.advance()
