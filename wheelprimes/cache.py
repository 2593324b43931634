# wheelprimes/cache.py
# Incrementally extended list of primes, fed by the mod-30 wheel.

from __future__ import annotations
import logging
from bisect import bisect_left
from math import isqrt
from typing import List

from .wheel import WHEEL_PRIMES, WheelCursor

log = logging.getLogger(__name__)

# index of the first cached prime not on the wheel (7)
_FIRST_TESTED = len(WHEEL_PRIMES)


class PrimeCache:
    """
    Ascending list of every prime found so far plus the wheel cursor
    that yields the next untested candidate.

    The list only grows between resets. A candidate is prime iff no cached
    prime <= sqrt(candidate) divides it; all such primes are already cached
    because candidates arrive in ascending order.
    """

    def __init__(self) -> None:
        self.primes: List[int] = []
        self.cursor = WheelCursor()
        self.reset()

    def reset(self) -> None:
        self.primes[:] = WHEEL_PRIMES
        self.cursor.reset()

    @property
    def last_prime(self) -> int:
        return self.primes[-1]

    def __len__(self) -> int:
        return len(self.primes)

    def __getitem__(self, i: int) -> int:
        return self.primes[i]

    def contains(self, n: int) -> bool:
        i = bisect_left(self.primes, n)
        return i < len(self.primes) and self.primes[i] == n

    def snapshot(self) -> List[int]:
        return list(self.primes)

    # ---- extension ----

    def _is_new_prime(self, c: int) -> bool:
        # wheel candidates are coprime to 2, 3, 5 already
        bound = isqrt(c)
        primes = self.primes
        for i in range(_FIRST_TESTED, len(primes)):
            p = primes[i]
            if p > bound:
                return True
            if c % p == 0:
                return False
        return True

    def extend_upto(self, limit: int) -> None:
        """Grow until the largest cached prime is >= limit."""
        if limit <= self.primes[-1]:
            return
        before = len(self.primes)
        while True:
            c = self.cursor.advance()
            if self._is_new_prime(c):
                self.primes.append(c)
                if c >= limit:
                    break
        log.debug("extend_upto(%d): +%d primes, last=%d",
                  limit, len(self.primes) - before, self.primes[-1])

    def extend_count(self, count: int) -> None:
        """Grow until at least `count` primes are cached."""
        before = len(self.primes)
        if count <= before:
            return
        while len(self.primes) < count:
            c = self.cursor.advance()
            if self._is_new_prime(c):
                self.primes.append(c)
        log.debug("extend_count(%d): +%d primes, last=%d",
                  count, len(self.primes) - before, self.primes[-1])
