# wheelprimes/primes.py
# Public queries over the per-thread prime cache.

from __future__ import annotations
from fractions import Fraction
from itertools import takewhile
from typing import Iterator, List, Optional

from .config import get_growth
from .scope import borrow_cache, reset_cache

U64_MAX = (1 << 64) - 1


class Primes:
    """
    Endless ascending iterator over the primes. Each instance keeps its own
    position; all instances on a thread read the same cache.

    When the position runs past the cache, the cache is grown geometrically
    (last_prime * growth) so consuming N primes costs O(log N) extensions.
    """

    def __init__(self, growth: Optional[Fraction] = None):
        self.prime_index = 0
        self._growth = get_growth() if growth is None else Fraction(growth)

    def __iter__(self) -> "Primes":
        return self

    def __next__(self) -> int:
        with borrow_cache() as cache:
            # a reset can leave the position far past the end
            while self.prime_index >= len(cache):
                last = cache.last_prime
                target = (last * self._growth.numerator) // self._growth.denominator
                cache.extend_upto(max(target, last + 1))
            p = cache[self.prime_index]
        self.prime_index += 1
        return p


def primes() -> Primes:
    return Primes()


def primes_upto(limit: int) -> Iterator[int]:
    """Primes <= limit, ascending."""
    return takewhile(lambda p: p <= limit, Primes())


def nth_prime(k: int) -> int:
    """Zero-based: nth_prime(0) == 2."""
    if k < 0:
        raise ValueError("k must be >= 0")
    with borrow_cache() as cache:
        cache.extend_count(k + 1)
        return cache[k]


def is_prime(n: int) -> bool:
    with borrow_cache() as cache:
        cache.extend_upto(n)
        return cache.contains(n)


def factorize(n: int, factors: Optional[List[int]] = None) -> List[int]:
    """
    Prime factors of n, nondecreasing, written into `factors` (cleared first)
    and returned. n < 2 has no factorization; the result is [n].
    """
    if factors is None:
        factors = []
    factors.clear()
    if n < 2:
        factors.append(n)
        return factors

    k = n
    for p in Primes():
        if p * p > k:
            # nothing below sqrt(k) divides it, so k is prime
            factors.append(k)
            break
        while k % p == 0:
            factors.append(p)
            k //= p
        if k == 1:
            break
    return factors


def clear_prime_cache() -> None:
    reset_cache()
