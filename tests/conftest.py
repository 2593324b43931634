from __future__ import annotations

import pytest

from wheelprimes import clear_prime_cache


def naive_primes(limit: int) -> list[int]:
    # Reference enumeration: plain trial division by every prime found so far.
    ps: list[int] = []
    for candidate in range(2, limit + 1):
        if all(candidate % p != 0 for p in ps):
            ps.append(candidate)
    return ps


@pytest.fixture(autouse=True)
def fresh_cache():
    # Every test starts and ends with the thread's cache at its seed state.
    clear_prime_cache()
    yield
    clear_prime_cache()
