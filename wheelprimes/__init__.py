from .primes import (
    U64_MAX,
    Primes,
    clear_prime_cache,
    factorize,
    is_prime,
    nth_prime,
    primes,
    primes_upto,
)
from .scope import CacheBorrowError
from .wheel import WHEEL, WHEEL_MODULUS, WHEEL_PRIMES

__all__ = [
    "U64_MAX", "Primes", "clear_prime_cache", "factorize", "is_prime", "nth_prime",
    "primes", "primes_upto", "CacheBorrowError", "WHEEL", "WHEEL_MODULUS", "WHEEL_PRIMES",
]
