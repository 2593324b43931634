# wheelprimes/scope.py
# One PrimeCache per thread, created on first use.

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from .cache import PrimeCache

log = logging.getLogger(__name__)

_local = threading.local()


class CacheBorrowError(RuntimeError):
    """The thread's prime cache was borrowed while already borrowed."""


def _thread_cache() -> PrimeCache:
    cache = getattr(_local, "cache", None)
    if cache is None:
        cache = _local.cache = PrimeCache()
        _local.held = False
        log.debug("prime cache created for thread %s", threading.current_thread().name)
    return cache


@contextmanager
def borrow_cache() -> Iterator[PrimeCache]:
    """
    Exclusive access to this thread's cache. Nested borrows are a bug and
    raise CacheBorrowError instead of handing out a second reference.
    """
    cache = _thread_cache()
    if _local.held:
        raise CacheBorrowError("prime cache is already borrowed on this thread")
    _local.held = True
    try:
        yield cache
    finally:
        _local.held = False


def reset_cache() -> None:
    with borrow_cache() as cache:
        cache.reset()
    log.debug("prime cache reset for thread %s", threading.current_thread().name)


def cache_stats() -> Dict[str, int]:
    with borrow_cache() as cache:
        return {"primes": len(cache), "last_prime": cache.last_prime}
