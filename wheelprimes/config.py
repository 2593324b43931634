# wheelprimes/config.py
# Environment-driven settings (WHEELPRIMES_*).

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from fractions import Fraction
from typing import Mapping, Optional

log = logging.getLogger(__name__)

DEFAULT_GROWTH = Fraction(3, 2)


@dataclass(frozen=True)
class Settings:
    growth: Fraction = DEFAULT_GROWTH
    max_n: int = 10_000_000
    max_index: int = 1_000_000
    max_list: int = 10_000
    host: str = "127.0.0.1"
    port: int = 8082
    log_level: str = "INFO"


def _int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        v = int(raw.replace("_", ""))
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if v < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {v}")
    return v


def _growth(env: Mapping[str, str]) -> Fraction:
    raw = (env.get("WHEELPRIMES_GROWTH") or "").strip()
    if not raw:
        return DEFAULT_GROWTH
    try:
        g = Fraction(raw)
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"WHEELPRIMES_GROWTH must be a number like 3/2 or 1.5, got {raw!r}") from None
    if not (1 < g <= 2):
        raise ValueError(f"WHEELPRIMES_GROWTH must be in (1, 2], got {raw!r}")
    return g


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    level = (env.get("WHEELPRIMES_LOG_LEVEL") or "INFO").strip().upper()
    return Settings(
        growth=_growth(env),
        max_n=_int(env, "WHEELPRIMES_MAX_N", Settings.max_n, minimum=2),
        max_index=_int(env, "WHEELPRIMES_MAX_INDEX", Settings.max_index),
        max_list=_int(env, "WHEELPRIMES_MAX_LIST", Settings.max_list, minimum=1),
        host=(env.get("WHEELPRIMES_HOST") or Settings.host).strip(),
        port=_int(env, "WHEELPRIMES_PORT", Settings.port, minimum=1),
        log_level=level,
    )


_settings: Optional[Settings] = None
_growth_cache: Optional[Fraction] = None


def get_growth() -> Fraction:
    """
    Growth factor for primes(); reads only WHEELPRIMES_GROWTH so the prime
    queries never fail on the HTTP settings. A malformed value falls back
    to 3/2 with a warning.
    """
    global _growth_cache
    if _growth_cache is None:
        try:
            _growth_cache = _growth(os.environ)
        except ValueError as e:
            log.warning("%s; using %s", e, DEFAULT_GROWTH)
            _growth_cache = DEFAULT_GROWTH
    return _growth_cache


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def clear_settings_cache() -> None:
    global _settings, _growth_cache
    _settings = None
    _growth_cache = None


def reload_settings() -> Settings:
    clear_settings_cache()
    return get_settings()
