# wheelprimes/api.py
# Flask blueprint exposing the prime queries as JSON endpoints.

from __future__ import annotations
import time
from itertools import islice
from typing import Optional

from flask import Blueprint, current_app, jsonify, request

from .config import Settings, get_settings
from .primes import U64_MAX, clear_prime_cache, factorize, is_prime, nth_prime, primes_upto
from .scope import cache_stats

primes_bp = Blueprint("primes_bp", __name__)


class _BadParam(ValueError):
    pass


# ------------------ helpers ------------------
def _settings() -> Settings:
    return current_app.config.get("WHEELPRIMES_SETTINGS") or get_settings()


def _uint(raw, name: str, cap: Optional[int] = None) -> int:
    s = str(raw if raw is not None else "").strip()
    if not s:
        raise _BadParam(f"missing {name}")
    if s.startswith("-") and s[1:].isascii() and s[1:].isdigit():
        raise _BadParam(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    # plain ASCII decimal only: no sign, no underscores, no other scripts' digits
    if not (s.isascii() and s.isdigit()):
        raise _BadParam(f"{name} must be a decimal integer")
    v = int(s)
    if v > U64_MAX:
        raise _BadParam(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")
    if cap is not None and v > cap:
        raise _BadParam(f"{name} too large; cap is {cap}")
    return v


def _bad(e: _BadParam):
    current_app.logger.warning("%s %s rejected: %s", request.method, request.path, e)
    return jsonify(error=str(e)), 400


def _timed(payload: dict, t0: float):
    ms = int((time.perf_counter() - t0) * 1000)
    current_app.logger.info("%s %s done in %d ms", request.method, request.path, ms)
    d = jsonify(payload)
    d.headers["X-Compute-ms"] = str(ms)
    return d


def _factor_payload(n: int) -> dict:
    fs = factorize(n)
    return {"n": str(n), "factors": [str(p) for p in fs],
            "pretty": f"{n} = " + " × ".join(str(p) for p in fs)}


# ------------------ API ------------------
@primes_bp.get("/api/health")
def health():
    return jsonify({"ok": True, "cache": cache_stats()})


@primes_bp.get("/api/is_prime")
def api_is_prime():
    t0 = time.perf_counter()
    try:
        n = _uint(request.args.get("n"), "n", _settings().max_n)
    except _BadParam as e:
        return _bad(e)
    return _timed({"n": str(n), "is_prime": is_prime(n)}, t0)


@primes_bp.get("/api/nth_prime")
def api_nth_prime():
    t0 = time.perf_counter()
    try:
        k = _uint(request.args.get("k"), "k", _settings().max_index)
    except _BadParam as e:
        return _bad(e)
    return _timed({"k": k, "prime": str(nth_prime(k))}, t0)


@primes_bp.get("/api/primes")
def api_primes():
    t0 = time.perf_counter()
    cfg = _settings()
    try:
        upto = _uint(request.args.get("upto"), "upto", cfg.max_n)
        limit = cfg.max_list
        if request.args.get("limit") not in (None, ""):
            limit = _uint(request.args.get("limit"), "limit", cfg.max_list)
    except _BadParam as e:
        return _bad(e)
    # one extra to tell whether the listing was cut short
    ps = list(islice(primes_upto(upto), limit + 1))
    truncated = len(ps) > limit
    ps = ps[:limit]
    return _timed({"upto": str(upto), "count": len(ps),
                   "primes": [str(p) for p in ps], "truncated": truncated}, t0)


@primes_bp.get("/api/factorize")
def api_factorize_query():
    t0 = time.perf_counter()
    try:
        n = _uint(request.args.get("n"), "n", _settings().max_n)
    except _BadParam as e:
        return _bad(e)
    return _timed(_factor_payload(n), t0)


@primes_bp.post("/api/factorize")
def api_factorize():
    t0 = time.perf_counter()
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        n = _uint(data.get("n"), "n", _settings().max_n)
    except _BadParam as e:
        return _bad(e)
    return _timed(_factor_payload(n), t0)


@primes_bp.post("/api/cache/clear")
def api_cache_clear():
    clear_prime_cache()
    return jsonify({"ok": True})
