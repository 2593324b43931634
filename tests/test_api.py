from __future__ import annotations

import pytest

from app import create_app
from wheelprimes.config import Settings


@pytest.fixture
def client():
    app = create_app(Settings(max_n=100_000, max_index=5_000, max_list=20))
    app.config["TESTING"] = True
    return app.test_client()


def test_home_page(client) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert b"wheelprimes" in r.data


def test_health_reports_cache(client) -> None:
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.get_json()
    assert body["ok"] is True
    assert body["cache"]["primes"] >= 3


def test_is_prime(client) -> None:
    r = client.get("/api/is_prime?n=97")
    assert r.status_code == 200
    assert r.get_json() == {"n": "97", "is_prime": True}
    assert "X-Compute-ms" in r.headers
    assert client.get("/api/is_prime?n=91").get_json()["is_prime"] is False


def test_nth_prime(client) -> None:
    r = client.get("/api/nth_prime?k=99")
    assert r.get_json() == {"k": 99, "prime": "541"}


def test_primes_listing(client) -> None:
    body = client.get("/api/primes?upto=30").get_json()
    assert body["primes"] == ["2", "3", "5", "7", "11", "13", "17", "19", "23", "29"]
    assert body["count"] == 10
    assert body["truncated"] is False


def test_primes_listing_is_truncated_at_limit(client) -> None:
    body = client.get("/api/primes?upto=1000&limit=5").get_json()
    assert body["primes"] == ["2", "3", "5", "7", "11"]
    assert body["truncated"] is True
    body = client.get("/api/primes?upto=1000").get_json()
    assert body["count"] == 20
    assert body["truncated"] is True


def test_factorize_get_and_post(client) -> None:
    body = client.get("/api/factorize?n=12").get_json()
    assert body["factors"] == ["2", "2", "3"]
    assert body["pretty"] == "12 = 2 × 2 × 3"
    body = client.post("/api/factorize", json={"n": 2 * 3 * 3 * 5 * 13}).get_json()
    assert body["factors"] == ["2", "3", "3", "5", "13"]


def test_factorize_below_two(client) -> None:
    assert client.get("/api/factorize?n=1").get_json()["factors"] == ["1"]


@pytest.mark.parametrize("url", [
    "/api/is_prime",
    "/api/is_prime?n=abc",
    "/api/is_prime?n=-7",
    "/api/is_prime?n=100001",
    "/api/is_prime?n=18446744073709551616",
    "/api/nth_prime?k=5001",
    "/api/primes?upto=10&limit=0x10",
    "/api/primes?upto=10&limit=21",
    "/api/factorize?n=",
])
def test_bad_parameters(client, url: str) -> None:
    r = client.get(url)
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_factorize_post_rejects_non_object(client) -> None:
    r = client.post("/api/factorize", data="[1, 2]", content_type="application/json")
    assert r.status_code == 400


def test_cache_clear(client) -> None:
    client.get("/api/nth_prime?k=200")
    r = client.post("/api/cache/clear")
    assert r.get_json() == {"ok": True}


@pytest.mark.parametrize("raw", ["1_000", "+5", " 12 3", "٣", "1e3"])
def test_only_plain_decimal_is_accepted(client, raw: str) -> None:
    r = client.get("/api/is_prime", query_string={"n": raw})
    assert r.status_code == 400
    assert r.get_json()["error"] == "n must be a decimal integer"


def test_negative_reports_range(client) -> None:
    r = client.get("/api/is_prime?n=-7")
    assert "64-bit" in r.get_json()["error"]
