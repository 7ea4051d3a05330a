"""
Tests for the file-backed per-client rate limiter.
"""
import json
import threading

import pytest

from leadcapture.core.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    return tmp_path / "limits" / "rate_limits.json"


def test_allows_up_to_limit_then_denies(store, clock):
    limiter = RateLimiter(max_requests=3, window=60, storage_path=str(store), clock=clock)

    assert [limiter.check_limit("1.2.3.4") for _ in range(3)] == [True, True, True]
    assert limiter.check_limit("1.2.3.4") is False
    assert limiter.remaining("1.2.3.4") == 0


def test_denied_requests_are_not_recorded(store, clock):
    limiter = RateLimiter(max_requests=1, window=60, storage_path=str(store), clock=clock)
    limiter.check_limit("ip")
    limiter.check_limit("ip")
    limiter.check_limit("ip")

    assert len(json.loads(store.read_text())["ip"]) == 1


def test_allows_again_after_window(store, clock):
    limiter = RateLimiter(max_requests=3, window=60, storage_path=str(store), clock=clock)
    for _ in range(3):
        limiter.check_limit("ip")
    assert limiter.check_limit("ip") is False

    clock.advance(60)
    assert limiter.check_limit("ip") is True


def test_keys_are_independent(store, clock):
    limiter = RateLimiter(max_requests=1, window=60, storage_path=str(store), clock=clock)
    assert limiter.check_limit("a") is True
    assert limiter.check_limit("b") is True
    assert limiter.check_limit("a") is False


def test_check_prunes_expired_keys(store, clock):
    limiter = RateLimiter(max_requests=5, window=60, storage_path=str(store), clock=clock)
    limiter.check_limit("old")
    clock.advance(61)
    limiter.check_limit("new")

    assert set(json.loads(store.read_text())) == {"new"}


def test_state_survives_new_instance(store, clock):
    RateLimiter(max_requests=1, window=60, storage_path=str(store), clock=clock).check_limit("ip")
    limiter = RateLimiter(max_requests=1, window=60, storage_path=str(store), clock=clock)

    assert limiter.check_limit("ip") is False


def test_reset_after(store, clock):
    limiter = RateLimiter(max_requests=2, window=60, storage_path=str(store), clock=clock)
    limiter.check_limit("ip")
    clock.advance(20)
    limiter.check_limit("ip")

    assert limiter.reset_after("ip") == 40
    assert limiter.reset_after("unknown") == 0


def test_corrupt_store_starts_fresh(store, clock):
    store.parent.mkdir(parents=True, exist_ok=True)
    store.write_text("{not json")
    limiter = RateLimiter(max_requests=1, window=60, storage_path=str(store), clock=clock)

    assert limiter.check_limit("ip") is True
    assert json.loads(store.read_text()) == {"ip": [clock.now]}


def test_concurrent_checks_never_exceed_limit(store, clock):
    limiter = RateLimiter(max_requests=10, window=60, storage_path=str(store), clock=clock)
    results = []

    def worker():
        for _ in range(5):
            results.append(limiter.check_limit("ip"))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 10
    assert results.count(False) == 10
