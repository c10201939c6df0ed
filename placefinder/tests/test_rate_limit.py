from __future__ import annotations

import threading

from placefinder.search.rate_limit import RateLimiter


def test_allows_up_to_limit_then_denies(clock):
    limiter = RateLimiter(limit=10, window=60)
    assert all(limiter.check_and_consume("1.2.3.4") for _ in range(10))
    assert limiter.check_and_consume("1.2.3.4") is False


def test_allows_again_after_window(clock):
    limiter = RateLimiter(limit=10, window=60)
    for _ in range(10):
        limiter.check_and_consume("1.2.3.4")
    assert not limiter.check_and_consume("1.2.3.4")

    clock.advance(60)
    assert limiter.check_and_consume("1.2.3.4")
    assert limiter.remaining("1.2.3.4") == 9


def test_window_is_fixed_not_sliding(clock):
    limiter = RateLimiter(limit=2, window=60)
    assert limiter.check_and_consume("a")
    clock.advance(59)
    assert limiter.check_and_consume("a")
    assert not limiter.check_and_consume("a")
    # The window opened at t=0, so it is over at t=60 regardless of when
    # the last request arrived.
    clock.advance(1)
    assert limiter.check_and_consume("a")


def test_denied_requests_do_not_consume(clock):
    limiter = RateLimiter(limit=1, window=60)
    assert limiter.check_and_consume("a")
    for _ in range(5):
        assert not limiter.check_and_consume("a")
    assert limiter.remaining("a") == 0


def test_callers_have_separate_buckets(clock):
    limiter = RateLimiter(limit=1, window=60)
    assert limiter.check_and_consume("a")
    assert limiter.check_and_consume("b")
    assert not limiter.check_and_consume("a")


def test_remaining_and_reset(clock):
    limiter = RateLimiter(limit=3, window=60)
    assert limiter.remaining("a") == 3
    limiter.check_and_consume("a")
    assert limiter.remaining("a") == 2
    limiter.reset()
    assert limiter.remaining("a") == 3


def test_concurrent_callers_never_exceed_limit(clock):
    limiter = RateLimiter(limit=10, window=60)
    allowed: list[bool] = []
    lock = threading.Lock()
    barrier = threading.Barrier(50)

    def worker():
        barrier.wait()
        result = limiter.check_and_consume("shared")
        with lock:
            allowed.append(result)

    threads = [threading.Thread(target=worker) for _ in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(allowed) == 10
    assert len(allowed) == 50
