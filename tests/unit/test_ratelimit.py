"""Tests for the fixed-window rate limiter."""

from __future__ import annotations

import pytest

from dolc.runtime.ratelimit import RateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:
    def test_allows_up_to_limit(self) -> None:
        limiter = RateLimiter(max_requests=3, window_seconds=60.0, clock=FakeClock())
        assert [limiter.check("a") for _ in range(4)] == [True, True, True, False]

    def test_keys_are_independent(self) -> None:
        limiter = RateLimiter(max_requests=1, window_seconds=60.0, clock=FakeClock())
        assert limiter.check("a")
        assert limiter.check("b")
        assert not limiter.check("a")

    def test_window_resets(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_requests=1, window_seconds=10.0, clock=clock)
        assert limiter.check("a")
        assert not limiter.check("a")
        clock.now = 10.5
        assert limiter.check("a")

    def test_reset_clears_windows(self) -> None:
        limiter = RateLimiter(max_requests=1, clock=FakeClock())
        limiter.check("a")
        limiter.reset()
        assert limiter.check("a")

    def test_rejects_non_positive_limit(self) -> None:
        with pytest.raises(ValueError):
            RateLimiter(max_requests=0)
