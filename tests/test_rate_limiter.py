"""
Tests for the fixed-window rate limiter.
"""

from login_finder.core.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestRateLimiter:
    """Test per-client request quotas."""

    def test_allows_up_to_limit_then_rejects(self):
        limiter = RateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())
        assert [limiter.hit("1.2.3.4") for _ in range(5)] == [True, True, True, False, False]

    def test_clients_are_independent(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
        assert limiter.hit("a")
        assert limiter.hit("b")
        assert not limiter.hit("a")

    def test_window_resets(self):
        clock = FakeClock()
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        assert limiter.hit("a")
        clock.now = 59.9
        assert not limiter.hit("a")
        clock.now = 60.0
        assert limiter.hit("a")
