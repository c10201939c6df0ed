from __future__ import annotations

import threading

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter


class RateLimiter:
    """
    Fixed-window request counter per caller.

    A window starts on the first request after the previous one expired
    and lasts exactly ``window`` seconds; it does not slide.
    """

    def __init__(self, limit: int = 10, window: float = 60.0) -> None:
        self.limit = limit
        self.window = window
        self.item = RateLimitItemPerSecond(limit, int(window))
        self.storage = MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self.storage)
        self._lock = threading.Lock()

    def check_and_consume(self, caller_id: str) -> bool:
        """Count one request for ``caller_id``; ``False`` means throttled."""
        with self._lock:
            # test() first so a denied request leaves the counter alone.
            if not self._strategy.test(self.item, caller_id):
                return False
            return self._strategy.hit(self.item, caller_id)

    def remaining(self, caller_id: str) -> int:
        with self._lock:
            used = self.storage.get(self.item.key_for(caller_id))
            return max(0, self.limit - used)

    def reset(self) -> None:
        with self._lock:
            self.storage.reset()
