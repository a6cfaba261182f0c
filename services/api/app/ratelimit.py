"""Fixed-window admission control for the billed LLM endpoints.

State lives in process memory only, so the ceiling holds per instance, not
across a horizontally scaled deployment.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from app.settings import settings

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class RateRecord:
    count: int
    window_reset_at: int  # epoch ms


class RateLimiter(ABC):
    @abstractmethod
    def admit(self, key: str, now: Optional[int] = None) -> bool:
        """Return True if the request for ``key`` may proceed."""


class FixedWindowRateLimiter(RateLimiter):
    """Counts requests per key and resets the count once the window has passed.

    A client can burst up to twice the limit across a window boundary. When the
    table reaches ``max_keys`` records, expired ones are evicted before a new
    key is tracked.
    """

    def __init__(
        self,
        limit: int = 5,
        window_ms: int = 60_000,
        max_keys: int = 10_000,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.limit = limit
        self.window_ms = window_ms
        self.max_keys = max_keys
        self.clock = clock
        self.records: Dict[str, RateRecord] = {}

    def __len__(self) -> int:
        return len(self.records)

    def admit(self, key: str, now: Optional[int] = None) -> bool:
        now = self.clock() if now is None else now
        record = self.records.get(key)

        if record is None or now >= record.window_reset_at:
            if record is None and len(self.records) >= self.max_keys:
                self.evict_expired(now)
            self.records[key] = RateRecord(count=1, window_reset_at=now + self.window_ms)
            return True

        if record.count >= self.limit:
            return False

        record.count += 1
        return True

    def evict_expired(self, now: Optional[int] = None) -> int:
        """Drop records whose window has elapsed and return how many were removed."""
        now = self.clock() if now is None else now
        expired = [k for k, r in self.records.items() if now >= r.window_reset_at]
        for k in expired:
            del self.records[k]
        if expired:
            logger.debug("Evicted %d expired rate records", len(expired))
        return len(expired)

    def reset(self) -> None:
        self.records.clear()


lesson_limiter = FixedWindowRateLimiter(
    limit=settings.rate_limit_per_window,
    window_ms=settings.rate_limit_window_ms,
    max_keys=settings.rate_limit_max_keys,
)


def get_lesson_limiter() -> RateLimiter:
    return lesson_limiter
