from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Mapping, Optional

Sleeper = Callable[[float], Awaitable[None]]


def _header_seconds(headers: Mapping[str, str], name: str) -> Optional[float]:
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


@dataclass(slots=True)
class RateLimitRetryPolicy:
    """
    Backoff for HTTP 429 responses.

    The wait before retry ``attempt`` (0-based) comes from the
    ``retry-after`` header, else ``ratelimit-reset``, else
    ``fallback_base_ms * (attempt + 1)``. ``sleep`` is injected so the
    policy can be exercised without real delays.
    """

    max_retries: int = 5
    fallback_base_ms: int = 500
    sleep: Sleeper = field(default=asyncio.sleep)

    @classmethod
    def from_settings(cls, settings) -> "RateLimitRetryPolicy":
        return cls(
            max_retries=settings.RATE_LIMIT_MAX_RETRIES,
            fallback_base_ms=settings.RATE_LIMIT_FALLBACK_MS,
        )

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_retries

    def delay_ms(self, attempt: int, headers: Mapping[str, str]) -> int:
        lowered = {str(k).lower(): v for k, v in headers.items()}
        for name in ("retry-after", "ratelimit-reset"):
            seconds = _header_seconds(lowered, name)
            if seconds is not None:
                return int(seconds * 1000)
        return self.fallback_base_ms * (attempt + 1)
