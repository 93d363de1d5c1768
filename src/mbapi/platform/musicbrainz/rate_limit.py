"""Where: src/mbapi/platform/musicbrainz/rate_limit.py
What: Thread-safe throttle adapting request spacing to MusicBrainz quota headers.
Why: MusicBrainz blocks clients that exceed their quota; without quota headers
     it asks for roughly 1 request per second.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Final

from mbapi.platform.logging import logger

from .errors import RateLimitQueueFullError

REMAINING_HEADER: Final[str] = "X-RateLimit-Remaining"
RESET_HEADER: Final[str] = "X-RateLimit-Reset"
FALLBACK_INTERVAL_SECONDS: Final[float] = 1.0


class RateLimiter:
    """Single-flight gate with a shared "not before" deadline.

    Callers enter ``slot()`` one at a time. Inside the slot the caller waits
    for the deadline, performs its request and reports the response headers
    through ``update()`` before the next caller is let in, so every caller
    computes its wait from the latest server feedback.

    Args:
        max_queue_size: Maximum number of callers inside or waiting for the
            gate. Additional callers are rejected immediately. ``None`` means
            unbounded.
        fallback_interval: Spacing applied when a response carries no quota
            header.
        clock: Returns the current Unix time in seconds.
        sleep: Blocks for the given number of seconds.
    """

    def __init__(
        self,
        max_queue_size: int | None = None,
        *,
        fallback_interval: float = FALLBACK_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_queue_size is not None and max_queue_size < 1:
            raise ValueError("max_queue_size must be positive or None")
        self._max_queue_size: int | None = max_queue_size
        self._fallback_interval: float = fallback_interval
        self._clock: Callable[[], float] = clock
        self._sleep: Callable[[float], None] = sleep
        self._gate: Final[threading.Lock] = threading.Lock()
        self._state_lock: Final[threading.Lock] = threading.Lock()
        self._pending: int = 0
        self._not_before: float = 0.0

    @property
    def max_queue_size(self) -> int | None:
        return self._max_queue_size

    @property
    def pending(self) -> int:
        """Number of callers currently admitted (running or waiting)."""

        with self._state_lock:
            return self._pending

    @property
    def not_before(self) -> float:
        """Unix time before which no request may start."""

        with self._state_lock:
            return self._not_before

    @contextmanager
    def slot(self) -> Iterator[None]:
        """Admit the caller, wait for the deadline and hold the gate.

        Raises:
            RateLimitQueueFullError: If ``max_queue_size`` callers are already
                admitted. Nothing is waited for in that case.
        """

        self._admit()
        try:
            with self._gate:
                self._wait_for_deadline()
                yield
        finally:
            with self._state_lock:
                self._pending -= 1

    def update(self, headers: Mapping[str, str]) -> None:
        """Move the deadline according to the quota headers of a response."""

        remaining = _header(headers, REMAINING_HEADER)
        if not remaining:
            self._set_deadline(self._clock() + self._fallback_interval)
            return

        if _parse_int(remaining, REMAINING_HEADER) != 0:
            return
        reset = _parse_int(_header(headers, RESET_HEADER), RESET_HEADER)
        if reset is not None and reset > self._clock():
            logger.debug(
                "MusicBrainz quota exhausted until %s",
                reset,
                extra={"request_event": "ratelimit.deadline"},
            )
            self._set_deadline(float(reset))

    def _admit(self) -> None:
        with self._state_lock:
            if self._max_queue_size is not None and self._pending >= self._max_queue_size:
                logger.warning(
                    "Rejecting request, rate limit queue is full",
                    extra={"request_event": "ratelimit.rejected"},
                )
                raise RateLimitQueueFullError(self._max_queue_size)
            self._pending += 1

    def _wait_for_deadline(self) -> None:
        delay = self.not_before - self._clock()
        if delay > 0:
            logger.info(
                "Waiting for MusicBrainz rate limit",
                extra={"request_event": "ratelimit.wait", "delay_seconds": delay},
            )
            self._sleep(delay)

    def _set_deadline(self, deadline: float) -> None:
        with self._state_lock:
            self._not_before = deadline


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup that also works for plain dicts."""

    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def _parse_int(value: str | None, header: str) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Ignoring malformed %s header: %r", header, value)
        return None


__all__ = [
    "FALLBACK_INTERVAL_SECONDS",
    "REMAINING_HEADER",
    "RESET_HEADER",
    "RateLimiter",
]
