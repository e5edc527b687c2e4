"""Retry delay policies: exponential backoff with optional jitter."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from datetime import timedelta


class BackoffKind(enum.Enum):
    """The pattern for computing backoff times."""

    NONE = "none"
    NO_JITTER = "no_jitter"
    FULL_JITTER = "full_jitter"
    EQUAL_JITTER = "equal_jitter"
    DECORRELATED_JITTER = "decorrelated_jitter"


@dataclass
class Backoff:
    """Decides how long to wait before a request is retried.

    A backoff is stateful: each call to :meth:`next_delay_duration` counts
    one attempt and advances the delay.
    """

    kind: BackoffKind
    max_attempts: int
    base_delay_ms: int
    max_delay_ms: int
    current_attempts: int = 0
    current_delay_ms: int = 0

    def next_delay_duration(self) -> timedelta | None:
        """Return the delay before the next retry, or None once attempts run out."""
        if self.current_attempts >= self.max_attempts:
            return None
        self.current_attempts += 1

        if self.kind is BackoffKind.NONE:
            return None

        if self.kind is BackoffKind.NO_JITTER:
            delay_ms = min(self.max_delay_ms, self.current_delay_ms)
            self.current_delay_ms <<= 1
        elif self.kind is BackoffKind.FULL_JITTER:
            capped = min(self.max_delay_ms, self.current_delay_ms)
            delay_ms = random.randrange(0, capped)
            self.current_delay_ms <<= 1
        elif self.kind is BackoffKind.EQUAL_JITTER:
            capped = min(self.max_delay_ms, self.current_delay_ms)
            half = capped >> 1
            delay_ms = random.randrange(0, half) + half
            self.current_delay_ms <<= 1
        else:
            spread = self.current_delay_ms * 3 - self.base_delay_ms
            delay_ms = random.randrange(0, spread) + self.base_delay_ms
            delay_ms = min(delay_ms, self.max_delay_ms)
            self.current_delay_ms = delay_ms

        return timedelta(milliseconds=delay_ms)

    def is_none(self) -> bool:
        """True if no backoff at all is wanted (usually: do not retry)."""
        return self.kind is BackoffKind.NONE

    @classmethod
    def no_backoff(cls) -> Backoff:
        """Don't wait; usually means the request should not be retried."""
        return cls(
            kind=BackoffKind.NONE,
            max_attempts=0,
            base_delay_ms=0,
            max_delay_ms=0,
        )

    @classmethod
    def no_jitter_backoff(cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int) -> Backoff:
        """Plain exponential backoff: min(max_delay, base_delay * 2 ** attempts)."""
        return cls(
            kind=BackoffKind.NO_JITTER,
            max_attempts=max_attempts,
            base_delay_ms=base_delay_ms,
            max_delay_ms=max_delay_ms,
            current_delay_ms=base_delay_ms,
        )

    @classmethod
    def full_jitter_backoff(cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int) -> Backoff:
        """Exponential backoff with a delay drawn uniformly below the cap."""
        if not (base_delay_ms > 0 and max_delay_ms > 0):
            raise ValueError("Both base_delay_ms and max_delay_ms must be positive")
        return cls(
            kind=BackoffKind.FULL_JITTER,
            max_attempts=max_attempts,
            base_delay_ms=base_delay_ms,
            max_delay_ms=max_delay_ms,
            current_delay_ms=base_delay_ms,
        )

    @classmethod
    def equal_jitter_backoff(cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int) -> Backoff:
        """Exponential backoff with a delay drawn between half the cap and the cap."""
        if not (base_delay_ms > 1 and max_delay_ms > 1):
            raise ValueError("Both base_delay_ms and max_delay_ms must be greater than 1")
        return cls(
            kind=BackoffKind.EQUAL_JITTER,
            max_attempts=max_attempts,
            base_delay_ms=base_delay_ms,
            max_delay_ms=max_delay_ms,
            current_delay_ms=base_delay_ms,
        )

    @classmethod
    def decorrelated_jitter_backoff(
        cls, base_delay_ms: int, max_delay_ms: int, max_attempts: int
    ) -> Backoff:
        """Delay drawn between base_delay and three times the previous delay, capped."""
        if not base_delay_ms > 0:
            raise ValueError("base_delay_ms must be positive")
        return cls(
            kind=BackoffKind.DECORRELATED_JITTER,
            max_attempts=max_attempts,
            base_delay_ms=base_delay_ms,
            max_delay_ms=max_delay_ms,
            current_delay_ms=base_delay_ms,
        )


def default_region_backoff() -> Backoff:
    """Backoff used when retrying region errors."""
    return Backoff.no_jitter_backoff(2, 500, 10)


def optimistic_backoff() -> Backoff:
    """Backoff used by optimistic transactions."""
    return Backoff.no_jitter_backoff(2, 500, 10)


def pessimistic_backoff() -> Backoff:
    """Backoff used by pessimistic transactions."""
    return Backoff.no_backoff()