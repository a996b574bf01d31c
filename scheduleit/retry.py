"""Retry strategies deciding whether and when a failed job runs again."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta

_MICROSECOND = timedelta(microseconds=1)


def _check_attempt(attempt: int) -> None:
    if attempt < 0:
        raise ValueError(f"attempt must be non-negative, got {attempt}")


class RetryStrategy(ABC):
    """Decides whether a failed job is retried and how long to wait first."""

    @abstractmethod
    def should_retry(self, attempt: int) -> bool:
        """Return True if a job on the given (0-based) attempt may be retried."""

    @abstractmethod
    def backoff_delay(self, attempt: int) -> timedelta:
        """Return how long to wait before the given attempt."""


@dataclass(frozen=True)
class FixedRetryStrategy(RetryStrategy):
    """Retries after the same delay every time."""

    delay: timedelta

    def should_retry(self, attempt: int) -> bool:
        """Allow every retry; the job's own limit decides when to stop.

        Raises ValueError for a negative attempt.
        """
        _check_attempt(attempt)
        return True

    def backoff_delay(self, attempt: int) -> timedelta:
        return self.delay


@dataclass(frozen=True)
class ExponentialBackoffStrategy(RetryStrategy):
    """Doubles the delay on every attempt, starting at ``base_delay`` and capped at ``max_delay``."""

    base_delay: timedelta
    max_delay: timedelta

    def should_retry(self, attempt: int) -> bool:
        """Allow every retry; the job's own limit decides when to stop.

        Raises ValueError for a negative attempt.
        """
        _check_attempt(attempt)
        return True

    def backoff_delay(self, attempt: int) -> timedelta:
        """Return ``min(base_delay * 2**attempt, max_delay)``.

        Raises ValueError for a negative attempt.
        """
        _check_attempt(attempt)
        base_us = self.base_delay // _MICROSECOND
        cap_us = self.max_delay // _MICROSECOND
        return timedelta(microseconds=min(base_us << attempt, cap_us))