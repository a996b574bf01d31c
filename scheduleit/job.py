"""A schedulable unit of work with retry state."""

from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from scheduleit import utils
from scheduleit.retry import RetryStrategy

Task = Callable[[], object]


class Job:
    """A task with an identifier, a scheduled time and retry bookkeeping."""

    def __init__(
        self,
        job_id: str,
        task: Optional[Task],
        retry_strategy: Optional[RetryStrategy] = None,
        delay: timedelta = timedelta(0),
        max_retries: int = 3,
    ) -> None:
        self.id = job_id
        self.task = task
        self.retry_strategy = retry_strategy
        self.max_retries = max_retries
        self._attempt = 0
        self._lock = threading.Lock()
        self.scheduled_time: datetime = utils.now() + delay

    def __repr__(self) -> str:
        return (
            f"Job(id={self.id!r}, attempt={self.attempt}, "
            f"max_retries={self.max_retries}, scheduled_time={self.scheduled_time!r})"
        )

    @property
    def attempt(self) -> int:
        """Number of retries made so far."""
        with self._lock:
            return self._attempt

    def reschedule(self, delay: timedelta) -> None:
        """Move the scheduled time to ``delay`` from now."""
        self.scheduled_time = utils.now() + delay

    def execute(self) -> None:
        """Run the task, if there is one; exceptions propagate to the caller."""
        if self.task is not None:
            self.task()

    def should_retry(self) -> bool:
        """Return True if attempts remain and the retry strategy allows another."""
        attempt = self.attempt
        return (
            attempt < self.max_retries
            and self.retry_strategy is not None
            and self.retry_strategy.should_retry(attempt)
        )

    def increment_attempt(self) -> None:
        """Count one more attempt."""
        with self._lock:
            self._attempt += 1