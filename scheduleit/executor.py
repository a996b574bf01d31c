"""Runs jobs, notifies observers and re-queues failed jobs for retry."""

from __future__ import annotations

import threading
from typing import List, Optional, Tuple

from scheduleit import utils
from scheduleit.job import Job
from scheduleit.job_queue import JobQueue
from scheduleit.observer import Observer


class JobExecutor:
    """Executes jobs and applies their retry strategies on failure."""

    def __init__(self, job_queue: JobQueue) -> None:
        self._job_queue = job_queue
        self._observers: List[Observer] = []
        self._active_lock = threading.Lock()
        self._active_jobs = 0

    @property
    def active_job_count(self) -> int:
        """Number of jobs currently being run."""
        with self._active_lock:
            return self._active_jobs

    @property
    def observers(self) -> Tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._observers)

    def register_observer(self, observer: Optional[Observer]) -> None:
        """Add an observer to be notified of job outcomes; None is ignored."""
        if observer is not None:
            self._observers.append(observer)

    def run(self, job: Job) -> None:
        """Execute the job; on failure notify observers and re-queue it if it may retry."""
        self._change_active(1)
        try:
            try:
                job.execute()
            except Exception:
                for observer in self._observers:
                    observer.on_job_failed(job, job.attempt)
                self._schedule_retry(job)
            else:
                for observer in self._observers:
                    observer.on_job_success(job)
            self._job_queue.decrement_pending()
        finally:
            self._change_active(-1)

    def _schedule_retry(self, job: Job) -> None:
        if not job.should_retry():
            return
        job.increment_attempt()
        strategy = job.retry_strategy
        if strategy is None:
            return
        delay = strategy.backoff_delay(job.attempt)
        job.reschedule(delay)
        utils.sleep_for_millis(delay)
        self._job_queue.increment_pending()
        self._job_queue.enqueue(job)

    def _change_active(self, step: int) -> None:
        with self._active_lock:
            self._active_jobs += step