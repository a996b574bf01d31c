"""Coordinates the job queue, the executor and the worker pool."""

from __future__ import annotations

import sys
import threading
from datetime import timedelta
from typing import Optional

from scheduleit import utils
from scheduleit.executor import JobExecutor
from scheduleit.job import Job
from scheduleit.job_queue import JobQueue
from scheduleit.thread_pool import ThreadPool

_DISPATCH_IDLE_SLEEP = timedelta(milliseconds=100)
_IDLE_POLL_INTERVAL = timedelta(milliseconds=200)
_IDLE_THRESHOLD = 5


class JobScheduler:
    """Accepts jobs and dispatches them to a worker pool once they are due."""

    def __init__(self, num_workers: int) -> None:
        self._job_queue = JobQueue()
        self._thread_pool = ThreadPool(num_workers)
        self._executor = JobExecutor(self._job_queue)
        self._running = threading.Event()
        self._dispatcher: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def __enter__(self) -> "JobScheduler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    @property
    def executor(self) -> JobExecutor:
        """The executor that runs jobs; register observers on it."""
        return self._executor

    @property
    def running(self) -> bool:
        """True between start() and shutdown()."""
        return self._running.is_set()

    def start(self) -> None:
        """Start the dispatcher thread.

        Raises RuntimeError if the dispatcher is already running.
        """
        with self._lock:
            if self._dispatcher is not None and self._dispatcher.is_alive():
                raise RuntimeError("scheduler is already started")
            self._running.set()
            self._dispatcher = threading.Thread(
                target=self._dispatch_loop, name="scheduleit-dispatcher", daemon=True
            )
            self._dispatcher.start()

    def submit(self, job: Optional[Job]) -> None:
        """Queue a job for execution; None is ignored with a warning."""
        if job is None:
            print(
                "[JobScheduler] Warning: Attempted to submit null job. Ignoring.",
                file=sys.stderr,
            )
            return
        self._job_queue.enqueue(job)

    def shutdown(self) -> None:
        """Stop the dispatcher once outstanding work drains, then stop the pool."""
        self._running.clear()
        with self._lock:
            dispatcher = self._dispatcher
        if dispatcher is not None and dispatcher is not threading.current_thread():
            dispatcher.join()
        self._thread_pool.shutdown()

    def wait_for_idle(self) -> None:
        """Block until the queue, pending counter and active jobs stay quiet for several polls."""
        stable_count = 0
        while stable_count < _IDLE_THRESHOLD:
            if self._is_busy():
                stable_count = 0
            else:
                stable_count += 1
            utils.sleep_for_millis(_IDLE_POLL_INTERVAL)

    def _is_busy(self) -> bool:
        return (
            not self._job_queue.empty()
            or self._job_queue.pending_count > 0
            or self._executor.active_job_count > 0
        )

    def _dispatch_loop(self) -> None:
        while self._running.is_set() or self._is_busy():
            job = self._job_queue.dequeue_ready()
            if job is None:
                utils.sleep_for_millis(_DISPATCH_IDLE_SLEEP)
                continue
            self._thread_pool.submit(self._executor.run, job)