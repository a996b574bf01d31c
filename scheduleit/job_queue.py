"""A thread-safe queue that hands out jobs once their scheduled time arrives."""

from __future__ import annotations

import heapq
import itertools
import threading
from datetime import datetime
from typing import List, Optional, Tuple

from scheduleit import utils
from scheduleit.job import Job

_Entry = Tuple[datetime, int, Job]


class JobQueue:
    """Priority queue of jobs ordered by scheduled time, earliest first."""

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._sequence = itertools.count()
        self._condition = threading.Condition()
        self._pending_lock = threading.Lock()
        self._pending_count = 0

    def __len__(self) -> int:
        with self._condition:
            return len(self._heap)

    def enqueue(self, job: Job) -> None:
        """Add a job and wake one waiting consumer."""
        with self._condition:
            heapq.heappush(self._heap, (job.scheduled_time, next(self._sequence), job))
            self._condition.notify()

    def dequeue_ready(self) -> Optional[Job]:
        """Wait until the earliest job is due and return it, or None if the queue is empty."""
        with self._condition:
            while self._heap:
                scheduled_time, _, job = self._heap[0]
                remaining = (scheduled_time - utils.now()).total_seconds()
                if remaining <= 0:
                    heapq.heappop(self._heap)
                    return job
                self._condition.wait(timeout=remaining)
            return None

    def empty(self) -> bool:
        """Return True if no jobs are queued."""
        with self._condition:
            return not self._heap

    def increment_pending(self) -> None:
        """Count one more job as pending."""
        with self._pending_lock:
            self._pending_count += 1

    def decrement_pending(self) -> None:
        """Count one job fewer as pending."""
        with self._pending_lock:
            self._pending_count -= 1

    @property
    def pending_count(self) -> int:
        """The current pending-job counter."""
        with self._pending_lock:
            return self._pending_count