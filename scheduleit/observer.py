"""Observers that are told about job outcomes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TextIO

from scheduleit import utils
from scheduleit.job import Job


class Observer(ABC):
    """Receives notifications about job successes and failures."""

    @abstractmethod
    def on_job_failed(self, job: Job, attempt: int) -> None:
        """Called when a job raised during execution."""

    @abstractmethod
    def on_job_success(self, job: Job) -> None:
        """Called when a job completed without raising."""


def _current_timestamp() -> str:
    since_epoch = utils.now().timestamp()
    return utils.timestamp_to_string(timedelta(seconds=since_epoch))


class Notifier(Observer):
    """Writes job events to the console: successes to stdout, failures to stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    def on_job_failed(self, job: Job, attempt: int) -> None:
        stream = self._err if self._err is not None else sys.stderr
        print(
            f"[Notifier] Job failed: {job.id} | Attempt: {attempt} | Time: {_current_timestamp()}",
            file=stream,
        )

    def on_job_success(self, job: Job) -> None:
        stream = self._out if self._out is not None else sys.stdout
        print(
            f"[Notifier] Job succeeded: {job.id} | Time: {_current_timestamp()}",
            file=stream,
        )