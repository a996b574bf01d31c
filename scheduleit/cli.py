"""Demonstration command that schedules a few jobs with different retry behaviour."""

from __future__ import annotations

import argparse
from datetime import timedelta
from typing import Callable, List, Optional, Sequence

from scheduleit.job import Job
from scheduleit.observer import Notifier
from scheduleit.retry import ExponentialBackoffStrategy, FixedRetryStrategy
from scheduleit.scheduler import JobScheduler

WORKER_COUNT = 4


def _flaky_task(message: str, succeed_on: int, error: str) -> Callable[[], None]:
    """Return a task that raises until its ``succeed_on``-th call."""
    attempts = 0

    def task() -> None:
        nonlocal attempts
        print(message)
        attempts += 1
        if attempts < succeed_on:
            raise RuntimeError(error)

    return task


def build_demo_jobs() -> List[Job]:
    """Return the three demo jobs: one that succeeds, one that fails once, one with exponential backoff."""
    retry_strategy = FixedRetryStrategy(timedelta(milliseconds=1000))
    exp_strategy = ExponentialBackoffStrategy(
        timedelta(milliseconds=100), timedelta(milliseconds=1000)
    )
    job1 = Job(
        "job-1",
        lambda: print("[Job 1] Executing..."),
        retry_strategy,
        timedelta(milliseconds=1000),
        2,
    )
    job2 = Job(
        "job-2",
        _flaky_task("[Job 2] Executing...", 2, "Simulated failure"),
        retry_strategy,
        timedelta(milliseconds=500),
        3,
    )
    job3 = Job(
        "job-3",
        _flaky_task("[Job 3] Executing (exponential)...", 4, "Exp job failed"),
        exp_strategy,
        timedelta(milliseconds=200),
        5,
    )
    return [job1, job2, job3]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo jobs to completion and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="scheduleit",
        description="Run a small demonstration of the job scheduler.",
    )
    parser.parse_args(argv)

    scheduler = JobScheduler(WORKER_COUNT)
    scheduler.executor.register_observer(Notifier())
    for job in build_demo_jobs():
        scheduler.submit(job)

    scheduler.start()
    scheduler.wait_for_idle()

    print("[Main] Shutting down scheduler...")
    scheduler.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())