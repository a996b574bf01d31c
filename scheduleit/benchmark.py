"""Throughput benchmark: submit many no-op jobs and time how long they take to drain."""

from __future__ import annotations

import argparse
import functools
import itertools
import os
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Sequence

from scheduleit.job import Job
from scheduleit.scheduler import JobScheduler

DEFAULT_JOB_COUNT = 500000


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark run."""

    job_count: int
    elapsed_ms: float

    @property
    def throughput(self) -> float:
        """Jobs completed per second."""
        if self.elapsed_ms <= 0:
            return float("inf")
        return self.job_count / self.elapsed_ms * 1000.0

    def __str__(self) -> str:
        return (
            f"Submitted and completed {self.job_count} jobs in "
            f"{int(self.elapsed_ms)} ms ({self.throughput:g} jobs/sec)"
        )


def run_benchmark(job_count: int = DEFAULT_JOB_COUNT, workers: Optional[int] = None) -> BenchmarkResult:
    """Run ``job_count`` near-empty jobs on ``workers`` threads (default: CPU count) and time them.

    Raises ValueError for a negative job count or a worker count below one.
    """
    if job_count < 0:
        raise ValueError(f"job_count must be non-negative, got {job_count}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    # Each job only ticks a shared counter, keeping the task as cheap as possible.
    tick = functools.partial(next, itertools.count())

    scheduler = JobScheduler(workers)
    start = time.perf_counter()
    try:
        for _ in range(job_count):
            scheduler.submit(Job("", tick, None, timedelta(0), 0))
        scheduler.start()
        scheduler.wait_for_idle()
        elapsed_ms = (time.perf_counter() - start) * 1000.0
    finally:
        scheduler.shutdown()
    return BenchmarkResult(job_count=job_count, elapsed_ms=elapsed_ms)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark and print its throughput."""
    parser = argparse.ArgumentParser(
        prog="scheduleit-benchmark",
        description="Measure how fast the scheduler drains no-op jobs.",
    )
    parser.add_argument("--jobs", type=_positive_int, default=DEFAULT_JOB_COUNT)
    parser.add_argument("--workers", type=_positive_int, default=None)
    args = parser.parse_args(argv)

    print(run_benchmark(args.jobs, args.workers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())