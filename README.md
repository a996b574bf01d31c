# scheduleit

A small in-process job scheduler. Jobs run after a delay on a pool of worker
threads; a job that raises is retried according to a retry strategy, and
observers are told about every success and failure.

## Installation

    pip install .

## Usage

```python
from datetime import timedelta

from scheduleit.job import Job
from scheduleit.observer import Notifier
from scheduleit.retry import FixedRetryStrategy
from scheduleit.scheduler import JobScheduler

scheduler = JobScheduler(4)
scheduler.executor.register_observer(Notifier())

job = Job(
    "report",
    lambda: print("building report"),
    FixedRetryStrategy(timedelta(seconds=1)),
    delay=timedelta(milliseconds=500),   # first run 500 ms from now
    max_retries=2,
)

scheduler.submit(job)
scheduler.start()
scheduler.wait_for_idle()
scheduler.shutdown()
```

Job delays and retry-strategy delays are `datetime.timedelta` values.
`JobScheduler` can also be used as a context manager; leaving the block calls
`shutdown()`, which waits for outstanding work to drain before stopping the
worker pool. Submitting `None` prints a warning and is ignored.

### Jobs

`Job(job_id, task, retry_strategy=None, delay=timedelta(0), max_retries=3)`
holds a callable and its retry state. `job.attempt` counts the retries made so
far; `job.should_retry()` is true while that count is below `max_retries` and
the job has a strategy that allows another try. A job with no strategy is
never retried.

### Retry strategies

- `FixedRetryStrategy(delay)` waits the same time before every retry.
- `ExponentialBackoffStrategy(base_delay, max_delay)` returns
  `base_delay * 2**attempt` for `backoff_delay(attempt)`, capped at
  `max_delay`.

Both raise `ValueError` for a negative attempt. When a job fails, its attempt
count is raised by one and the delay is taken for the new count, so the first
retry of an exponential job waits `base_delay * 2`. The worker that ran the
job waits out that delay before putting the job back on the queue.

### Observers

Subclass `scheduleit.observer.Observer` and implement `on_job_success(job)`
and `on_job_failed(job, attempt)`, then register it with
`scheduler.executor.register_observer(...)`. `on_job_failed` receives the
attempt count as it was when the job failed. `Notifier` prints each event
with a local timestamp: successes to standard output, failures to standard
error; `Notifier(out=..., err=...)` sends them to other streams.

### Lower-level pieces

- `scheduleit.job_queue.JobQueue` hands out jobs earliest scheduled time
  first; `dequeue_ready()` blocks until the first job is due and returns
  `None` when the queue is empty.
- `scheduleit.thread_pool.ThreadPool(num_threads, max_queue_size=0)` runs
  callables on worker threads. `submit(fn, *args, **kwargs)` returns a
  `concurrent.futures.Future` and blocks while a bounded queue is full;
  `submit_with_timeout(fn, timeout, *args, **kwargs)` abandons a task that
  runs longer than `timeout` (a `timedelta` or milliseconds; zero or less
  means no limit). Submitting after `shutdown()` raises
  `ThreadPoolStoppedError`.
- `scheduleit.executor.JobExecutor` runs a single job, notifies observers and
  re-queues it for retry.

## Commands

Run the demonstration, three jobs of which two fail and are retried:

    scheduleit

Measure throughput with many no-op jobs (500000 by default, one worker per
CPU unless told otherwise):

    scheduleit-benchmark --jobs 100000 --workers 4

The same measurement is available as `scheduleit.benchmark.run_benchmark(job_count, workers)`,
which returns a `BenchmarkResult` with `elapsed_ms` and `throughput`.

## What it does not do

Jobs live only in memory: nothing is stored, so queued jobs are lost when the
process ends. There are no recurring or calendar-based schedules; each job
runs once after its delay, plus any retries.