from datetime import timedelta

import pytest

from scheduleit.cli import build_demo_jobs, main
from scheduleit.retry import ExponentialBackoffStrategy, FixedRetryStrategy


def test_demo_jobs_ids_and_retry_limits():
    jobs = build_demo_jobs()
    assert [job.id for job in jobs] == ["job-1", "job-2", "job-3"]
    assert [job.max_retries for job in jobs] == [2, 3, 5]


def test_demo_jobs_strategies():
    job1, job2, job3 = build_demo_jobs()
    assert job1.retry_strategy == FixedRetryStrategy(timedelta(milliseconds=1000))
    assert job2.retry_strategy is job1.retry_strategy
    assert job3.retry_strategy == ExponentialBackoffStrategy(
        timedelta(milliseconds=100), timedelta(milliseconds=1000)
    )


def test_demo_jobs_are_ordered_by_delay():
    job1, job2, job3 = build_demo_jobs()
    assert job3.scheduled_time < job2.scheduled_time < job1.scheduled_time


def test_job2_fails_once_then_succeeds(capsys):
    job2 = build_demo_jobs()[1]
    with pytest.raises(RuntimeError, match="Simulated failure"):
        job2.execute()
    job2.execute()
    assert capsys.readouterr().out.count("[Job 2] Executing...") == 2


def test_job3_fails_three_times_then_succeeds():
    job3 = build_demo_jobs()[2]
    failures = 0
    for _ in range(3):
        with pytest.raises(RuntimeError, match="Exp job failed"):
            job3.execute()
        failures += 1
    job3.execute()
    assert failures == 3


def test_main_runs_demo(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.count("[Job 1] Executing...") == 1
    assert captured.out.count("[Job 2] Executing...") == 2
    assert captured.out.count("[Job 3] Executing (exponential)...") == 4
    for job_id in ("job-1", "job-2", "job-3"):
        assert f"[Notifier] Job succeeded: {job_id}" in captured.out
    assert "[Notifier] Job failed: job-2 | Attempt: 0" in captured.err
    assert captured.out.rstrip().endswith("[Main] Shutting down scheduler...")


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])