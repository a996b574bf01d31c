import threading
import time
from datetime import timedelta

import pytest

from scheduleit.thread_pool import ThreadPool, ThreadPoolStoppedError


def test_executes_multiple_tasks_concurrently():
    pool = ThreadPool(4)
    counter = 0
    lock = threading.Lock()

    def task(index):
        nonlocal counter
        time.sleep(0.1)
        with lock:
            counter += 1
        return index

    futures = [pool.submit(task, index) for index in range(10)]

    time.sleep(0.5)
    pool.shutdown()

    assert sorted(future.result(timeout=5) for future in futures) == list(range(10))
    assert counter == 10


def test_enforces_max_queue_size():
    pool = ThreadPool(2, 2)
    counter = 0
    lock = threading.Lock()

    def task(index):
        nonlocal counter
        time.sleep(0.05)
        with lock:
            counter += 1
        return index * 10

    futures = [pool.submit(task, index) for index in range(4)]
    results = [future.result(timeout=5) for future in futures]

    pool.shutdown()
    assert results == [0, 10, 20, 30]
    assert counter == 4


def test_submit_returns_result_through_future():
    with ThreadPool(1) as pool:
        future = pool.submit(lambda a, b=0: a + b, 2, b=3)
        assert future.result(timeout=5) == 5


def test_task_exception_is_delivered_through_future():
    def boom():
        raise ValueError("boom")

    with ThreadPool(1) as pool:
        future = pool.submit(boom)
        with pytest.raises(ValueError, match="boom"):
            future.result(timeout=5)


def test_submit_after_shutdown_raises():
    pool = ThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError, match="ThreadPool is stopped"):
        pool.submit(lambda: None)
    with pytest.raises(ThreadPoolStoppedError):
        pool.submit_with_timeout(lambda: None, 10)


def test_shutdown_drains_queued_tasks():
    pool = ThreadPool(1)
    results = []
    for index in range(5):
        pool.submit(results.append, index)
    pool.shutdown()
    assert results == [0, 1, 2, 3, 4]


def test_submit_with_timeout_runs_fast_task():
    done = threading.Event()
    pool = ThreadPool(1)
    pool.submit_with_timeout(done.set, timedelta(seconds=1))
    pool.shutdown()
    assert done.is_set()


def test_submit_with_zero_timeout_runs_inline():
    results = []
    pool = ThreadPool(1)
    pool.submit_with_timeout(results.append, 0, "value")
    pool.shutdown()
    assert results == ["value"]


def test_submit_with_timeout_reports_timeout(capsys):
    pool = ThreadPool(1)
    pool.submit_with_timeout(time.sleep, 50, 0.5)
    pool.shutdown()
    assert "[ThreadPool] Task timed out." in capsys.readouterr().err


def test_submit_with_timeout_reports_exception(capsys):
    def boom():
        raise RuntimeError("boom")

    pool = ThreadPool(1)
    pool.submit_with_timeout(boom, 1000)
    pool.shutdown()
    assert "[ThreadPool] Task threw exception: boom" in capsys.readouterr().err


def test_worker_survives_failing_task(capsys):
    def boom():
        raise RuntimeError("bad")

    pool = ThreadPool(1)
    pool.submit_with_timeout(boom, 0)
    future = pool.submit(lambda: "still alive")
    assert future.result(timeout=5) == "still alive"
    pool.shutdown()
    assert "Task threw exception: bad" in capsys.readouterr().err