"""A fixed-size pool of worker threads running submitted callables."""

from __future__ import annotations

import sys
import threading
from collections import deque
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import timedelta
from typing import Any, Callable, Deque, List


class ThreadPoolStoppedError(RuntimeError):
    """Raised when a task is submitted to a pool that has been shut down."""


def _seconds(timeout: timedelta | int | float) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return timeout / 1000.0


def _run_into(future: Future, fn: Callable[..., Any], args: tuple, kwargs: dict) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        result = fn(*args, **kwargs)
    except BaseException as exc:  # noqa: BLE001 - delivered through the future
        future.set_exception(exc)
    else:
        future.set_result(result)


class ThreadPool:
    """Runs tasks on ``num_threads`` workers; ``max_queue_size`` of 0 means unbounded."""

    def __init__(self, num_threads: int, max_queue_size: int = 0) -> None:
        self._tasks: Deque[Callable[[], None]] = deque()
        self._lock = threading.Lock()
        self._task_available = threading.Condition(self._lock)
        self._queue_not_full = threading.Condition(self._lock)
        self._stopped = False
        self._max_queue_size = max_queue_size
        self._workers: List[threading.Thread] = [
            threading.Thread(target=self._worker_loop, name=f"scheduleit-worker-{index}", daemon=True)
            for index in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        Blocks while a bounded queue is full; raises ThreadPoolStoppedError after shutdown.
        """
        future: Future = Future()
        self._enqueue(lambda: _run_into(future, fn, args, kwargs))
        return future

    def submit_with_timeout(
        self,
        fn: Callable[..., Any],
        timeout: timedelta | int | float,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Queue a task that is abandoned if it runs longer than ``timeout``.

        ``timeout`` is a timedelta or a number of milliseconds; zero or less means no limit.
        """
        limit = _seconds(timeout)

        def wrapper() -> None:
            if limit <= 0:
                fn(*args, **kwargs)
                return
            future: Future = Future()
            runner = threading.Thread(
                target=_run_into, args=(future, fn, args, kwargs), daemon=True
            )
            runner.start()
            try:
                future.result(timeout=limit)
            except FutureTimeoutError:
                print("[ThreadPool] Task timed out.", file=sys.stderr)

        self._enqueue(wrapper)

    def shutdown(self) -> None:
        """Stop accepting tasks, let workers finish what is queued, and join them."""
        with self._lock:
            self._stopped = True
            self._task_available.notify_all()
            self._queue_not_full.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current and worker.is_alive():
                worker.join()

    def _enqueue(self, task: Callable[[], None]) -> None:
        with self._lock:
            if self._stopped:
                raise ThreadPoolStoppedError("ThreadPool is stopped")
            if self._max_queue_size > 0:
                self._queue_not_full.wait_for(
                    lambda: self._stopped or len(self._tasks) < self._max_queue_size
                )
                if self._stopped:
                    raise ThreadPoolStoppedError("ThreadPool is stopped")
            self._tasks.append(task)
            self._task_available.notify()

    def _worker_loop(self) -> None:
        while True:
            with self._lock:
                self._task_available.wait_for(lambda: self._stopped or bool(self._tasks))
                if self._stopped and not self._tasks:
                    return
                task = self._tasks.popleft()
                self._queue_not_full.notify()
            try:
                task()
            except Exception as exc:  # noqa: BLE001 - a failing task must not kill the worker
                print(f"[ThreadPool] Task threw exception: {exc}", file=sys.stderr)
            except BaseException:  # noqa: BLE001
                print("[ThreadPool] Task threw unknown exception.", file=sys.stderr)