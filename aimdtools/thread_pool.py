"""A thread pool where each worker owns a bounded task queue."""

import os
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

TaskFunc = Callable[[Any], Any]


class _Worker:
    """One worker thread consuming its own bounded FIFO of tasks."""

    def __init__(self, pool: "ThreadPool", worker_id: int, capacity: int) -> None:
        self.worker_id = worker_id
        self._pool = pool
        self._capacity = capacity
        self._tasks: deque[tuple[TaskFunc, Any]] = deque()
        self._cond = threading.Condition()
        self._stopping = False
        self._thread = threading.Thread(
            target=self._run, name=f"threadpool-worker-{worker_id}", daemon=True
        )
        self._thread.start()

    def submit(self, func: TaskFunc, argument: Any) -> None:
        with self._cond:
            while len(self._tasks) >= self._capacity and not self._stopping:
                self._cond.wait()
            if self._stopping:
                raise RuntimeError("thread pool is closed")
            self._tasks.append((func, argument))
            self._cond.notify_all()

    def _run(self) -> None:
        while True:
            with self._cond:
                while not self._tasks and not self._stopping:
                    self._cond.wait()
                if self._stopping:
                    return
                # The running task keeps its slot until it finishes.
                func, argument = self._tasks[0]
            error: BaseException | None = None
            try:
                func(argument)
            except Exception as exc:  # reported through wait_job_done
                error = exc
            with self._cond:
                self._tasks.popleft()
                self._cond.notify_all()
            self._pool._task_finished(error)

    def stop(self) -> int:
        """Stop the thread and return how many queued tasks were dropped."""
        with self._cond:
            self._stopping = True
            self._cond.notify_all()
        self._thread.join()
        with self._cond:
            dropped = len(self._tasks)
            self._tasks.clear()
        return dropped


class ThreadPool:
    """Fixed set of worker threads, each with its own bounded task queue.

    A ``threadpool_size`` of 0 starts one worker per CPU. ``add_task`` blocks
    while the chosen worker's queue is full.
    """

    def __init__(self, threadpool_size: int = 0, task_queue_size: int = 4096) -> None:
        if threadpool_size < 0:
            raise ValueError("threadpool_size must be non-negative")
        if task_queue_size < 1:
            raise ValueError("task_queue_size must be at least 1")
        n_workers = threadpool_size or (os.cpu_count() or 1)
        self._active = 0
        self._error: BaseException | None = None
        self._idle = threading.Condition()
        self._closed = False
        self._workers = [_Worker(self, i, task_queue_size) for i in range(n_workers)]

    @property
    def n_workers(self) -> int:
        """Number of worker threads."""
        return len(self._workers)

    @property
    def n_active_tasks(self) -> int:
        """Tasks submitted and not yet finished."""
        with self._idle:
            return self._active

    def add_task(self, worker_id: int, func: TaskFunc, argument: Any = None) -> None:
        """Queue ``func(argument)`` on the worker ``worker_id``."""
        if self._closed:
            raise RuntimeError("thread pool is closed")
        if not 0 <= worker_id < len(self._workers):
            raise IndexError(f"worker id out of range: {worker_id}")
        with self._idle:
            self._active += 1
        try:
            self._workers[worker_id].submit(func, argument)
        except BaseException:
            self._release(1)
            raise

    def wait_job_done(self) -> None:
        """Block until every submitted task has finished.

        The first exception raised by a task since the last wait is re-raised.
        """
        with self._idle:
            while self._active:
                self._idle.wait()
            error, self._error = self._error, None
        if error is not None:
            raise error

    def close(self) -> None:
        """Stop all workers; tasks not yet started are discarded."""
        if self._closed:
            return
        self._closed = True
        for worker in self._workers:
            self._release(worker.stop())

    def _task_finished(self, error: BaseException | None) -> None:
        with self._idle:
            if error is not None and self._error is None:
                self._error = error
        self._release(1)

    def _release(self, count: int) -> None:
        if not count:
            return
        with self._idle:
            self._active -= count
            if not self._active:
                self._idle.notify_all()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()