"""Timing, sleeping and timestamp helpers."""

import time


def cpu_time() -> float:
    """Return the processor time used by this process, in seconds."""
    return time.process_time()


def wall_time() -> float:
    """Return a monotonic wall-clock reading, in seconds."""
    return time.monotonic()


def diff_time_ms(t1: float, t2: float) -> float:
    """Return ``t2 - t1`` in milliseconds, for readings in seconds."""
    return (t2 - t1) * 1e3


def sleep_ms(ms: float) -> None:
    """Sleep for ``ms`` milliseconds; negative durations raise ValueError."""
    time.sleep(ms * 1e-3)


def sleep_1ms() -> None:
    """Sleep for one millisecond."""
    time.sleep(0.001)


def sleep_5ms() -> None:
    """Sleep for five milliseconds."""
    time.sleep(0.005)


def current_time_str() -> str:
    """Return the local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())