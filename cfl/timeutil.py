"""Wall-clock time helpers."""

import time


def time_now() -> int:
    """Return the current real time in nanoseconds since the Unix epoch."""
    return time.time_ns()