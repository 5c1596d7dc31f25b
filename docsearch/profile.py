"""Context managers that time blocks of code and report to stderr."""

from __future__ import annotations

import sys
import time
from typing import Any

_BANNER = "=" * 80

_NS_PER_SEC = 1_000_000_000
_NS_PER_MS = 1_000_000
_NS_PER_US = 1_000


def format_duration(nanoseconds: int) -> str:
    """Break a duration in nanoseconds into seconds, ms, us and ns parts."""
    if nanoseconds < 0:
        raise ValueError("duration must not be negative")
    seconds, rest = divmod(nanoseconds, _NS_PER_SEC)
    millis, rest = divmod(rest, _NS_PER_MS)
    micros, nanos = divmod(rest, _NS_PER_US)
    return f"{seconds} sec, {millis} mils {micros} mics {nanos} nans "


class LogDuration:
    """Print how long the enclosed block took when it ends."""

    def __init__(self, message: str = "") -> None:
        self.message = message + " | "
        self.elapsed_ns = 0
        self._start = 0

    def __enter__(self) -> LogDuration:
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed_ns = time.perf_counter_ns() - self._start
        sys.stderr.write(
            f"{_BANNER}\n{self.message}{format_duration(self.elapsed_ns)}\n{_BANNER}\n"
        )
        sys.stderr.flush()


class TotalDuration:
    """Accumulate durations of several blocks and report the sum in ms."""

    def __init__(self, message: str = "") -> None:
        self.message = message + ": "
        self.value = 0

    def add(self, nanoseconds: int) -> None:
        """Add a duration in nanoseconds to the total."""
        self.value += nanoseconds

    def report(self) -> str:
        """Write the total in milliseconds to stderr and return the line."""
        line = f"{self.message}{self.value // _NS_PER_MS} ms\n"
        sys.stderr.write(line)
        sys.stderr.flush()
        return line

    def __enter__(self) -> TotalDuration:
        return self

    def __exit__(self, *args: Any) -> None:
        self.report()


class AddDuration:
    """Add the time spent in the enclosed block to a TotalDuration."""

    def __init__(self, dest: TotalDuration) -> None:
        self.dest = dest
        self._start = 0

    def __enter__(self) -> AddDuration:
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, *args: Any) -> None:
        self.dest.add(time.perf_counter_ns() - self._start)