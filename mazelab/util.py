"""Small shared helpers: ordered edge pairs, a monotonic clock and a stopwatch."""

from __future__ import annotations

import logging
import time
from types import TracebackType

logger = logging.getLogger(__name__)


def ordered_pair(a: int, b: int) -> tuple[int, int]:
    """Return the two values as a tuple with the smaller one first."""
    return (b, a) if a > b else (a, b)


def current_nsecs() -> int:
    """Return a monotonic timestamp in nanoseconds."""
    return time.monotonic_ns()


class StopWatch:
    """Logs when a tagged section begins and how long it took.

    Nested stopwatches are shown with one ``|`` per live stopwatch.
    """

    _alive_count = 0

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.stopped = False
        self.start_ns = current_nsecs()
        StopWatch._alive_count += 1
        logger.debug("%s %s begin", self._prefix(), tag)

    @staticmethod
    def _prefix() -> str:
        return "|" * StopWatch._alive_count

    def stop(self) -> float:
        """Stop timing and log the elapsed time; return it in milliseconds.

        Stopping twice has no further effect.
        """
        elapsed_ms = (current_nsecs() - self.start_ns) / 1_000_000.0
        if self.stopped:
            return elapsed_ms
        self.stopped = True
        logger.debug("%s %s const %f ms", self._prefix(), self.tag, elapsed_ms)
        StopWatch._alive_count -= 1
        return elapsed_ms

    def __enter__(self) -> StopWatch:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()