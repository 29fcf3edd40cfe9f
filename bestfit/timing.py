"""Processor-time measurement around a packing loop."""

from __future__ import annotations

import time
from types import TracebackType


class Stopwatch:
    """Context manager measuring processor time spent inside the block.

    Example:
        >>> with Stopwatch() as watch:
        ...     pack()
        >>> watch.elapsed
    """

    def __init__(self) -> None:
        self.elapsed: float = 0.0
        self._start: float | None = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.process_time()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._start is not None:
            self.elapsed = time.process_time() - self._start
            self._start = None
