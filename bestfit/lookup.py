"""Best-Fit driven by a histogram of remaining capacities. O(n*K)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import AllocationFailure, InvariantViolation
from .schemas import PackingResult, ProblemConfig, validate_items
from .timing import Stopwatch

logger = logging.getLogger(__name__)

HEURISTIC_NAME = "best_fit_lookup"


class CapacityHistogram:
    """Counts bins by their exact remaining capacity.

    ``counts[c]`` is the number of bins with ``c`` units left. All
    ``num_bins`` bins start empty in bucket ``capacity``; placing an item
    only moves a bin between buckets, so the total never changes.
    """

    def __init__(self, capacity: int, num_bins: int) -> None:
        self.capacity = capacity
        try:
            self.counts = [0] * (capacity + 1)
        except MemoryError as exc:
            raise AllocationFailure(
                f"Cannot allocate histogram for capacity {capacity}"
            ) from exc
        self.counts[capacity] = num_bins

    def total(self) -> int:
        return sum(self.counts)

    def used_bins(self) -> int:
        """Bins holding at least one item (everything below ``capacity``)."""
        return sum(self.counts[: self.capacity])

    def tightest_fit(self, size: int) -> int:
        """Smallest remaining capacity ``>= size`` that some bin has."""
        counts = self.counts
        remaining = size
        while remaining <= self.capacity:
            if counts[remaining]:
                return remaining
            remaining += 1
        raise InvariantViolation(
            f"No bin with room for an item of size {size}"
        )

    def place(self, size: int) -> int:
        """Put an item into the tightest fitting bin; return its old remaining capacity."""
        remaining = self.tightest_fit(size)
        self.counts[remaining] -= 1
        self.counts[remaining - size] += 1
        return remaining

    def loads(self) -> list[int]:
        """Used capacity of every non-empty bin, largest first."""
        loads: list[int] = []
        for remaining in range(self.capacity):
            loads.extend([self.capacity - remaining] * self.counts[remaining])
        return loads


def best_fit_lookup(items: Sequence[int], config: ProblemConfig) -> PackingResult:
    """Best-Fit where each bin is found by scanning a ``CapacityHistogram``.

    One bin per item is preallocated, which is always enough.
    """

    validate_items(items, config)
    histogram = CapacityHistogram(config.capacity, config.num_items)

    with Stopwatch() as watch:
        for size in items:
            histogram.place(size)

    num_bins = histogram.used_bins()
    logger.debug(
        f"{HEURISTIC_NAME}: {config.num_items} items -> {num_bins} bins "
        f"in {watch.elapsed:.6f}s"
    )
    return PackingResult(
        heuristic=HEURISTIC_NAME,
        num_bins=num_bins,
        elapsed=watch.elapsed,
        bin_loads=tuple(histogram.loads()),
    )
