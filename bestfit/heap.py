"""Best-Fit accelerated by a min-heap of bins ordered by used capacity."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator, Sequence

from .errors import AllocationFailure, InvariantViolation
from .schemas import PackingResult, ProblemConfig, validate_items
from .timing import Stopwatch

logger = logging.getLogger(__name__)

HEURISTIC_NAME = "best_fit_heap"


class BinHeap:
    """Binary min-heap of bin loads; the root is the least full bin.

    Only two operations mutate the heap: ``push`` for a new bin and
    ``increase`` for adding an item to an existing one. Both restore the
    heap order before returning, so every parent load is at most the loads
    of its children at all times.

    ``reserve`` slots are allocated up front; a packing of ``n`` items never
    opens more than ``n`` bins, so reserving ``n`` avoids growth mid-run.
    """

    def __init__(self, capacity: int, reserve: int = 0) -> None:
        self.capacity = capacity
        self._loads: list[int] = [0] * reserve
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError("heap index out of range")
        return self._loads[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._loads[: self._size])

    def peek(self) -> int:
        if not self._size:
            raise IndexError("peek from an empty heap")
        return self._loads[0]

    def children(self, index: int) -> Iterator[int]:
        for child in (2 * index + 1, 2 * index + 2):
            if child < self._size:
                yield child

    def push(self, load: int) -> int:
        """Add a bin with ``load`` used capacity and sift it up."""
        self._check_load(load)
        loads = self._loads
        index = self._size
        if index == len(loads):
            loads.append(load)
        self._size += 1
        while index > 0:
            parent = (index - 1) // 2
            if loads[parent] <= load:
                break
            loads[index] = loads[parent]
            index = parent
        loads[index] = load
        return index

    def increase(self, index: int, amount: int) -> int:
        """Add ``amount`` to the bin at ``index`` and sift it down."""
        loads = self._loads
        load = self[index] + amount
        self._check_load(load)
        size = self._size
        while True:
            smallest = index
            smallest_load = load
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and loads[child] < smallest_load:
                    smallest = child
                    smallest_load = loads[child]
            if smallest == index:
                break
            loads[index] = smallest_load
            index = smallest
        loads[index] = load
        return index

    def is_heap(self) -> bool:
        loads = self._loads
        return all(
            loads[(i - 1) // 2] <= loads[i] for i in range(1, self._size)
        )

    def _check_load(self, load: int) -> None:
        if load > self.capacity:
            raise InvariantViolation(
                f"Bin load {load} exceeds capacity {self.capacity}"
            )


def find_best_bin(heap: BinHeap, size: int) -> int | None:
    """Return the index of the fullest bin that can still take ``size``.

    Children are never lighter than their parent, so once a bin overflows
    its whole subtree does too and is skipped. Among equally tight fits the
    first one reached in breadth-first order wins.
    """

    capacity = heap.capacity
    if not heap or heap.peek() + size > capacity:
        return None

    best_index: int | None = None
    best_load = 0
    queue: deque[int] = deque([0])
    while queue:
        index = queue.popleft()
        load = heap[index] + size
        if load > capacity:
            continue
        if load > best_load:
            best_index = index
            best_load = load
        queue.extend(heap.children(index))
    return best_index


def best_fit_heap(items: Sequence[int], config: ProblemConfig) -> PackingResult:
    """Best-Fit where the candidate bin is located through a ``BinHeap``."""

    validate_items(items, config)
    try:
        heap = BinHeap(config.capacity, reserve=config.num_items)
    except MemoryError as exc:
        raise AllocationFailure("Cannot allocate bin heap") from exc

    with Stopwatch() as watch:
        for size in items:
            index = find_best_bin(heap, size)
            if index is None:
                heap.push(size)
            else:
                heap.increase(index, size)

    logger.debug(
        f"{HEURISTIC_NAME}: {config.num_items} items -> {len(heap)} bins "
        f"in {watch.elapsed:.6f}s"
    )
    return PackingResult(
        heuristic=HEURISTIC_NAME,
        num_bins=len(heap),
        elapsed=watch.elapsed,
        bin_loads=tuple(sorted(heap, reverse=True)),
    )
