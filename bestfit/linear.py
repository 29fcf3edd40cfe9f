"""Best-Fit with a linear scan over the open bins. O(n^2) worst case."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import AllocationFailure
from .schemas import PackingResult, ProblemConfig, resolve_min_size, validate_items
from .timing import Stopwatch

logger = logging.getLogger(__name__)

HEURISTIC_NAME = "best_fit"


def best_fit(items: Sequence[int], config: ProblemConfig) -> PackingResult:
    """Place each item into the fullest open bin that can still take it.

    Ties go to the bin scanned first. A bin whose load exceeds
    ``capacity - min_size`` can never take another item, so it is retired
    from the open list by moving the last open bin into its slot. This keeps
    the scan short without changing which bins are candidates.
    """

    validate_items(items, config)
    capacity = config.capacity
    limit = capacity - resolve_min_size(items, config)
    n = config.num_items

    try:
        open_loads = [0] * n    # used capacity per open slot
        open_ids = [0] * n      # bin id held by each open slot
        assignment = [0] * n
    except MemoryError as exc:
        raise AllocationFailure(f"Cannot allocate bin ledger for {n} items") from exc

    retired_loads: list[int] = []
    num_open = 0
    num_bins = 0

    with Stopwatch() as watch:
        for i, size in enumerate(items):
            best_slot = -1
            best_load = 0
            for j in range(num_open):
                load = open_loads[j] + size
                if load <= capacity and load > best_load:
                    best_slot = j
                    best_load = load

            if best_slot < 0:
                best_slot = num_open
                open_loads[best_slot] = size
                open_ids[best_slot] = num_bins
                num_open += 1
                num_bins += 1
            else:
                open_loads[best_slot] = best_load

            assignment[i] = open_ids[best_slot]

            if open_loads[best_slot] > limit:
                retired_loads.append(open_loads[best_slot])
                num_open -= 1
                open_loads[best_slot] = open_loads[num_open]
                open_ids[best_slot] = open_ids[num_open]

    loads = retired_loads + open_loads[:num_open]
    logger.debug(
        f"{HEURISTIC_NAME}: {n} items -> {num_bins} bins "
        f"({len(retired_loads)} retired) in {watch.elapsed:.6f}s"
    )
    return PackingResult(
        heuristic=HEURISTIC_NAME,
        num_bins=len(retired_loads) + num_open,
        elapsed=watch.elapsed,
        bin_loads=tuple(sorted(loads, reverse=True)),
        assignment=tuple(assignment),
    )
