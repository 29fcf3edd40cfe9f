"""Next-Fit and Next-Fit-Decreasing baselines."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence

from .schemas import PackingResult, ProblemConfig, validate_items
from .timing import Stopwatch

logger = logging.getLogger(__name__)

Comparator = Callable[[int, int], int]
SortCallback = Callable[[list[int], Comparator], list[int]]


def descending_size(a: int, b: int) -> int:
    """Three-way comparison ordering larger items first."""
    return (a < b) - (a > b)


def default_sort(items: list[int], compare: Comparator) -> list[int]:
    return sorted(items, key=functools.cmp_to_key(compare))


def _next_fit_loop(items: Sequence[int], capacity: int) -> tuple[list[int], list[int]]:
    loads: list[int] = []
    assignment: list[int] = []
    for size in items:
        if not loads or loads[-1] + size > capacity:
            loads.append(size)
        else:
            loads[-1] += size
        assignment.append(len(loads) - 1)
    return loads, assignment


def next_fit(items: Sequence[int], config: ProblemConfig) -> PackingResult:
    """Keep a single open bin and close it as soon as an item does not fit."""

    validate_items(items, config)
    with Stopwatch() as watch:
        loads, assignment = _next_fit_loop(items, config.capacity)

    logger.debug(f"next_fit: {config.num_items} items -> {len(loads)} bins")
    return PackingResult(
        heuristic="next_fit",
        num_bins=len(loads),
        elapsed=watch.elapsed,
        bin_loads=tuple(sorted(loads, reverse=True)),
        assignment=tuple(assignment),
    )


def next_fit_decreasing(
    items: Sequence[int],
    config: ProblemConfig,
    sort: SortCallback | None = None,
) -> PackingResult:
    """Next-Fit over the items ordered by ``sort`` with ``descending_size``.

    ``sort`` receives a copy of the items and the comparator and returns the
    ordered list. The timed section covers both sorting and packing.
    """

    validate_items(items, config)
    sort = sort or default_sort
    with Stopwatch() as watch:
        ordered = sort(list(items), descending_size)
        loads, _ = _next_fit_loop(ordered, config.capacity)

    logger.debug(f"next_fit_decreasing: {config.num_items} items -> {len(loads)} bins")
    return PackingResult(
        heuristic="next_fit_decreasing",
        num_bins=len(loads),
        elapsed=watch.elapsed,
        bin_loads=tuple(sorted(loads, reverse=True)),
    )
