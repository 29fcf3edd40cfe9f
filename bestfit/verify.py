"""Checks applied to finished packings."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import InvariantViolation
from .schemas import PackingResult


def lower_bound(items: Sequence[int], capacity: int) -> int:
    """L1 lower bound: ceil(sum of items / capacity)."""
    return (sum(items) + capacity - 1) // capacity


def loads_from_assignment(
    items: Sequence[int],
    assignment: Sequence[int],
    num_bins: int,
) -> list[int]:
    """Sum item sizes per bin id, checking that every item has a valid bin."""

    if len(assignment) != len(items):
        raise InvariantViolation(
            f"Assignment covers {len(assignment)} of {len(items)} items"
        )
    loads = [0] * num_bins
    for index, (size, bin_id) in enumerate(zip(items, assignment)):
        if not 0 <= bin_id < num_bins:
            raise InvariantViolation(f"Item {index} assigned to unknown bin {bin_id}")
        loads[bin_id] += size
    return loads


def verify_packing(
    items: Sequence[int],
    capacity: int,
    result: PackingResult,
) -> None:
    """Raise ``InvariantViolation`` if ``result`` is not a valid packing of ``items``."""

    loads = list(result.bin_loads)
    if result.assignment is not None:
        assigned = loads_from_assignment(items, result.assignment, result.num_bins)
        if any(load == 0 for load in assigned):
            raise InvariantViolation(f"{result.heuristic}: assignment leaves a bin empty")
        if sorted(assigned, reverse=True) != loads:
            raise InvariantViolation(
                f"{result.heuristic}: bin loads disagree with the assignment"
            )

    if len(loads) != result.num_bins:
        raise InvariantViolation(
            f"{result.heuristic}: reported {result.num_bins} bins but has {len(loads)} loads"
        )
    if sum(loads) != sum(items):
        raise InvariantViolation(
            f"{result.heuristic}: packed {sum(loads)} units, expected {sum(items)}"
        )
    for load in loads:
        if not 0 < load <= capacity:
            raise InvariantViolation(
                f"{result.heuristic}: bin load {load} outside (0, {capacity}]"
            )

    low = lower_bound(items, capacity)
    if not low <= result.num_bins <= len(items):
        raise InvariantViolation(
            f"{result.heuristic}: {result.num_bins} bins outside [{low}, {len(items)}]"
        )


def check_agreement(results: Sequence[PackingResult]) -> None:
    """Raise ``InvariantViolation`` unless all results use the same number of bins."""

    counts = {result.heuristic: result.num_bins for result in results}
    if len(set(counts.values())) > 1:
        detail = ", ".join(f"{name}={count}" for name, count in counts.items())
        raise InvariantViolation(f"Best-Fit variants disagree: {detail}")
