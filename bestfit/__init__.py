"""
Best-Fit Module

One-dimensional bin packing heuristics.

This module provides:
- Best-Fit with a linear scan and early bin retirement (O(n^2))
- Best-Fit located through a min-heap of bins (BinHeap)
- Best-Fit located through a remaining-capacity histogram (O(n*K))
- Next-Fit and Next-Fit-Decreasing baselines
- Packing verification and the L1 lower bound
"""

__version__ = "0.1.0"

from collections.abc import Callable, Sequence

from .errors import (
    AllocationFailure,
    InvalidConfiguration,
    InvalidItemSize,
    InvariantViolation,
    PackingError,
)
from .heap import BinHeap, best_fit_heap
from .linear import best_fit
from .lookup import CapacityHistogram, best_fit_lookup
from .next_fit import default_sort, descending_size, next_fit, next_fit_decreasing
from .schemas import PackingResult, ProblemConfig
from .verify import check_agreement, lower_bound, verify_packing

Heuristic = Callable[[Sequence[int], ProblemConfig], PackingResult]

BEST_FIT_FAMILY: dict[str, Heuristic] = {
    "best_fit": best_fit,
    "best_fit_heap": best_fit_heap,
    "best_fit_lookup": best_fit_lookup,
}

HEURISTICS: dict[str, Heuristic] = {
    **BEST_FIT_FAMILY,
    "next_fit": next_fit,
    "next_fit_decreasing": next_fit_decreasing,
}

__all__ = [
    "AllocationFailure",
    "BEST_FIT_FAMILY",
    "BinHeap",
    "CapacityHistogram",
    "HEURISTICS",
    "Heuristic",
    "InvalidConfiguration",
    "InvalidItemSize",
    "InvariantViolation",
    "PackingError",
    "PackingResult",
    "ProblemConfig",
    "best_fit",
    "best_fit_heap",
    "best_fit_lookup",
    "check_agreement",
    "default_sort",
    "descending_size",
    "lower_bound",
    "next_fit",
    "next_fit_decreasing",
    "verify_packing",
]
