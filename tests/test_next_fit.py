from __future__ import annotations

from bestfit.next_fit import default_sort, descending_size, next_fit, next_fit_decreasing
from bestfit.schemas import ProblemConfig


def test_descending_size_three_way_contract() -> None:
    assert descending_size(5, 3) < 0
    assert descending_size(3, 5) > 0
    assert descending_size(4, 4) == 0


def test_default_sort_orders_largest_first() -> None:
    assert default_sort([2, 7, 1, 7, 3], descending_size) == [7, 7, 3, 2, 1]


def test_next_fit_only_looks_at_current_bin() -> None:
    items = [6, 5, 4, 3]
    result = next_fit(items, ProblemConfig.for_items(items, 10))

    # 4 would fit the first bin again, but Next-Fit closed it
    assert result.assignment == (0, 1, 1, 2)
    assert result.num_bins == 3
    assert result.bin_loads == (9, 6, 3)


def test_next_fit_decreasing_sorts_first() -> None:
    items = [2, 5, 4, 3, 1]
    result = next_fit_decreasing(items, ProblemConfig.for_items(items, 5))

    # 5 | 4 | 3 2 | 1  -> 5, 4, 5, 1
    assert result.num_bins == 4
    assert result.bin_loads == (5, 5, 4, 1)
    assert result.assignment is None


def test_next_fit_decreasing_uses_sort_callback() -> None:
    calls: list[list[int]] = []

    def recording_sort(items: list[int], compare) -> list[int]:
        calls.append(list(items))
        assert compare(9, 1) < 0
        return default_sort(items, compare)

    items = [1, 4, 4, 1]
    result = next_fit_decreasing(items, ProblemConfig.for_items(items, 5), sort=recording_sort)

    assert calls == [[1, 4, 4, 1]]
    assert result.num_bins == 3


def test_next_fit_decreasing_leaves_input_untouched() -> None:
    items = [1, 3, 2]
    next_fit_decreasing(items, ProblemConfig.for_items(items, 3))
    assert items == [1, 3, 2]
