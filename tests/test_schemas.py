import pytest
from pydantic import ValidationError

from bestfit.errors import InvalidConfiguration, InvalidItemSize
from bestfit.schemas import ProblemConfig, resolve_min_size, validate_items


def test_problem_config_roundtrip() -> None:
    config = ProblemConfig(capacity=100, num_items=3, min_size=5)

    restored = ProblemConfig.from_json(config.to_json())

    assert restored == config
    assert config.to_dict() == {"capacity": 100, "num_items": 3, "min_size": 5}


def test_problem_config_for_items() -> None:
    config = ProblemConfig.for_items([4, 3, 2, 2], capacity=5)

    assert config.num_items == 4
    assert config.min_size == 2
    assert config.capacity == 5


def test_problem_config_for_empty_items() -> None:
    config = ProblemConfig.for_items([], capacity=5)

    assert config.num_items == 0
    assert config.min_size is None


@pytest.mark.parametrize("items", [[0, 2], [6], [3, -1]])
def test_problem_config_for_items_leaves_illegal_minimum_unset(items: list[int]) -> None:
    config = ProblemConfig.for_items(items, capacity=5)

    assert config.num_items == len(items)
    assert config.min_size is None
    with pytest.raises(InvalidItemSize):
        validate_items(items, config)


@pytest.mark.parametrize(
    "payload",
    [
        {"capacity": 0, "num_items": 1},
        {"capacity": 5, "num_items": -1},
        {"capacity": 5, "num_items": 1, "min_size": 0},
        {"capacity": 5, "num_items": 1, "min_size": 6},
    ],
)
def test_problem_config_rejects_bad_values(payload: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        _ = ProblemConfig.from_dict(payload)


def test_problem_config_is_frozen() -> None:
    config = ProblemConfig(capacity=5, num_items=1)
    with pytest.raises(ValidationError):
        config.capacity = 10  # type: ignore[misc]


@pytest.mark.parametrize("bad_size", [0, 6, -1])
def test_validate_items_rejects_out_of_range(bad_size: int) -> None:
    items = [1, bad_size, 2]
    config = ProblemConfig(capacity=5, num_items=3)

    with pytest.raises(InvalidItemSize) as excinfo:
        validate_items(items, config)

    assert excinfo.value.index == 1
    assert excinfo.value.size == bad_size
    assert excinfo.value.capacity == 5


def test_validate_items_rejects_non_integers() -> None:
    config = ProblemConfig(capacity=5, num_items=2)
    with pytest.raises(InvalidItemSize):
        validate_items([1, 2.5], config)  # type: ignore[list-item]
    with pytest.raises(InvalidItemSize):
        validate_items([1, True], config)


def test_validate_items_rejects_count_mismatch() -> None:
    config = ProblemConfig(capacity=5, num_items=4)
    with pytest.raises(InvalidConfiguration):
        validate_items([1, 2, 3], config)


def test_invalid_item_size_is_value_error() -> None:
    config = ProblemConfig(capacity=5, num_items=1)
    with pytest.raises(ValueError):
        validate_items([9], config)


def test_resolve_min_size() -> None:
    items = [4, 3, 2, 2]
    assert resolve_min_size(items, ProblemConfig(capacity=5, num_items=4)) == 2
    assert resolve_min_size(items, ProblemConfig(capacity=5, num_items=4, min_size=1)) == 1
    with pytest.raises(InvalidConfiguration):
        resolve_min_size(items, ProblemConfig(capacity=5, num_items=4, min_size=3))
