from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvalidConfiguration, InvalidItemSize


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_json(self) -> str:
        return self.model_dump_json()

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_json(cls: type[TBaseSchema], data: str) -> TBaseSchema:
        return cls.model_validate_json(data)

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class ProblemConfig(BaseSchema):
    """Parameters of one bin packing instance.

    ``min_size`` only matters to the linear variant, which uses it to retire
    bins that no remaining item could fit into. When it is omitted the
    smallest item of the packed sequence is used.
    """

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(ge=1)
    num_items: int = Field(ge=0)
    min_size: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def min_size_within_capacity(self) -> "ProblemConfig":
        if self.min_size is not None and self.min_size > self.capacity:
            raise ValueError(
                f"min_size ({self.min_size}) cannot exceed capacity ({self.capacity})"
            )
        return self

    @classmethod
    def for_items(cls, items: Sequence[int], capacity: int) -> "ProblemConfig":
        """Build the configuration describing ``items`` packed into ``capacity``.

        ``min_size`` is only recorded when the smallest item is a legal size;
        otherwise it is left unset so that item validation reports the
        offending item instead of the config failing to build.
        """
        smallest = min(
            (s for s in items if isinstance(s, int) and not isinstance(s, bool)),
            default=None,
        )
        if smallest is not None and not 1 <= smallest <= capacity:
            smallest = None
        return cls(capacity=capacity, num_items=len(items), min_size=smallest)


@dataclass(frozen=True)
class PackingResult:
    """Outcome of a single heuristic run.

    ``bin_loads`` holds the used capacity of every non-empty bin, largest
    first. ``assignment`` maps item index to bin id and is only produced by
    heuristics that keep stable bin identities.
    """

    heuristic: str
    num_bins: int
    elapsed: float
    bin_loads: tuple[int, ...]
    assignment: tuple[int, ...] | None = None


def validate_items(items: Sequence[int], config: ProblemConfig) -> None:
    """Reject the whole call before any bin is opened."""

    if len(items) != config.num_items:
        raise InvalidConfiguration(
            f"Expected {config.num_items} items, got {len(items)}"
        )
    for index, size in enumerate(items):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidItemSize(index, size, config.capacity)
        if size < 1 or size > config.capacity:
            raise InvalidItemSize(index, size, config.capacity)


def resolve_min_size(items: Sequence[int], config: ProblemConfig) -> int:
    """Return the retirement threshold size, checking it against the items."""

    smallest = min(items) if items else config.capacity
    if config.min_size is None:
        return smallest
    if config.min_size > smallest:
        raise InvalidConfiguration(
            f"min_size ({config.min_size}) exceeds the smallest item ({smallest})"
        )
    return config.min_size
