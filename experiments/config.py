"""Benchmark configuration with YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, field_validator, model_validator

from bestfit import HEURISTICS
from bestfit.schemas import BaseSchema


class BenchmarkConfig(BaseSchema):
    """Configuration for a benchmark run over a set of instances."""

    run_id: str
    seed: int = 42
    capacity: int = Field(default=100, ge=1)

    # Instance source
    dataset: Literal["uniform", "weibull", "orlib"] = "uniform"
    num_instances: int = Field(default=10, ge=1)
    num_items: int = Field(default=1000, ge=0)
    min_item_size: int = Field(default=1, ge=1)
    max_item_size: int | None = Field(default=None, ge=1)
    weibull_shape: float = Field(default=2.0, gt=0)
    weibull_scale: float = Field(default=30.0, gt=0)
    orlib_files: list[str] | None = None

    heuristics: list[str] = Field(default_factory=lambda: list(HEURISTICS))
    verify: bool = True

    artifact_dir: str = "artifacts"

    @field_validator("heuristics")
    @classmethod
    def known_heuristics(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in HEURISTICS]
        if unknown:
            raise ValueError(
                f"Unknown heuristics {unknown}. Available: {sorted(HEURISTICS)}"
            )
        if not value:
            raise ValueError("At least one heuristic is required")
        return value

    @model_validator(mode="after")
    def item_sizes_fit_capacity(self) -> "BenchmarkConfig":
        max_size = self.max_item_size or self.capacity
        if not self.min_item_size <= max_size <= self.capacity:
            raise ValueError(
                f"Item size range [{self.min_item_size}, {max_size}] "
                f"must lie within [1, {self.capacity}]"
            )
        return self


def load_config(yaml_path: str | Path) -> BenchmarkConfig:
    """Load benchmark configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        BenchmarkConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or missing required fields
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

    try:
        return BenchmarkConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: BenchmarkConfig, yaml_path: str | Path) -> None:
    """Save benchmark configuration to YAML file for reproducibility."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.to_dict()

    with open(yaml_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
