"""Problem instances for the packing heuristics.

Sources:
- Uniform random items, as produced by the classic benchmark driver
- Weibull-distributed items (many small, few large)
- OR-Library Falkenauer files
- Plain item files (whitespace separated integers)

OR-Library format:
- Line 1: Number of test problems (P)
- For each problem:
    - Problem identifier
    - Bin capacity, Number of items (n), Best known solution
    - For each item: size of the item

References:
- OR-Library: http://people.brunel.ac.uk/~mastjjb/jeb/orlib/binpackinfo.html
- Falkenauer (1994): "A Hybrid Grouping Genetic Algorithm for Bin Packing"
"""

from __future__ import annotations

import logging
import math
import random
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from bestfit.schemas import ProblemConfig
from bestfit.verify import lower_bound

logger = logging.getLogger(__name__)

ORLIB_BASE_URL = "http://people.brunel.ac.uk/~mastjjb/jeb/orlib/files/"
ORLIB_FILES = [
    "binpack1.txt",  # Uniform u120 (20 instances)
    "binpack2.txt",  # Uniform u250 (20 instances)
    "binpack3.txt",  # Uniform u500 (20 instances)
    "binpack4.txt",  # Uniform u1000 (20 instances)
    "binpack5.txt",  # Triplet t60 (20 instances)
    "binpack6.txt",  # Triplet t120 (20 instances)
    "binpack7.txt",  # Triplet t249 (20 instances)
    "binpack8.txt",  # Triplet t501 (20 instances)
]

DEFAULT_CACHE_DIR = Path(__file__).parent.parent / "data" / "orlib"


@dataclass
class ProblemInstance:
    """A single bin packing problem instance."""

    name: str
    capacity: int
    items: list[int]
    best_known: int | None = None   # None when no reference solution exists

    @property
    def num_items(self) -> int:
        return len(self.items)

    @property
    def total_size(self) -> int:
        return sum(self.items)

    @property
    def min_size(self) -> int | None:
        return min(self.items) if self.items else None

    @property
    def lower_bound(self) -> int:
        return lower_bound(self.items, self.capacity)

    def to_config(self) -> ProblemConfig:
        return ProblemConfig.for_items(self.items, self.capacity)

    def __repr__(self) -> str:
        return (
            f"ProblemInstance(name='{self.name}', "
            f"capacity={self.capacity}, items={self.num_items}, "
            f"best_known={self.best_known})"
        )


@dataclass
class InstanceSet:
    """A named collection of problem instances."""

    name: str
    instances: list[ProblemInstance]

    def __len__(self) -> int:
        return len(self.instances)

    def __iter__(self) -> Iterator[ProblemInstance]:
        return iter(self.instances)

    def __getitem__(self, index: int) -> ProblemInstance:
        return self.instances[index]

    def filter_by_size(
        self,
        min_items: int = 0,
        max_items: int | None = None,
    ) -> "InstanceSet":
        """Keep instances whose item count lies in ``[min_items, max_items]``."""
        filtered = [
            inst for inst in self.instances
            if inst.num_items >= min_items
            and (max_items is None or inst.num_items <= max_items)
        ]
        return InstanceSet(name=f"{self.name}_filtered", instances=filtered)


# ============== Random Instances ==============

def generate_uniform_instance(
    num_items: int,
    capacity: int = 100,
    min_size: int = 1,
    max_size: int | None = None,
    seed: int = 42,
) -> ProblemInstance:
    """Generate items drawn uniformly from ``[min_size, max_size]``.

    ``max_size`` defaults to the capacity.
    """
    max_size = capacity if max_size is None else max_size
    if not 1 <= min_size <= max_size <= capacity:
        raise ValueError(
            f"Item size range [{min_size}, {max_size}] must lie within [1, {capacity}]"
        )

    rng = random.Random(seed)
    items = [rng.randint(min_size, max_size) for _ in range(num_items)]
    return ProblemInstance(
        name=f"uniform_n{num_items}_s{seed}",
        capacity=capacity,
        items=items,
    )


def generate_weibull_instance(
    num_items: int,
    capacity: int = 100,
    shape: float = 2.0,
    scale: float = 30.0,
    seed: int = 42,
) -> ProblemInstance:
    """Generate a bin packing instance with Weibull-distributed item sizes.

    Args:
        num_items: Number of items to generate.
        capacity: Bin capacity.
        shape: Weibull shape parameter (k).
               k < 1: more small items, k > 1: more medium items.
        scale: Weibull scale parameter (lambda).
        seed: Random seed for reproducibility.

    Returns:
        A ProblemInstance with sizes clamped to ``[1, capacity]``.
    """
    rng = random.Random(seed)
    items: list[int] = []

    for _ in range(num_items):
        u = rng.random()
        # Inverse transform: x = scale * (-ln(1-u))^(1/shape)
        weibull_val = scale * ((-math.log(1 - u)) ** (1 / shape))
        items.append(max(1, min(capacity, int(weibull_val))))

    return ProblemInstance(
        name=f"weibull_n{num_items}_s{seed}",
        capacity=capacity,
        items=items,
    )


def generate_instance_set(
    kind: str,
    num_instances: int,
    num_items: int,
    capacity: int = 100,
    base_seed: int = 42,
    **kwargs: Any,
) -> InstanceSet:
    """Generate ``num_instances`` random instances of the given ``kind``."""
    if kind == "uniform":
        generator = generate_uniform_instance
    elif kind == "weibull":
        generator = generate_weibull_instance
    else:
        raise ValueError(f"Unknown random instance kind: {kind}")

    instances = [
        generator(num_items=num_items, capacity=capacity, seed=base_seed + i, **kwargs)
        for i in range(num_instances)
    ]
    return InstanceSet(name=kind, instances=instances)


# ============== OR-Library ==============

def download_orlib_file(filename: str, cache_dir: Path = DEFAULT_CACHE_DIR) -> Path:
    """Download a single OR-Library file if not cached."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    filepath = cache_dir / filename

    if filepath.exists():
        return filepath

    url = ORLIB_BASE_URL + filename
    logger.info(f"Downloading {url}")

    try:
        urllib.request.urlretrieve(url, filepath)
    except OSError as e:
        raise RuntimeError(f"Failed to download {url}: {e}") from e

    return filepath


def parse_orlib_file(filepath: Path) -> list[ProblemInstance]:
    """Parse an OR-Library bin packing file."""
    instances: list[ProblemInstance] = []

    with open(filepath, "r") as f:
        lines = [line.strip() for line in f if line.strip()]

    idx = 0
    num_problems = int(lines[idx])
    idx += 1

    for _ in range(num_problems):
        name = lines[idx]
        idx += 1

        # Capacity, num_items, best_known (may be float format like "100.0")
        parts = lines[idx].split()
        capacity = int(float(parts[0]))
        num_items = int(float(parts[1]))
        best_known = int(float(parts[2]))
        idx += 1

        items: list[int] = []
        while len(items) < num_items:
            items.extend(int(float(x)) for x in lines[idx].split())
            idx += 1

        instances.append(ProblemInstance(
            name=name,
            capacity=capacity,
            items=items[:num_items],
            best_known=best_known,
        ))

    return instances


def load_orlib_dataset(
    files: list[str] | None = None,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> InstanceSet:
    """Load OR-Library bin packing instances.

    Args:
        files: File names to load (e.g., ["binpack1.txt"]). All 8 if None.
        cache_dir: Directory to cache downloaded files.
    """
    if files is None:
        files = ORLIB_FILES

    all_instances: list[ProblemInstance] = []

    for filename in files:
        if filename not in ORLIB_FILES:
            raise ValueError(f"Unknown OR-Library file: {filename}. "
                             f"Available: {ORLIB_FILES}")

        filepath = download_orlib_file(filename, cache_dir)
        instances = parse_orlib_file(filepath)
        all_instances.extend(instances)
        logger.info(f"Loaded {len(instances)} instances from {filename}")

    return InstanceSet(name="orlib", instances=all_instances)


# ============== Item Files ==============

def load_items_file(path: str | Path) -> list[int]:
    """Read whitespace separated integer item sizes. ``#`` starts a comment."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Item file not found: {path}")

    items: list[int] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            content = line.split("#", 1)[0]
            for token in content.split():
                try:
                    items.append(int(token))
                except ValueError as e:
                    raise ValueError(f"{path}:{lineno}: not an integer: {token!r}") from e
    return items


def save_items_file(path: str | Path, items: list[int]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for size in items:
            f.write(f"{size}\n")


def instance_summary(instances: InstanceSet) -> str:
    """Generate a summary of an instance set."""
    if not instances.instances:
        return f"Instance set '{instances.name}': empty"

    total_items = sum(inst.num_items for inst in instances)
    avg_items = total_items / len(instances)
    min_items = min(inst.num_items for inst in instances)
    max_items = max(inst.num_items for inst in instances)
    capacities = set(inst.capacity for inst in instances)

    lines = [
        f"Instance set: {instances.name}",
        f"  Instances: {len(instances)}",
        f"  Items per instance: min={min_items}, max={max_items}, avg={avg_items:.1f}",
        f"  Capacities: {sorted(capacities)}",
    ]
    return "\n".join(lines)
