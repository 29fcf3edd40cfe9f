"""Benchmark runner executing the heuristics over a set of instances."""

from __future__ import annotations

import logging
from typing import Any

from tqdm import tqdm

from bestfit import BEST_FIT_FAMILY, HEURISTICS
from bestfit.schemas import PackingResult
from bestfit.verify import check_agreement, verify_packing
from instances.datasets import (
    InstanceSet,
    ProblemInstance,
    generate_instance_set,
    instance_summary,
    load_orlib_dataset,
)

from experiments.artifacts import ArtifactManager
from experiments.config import BenchmarkConfig
from experiments.metrics import HeuristicRecord, MetricsCollector

logger = logging.getLogger(__name__)


def run_instance(
    instance: ProblemInstance,
    heuristics: list[str],
    verify: bool = True,
) -> list[PackingResult]:
    """Run each named heuristic on ``instance``.

    Every Best-Fit variant must use the same number of bins; a disagreement
    raises ``InvariantViolation``.
    """
    config = instance.to_config()
    results: list[PackingResult] = []
    for name in heuristics:
        result = HEURISTICS[name](instance.items, config)
        if verify:
            verify_packing(instance.items, instance.capacity, result)
        results.append(result)

    check_agreement([r for r in results if r.heuristic in BEST_FIT_FAMILY])
    return results


class BenchmarkRunner:
    """Coordinates instance loading, heuristic runs and artifact export."""

    def __init__(self, config: BenchmarkConfig, show_progress: bool = True):
        self.config = config
        self.show_progress = show_progress
        self.metrics = MetricsCollector()
        self.artifacts: ArtifactManager | None = None

    def load_instances(self) -> InstanceSet:
        config = self.config
        if config.dataset == "orlib":
            return load_orlib_dataset(config.orlib_files)

        if config.dataset == "uniform":
            extra: dict[str, Any] = {
                "min_size": config.min_item_size,
                "max_size": config.max_item_size,
            }
        else:
            extra = {
                "shape": config.weibull_shape,
                "scale": config.weibull_scale,
            }
        return generate_instance_set(
            config.dataset,
            num_instances=config.num_instances,
            num_items=config.num_items,
            capacity=config.capacity,
            base_seed=config.seed,
            **extra,
        )

    def run(self) -> dict[str, Any]:
        """Run the benchmark and write artifacts.

        Returns:
            Summary dictionary with per-heuristic aggregates
        """
        self.artifacts = ArtifactManager(self.config)
        self.artifacts.snapshot_config()

        instances = self.load_instances()
        logger.info(
            f"Benchmark {self.config.run_id}: {len(instances)} instances, "
            f"heuristics={self.config.heuristics}"
        )
        logger.info(instance_summary(instances))

        pbar = tqdm(
            instances,
            desc="📦 Packing",
            unit="inst",
            ncols=100,
            disable=not self.show_progress,
        )
        for instance in pbar:
            if not instance.items:
                logger.warning(f"Skipping {instance.name}: no items")
                continue
            results = run_instance(instance, self.config.heuristics, self.config.verify)
            for result in results:
                self.metrics.record(HeuristicRecord.from_result(instance, result))
            pbar.set_postfix({"bins": results[0].num_bins, "LB": instance.lower_bound})

        self.artifacts.save_metrics(self.metrics)
        summary = {
            "status": "completed",
            "dataset": instances.name,
            "n_instances": len(instances),
            "heuristics": self.metrics.summarize(),
        }
        self.artifacts.save_summary(summary)
        return summary
