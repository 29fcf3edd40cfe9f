"""Per-run metrics collection for benchmark runs."""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, asdict
from pathlib import Path

from bestfit.schemas import PackingResult
from instances.datasets import ProblemInstance


@dataclass
class HeuristicRecord:
    instance: str
    heuristic: str
    num_items: int
    capacity: int
    num_bins: int
    lower_bound: int
    best_known: int | None
    elapsed_s: float

    @classmethod
    def from_result(cls, instance: ProblemInstance, result: PackingResult) -> "HeuristicRecord":
        return cls(
            instance=instance.name,
            heuristic=result.heuristic,
            num_items=instance.num_items,
            capacity=instance.capacity,
            num_bins=result.num_bins,
            lower_bound=instance.lower_bound,
            best_known=instance.best_known,
            elapsed_s=result.elapsed,
        )

    @property
    def gap_to_bound(self) -> int:
        return self.num_bins - self.lower_bound

    def to_dict(self) -> dict:
        data = asdict(self)
        data["gap_to_bound"] = self.gap_to_bound
        return data


class MetricsCollector:
    def __init__(self):
        self.records: list[HeuristicRecord] = []

    def record(self, record: HeuristicRecord) -> None:
        self.records.append(record)

    def summarize(self) -> dict[str, dict[str, float]]:
        """Aggregate bins, gap and time per heuristic."""
        grouped: dict[str, list[HeuristicRecord]] = {}
        for rec in self.records:
            grouped.setdefault(rec.heuristic, []).append(rec)

        summary: dict[str, dict[str, float]] = {}
        for heuristic, recs in grouped.items():
            summary[heuristic] = {
                "instances": len(recs),
                "total_bins": sum(r.num_bins for r in recs),
                "avg_bins": sum(r.num_bins for r in recs) / len(recs),
                "avg_gap_to_bound": sum(r.gap_to_bound for r in recs) / len(recs),
                "total_elapsed_s": sum(r.elapsed_s for r in recs),
            }
        return summary

    def export_jsonl(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            for rec in self.records:
                json.dump(rec.to_dict(), f)
                f.write('\n')

    def export_csv(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.records:
            return

        fieldnames = [
            'instance', 'heuristic', 'num_items', 'capacity', 'num_bins',
            'lower_bound', 'best_known', 'gap_to_bound', 'elapsed_s',
        ]

        with open(path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for rec in self.records:
                writer.writerow(rec.to_dict())
