"""Artifact layout for benchmark runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from experiments.config import BenchmarkConfig, save_config
from experiments.metrics import MetricsCollector


class ArtifactManager:
    """Owns the run directory: config snapshot, metrics and summary."""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.run_dir = Path(config.artifact_dir) / config.run_id
        self.run_dir.mkdir(parents=True, exist_ok=True)

    @property
    def config_path(self) -> Path:
        return self.run_dir / "config.yaml"

    @property
    def metrics_path(self) -> Path:
        return self.run_dir / "metrics.jsonl"

    @property
    def metrics_csv_path(self) -> Path:
        return self.run_dir / "metrics.csv"

    @property
    def summary_path(self) -> Path:
        return self.run_dir / "summary.json"

    def snapshot_config(self) -> None:
        """Save a snapshot of the configuration for reproducibility."""
        save_config(self.config, self.config_path)

    def save_metrics(self, metrics: MetricsCollector) -> None:
        metrics.export_jsonl(self.metrics_path)
        metrics.export_csv(self.metrics_csv_path)

    def save_summary(self, summary: dict[str, Any]) -> None:
        payload = {
            "run_id": self.config.run_id,
            "finished_at": datetime.now(timezone.utc).isoformat(),
            **summary,
        }
        with open(self.summary_path, "w") as f:
            json.dump(payload, f, indent=2)
