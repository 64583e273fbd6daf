"""Metrics tracking and export for packing experiments.

Provides dataclasses for tracking experiment metrics and utilities for
exporting results to JSON and CSV formats.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

CANVAS_FIELDS = [
    "canvas_id", "dataset_id", "mode", "items_total", "items_placed",
    "utilization_pct", "area_used", "area_total", "free_rects_remaining",
    "packed_at",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CanvasMetrics:
    """Metrics for a single packed canvas.

    Attributes:
        canvas_id: Sequential identifier of the canvas within the experiment.
        dataset_id: Dataset identifier (dataset index, ordering).
        mode: Packing mode, ``"sequential"`` or ``"global"``.
        items_total: Number of items offered to the packer.
        items_placed: Number of items successfully placed.
        area_used: Total area of placed items in px².
        area_total: Canvas area in px².
        free_rects_remaining: Free rectangles tracked after packing.
        packed_at: Timestamp when packing finished.
    """

    canvas_id: int
    dataset_id: str
    mode: str
    items_total: int
    items_placed: int
    area_used: float
    area_total: float
    free_rects_remaining: int = 0
    packed_at: datetime = field(default_factory=_utcnow)

    @property
    def utilization_pct(self) -> float:
        """Area utilization percentage (0-100)."""
        if not self.area_total:
            return 0.0
        return (self.area_used / self.area_total) * 100

    @property
    def items_unplaced(self) -> int:
        return self.items_total - self.items_placed

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamp.

        Example:
            >>> cm = CanvasMetrics(0, "dataset_000_random", "global", 10, 8, 512, 1024)
            >>> d = cm.to_dict()
            >>> d["utilization_pct"]
            50.0
        """
        d = asdict(self)
        d["utilization_pct"] = self.utilization_pct
        d["packed_at"] = self.packed_at.isoformat()
        return d


@dataclass
class ExperimentMetrics:
    """Aggregate metrics for an entire experiment run.

    Attributes:
        experiment_id: Unique identifier for the experiment.
        algorithm: Algorithm name used.
        total_datasets: Number of (dataset, ordering) combinations.
        total_canvases: Number of canvases packed.
        total_items: Number of items offered.
        total_placed: Number of items placed.
        avg_utilization_pct / median / min / max: Utilization statistics.
        runtime_seconds: Total runtime in seconds.
        errors_count: Number of invalid layouts encountered.
        started_at: Experiment start timestamp.
        completed_at: Experiment completion timestamp (None if running).
        canvas_metrics: List of per-canvas metrics.
    """

    experiment_id: str
    algorithm: str
    total_datasets: int = 0
    total_canvases: int = 0
    total_items: int = 0
    total_placed: int = 0
    avg_utilization_pct: float = 0.0
    median_utilization_pct: float = 0.0
    min_utilization_pct: float = 0.0
    max_utilization_pct: float = 0.0
    runtime_seconds: float = 0.0
    errors_count: int = 0
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None
    canvas_metrics: list[CanvasMetrics] = field(default_factory=list)

    def add_canvas(self, canvas: CanvasMetrics) -> None:
        """Add a canvas's metrics to the experiment.

        Example:
            >>> em = ExperimentMetrics("exp_001", "MaxRects-BSSF")
            >>> em.add_canvas(CanvasMetrics(0, "d0", "global", 10, 8, 512, 1024))
            >>> em.total_placed
            8
        """
        self.canvas_metrics.append(canvas)
        self.total_canvases += 1
        self.total_items += canvas.items_total
        self.total_placed += canvas.items_placed
        self._recalculate_stats()

    def record_error(self) -> None:
        """Increment error counter."""
        self.errors_count += 1

    def mark_complete(self) -> None:
        """Mark experiment as complete and calculate final runtime."""
        self.completed_at = _utcnow()
        self.runtime_seconds = (self.completed_at - self.started_at).total_seconds()

    def utilization_by_mode(self) -> dict[str, float]:
        """Average utilization per packing mode."""
        by_mode: dict[str, list[float]] = {}
        for c in self.canvas_metrics:
            by_mode.setdefault(c.mode, []).append(c.utilization_pct)
        return {mode: float(np.mean(values)) for mode, values in by_mode.items()}

    def _recalculate_stats(self) -> None:
        """Recalculate aggregate statistics from canvas metrics."""
        if not self.canvas_metrics:
            return

        utilizations = np.array([c.utilization_pct for c in self.canvas_metrics])
        self.avg_utilization_pct = float(utilizations.mean())
        self.median_utilization_pct = float(np.median(utilizations))
        self.min_utilization_pct = float(utilizations.min())
        self.max_utilization_pct = float(utilizations.max())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamps."""
        d = asdict(self)
        d["started_at"] = self.started_at.isoformat()
        d["completed_at"] = self.completed_at.isoformat() if self.completed_at else None
        d["canvas_metrics"] = [c.to_dict() for c in self.canvas_metrics]
        return d

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary without per-canvas details."""
        d = self.to_dict()
        del d["canvas_metrics"]
        d["utilization_by_mode"] = self.utilization_by_mode()
        return d


def export_to_json(metrics: ExperimentMetrics, output_path: Path | str, include_canvases: bool = True) -> None:
    """Export experiment metrics to JSON file.

    Args:
        metrics: ExperimentMetrics instance to export.
        output_path: Path to output JSON file.
        include_canvases: If True, include per-canvas metrics. If False, summary only.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = metrics.to_dict() if include_canvases else metrics.to_summary_dict()

    with output_path.open("w") as f:
        json.dump(data, f, indent=2)


def export_to_csv(metrics: ExperimentMetrics, output_path: Path | str) -> None:
    """Export per-canvas metrics to CSV file (header only when empty)."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CANVAS_FIELDS)
        writer.writeheader()
        for canvas in metrics.canvas_metrics:
            writer.writerow(canvas.to_dict())


def print_summary(metrics: ExperimentMetrics) -> str:
    """Generate human-readable summary of experiment metrics.

    Returns:
        Formatted multi-line summary string.
    """
    lines = [
        "=" * 60,
        f"Experiment: {metrics.experiment_id}",
        f"Algorithm: {metrics.algorithm}",
        "=" * 60,
        f"Datasets Processed: {metrics.total_datasets}",
        f"Total Canvases: {metrics.total_canvases}",
        f"Items Placed: {metrics.total_placed} / {metrics.total_items}",
        "",
        "Utilization Statistics:",
        f"  Average: {metrics.avg_utilization_pct:.2f}%",
        f"  Median:  {metrics.median_utilization_pct:.2f}%",
        f"  Min:     {metrics.min_utilization_pct:.2f}%",
        f"  Max:     {metrics.max_utilization_pct:.2f}%",
    ]
    for mode, util in sorted(metrics.utilization_by_mode().items()):
        lines.append(f"  {mode}: {util:.2f}%")
    lines += [
        "",
        f"Runtime: {metrics.runtime_seconds:.1f} seconds",
        f"Errors: {metrics.errors_count}",
        "",
        f"Started:   {metrics.started_at.isoformat()}",
        f"Completed: {metrics.completed_at.isoformat() if metrics.completed_at else 'In Progress'}",
        "=" * 60,
    ]
    return "\n".join(lines)
