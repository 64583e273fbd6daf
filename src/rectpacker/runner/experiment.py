"""Main experiment runner for rectangle packing."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path

from rectpacker.algorithms.maxrects import RectPacker
from rectpacker.config import ExperimentConfig, load_config
from rectpacker.core.errors import LayoutError, PackingFailure
from rectpacker.core.geometry import Rect
from rectpacker.core.models import Item, PackedItem
from rectpacker.core.validator import validate_layout
from rectpacker.monitoring.metrics import (
    CanvasMetrics,
    ExperimentMetrics,
    export_to_csv,
    export_to_json,
    print_summary,
)
from rectpacker.runner.dataset import generate_items, get_ordering_strategy

logger = logging.getLogger(__name__)

ALGORITHM_NAME = "MaxRects-BSSF"


class ExperimentRunner:
    """
    Experiment orchestrator for rectangle packing.

    Runs every generated dataset under every configured ordering and
    packing mode, packs the items into a fresh canvas, collects metrics and
    saves interim and final results.
    """

    def __init__(self, config: ExperimentConfig | None = None):
        self.config = config if config is not None else ExperimentConfig()
        self.results_dir = Path(self.config.results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)

    def run_experiment(self) -> ExperimentMetrics:
        """
        Run full experiment across datasets, orderings and modes.

        Returns:
            ExperimentMetrics with aggregated results
        """
        cfg = self.config
        experiment_id = f"exp_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"
        metrics = ExperimentMetrics(
            experiment_id=experiment_id,
            algorithm=ALGORITHM_NAME,
            total_datasets=cfg.dataset.num_datasets * len(cfg.orderings),
        )
        logger.info(
            "Starting %s: %d datasets x %d orderings x %d modes, %d items each",
            experiment_id, cfg.dataset.num_datasets, len(cfg.orderings),
            len(cfg.modes), cfg.dataset.items_per_dataset,
        )

        datasets_completed = 0
        for dataset_idx in range(cfg.dataset.num_datasets):
            seed = None if cfg.dataset.seed is None else cfg.dataset.seed + dataset_idx
            items = generate_items(
                count=cfg.dataset.items_per_dataset,
                min_side=cfg.dataset.min_side,
                max_side=cfg.dataset.max_side,
                seed=seed,
            )

            for ordering in cfg.orderings:
                dataset_id = f"dataset_{dataset_idx:03d}_{ordering}"
                ordered = get_ordering_strategy(ordering)(items, seed=seed)

                for mode in cfg.modes:
                    placements, free_left = self.pack_items(ordered, mode)
                    if cfg.verify and not self._verify(placements):
                        metrics.record_error()
                    metrics.add_canvas(self._create_canvas_metric(
                        canvas_id=metrics.total_canvases,
                        dataset_id=dataset_id,
                        mode=mode,
                        items_total=len(ordered),
                        placements=placements,
                        free_left=free_left,
                    ))

                datasets_completed += 1
                self._save_results(metrics, suffix=f"_interim_{datasets_completed}")

            logger.info(
                "Dataset %d/%d done, avg utilization %.1f%%",
                dataset_idx + 1, cfg.dataset.num_datasets, metrics.avg_utilization_pct,
            )

        metrics.mark_complete()
        self._save_results(metrics, suffix="_final")
        print(print_summary(metrics))
        return metrics

    def pack_items(self, items: list[Item], mode: str) -> tuple[list[PackedItem], int]:
        """
        Pack items into a fresh canvas.

        Args:
            items: Items in packing order
            mode: "sequential" (one ``pack`` per item) or "global"

        Returns:
            (placed items, free rectangles remaining)
        """
        packer = RectPacker.for_canvas(self.config.canvas.width, self.config.canvas.height)

        if mode == "sequential":
            placed = []
            for item in items:
                position = packer.pack(item.width, item.height)
                if position is not None:
                    placed.append((item, position))
        elif mode == "global":
            try:
                placed = packer.pack_global(items, lambda it: it.size)
            except PackingFailure as failure:
                logger.debug("%s", failure)
                placed = failure.packed
        else:
            raise ValueError(f"Unknown packing mode: {mode}")

        placements = [
            PackedItem(item=item, x=x, y=y, width=item.width, height=item.height)
            for item, (x, y) in placed
        ]
        return placements, len(packer.free_rectangles)

    def _verify(self, placements: list[PackedItem]) -> bool:
        canvas = Rect((0, 0), (self.config.canvas.width, self.config.canvas.height))
        try:
            return validate_layout(placements, canvas)
        except LayoutError as e:
            logger.error("Invalid layout: %s", e)
            return False

    def _create_canvas_metric(
        self,
        canvas_id: int,
        dataset_id: str,
        mode: str,
        items_total: int,
        placements: list[PackedItem],
        free_left: int,
    ) -> CanvasMetrics:
        return CanvasMetrics(
            canvas_id=canvas_id,
            dataset_id=dataset_id,
            mode=mode,
            items_total=items_total,
            items_placed=len(placements),
            area_used=sum(p.area for p in placements),
            area_total=self.config.canvas.area,
            free_rects_remaining=free_left,
        )

    def _save_results(self, metrics: ExperimentMetrics, suffix: str = "") -> None:
        """
        Save metrics to JSON and CSV files.

        Args:
            metrics: ExperimentMetrics to save
            suffix: Optional suffix for filename (e.g., "_interim_5")
        """
        base_filename = f"{metrics.experiment_id}{suffix}"

        # Summary only for interim, full for final
        json_path = self.results_dir / f"{base_filename}.json"
        include_canvases = suffix.endswith("_final")
        export_to_json(metrics, json_path, include_canvases=include_canvases)

        csv_path = self.results_dir / f"{base_filename}_canvases.csv"
        export_to_csv(metrics, csv_path)

        logger.debug("Saved results to %s and %s", json_path, csv_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run rectangle packing experiments")
    parser.add_argument("--config", type=Path, help="YAML experiment config")
    parser.add_argument(
        "--datasets",
        type=int,
        help="Number of datasets to generate (overrides config)",
    )
    parser.add_argument(
        "--items",
        type=int,
        help="Number of items per dataset (overrides config)",
    )
    parser.add_argument("--results-dir", help="Output directory (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else ExperimentConfig()
    data = config.model_dump()
    if args.datasets is not None:
        data["dataset"]["num_datasets"] = args.datasets
    if args.items is not None:
        data["dataset"]["items_per_dataset"] = args.items
    if args.results_dir:
        data["results_dir"] = args.results_dir
    config = ExperimentConfig.model_validate(data)

    metrics = ExperimentRunner(config).run_experiment()
    print(f"\nExperiment complete: {metrics.total_placed}/{metrics.total_items} items placed, "
          f"avg utilization {metrics.avg_utilization_pct:.1f}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
