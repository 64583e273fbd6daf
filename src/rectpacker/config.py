"""
Configuration models for packing experiments.

Classes:
    CanvasConfig     — canvas dimensions registered as free area
    DatasetConfig    — how many item sets to generate and their size range
    ExperimentConfig — all tuneable parameters for one experiment run

Configs are plain pydantic models; ``load_config`` reads them from YAML:

    canvas: {width: 1024, height: 1024}
    dataset: {num_datasets: 5, items_per_dataset: 120, min_side: 8, max_side: 128}
    orderings: [random, area_sorted]
    modes: [sequential, global]
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from rectpacker.runner.dataset import ORDERING_STRATEGIES

PackingMode = Literal["sequential", "global"]


# ─────────────────────────────────────────────────────────────────────────────
# Canvas
# ─────────────────────────────────────────────────────────────────────────────

class CanvasConfig(BaseModel):
    """
    Canvas registered as the initial free area ``[(0, 0), (width, height))``.

    Attributes:
        width:  X-axis extent (px).
        height: Y-axis extent (px).
    """
    width: int = Field(default=1024, gt=0)
    height: int = Field(default=1024, gt=0)

    @property
    def area(self) -> int:
        return self.width * self.height


# ─────────────────────────────────────────────────────────────────────────────
# Dataset
# ─────────────────────────────────────────────────────────────────────────────

class DatasetConfig(BaseModel):
    """Random item generation parameters."""
    num_datasets: int = Field(default=10, ge=1)
    items_per_dataset: int = Field(default=200, ge=1)
    min_side: int = Field(default=8, ge=1)
    max_side: int = Field(default=128, ge=1)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_side_range(self) -> "DatasetConfig":
        if self.max_side < self.min_side:
            raise ValueError(
                f"max_side ({self.max_side}) must be >= min_side ({self.min_side})"
            )
        return self


# ─────────────────────────────────────────────────────────────────────────────
# Experiment
# ─────────────────────────────────────────────────────────────────────────────

class ExperimentConfig(BaseModel):
    """
    All tuneable parameters for a single experiment run.

    ``verify`` re-checks every finished layout for overlap and bounds.
    """
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    orderings: list[str] = Field(default_factory=lambda: list(ORDERING_STRATEGIES))
    modes: list[PackingMode] = Field(default_factory=lambda: ["sequential", "global"])
    results_dir: str = "results"
    verify: bool = True

    @field_validator("orderings")
    @classmethod
    def _known_orderings(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in ORDERING_STRATEGIES]
        if unknown:
            raise ValueError(
                f"Unknown ordering strategies: {unknown}. "
                f"Available: {list(ORDERING_STRATEGIES.keys())}"
            )
        return value

    def to_dict(self) -> dict:
        return self.model_dump()


def load_config(path: Path | str) -> ExperimentConfig:
    """
    Load an experiment config from a YAML file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError:        ``path`` does not exist.
        pydantic.ValidationError: the file content is invalid.
    """
    with Path(path).open() as f:
        data = yaml.safe_load(f) or {}
    return ExperimentConfig.model_validate(data)
