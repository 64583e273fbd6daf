"""Monitoring module for rectpacker.

Provides metrics tracking and export for packing experiments.
"""

from .metrics import (
    CanvasMetrics,
    ExperimentMetrics,
    export_to_csv,
    export_to_json,
    print_summary,
)

__all__ = [
    "CanvasMetrics",
    "ExperimentMetrics",
    "export_to_csv",
    "export_to_json",
    "print_summary",
]
