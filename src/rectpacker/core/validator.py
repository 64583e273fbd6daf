"""
Layout validator — pure-function checks on a finished layout.

Checks:
  1. Bounds  — every placement lies inside the canvas rectangle
  2. Overlap — no two placements intersect (half-open test, touching is ok)

``occupancy_grid`` rasterises integer layouts into a coverage count per
unit cell, which is handy for visual inspection and for cross-checking the
pairwise test.
"""

import numpy as np
from typing import Iterable, List

from rectpacker.core.errors import OutOfBoundsError, OverlapError
from rectpacker.core.geometry import Rect
from rectpacker.core.models import PackedItem


def validate_layout(placements: Iterable[PackedItem], canvas: Rect) -> bool:
    """
    Validate a layout against the canvas it was packed into.

    Args:
        placements: Placed items.
        canvas:     The free area originally registered.

    Returns:
        True if all checks pass.

    Raises:
        OutOfBoundsError: a placement leaves the canvas.
        OverlapError:     two placements intersect.
    """
    placed: List[PackedItem] = list(placements)

    for p in placed:
        if not canvas.contains(p.rect):
            raise OutOfBoundsError(f"{p.item!r} at {p.rect!r} leaves canvas {canvas!r}")

    for i, a in enumerate(placed):
        for b in placed[i + 1:]:
            if a.rect.intersects(b.rect):
                raise OverlapError(f"{a.item!r} at {a.rect!r} overlaps {b.item!r} at {b.rect!r}")

    return True


def occupancy_grid(placements: Iterable[PackedItem], width: int, height: int) -> np.ndarray:
    """
    Count how many placements cover each unit cell of an integer canvas.

    Returns:
        ``(height, width)`` int array; a valid layout has no cell above 1.
    """
    grid = np.zeros((height, width), dtype=np.int32)
    for p in placements:
        x0, y0 = max(int(p.x), 0), max(int(p.y), 0)
        x1, y1 = min(int(p.x_max), width), min(int(p.y_max), height)
        if x0 < x1 and y0 < y1:
            grid[y0:y1, x0:x1] += 1
    return grid
