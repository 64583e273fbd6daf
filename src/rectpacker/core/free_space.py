"""
Free-space set — the maximal free rectangles of a canvas.

The set tracks currently unoccupied area as a list of (possibly
overlapping) free rectangles and supports three operations:

  .register(min, max)   — add free area (no pruning)
  .select(size)         — best-short-side-fit candidate for a size
  .subtract(occupied)   — carve an occupied rectangle out of the set

Invariant after every ``subtract``: no retained rectangle is contained in
another.  Rectangles that merely overlap are kept; the heuristic reselects
over all of them on every query.

Reference:
    Jylänki, J. (2010). "A Thousand Ways to Pack the Bin — A Practical
    Approach to Two-Dimensional Rectangle Bin Packing."
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from rectpacker.core.errors import InvalidRegion
from rectpacker.core.geometry import Point, Rect, Size

logger = logging.getLogger(__name__)


def bssf_score(free: Size, size: Size):
    """
    Best-short-side-fit score of ``size`` inside a ``free`` extent.

    Returns ``min(free_w - w, free_h - h)``, or ``None`` when the item does
    not fit on either axis.  Lower is a tighter fit.
    """
    if free[0] >= size[0] and free[1] >= size[1]:
        return min(free[0] - size[0], free[1] - size[1])
    return None


class FreeSpaceSet:
    """
    Unordered collection of free rectangles owned by a single packer.

    Iteration order is the insertion order of surviving rectangles, with
    residuals from the latest subtraction appended at the end.  Selection
    ties are resolved by that order, which is stable for a given history of
    calls but carries no geometric meaning.
    """

    __slots__ = ("_rects",)

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    # ── Registration ─────────────────────────────────────────────────────

    def register(self, min: Point, max: Point) -> Rect:
        """
        Add the free area ``[min, max)``.

        The new rectangle may overlap existing ones; overlaps are resolved
        lazily by the pruning pass of the next ``subtract``.

        Raises:
            InvalidRegion: ``min`` exceeds ``max`` on either axis.  The set
                is left unchanged.
        """
        if min[0] > max[0]:
            raise InvalidRegion(min, max, axis=0)
        if min[1] > max[1]:
            raise InvalidRegion(min, max, axis=1)

        rect = Rect(tuple(min), tuple(max))
        self._rects.append(rect)
        logger.debug("Registered free area %r", rect)
        return rect

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def rects(self) -> tuple[Rect, ...]:
        """Snapshot of the current free rectangles."""
        return tuple(self._rects)

    def __len__(self) -> int:
        return len(self._rects)

    def __iter__(self) -> Iterator[Rect]:
        return iter(tuple(self._rects))

    def total_area(self):
        """Sum of free rectangle areas (overlaps are counted repeatedly)."""
        return sum(r.area for r in self._rects)

    def select(self, size: Size) -> Optional[tuple[Point, object]]:
        """
        Best placement for ``size`` by best-short-side fit.

        Returns:
            ``(position, score)`` for the free rectangle with the lowest
            score, or ``None`` if no free rectangle can hold ``size``.
            On equal scores the first rectangle in iteration order wins.
        """
        best: Optional[tuple[Point, object]] = None
        for free in self._rects:
            score = bssf_score(free.dimensions, size)
            if score is None:
                continue
            if best is None or score < best[1]:
                best = (free.min, score)
        return best

    # ── Mutation ─────────────────────────────────────────────────────────

    def subtract(self, occupied: Rect) -> None:
        """
        Remove ``occupied`` from every free rectangle it intersects.

        Each intersecting rectangle is replaced by its residuals (see
        ``Rect.split``).  Residuals are appended after the retained
        rectangles and are not tested against ``occupied`` again.  The set
        is then pruned so that no rectangle is contained in another.
        """
        retained: list[Rect] = []
        derived: list[Rect] = []
        for free in self._rects:
            if free.intersects(occupied):
                derived.extend(free.split(occupied))
            else:
                retained.append(free)

        self._rects = retained + derived
        self._prune()
        logger.debug(
            "Subtracted %r: %d split, %d free rectangles remain",
            occupied, len(derived), len(self._rects),
        )

    def _prune(self) -> None:
        """Drop every rectangle contained in another (O(n²)).

        Of two equal rectangles the later one is dropped.
        """
        rects = self._rects
        kept: list[Rect] = []
        for i, rect in enumerate(rects):
            redundant = False
            for j, other in enumerate(rects):
                if i == j or not other.contains(rect):
                    continue
                if other != rect or j < i:
                    redundant = True
                    break
            if not redundant:
                kept.append(rect)
        self._rects = kept

    def __repr__(self) -> str:
        return f"FreeSpaceSet(rects={len(self._rects)})"
