"""
Geometry primitive — half-open axis-aligned rectangles.

A ``Rect`` spans ``[min, max)`` on both axes: a point equal to ``min`` is
inside, a point equal to ``max`` is not.  Coordinates may be any scalar with
a total order, ``+`` and ``-`` (``int``, ``Fraction``, ``Decimal``, ...).
Floats work but rounding under subtraction can produce slivers, so callers
should prefer exact types.

Usage:
    occupied = Rect.from_size((x, y), (w, h))
    if free.intersects(occupied):
        residuals = free.split(occupied)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Point = tuple[Any, Any]
Size = tuple[Any, Any]


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle with half-open bounds.

    Attributes:
        min: Inclusive lower-left corner ``(x, y)``.
        max: Exclusive upper-right corner ``(x, y)``.
    """
    min: Point
    max: Point

    @classmethod
    def from_size(cls, position: Point, size: Size) -> "Rect":
        """Rectangle ``[position, position + size)``."""
        return cls(position, (position[0] + size[0], position[1] + size[1]))

    @property
    def width(self):
        return self.max[0] - self.min[0]

    @property
    def height(self):
        return self.max[1] - self.min[1]

    @property
    def dimensions(self) -> Size:
        return (self.width, self.height)

    @property
    def area(self):
        return self.width * self.height

    def is_well_formed(self) -> bool:
        """True when ``min`` does not exceed ``max`` on either axis."""
        return self.min[0] <= self.max[0] and self.min[1] <= self.max[1]

    def intersects(self, other: "Rect") -> bool:
        """Strict overlap test; rectangles that only touch do not intersect."""
        return (
            self.min[0] < other.max[0]
            and self.min[1] < other.max[1]
            and self.max[0] > other.min[0]
            and self.max[1] > other.min[1]
        )

    def contains(self, other: "Rect") -> bool:
        """Non-strict containment: ``True`` for equal rectangles too."""
        return (
            self.min[0] <= other.min[0]
            and self.min[1] <= other.min[1]
            and self.max[0] >= other.max[0]
            and self.max[1] >= other.max[1]
        )

    def can_hold(self, size: Size) -> bool:
        """Whether a ``size`` item fits inside this rectangle's extent."""
        return self.width >= size[0] and self.height >= size[1]

    def split(self, occupied: "Rect") -> list["Rect"]:
        """
        Residual rectangles of ``self`` left free by ``occupied``.

        Produces up to four maximal rectangles (left, bottom, right, top),
        one per side of ``occupied`` that lies strictly inside ``self``.
        Residuals overlap each other at the corners.  None of them
        intersects ``occupied``.
        """
        residuals: list[Rect] = []
        if occupied.min[0] > self.min[0]:
            residuals.append(Rect(self.min, (occupied.min[0], self.max[1])))
        if occupied.min[1] > self.min[1]:
            residuals.append(Rect(self.min, (self.max[0], occupied.min[1])))
        if occupied.max[0] < self.max[0]:
            residuals.append(Rect((occupied.max[0], self.min[1]), self.max))
        if occupied.max[1] < self.max[1]:
            residuals.append(Rect((self.min[0], occupied.max[1]), self.max))
        return residuals

    def to_dict(self) -> dict:
        return {"min": list(self.min), "max": list(self.max)}

    def __repr__(self) -> str:
        return f"Rect({self.min} -> {self.max})"
