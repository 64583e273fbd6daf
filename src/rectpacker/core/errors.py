"""
Error types for the packer.

Two kinds of failure are kept apart on purpose:

  InvalidRegion  — malformed input at registration.  A caller bug; the
                   packer takes no corrective action.
  PackingFailure — some items have no viable placement.  An expected,
                   data-dependent outcome that carries everything needed to
                   retry (e.g. in a larger canvas).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RectPackerError(Exception):
    """Base class for all packer errors."""


class InvalidRegion(RectPackerError, ValueError):
    """Free area registered with ``min`` greater than ``max`` on some axis."""

    def __init__(self, min: tuple, max: tuple, axis: int) -> None:
        self.min = min
        self.max = max
        self.axis = axis
        name = "xy"[axis]
        super().__init__(
            f"min.{name} cannot be more than max.{name}: "
            f"min={min!r}, max={max!r}"
        )


class PackingFailure(RectPackerError, Generic[T]):
    """
    Raised by ``pack_global`` when not every item could be placed.

    Attributes:
        packed:   ``(item, (x, y))`` pairs committed before exhaustion.  These
                  placements remain committed in the packer.
        unplaced: Items that never found a placement, in arbitrary order.
    """

    def __init__(self, packed: list[tuple[T, Any]], unplaced: list[T]) -> None:
        self.packed = packed
        self.unplaced = unplaced
        total = len(packed) + len(unplaced)
        super().__init__(
            f"No possible rectangle packing found "
            f"({len(unplaced)} of {total} items unplaced)"
        )

    def restore(self) -> list[T]:
        """Every input item, unplaced first, then the packed ones.

        The order is an arbitrary permutation of the original input.
        """
        return list(self.unplaced) + [item for item, _ in self.packed]


class PackerBusyError(RectPackerError, RuntimeError):
    """The packer is held by an open global packing session."""


# ─────────────────────────────────────────────────────────────────────────────
# Layout validation
# ─────────────────────────────────────────────────────────────────────────────

class LayoutError(RectPackerError):
    """Base class for layout validation errors."""


class OutOfBoundsError(LayoutError):
    """A placed item extends outside the canvas."""


class OverlapError(LayoutError):
    """Two placed items intersect."""
