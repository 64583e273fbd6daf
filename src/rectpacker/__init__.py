"""rectpacker — MAXRECTS best-short-side-fit rectangle packing.

Packs axis-aligned rectangles (sprites, textures, UI tiles) into a canvas
without overlap by tracking the free area as maximal free rectangles.
"""

from .algorithms.maxrects import GlobalPacking, PackingStatus, RectPacker
from .core.errors import (
    InvalidRegion,
    LayoutError,
    OutOfBoundsError,
    OverlapError,
    PackerBusyError,
    PackingFailure,
    RectPackerError,
)
from .core.geometry import Rect
from .core.models import Item, PackedItem

__all__ = [
    # Packer
    "RectPacker",
    "GlobalPacking",
    "PackingStatus",
    # Models
    "Rect",
    "Item",
    "PackedItem",
    # Errors
    "RectPackerError",
    "InvalidRegion",
    "PackingFailure",
    "PackerBusyError",
    "LayoutError",
    "OutOfBoundsError",
    "OverlapError",
]
