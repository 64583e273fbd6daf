"""Core data models for rectangle packing."""

from dataclasses import dataclass
from typing import Any

from rectpacker.core.geometry import Rect


@dataclass(frozen=True)
class Item:
    """Represents a rectangular asset (sprite, texture, tile) to pack."""

    id: int
    width: int  # px
    height: int  # px

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def area(self) -> int:
        """Calculate item area in px²."""
        return self.width * self.height

    def to_dict(self) -> dict:
        return {"id": self.id, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, d: dict) -> "Item":
        return cls(id=d["id"], width=d["width"], height=d["height"])

    def __repr__(self) -> str:
        return f"Item(id={self.id}, {self.width}×{self.height}px)"


@dataclass(frozen=True)
class PackedItem:
    """An item with its position on the canvas."""

    item: Any
    x: Any  # Position of the min corner
    y: Any
    width: Any
    height: Any

    @property
    def x_max(self):
        return self.x + self.width

    @property
    def y_max(self):
        return self.y + self.height

    @property
    def area(self):
        return self.width * self.height

    @property
    def rect(self) -> Rect:
        """Occupied rectangle ``[(x, y), (x_max, y_max))``."""
        return Rect((self.x, self.y), (self.x_max, self.y_max))

    def to_dict(self) -> dict:
        item = self.item.to_dict() if hasattr(self.item, "to_dict") else self.item
        return {
            "item": item,
            "position": [self.x, self.y],
            "dims": [self.width, self.height],
        }
