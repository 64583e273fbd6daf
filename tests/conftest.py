"""Shared fixtures for the rectpacker test suite."""

import os
import sys

import pytest

# Ensure the src/ layout is importable without an editable install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from rectpacker import Item, RectPacker  # noqa: E402


@pytest.fixture
def canvas_100():
    """Packer seeded with a single 100×100 free area."""
    return RectPacker.for_canvas(100, 100)


@pytest.fixture
def small_items():
    """A handful of sprites that comfortably fit a 100×100 canvas."""
    return [
        Item(id=0, width=1, height=10),
        Item(id=1, width=9, height=9),
        Item(id=2, width=9, height=1),
        Item(id=3, width=40, height=25),
        Item(id=4, width=25, height=40),
    ]
