"""Dataset generation for packing experiments."""

import random
from typing import Callable

from rectpacker.core.models import Item


def generate_items(
    count: int = 200,
    min_side: int = 8,
    max_side: int = 128,
    seed: int | None = None,
) -> list[Item]:
    """
    Generate random items for experimentation.

    Args:
        count: Number of items to generate
        min_side: Smallest width/height in px (inclusive)
        max_side: Largest width/height in px (inclusive)
        seed: Random seed for reproducibility (default: None)

    Returns:
        List of Item objects with random integer dimensions
    """
    rng = random.Random(seed)
    return [
        Item(
            id=i,
            width=rng.randint(min_side, max_side),
            height=rng.randint(min_side, max_side),
        )
        for i in range(count)
    ]


def random_order(items: list[Item], seed: int | None = None) -> list[Item]:
    """
    Return items in random order.

    Args:
        items: List of items
        seed: Random seed for the shuffle

    Returns:
        Shuffled copy of items
    """
    shuffled = items.copy()
    random.Random(seed).shuffle(shuffled)
    return shuffled


def area_sorted_order(items: list[Item], seed: int | None = None) -> list[Item]:
    """Sort items by area (largest first)."""
    return sorted(items, key=lambda it: it.area, reverse=True)


def max_side_sorted_order(items: list[Item], seed: int | None = None) -> list[Item]:
    """Sort items by their longer side (longest first)."""
    return sorted(items, key=lambda it: max(it.width, it.height), reverse=True)


# Map of ordering strategy names to functions
ORDERING_STRATEGIES: dict[str, Callable[..., list[Item]]] = {
    "random": random_order,
    "area_sorted": area_sorted_order,
    "max_side_sorted": max_side_sorted_order,
}


def get_ordering_strategy(name: str) -> Callable[..., list[Item]]:
    """
    Get an ordering strategy function by name.

    Args:
        name: Strategy name (random, area_sorted, max_side_sorted)

    Returns:
        Ordering function

    Raises:
        ValueError: If strategy name is not recognized
    """
    if name not in ORDERING_STRATEGIES:
        raise ValueError(
            f"Unknown ordering strategy: {name}. "
            f"Available: {list(ORDERING_STRATEGIES.keys())}"
        )
    return ORDERING_STRATEGIES[name]
