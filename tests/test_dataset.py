"""Tests for dataset generation and item orderings."""

import pytest

from rectpacker.runner.dataset import (
    ORDERING_STRATEGIES,
    area_sorted_order,
    generate_items,
    get_ordering_strategy,
    max_side_sorted_order,
    random_order,
)


class TestGenerateItems:
    def test_count_ids_and_bounds(self):
        items = generate_items(count=50, min_side=4, max_side=9, seed=1)
        assert [it.id for it in items] == list(range(50))
        for it in items:
            assert 4 <= it.width <= 9
            assert 4 <= it.height <= 9

    def test_seed_is_reproducible(self):
        assert generate_items(20, seed=3) == generate_items(20, seed=3)

    def test_does_not_touch_global_random_state(self):
        import random
        random.seed(0)
        expected = random.random()
        random.seed(0)
        generate_items(10, seed=5)
        assert random.random() == expected


class TestOrderings:
    @pytest.fixture
    def items(self):
        return generate_items(30, seed=11)

    def test_area_sorted_descending(self, items):
        areas = [it.area for it in area_sorted_order(items)]
        assert areas == sorted(areas, reverse=True)

    def test_max_side_sorted_descending(self, items):
        sides = [max(it.width, it.height) for it in max_side_sorted_order(items)]
        assert sides == sorted(sides, reverse=True)

    def test_random_order_is_permutation_and_copy(self, items):
        shuffled = random_order(items, seed=2)
        assert shuffled is not items
        assert sorted(shuffled, key=lambda it: it.id) == items

    def test_lookup(self):
        for name, fn in ORDERING_STRATEGIES.items():
            assert get_ordering_strategy(name) is fn

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown ordering strategy"):
            get_ordering_strategy("spiral")
