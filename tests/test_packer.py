"""
Tests for single-item placement with RectPacker.pack.

Covers:
- Basic placements on a fresh canvas (including the classic 1×10 / 9×9 / 9×1 run)
- Exact fit and exhaustion
- Invalid free-area registration
- Layout invariants over random request sequences (no overlap, containment,
  non-redundant free set)
- Determinism
"""

import random
from fractions import Fraction

import pytest

from rectpacker import InvalidRegion, RectPacker
from rectpacker.core.geometry import Rect

from layout_checks import assert_disjoint, assert_non_redundant, assert_within, occupied


# ---------------------------------------------------------------------------
# 1. Basic placements
# ---------------------------------------------------------------------------

class TestBasicPlacement:
    def test_three_small_items_do_not_overlap(self, canvas_100):
        sizes = [(1, 10), (9, 9), (9, 1)]
        placements = []
        for w, h in sizes:
            pos = canvas_100.pack(w, h)
            assert pos is not None
            placements.append(((w, h), pos))
        assert_disjoint(occupied(placements))
        assert_within(occupied(placements), Rect((0, 0), (100, 100)))

    def test_first_item_lands_at_origin(self, canvas_100):
        assert canvas_100.pack(30, 20) == (0, 0)

    def test_second_item_uses_tighter_free_rectangle(self, canvas_100):
        canvas_100.pack(1, 10)
        # top strip (100×90) leaves a short side of 81, right strip (99×100) 90
        assert canvas_100.pack(9, 9) == (0, 10)

    def test_fraction_scalars(self):
        packer = RectPacker.for_canvas(Fraction(1), Fraction(1))
        assert packer.pack(Fraction(1, 2), Fraction(1)) == (0, 0)
        assert packer.pack(Fraction(1, 2), Fraction(1)) == (Fraction(1, 2), 0)
        assert packer.pack(Fraction(1, 100), Fraction(1, 100)) is None


# ---------------------------------------------------------------------------
# 2. Exact fit and exhaustion
# ---------------------------------------------------------------------------

class TestExhaustion:
    def test_exact_fit_then_nothing(self):
        packer = RectPacker.for_canvas(10, 10)
        assert packer.pack(10, 10) == (0, 0)
        assert packer.free_rectangles == ()
        assert packer.pack(1, 1) is None

    def test_failed_pack_does_not_mutate(self, canvas_100):
        canvas_100.pack(60, 60)
        before = canvas_100.free_rectangles
        assert canvas_100.pack(70, 70) is None
        assert canvas_100.free_rectangles == before

    def test_empty_packer_places_nothing(self):
        assert RectPacker().pack(1, 1) is None

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_none_iff_no_free_rectangle_holds_size(self, seed):
        rng = random.Random(seed)
        packer = RectPacker.for_canvas(64, 64)
        for _ in range(60):
            size = (rng.randint(1, 30), rng.randint(1, 30))
            fits = any(r.can_hold(size) for r in packer.free_rectangles)
            pos = packer.pack(*size)
            assert (pos is not None) == fits


# ---------------------------------------------------------------------------
# 3. Registration
# ---------------------------------------------------------------------------

class TestRegistration:
    def test_inverted_region_rejected(self):
        packer = RectPacker()
        with pytest.raises(InvalidRegion):
            packer.register_free((5, 5), (2, 2))
        assert packer.free_rectangles == ()

    def test_disjoint_regions_are_both_usable(self):
        packer = RectPacker()
        packer.register_free((0, 0), (10, 10))
        packer.register_free((100, 100), (120, 105))
        assert packer.pack(20, 5) == (100, 100)
        assert packer.pack(10, 10) == (0, 0)
        assert packer.pack(1, 1) is None


# ---------------------------------------------------------------------------
# 4. Invariants over random sequences
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("seed", [0, 7, 42, 1234])
    def test_random_sequence_keeps_layout_valid(self, seed):
        rng = random.Random(seed)
        canvas = Rect((0, 0), (200, 150))
        packer = RectPacker.for_canvas(200, 150)

        placements = []
        for _ in range(80):
            size = (rng.randint(1, 50), rng.randint(1, 50))
            pos = packer.pack(*size)
            if pos is not None:
                placements.append((size, pos))
            assert_non_redundant(packer.free_rectangles)

        rects = occupied(placements)
        assert placements, "nothing was placed"
        assert_disjoint(rects)
        assert_within(rects, canvas)

    def test_free_space_never_covers_placed_items(self):
        rng = random.Random(99)
        packer = RectPacker.for_canvas(128, 128)
        placements = []
        for _ in range(40):
            size = (rng.randint(4, 40), rng.randint(4, 40))
            pos = packer.pack(*size)
            if pos is not None:
                placements.append((size, pos))
        for free in packer.free_rectangles:
            for rect in occupied(placements):
                assert not free.intersects(rect)


# ---------------------------------------------------------------------------
# 5. Determinism
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_same_requests_same_positions(self):
        rng = random.Random(5)
        sizes = [(rng.randint(1, 40), rng.randint(1, 40)) for _ in range(50)]

        results = []
        for _ in range(3):
            packer = RectPacker.for_canvas(160, 160)
            results.append(tuple(packer.pack(w, h) for w, h in sizes))

        assert len(set(results)) == 1
