"""Tests for the half-open Rect primitive."""

from fractions import Fraction

import pytest

from rectpacker.core.geometry import Rect


class TestIntersects:
    def test_overlapping(self):
        assert Rect((0, 0), (10, 10)).intersects(Rect((5, 5), (15, 15)))

    def test_touching_edges_do_not_intersect(self):
        a = Rect((0, 0), (10, 10))
        assert not a.intersects(Rect((10, 0), (20, 10)))
        assert not a.intersects(Rect((0, 10), (10, 20)))

    def test_touching_corner_does_not_intersect(self):
        assert not Rect((0, 0), (10, 10)).intersects(Rect((10, 10), (20, 20)))

    def test_zero_area_on_corner_or_edge_does_not_intersect(self):
        a = Rect((0, 0), (10, 10))
        assert not a.intersects(Rect((0, 0), (0, 0)))
        assert not a.intersects(Rect((0, 4), (0, 4)))
        assert not a.intersects(Rect((10, 10), (10, 10)))

    def test_zero_area_strictly_inside_intersects(self):
        assert Rect((0, 0), (10, 10)).intersects(Rect((5, 5), (5, 5)))


class TestContains:
    def test_equal_rectangles_contain_each_other(self):
        a = Rect((0, 0), (4, 4))
        b = Rect((0, 0), (4, 4))
        assert a.contains(b) and b.contains(a)

    def test_proper_subset(self):
        outer = Rect((0, 0), (10, 10))
        inner = Rect((2, 2), (8, 8))
        assert outer.contains(inner)
        assert not inner.contains(outer)


class TestSplit:
    def test_centre_hole_gives_four_residuals(self):
        free = Rect((0, 0), (10, 10))
        residuals = free.split(Rect((4, 4), (6, 6)))
        assert residuals == [
            Rect((0, 0), (4, 10)),   # left
            Rect((0, 0), (10, 4)),   # bottom
            Rect((6, 0), (10, 10)),  # right
            Rect((0, 6), (10, 10)),  # top
        ]

    def test_corner_placement_gives_two_residuals(self):
        free = Rect((0, 0), (10, 10))
        residuals = free.split(Rect((0, 0), (3, 4)))
        assert residuals == [Rect((3, 0), (10, 10)), Rect((0, 4), (10, 10))]

    def test_full_cover_gives_nothing(self):
        assert Rect((0, 0), (10, 10)).split(Rect((-1, -1), (11, 11))) == []

    def test_residuals_never_intersect_occupied(self):
        free = Rect((0, 0), (20, 20))
        occupied = Rect((3, 7), (12, 9))
        for r in free.split(occupied):
            assert not r.intersects(occupied)
            assert free.contains(r)


class TestScalars:
    def test_fraction_coordinates(self):
        r = Rect.from_size((Fraction(1, 2), Fraction(1, 3)), (Fraction(1, 2), Fraction(2, 3)))
        assert r.max == (Fraction(1), Fraction(1))
        assert r.area == Fraction(1, 3)

    @pytest.mark.parametrize("rect,ok", [
        (Rect((0, 0), (0, 0)), True),
        (Rect((0, 0), (5, 1)), True),
        (Rect((5, 0), (2, 1)), False),
        (Rect((0, 5), (1, 2)), False),
    ])
    def test_well_formed(self, rect, ok):
        assert rect.is_well_formed() is ok
