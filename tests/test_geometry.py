"""Tests for spatial predicates and the sector comparator."""

import numpy as np
import pytest

from enc_symbology.calculations import (
    Sector,
    SectorDominance,
    compare_sectors,
    extents_overlap,
    point_in_area,
    point_in_set,
    point_on_line,
    same_position,
)
from enc_symbology.chart.feature import Extent


SQUARE = np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=float)


class TestExtents:

    def test_overlap(self):
        assert extents_overlap(Extent(0, 0, 5, 5), Extent(4, 4, 8, 8))

    def test_touching_edges_overlap(self):
        assert extents_overlap(Extent(0, 0, 1, 1), Extent(1, 1, 2, 2))

    def test_disjoint(self):
        assert not extents_overlap(Extent(0, 0, 1, 1), Extent(2, 0, 3, 1))
        assert not extents_overlap(Extent(0, 0, 1, 1), Extent(0, 2, 1, 3))


class TestPointPredicates:

    def test_point_in_area(self):
        assert point_in_area(SQUARE, 5, 5)
        assert not point_in_area(SQUARE, 15, 5)

    def test_boundary_counts_as_inside(self):
        assert point_in_area(SQUARE, 10, 5)
        assert point_in_area(SQUARE, 0, 0)

    def test_closed_ring_same_as_open(self):
        closed = np.vstack([SQUARE, SQUARE[:1]])
        assert point_in_area(closed, 2, 8) == point_in_area(SQUARE, 2, 8)

    def test_concave_ring(self):
        # U shape open to the north
        ring = np.array([[0, 0], [9, 0], [9, 9], [6, 9], [6, 3], [3, 3], [3, 9], [0, 9]], dtype=float)
        assert point_in_area(ring, 1, 5)
        assert not point_in_area(ring, 4.5, 6)

    def test_point_on_line(self):
        line = np.array([[0, 0], [10, 0], [10, 10]], dtype=float)
        assert point_on_line(line, 5, 0)
        assert point_on_line(line, 10, 7)
        assert not point_on_line(line, 5, 1)

    def test_degenerate_segment(self):
        line = np.array([[2, 2], [2, 2]], dtype=float)
        assert point_on_line(line, 2, 2)
        assert not point_on_line(line, 2, 3)

    def test_point_in_set_by_kind(self, make_feature):
        area = make_feature(1, "DEPARE", "Area")
        line = make_feature(2, "DEPARE", "Line")
        point = make_feature(3, "OBSTRN")
        assert point_in_set(area, 3, 7)
        assert point_in_set(line, 3, 3)
        assert not point_in_set(line, 3, 7)
        assert point_in_set(point, 5, 5)

    def test_same_position(self, make_feature):
        a = make_feature(1, "LIGHTS", coordinates=[[1.5, 2.5]])
        b = make_feature(2, "LIGHTS", coordinates=[[1.5, 2.5]])
        c = make_feature(3, "LIGHTS", coordinates=[[1.5, 2.6]])
        assert same_position(a, b)
        assert not same_position(a, c)


class TestSectors:

    def test_sweep(self):
        assert Sector(90, 180).sweep == 90
        assert Sector(300, 30).sweep == 90
        assert Sector(0, 360).sweep == 0

    def test_from_feature(self, make_feature):
        light = make_feature(1, "LIGHTS", SECTR1="300", SECTR2="30")
        assert Sector.from_feature(light) == Sector(300.0, 30.0)
        assert Sector.from_feature(make_feature(2, "LIGHTS", SECTR1=10)) is None

    def test_narrower_sector_dominates(self):
        assert compare_sectors(Sector(100, 130), Sector(90, 180)) is SectorDominance.A_DOMINANT
        assert compare_sectors(Sector(90, 180), Sector(100, 130)) is SectorDominance.B_DOMINANT

    def test_disjoint_sectors(self):
        assert compare_sectors(Sector(0, 40), Sector(90, 180)) is SectorDominance.NONE
        assert compare_sectors(Sector(90, 180), Sector(0, 40)) is SectorDominance.NONE

    def test_sectors_across_north(self):
        assert compare_sectors(Sector(350, 10), Sector(300, 30)) is SectorDominance.A_DOMINANT

    def test_equal_sweeps_resolve_to_b(self):
        assert compare_sectors(Sector(0, 90), Sector(45, 135)) is SectorDominance.B_DOMINANT
        assert compare_sectors(Sector(45, 135), Sector(0, 90)) is SectorDominance.B_DOMINANT

    @pytest.mark.parametrize("a, b", [
        ((100, 130), (90, 180)),
        ((10, 80), (60, 200)),
        ((350, 20), (0, 40)),
        ((0, 40), (90, 180)),
    ])
    def test_antisymmetric(self, a, b):
        forward = compare_sectors(Sector(*a), Sector(*b))
        backward = compare_sectors(Sector(*b), Sector(*a))
        if forward is SectorDominance.NONE:
            assert backward is SectorDominance.NONE
        else:
            assert forward == -backward
