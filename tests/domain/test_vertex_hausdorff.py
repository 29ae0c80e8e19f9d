# tests/domain/test_vertex_hausdorff.py
import math

import pytest

from lineref.domain.distance.vertex_hausdorff import (
    vertex_hausdorff,
    vertex_hausdorff_distance,
    vertex_hausdorff_segments,
)
from lineref.domain.entities.geography import (
    Coordinate,
    GeometryCollection,
    LineSegment,
    LineString,
    PointGeom,
)


@pytest.mark.parametrize("h", [0.0, 0.5, 2.0, 7.25])
def test_parallel_unit_segments_are_offset_apart(h: float):
    s0 = LineSegment(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
    s1 = LineSegment(Coordinate(0.0, h), Coordinate(1.0, h))
    assert vertex_hausdorff_segments(s0, s1).distance == pytest.approx(h)
    line0 = LineString((s0.p0, s0.p1))
    line1 = LineString((s1.p0, s1.p1))
    assert vertex_hausdorff_distance(line0, line1) == pytest.approx(h)


def test_segments_of_different_length():
    s0 = LineSegment(Coordinate(0.0, 0.0), Coordinate(10.0, 0.0))
    s1 = LineSegment(Coordinate(2.0, 1.0), Coordinate(4.0, 1.0))
    acc = vertex_hausdorff_segments(s0, s1)
    # far ends of s0 dominate: (10, 0) is sqrt(36 + 1) from (4, 1)
    assert acc.distance == pytest.approx(math.sqrt(37.0))
    assert set(acc.coordinates) == {Coordinate(10.0, 0.0), Coordinate(4.0, 1.0)}


def test_is_symmetric():
    g0 = LineString.from_xy([(0, 0), (5, 1), (10, 0)])
    g1 = LineString.from_xy([(0, 2), (10, 3)])
    assert vertex_hausdorff_distance(g0, g1) == pytest.approx(vertex_hausdorff_distance(g1, g0))


def test_takes_max_of_both_directions():
    # every vertex of the short line is on the long one, but not the reverse
    long = LineString.from_xy([(0, 0), (10, 0)])
    short = LineString.from_xy([(0, 0), (4, 0)])
    acc = vertex_hausdorff(long, short)
    assert acc.distance == 6.0
    assert set(acc.coordinates) == {Coordinate(10.0, 0.0), Coordinate(4.0, 0.0)}


def test_apex_vertex_is_found():
    flat = LineString.from_xy([(0, 0), (10, 0)])
    tent = LineString.from_xy([(0, 0), (5, 5), (10, 0)])
    assert vertex_hausdorff_distance(flat, tent) == 5.0


def test_mid_edge_extremum_is_understated():
    flat = LineString.from_xy([(0, 0), (10, 0)])
    stubs = GeometryCollection(
        (LineString.from_xy([(0, 1), (1, 1)]), LineString.from_xy([(9, 1), (10, 1)]))
    )
    # (5, 0) on flat is sqrt(17) from the stubs, but it is not a vertex
    assert vertex_hausdorff_distance(flat, stubs) == pytest.approx(1.0)


def test_identical_geometries_have_zero_distance():
    g = GeometryCollection(
        (LineString.from_xy([(0, 0), (3, 3)]), PointGeom(Coordinate(9.0, 9.0)))
    )
    assert vertex_hausdorff_distance(g, g) == 0.0


def test_point_against_line():
    line = LineString.from_xy([(0, 0), (10, 0)])
    pt = PointGeom(Coordinate(5.0, 3.0))
    # line vertices are sqrt(25 + 9) from the point
    assert vertex_hausdorff_distance(pt, line) == pytest.approx(math.sqrt(34.0))
