# tests/domain/test_length_to_point.py
import pytest

from lineref.config.models import SampleModel
from lineref.domain.entities.geography import Coordinate, LineSegment, LineString
from lineref.domain.linear.length_to_point import length_along_line, length_along_segment
from lineref.domain.linear.locate_point import point_along_line
from lineref.io.samples import PolylineSampler


def test_nearest_projection_on_straight_line():
    line = LineString.from_xy([(0, 0), (10, 0)])
    assert length_along_line(line, Coordinate(5.0, 5.0)) == 5.0


def test_points_beyond_the_ends_clamp():
    line = LineString.from_xy([(0, 0), (10, 0), (10, 10)])
    assert length_along_line(line, Coordinate(-3.0, -1.0)) == 0.0
    assert length_along_line(line, Coordinate(10.0, 14.0)) == 20.0


def test_picks_the_closest_segment():
    line = LineString.from_xy([(0, 0), (10, 0), (10, 10)])
    # 1 away from the second segment, 3 away from the first
    assert abs(length_along_line(line, Coordinate(9.0, 3.0)) - 13.0) < 1e-12


def test_exact_tie_keeps_earliest_segment():
    # (5, 5) is exactly 5 away from all three legs
    line = LineString.from_xy([(0, 0), (10, 0), (10, 10), (0, 10)])
    assert length_along_line(line, Coordinate(5.0, 5.0)) == 5.0


def test_length_along_segment_clamps():
    seg = LineSegment(Coordinate(0.0, 0.0), Coordinate(0.0, 4.0))
    assert length_along_segment(seg, Coordinate(1.0, -2.0)) == 0.0
    assert length_along_segment(seg, Coordinate(1.0, 3.0)) == 3.0
    assert length_along_segment(seg, Coordinate(1.0, 9.0)) == 4.0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_round_trip_with_point_along_line(seed: int):
    sampler = PolylineSampler(SampleModel(seed=seed, min_points=3, max_points=8))
    for line in sampler.lines(5):
        for d in sampler.lengths(line, 7):
            p = point_along_line(line, d)
            assert length_along_line(line, p) == pytest.approx(d, abs=1e-6)
