"""
Vertex Hausdorff distance: the Hausdorff distance restricted to the vertices
of each geometry.

Only existing vertices are tried as the far point, never points in the middle
of an edge, so the result can understate the true Hausdorff distance. It is
exact enough for lines that are roughly parallel and of similar length, which
is the line-matching case it is meant for.
"""

from lineref.domain.distance.distance_to_point import compute_distance
from lineref.domain.entities.geography import Geometry, LineSegment, vertices
from lineref.domain.entities.point_pair import PointPairDistance
from lineref.io.op_logging import emit, get_logger

log = get_logger(__name__)


def _max_segment_point_distance(
    seg0: LineSegment, seg1: LineSegment, acc: PointPairDistance
) -> None:
    # endpoints of seg1 against the closest points on seg0
    acc.set_maximum(seg0.closest_point(seg1.p0), seg1.p0)
    acc.set_maximum(seg0.closest_point(seg1.p1), seg1.p1)


def vertex_hausdorff_segments(seg0: LineSegment, seg1: LineSegment) -> PointPairDistance:
    acc = PointPairDistance()
    _max_segment_point_distance(seg0, seg1, acc)
    _max_segment_point_distance(seg1, seg0, acc)
    return acc


def _max_vertex_distance(point_geom: Geometry, geom: Geometry) -> PointPairDistance:
    """Farthest vertex of point_geom from geom, paired with its closest point on geom."""
    max_acc = PointPairDistance()
    min_acc = PointPairDistance()
    for v in vertices(point_geom):
        min_acc.initialize()
        compute_distance(geom, v, min_acc)
        max_acc.set_maximum(min_acc)
    return max_acc


def vertex_hausdorff(g0: Geometry, g1: Geometry) -> PointPairDistance:
    acc = PointPairDistance()
    acc.set_maximum(_max_vertex_distance(g0, g1))
    acc.set_maximum(_max_vertex_distance(g1, g0))
    emit(log, "DEBUG", "vertex_hausdorff", distance=acc.distance)
    return acc


def vertex_hausdorff_distance(g0: Geometry, g1: Geometry) -> float:
    return vertex_hausdorff(g0, g1).distance
