from lineref.domain.entities.geography import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineSegment,
    LineString,
    PointGeom,
    Polygon,
)
from lineref.domain.entities.point_pair import PointPairDistance
from lineref.errors import InvalidArgumentError


def compute_segment_distance(seg: LineSegment, pt: Coordinate, acc: PointPairDistance) -> None:
    acc.set_minimum(seg.closest_point(pt), pt)


def _line_distance(line: LineString, pt: Coordinate, acc: PointPairDistance) -> None:
    for seg in line.segments():
        compute_segment_distance(seg, pt, acc)


def compute_distance(geom: Geometry, pt: Coordinate, acc: PointPairDistance) -> None:
    """
    Fold the point of `geom` nearest `pt` into `acc` (minimum tracking).
    The stored pair is (point on geom, pt).
    """
    if geom is None:
        raise InvalidArgumentError("geom is required")
    if pt is None:
        raise InvalidArgumentError("pt is required")
    if acc is None:
        raise InvalidArgumentError("acc is required")

    match geom:
        case LineString():
            _line_distance(geom, pt, acc)
        case Polygon():
            for ring in geom.rings():
                _line_distance(ring, pt, acc)
        case GeometryCollection(members=ms):
            for g in ms:
                compute_distance(g, pt, acc)
        case PointGeom(coord=c):
            acc.set_minimum(c, pt)
        case _:
            raise InvalidArgumentError(f"unsupported geometry kind: {type(geom).__name__}")


def distance_to_point(geom: Geometry, pt: Coordinate) -> PointPairDistance:
    acc = PointPairDistance()
    compute_distance(geom, pt, acc)
    return acc
