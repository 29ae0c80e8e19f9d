from dataclasses import dataclass

from lineref.app.protocols import PolylineLike
from lineref.domain.entities.geography import Coordinate, LineSegment
from lineref.io.op_logging import emit, get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class LocatedPoint:
    coordinate: Coordinate
    segment_index: int  # == line.num_points when the length ran past the end


def _lerp(p0: Coordinate, p1: Coordinate, frac: float) -> Coordinate:
    z = None
    if p0.z is not None and p1.z is not None:
        z = p0.z + frac * (p1.z - p0.z)
    return Coordinate(
        p0.x + frac * (p1.x - p0.x),
        p0.y + frac * (p1.y - p0.y),
        z,
    )


def point_along_segment_by_fraction(p0: Coordinate, p1: Coordinate, frac: float) -> Coordinate:
    if frac <= 0.0:
        return p0
    if frac >= 1.0:
        return p1
    return _lerp(p0, p1, frac)


def point_along_segment(p0: Coordinate, p1: Coordinate, length: float) -> Coordinate:
    """
    Point `length` along p0->p1. Negative lengths give p0, lengths past the
    end give p1. A zero-length segment always gives p0.
    """
    seg_len = p0.distance(p1)
    if seg_len == 0.0:
        return p0
    return point_along_segment_by_fraction(p0, p1, length / seg_len)


def point_along_segment_of(seg: LineSegment, length: float) -> Coordinate:
    return point_along_segment(seg.p0, seg.p1, length)


def locate_point(line: PolylineLike, length: float) -> LocatedPoint:
    total = 0.0
    coords = line.coords
    for i in range(len(coords) - 1):
        p0, p1 = coords[i], coords[i + 1]
        seg_len = p0.distance(p1)
        if total + seg_len > length:
            pt = point_along_segment(p0, p1, length - total)
            emit(log, "DEBUG", "locate_point", length=length, segment_index=i)
            return LocatedPoint(pt, i)
        total += seg_len
    # length is at or beyond the end of the line
    emit(log, "DEBUG", "locate_point_past_end", length=length, line_length=total)
    return LocatedPoint(coords[-1], len(coords))


def point_along_line(line: PolylineLike, length: float) -> Coordinate:
    return locate_point(line, length).coordinate
