import math

from lineref.app.protocols import PolylineLike
from lineref.domain.entities.geography import Coordinate, LineSegment


def _clamped_length(seg: LineSegment, proj_factor: float) -> float:
    if proj_factor <= 0.0:
        return 0.0
    if proj_factor <= 1.0:
        return proj_factor * seg.length
    return seg.length


def length_along_segment(seg: LineSegment, pt: Coordinate) -> float:
    """Distance from seg.p0 to the projection of pt, clamped to the segment."""
    return _clamped_length(seg, seg.projection_factor(pt))


def length_along_line(line: PolylineLike, pt: Coordinate) -> float:
    """
    Arc-length from the start of `line` to the point on it nearest `pt`.

    Segments are scanned in order and only a strictly closer segment replaces
    the best so far, so on an exact tie the earliest segment wins.
    """
    min_dist = math.inf
    location = 0.0
    base = 0.0
    for seg in line.segments():
        dist = seg.distance(pt)
        if dist < min_dist:
            min_dist = dist
            location = base + _clamped_length(seg, seg.projection_factor(pt))
        base += seg.length
    return location
