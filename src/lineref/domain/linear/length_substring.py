from lineref.app.protocols import PolylineLike
from lineref.domain.entities.geography import Coordinate, LineString
from lineref.domain.linear.locate_point import point_along_segment
from lineref.errors import ContractViolationError
from lineref.io.op_logging import emit, get_logger

log = get_logger(__name__)


def _append(out: list[Coordinate], c: Coordinate) -> None:
    # no repeated consecutive points; compared in 2D, z is ignored
    if out and (out[-1].x, out[-1].y) == (c.x, c.y):
        return
    out.append(c)


def _compute(line: PolylineLike, start: float, end: float) -> list[Coordinate]:
    coords = line.coords
    out: list[Coordinate] = []
    seg_start = seg_end = 0.0
    i = 0
    while i < len(coords) - 1 and end > seg_end:
        p0, p1 = coords[i], coords[i + 1]
        i += 1
        seg_start = seg_end
        seg_end = seg_start + p0.distance(p1)

        if start > seg_end:
            continue
        if seg_start <= start < seg_end:
            _append(out, point_along_segment(p0, p1, start - seg_start))
        if end >= seg_end:
            _append(out, p1)
        if seg_start <= end < seg_end:
            _append(out, point_along_segment(p0, p1, end - seg_start))
    return out


def substring(line: PolylineLike, start_length: float, end_length: float) -> LineString:
    """
    The part of `line` between two arc-lengths, as a new line.

    Lengths past the end are clipped to the line; a negative start is clipped to 0.
    A zero-length result is a 2-point line with both points equal.
    Raises ContractViolationError if start_length > end_length.
    """
    if start_length > end_length:
        emit(log, "ERROR", "substring_inverted_range", start=start_length, end=end_length)
        raise ContractViolationError(
            f"inverted distances not supported: start {start_length} > end {end_length}",
            code="INVERTED_RANGE",
        )

    coords = line.coords
    if end_length <= 0.0:
        return LineString((coords[0], coords[0]))
    if start_length >= line.length:
        return LineString((coords[-1], coords[-1]))
    start_length = max(start_length, 0.0)

    out = _compute(line, start_length, end_length)
    if len(out) <= 1:
        out = [out[0], out[0]]
    emit(log, "DEBUG", "substring", start=start_length, end=end_length, n_out=len(out))
    return LineString(tuple(out))
