from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from lineref.domain.entities.geography import Coordinate, LineSegment


# ------------- Narrow geometry interfaces --------------------
@runtime_checkable
class SegmentLike(Protocol):
    """
    Responsibilities:
      • Two endpoints and their Euclidean length.
      • Closest point to a query, and the unclamped projection factor of a query.
    """

    p0: Coordinate
    p1: Coordinate

    @property
    def length(self) -> float: ...
    def closest_point(self, p: Coordinate) -> Coordinate: ...
    def projection_factor(self, p: Coordinate) -> float: ...


@runtime_checkable
class PolylineLike(Protocol):
    """
    Responsibilities:
      • Ordered coordinate access (>= 2 coordinates).
      • Arc-length of the whole line and iteration over its segments.
    Read-only: new lines are built, existing ones never mutated.
    """

    coords: tuple[Coordinate, ...]

    @property
    def num_points(self) -> int: ...
    @property
    def length(self) -> float: ...
    def segments(self) -> Iterator[LineSegment]: ...
