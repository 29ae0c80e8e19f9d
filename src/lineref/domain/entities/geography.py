import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from lineref.errors import InvalidArgumentError


# Core geometry types consumed by the linear-referencing and distance ops
@dataclass(frozen=True)
class Coordinate:
    x: float
    y: float
    z: float | None = None  # carried through interpolation, ignored by distances

    def distance(self, other: "Coordinate") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


Coord = Coordinate | tuple[float, float] | tuple[float, float, float]


def to_coordinate(c: Coord) -> Coordinate:
    if isinstance(c, Coordinate):
        return c
    z = float(c[2]) if len(c) > 2 else None
    return Coordinate(float(c[0]), float(c[1]), z)


@dataclass(frozen=True)
class LineSegment:
    p0: Coordinate
    p1: Coordinate

    @property
    def length(self) -> float:
        return self.p0.distance(self.p1)

    def projection_factor(self, p: Coordinate) -> float:
        """
        Fraction along p0->p1 of the orthogonal projection of p (unclamped).
        0 at p0, 1 at p1, <0 before p0, >1 past p1.
        A zero-length segment reports 0.
        """
        if p == self.p0:
            return 0.0
        if p == self.p1:
            return 1.0
        dx, dy = self.p1.x - self.p0.x, self.p1.y - self.p0.y
        len2 = dx * dx + dy * dy
        if len2 == 0.0:
            return 0.0
        return ((p.x - self.p0.x) * dx + (p.y - self.p0.y) * dy) / len2

    def closest_point(self, p: Coordinate) -> Coordinate:
        f = self.projection_factor(p)
        if 0.0 < f < 1.0:
            return Coordinate(
                self.p0.x + f * (self.p1.x - self.p0.x),
                self.p0.y + f * (self.p1.y - self.p0.y),
            )
        d0, d1 = self.p0.distance(p), self.p1.distance(p)
        return self.p0 if d0 < d1 else self.p1

    def distance(self, p: Coordinate) -> float:
        return self.closest_point(p).distance(p)


@dataclass(frozen=True)
class LineString:
    coords: tuple[Coordinate, ...]

    def __post_init__(self):
        object.__setattr__(self, "coords", tuple(self.coords))
        if len(self.coords) < 2:
            raise InvalidArgumentError(
                f"a line needs at least 2 coordinates, got {len(self.coords)}"
            )

    @classmethod
    def from_coords(cls, coords: Iterable[Coord]) -> "LineString":
        return cls(tuple(to_coordinate(c) for c in coords))

    @classmethod
    def from_xy(cls, pairs: Iterable[Coord]) -> "LineString":
        return cls.from_coords(pairs)

    @property
    def num_points(self) -> int:
        return len(self.coords)

    @property
    def length(self) -> float:
        return sum(a.distance(b) for a, b in zip(self.coords, self.coords[1:]))

    def segments(self) -> Iterator[LineSegment]:
        for a, b in zip(self.coords, self.coords[1:]):
            yield LineSegment(a, b)

    @property
    def is_closed(self) -> bool:
        return self.coords[0] == self.coords[-1]


@dataclass(frozen=True)
class PointGeom:
    coord: Coordinate


@dataclass(frozen=True)
class Polygon:
    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    def rings(self) -> Iterator[LineString]:
        yield self.exterior
        yield from self.interiors


@dataclass(frozen=True)
class GeometryCollection:
    members: tuple["Geometry", ...] = ()


Geometry = PointGeom | LineString | Polygon | GeometryCollection


def vertices(geom: Geometry) -> Iterator[Coordinate]:
    """Every vertex of geom, in structural order."""
    match geom:
        case PointGeom(coord=c):
            yield c
        case LineString(coords=cs):
            yield from cs
        case Polygon():
            for ring in geom.rings():
                yield from ring.coords
        case GeometryCollection(members=ms):
            for m in ms:
                yield from vertices(m)
        case _:
            raise InvalidArgumentError(f"unsupported geometry kind: {type(geom).__name__}")
