# io/shapely_adapter.py
from shapely import geometry as sg

from lineref.domain.entities.geography import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    PointGeom,
    Polygon,
    to_coordinate,
)
from lineref.errors import InvalidArgumentError

_MULTI = (sg.MultiPoint, sg.MultiLineString, sg.MultiPolygon, sg.GeometryCollection)


def _line(coords) -> LineString:
    return LineString(tuple(to_coordinate(c) for c in coords))


def from_shapely(g) -> Geometry:
    """Convert a shapely geometry. Multi-part types become GeometryCollection."""
    if g is None or g.is_empty:
        raise InvalidArgumentError("cannot convert an empty or missing shapely geometry")
    if isinstance(g, sg.Point):
        return PointGeom(to_coordinate(g.coords[0]))
    if isinstance(g, sg.LineString):  # LinearRing included
        return _line(g.coords)
    if isinstance(g, sg.Polygon):
        return Polygon(_line(g.exterior.coords), tuple(_line(r.coords) for r in g.interiors))
    if isinstance(g, _MULTI):
        return GeometryCollection(tuple(from_shapely(m) for m in g.geoms))
    raise InvalidArgumentError(f"unsupported shapely geometry: {g.geom_type}")


def _xy(c: Coordinate) -> tuple[float, ...]:
    return (c.x, c.y) if c.z is None else (c.x, c.y, c.z)


def to_shapely(g: Geometry):
    match g:
        case PointGeom(coord=c):
            return sg.Point(_xy(c))
        case LineString(coords=cs):
            return sg.LineString([_xy(c) for c in cs])
        case Polygon():
            return sg.Polygon(
                [_xy(c) for c in g.exterior.coords],
                [[_xy(c) for c in r.coords] for r in g.interiors],
            )
        case GeometryCollection(members=ms):
            return sg.GeometryCollection([to_shapely(m) for m in ms])
        case _:
            raise InvalidArgumentError(f"unsupported geometry kind: {type(g).__name__}")
