import math
from dataclasses import dataclass, field

from lineref.domain.entities.geography import Coordinate
from lineref.errors import InvalidArgumentError


@dataclass
class PointPairDistance:
    """
    Running-extremum accumulator over candidate point pairs.

    Uninitialized until the first update: distance is +inf and no pair is held.
    The pair is only ever set through initialize / set_minimum / set_maximum,
    so distance always matches it.
    set_minimum / set_maximum take either two coordinates or another accumulator;
    an uninitialized candidate accumulator is ignored.
    """

    _a: Coordinate | None = field(init=False, default=None, repr=False)
    _b: Coordinate | None = field(init=False, default=None, repr=False)
    _distance: float = field(init=False, default=math.inf, repr=False)

    def __repr__(self) -> str:
        return f"PointPairDistance(a={self._a!r}, b={self._b!r}, distance={self._distance!r})"

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def is_initialized(self) -> bool:
        return self._a is not None

    @property
    def coordinates(self) -> tuple[Coordinate, Coordinate] | None:
        if self._a is None:
            return None
        return (self._a, self._b)

    def initialize(self, a: Coordinate | None = None, b: Coordinate | None = None) -> None:
        if a is None and b is None:
            self._a, self._b, self._distance = None, None, math.inf
            return
        if a is None or b is None:
            raise InvalidArgumentError("initialize takes both points or neither")
        self._a, self._b, self._distance = a, b, a.distance(b)

    def _candidate(self, a, b) -> tuple[Coordinate, Coordinate, float] | None:
        if isinstance(a, PointPairDistance):
            if not a.is_initialized:
                return None
            return a._a, a._b, a._distance
        if a is None or b is None:
            raise InvalidArgumentError("a candidate pair needs both points")
        return a, b, a.distance(b)

    def set_minimum(self, a, b: Coordinate | None = None) -> None:
        cand = self._candidate(a, b)
        if cand is None:
            return
        if not self.is_initialized or cand[2] < self._distance:
            self._a, self._b, self._distance = cand

    def set_maximum(self, a, b: Coordinate | None = None) -> None:
        cand = self._candidate(a, b)
        if cand is None:
            return
        if not self.is_initialized or cand[2] > self._distance:
            self._a, self._b, self._distance = cand

    # value-style combinators; the receiver is left untouched

    def copy(self) -> "PointPairDistance":
        out = PointPairDistance()
        out._a, out._b, out._distance = self._a, self._b, self._distance
        return out

    def with_minimum(self, a, b: Coordinate | None = None) -> "PointPairDistance":
        out = self.copy()
        out.set_minimum(a, b)
        return out

    def with_maximum(self, a, b: Coordinate | None = None) -> "PointPairDistance":
        out = self.copy()
        out.set_maximum(a, b)
        return out
