# io/samples.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np

from lineref.config.models import SampleModel
from lineref.domain.entities.geography import Coordinate, LineString


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class PolylineSampler:
    """
    Deterministic random polylines inside cfg.extent.
    Each named stream is an independent numpy Generator derived from
    [seed, crc32(name)], so draws from one stream never shift another.
    """

    def __init__(self, cfg: SampleModel | None = None):
        self.cfg = cfg or SampleModel()
        self.seed = _u32(self.cfg.seed)

    @cache
    def stream(self, name: str) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.seed, _crc32_u32(name)])
        return np.random.Generator(np.random.PCG64(ss))

    def line(self, name: str = "lines") -> LineString:
        rng = self.stream(name)
        n = int(rng.integers(self.cfg.min_points, self.cfg.max_points + 1))
        x0, y0, x1, y1 = self.cfg.extent
        xs = rng.uniform(x0, x1, size=n)
        ys = rng.uniform(y0, y1, size=n)
        if self.cfg.with_z:
            zs = rng.uniform(0.0, 100.0, size=n)
            return LineString(
                tuple(Coordinate(float(x), float(y), float(z)) for x, y, z in zip(xs, ys, zs))
            )
        return LineString(tuple(Coordinate(float(x), float(y)) for x, y in zip(xs, ys)))

    def lines(self, count: int, name: str = "lines") -> list[LineString]:
        return [self.line(name) for _ in range(count)]

    def lengths(self, line: LineString, count: int, name: str = "lengths") -> list[float]:
        """Arc-lengths spread over [0, line.length], both ends included."""
        total = line.length
        inner = self.stream(name).uniform(0.0, total, size=max(count - 2, 0))
        return [0.0, *sorted(float(d) for d in inner), total]
