"""
Archimedean spiral of integer candidate points around a center.
"""

import math

from .config import RoundingMode
from .geometry import Point


def _snap(value: float, rounding: RoundingMode) -> int:
    """Snap a float offset to an integer. Python's round() is half-to-even, so
    half-away-from-zero is built from floor on the magnitude."""
    if rounding is RoundingMode.TRUNCATE:
        return math.trunc(value)
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Spiral:
    """
    Infinite, deterministic sequence of points spiralling out from a center.

    Each point sits at radius ``step * angle``; the angle then advances by
    ``step``. The cursor only ever moves forward, so consecutive calls resume
    where the previous one stopped.
    """

    def __init__(self, center: Point, step: float = 1.0,
                 rounding: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO):
        if not (step > 0 and math.isfinite(step)):
            raise ValueError(f"Spiral step must be a positive number, got {step}")
        self.center = Point(*center)
        self.step = float(step)
        self.rounding = rounding
        self._angle = 0.0

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def radius(self) -> float:
        """Radius of the next point to be emitted."""
        return self.step * self._angle

    def __iter__(self) -> "Spiral":
        return self

    def __next__(self) -> Point:
        radius = self.step * self._angle
        dx = _snap(radius * math.cos(self._angle), self.rounding)
        dy = _snap(radius * math.sin(self._angle), self.rounding)
        self._angle += self.step
        return Point(self.center.x + dx, self.center.y + dy)

    next = __next__
