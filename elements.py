from enum import Enum
from typing import NamedTuple

from utils import vec2


class Point2D(NamedTuple):
    x: float
    y: float

    @classmethod
    def of(cls, pos):
        if isinstance(pos, cls):
            return pos
        p = vec2(pos)
        return cls(float(p[0]), float(p[1]))


class BarycentricResult(NamedTuple):
    """Weights of ``a``, ``b`` and ``c``; they sum to 1."""
    u: float
    v: float
    w: float

    def total(self):
        return self.u + self.v + self.w


class PointLocation(Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_EDGE = "on_edge"

    def describe(self):
        if self is PointLocation.ON_EDGE:
            return "Point is ON THE EDGE of the triangle"
        return f"Point is {self.name} the triangle"


class Triangle(NamedTuple):
    a: Point2D
    b: Point2D
    c: Point2D

    @classmethod
    def of(cls, a, b, c):
        return cls(Point2D.of(a), Point2D.of(b), Point2D.of(c))

    def centroid(self):
        x = (self.a.x + self.b.x + self.c.x) / 3.0
        y = (self.a.y + self.b.y + self.c.y) / 3.0
        return Point2D(x, y)
