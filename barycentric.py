import logging

import numpy as np

import config
from elements import BarycentricResult, Point2D, PointLocation, Triangle
from errors import DegenerateTriangleError
from utils import (
    barycentric_denominator,
    barycentric_terms,
    barycentric_weights,
    is_close_to_zero,
    scale_edges,
    vec2,
)

logger = logging.getLogger(__name__)


class BarycentricCalculator:

    def __init__(self, epsilon=None, degenerate_tolerance=None):
        self.epsilon = config.EPSILON if epsilon is None else float(epsilon)
        if degenerate_tolerance is None:
            degenerate_tolerance = config.DEGENERATE_TOLERANCE
        self.degenerate_tolerance = float(degenerate_tolerance)

    def is_degenerate(self, d00, d01, d11):
        denom = barycentric_denominator(d00, d01, d11)
        return abs(denom) <= self.degenerate_tolerance * d00 * d11

    def _check_degenerate(self, a, b, c, d00, d01, d11):
        if self.is_degenerate(d00, d01, d11):
            denom = barycentric_denominator(d00, d01, d11)
            logger.debug("degenerate triangle, denom=%r", denom)
            raise DegenerateTriangleError(Point2D.of(a), Point2D.of(b), Point2D.of(c), denom)

    def compute(self, p, a, b, c):
        """Return the weights (u, v, w) of ``p`` with respect to ``a``, ``b``, ``c``.

        Raises DegenerateTriangleError when the vertices are collinear or
        coincident instead of returning nan/inf weights.
        """
        p, a, b, c = vec2(p), vec2(a), vec2(b), vec2(c)
        d00, d01, d11, d20, d21 = barycentric_terms(p, a, b, c)
        self._check_degenerate(a, b, c, d00, d01, d11)
        u, v, w = barycentric_weights(d00, d01, d11, d20, d21)
        return BarycentricResult(u, v, w)

    def compute_many(self, points, a, b, c):
        """Vectorized compute over an (N, 2) array of points, returns (N, 3)."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim == 1 and pts.size == 2:
            pts = pts.reshape(1, 2)
        elif pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) array of points, got shape {pts.shape}")
        if not np.all(np.isfinite(pts)):
            raise ValueError("point coordinates must be finite")
        a, b, c = vec2(a), vec2(b), vec2(c)
        v0, v1, v2 = scale_edges(b - a, c - a, pts - a)
        d00 = float(v0 @ v0)
        d01 = float(v0 @ v1)
        d11 = float(v1 @ v1)
        self._check_degenerate(a, b, c, d00, d01, d11)
        d20 = v2 @ v0
        d21 = v2 @ v1
        u, v, w = barycentric_weights(d00, d01, d11, d20, d21)
        return np.column_stack([u, v, w])

    def classify(self, result):
        eps = self.epsilon
        coords = tuple(result)
        if any(x < -eps for x in coords):
            return PointLocation.OUTSIDE
        if any(is_close_to_zero(x, eps) for x in coords):
            return PointLocation.ON_EDGE
        return PointLocation.INSIDE

    def locate(self, p, a, b, c):
        return self.classify(self.compute(p, a, b, c))

    def contains(self, p, a, b, c, include_edges=True):
        location = self.locate(p, a, b, c)
        if location is PointLocation.ON_EDGE:
            return include_edges
        return location is PointLocation.INSIDE

    def interpolate(self, result, a, b, c):
        """Map weights back to a point: u*a + v*b + w*c."""
        u, v, w = result
        pos = u * vec2(a) + v * vec2(b) + w * vec2(c)
        return Point2D.of(pos)

    def centroid(self, a, b, c):
        return Triangle.of(a, b, c).centroid()


_default_calculator = BarycentricCalculator()


def compute(p, a, b, c):
    return _default_calculator.compute(p, a, b, c)
