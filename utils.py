import math

import numpy as np


def vec2(v):
    arr = np.asarray(v, dtype=np.float64)
    if arr.size != 2:
        raise ValueError(f"expected a 2D point, got {v!r}")
    arr = arr.reshape(2, )
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"point coordinates must be finite, got {v!r}")
    return arr


def sub2(left, right):
    """Component-wise ``left - right`` of two 2D points."""
    return np.array([left[0] - right[0], left[1] - right[1]], dtype=np.float64)


def dot2(a, b):
    return float(a[0] * b[0] + a[1] * b[1])


def is_close_to_zero(value, eps):
    return math.fabs(value) <= eps


def scale_edges(v0, v1, v2):
    # weights are invariant under uniform scaling, this keeps the dot products in range
    scale = max(abs(v0[0]), abs(v0[1]), abs(v1[0]), abs(v1[1]))
    if scale == 0.0:
        return v0, v1, v2
    return v0 / scale, v1 / scale, v2 / scale


def barycentric_terms(p, a, b, c):
    # 2D barycentric dot products, see barycentric_weights
    v0, v1, v2 = scale_edges(sub2(b, a), sub2(c, a), sub2(p, a))
    d00 = dot2(v0, v0)
    d01 = dot2(v0, v1)
    d11 = dot2(v1, v1)
    d20 = dot2(v2, v0)
    d21 = dot2(v2, v1)
    return d00, d01, d11, d20, d21


def barycentric_denominator(d00, d01, d11):
    return d00 * d11 - d01 * d01


def barycentric_weights(d00, d01, d11, d20, d21):
    # caller checks the denominator first
    denom = barycentric_denominator(d00, d01, d11)
    v = (d11 * d20 - d01 * d21) / denom
    w = (d00 * d21 - d01 * d20) / denom
    u = 1.0 - v - w
    return u, v, w
