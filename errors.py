"""Exceptions raised by the barycentric calculator."""


class DegenerateTriangleError(ValueError):
    """Raised when the triangle has (near) zero area."""

    def __init__(self, a, b, c, denom):
        super().__init__(
            f"degenerate triangle {tuple(a)}, {tuple(b)}, {tuple(c)}: "
            f"barycentric denominator is {denom!r}"
        )
        self.vertices = (a, b, c)
        self.denom = denom
