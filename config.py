"""Tolerances and logging defaults for the barycentric toolkit."""

import os

# ── Classification ─────────────────────────────────────────────────────────
# A barycentric weight within this distance of zero counts as on the edge.
EPSILON = float(os.environ.get("BARYCENTRIC_EPSILON", "1e-9"))

# ── Degeneracy ─────────────────────────────────────────────────────────────
# Relative to d00 * d11, i.e. sin^2 of the angle at vertex a.
DEGENERATE_TOLERANCE = float(os.environ.get("BARYCENTRIC_DEGENERATE_TOLERANCE", "1e-12"))

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("BARYCENTRIC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
