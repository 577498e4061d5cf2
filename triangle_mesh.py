import logging

import numpy as np

from barycentric import BarycentricCalculator
from elements import PointLocation, Triangle
from errors import DegenerateTriangleError
from utils import vec2

logger = logging.getLogger(__name__)


class TriangleMesh:
    def __init__(self):
        self.vertices = np.zeros((0, 3), dtype=np.float64)
        self.triangles = np.zeros((0, 3), dtype=np.int32)

    def clear(self):
        self.vertices = np.zeros((0, 3), dtype=np.float64)
        self.triangles = np.zeros((0, 3), dtype=np.int32)

    def copy(self):
        mesh = TriangleMesh()
        mesh.vertices = self.vertices.copy()
        mesh.triangles = self.triangles.copy()
        return mesh

    def append_vertex(self, v):
        v = np.asarray(v, dtype=np.float64).reshape(-1)
        if v.shape[0] == 2:
            v = np.append(v, 0.0)
        self.vertices = np.vstack([self.vertices, v[:3]])

    def append_triangle(self, tri_idx3):
        self.triangles = np.vstack([self.triangles, np.array(tri_idx3, dtype=np.int32)])

    def get_num_vertices(self):
        return self.vertices.shape[0]

    def get_num_triangles(self):
        return self.triangles.shape[0]

    def get_triangle_indices(self, i):
        return self.triangles[i].copy()

    def get_triangle_vertices(self, i):
        idx = self.triangles[i]
        return self.vertices[idx].copy()

    def get_triangle(self, i):
        # z is dropped, points are assumed co-planar with the xy plane
        tri = self.get_triangle_vertices(i)
        return Triangle.of(tri[0, :2], tri[1, :2], tri[2, :2])

    def get_bounding_box(self):
        if self.get_num_vertices() == 0:
            return np.array([0, 0, 0, 0, 0, 0], dtype=np.float64)
        mn = self.vertices.min(axis=0)
        mx = self.vertices.max(axis=0)
        return np.array([mn[0], mx[0], mn[1], mx[1], mn[2], mx[2]], dtype=np.float64)

    def read_obj(self, path):
        self.clear()
        verts = []
        faces = []
        with open(path, 'r') as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                parts = line.split()
                try:
                    if parts[0] == 'v':
                        if len(parts) >= 4:
                            x, y, z = float(parts[1]), float(parts[2]), float(parts[3])
                        else:
                            x, y = float(parts[1]), float(parts[2])
                            z = 0.0
                        verts.append([x, y, z])
                    elif parts[0] == 'f':
                        if len(parts) < 4:
                            raise ValueError("face needs three vertex indices")
                        idxs = []
                        for t in parts[1:]:
                            s = t.split('/')[0]
                            idxs.append(int(s) - 1)
                        # polygons are split into a fan around the first vertex
                        for k in range(1, len(idxs) - 1):
                            faces.append([idxs[0], idxs[k], idxs[k + 1]])
                except (ValueError, IndexError) as e:
                    raise ValueError(f"{path}:{lineno}: malformed OBJ record {line!r}") from e
        if len(verts) == 0 or len(faces) == 0:
            logger.debug("%s has no vertices or faces", path)
            return
        faces = np.array(faces, dtype=np.int32)
        if faces.min() < 0 or faces.max() >= len(verts):
            raise ValueError(f"{path}: face index out of range")
        self.vertices = np.array(verts, dtype=np.float64)
        self.triangles = faces
        logger.debug("loaded %d vertices, %d triangles from %s",
                     self.get_num_vertices(), self.get_num_triangles(), path)

    def locate_point(self, p, calculator=None):
        """Find the first triangle containing ``p`` (edges included).

        Returns ``(triangle_index, BarycentricResult)`` or None.
        """
        calc = calculator or BarycentricCalculator()
        p = vec2(p)
        if self.get_num_triangles() == 0:
            return None
        bounds = self.get_bounding_box()
        eps = calc.epsilon
        if (p[0] < bounds[0] - eps or p[0] > bounds[1] + eps
                or p[1] < bounds[2] - eps or p[1] > bounds[3] + eps):
            return None
        for i in range(self.get_num_triangles()):
            a, b, c = self.get_triangle(i)
            try:
                result = calc.compute(p, a, b, c)
            except DegenerateTriangleError:
                logger.debug("skipping degenerate triangle %d", i)
                continue
            if calc.classify(result) is not PointLocation.OUTSIDE:
                return i, result
        return None

    def transfer_point(self, p, target, calculator=None):
        """Re-express ``p`` in ``target`` using its weights in this mesh.

        Both meshes must share the same triangle indices.
        """
        if not np.array_equal(self.triangles, target.triangles):
            raise ValueError("meshes do not share the same triangle topology")
        calc = calculator or BarycentricCalculator()
        hit = self.locate_point(p, calc)
        if hit is None:
            return None
        i, result = hit
        a, b, c = target.get_triangle(i)
        return calc.interpolate(result, a, b, c)


def make_square_mesh(rows=5, size=2.0):
    """Regular grid of ``rows`` x ``rows`` vertices centred on the origin."""
    mesh = TriangleMesh()
    step = size / float(rows - 1)
    for yi in range(rows):
        y = -size / 2.0 + yi * step
        for xi in range(rows):
            x = -size / 2.0 + xi * step
            mesh.append_vertex([x, y, 0.0])
    for yi in range(rows - 1):
        row1 = yi * rows
        row2 = (yi + 1) * rows
        for xi in range(rows - 1):
            tri1 = [row1 + xi, row2 + xi + 1, row1 + xi + 1]
            tri2 = [row1 + xi, row2 + xi, row2 + xi + 1]
            mesh.append_triangle(tri1)
            mesh.append_triangle(tri2)
    return mesh
