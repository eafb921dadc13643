from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from ._base import Mesh, DEFAULT_MESH_NAME

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


class _GrowingArray:
    """An append-only Nx3 array that grows its capacity in powers of two."""

    __slots__ = ["_count", "_data"]

    def __init__(self, dtype, capacity=8):
        self._data = np.empty((capacity, 3), dtype=dtype)
        self._count = 0

    def __len__(self):
        return self._count

    def append(self, rows):
        n = rows.shape[0]
        needed = self._count + n
        capacity = self._data.shape[0]
        if needed > capacity:
            while capacity < needed:
                capacity *= 2
            data = np.empty((capacity, 3), dtype=self._data.dtype)
            data[: self._count] = self._data[: self._count]
            self._data = data
        self._data[self._count : needed] = rows
        self._count = needed

    def clear(self):
        self._count = 0

    def view(self):
        view = self._data[: self._count]
        view.flags.writeable = False
        return view


class MeshBuilder:
    """Accumulate the vertices and triangles of a mesh under construction.

    Every vertex that is added is projected onto the sphere with the builder's
    radius: the point is normalized, then scaled by ``radius``. Vertices are
    never deduplicated; two coincident points get two indices. Indices are
    stable: the vertex buffer is append-only, so an index handed out once
    stays valid for the lifetime of the builder.

    The triangle buffer on the other hand can be cleared (see
    ``clear_triangles()``), which is what a subdivision round does before it
    records the refined triangles.

    Parameters
    ----------
    radius : float
        The radius of the sphere that all vertices are placed on.

    """

    def __init__(self, radius=1.0):
        radius = float(radius)
        if not (np.isfinite(radius) and radius > 0):
            raise ValueError(f"Radius must be a positive number, not {radius}")
        self._radius = radius
        self._vertices = _GrowingArray(np.float32)
        self._triangles = _GrowingArray(np.int32)

    def __repr__(self):
        return (
            f"<MeshBuilder with {self.vertex_count} vertices and "
            f"{self.triangle_count} triangles at {hex(id(self))}>"
        )

    @property
    def radius(self):
        """The radius of the sphere that the vertices are placed on."""
        return self._radius

    @property
    def vertex_count(self):
        return len(self._vertices)

    @property
    def triangle_count(self):
        return len(self._triangles)

    def add_vertex(self, x, y, z):
        """Add a vertex, projected onto the sphere. Returns its index.

        The point (x, y, z) must not be the zero vector.
        """
        return int(self.add_vertices([(x, y, z)])[0])

    def add_vertices(self, points: ArrayLike):
        """Add an Nx3 array of vertices, each projected onto the sphere.

        Returns the array of new indices, in the order of ``points``.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        lengths = np.linalg.norm(points, axis=-1)
        if not np.all(lengths > 0):
            raise ValueError("Cannot project the zero vector onto a sphere.")
        points = points / lengths[:, None] * self._radius

        start = self.vertex_count
        self._vertices.append(points.astype(np.float32))
        return np.arange(start, self.vertex_count, dtype=np.int32)

    def add_triangle(self, i1, i2, i3):
        """Add a triangle defined by three existing vertex indices.

        The order of the indices is the winding order and is preserved.
        """
        self.add_triangles([(i1, i2, i3)])

    def add_triangles(self, triples: ArrayLike):
        """Add an Mx3 array of triangles."""
        triples = np.asarray(triples).reshape(-1, 3)
        if triples.size:
            if triples.min() < 0 or triples.max() >= self.vertex_count:
                raise IndexError(
                    f"Triangle indices must be in [0, {self.vertex_count}), "
                    f"got range [{triples.min()}, {triples.max()}]."
                )
        self._triangles.append(triples.astype(np.int32))

    def clear_triangles(self):
        """Remove all triangles. The vertices are left untouched."""
        self._triangles.clear()

    def vertices(self):
        """Read-only Nx3 view of the current vertex buffer."""
        return self._vertices.view()

    def triangles(self):
        """Read-only Mx3 view of the current triangle buffer."""
        return self._triangles.view()

    def to_mesh(self, name=DEFAULT_MESH_NAME):
        """Create a frozen ``Mesh`` from the current buffers."""
        return Mesh(self.vertices(), self.triangles(), name=name)
