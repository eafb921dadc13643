from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from ..utils.bounds import Bounds

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


DEFAULT_MESH_NAME = "Octasphere"


def _frozen(val, dtype, name):
    # Copy so that later changes to the source buffer don't leak into the mesh.
    arr = np.array(val, dtype=dtype)
    if arr.size == 0:
        arr = arr.reshape(0, 3)
    if not (arr.ndim == 2 and arr.shape[1] == 3):
        raise ValueError(f"Expected Nx3 data for {name}")
    arr.flags.writeable = False
    return arr


class Mesh:
    """A generated triangle mesh, frozen once generation has completed.

    This is what the generator hands to its host: a vertex position buffer and
    a triangle index buffer. The host is free to derive whatever else it needs
    from these (normals, tangents, bounds); the mesh itself only carries the
    topology and the positions.

    Both arrays are flagged as read-only. To get a modified mesh, create a new
    one, as e.g. ``octasphere.utils.transform.rotate()`` does.

    Parameters
    ----------
    positions : ArrayLike
        Nx3 vertex positions. Stored as float32.
    indices : ArrayLike
        Mx3 vertex indices, one row per triangle, in winding order. Stored as
        int32.
    name : str
        The name of the mesh, used e.g. as the group and file name on export.

    Example
    -------

    .. code-block:: py

        m = Mesh(positions=[[0, 1, 0], [1, 0, 0], [0, 0, 1]], indices=[[0, 2, 1]])
        m.positions  # read-only numpy array
        m.triangle_count  # 1

    """

    def __init__(
        self,
        positions: ArrayLike,
        indices: ArrayLike,
        name: str = DEFAULT_MESH_NAME,
    ):
        self._positions = _frozen(positions, np.float32, "positions")
        self._indices = _frozen(indices, np.int32, "indices")
        if not isinstance(name, str) or not name:
            raise ValueError("Mesh name must be a non-empty string.")
        self._name = name

        if self._indices.size and (
            self._indices.min() < 0 or self._indices.max() >= len(self._positions)
        ):
            raise IndexError("Mesh indices out of range of the positions.")

    def __repr__(self) -> str:
        return (
            f"<Mesh '{self._name}' with {self.vertex_count} vertices "
            f"and {self.triangle_count} triangles at {hex(id(self))}>"
        )

    @property
    def positions(self) -> np.ndarray:
        """The Nx3 vertex positions (read-only)."""
        return self._positions

    @property
    def indices(self) -> np.ndarray:
        """The Mx3 triangle indices (read-only)."""
        return self._indices

    @property
    def name(self) -> str:
        """The name of the mesh."""
        return self._name

    @property
    def vertex_count(self) -> int:
        return len(self._positions)

    @property
    def triangle_count(self) -> int:
        return len(self._indices)

    def get_bounds(self) -> Bounds | None:
        """Compute the bounds of this mesh.

        Returns None if the mesh has no vertices.
        """
        return Bounds.from_points(self._positions)
