import numpy as np

from ..utils import logger
from ._base import DEFAULT_MESH_NAME


MAX_SUBDIVISIONS = 6

# The base octahedron: apex, four points on the equator, nadir. The equator
# points are not unit length; add_vertex() projects them onto the sphere.
OCTAHEDRON_POSITIONS = np.array(
    [
        [0, 1, 0],
        [-1, 0, 1],
        [1, 0, 1],
        [-1, 0, -1],
        [1, 0, -1],
        [0, -1, 0],
    ],
    dtype=np.float32,
)

OCTAHEDRON_INDICES = np.array(
    [
        [0, 1, 2],
        [0, 3, 1],
        [0, 4, 3],
        [0, 2, 4],
        [2, 1, 5],
        [1, 3, 5],
        [3, 4, 5],
        [4, 2, 5],
    ],
    dtype=np.int32,
)


def clamp_subdivisions(subdivisions):
    """Check the subdivision count and clamp it to ``MAX_SUBDIVISIONS``.

    Values above the maximum are not an error; a warning is logged and the
    maximum is used instead.
    """
    if isinstance(subdivisions, bool) or not isinstance(
        subdivisions, (int, np.integer)
    ):
        raise TypeError(
            f"Subdivisions must be an int, not {subdivisions.__class__.__name__}"
        )
    subdivisions = int(subdivisions)
    if subdivisions < 0:
        raise ValueError(f"Subdivisions must be non-negative, not {subdivisions}")
    if subdivisions > MAX_SUBDIVISIONS:
        logger.warning(
            f"Subdivisions set to {MAX_SUBDIVISIONS}, this is the maximum "
            f"(got {subdivisions})."
        )
        subdivisions = MAX_SUBDIVISIONS
    return subdivisions


class SubdivisionEngine:
    """Build an octahedron into a mesh builder and refine it towards a sphere.

    The engine goes through a fixed sequence of states::

        "uninitialized" -> "base_built" -> "subdividing" -> "finalized"

    ``setup_base()`` moves it to "base_built", each subdivision round to
    "subdividing", and ``finalize()`` to "finalized". Calling an operation
    from the wrong state raises a ``RuntimeError``.

    Every round replaces each triangle by four. The midpoints of a triangle's
    edges are added as new vertices for every triangle separately, so edges
    that are shared between two triangles get two (coincident) midpoint
    vertices. The resulting mesh is thus not welded: after k rounds it has
    ``8 * 4**k`` triangles and ``6 + 24 * (4**k - 1) // 3`` vertices.

    Parameters
    ----------
    builder : MeshBuilder
        The builder to produce the mesh in. It should be empty; the engine
        assumes the base vertices get indices 0-5.
    subdivisions : int
        The number of subdivision rounds. Clamped to ``MAX_SUBDIVISIONS``.

    """

    def __init__(self, builder, subdivisions=0):
        self._builder = builder
        self._subdivisions = clamp_subdivisions(subdivisions)
        self._rounds_done = 0
        self._state = "uninitialized"

    def __repr__(self):
        return (
            f"<SubdivisionEngine '{self._state}' "
            f"round {self._rounds_done}/{self._subdivisions} at {hex(id(self))}>"
        )

    @property
    def builder(self):
        """The ``MeshBuilder`` that this engine writes to."""
        return self._builder

    @property
    def subdivisions(self):
        """The (clamped) number of subdivision rounds."""
        return self._subdivisions

    @property
    def rounds_done(self):
        return self._rounds_done

    @property
    def state(self):
        """The current state of the engine, see the class docstring."""
        return self._state

    def _check_state(self, *allowed):
        if self._state not in allowed:
            raise RuntimeError(
                f"Cannot do this when the subdivision engine is '{self._state}'."
            )

    def setup_base(self):
        """Add the 6 vertices and 8 faces of the base octahedron."""
        self._check_state("uninitialized")
        builder = self._builder
        if builder.vertex_count or builder.triangle_count:
            raise RuntimeError("The base can only be built into an empty builder.")

        for x, y, z in OCTAHEDRON_POSITIONS:
            builder.add_vertex(x, y, z)
        for i1, i2, i3 in OCTAHEDRON_INDICES:
            builder.add_triangle(i1, i2, i3)

        self._state = "base_built"

    def subdivide_once(self):
        """Replace every triangle by four, adding three new vertices per triangle.

        For a triangle (v1, v2, v3), the midpoints m12, m23 and m31 are added
        (in that order) and the triangles (v1, m12, m31), (m12, v2, m23),
        (m31, m23, v3) and (m12, m23, m31) take its place. This preserves the
        winding of the original triangle.
        """
        self._check_state("base_built", "subdividing")
        builder = self._builder

        triangles = np.array(builder.triangles())  # copy, buffer gets cleared
        vertices = builder.vertices()

        # corners has shape (n_triangles, 3 corners, xyz)
        corners = vertices[triangles].astype(np.float64)
        # Edges (1,2), (2,3) and (3,1) per triangle
        midpoints = 0.5 * (corners + np.roll(corners, -1, axis=1))

        # Three new vertices per triangle, per triangle in the original order
        new_indices = builder.add_vertices(midpoints.reshape(-1, 3)).reshape(-1, 3)
        v1, v2, v3 = triangles[:, 0], triangles[:, 1], triangles[:, 2]
        m12, m23, m31 = new_indices[:, 0], new_indices[:, 1], new_indices[:, 2]

        # children has shape (n_triangles, 4, 3)
        children = np.empty((len(triangles), 4, 3), dtype=np.int32)
        children[:, 0] = np.column_stack([v1, m12, m31])
        children[:, 1] = np.column_stack([m12, v2, m23])
        children[:, 2] = np.column_stack([m31, m23, v3])
        children[:, 3] = np.column_stack([m12, m23, m31])

        builder.clear_triangles()
        builder.add_triangles(children.reshape(-1, 3))

        self._rounds_done += 1
        self._state = "subdividing"
        logger.debug(
            f"Subdivision round {self._rounds_done}: "
            f"{builder.vertex_count} vertices, {builder.triangle_count} triangles"
        )

    def manage_subdivision(self):
        """Run the configured number of subdivision rounds."""
        self._check_state("base_built")
        for _ in range(self._subdivisions):
            self.subdivide_once()

    def finalize(self, name=DEFAULT_MESH_NAME):
        """Freeze the builder's buffers into a ``Mesh``."""
        self._check_state("base_built", "subdividing")
        mesh = self._builder.to_mesh(name)
        self._state = "finalized"
        return mesh
