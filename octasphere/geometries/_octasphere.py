import numpy as np

from ._base import DEFAULT_MESH_NAME
from ._builder import MeshBuilder
from ._subdivision import SubdivisionEngine


class OctasphereConfig:
    """The inputs for generating an octasphere.

    Parameters
    ----------
    radius : float
        The radius of the sphere that the vertices lie on. Must be positive.
    subdivisions : int
        The number of times each face is subdivided, where 0 (the default)
        means the plain octahedron. Values above 6 are clamped (with a
        warning) when the mesh is generated.
    name : str
        The name of the mesh. Default "Octasphere".

    """

    def __init__(self, radius=1.0, subdivisions=0, name=DEFAULT_MESH_NAME):
        self.radius = radius
        self.subdivisions = subdivisions
        self.name = name

    def __repr__(self):
        return (
            f"OctasphereConfig(radius={self._radius!r}, "
            f"subdivisions={self._subdivisions!r}, name={self._name!r})"
        )

    @property
    def radius(self):
        """The radius of the sphere that the vertices lie on."""
        return self._radius

    @radius.setter
    def radius(self, value):
        value = float(value)
        if not (np.isfinite(value) and value > 0):
            raise ValueError(f"Radius must be a positive number, not {value}")
        self._radius = value

    @property
    def subdivisions(self):
        """The requested number of subdivision rounds."""
        return self._subdivisions

    @subdivisions.setter
    def subdivisions(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(
                f"Subdivisions must be an int, not {value.__class__.__name__}"
            )
        if value < 0:
            raise ValueError(f"Subdivisions must be non-negative, not {value}")
        self._subdivisions = int(value)

    @property
    def name(self):
        """The name of the mesh, also used as the name of exported files."""
        return self._name

    @name.setter
    def name(self, value):
        if not isinstance(value, str) or not value:
            raise ValueError("The mesh name must be a non-empty string.")
        self._name = value


def generate(config=None):
    """Generate an octasphere mesh.

    Builds the base octahedron, runs the subdivision rounds, and freezes the
    result. The returned mesh is not shared with anything; the host can use it
    for rendering and/or export.

    Parameters
    ----------
    config : OctasphereConfig | None
        The generation inputs. If None, the defaults are used.

    Returns
    -------
    mesh : Mesh
        The generated mesh.

    """
    if config is None:
        config = OctasphereConfig()
    builder = MeshBuilder(config.radius)
    engine = SubdivisionEngine(builder, config.subdivisions)
    engine.setup_base()
    engine.manage_subdivision()
    return engine.finalize(config.name)


def octasphere_geometry(radius=1.0, subdivisions=0, name=DEFAULT_MESH_NAME):
    """Generate an octasphere.

    Creates an octahedron centered around the local origin, with its faces
    recursively subdivided into four and the new vertices projected onto the
    sphere of the given radius. The vertices at the shared edges of faces are
    not merged.

    Parameters
    ----------
    radius : float
        The radius of the sphere that has the vertices on its surface.
    subdivisions: int
        The amount of times each face will be subdivided, where 0
        (the default) means no subdivision. At most 6.
    name : str
        The name of the mesh.

    Returns
    -------
    octasphere : Mesh
        A mesh object representing the desired sphere approximation, with
        ``8 * 4**subdivisions`` triangles.

    """
    return generate(OctasphereConfig(radius, subdivisions, name))
