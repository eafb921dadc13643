"""
Generating and containing mesh data.

.. currentmodule:: octasphere.geometries

A mesh consists of a vertex buffer (``positions``, Nx3) and a triangle buffer
(``indices``, Mx3). The triangles refer to the vertices by index, and the
order of the three indices is the winding order, which defines the outward
facing side of the triangle.

Meshes are generated with a ``MeshBuilder``, which accumulates the vertices
and triangles, and a ``SubdivisionEngine``, which builds the base octahedron
and refines it. Once done, the buffers are frozen into a ``Mesh``.

.. rubric:: Generation
.. autosummary::

    octasphere_geometry
    generate
    OctasphereConfig

.. rubric:: Building blocks
.. autosummary::

    Mesh
    MeshBuilder
    SubdivisionEngine
    mesh_to_trimesh

"""

# ruff: noqa: F401

from ._base import Mesh, DEFAULT_MESH_NAME
from ._builder import MeshBuilder
from ._subdivision import (
    SubdivisionEngine,
    MAX_SUBDIVISIONS,
    OCTAHEDRON_POSITIONS,
    OCTAHEDRON_INDICES,
    clamp_subdivisions,
)
from ._octasphere import OctasphereConfig, generate, octasphere_geometry
from ._compat import mesh_to_trimesh

# Define __all__ for e.g. Sphinx
__all__ = [
    "Mesh",
    "MeshBuilder",
    "SubdivisionEngine",
    "OctasphereConfig",
    "generate",
    "octasphere_geometry",
    "mesh_to_trimesh",
    "DEFAULT_MESH_NAME",
    "MAX_SUBDIVISIONS",
]
