"""Octasphere: generate subdivided octahedron meshes and export them to OBJ."""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils

from .geometries import (
    Mesh,
    MeshBuilder,
    SubdivisionEngine,
    OctasphereConfig,
    generate,
    octasphere_geometry,
    mesh_to_trimesh,
    DEFAULT_MESH_NAME,
    MAX_SUBDIVISIONS,
)

from .utils import logger
from .utils.bounds import Bounds
from .utils.export import MeshExporter, export_obj
from .utils.transform import rotate
