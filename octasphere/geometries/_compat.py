from importlib.util import find_spec

import numpy as np


def mesh_to_trimesh(mesh):
    """Convert an octasphere Mesh to a Trimesh object.

    Creates a `trimesh.Trimesh <https://trimsh.org/trimesh.html#trimesh.Trimesh>`_
    from the positions and indices of the given mesh. The mesh is not
    processed, so the duplicated midpoint vertices are kept, and the vertex
    order matches that of the source mesh.

    Parameters
    ----------
    mesh : Mesh
        The mesh to be converted.

    Returns
    -------
    converted_mesh : Trimesh
        A Trimesh object representing the given mesh.

    Raises
    ------
    ImportError
        If the trimesh library is not installed.

    """
    if not find_spec("trimesh"):
        raise ImportError(
            "The `trimesh` library is required for this function: pip install trimesh"
        )

    from trimesh import Trimesh

    return Trimesh(
        vertices=np.asarray(mesh.positions, dtype=np.float64),
        faces=np.asarray(mesh.indices, dtype=np.int64),
        process=False,
        metadata={"name": mesh.name},
    )
