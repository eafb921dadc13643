from __future__ import annotations

import numpy as np
import pylinalg as la

from ..geometries import Mesh


def rotate(
    mesh: Mesh,
    angle_per_second: float = 40.0,
    elapsed: float = 1.0,
    axis=(0, 1, 0),
) -> Mesh:
    """Rotate a mesh around an axis through the origin.

    This is the transform that a host would apply every frame to spin the
    generated sphere, with ``elapsed`` the time since the previous frame. The
    angle is ``angle_per_second * elapsed`` degrees, and the rotation is
    counter-clockwise when looking down the axis towards the origin.

    Parameters
    ----------
    mesh : Mesh
        The mesh to rotate. It is not modified.
    angle_per_second : float
        The rotation speed in degrees per second.
    elapsed : float
        The elapsed time in seconds.
    axis : ArrayLike
        The axis to rotate around. Need not be normalized. Default is the
        up-axis (0, 1, 0).

    Returns
    -------
    rotated : Mesh
        A new mesh with rotated positions and the same indices and name.

    """
    axis = np.asarray(axis, dtype=float)
    length = np.linalg.norm(axis)
    if not length > 0:
        raise ValueError("The rotation axis must not be the zero vector.")

    angle = np.radians(angle_per_second * elapsed)
    rotation = la.quat_from_axis_angle(axis / length, angle)
    matrix = la.mat_from_quat(rotation)

    positions = la.vec_transform(mesh.positions, matrix)
    return Mesh(positions, mesh.indices, name=mesh.name)
