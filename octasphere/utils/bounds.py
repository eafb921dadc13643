import numpy as np


class Bounds:
    """The bounding volume of a set of points.

    Holds the axis-aligned bounding box (aabb, a 2x3 array with the minimum
    and maximum corner) and the radius of the sphere around the aabb center
    that encloses all points. For a generated octasphere the center is the
    origin and the radius is the sphere radius.
    """

    __slots__ = ["aabb", "radius"]

    def __init__(self, aabb, radius):
        aabb = np.asarray(aabb, dtype=float)
        if aabb.shape != (2, 3):
            raise ValueError("aabb must be 2x3 array")
        if np.any(aabb[0] > aabb[1]):
            raise ValueError("aabb minimum must not exceed its maximum")
        radius = float(radius)
        if not radius >= 0:
            raise ValueError(f"Bounds radius must be non-negative, not {radius}")
        self.aabb = aabb
        self.radius = radius

    def __repr__(self):
        center = ", ".join(f"{i:0.4g}" for i in self.center)
        size = ", ".join(f"{i:0.4g}" for i in self.size)
        return (
            f"<Bounds at ({center}) of size ({size}) "
            f"with radius {self.radius:0.4g} at {hex(id(self))}>"
        )

    @property
    def center(self):
        return tuple(float(i) for i in 0.5 * (self.aabb[0] + self.aabb[1]))

    @property
    def size(self):
        """The (width, height, depth) of the aabb."""
        return tuple(float(i) for i in self.aabb[1] - self.aabb[0])

    @property
    def sphere(self):
        """The bounding sphere as (x, y, z, radius)."""
        return (*self.center, self.radius)

    @classmethod
    def from_points(cls, points):
        """Get the bounds of an Nx3 array of points.

        Points with nonfinite coordinates are ignored. Returns None if there
        are no (finite) points.
        """
        points = np.asarray(points, dtype=float)
        if not (points.ndim == 2 and points.shape[1] == 3):
            raise ValueError("Points must be a list of 3D points.")
        points = points[np.isfinite(points).all(axis=1)]
        if points.shape[0] == 0:
            return None

        aabb = np.array([points.min(axis=0), points.max(axis=0)])
        center = 0.5 * (aabb[0] + aabb[1])
        radius = np.linalg.norm(points - center, axis=1).max()
        return cls(aabb, radius)
