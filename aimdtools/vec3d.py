"""Three-dimensional Cartesian vectors."""

from dataclasses import dataclass


@dataclass(slots=True)
class Vec3d:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def subtract(self, other: "Vec3d") -> "Vec3d":
        """Return ``self - other`` as a new vector."""
        return Vec3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def norm_squared(self) -> float:
        """Return the squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z