"""
Data models for the zone entity adapter.

Defines positions and the axis-aligned bounds of a zone entity.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Vec3(NamedTuple):
    """A point or extent in world space."""

    x: float
    y: float
    z: float

    @classmethod
    def from_dict(cls, data: dict) -> "Vec3":
        """Deserialize from a {"x", "y", "z"} dict."""
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))


@dataclass(frozen=True)
class ZoneBounds:
    """
    Axis-aligned box of a zone entity.

    Attributes:
        position: Center of the box
        dimensions: Full extent along each axis
    """

    position: Vec3
    dimensions: Vec3

    @property
    def size(self) -> float:
        """Specificity metric: the sum of the box dimensions."""
        return self.dimensions.x + self.dimensions.y + self.dimensions.z

    def contains(self, point: Vec3) -> bool:
        """Check if a point lies strictly inside the box."""
        return all(
            center - extent / 2 < value < center + extent / 2
            for value, center, extent in zip(point, self.position, self.dimensions)
        )
