# File: src/panel_framing_generator/geometry/transform.py
"""
Panel placement transform.

A wall panel's boundary is stored in panel-local coordinates:
- X: Along the panel length
- Y: Up the panel height
- Z: Through the panel thickness (panel normal)

PanelTransform maps those local coordinates into world coordinates:
world = origin + x * x_axis + y * y_axis + z * z_axis
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .primitives import Vector3, Segment, WORLD_X, WORLD_Y, WORLD_Z


@dataclass(frozen=True)
class PanelTransform:
    """
    Placement of a panel's local frame in world space.

    Attributes:
        origin: World position of the local origin
        x_axis: World direction of local X
        y_axis: World direction of local Y
        z_axis: World direction of local Z (panel normal)
    """
    origin: Vector3 = Vector3(0.0, 0.0, 0.0)
    x_axis: Vector3 = WORLD_X
    y_axis: Vector3 = WORLD_Y
    z_axis: Vector3 = WORLD_Z

    @classmethod
    def identity(cls) -> "PanelTransform":
        return cls()

    def of_point(self, point: Vector3) -> Vector3:
        """Transform a panel-local point to world coordinates."""
        return Vector3(
            self.origin.x + self.x_axis.x * point.x + self.y_axis.x * point.y + self.z_axis.x * point.z,
            self.origin.y + self.x_axis.y * point.x + self.y_axis.y * point.y + self.z_axis.y * point.z,
            self.origin.z + self.x_axis.z * point.x + self.y_axis.z * point.y + self.z_axis.z * point.z,
        )

    def of_segment(self, segment: Segment) -> Segment:
        return Segment(self.of_point(segment.start), self.of_point(segment.end))

    def of_polygon(self, vertices: Sequence[Vector3]) -> List[Vector3]:
        return [self.of_point(v) for v in vertices]

    def moved(self, vector: Vector3) -> "PanelTransform":
        """Copy of this transform with the origin translated by a world vector."""
        return PanelTransform(self.origin + vector, self.x_axis, self.y_axis, self.z_axis)

    def moved_along_normal(self, distance: float) -> "PanelTransform":
        """Copy of this transform moved along its own Z axis."""
        return self.moved(self.z_axis * distance)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "origin": self.origin.to_dict(),
            "x_axis": self.x_axis.to_dict(),
            "y_axis": self.y_axis.to_dict(),
            "z_axis": self.z_axis.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PanelTransform":
        """
        Create from a base plane dictionary.

        Args:
            data: Dictionary with origin, x_axis, y_axis and optionally
                z_axis. Each entry is an {x, y, z} dict or a coordinate list.
                A missing z_axis is computed as x_axis cross y_axis.

        Returns:
            PanelTransform (identity when data is empty)
        """
        if not data:
            return cls.identity()

        origin = Vector3.parse(data.get("origin", (0.0, 0.0, 0.0)))
        x_axis = Vector3.parse(data.get("x_axis", (1.0, 0.0, 0.0)))
        y_axis = Vector3.parse(data.get("y_axis", (0.0, 1.0, 0.0)))
        if "z_axis" in data:
            z_axis = Vector3.parse(data["z_axis"])
        else:
            z_axis = x_axis.cross(y_axis).unitized()
        return cls(origin, x_axis, y_axis, z_axis)
