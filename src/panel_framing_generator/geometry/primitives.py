# File: src/panel_framing_generator/geometry/primitives.py
"""
Geometric primitives for panel framing.

Points and vectors share one immutable type (Vector3); a planar point is
simply a Vector3 with z = 0. Segments are ordered point pairs with the
derived direction, length and local frame the framing code relies on.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Union

from panel_framing_generator.config.framing import EQUALITY_TOLERANCE


@dataclass(frozen=True)
class Vector3:
    """
    Immutable 3D vector / point.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (0 for points in the panel plane)
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def unitized(self) -> "Vector3":
        """Return the unit vector, or the zero vector if this has no length."""
        length = self.length()
        if length == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def distance_to(self, other: "Vector3") -> float:
        """Calculate Euclidean distance to another point."""
        return (self - other).length()

    def angle_to(self, other: "Vector3") -> float:
        """
        Angle to another vector in radians, in [0, pi].

        Returns NaN when either vector has zero (or undefined) length.
        """
        lengths = self.length() * other.length()
        if lengths == 0.0 or math.isnan(lengths):
            return math.nan
        cosine = self.dot(other) / lengths
        return math.acos(max(-1.0, min(1.0, cosine)))

    def is_almost_equal(self, other: "Vector3", tolerance: float = EQUALITY_TOLERANCE) -> bool:
        """Per-component absolute comparison."""
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> "Vector3":
        """Create from a 2- or 3-element sequence."""
        if len(t) not in (2, 3):
            raise ValueError(f"Expected 2 or 3 coordinates, got {len(t)}: {t!r}")
        if len(t) == 2:
            return cls(float(t[0]), float(t[1]))
        return cls(float(t[0]), float(t[1]), float(t[2]))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Vector3":
        return cls(float(data["x"]), float(data["y"]), float(data.get("z", 0.0)))

    @classmethod
    def parse(cls, value: Union["Vector3", Dict[str, Any], Sequence[float]]) -> "Vector3":
        """Accept a Vector3, an {x, y, z} dict or a coordinate sequence."""
        if isinstance(value, Vector3):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        return cls.from_tuple(value)


WORLD_X = Vector3(1.0, 0.0, 0.0)
WORLD_Y = Vector3(0.0, 1.0, 0.0)
WORLD_Z = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class SegmentFrame:
    """
    Local frame of a segment.

    Attributes:
        origin: Frame origin (segment start)
        x_axis: In-plane axis perpendicular to the segment
        y_axis: Completes the right-handed frame
        z_axis: Primary axis, along the segment direction
    """
    origin: Vector3
    x_axis: Vector3
    y_axis: Vector3
    z_axis: Vector3


@dataclass(frozen=True)
class Segment:
    """
    An ordered pair of points.

    Attributes:
        start: Start point
        end: End point
    """
    start: Vector3
    end: Vector3

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Vector3:
        """Unit direction from start to end (zero vector if degenerate)."""
        return (self.end - self.start).unitized()

    def point_at(self, t: float) -> Vector3:
        """Point at normalized parameter t (0 = start, 1 = end)."""
        return self.start + (self.end - self.start) * t

    def frame_at_start(self) -> SegmentFrame:
        """
        Local frame at the segment start.

        The x axis is world-up crossed with the segment direction, falling
        back to world X when the segment is itself vertical.
        """
        z_axis = self.direction
        test = z_axis.dot(WORLD_Z)
        if abs(abs(test) - 1.0) < 1e-9:
            x_axis = WORLD_X
        else:
            x_axis = WORLD_Z.cross(z_axis).unitized()
        y_axis = z_axis.cross(x_axis).unitized()
        return SegmentFrame(self.start, x_axis, y_axis, z_axis)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": list(self.start.to_tuple()),
            "end": list(self.end.to_tuple()),
            "length": self.length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Segment":
        return cls(Vector3.parse(data["start"]), Vector3.parse(data["end"]))


def polygon_segments(vertices: Sequence[Vector3]) -> List[Segment]:
    """
    Closed list of segments for a polygon, preserving vertex order.

    A repeated closing vertex is ignored.
    """
    points = list(vertices)
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]
    return [
        Segment(points[i], points[(i + 1) % len(points)])
        for i in range(len(points))
    ]


def polygon_normal(vertices: Sequence[Vector3]) -> Vector3:
    """Unit plane normal of a polygon by Newell's method."""
    nx = ny = nz = 0.0
    points = list(vertices)
    for i, current in enumerate(points):
        nxt = points[(i + 1) % len(points)]
        nx += (current.y - nxt.y) * (current.z + nxt.z)
        ny += (current.z - nxt.z) * (current.x + nxt.x)
        nz += (current.x - nxt.x) * (current.y + nxt.y)
    return Vector3(nx, ny, nz).unitized()


def polygon_area(vertices: Sequence[Vector3]) -> float:
    """Signed planar area (XY) of a polygon; positive for counter-clockwise."""
    points = list(vertices)
    area = 0.0
    for i, current in enumerate(points):
        nxt = points[(i + 1) % len(points)]
        area += current.x * nxt.y - nxt.x * current.y
    return area / 2.0
