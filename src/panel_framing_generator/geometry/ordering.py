# File: src/panel_framing_generator/geometry/ordering.py
"""Ordering of points by distance from a fixed origin."""

from typing import Iterable, List

from .primitives import Vector3


class CrossingOrder:
    """
    Orders points by Euclidean distance to an origin.

    Build one per candidate line, with the line's start as origin. Instances
    can be used directly as a sort key, or through compare().

    Example:
        >>> order = CrossingOrder(line.start)
        >>> crossings.sort(key=order)
    """

    def __init__(self, origin: Vector3):
        self.origin = origin

    def __call__(self, point: Vector3) -> float:
        return point.distance_to(self.origin)

    def compare(self, a: Vector3, b: Vector3) -> int:
        """Return -1, 0 or 1 as a is nearer, equally far, or farther than b."""
        da = self(a)
        db = self(b)
        if da < db:
            return -1
        if da > db:
            return 1
        return 0

    def sorted(self, points: Iterable[Vector3]) -> List[Vector3]:
        return sorted(points, key=self)
