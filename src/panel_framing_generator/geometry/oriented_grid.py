# File: src/panel_framing_generator/geometry/oriented_grid.py
"""
Oriented 2D grid over a panel polygon.

The grid spans the polygon's extent along two in-plane axes (U and V). Each
axis can be subdivided at a fixed or approximate interval. The grid yields
raw separator lines (untrimmed, spanning the full extent) and rectangular
cells trimmed to the polygon.

Coordinates along each axis are plain projections (point . axis), without
shifting to the polygon's corner, so an axis-aligned grid reproduces the
polygon's own coordinates exactly at the domain edges.

Example:
    >>> grid = OrientedGrid(boundary)
    >>> grid.divide_axis(GridDirection.U, 0.4064)
    >>> stud_lines = grid.separator_lines(GridDirection.V)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from shapely.geometry import Polygon

from .primitives import Vector3, Segment, WORLD_X, WORLD_Y
from .polygon_offset import to_shapely, from_shapely

logger = logging.getLogger(__name__)

# Remainders shorter than this are merged into the previous division
DIVISION_TOLERANCE = 1e-6


class GridDirection(Enum):
    """In-plane grid axes."""
    U = "u"
    V = "v"


class DivisionMode(Enum):
    """How an axis is split into intervals.

    Attributes:
        FIXED: Intervals of exactly the given length, remainder at the end
        APPROXIMATE: Equal intervals as close as possible to the given length
    """
    FIXED = "fixed"
    APPROXIMATE = "approximate"


@dataclass
class GridCell:
    """
    One rectangular grid cell.

    Attributes:
        u_index: Cell column (0 = lowest U)
        v_index: Cell row (0 = lowest V)
        rectangle: Untrimmed cell corners, counter-clockwise in (U, V)
        trimmed: Cell geometry intersected with the grid polygon; may hold
            several polygons for concave boundaries
    """
    u_index: int
    v_index: int
    rectangle: List[Vector3]
    trimmed: List[List[Vector3]] = field(default_factory=list)


def _divide(lo: float, hi: float, spacing: float, mode: DivisionMode) -> List[float]:
    """Division positions for [lo, hi], both ends included."""
    length = hi - lo
    if length <= 0:
        return [lo, hi]

    if mode == DivisionMode.APPROXIMATE:
        count = max(1, int(round(length / spacing)))
        return [lo + length * i / count for i in range(count)] + [hi]

    positions = [lo]
    i = 1
    while lo + i * spacing < hi - DIVISION_TOLERANCE:
        positions.append(lo + i * spacing)
        i += 1
    positions.append(hi)
    return positions


class OrientedGrid:
    """
    Grid over a polygon aligned to a pair of in-plane axes.

    Attributes:
        vertices: Polygon the grid covers
        u_direction: Unit U axis
        v_direction: Unit V axis
        u_domain: (min, max) projection of the polygon on U
        v_domain: (min, max) projection of the polygon on V
    """

    def __init__(
        self,
        vertices: Sequence[Vector3],
        u_direction: Vector3 = WORLD_X,
        v_direction: Vector3 = WORLD_Y,
    ):
        if len(vertices) < 3:
            raise ValueError(f"Grid polygon needs at least 3 vertices, got {len(vertices)}")

        self.vertices = list(vertices)
        self.u_direction = u_direction.unitized()
        self.v_direction = v_direction.unitized()

        u_values = [v.dot(self.u_direction) for v in self.vertices]
        v_values = [v.dot(self.v_direction) for v in self.vertices]
        self.u_domain: Tuple[float, float] = (min(u_values), max(u_values))
        self.v_domain: Tuple[float, float] = (min(v_values), max(v_values))

        self._divisions: Dict[GridDirection, List[float]] = {
            GridDirection.U: list(self.u_domain),
            GridDirection.V: list(self.v_domain),
        }

    def _domain(self, direction: GridDirection) -> Tuple[float, float]:
        return self.u_domain if direction == GridDirection.U else self.v_domain

    def point_at(self, u: float, v: float) -> Vector3:
        """Polygon-plane point at grid coordinates (u, v)."""
        return self.u_direction * u + self.v_direction * v

    def divide_axis(
        self,
        direction: GridDirection,
        spacing: float,
        mode: DivisionMode = DivisionMode.FIXED,
    ) -> List[float]:
        """
        Subdivide one axis, replacing any earlier division of it.

        Args:
            direction: Axis to divide
            spacing: Target interval length
            mode: Fixed (remainder at end) or approximate (equal parts)

        Returns:
            Division positions along the axis, domain ends included

        Raises:
            ValueError: If spacing is not positive
        """
        if spacing <= 0:
            raise ValueError(f"Grid spacing must be positive, got {spacing}")

        lo, hi = self._domain(direction)
        positions = _divide(lo, hi, spacing, mode)
        self._divisions[direction] = positions
        logger.debug(
            f"Divided {direction.value} axis [{lo:.4f}, {hi:.4f}] at {spacing:.4f} "
            f"({mode.value}) into {len(positions) - 1} interval(s)"
        )
        return list(positions)

    def divisions(self, direction: GridDirection) -> List[float]:
        return list(self._divisions[direction])

    def separator_lines(self, direction: GridDirection) -> List[Segment]:
        """
        Untrimmed lines running along the given direction.

        Lines sit at every division of the other axis, including both ends
        of its domain, and span this axis's full domain.
        """
        if direction == GridDirection.V:
            v_lo, v_hi = self.v_domain
            return [
                Segment(self.point_at(u, v_lo), self.point_at(u, v_hi))
                for u in self._divisions[GridDirection.U]
            ]

        u_lo, u_hi = self.u_domain
        return [
            Segment(self.point_at(u_lo, v), self.point_at(u_hi, v))
            for v in self._divisions[GridDirection.V]
        ]

    def cells(self) -> List[GridCell]:
        """
        Grid cells with geometry trimmed to the polygon.

        Cells of zero area, or lying entirely outside the polygon, are
        omitted.
        """
        boundary = to_shapely(self.vertices)
        if not boundary.is_valid:
            boundary = boundary.buffer(0)

        u_positions = self._divisions[GridDirection.U]
        v_positions = self._divisions[GridDirection.V]

        cells = []
        for i in range(len(u_positions) - 1):
            for j in range(len(v_positions) - 1):
                u0, u1 = u_positions[i], u_positions[i + 1]
                v0, v1 = v_positions[j], v_positions[j + 1]
                if u1 - u0 <= 0 or v1 - v0 <= 0:
                    continue

                rectangle = [
                    self.point_at(u0, v0),
                    self.point_at(u1, v0),
                    self.point_at(u1, v1),
                    self.point_at(u0, v1),
                ]
                clipped = to_shapely(rectangle).intersection(boundary)
                trimmed = []
                for part in getattr(clipped, "geoms", [clipped]):
                    if not isinstance(part, Polygon) or part.is_empty or part.area <= 0:
                        continue
                    outline = from_shapely(part, snap=False)
                    if len(outline) >= 3:
                        trimmed.append(outline)
                if not trimmed:
                    continue
                cells.append(GridCell(i, j, rectangle, trimmed))

        logger.debug(f"Grid produced {len(cells)} trimmed cell(s)")
        return cells
