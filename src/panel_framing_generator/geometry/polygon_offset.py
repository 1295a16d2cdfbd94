# File: src/panel_framing_generator/geometry/polygon_offset.py
"""
Polygon offsetting for panel boundaries.

Wraps shapely's buffer with mitred joins so offset rectangles stay
rectangles. Result vertices are snapped to a fixed grid, which keeps edges
that were axis-aligned before the offset exactly axis-aligned after it
(the perimeter framer classifies edges with an exact comparison).

Usage:
    from panel_framing_generator.geometry.polygon_offset import offset_polygon

    insets = offset_polygon(boundary, -0.024)
    if not insets:
        ...  # offset collapsed the polygon
"""

import logging
from typing import List, Sequence

from shapely.geometry import Polygon
from shapely.geometry.polygon import orient

from .primitives import Vector3, polygon_area

logger = logging.getLogger(__name__)

# Snap grid for offset results (meters)
OFFSET_PRECISION = 1e-5

# Mitre joins longer than this multiple of the offset distance are bevelled
MITRE_LIMIT = 10.0


def _snap(value: float, precision: float = OFFSET_PRECISION) -> float:
    return round(value / precision) * precision


def to_shapely(vertices: Sequence[Vector3]) -> Polygon:
    """Planar shapely polygon from boundary vertices (Z dropped)."""
    return Polygon([(v.x, v.y) for v in vertices])


def from_shapely(polygon: Polygon, snap: bool = True) -> List[Vector3]:
    """Exterior ring of a shapely polygon as an open vertex list."""
    coords = list(polygon.exterior.coords)[:-1]
    vertices: List[Vector3] = []
    for x, y in ((c[0], c[1]) for c in coords):
        point = Vector3(_snap(x), _snap(y)) if snap else Vector3(x, y)
        if vertices and vertices[-1] == point:
            continue
        vertices.append(point)
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices.pop()
    return vertices


def offset_polygon(
    vertices: Sequence[Vector3],
    distance: float,
    mitre_limit: float = MITRE_LIMIT,
) -> List[List[Vector3]]:
    """
    Offset a closed planar polygon.

    Args:
        vertices: Polygon vertices in the panel plane
        distance: Signed offset; negative shrinks, positive grows
        mitre_limit: Mitre ratio limit passed to shapely

    Returns:
        Zero or more result polygons, largest first. Each keeps the winding
        of the input polygon.
    """
    if len(vertices) < 3:
        logger.debug(f"Cannot offset polygon with {len(vertices)} vertices")
        return []

    source = to_shapely(vertices)
    if source.area == 0:
        logger.debug("Cannot offset polygon with zero area")
        return []

    result = source.buffer(distance, join_style="mitre", mitre_limit=mitre_limit)
    if result.is_empty:
        logger.debug(f"Offset by {distance} collapsed polygon")
        return []

    # Keep the caller's winding so edge directions stay consistent
    sign = 1.0 if polygon_area(vertices) >= 0 else -1.0

    parts = [g for g in getattr(result, "geoms", [result]) if isinstance(g, Polygon)]
    parts.sort(key=lambda g: g.area, reverse=True)

    polygons = []
    for part in parts:
        if part.is_empty or part.area == 0:
            continue
        offset = from_shapely(orient(part, sign=sign))
        if len(offset) >= 3:
            polygons.append(offset)

    logger.debug(f"Offset by {distance} produced {len(polygons)} polygon(s)")
    return polygons
