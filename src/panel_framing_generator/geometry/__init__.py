# File: src/panel_framing_generator/geometry/__init__.py
"""
Planar geometry for panel framing.

Key Components:
    - Vector3 / Segment: Immutable points, vectors and segments
    - PanelTransform: Panel-local to world placement
    - segment_intersection: Segment crossing test with fixed degenerate-case policy
    - CrossingOrder: Distance-from-origin ordering of crossings
    - offset_polygon: Mitred polygon offset (shapely)
    - OrientedGrid: Axis subdivision, separator lines and trimmed cells
"""

from .primitives import (
    Vector3,
    Segment,
    SegmentFrame,
    WORLD_X,
    WORLD_Y,
    WORLD_Z,
    polygon_segments,
    polygon_normal,
    polygon_area,
)
from .transform import PanelTransform
from .intersection import segment_intersection
from .ordering import CrossingOrder
from .polygon_offset import offset_polygon
from .oriented_grid import OrientedGrid, GridCell, GridDirection, DivisionMode

__all__ = [
    "Vector3",
    "Segment",
    "SegmentFrame",
    "WORLD_X",
    "WORLD_Y",
    "WORLD_Z",
    "polygon_segments",
    "polygon_normal",
    "polygon_area",
    "PanelTransform",
    "segment_intersection",
    "CrossingOrder",
    "offset_polygon",
    "OrientedGrid",
    "GridCell",
    "GridDirection",
    "DivisionMode",
]
