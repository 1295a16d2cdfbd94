# File: src/panel_framing_generator/framing/perimeter_framer.py
"""
Perimeter framing along an inset panel boundary.

One member is placed on each boundary edge. Corners are resolved by the
edge's orientation relative to a reference axis (world up for a wall):

- Vertical edges (|direction . reference| == 1) are shrunk by the member
  half-depth at both ends, so they stop short of the top and bottom members.
- All other edges, including sloped ones, are extended by the half-depth at
  both ends to reach into the corners the vertical members left open.

The vertical test is an exact float comparison. An edge that is off-vertical
by rounding error is treated as horizontal and extended, so boundaries should
come from an offset whose vertices are snapped to a grid.
"""

from typing import List, Optional, Sequence

from panel_framing_generator.geometry.primitives import Vector3, Segment, WORLD_Z
from panel_framing_generator.utils.logging_config import get_logger

from .frame_member import FrameMember, MemberRole, member_rotation

logger = get_logger(__name__)


def is_vertical_edge(segment: Segment, reference_axis: Vector3 = WORLD_Z) -> bool:
    """True if the edge runs exactly parallel to the reference axis."""
    return abs(segment.direction.dot(reference_axis)) == 1


def perimeter_centerline(
    segment: Segment,
    half_depth: float,
    reference_axis: Vector3 = WORLD_Z,
) -> Segment:
    """
    Centerline of the perimeter member on one boundary edge.

    Args:
        segment: Boundary edge
        half_depth: Half of the member depth
        reference_axis: Axis that marks an edge as vertical

    Returns:
        Shrunk centerline for vertical edges, extended centerline otherwise
    """
    d = segment.direction
    if is_vertical_edge(segment, reference_axis):
        return Segment(segment.start + d * half_depth, segment.end - d * half_depth)
    return Segment(segment.start - d * half_depth, segment.end + d * half_depth)


def frame_perimeter(
    boundary: Sequence[Segment],
    half_depth: float,
    plane_normal: Vector3,
    reference_axis: Vector3 = WORLD_Z,
    panel_id: Optional[str] = None,
) -> List[FrameMember]:
    """
    Create one perimeter member per boundary edge.

    Args:
        boundary: Inset boundary as ordered segments (world coordinates)
        half_depth: Half of the member depth
        plane_normal: Panel plane normal, used for member rotation
        reference_axis: Axis that marks an edge as vertical
        panel_id: Parent panel ID stamped on each member

    Returns:
        List of FrameMember with role PERIMETER
    """
    members = []
    for segment in boundary:
        rotation = member_rotation(segment, plane_normal)
        if segment.length == 0:
            logger.debug(f"Zero-length boundary edge at {segment.start.to_tuple()}")

        members.append(FrameMember(
            centerline=perimeter_centerline(segment, half_depth, reference_axis),
            rotation=rotation,
            role=MemberRole.PERIMETER,
            panel_id=panel_id,
        ))

    logger.debug(f"Framed perimeter with {len(members)} member(s)")
    return members
