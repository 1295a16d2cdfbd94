# File: src/panel_framing_generator/framing/__init__.py
"""
Framing member generation for wall panels.

Key Components:
    - frame_perimeter: Perimeter members with shrink/extend corner handling
    - trim_lines_to_boundary: Even-odd trimming of candidate lines
    - FrameMember / StructuralMember: Member data with role tags
"""

from .frame_member import (
    MemberRole,
    FrameMember,
    StructuralMember,
    ROLE_MATERIALS,
    make_member,
    member_rotation,
)
from .perimeter_framer import (
    frame_perimeter,
    perimeter_centerline,
    is_vertical_edge,
)
from .boundary_clipper import (
    trim_lines_to_boundary,
    find_crossings,
    pair_crossings,
)

__all__ = [
    "MemberRole",
    "FrameMember",
    "StructuralMember",
    "ROLE_MATERIALS",
    "make_member",
    "member_rotation",
    "frame_perimeter",
    "perimeter_centerline",
    "is_vertical_edge",
    "trim_lines_to_boundary",
    "find_crossings",
    "pair_crossings",
]
