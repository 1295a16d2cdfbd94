# File: src/panel_framing_generator/framing/frame_member.py
"""
Framing member data.

Every member kind (perimeter, stud, kicker) is the same data: a centerline,
a rotation of the cross-section about it, and a role tag. Geometry is NOT
stored here, only the parameters needed to create it.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from panel_framing_generator.geometry.primitives import Vector3, Segment
from panel_framing_generator.materials.stud_profiles import StudProfile
from panel_framing_generator.materials.material_catalog import Material, get_material


class MemberRole(Enum):
    """Role of a framing member within a panel."""
    PERIMETER = "perimeter"
    STUD = "stud"
    KICKER = "kicker"


# Display material per role
ROLE_MATERIALS: Dict[MemberRole, str] = {
    MemberRole.PERIMETER: "stud_frame",
    MemberRole.STUD: "stud",
    MemberRole.KICKER: "stud",
}


def member_rotation(centerline: Segment, plane_normal: Vector3) -> float:
    """
    Rotation of a member's profile about its centerline.

    The angle between the centerline frame's x axis (at its start) and the
    panel plane normal, in radians. Degenerate geometry gives 0.0.
    """
    rotation = centerline.frame_at_start().x_axis.angle_to(plane_normal)
    if math.isnan(rotation):
        return 0.0
    return rotation


@dataclass(frozen=True)
class FrameMember:
    """
    A framing member centerline.

    Attributes:
        centerline: Member centerline in world coordinates
        rotation: Profile rotation about the centerline (radians)
        role: Member role within the panel
        panel_id: Parent wall panel ID
    """
    centerline: Segment
    rotation: float = 0.0
    role: MemberRole = MemberRole.STUD
    panel_id: Optional[str] = None

    @property
    def length(self) -> float:
        return self.centerline.length

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "panel_id": self.panel_id,
            "role": self.role.value,
            "start": list(self.centerline.start.to_tuple()),
            "end": list(self.centerline.end.to_tuple()),
            "length": self.length,
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrameMember":
        return cls(
            centerline=Segment(Vector3.parse(data["start"]), Vector3.parse(data["end"])),
            rotation=data.get("rotation", 0.0),
            role=MemberRole(data.get("role", "stud")),
            panel_id=data.get("panel_id"),
        )


@dataclass(frozen=True)
class StructuralMember:
    """
    A framing member ready for geometry creation.

    Attributes:
        member: Centerline, rotation and role
        profile: Cross-section swept along the centerline
        material: Display material
    """
    member: FrameMember
    profile: StudProfile
    material: Material

    def to_dict(self) -> Dict[str, Any]:
        data = self.member.to_dict()
        data["profile"] = self.profile.name
        data["material"] = self.material.name
        return data


def make_member(
    member: FrameMember,
    profile: StudProfile,
    material: Optional[Material] = None,
) -> StructuralMember:
    """
    Attach a profile and material to a member centerline.

    Args:
        member: Member centerline and rotation
        profile: Cross-section profile
        material: Display material; defaults to the material for the role

    Returns:
        StructuralMember
    """
    if material is None:
        material = get_material(ROLE_MATERIALS[member.role])
    return StructuralMember(member=member, profile=profile, material=material)
