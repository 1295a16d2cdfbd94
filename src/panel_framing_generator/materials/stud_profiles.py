# File: src/panel_framing_generator/materials/stud_profiles.py
"""
Cold-formed steel stud cross-sections for panel framing.

Profiles are C-sections drawn about their centroid in the profile plane:
- X: Web depth (through the wall)
- Y: Flange width (along the wall face)

Naming follows the CFS convention, e.g. 362S150:
    362 = 3.62" web depth, S = stud, 150 = 1.50" flange width.
All dimensions are stored in METERS.

Usage:
    from panel_framing_generator.materials.stud_profiles import get_stud_profile

    profile = get_stud_profile("362S150")
    outline = profile.perimeter
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from panel_framing_generator.config.units import inches_to_meters
from panel_framing_generator.geometry.primitives import Vector3


@dataclass(frozen=True)
class StudProfile:
    """
    C-section stud profile.

    Attributes:
        name: Profile designation (e.g., "362S150")
        width: Web depth, across the wall thickness (m)
        depth: Flange width, in the panel plane (m)
        wall_thickness: Steel thickness used to draw the section (m)
    """
    name: str
    width: float
    depth: float
    wall_thickness: float = 0.001

    def __post_init__(self):
        """Validate profile dimensions are positive."""
        if self.width <= 0 or self.depth <= 0 or self.wall_thickness <= 0:
            raise ValueError(
                f"Profile dimensions must be positive: width={self.width}, "
                f"depth={self.depth}, wall_thickness={self.wall_thickness}"
            )

    @property
    def perimeter(self) -> List[Vector3]:
        """Closed outline of the C-section, centered on the origin."""
        w = self.width
        d = self.depth
        t = self.wall_thickness
        return [
            Vector3(-w / 2 + t, -d / 2 + t),
            Vector3(-w / 2 + t, d / 2),
            Vector3(-w / 2, d / 2),
            Vector3(-w / 2, -d / 2),
            Vector3(-w / 2 + t, -d / 2),
            Vector3(w / 2, -d / 2),
            Vector3(w / 2, d / 2),
            Vector3(w / 2 - t, d / 2),
            Vector3(w / 2 - t, -d / 2 + t),
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "width": self.width,
            "depth": self.depth,
            "wall_thickness": self.wall_thickness,
            "perimeter": [list(v.to_tuple()[:2]) for v in self.perimeter],
        }


STUD_PROFILES: Dict[str, StudProfile] = {
    "362S150": StudProfile(
        name="362S150",
        width=inches_to_meters(3.625),
        depth=inches_to_meters(1.5),
    ),
    "600S162": StudProfile(
        name="600S162",
        width=inches_to_meters(6.0),
        depth=inches_to_meters(1.625),
    ),
}

DEFAULT_STUD_PROFILE = "362S150"


def get_stud_profile(name: Optional[str] = None) -> StudProfile:
    """
    Get a stud profile by name.

    Args:
        name: Profile designation; defaults to DEFAULT_STUD_PROFILE

    Returns:
        StudProfile instance

    Raises:
        KeyError: If the profile name is not found
    """
    if name is None:
        name = DEFAULT_STUD_PROFILE
    if name not in STUD_PROFILES:
        raise KeyError(f"Unknown stud profile: {name}")
    return STUD_PROFILES[name]
