# File: src/panel_framing_generator/config/framing.py

"""
Framing configuration for prefabricated wall panels.

This module defines the parameters that control panel framing layout:
member cross-section dimensions, stud and kicker spacing, geometric
tolerances, and wall board tiling. All lengths are in meters.

Example:
    >>> config = FramingConfig(stud_spacing=inches_to_meters(24))
    >>> config.validate()
    >>> print(config.member_half_depth)  # 0.01905 (half of a 1.5" flange)
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from panel_framing_generator.config.units import inches_to_meters, feet_to_meters


# Steel stud section (362S150)
STUD_WIDTH = inches_to_meters(3.625)
STUD_DEPTH = inches_to_meters(1.5)

# Offset added to the member inset so perimeter members do not touch the panel edge
MEMBER_TOLERANCE = 0.005

# Horizontal kicker rows are laid out every 4 feet
KICKER_SPACING = feet_to_meters(4.0)

# Standard 4x8 wall board laid horizontally
WALL_BOARD_TILE_WIDTH = feet_to_meters(8.0)
WALL_BOARD_TILE_HEIGHT = feet_to_meters(4.0)
WALL_BOARD_THICKNESS = inches_to_meters(0.625)

# Absolute per-component tolerance for point equality
EQUALITY_TOLERANCE = 1e-5

DEFAULT_STUD_SPACING = inches_to_meters(16.0)


@dataclass
class FramingConfig:
    """Configuration for panel framing layout.

    Attributes:
        stud_spacing: Fixed interval between interior vertical studs (m)
        create_covering_panels: Whether to tile wall board on both faces
        member_depth: Member dimension in the panel plane (m). The perimeter
            inset and the corner shrink/extend use half of this value.
        member_width: Member dimension through the panel thickness (m)
        member_tolerance: Extra inset between panel edge and perimeter members (m)
        kicker_spacing: Fixed interval between horizontal kickers (m)
        covering_tile_width: Wall board tile width along the panel U axis (m)
        covering_tile_height: Wall board tile height along the panel V axis (m)
        covering_panel_thickness: Wall board thickness (m)
        covering_panel_standoff: Distance from the panel plane to the inner
            face of each wall board layer (m). Defaults to member_width / 2.
        equality_tolerance: Per-component tolerance for collapsing crossings
        compute_kicker_rotation: Rotate kickers like studs instead of leaving
            them at the profile's default orientation
    """
    stud_spacing: float = DEFAULT_STUD_SPACING
    create_covering_panels: bool = True

    # Member cross-section
    member_depth: float = STUD_DEPTH
    member_width: float = STUD_WIDTH
    member_tolerance: float = MEMBER_TOLERANCE

    # Kickers
    kicker_spacing: float = KICKER_SPACING
    compute_kicker_rotation: bool = False

    # Wall board
    covering_tile_width: float = WALL_BOARD_TILE_WIDTH
    covering_tile_height: float = WALL_BOARD_TILE_HEIGHT
    covering_panel_thickness: float = WALL_BOARD_THICKNESS
    covering_panel_standoff: Optional[float] = None

    equality_tolerance: float = EQUALITY_TOLERANCE

    def __post_init__(self):
        """Derive the wall board standoff from the member width if unset."""
        if self.covering_panel_standoff is None:
            self.covering_panel_standoff = self.member_width / 2.0

    def set_member_section(self, width: float, depth: float) -> None:
        """
        Replace the member cross-section.

        A wall board standoff that was derived from the old member width
        follows the new width; an explicit standoff is kept.
        """
        if self.covering_panel_standoff == self.member_width / 2.0:
            self.covering_panel_standoff = width / 2.0
        self.member_width = width
        self.member_depth = depth

    @property
    def member_half_depth(self) -> float:
        """Half of the member depth, used for inset and corner handling."""
        return self.member_depth / 2.0

    @property
    def structural_inset(self) -> float:
        """Inward offset distance of the perimeter member centerlines."""
        return self.member_half_depth + self.member_tolerance

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)

        Raises:
            ValueError: If any validation fails
        """
        errors = []

        for name in (
            "stud_spacing",
            "kicker_spacing",
            "member_depth",
            "member_width",
            "covering_tile_width",
            "covering_tile_height",
            "covering_panel_thickness",
        ):
            if getattr(self, name) <= 0:
                errors.append(f"{name} must be positive")

        if self.member_tolerance < 0:
            errors.append("member_tolerance cannot be negative")
        if self.covering_panel_standoff < 0:
            errors.append("covering_panel_standoff cannot be negative")
        if self.equality_tolerance < 0:
            errors.append("equality_tolerance cannot be negative")

        if errors:
            raise ValueError("FramingConfig validation failed:\n" + "\n".join(errors))

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FramingConfig":
        """Create config from dictionary.

        Unknown keys are ignored so that plugin input documents carrying
        extra settings can be passed straight through.

        Args:
            data: Dictionary with config parameters

        Returns:
            FramingConfig instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
