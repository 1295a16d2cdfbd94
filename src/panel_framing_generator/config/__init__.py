# File: src/panel_framing_generator/config/__init__.py

"""
Configuration package for the Panel Framing Generator.
Provides a unified interface to:
- Unit conversion into the working unit (meters)
- Framing layout parameters and their defaults
"""

from panel_framing_generator.config.units import (
    ProjectUnits,
    inches_to_meters,
    feet_to_meters,
    convert_to_meters,
)

from panel_framing_generator.config.framing import (
    FramingConfig,
    STUD_WIDTH,
    STUD_DEPTH,
    MEMBER_TOLERANCE,
    KICKER_SPACING,
    WALL_BOARD_TILE_WIDTH,
    WALL_BOARD_TILE_HEIGHT,
    WALL_BOARD_THICKNESS,
    EQUALITY_TOLERANCE,
    DEFAULT_STUD_SPACING,
)

__all__ = [
    "ProjectUnits",
    "inches_to_meters",
    "feet_to_meters",
    "convert_to_meters",
    "FramingConfig",
    "STUD_WIDTH",
    "STUD_DEPTH",
    "MEMBER_TOLERANCE",
    "KICKER_SPACING",
    "WALL_BOARD_TILE_WIDTH",
    "WALL_BOARD_TILE_HEIGHT",
    "WALL_BOARD_THICKNESS",
    "EQUALITY_TOLERANCE",
    "DEFAULT_STUD_SPACING",
]
