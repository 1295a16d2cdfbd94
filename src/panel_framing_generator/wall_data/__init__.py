# File: src/panel_framing_generator/wall_data/__init__.py
"""Wall panel input parsing."""

from .panel_input import WallPanel, parse_wall_panels, load_wall_panels

__all__ = ["WallPanel", "parse_wall_panels", "load_wall_panels"]
