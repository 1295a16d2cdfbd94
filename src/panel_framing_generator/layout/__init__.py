# File: src/panel_framing_generator/layout/__init__.py
"""
Panel framing layout.

Key Components:
    - PanelLayoutGenerator: Frames wall panels (perimeter, studs, kickers, wall board)
    - PanelLayoutResults: Accumulated members, boards, counts and lengths
    - layout_wall_panels: Convenience entry point for a batch of panels
"""

from .panel_layout import (
    PanelLayout,
    PanelLayoutResults,
    PanelLayoutGenerator,
    interior_lines,
    layout_wall_panels,
)

__all__ = [
    "PanelLayout",
    "PanelLayoutResults",
    "PanelLayoutGenerator",
    "interior_lines",
    "layout_wall_panels",
]
