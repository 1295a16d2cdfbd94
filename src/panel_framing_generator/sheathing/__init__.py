# File: src/panel_framing_generator/sheathing/__init__.py
"""
Wall board covering for framed panels.

Key Components:
    - CoveringPanel: A single wall board (outline, placement, material)
    - tile_covering_panels: Grid tiling of both panel faces
    - create_offset_panel_pair: Left/right boards for one tile
"""

from .covering_panels import (
    CoveringPanel,
    make_covering_panel,
    create_offset_panel_pair,
    tile_covering_panels,
    get_covering_summary,
)

__all__ = [
    "CoveringPanel",
    "make_covering_panel",
    "create_offset_panel_pair",
    "tile_covering_panels",
    "get_covering_summary",
]
