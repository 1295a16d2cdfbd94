# File: src/panel_framing_generator/sheathing/covering_panels.py
"""
Wall board covering for framed panels.

The panel boundary is offset inward by the member tolerance and tiled with
a grid of standard board sizes. Each tile becomes two boards, one on each
face of the framing:

- left: moved +standoff along the panel normal, extruded outward
- right: moved -(standoff + thickness), so it extrudes back toward the frame

Usage:
    from panel_framing_generator.sheathing import tile_covering_panels

    boards = tile_covering_panels("panel_1", boundary, transform, config)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from panel_framing_generator.config.framing import FramingConfig
from panel_framing_generator.geometry.primitives import Vector3, polygon_area
from panel_framing_generator.geometry.transform import PanelTransform
from panel_framing_generator.geometry.polygon_offset import offset_polygon
from panel_framing_generator.geometry.oriented_grid import OrientedGrid, GridDirection
from panel_framing_generator.materials.material_catalog import Material, get_material
from panel_framing_generator.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CoveringPanel:
    """
    A single wall board.

    Attributes:
        id: Unique board identifier
        panel_id: Parent wall panel ID
        face: Which face of the frame ("left" or "right")
        boundary: Board outline in panel-local coordinates
        transform: Board placement; the board extrudes along its +Z
        material: Display material
        thickness: Board thickness (m)
    """
    id: str
    panel_id: Optional[str]
    face: str
    boundary: Tuple[Vector3, ...]
    transform: PanelTransform
    material: Material
    thickness: float

    @property
    def area(self) -> float:
        """Board face area (m^2)."""
        return abs(polygon_area(self.boundary))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "panel_id": self.panel_id,
            "face": self.face,
            "boundary": [[v.x, v.y] for v in self.boundary],
            "transform": self.transform.to_dict(),
            "material": self.material.name,
            "thickness": self.thickness,
            "area": self.area,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoveringPanel":
        """Create from a to_dict() dictionary; the material is looked up by name."""
        return cls(
            id=data["id"],
            panel_id=data.get("panel_id"),
            face=data["face"],
            boundary=tuple(Vector3.parse(v) for v in data["boundary"]),
            transform=PanelTransform.from_dict(data.get("transform")),
            material=get_material(data.get("material", "wall_board")),
            thickness=data["thickness"],
        )


def make_covering_panel(
    board_id: str,
    boundary: Sequence[Vector3],
    transform: PanelTransform,
    material: Material,
    thickness: float,
    face: str,
    panel_id: Optional[str] = None,
) -> CoveringPanel:
    """Create one wall board."""
    return CoveringPanel(
        id=board_id,
        panel_id=panel_id,
        face=face,
        boundary=tuple(boundary),
        transform=transform,
        material=material,
        thickness=thickness,
    )


def create_offset_panel_pair(
    board_id: str,
    boundary: Sequence[Vector3],
    transform: PanelTransform,
    standoff: float,
    thickness: float,
    material: Material,
    panel_id: Optional[str] = None,
) -> Tuple[CoveringPanel, CoveringPanel]:
    """
    Create the left/right boards for one tile.

    Args:
        board_id: Base ID; "_left" / "_right" are appended
        boundary: Tile outline in panel-local coordinates
        transform: Wall panel transform
        standoff: Distance from the panel plane to each board's inner face
        thickness: Board thickness
        material: Display material
        panel_id: Parent wall panel ID

    Returns:
        (left, right) boards
    """
    left = make_covering_panel(
        f"{board_id}_left",
        boundary,
        transform.moved_along_normal(standoff),
        material,
        thickness,
        "left",
        panel_id,
    )
    right = make_covering_panel(
        f"{board_id}_right",
        boundary,
        transform.moved_along_normal(-standoff - thickness),
        material,
        thickness,
        "right",
        panel_id,
    )
    return left, right


def tile_covering_panels(
    panel_id: str,
    boundary: Sequence[Vector3],
    transform: PanelTransform,
    config: FramingConfig,
    material: Optional[Material] = None,
) -> List[CoveringPanel]:
    """
    Tile wall board over both faces of a panel.

    Args:
        panel_id: Wall panel ID
        boundary: Panel boundary in panel-local coordinates
        transform: Wall panel transform
        config: Framing configuration (tile size, thickness, standoff)
        material: Display material; defaults to "wall_board"

    Returns:
        Boards in tile order, a left/right pair per tile
    """
    if material is None:
        material = get_material("wall_board")

    offsets = offset_polygon(boundary, -config.member_tolerance)
    if not offsets:
        logger.warning(f"Panel {panel_id}: wall board offset produced no polygon")
        return []
    board_boundary = offsets[0]

    grid = OrientedGrid(board_boundary)
    grid.divide_axis(GridDirection.U, config.covering_tile_width)
    grid.divide_axis(GridDirection.V, config.covering_tile_height)

    tiles: List[Tuple[str, List[Vector3]]] = []
    for cell in grid.cells():
        for k, outline in enumerate(cell.trimmed):
            tiles.append((f"{panel_id}_board_{cell.v_index}_{cell.u_index}_{k}", outline))

    if not tiles:
        tiles.append((f"{panel_id}_board", board_boundary))

    boards: List[CoveringPanel] = []
    for board_id, outline in tiles:
        boards.extend(create_offset_panel_pair(
            board_id,
            outline,
            transform,
            config.covering_panel_standoff,
            config.covering_panel_thickness,
            material,
            panel_id,
        ))

    logger.debug(f"Panel {panel_id}: {len(tiles)} wall board tile(s)")
    return boards


def get_covering_summary(boards: Sequence[CoveringPanel]) -> Dict[str, Any]:
    """
    Calculate material quantities for generated boards.

    Returns:
        Dictionary with board counts and areas per face
    """
    left = [b for b in boards if b.face == "left"]
    right = [b for b in boards if b.face == "right"]
    return {
        "total_boards": len(boards),
        "left_boards": len(left),
        "right_boards": len(right),
        "left_area": round(sum(b.area for b in left), 4),
        "right_area": round(sum(b.area for b in right), 4),
    }
