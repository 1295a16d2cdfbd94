# File: src/panel_framing_generator/wall_data/panel_input.py
"""
Wall panel input data.

Wall panels arrive as JSON documents, either a bare list or an object with a
"panels" list. Each panel looks like:

    {
        "id": "panel_1",
        "boundary": [[0, 0], [4.0, 0], [4.0, 2.4], [0, 2.4]],
        "transform": {
            "origin": {"x": 0, "y": 0, "z": 0},
            "x_axis": {"x": 1, "y": 0, "z": 0},
            "y_axis": {"x": 0, "y": 0, "z": 1},
            "z_axis": {"x": 0, "y": -1, "z": 0}
        }
    }

Boundary vertices are panel-local (X along the panel, Y up). "base_plane"
is accepted as an alias of "transform". An optional "units" key (meters,
feet, inches or millimeters) on the document or on a single panel scales
the boundary and the transform origin into meters.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from panel_framing_generator.config.units import ProjectUnits, convert_to_meters
from panel_framing_generator.geometry.primitives import Vector3
from panel_framing_generator.geometry.transform import PanelTransform


@dataclass
class WallPanel:
    """
    A wall panel to be framed.

    Attributes:
        id: Panel identifier
        boundary: Closed outline in panel-local coordinates (no repeated closing vertex)
        transform: Placement of the panel in world space
        metadata: Extra input fields passed through untouched
    """
    id: str
    boundary: List[Vector3]
    transform: PanelTransform = field(default_factory=PanelTransform.identity)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Drop a repeated closing vertex and check the outline."""
        if len(self.boundary) > 1 and self.boundary[0] == self.boundary[-1]:
            self.boundary = self.boundary[:-1]
        if len(self.boundary) < 3:
            raise ValueError(
                f"Panel {self.id} boundary needs at least 3 vertices, got {len(self.boundary)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "boundary": [[v.x, v.y] for v in self.boundary],
            "transform": self.transform.to_dict(),
            **({"metadata": self.metadata} if self.metadata else {}),
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        index: int = 0,
        units: Union[ProjectUnits, str] = ProjectUnits.METERS,
    ) -> "WallPanel":
        """
        Create a panel from its input dictionary.

        Args:
            data: Panel dictionary
            index: Position in the input list, used for a default ID
            units: Input length unit, overridden by a "units" key in data

        Raises:
            ValueError: If the boundary is missing or too short, a vertex
                does not have 2 or 3 coordinates, or the unit is unknown
        """
        if "boundary" not in data:
            raise ValueError(f"Panel at index {index} has no boundary")

        panel_id = str(data.get("id", data.get("panel_id", f"panel_{index}")))
        scale = convert_to_meters(1.0, data.get("units", units))
        boundary = [Vector3.parse(v) * scale for v in data["boundary"]]
        transform = PanelTransform.from_dict(data.get("transform", data.get("base_plane")))
        if scale != 1.0:
            transform = PanelTransform(
                transform.origin * scale, transform.x_axis, transform.y_axis, transform.z_axis
            )
        metadata = {
            k: v for k, v in data.items()
            if k not in ("id", "panel_id", "boundary", "transform", "base_plane", "units")
        }
        return cls(id=panel_id, boundary=boundary, transform=transform, metadata=metadata)


def parse_wall_panels(document: Union[Dict[str, Any], Sequence[Dict[str, Any]]]) -> List[WallPanel]:
    """
    Parse wall panels from a decoded JSON document.

    Args:
        document: A list of panel dicts, or a dict with a "panels" list and
            an optional "units" key

    Returns:
        List of WallPanel

    Raises:
        ValueError: If the document has no panel list
    """
    units = ProjectUnits.METERS
    if isinstance(document, dict):
        if "panels" not in document:
            raise ValueError("Input document has no 'panels' list")
        entries = document["panels"]
        units = document.get("units", units)
    else:
        entries = document

    if not isinstance(entries, (list, tuple)):
        raise ValueError(f"Expected a list of panels, got {type(entries).__name__}")

    return [WallPanel.from_dict(entry, i, units) for i, entry in enumerate(entries)]


def load_wall_panels(path: str) -> List[WallPanel]:
    """Load wall panels from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_wall_panels(json.load(f))
