# File: src/panel_framing_generator/materials/material_catalog.py
"""
Display materials for generated framing and wall board.

Usage:
    from panel_framing_generator.materials.material_catalog import get_material

    frame = get_material("stud_frame")
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Material:
    """
    Definition of a display material.

    Attributes:
        name: Material identifier (e.g., "stud_frame")
        display_name: Human-readable name
        color: RGBA color, each channel in [0, 1]
        specular_factor: Specular factor in [0, 1]
        glossiness_factor: Glossiness factor in [0, 1]
    """
    name: str
    display_name: str
    color: Tuple[float, float, float, float]
    specular_factor: float = 0.1
    glossiness_factor: float = 0.1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "color": list(self.color),
            "specular_factor": self.specular_factor,
            "glossiness_factor": self.glossiness_factor,
        }


MATERIALS: Dict[str, Material] = {
    # Perimeter members
    "stud_frame": Material(
        name="stud_frame",
        display_name="Stud Frame",
        color=(1.0, 0.0, 0.0, 1.0),
    ),
    # Interior studs and kickers
    "stud": Material(
        name="stud",
        display_name="Stud",
        color=(0.7, 0.7, 0.7, 1.0),
        specular_factor=0.8,
        glossiness_factor=0.8,
    ),
    "wall_board": Material(
        name="wall_board",
        display_name="Wall Board",
        color=(0.9, 0.9, 0.9, 0.75),
        specular_factor=0.0,
        glossiness_factor=0.0,
    ),
}


def get_material(name: str) -> Material:
    """
    Get a material by name.

    Raises:
        KeyError: If material name not found
    """
    if name not in MATERIALS:
        raise KeyError(f"Unknown material: {name}")
    return MATERIALS[name]
