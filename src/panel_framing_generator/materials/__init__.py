# File: src/panel_framing_generator/materials/__init__.py
"""
Member cross-sections and display materials.

Key Components:
    - StudProfile: C-section stud outline and dimensions
    - Material: Display material (color, specular, glossiness)
"""

from .stud_profiles import (
    StudProfile,
    STUD_PROFILES,
    DEFAULT_STUD_PROFILE,
    get_stud_profile,
)
from .material_catalog import (
    Material,
    MATERIALS,
    get_material,
)

__all__ = [
    "StudProfile",
    "STUD_PROFILES",
    "DEFAULT_STUD_PROFILE",
    "get_stud_profile",
    "Material",
    "MATERIALS",
    "get_material",
]
