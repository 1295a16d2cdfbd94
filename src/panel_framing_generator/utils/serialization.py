# File: src/panel_framing_generator/utils/serialization.py
"""
Serialization of panel layout results.

Results are written as plain JSON: members as centerline endpoints with
profile and material names, wall boards as local outlines with their
placement transform.

Usage:
    from panel_framing_generator.utils.serialization import (
        serialize_results, deserialize_results
    )

    json_str = serialize_results(results)
    recovered = deserialize_results(json_str)
"""

import json
from enum import Enum
from typing import Any, Dict, Optional

from panel_framing_generator.geometry.primitives import Vector3, Segment
from panel_framing_generator.geometry.transform import PanelTransform
from panel_framing_generator.framing.frame_member import FrameMember, StructuralMember
from panel_framing_generator.materials.stud_profiles import StudProfile
from panel_framing_generator.materials.material_catalog import Material
from panel_framing_generator.sheathing.covering_panels import CoveringPanel
from panel_framing_generator.layout.panel_layout import PanelLayoutResults


class FramingEncoder(json.JSONEncoder):
    """
    JSON encoder for framing types.

    Anything with a to_dict() is encoded through it; enums by value.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (
            Vector3,
            Segment,
            PanelTransform,
            FrameMember,
            StructuralMember,
            StudProfile,
            Material,
            CoveringPanel,
            PanelLayoutResults,
        )):
            return obj.to_dict()
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


def serialize_results(
    results: PanelLayoutResults,
    profile: Optional[StudProfile] = None,
    indent: Optional[int] = 2,
) -> str:
    """
    Serialize layout results to a JSON string.

    Args:
        results: Layout results
        profile: Stud profile attached to every member (default profile if None)
        indent: JSON indentation

    Returns:
        JSON string representation
    """
    return json.dumps(results.to_dict(profile), cls=FramingEncoder, indent=indent)


def results_from_dict(data: Dict[str, Any]) -> PanelLayoutResults:
    """
    Rebuild layout results from their dictionary form.

    Profile and material names on members are dropped; they are derived
    again from the member role when needed.

    Raises:
        KeyError: If a required field or a named material is missing
    """
    return PanelLayoutResults(
        panel_count=data["panel_count"],
        total_framing_length=data["total_framing_length"],
        members=[FrameMember.from_dict(m) for m in data.get("members", [])],
        covering_panels=[CoveringPanel.from_dict(p) for p in data.get("covering_panels", [])],
        skipped_panels=list(data.get("skipped_panels", [])),
    )


def deserialize_results(json_string: str) -> PanelLayoutResults:
    """
    Deserialize a JSON string to layout results.

    Args:
        json_string: JSON produced by serialize_results

    Returns:
        PanelLayoutResults
    """
    return results_from_dict(json.loads(json_string))
