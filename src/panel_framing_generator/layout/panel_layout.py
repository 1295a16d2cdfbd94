# File: src/panel_framing_generator/layout/panel_layout.py
"""
Panel framing layout.

Orchestrates the framing of each wall panel:
1. Inset the boundary by half the member depth plus a tolerance
2. Frame the inset perimeter
3. Lay out interior studs at the stud spacing, trimmed to the inset
4. Lay out horizontal kickers at the kicker spacing, trimmed to the inset
5. Optionally tile wall board over both faces
6. Accumulate the panel count and total framing length

A panel whose inset collapses is skipped; the batch continues.

Example:
    >>> from panel_framing_generator.layout import layout_wall_panels
    >>> results = layout_wall_panels(panels, FramingConfig(stud_spacing=0.6))
    >>> print(f"{results.panel_count} panels, {results.total_framing_length:.2f} m")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from panel_framing_generator.config.framing import FramingConfig
from panel_framing_generator.geometry.primitives import (
    Vector3,
    Segment,
    WORLD_Z,
    polygon_segments,
    polygon_normal,
)
from panel_framing_generator.geometry.polygon_offset import offset_polygon
from panel_framing_generator.geometry.oriented_grid import OrientedGrid, GridDirection
from panel_framing_generator.framing.frame_member import (
    FrameMember,
    MemberRole,
    StructuralMember,
    make_member,
    member_rotation,
)
from panel_framing_generator.framing.perimeter_framer import frame_perimeter
from panel_framing_generator.framing.boundary_clipper import trim_lines_to_boundary
from panel_framing_generator.materials.stud_profiles import StudProfile, get_stud_profile
from panel_framing_generator.sheathing.covering_panels import (
    CoveringPanel,
    tile_covering_panels,
    get_covering_summary,
)
from panel_framing_generator.wall_data.panel_input import WallPanel
from panel_framing_generator.utils.logging_config import get_logger

logger = get_logger(__name__)


def interior_lines(lines: Sequence[Segment]) -> List[Segment]:
    """Drop the first and last separator lines, which sit on the perimeter frame."""
    return list(lines[1:-1])


@dataclass
class PanelLayout:
    """
    Framing layout of a single wall panel.

    Attributes:
        panel_id: Wall panel ID
        inset_boundary: Structural inset in panel-local coordinates
        members: Perimeter, stud and kicker members (world coordinates)
        covering_panels: Wall boards, a left/right pair per tile
    """
    panel_id: str
    inset_boundary: List[Vector3]
    members: List[FrameMember] = field(default_factory=list)
    covering_panels: List[CoveringPanel] = field(default_factory=list)

    @property
    def framing_length(self) -> float:
        """Sum of all member centerline lengths."""
        return sum(m.length for m in self.members)

    def members_by_role(self, role: MemberRole) -> List[FrameMember]:
        return [m for m in self.members if m.role == role]


@dataclass
class PanelLayoutResults:
    """
    Accumulated layout of a batch of panels.

    Attributes:
        panel_count: Number of panels framed
        total_framing_length: Sum of member centerline lengths (m)
        members: All members
        covering_panels: All wall boards
        skipped_panels: IDs of panels whose inset collapsed
    """
    panel_count: int = 0
    total_framing_length: float = 0.0
    members: List[FrameMember] = field(default_factory=list)
    covering_panels: List[CoveringPanel] = field(default_factory=list)
    skipped_panels: List[str] = field(default_factory=list)

    def add(self, layout: PanelLayout) -> None:
        """Add one framed panel."""
        self.panel_count += 1
        self.total_framing_length += layout.framing_length
        self.members.extend(layout.members)
        self.covering_panels.extend(layout.covering_panels)

    def merge(self, other: "PanelLayoutResults") -> "PanelLayoutResults":
        """Combine with results computed for another set of panels."""
        return PanelLayoutResults(
            panel_count=self.panel_count + other.panel_count,
            total_framing_length=self.total_framing_length + other.total_framing_length,
            members=self.members + other.members,
            covering_panels=self.covering_panels + other.covering_panels,
            skipped_panels=self.skipped_panels + other.skipped_panels,
        )

    def members_by_role(self, role: MemberRole) -> List[FrameMember]:
        return [m for m in self.members if m.role == role]

    def structural_members(self, profile: Optional[StudProfile] = None) -> List[StructuralMember]:
        """Members with profile and role material attached."""
        if profile is None:
            profile = get_stud_profile()
        return [make_member(m, profile) for m in self.members]

    def get_summary(self) -> Dict[str, Any]:
        """Counts and lengths for reporting."""
        return {
            "panel_count": self.panel_count,
            "skipped_panel_count": len(self.skipped_panels),
            "total_framing_length": round(self.total_framing_length, 4),
            "perimeter_members": len(self.members_by_role(MemberRole.PERIMETER)),
            "studs": len(self.members_by_role(MemberRole.STUD)),
            "kickers": len(self.members_by_role(MemberRole.KICKER)),
            "covering": get_covering_summary(self.covering_panels),
        }

    def to_dict(self, profile: Optional[StudProfile] = None) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "panel_count": self.panel_count,
            "total_framing_length": self.total_framing_length,
            "skipped_panels": list(self.skipped_panels),
            "members": [m.to_dict() for m in self.structural_members(profile)],
            "covering_panels": [p.to_dict() for p in self.covering_panels],
            "summary": self.get_summary(),
        }


class PanelLayoutGenerator:
    """
    Generates framing for wall panels.

    Attributes:
        config: Framing configuration
        reference_axis: World axis that marks perimeter edges as vertical
    """

    def __init__(
        self,
        config: Optional[FramingConfig] = None,
        reference_axis: Vector3 = WORLD_Z,
    ):
        """
        Initialize the layout generator.

        Args:
            config: Framing configuration (defaults if not provided)
            reference_axis: World up axis for perimeter edge classification

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or FramingConfig()
        self.config.validate()
        self.reference_axis = reference_axis

    def structural_inset(self, boundary: Sequence[Vector3]) -> Optional[List[Vector3]]:
        """Inset boundary for member centerlines, or None if it collapses."""
        offsets = offset_polygon(boundary, -self.config.structural_inset)
        if not offsets:
            return None
        if len(offsets) > 1:
            logger.debug(f"Inset split into {len(offsets)} parts; framing the largest")
        return offsets[0]

    def stud_candidates(self, inset: Sequence[Vector3]) -> List[Segment]:
        """Untrimmed interior stud lines over the inset (panel-local)."""
        grid = OrientedGrid(inset)
        grid.divide_axis(GridDirection.U, self.config.stud_spacing)
        return interior_lines(grid.separator_lines(GridDirection.V))

    def kicker_candidates(self, inset: Sequence[Vector3]) -> List[Segment]:
        """Untrimmed interior kicker lines over the inset (panel-local)."""
        grid = OrientedGrid(inset)
        grid.divide_axis(GridDirection.V, self.config.kicker_spacing)
        return interior_lines(grid.separator_lines(GridDirection.U))

    def _interior_members(
        self,
        candidates: Sequence[Segment],
        inset: Sequence[Vector3],
        panel: WallPanel,
        plane_normal: Vector3,
        role: MemberRole,
        rotate: bool,
    ) -> List[FrameMember]:
        spans = trim_lines_to_boundary(
            candidates,
            polygon_segments(inset),
            self.config.equality_tolerance,
        )
        members = []
        for span in spans:
            centerline = panel.transform.of_segment(span)
            rotation = member_rotation(centerline, plane_normal) if rotate else 0.0
            members.append(FrameMember(centerline, rotation, role, panel.id))
        return members

    def layout_panel(self, panel: WallPanel) -> Optional[PanelLayout]:
        """
        Frame a single panel.

        Args:
            panel: Wall panel with local boundary and transform

        Returns:
            PanelLayout, or None if the structural inset collapses
        """
        inset = self.structural_inset(panel.boundary)
        if inset is None:
            logger.warning(f"Panel {panel.id}: structural inset produced no polygon, skipped")
            return None

        world_inset = panel.transform.of_polygon(inset)
        plane_normal = polygon_normal(world_inset)

        layout = PanelLayout(panel_id=panel.id, inset_boundary=inset)

        layout.members.extend(frame_perimeter(
            polygon_segments(world_inset),
            self.config.member_half_depth,
            plane_normal,
            self.reference_axis,
            panel.id,
        ))

        layout.members.extend(self._interior_members(
            self.stud_candidates(inset),
            inset,
            panel,
            plane_normal,
            MemberRole.STUD,
            rotate=True,
        ))

        layout.members.extend(self._interior_members(
            self.kicker_candidates(inset),
            inset,
            panel,
            plane_normal,
            MemberRole.KICKER,
            rotate=self.config.compute_kicker_rotation,
        ))

        if self.config.create_covering_panels:
            layout.covering_panels = tile_covering_panels(
                panel.id,
                panel.boundary,
                panel.transform,
                self.config,
            )

        logger.debug(
            f"Panel {panel.id}: {len(layout.members)} member(s), "
            f"{len(layout.covering_panels)} board(s), "
            f"framing length {layout.framing_length:.3f}"
        )
        return layout

    def generate(self, panels: Sequence[WallPanel]) -> PanelLayoutResults:
        """
        Frame a batch of panels.

        Args:
            panels: Wall panels

        Returns:
            PanelLayoutResults with counts, lengths, members and boards
        """
        results = PanelLayoutResults()
        for panel in panels:
            layout = self.layout_panel(panel)
            if layout is None:
                results.skipped_panels.append(panel.id)
                continue
            results.add(layout)

        logger.info(
            f"Framed {results.panel_count} panel(s) "
            f"({len(results.skipped_panels)} skipped), "
            f"total framing length {results.total_framing_length:.3f} m"
        )
        return results


def layout_wall_panels(
    panels: Sequence[WallPanel],
    config: Optional[FramingConfig] = None,
) -> PanelLayoutResults:
    """
    Convenience function to frame a batch of wall panels.

    Args:
        panels: Wall panels
        config: Framing configuration (defaults if not provided)

    Returns:
        PanelLayoutResults
    """
    return PanelLayoutGenerator(config).generate(panels)
