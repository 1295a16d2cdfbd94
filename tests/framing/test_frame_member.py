# File: tests/framing/test_frame_member.py
"""Unit tests for framing member data."""

import math

import pytest

from panel_framing_generator.geometry.primitives import Vector3, Segment
from panel_framing_generator.framing.frame_member import (
    FrameMember,
    MemberRole,
    make_member,
    member_rotation,
)
from panel_framing_generator.materials.stud_profiles import get_stud_profile
from panel_framing_generator.materials.material_catalog import get_material


def stud(role: MemberRole = MemberRole.STUD) -> FrameMember:
    return FrameMember(
        centerline=Segment(Vector3(1, 0, 0), Vector3(1, 0, 2.5)),
        rotation=math.pi / 2,
        role=role,
        panel_id="W1",
    )


class TestMemberRotation:
    """Tests for member_rotation."""

    def test_vertical_member_in_wall(self):
        centerline = Segment(Vector3(0, 0, 0), Vector3(0, 0, 1))

        assert member_rotation(centerline, Vector3(0, -1, 0)) == pytest.approx(math.pi / 2)

    def test_degenerate_normal_gives_zero(self):
        centerline = Segment(Vector3(0, 0, 0), Vector3(1, 0, 0))

        assert member_rotation(centerline, Vector3(0, 0, 0)) == 0.0


class TestFrameMember:
    """Tests for FrameMember."""

    def test_length(self):
        assert stud().length == pytest.approx(2.5)

    def test_to_dict(self):
        data = stud().to_dict()

        assert data["role"] == "stud"
        assert data["panel_id"] == "W1"
        assert data["start"] == [1, 0, 0]
        assert data["end"] == [1, 0, 2.5]
        assert data["length"] == pytest.approx(2.5)

    def test_from_dict(self):
        member = stud(MemberRole.KICKER)

        assert FrameMember.from_dict(member.to_dict()) == member


class TestMakeMember:
    """Tests for attaching profile and material."""

    @pytest.mark.parametrize("role, material", [
        (MemberRole.PERIMETER, "stud_frame"),
        (MemberRole.STUD, "stud"),
        (MemberRole.KICKER, "stud"),
    ])
    def test_material_from_role(self, role, material):
        member = make_member(stud(role), get_stud_profile())

        assert member.material.name == material
        assert member.profile.name == "362S150"

    def test_explicit_material(self):
        member = make_member(stud(), get_stud_profile(), get_material("wall_board"))

        assert member.material.name == "wall_board"

    def test_to_dict(self):
        data = make_member(stud(MemberRole.PERIMETER), get_stud_profile("600S162")).to_dict()

        assert data["profile"] == "600S162"
        assert data["material"] == "stud_frame"
        assert data["role"] == "perimeter"
