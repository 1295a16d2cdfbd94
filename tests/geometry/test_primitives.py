# File: tests/geometry/test_primitives.py
"""Unit tests for geometric primitives."""

import math

import pytest

from panel_framing_generator.geometry.primitives import (
    Vector3,
    Segment,
    WORLD_X,
    WORLD_Y,
    WORLD_Z,
    polygon_segments,
    polygon_normal,
    polygon_area,
)


class TestVector3:
    """Tests for Vector3."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)

        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert -a == Vector3(-1, -2, -3)

    def test_dot_and_cross(self):
        assert WORLD_X.dot(WORLD_Y) == 0
        assert WORLD_X.cross(WORLD_Y) == WORLD_Z
        assert WORLD_Z.cross(WORLD_X) == WORLD_Y

    def test_unitized(self):
        v = Vector3(3, 4).unitized()

        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)
        assert v.length() == pytest.approx(1.0)

    def test_unitized_zero_vector(self):
        assert Vector3(0, 0, 0).unitized() == Vector3(0, 0, 0)

    def test_angle_to(self):
        assert WORLD_X.angle_to(WORLD_Y) == pytest.approx(math.pi / 2)
        assert WORLD_X.angle_to(-WORLD_X) == pytest.approx(math.pi)
        assert WORLD_X.angle_to(WORLD_X) == pytest.approx(0.0)

    def test_angle_to_zero_vector_is_nan(self):
        assert math.isnan(WORLD_X.angle_to(Vector3(0, 0, 0)))

    def test_is_almost_equal_per_component(self):
        """Test that each component is compared against the tolerance."""
        p = Vector3(1.0, 1.0, 0.0)

        assert p.is_almost_equal(Vector3(1.000009, 0.999991, 0.0))
        assert not p.is_almost_equal(Vector3(1.00002, 1.0, 0.0))
        assert p.is_almost_equal(Vector3(1.05, 1.0), tolerance=0.1)

    def test_parse(self):
        assert Vector3.parse([1, 2]) == Vector3(1.0, 2.0, 0.0)
        assert Vector3.parse((1, 2, 3)) == Vector3(1.0, 2.0, 3.0)
        assert Vector3.parse({"x": 1, "y": 2}) == Vector3(1.0, 2.0, 0.0)
        assert Vector3.parse(WORLD_Z) is WORLD_Z

    @pytest.mark.parametrize("coords", [[], [0], [1, 2, 3, 4]])
    def test_parse_rejects_wrong_coordinate_count(self, coords):
        with pytest.raises(ValueError, match="2 or 3 coordinates"):
            Vector3.parse(coords)

    def test_to_dict(self):
        assert Vector3(1, 2, 3).to_dict() == {"x": 1, "y": 2, "z": 3}


class TestSegment:
    """Tests for Segment."""

    def test_length_and_direction(self):
        s = Segment(Vector3(1, 1), Vector3(4, 5))

        assert s.length == pytest.approx(5.0)
        assert s.direction.x == pytest.approx(0.6)
        assert s.direction.y == pytest.approx(0.8)

    def test_degenerate_direction(self):
        p = Vector3(2, 2)

        assert Segment(p, p).direction == Vector3(0, 0, 0)

    def test_point_at(self):
        s = Segment(Vector3(0, 0), Vector3(2, 4))

        assert s.point_at(0.5) == Vector3(1, 2)

    def test_frame_of_horizontal_segment(self):
        """Test that the frame x axis is world-up cross direction."""
        frame = Segment(Vector3(0, 0), Vector3(2, 0)).frame_at_start()

        assert frame.origin == Vector3(0, 0)
        assert frame.z_axis == WORLD_X
        assert frame.x_axis == WORLD_Y

    def test_frame_of_vertical_segment(self):
        """Test that a vertical segment falls back to world X."""
        frame = Segment(Vector3(0, 0, 0), Vector3(0, 0, 3)).frame_at_start()

        assert frame.z_axis == WORLD_Z
        assert frame.x_axis == WORLD_X

    def test_dict_round_trip(self):
        s = Segment(Vector3(0, 1, 2), Vector3(3, 4, 5))

        data = s.to_dict()

        assert data["start"] == [0, 1, 2]
        assert Segment.from_dict(data) == s


class TestPolygonHelpers:
    """Tests for polygon helpers."""

    def test_polygon_segments_closes_ring(self, rectangle_boundary):
        segments = polygon_segments(rectangle_boundary)

        assert len(segments) == 4
        assert segments[-1].end == rectangle_boundary[0]

    def test_polygon_segments_ignores_closing_vertex(self, rectangle_boundary):
        closed = rectangle_boundary + [rectangle_boundary[0]]

        assert polygon_segments(closed) == polygon_segments(rectangle_boundary)

    def test_polygon_normal(self, rectangle_boundary, wall_transform):
        assert polygon_normal(rectangle_boundary) == WORLD_Z

        world = wall_transform.of_polygon(rectangle_boundary)

        assert polygon_normal(world) == Vector3(0.0, -1.0, 0.0)

    def test_polygon_area(self, rectangle_boundary):
        assert polygon_area(rectangle_boundary) == pytest.approx(12.0)
        assert polygon_area(list(reversed(rectangle_boundary))) == pytest.approx(-12.0)
