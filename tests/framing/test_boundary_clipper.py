# File: tests/framing/test_boundary_clipper.py
"""Unit tests for trimming candidate lines to a panel boundary."""

import pytest
from shapely.geometry import Point, Polygon

from panel_framing_generator.geometry.primitives import Vector3, Segment, polygon_segments
from panel_framing_generator.framing.boundary_clipper import (
    find_crossings,
    pair_crossings,
    trim_lines_to_boundary,
)


L_SHAPE = [
    Vector3(0, 0), Vector3(4, 0), Vector3(4, 1),
    Vector3(1, 1), Vector3(1, 3), Vector3(0, 3),
]

U_SHAPE = [
    Vector3(0, 0), Vector3(3, 0), Vector3(3, 3), Vector3(2, 3),
    Vector3(2, 1), Vector3(1, 1), Vector3(1, 3), Vector3(0, 3),
]


def vertical(x, y0=-1.0, y1=4.0) -> Segment:
    return Segment(Vector3(x, y0), Vector3(x, y1))


def horizontal(y, x0=-1.0, x1=5.0) -> Segment:
    return Segment(Vector3(x0, y), Vector3(x1, y))


def assert_span(span, start, end):
    assert span.start.is_almost_equal(start)
    assert span.end.is_almost_equal(end)


class TestSingleLine:
    """Tests for one candidate line against a convex boundary."""

    def test_line_crossing_twice_gives_one_span(self, rectangle_boundary):
        """Test that a chord through the rectangle is returned whole."""
        spans = trim_lines_to_boundary([vertical(1.0)], polygon_segments(rectangle_boundary))

        assert len(spans) == 1
        assert_span(spans[0], Vector3(1, 0), Vector3(1, 3))

    def test_span_follows_line_direction(self, rectangle_boundary):
        """Test that crossings are ordered from the line's start."""
        line = Segment(Vector3(1, 4), Vector3(1, -1))

        spans = trim_lines_to_boundary([line], polygon_segments(rectangle_boundary))

        assert_span(spans[0], Vector3(1, 3), Vector3(1, 0))

    def test_line_outside_boundary(self, rectangle_boundary):
        assert trim_lines_to_boundary([vertical(10.0)], polygon_segments(rectangle_boundary)) == []

    def test_line_with_single_crossing(self, rectangle_boundary):
        """Test that a line ending on the boundary is dropped."""
        line = Segment(Vector3(-1, 1), Vector3(0, 1))

        assert len(find_crossings(line, polygon_segments(rectangle_boundary))) == 1
        assert trim_lines_to_boundary([line], polygon_segments(rectangle_boundary)) == []

    def test_line_grazing_vertex(self, rectangle_boundary):
        """Test that a line touching only a corner yields a skipped pair."""
        line = Segment(Vector3(3, 4), Vector3(5, 2))
        boundary = polygon_segments(rectangle_boundary)

        crossings = find_crossings(line, boundary)

        assert len(crossings) == 2
        assert crossings[0].is_almost_equal(crossings[1])
        assert trim_lines_to_boundary([line], boundary) == []


class TestPairCrossings:
    """Tests for pairing sorted crossings."""

    def test_identical_pair_skipped(self):
        p = Vector3(1, 1)

        assert pair_crossings([p, p]) == []

    def test_almost_equal_pair_skipped(self):
        assert pair_crossings([Vector3(1, 1), Vector3(1.000005, 1)]) == []

    def test_pairs_taken_in_order(self):
        points = [Vector3(0, 0), Vector3(1, 0), Vector3(2, 0), Vector3(3, 0)]

        spans = pair_crossings(points)

        assert spans == [Segment(points[0], points[1]), Segment(points[2], points[3])]

    def test_odd_crossing_dropped(self):
        points = [Vector3(0, 0), Vector3(1, 0), Vector3(2, 0)]

        assert pair_crossings(points) == [Segment(points[0], points[1])]

    def test_odd_crossing_count_on_open_boundary(self, rectangle_boundary):
        """Test that a third crossing from an extra edge is ignored."""
        boundary = polygon_segments(rectangle_boundary) + [Segment(Vector3(2, 0), Vector3(2, 3))]

        spans = trim_lines_to_boundary([horizontal(1.0)], boundary)

        assert len(spans) == 1
        assert_span(spans[0], Vector3(0, 1), Vector3(2, 1))


class TestConcaveBoundary:
    """Tests for non-convex boundaries."""

    def test_line_through_u_shape_gives_two_spans(self):
        spans = trim_lines_to_boundary([horizontal(2.0)], polygon_segments(U_SHAPE))

        assert len(spans) == 2
        assert_span(spans[0], Vector3(0, 2), Vector3(1, 2))
        assert_span(spans[1], Vector3(2, 2), Vector3(3, 2))

    def test_l_shape_studs(self):
        lines = [vertical(0.5), vertical(1.5), vertical(2.5), vertical(3.5)]

        spans = trim_lines_to_boundary(lines, polygon_segments(L_SHAPE))

        assert len(spans) == 4
        assert_span(spans[0], Vector3(0.5, 0), Vector3(0.5, 3))
        assert_span(spans[1], Vector3(1.5, 0), Vector3(1.5, 1))

    def test_spans_lie_inside_boundary(self):
        """Test that every span ends on the boundary and stays within it."""
        boundary = polygon_segments(L_SHAPE)
        polygon = Polygon([(v.x, v.y) for v in L_SHAPE])
        ring = polygon.exterior
        lines = [vertical(x) for x in (0.25, 0.75, 1.25, 2.0, 3.75)]
        lines += [horizontal(y) for y in (0.5, 1.5, 2.5)]

        spans = trim_lines_to_boundary(lines, boundary)

        assert spans
        for span in spans:
            assert ring.distance(Point(span.start.x, span.start.y)) < 1e-9
            assert ring.distance(Point(span.end.x, span.end.y)) < 1e-9
            middle = span.point_at(0.5)
            assert polygon.covers(Point(middle.x, middle.y))

    def test_no_degenerate_spans(self):
        lines = [vertical(x) for x in (0.0, 1.0, 2.0, 4.0)]

        spans = trim_lines_to_boundary(lines, polygon_segments(L_SHAPE), tolerance=1e-5)

        for span in spans:
            assert not span.start.is_almost_equal(span.end, 1e-5)

    def test_line_along_boundary_edge(self, rectangle_boundary):
        """Test that a line lying on an edge injects collinear crossings and yields nothing."""
        spans = trim_lines_to_boundary([horizontal(0.0)], polygon_segments(rectangle_boundary))

        assert spans == []
