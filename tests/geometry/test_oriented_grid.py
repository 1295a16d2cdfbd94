# File: tests/geometry/test_oriented_grid.py
"""Unit tests for the oriented grid."""

import pytest

from panel_framing_generator.geometry.primitives import Vector3, Segment, polygon_area
from panel_framing_generator.geometry.oriented_grid import (
    OrientedGrid,
    GridDirection,
    DivisionMode,
)


L_SHAPE = [
    Vector3(0, 0), Vector3(4, 0), Vector3(4, 1),
    Vector3(1, 1), Vector3(1, 3), Vector3(0, 3),
]


class TestDivision:
    """Tests for axis subdivision."""

    def test_domains(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)

        assert grid.u_domain == (0, 4.0)
        assert grid.v_domain == (0, 3.0)

    def test_fixed_division_remainder_at_end(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)

        positions = grid.divide_axis(GridDirection.U, 1.5)

        assert positions == pytest.approx([0.0, 1.5, 3.0, 4.0])

    def test_fixed_division_exact_multiple(self, rectangle_boundary):
        """Test that no sliver interval is added when the spacing divides evenly."""
        grid = OrientedGrid(rectangle_boundary)

        positions = grid.divide_axis(GridDirection.U, 1.0)

        assert positions == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])

    def test_approximate_division(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)

        positions = grid.divide_axis(GridDirection.U, 1.5, DivisionMode.APPROXIMATE)

        assert positions == pytest.approx([0.0, 4 / 3, 8 / 3, 4.0])

    def test_spacing_larger_than_domain(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)

        assert grid.divide_axis(GridDirection.V, 10.0) == [0, 3.0]

    def test_non_positive_spacing(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)

        with pytest.raises(ValueError):
            grid.divide_axis(GridDirection.U, 0.0)

    def test_too_few_vertices(self):
        with pytest.raises(ValueError):
            OrientedGrid([Vector3(0, 0), Vector3(1, 1)])


class TestSeparatorLines:
    """Tests for untrimmed separator lines."""

    def test_vertical_lines_at_u_divisions(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)
        grid.divide_axis(GridDirection.U, 1.0)

        lines = grid.separator_lines(GridDirection.V)

        assert len(lines) == 5
        assert lines[0] == Segment(Vector3(0, 0), Vector3(0, 3.0))
        assert lines[2].start.x == pytest.approx(2.0)
        assert lines[-1] == Segment(Vector3(4.0, 0), Vector3(4.0, 3.0))

    def test_horizontal_lines_without_division(self, rectangle_boundary):
        """Test that an undivided axis still yields its two domain ends."""
        grid = OrientedGrid(rectangle_boundary)

        lines = grid.separator_lines(GridDirection.U)

        assert lines == [
            Segment(Vector3(0, 0), Vector3(4.0, 0)),
            Segment(Vector3(0, 3.0), Vector3(4.0, 3.0)),
        ]


class TestCells:
    """Tests for trimmed grid cells."""

    def test_rectangle_cells(self, rectangle_boundary):
        grid = OrientedGrid(rectangle_boundary)
        grid.divide_axis(GridDirection.U, 2.0)
        grid.divide_axis(GridDirection.V, 2.0)

        cells = grid.cells()

        assert len(cells) == 4
        assert sum(abs(polygon_area(c.trimmed[0])) for c in cells) == pytest.approx(12.0)

    def test_concave_cells_trimmed(self):
        """Test that cells outside an L-shape are dropped and the rest clipped."""
        grid = OrientedGrid(L_SHAPE)
        grid.divide_axis(GridDirection.U, 2.0)
        grid.divide_axis(GridDirection.V, 2.0)

        cells = grid.cells()
        areas = {
            (c.u_index, c.v_index): sum(abs(polygon_area(t)) for t in c.trimmed)
            for c in cells
        }

        assert areas == pytest.approx({(0, 0): 3.0, (1, 0): 2.0, (0, 1): 1.0})
