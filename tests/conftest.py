# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest
from typing import List

from panel_framing_generator.config.framing import FramingConfig
from panel_framing_generator.geometry.primitives import Vector3
from panel_framing_generator.geometry.transform import PanelTransform
from panel_framing_generator.wall_data.panel_input import WallPanel


def rectangle(width: float, height: float, x0: float = 0.0, y0: float = 0.0) -> List[Vector3]:
    """Counter-clockwise rectangle in the XY plane."""
    return [
        Vector3(x0, y0),
        Vector3(x0 + width, y0),
        Vector3(x0 + width, y0 + height),
        Vector3(x0, y0 + height),
    ]


# Panel standing in the world XZ plane: local X along world X, local Y up
WALL_TRANSFORM = PanelTransform(
    origin=Vector3(0.0, 0.0, 0.0),
    x_axis=Vector3(1.0, 0.0, 0.0),
    y_axis=Vector3(0.0, 0.0, 1.0),
    z_axis=Vector3(0.0, -1.0, 0.0),
)


@pytest.fixture
def make_rectangle():
    """Factory for counter-clockwise rectangles."""
    return rectangle


@pytest.fixture
def wall_transform():
    return WALL_TRANSFORM


@pytest.fixture
def rectangle_boundary():
    """4.0 x 3.0 panel outline."""
    return rectangle(4.0, 3.0)


@pytest.fixture
def simple_config():
    """Round-number framing config: inset 0.05, studs and kickers every 1.0."""
    return FramingConfig(
        stud_spacing=1.0,
        kicker_spacing=1.0,
        member_depth=0.1,
        member_width=0.09,
        member_tolerance=0.0,
        covering_tile_width=2.0,
        covering_tile_height=2.0,
        covering_panel_thickness=0.016,
    )


@pytest.fixture
def wall_panel(rectangle_boundary):
    """Upright 4.0 x 3.0 wall panel."""
    return WallPanel(id="W1", boundary=rectangle_boundary, transform=WALL_TRANSFORM)
