# File: src/panel_framing_generator/config/units.py

"""
Unit management and conversion functionality for the Panel Framing Generator.

All framing geometry is computed in meters. Lumber and board dimensions are
usually quoted in inches or feet, so this module converts them into the
working unit.
"""

from enum import Enum
from typing import Union, Dict

class ProjectUnits(Enum):
    """
    Enumeration of supported project units.
    Using an enum provides type safety and autocompletion support.
    """
    METERS = "meters"
    FEET = "feet"
    INCHES = "inches"
    MILLIMETERS = "millimeters"

# Conversion factors to meters
_CONVERSION_TO_METERS: Dict[ProjectUnits, float] = {
    ProjectUnits.METERS: 1.0,
    ProjectUnits.FEET: 0.3048,
    ProjectUnits.INCHES: 0.0254,
    ProjectUnits.MILLIMETERS: 0.001,
}


def _as_units(units: Union[ProjectUnits, str]) -> ProjectUnits:
    if isinstance(units, ProjectUnits):
        return units
    try:
        return ProjectUnits(str(units).lower())
    except ValueError:
        raise ValueError(f"Unsupported unit: {units}")


def inches_to_meters(inches: float) -> float:
    return inches * _CONVERSION_TO_METERS[ProjectUnits.INCHES]


def feet_to_meters(feet: float) -> float:
    return feet * _CONVERSION_TO_METERS[ProjectUnits.FEET]


def convert_to_meters(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from the specified units to meters.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (ProjectUnits enum or string)

    Returns:
        The value converted to meters

    Raises:
        ValueError: If the provided units are not supported
    """
    return value * _CONVERSION_TO_METERS[_as_units(current_units)]

