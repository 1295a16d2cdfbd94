# File: src/panel_framing_generator/__init__.py
"""
Panel Framing Generator.

Lays out light-gauge framing for prefabricated wall panels: an inset
perimeter frame, interior studs and kickers clipped to the panel outline,
and wall board tiled over both faces.
"""

__version__ = "0.1.0"
