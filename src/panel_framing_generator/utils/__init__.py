# File: src/panel_framing_generator/utils/__init__.py
"""Logging configuration and result serialization."""
