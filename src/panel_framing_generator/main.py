#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Script: main.py
Location: src/panel_framing_generator/main.py

Description:
    Command-line entry point for the Panel Framing Generator. Reads wall
    panels from a JSON file, lays out their framing and wall board, and
    writes the results as JSON.

Usage:
    python -m panel_framing_generator.main panels.json --output framing.json
    python -m panel_framing_generator.main panels.json --stud-spacing 0.6 --no-covering-panels
"""

import argparse
import json
import sys
from typing import List, Optional

from panel_framing_generator.config.framing import FramingConfig
from panel_framing_generator.layout.panel_layout import PanelLayoutGenerator
from panel_framing_generator.materials.stud_profiles import get_stud_profile
from panel_framing_generator.utils.logging_config import PanelFramingLogger, get_logger
from panel_framing_generator.utils.serialization import serialize_results
from panel_framing_generator.wall_data.panel_input import load_wall_panels

logger = get_logger(__name__)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Panel Framing Generator: studs, kickers and wall board for wall panels"
    )

    parser.add_argument(
        "input",
        help="Path to a JSON file with wall panels"
    )
    parser.add_argument(
        "--output",
        help="Path for the JSON results (default: stdout)"
    )

    # Framing options
    parser.add_argument(
        "--config",
        help="Path to a JSON file with framing parameters"
    )
    parser.add_argument(
        "--stud-spacing",
        type=float,
        help="Stud spacing in meters (overrides --config)"
    )
    parser.add_argument(
        "--no-covering-panels",
        action="store_true",
        help="Skip wall board generation"
    )
    parser.add_argument(
        "--profile",
        help="Stud profile name (default: 362S150)"
    )

    # Logging options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: no log file)"
    )

    return parser.parse_args(argv)


def build_config(args) -> FramingConfig:
    """
    Build the framing configuration from command line arguments.

    A --profile sets the member section, overriding member_width and
    member_depth from --config.

    Raises:
        OSError: If the config file cannot be read
        ValueError: If the config file is not valid JSON or fails validation
        KeyError: If the profile name is unknown
    """
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            config = FramingConfig.from_dict(json.load(f))
    else:
        config = FramingConfig()

    if args.stud_spacing is not None:
        config.stud_spacing = args.stud_spacing
    if args.no_covering_panels:
        config.create_covering_panels = False
    if args.profile is not None:
        profile = get_stud_profile(args.profile)
        config.set_member_section(profile.width, profile.depth)

    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    log_file = PanelFramingLogger.configure(debug_mode=args.debug, log_dir=args.log_dir)
    if log_file:
        logger.debug(f"Logging to {log_file}")

    try:
        config = build_config(args)
        profile = get_stud_profile(args.profile)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Invalid framing configuration: {e}")
        return 1

    try:
        panels = load_wall_panels(args.input)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Could not read wall panels from {args.input}: {e}")
        return 1

    logger.info(f"Loaded {len(panels)} wall panel(s) from {args.input}")

    results = PanelLayoutGenerator(config).generate(panels)
    output = serialize_results(results, profile)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Results written to {args.output}")
    else:
        sys.stdout.write(output + "\n")

    summary = results.get_summary()
    logger.info(
        f"{summary['panel_count']} panel(s): {summary['perimeter_members']} perimeter, "
        f"{summary['studs']} studs, {summary['kickers']} kickers, "
        f"{summary['covering']['total_boards']} boards"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
