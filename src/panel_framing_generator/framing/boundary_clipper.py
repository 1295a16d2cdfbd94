# File: src/panel_framing_generator/framing/boundary_clipper.py
"""
Trimming of candidate division lines to a panel boundary.

Each candidate line is intersected with every boundary segment. The
crossings are sorted by distance from the line's start and taken two at a
time: (1st, 2nd), (3rd, 4th), ... Each pair is an inside span under the
even-odd rule. This holds for simple boundaries whose crossings alternate
cleanly; a line running along a boundary edge can inject extra collinear
crossings and break the alternation.

Degenerate input never raises. It only produces fewer spans:
- fewer than two crossings: the line is dropped
- a pair of (almost) equal points: the pair is skipped
- an odd trailing crossing: ignored
"""

from typing import List, Sequence

from panel_framing_generator.config.framing import EQUALITY_TOLERANCE
from panel_framing_generator.geometry.primitives import Vector3, Segment
from panel_framing_generator.geometry.intersection import segment_intersection
from panel_framing_generator.geometry.ordering import CrossingOrder
from panel_framing_generator.utils.logging_config import get_logger

logger = get_logger(__name__)


def find_crossings(line: Segment, boundary: Sequence[Segment]) -> List[Vector3]:
    """
    Crossings of a line with the boundary, sorted from the line's start.

    Points shared by adjacent boundary segments are reported once per
    segment; no deduplication is done.
    """
    crossings = []
    for edge in boundary:
        point = segment_intersection(edge, line)
        if point is not None:
            crossings.append(point)
    return CrossingOrder(line.start).sorted(crossings)


def pair_crossings(
    crossings: Sequence[Vector3],
    tolerance: float = EQUALITY_TOLERANCE,
) -> List[Segment]:
    """
    Turn sorted crossings into spans, pairing (0, 1), (2, 3), ...

    Args:
        crossings: Crossings sorted along the line
        tolerance: Pairs closer than this (per component) are skipped

    Returns:
        Non-degenerate spans
    """
    spans = []
    for i in range(0, len(crossings) - 1, 2):
        first, second = crossings[i], crossings[i + 1]
        if first.is_almost_equal(second, tolerance):
            logger.trace(f"Skipping degenerate span at {first.to_tuple()}")
            continue
        spans.append(Segment(first, second))
    return spans


def trim_lines_to_boundary(
    lines: Sequence[Segment],
    boundary: Sequence[Segment],
    tolerance: float = EQUALITY_TOLERANCE,
) -> List[Segment]:
    """
    Trim candidate lines to the parts lying inside a boundary.

    Args:
        lines: Untrimmed candidate lines
        boundary: Closed, simple boundary as ordered segments
        tolerance: Equality tolerance for rejecting zero-length spans

    Returns:
        Trimmed spans for all lines, in line order
    """
    trims: List[Segment] = []
    for line in lines:
        crossings = find_crossings(line, boundary)
        if len(crossings) < 2:
            logger.trace(
                f"Line {line.start.to_tuple()} -> {line.end.to_tuple()} has "
                f"{len(crossings)} crossing(s), skipped"
            )
            continue

        if len(crossings) % 2:
            logger.debug(
                f"Odd crossing count ({len(crossings)}) on line starting at "
                f"{line.start.to_tuple()}; last crossing dropped"
            )
        trims.extend(pair_crossings(crossings, tolerance))

    logger.debug(f"Trimmed {len(lines)} line(s) to {len(trims)} span(s)")
    return trims
