# File: src/panel_framing_generator/geometry/intersection.py
"""
Segment-segment intersection in the panel plane.

Only X and Y are used; callers work in panel-local coordinates where the
boundary lies in the XY plane. The degenerate-case policy is narrow and
other code depends on it:

- Parallel segments never intersect.
- Collinear segments return a single representative point chosen by an
  X-range test only: the start of AB if it lies in [C.x, D.x], otherwise the
  start of CD if it lies in [A.x, B.x]. Ranges follow each segment's own
  start -> end order, so a segment running toward -X has an empty range.
  Because only X is examined, vertical collinear segments always "intersect"
  at AB's start, whether or not they overlap.
"""

from typing import Optional

from .primitives import Vector3, Segment


def segment_intersection(ab: Segment, cd: Segment) -> Optional[Vector3]:
    """
    Intersect two finite segments.

    Solves A + r * (B - A) = C + s * (D - C) and accepts the crossing only
    when both r and s lie in the closed interval [0, 1].

    Args:
        ab: First segment (A -> B)
        cd: Second segment (C -> D)

    Returns:
        The intersection point (z = 0), or None if the segments do not meet.
    """
    a, b = ab.start, ab.end
    c, d = cd.start, cd.end

    delta_ac_y = a.y - c.y
    delta_dc_x = d.x - c.x
    delta_ac_x = a.x - c.x
    delta_dc_y = d.y - c.y
    delta_ba_x = b.x - a.x
    delta_ba_y = b.y - a.y

    denominator = delta_ba_x * delta_dc_y - delta_ba_y * delta_dc_x
    numerator = delta_ac_y * delta_dc_x - delta_ac_x * delta_dc_y

    if denominator == 0:
        if numerator == 0:
            # Collinear: any overlap has infinitely many points, return one
            if c.x <= a.x <= d.x:
                return Vector3(a.x, a.y)
            if a.x <= c.x <= b.x:
                return Vector3(c.x, c.y)
            return None
        # Parallel
        return None

    r = numerator / denominator
    if r < 0 or r > 1:
        return None

    s = (delta_ac_y * delta_ba_x - delta_ac_x * delta_ba_y) / denominator
    if s < 0 or s > 1:
        return None

    return Vector3(a.x + r * delta_ba_x, a.y + r * delta_ba_y)
