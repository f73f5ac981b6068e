# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Segment intersection utils module

Source from:
- https://www.geeksforgeeks.org/check-if-two-given-line-segments-intersect/
- https://www.geeksforgeeks.org/how-to-check-if-a-given-point-lies-inside-a-polygon/
"""

from __future__ import annotations

__all__ = ["do_intersect", "is_inside_polygon", "on_segment", "orientation"]

from collections.abc import Sequence
from typing import Literal

from .coord import Coord, CoordLike


def on_segment(p: CoordLike, q: CoordLike, r: CoordLike) -> bool:
    """
    Given three collinear points p, q, r,
    the function checks if point q lies
    on line segment 'pr'
    """

    return (q[0] <= max(p[0], r[0])) and (q[0] >= min(p[0], r[0])) and (q[1] <= max(p[1], r[1])) and (q[1] >= min(p[1], r[1]))


def orientation(p: CoordLike, q: CoordLike, r: CoordLike) -> Literal[0, 1, 2]:
    """
    To find orientation of ordered triplet (p, q, r).
    The function returns following values
    0 --> p, q and r are collinear
    1 --> Clockwise
    2 --> Counterclockwise
    """

    val = ((q[1] - p[1]) * (r[0] - q[0])) - ((q[0] - p[0]) * (r[1] - q[1]))

    if val == 0:
        return 0
    if val > 0:
        return 1
    return 2


def do_intersect(p1: CoordLike, q1: CoordLike, p2: CoordLike, q2: CoordLike) -> bool:
    """
    Returns true if the segment 'p1q1' and 'p2q2' share at least one point
    (touching end points included)
    """

    # Find the four orientations needed for
    # general and special cases
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    # General case
    if (o1 != o2) and (o3 != o4):
        return True

    # Special Cases
    # p1, q1 and p2 are collinear and
    # p2 lies on segment p1q1
    if (o1 == 0) and (on_segment(p1, p2, q1)):
        return True

    # p1, q1 and q2 are collinear and
    # q2 lies on segment p1q1
    if (o2 == 0) and (on_segment(p1, q2, q1)):
        return True

    # p2, q2 and p1 are collinear and
    # p1 lies on segment p2q2
    if (o3 == 0) and (on_segment(p2, p1, q2)):
        return True

    # p2, q2 and q1 are collinear and
    # q1 lies on segment p2q2
    if (o4 == 0) and (on_segment(p2, q1, q2)):
        return True

    return False


def is_inside_polygon(points: Sequence[CoordLike], p: CoordLike) -> bool:
    """
    Returns true if the point p lies
    inside the polygon[] with n vertices,
    or on one of its edges
    """

    n = len(points)

    # There must be at least 3 vertices
    # in polygon
    if n < 3:
        return False

    p = Coord.convert(p)
    inside: bool = False
    a = Coord.convert(points[-1])

    for b in map(Coord.convert, points):
        if orientation(a, p, b) == 0 and on_segment(a, p, b):
            return True

        # Even-odd rule: count the edges crossed by the ray going from 'p' to +x.
        # The comparison is cross-multiplied to stay in integers.
        if (a.y > p.y) != (b.y > p.y):
            dy = b.y - a.y
            lhs = (p.x - a.x) * dy
            rhs = (p.y - a.y) * (b.x - a.x)
            if (lhs < rhs) if dy > 0 else (lhs > rhs):
                inside = not inside

        a = b

    return inside
