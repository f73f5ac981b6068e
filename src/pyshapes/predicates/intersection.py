# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape intersection predicates

Two shapes intersect when their boundaries share at least one point.
The relation is symmetric: the dispatch table only stores one order for each pair of kinds.
"""

from __future__ import annotations

__all__ = [
    "circle_circle",
    "ellipse_circle",
    "intersects",
    "line_circle",
    "line_ellipse",
    "line_line",
]

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final

from pygame.math import Vector2

from .. import environ
from ..kind import ShapeKind
from ..math.coord import Coord
from ..math.intersection import do_intersect

if TYPE_CHECKING:
    from ..shape import AbstractShape, Circle, Ellipse, Line

logger = logging.getLogger(__name__)

_EPSILON = 1e-9

type _Predicate = Callable[[Any, Any], bool]


def intersects(lhs: AbstractShape, rhs: AbstractShape) -> bool:
    if lhs.kind.order > rhs.kind.order:
        lhs, rhs = rhs, lhs
    return _INTERSECTIONS[lhs.kind, rhs.kind](lhs, rhs)


def line_line(lhs: Line, rhs: Line) -> bool:
    return do_intersect(lhs.start(), lhs.end(), rhs.start(), rhs.end())


def line_circle(line: Line, circle: Circle) -> bool:
    """Substitutes the parametrized segment into the circle's equation"""
    f = line.start() - circle.center()
    d = line.end() - line.start()
    r = circle.radius()
    a = d.dot_product(d)
    b = 2 * f.dot_product(d)
    c = f.dot_product(f) - r * r
    if a == 0:
        return c == 0
    return _has_root_in_unit_interval(a, b, c)


def line_ellipse(line: Line, ellipse: Ellipse) -> bool:
    """Same as line_circle(), once the segment is moved into the ellipse's own frame"""
    if ellipse.is_flat():
        return line_line(line, ellipse.as_flat_line())
    rx, ry = ellipse.radii()
    start = ellipse.to_local(line.start())
    d = ellipse.to_local(line.end()) - start
    a = (d.x * d.x) / (rx * rx) + (d.y * d.y) / (ry * ry)
    b = 2 * ((start.x * d.x) / (rx * rx) + (start.y * d.y) / (ry * ry))
    c = (start.x * start.x) / (rx * rx) + (start.y * start.y) / (ry * ry) - 1
    if a < _EPSILON:
        return abs(c) <= _EPSILON
    return _has_root_in_unit_interval(a, b, c)


def circle_circle(lhs: Circle, rhs: Circle) -> bool:
    # One circle reaches the other's center, not the usual sum-of-radii overlap test.
    return lhs.center().distance(rhs.center()) <= max(lhs.radius(), rhs.radius())


def ellipse_circle(ellipse: Ellipse, circle: Circle) -> bool:
    if ellipse.is_flat():
        return line_circle(ellipse.as_flat_line(), circle)

    inner, outer = sorted(ellipse.radii())
    r = circle.radius()
    d = Vector2(circle.center()).distance_to(ellipse.center())

    # The ellipse's edge lies within [inner, outer] of its center,
    # the circle's edge within [|d - r|, d + r] of the same point.
    if d + r < inner or abs(d - r) > outer:
        return False
    if abs(d - r) <= inner and d + r >= outer:
        return True

    logger.debug("Ambiguous ellipse/circle configuration, refining (%r, %r)", ellipse, circle)
    return _iterate(ellipse, circle, environ.settings.curve_sampling_step, environ.settings.ellipse_circle_depth)


def _iterate(ellipse: Ellipse, circle: Circle, step: int, depth: int) -> bool:
    """
    Finds the ellipse's edge points closest to and farthest from the circle's center
    by sampling the edge every 'step' degrees, then refining 'depth' times around both extrema.
    The circle's edge crosses the ellipse's one if its radius is in between.
    """
    center = Vector2(circle.center())

    def distance(degrees: float) -> float:
        return center.distance_to(ellipse.boundary_point(degrees))

    samples = [(distance(degrees), float(degrees)) for degrees in range(0, 360, step)]
    closest = _refine(distance, min(samples)[1], step, depth, min)
    farthest = _refine(distance, max(samples)[1], step, depth, max)

    r = circle.radius()
    return closest - _EPSILON <= r <= farthest + _EPSILON


def _refine(
    distance: Callable[[float], float],
    degrees: float,
    step: float,
    depth: int,
    select: Callable[..., tuple[float, float]],
) -> float:
    best = (distance(degrees), degrees)
    for _ in range(depth):
        step /= 2
        best = select(
            best,
            (distance(best[1] - step), best[1] - step),
            (distance(best[1] + step), best[1] + step),
        )
    return best[0]


def _has_root_in_unit_interval(a: float, b: float, c: float) -> bool:
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        if discriminant < -_EPSILON * max(1.0, abs(b * b)):
            return False
        discriminant = 0
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    return (-_EPSILON <= t1 <= 1 + _EPSILON) or (-_EPSILON <= t2 <= 1 + _EPSILON)


def _boundaries(lhs: AbstractShape, rhs: AbstractShape) -> bool:
    return any(line_line(a, b) for a in lhs.as_lines() for b in rhs.as_lines())


def _boundary_circle(shape: AbstractShape, circle: Circle) -> bool:
    return any(line_circle(line, circle) for line in shape.as_lines())


def _circle_boundary(circle: Circle, shape: AbstractShape) -> bool:
    return _boundary_circle(shape, circle)


def _boundary_ellipse(shape: AbstractShape, ellipse: Ellipse) -> bool:
    return any(line_ellipse(line, ellipse) for line in shape.as_lines())


def _ellipse_boundary(ellipse: Ellipse, shape: AbstractShape) -> bool:
    return _boundary_ellipse(shape, ellipse)


def _circle_ellipse(circle: Circle, ellipse: Ellipse) -> bool:
    return ellipse_circle(ellipse, circle)


def _ellipse_ellipse(lhs: Ellipse, rhs: Ellipse) -> bool:
    # Both edges discretized
    return _boundaries(lhs, rhs)


_INTERSECTIONS: Final[dict[tuple[ShapeKind, ShapeKind], _Predicate]] = {
    (ShapeKind.LINE, ShapeKind.LINE): line_line,
    (ShapeKind.LINE, ShapeKind.RECT): _boundaries,
    (ShapeKind.LINE, ShapeKind.CIRCLE): line_circle,
    (ShapeKind.LINE, ShapeKind.ELLIPSE): line_ellipse,
    (ShapeKind.LINE, ShapeKind.TRIANGLE): _boundaries,
    (ShapeKind.LINE, ShapeKind.POLYGON): _boundaries,
    (ShapeKind.RECT, ShapeKind.RECT): _boundaries,
    (ShapeKind.RECT, ShapeKind.CIRCLE): _boundary_circle,
    (ShapeKind.RECT, ShapeKind.ELLIPSE): _boundary_ellipse,
    (ShapeKind.RECT, ShapeKind.TRIANGLE): _boundaries,
    (ShapeKind.RECT, ShapeKind.POLYGON): _boundaries,
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE): circle_circle,
    (ShapeKind.CIRCLE, ShapeKind.ELLIPSE): _circle_ellipse,
    (ShapeKind.CIRCLE, ShapeKind.TRIANGLE): _circle_boundary,
    (ShapeKind.CIRCLE, ShapeKind.POLYGON): _circle_boundary,
    (ShapeKind.ELLIPSE, ShapeKind.ELLIPSE): _ellipse_ellipse,
    (ShapeKind.ELLIPSE, ShapeKind.TRIANGLE): _ellipse_boundary,
    (ShapeKind.ELLIPSE, ShapeKind.POLYGON): _ellipse_boundary,
    (ShapeKind.TRIANGLE, ShapeKind.TRIANGLE): _boundaries,
    (ShapeKind.TRIANGLE, ShapeKind.POLYGON): _boundaries,
    (ShapeKind.POLYGON, ShapeKind.POLYGON): _boundaries,
}
