# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape containment predicates

A shape contains another one when the other one is entirely inside it.
Touching the container's edge does not count for polygons and curved shapes.
"""

from __future__ import annotations

__all__ = ["contains", "contains_points"]

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Final

from ..kind import ShapeKind
from ..math.coord import Coord, CoordLike
from .intersection import intersects

if TYPE_CHECKING:
    from ..shape import AbstractShape, Circle, Ellipse, Line

type _Predicate = Callable[[Any, Any], bool]


def contains(container: AbstractShape, other: AbstractShape) -> bool:
    predicate = _CONTAINMENTS.get((container.kind, other.kind), _contains_corners)
    return predicate(container, other)


def contains_points(container: AbstractShape, points: Iterable[CoordLike]) -> bool:
    return all(container.contains(point) for point in points)


def _corners(shape: Any) -> list[Coord]:
    match shape.kind:
        case ShapeKind.RECT:
            return shape.corners()
        case ShapeKind.CIRCLE | ShapeKind.ELLIPSE:
            return shape.as_polygon().points()
        case _:
            return shape.points()


def _contains_corners(container: AbstractShape, other: AbstractShape) -> bool:
    return contains_points(container, _corners(other))


def _polygon_contains(polygon: AbstractShape, other: AbstractShape) -> bool:
    # A concave polygon can have every corner of 'other' inside while one of its edges goes out
    return _contains_corners(polygon, other) and not intersects(polygon, other)


def _contains_curve(container: AbstractShape, curve: AbstractShape) -> bool:
    return (
        container.contains(curve.center())
        and contains_points(container, curve.points())
        and not intersects(container, curve)
    )


def _circle_contains_circle(outer: Circle, inner: Circle) -> bool:
    # The radii gap is taken as an absolute value: a smaller circle contains a bigger concentric one.
    return outer.center().distance(inner.center()) < abs(outer.radius() - inner.radius())


def _line_contains_circle(line: Line, circle: Circle) -> bool:
    return circle.radius() == 0 and line.contains(circle.center())


def _line_contains_ellipse(line: Line, ellipse: Ellipse) -> bool:
    return ellipse.is_flat() and contains_points(line, ellipse.as_flat_line().points())


_CONTAINMENTS: Final[dict[tuple[ShapeKind, ShapeKind], _Predicate]] = {
    **{(ShapeKind.POLYGON, kind): _polygon_contains for kind in ShapeKind},
    (ShapeKind.LINE, ShapeKind.CIRCLE): _line_contains_circle,
    (ShapeKind.LINE, ShapeKind.ELLIPSE): _line_contains_ellipse,
    (ShapeKind.RECT, ShapeKind.CIRCLE): _contains_curve,
    (ShapeKind.RECT, ShapeKind.ELLIPSE): _contains_curve,
    (ShapeKind.TRIANGLE, ShapeKind.CIRCLE): _contains_curve,
    (ShapeKind.TRIANGLE, ShapeKind.ELLIPSE): _contains_curve,
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE): _circle_contains_circle,
}
