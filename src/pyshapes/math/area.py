# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Bounds and transform helpers over point lists"""

from __future__ import annotations

__all__ = [
    "compute_bounds",
    "get_vertices_center",
    "rotate_points",
    "scale_points",
]

from collections.abc import Sequence

from pygame.math import Vector2

from .coord import Coord, CoordLike


def compute_bounds(vertices: Sequence[CoordLike]) -> tuple[int, int, int, int]:
    """Returns (left, top, right, bottom), all inclusive"""
    assert vertices, "Empty point list"

    left = right = Coord.convert(vertices[0]).x
    top = bottom = Coord.convert(vertices[0]).y

    for point in map(Coord.convert, vertices):
        left = point.x if point.x < left else left
        right = point.x if point.x > right else right
        top = point.y if point.y < top else top
        bottom = point.y if point.y > bottom else bottom

    return left, top, right, bottom


def get_vertices_center(vertices: Sequence[CoordLike]) -> Coord:
    left, top, right, bottom = compute_bounds(vertices)
    return Coord(left, top).mid_point((right, bottom))


def rotate_points(
    points: Sequence[CoordLike],
    degrees: float,
    pivot: CoordLike | None = None,
) -> list[Coord]:
    if not points:
        return []
    if pivot is None:
        pivot = get_vertices_center(points)
    center = Vector2(Coord.convert(pivot))
    if degrees % 360 == 0:
        return [Coord.convert(point) for point in points]
    return [Coord.from_vector(center + (Vector2(Coord.convert(point)) - center).rotate(degrees)) for point in points]


def scale_points(
    points: Sequence[CoordLike],
    factor: float,
    pivot: CoordLike | None = None,
) -> list[Coord]:
    if not points:
        return []
    if pivot is None:
        pivot = get_vertices_center(points)
    center = Vector2(Coord.convert(pivot))
    return [Coord.from_vector(center + (Vector2(Coord.convert(point)) - center) * factor) for point in points]
