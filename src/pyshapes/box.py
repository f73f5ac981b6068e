# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""ShapeBox module"""

from __future__ import annotations

__all__ = ["AnyShape", "ShapeBox"]

from collections.abc import Sequence
from dataclasses import dataclass

from typing_extensions import assert_never, final

from .kind import ShapeKind
from .math import Coord, CoordLike
from .shape import AbstractShape, Circle, Ellipse, Line, Polygon, Rect, Triangle

type AnyShape = Line | Rect | Circle | Ellipse | Triangle | Polygon


@final
@dataclass(frozen=True, slots=True)
class ShapeBox:
    """
    Holds exactly one concrete shape

    Used to store shapes of different kinds together, and to ask questions
    about a shape whose kind is only known at runtime.
    """

    shape: AnyShape

    def __post_init__(self) -> None:
        match self.shape:
            case ShapeBox(shape=shape):
                object.__setattr__(self, "shape", shape)
            case Line() | Rect() | Circle() | Ellipse() | Triangle() | Polygon():
                pass
            case _:
                raise TypeError(f"Expected a shape, got {self.shape!r}")

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    def rebuild(self, points: Sequence[CoordLike]) -> ShapeBox:
        """Builds a new box holding a shape of the same kind, made from 'points'"""
        shape: AnyShape
        match self.shape:
            case Line():
                shape = Line.from_points(points)
            case Rect():
                shape = Rect.from_points(points)
            case Circle():
                shape = Circle.from_points(points)
            case Ellipse():
                shape = Ellipse.from_points(points)
            case Triangle():
                shape = Triangle.from_points(points)
            case Polygon():
                shape = Polygon.from_points(points)
            case _:
                assert_never(self.shape)
        return ShapeBox(shape)

    def points(self) -> list[Coord]:
        return self.shape.points()

    def contains(self, point: CoordLike) -> bool:
        return self.shape.contains(point)

    def center(self) -> Coord:
        return self.shape.center()

    def left(self) -> int:
        return self.shape.left()

    def top(self) -> int:
        return self.shape.top()

    def right(self) -> int:
        return self.shape.right()

    def bottom(self) -> int:
        return self.shape.bottom()

    def translate_by(self, delta: CoordLike) -> ShapeBox:
        return ShapeBox(self.shape.translate_by(delta))

    def move_to(self, point: CoordLike) -> ShapeBox:
        return ShapeBox(self.shape.move_to(point))

    def move_center_to(self, point: CoordLike) -> ShapeBox:
        return ShapeBox(self.shape.move_center_to(point))

    def rotate(self, degrees: float) -> ShapeBox:
        return ShapeBox(self.shape.rotate(degrees))

    def rotate_around(self, degrees: float, pivot: CoordLike) -> ShapeBox:
        return ShapeBox(self.shape.rotate_around(degrees, pivot))

    def scale(self, factor: float) -> ShapeBox:
        return ShapeBox(self.shape.scale(factor))

    def scale_around(self, factor: float, pivot: CoordLike) -> ShapeBox:
        return ShapeBox(self.shape.scale_around(factor, pivot))

    def as_lines(self) -> list[Line]:
        return self.shape.as_lines()

    def outline_pixels(self) -> set[Coord]:
        return self.shape.outline_pixels()

    def filled_pixels(self) -> set[Coord]:
        return self.shape.filled_pixels()

    def intersects_line(self, line: Line) -> bool:
        return self.shape.intersects_line(line)

    def intersects_rect(self, rect: Rect) -> bool:
        return self.shape.intersects_rect(rect)

    def intersects_circle(self, circle: Circle) -> bool:
        return self.shape.intersects_circle(circle)

    def intersects_ellipse(self, ellipse: Ellipse) -> bool:
        return self.shape.intersects_ellipse(ellipse)

    def intersects_triangle(self, triangle: Triangle) -> bool:
        return self.shape.intersects_triangle(triangle)

    def intersects_polygon(self, polygon: Polygon) -> bool:
        return self.shape.intersects_polygon(polygon)

    def contains_line(self, line: Line) -> bool:
        return self.shape.contains_line(line)

    def contains_rect(self, rect: Rect) -> bool:
        return self.shape.contains_rect(rect)

    def contains_circle(self, circle: Circle) -> bool:
        return self.shape.contains_circle(circle)

    def contains_ellipse(self, ellipse: Ellipse) -> bool:
        return self.shape.contains_ellipse(ellipse)

    def contains_triangle(self, triangle: Triangle) -> bool:
        return self.shape.contains_triangle(triangle)

    def contains_polygon(self, polygon: Polygon) -> bool:
        return self.shape.contains_polygon(polygon)

    def intersects_shape(self, other: AbstractShape | ShapeBox) -> bool | None:
        return self.shape.intersects_shape(other)

    def contains_shape(self, other: AbstractShape | ShapeBox) -> bool | None:
        return self.shape.contains_shape(other)

    def to_shape_box(self) -> ShapeBox:
        return self
