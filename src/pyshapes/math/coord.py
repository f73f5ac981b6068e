# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Coord module"""

from __future__ import annotations

__all__ = ["Coord", "CoordLike"]

from collections.abc import Sequence
from typing import NamedTuple, SupportsFloat, SupportsIndex

from pygame.math import Vector2

from .interpolation import inv_lerp, lerp

type CoordLike = Coord | tuple[int, int] | Sequence[SupportsFloat] | Vector2


def _to_int(value: SupportsFloat | SupportsIndex) -> int:
    if isinstance(value, int):
        return value
    return round(float(value))  # type: ignore[arg-type]


class Coord(NamedTuple):
    """
    Immutable integer 2D coordinate

    Angles are in degrees, 0 points up (negative y) and they grow clockwise
    (with the y axis growing downwards, like a screen).
    """

    x: int
    y: int

    @staticmethod
    def convert(value: CoordLike) -> Coord:
        if type(value) is Coord:
            return value
        x, y = value
        return Coord(_to_int(x), _to_int(y))

    @staticmethod
    def from_vector(vector: Vector2) -> Coord:
        return Coord(round(vector.x), round(vector.y))

    @staticmethod
    def from_angle(center: CoordLike, distance: int, degrees: float) -> Coord:
        center = Coord.convert(center)
        offset = Vector2(0, -distance).rotate(degrees)
        return Coord(center.x + round(offset.x), center.y + round(offset.y))

    def __add__(self, rhs: CoordLike | int) -> Coord:  # type: ignore[override]
        if isinstance(rhs, int):
            return Coord(self.x + rhs, self.y + rhs)
        rhs = Coord.convert(rhs)
        return Coord(self.x + rhs.x, self.y + rhs.y)

    __radd__ = __add__

    def __sub__(self, rhs: CoordLike | int) -> Coord:
        if isinstance(rhs, int):
            return Coord(self.x - rhs, self.y - rhs)
        rhs = Coord.convert(rhs)
        return Coord(self.x - rhs.x, self.y - rhs.y)

    def __rsub__(self, lhs: CoordLike | int) -> Coord:
        return -self + lhs

    def __mul__(self, rhs: CoordLike | float) -> Coord:  # type: ignore[override]
        if isinstance(rhs, int):
            return Coord(self.x * rhs, self.y * rhs)
        if isinstance(rhs, float):
            return Coord(round(self.x * rhs), round(self.y * rhs))
        rhs = Coord.convert(rhs)
        return Coord(self.x * rhs.x, self.y * rhs.y)

    __rmul__ = __mul__

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y)

    def __abs__(self) -> Coord:
        return Coord(abs(self.x), abs(self.y))

    def add(self, rhs: CoordLike | int) -> Coord:
        return self + rhs

    def subtract(self, rhs: CoordLike | int) -> Coord:
        return self - rhs

    def scale(self, factor: float) -> Coord:
        return self * float(factor)

    def distance(self, rhs: CoordLike) -> int:
        """Distance between self and rhs, rounded to the nearest integer"""
        return round(Vector2(self).distance_to(Coord.convert(rhs)))

    def mid_point(self, rhs: CoordLike) -> Coord:
        """Point midway in between self and rhs (use lerp() for other positions)"""
        rhs = Coord.convert(rhs)
        return Coord((self.x + rhs.x) // 2, (self.y + rhs.y) // 2)

    def angle_to(self, rhs: CoordLike) -> int:
        """Angle in degrees from self to rhs, in range [0, 360)"""
        rhs = Coord.convert(rhs)
        if rhs == self:
            return 0
        _, phi = Vector2(rhs.x - self.x, rhs.y - self.y).as_polar()
        return (round(phi) + 90) % 360

    def cross_product(self, rhs: CoordLike) -> int:
        rhs = Coord.convert(rhs)
        return self.x * rhs.y - self.y * rhs.x

    def dot_product(self, rhs: CoordLike) -> int:
        rhs = Coord.convert(rhs)
        return self.x * rhs.x + self.y * rhs.y

    def perpendicular(self) -> Coord:
        return Coord(self.y, -self.x)

    def is_collinear(self, a: CoordLike, b: CoordLike) -> bool:
        return (Coord.convert(a) - self).cross_product(Coord.convert(b) - self) == 0

    def is_between(self, start: CoordLike, end: CoordLike) -> bool:
        """Returns true if self lies on the segment from start to end (both included)"""
        start = Coord.convert(start)
        end = Coord.convert(end)
        return (
            start.is_collinear(end, self)
            and min(start.x, end.x) <= self.x <= max(start.x, end.x)
            and min(start.y, end.y) <= self.y <= max(start.y, end.y)
        )

    def lerp(self, end: CoordLike, percent: float) -> Coord:
        end = Coord.convert(end)
        return Coord(lerp(self.x, end.x, percent), lerp(self.y, end.y, percent))

    def inv_lerp(self, end: CoordLike, point: CoordLike) -> float:
        end = Coord.convert(end)
        point = Coord.convert(point)
        return (inv_lerp(self.x, end.x, point.x) + inv_lerp(self.y, end.y, point.y)) / 2
