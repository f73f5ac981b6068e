# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape module"""

from __future__ import annotations

__all__ = [
    "AbstractShape",
    "AnglePosition",
    "Circle",
    "Ellipse",
    "FlatSide",
    "Line",
    "LineType",
    "Polygon",
    "Rect",
    "ShapeKind",
    "Triangle",
    "TriangleAngleType",
    "TriangleSideType",
]

import logging
import math
from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Sequence
from enum import auto, unique
from typing import TYPE_CHECKING, Any, ClassVar

import pygame
from pygame.math import Vector2
from typing_extensions import Self, assert_never, final

from . import environ, raster
from .kind import ShapeKind
from .math import Coord, CoordLike, compute_bounds, get_vertices_center, is_inside_polygon, rotate_points, scale_points
from .predicates import containment as _containment, intersection as _intersection
from .system.enum import AutoLowerNameEnum

if TYPE_CHECKING:
    from .box import ShapeBox

logger = logging.getLogger(__name__)

_EPSILON = 1e-9


@unique
class LineType(AutoLowerNameEnum):
    POINT = auto()
    HORIZONTAL = auto()
    VERTICAL = auto()
    ANGLED = auto()


@unique
class TriangleAngleType(AutoLowerNameEnum):
    ACUTE = auto()
    RIGHT = auto()
    OBTUSE = auto()
    EQUIANGULAR = auto()
    OTHER = auto()


@unique
class TriangleSideType(AutoLowerNameEnum):
    EQUILATERAL = auto()
    ISOSCELES = auto()
    SCALENE = auto()


@unique
class AnglePosition(AutoLowerNameEnum):
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()
    LEFT = auto()


@unique
class FlatSide(AutoLowerNameEnum):
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


class AbstractShape(metaclass=ABCMeta):
    """
    Immutable shape over integer coordinates

    A shape is entirely defined by its canonical points: from_points(shape.points()) == shape.
    Every transform returns a new shape.
    """

    __slots__ = ()

    kind: ClassVar[ShapeKind]

    @classmethod
    @abstractmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Self:
        raise NotImplementedError

    @abstractmethod
    def points(self) -> list[Coord]:
        raise NotImplementedError

    @abstractmethod
    def contains(self, point: CoordLike) -> bool:
        raise NotImplementedError

    @abstractmethod
    def as_lines(self) -> list[Line]:
        """Segments of the shape's boundary"""
        raise NotImplementedError

    @abstractmethod
    def outline_pixels(self) -> set[Coord]:
        raise NotImplementedError

    @abstractmethod
    def filled_pixels(self) -> set[Coord]:
        raise NotImplementedError

    def __eq__(self, other: object, /) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, AbstractShape)
        return self.points() == other.points()

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.points())))

    def center(self) -> Coord:
        return get_vertices_center(self.points())

    def left(self) -> int:
        return compute_bounds(self.points())[0]

    def top(self) -> int:
        return compute_bounds(self.points())[1]

    def right(self) -> int:
        return compute_bounds(self.points())[2]

    def bottom(self) -> int:
        return compute_bounds(self.points())[3]

    def translate_by(self, delta: CoordLike) -> Self:
        delta = Coord.convert(delta)
        return self.from_points([point + delta for point in self.points()])

    def move_to(self, point: CoordLike) -> Self:
        """Moves the shape so that its first canonical point is on 'point'"""
        return self.translate_by(Coord.convert(point) - self.points()[0])

    def move_center_to(self, point: CoordLike) -> Self:
        return self.translate_by(Coord.convert(point) - self.center())

    def rotate(self, degrees: float) -> Self:
        return self.rotate_around(degrees, self.center())

    def rotate_around(self, degrees: float, pivot: CoordLike) -> Self:
        return self.from_points(rotate_points(self.points(), degrees, pivot))

    def scale(self, factor: float) -> Self:
        return self.scale_around(factor, self.center())

    def scale_around(self, factor: float, pivot: CoordLike) -> Self:
        return self.from_points(scale_points(self.points(), factor, pivot))

    def intersects_line(self, line: Line) -> bool:
        return _intersection.intersects(self, line)

    def intersects_rect(self, rect: Rect) -> bool:
        return _intersection.intersects(self, rect)

    def intersects_circle(self, circle: Circle) -> bool:
        return _intersection.intersects(self, circle)

    def intersects_ellipse(self, ellipse: Ellipse) -> bool:
        return _intersection.intersects(self, ellipse)

    def intersects_triangle(self, triangle: Triangle) -> bool:
        return _intersection.intersects(self, triangle)

    def intersects_polygon(self, polygon: Polygon) -> bool:
        return _intersection.intersects(self, polygon)

    def contains_line(self, line: Line) -> bool:
        return _containment.contains(self, line)

    def contains_rect(self, rect: Rect) -> bool:
        return _containment.contains(self, rect)

    def contains_circle(self, circle: Circle) -> bool:
        return _containment.contains(self, circle)

    def contains_ellipse(self, ellipse: Ellipse) -> bool:
        return _containment.contains(self, ellipse)

    def contains_triangle(self, triangle: Triangle) -> bool:
        return _containment.contains(self, triangle)

    def contains_polygon(self, polygon: Polygon) -> bool:
        return _containment.contains(self, polygon)

    def intersects_shape(self, other: AbstractShape | ShapeBox) -> bool | None:
        """
        Runtime-typed version of the intersects_*() methods

        Returns None if the kind of 'other' is not supported.
        """
        from .box import ShapeBox

        match other:
            case ShapeBox(shape=shape):
                return self.intersects_shape(shape)
            case Line():
                return self.intersects_line(other)
            case Rect():
                return self.intersects_rect(other)
            case Circle():
                return self.intersects_circle(other)
            case Ellipse():
                return self.intersects_ellipse(other)
            case Triangle():
                return self.intersects_triangle(other)
            case Polygon():
                return self.intersects_polygon(other)
            case _:
                logger.debug("Unsupported shape for intersection with %s: %r", type(self).__name__, other)
                return None

    def contains_shape(self, other: AbstractShape | ShapeBox) -> bool | None:
        """
        Runtime-typed version of the contains_*() methods

        Returns None if the kind of 'other' is not supported.
        """
        from .box import ShapeBox

        match other:
            case ShapeBox(shape=shape):
                return self.contains_shape(shape)
            case Line():
                return self.contains_line(other)
            case Rect():
                return self.contains_rect(other)
            case Circle():
                return self.contains_circle(other)
            case Ellipse():
                return self.contains_ellipse(other)
            case Triangle():
                return self.contains_triangle(other)
            case Polygon():
                return self.contains_polygon(other)
            case _:
                logger.debug("Unsupported shape for containment in %s: %r", type(self).__name__, other)
                return None

    def to_shape_box(self) -> ShapeBox:
        from .box import ShapeBox

        return ShapeBox(self)  # type: ignore[arg-type]


@final
class Line(AbstractShape):
    __slots__ = ("__start", "__end")

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    def __init__(self, start: CoordLike, end: CoordLike) -> None:
        self.__start: Coord = Coord.convert(start)
        self.__end: Coord = Coord.convert(end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self.__start!r}, end={self.__end!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Line, (self.__start, self.__end))

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Line:
        """Expects [start, end]"""
        assert len(points) >= 2, f"Line needs 2 points, got {len(points)}"
        return cls(points[0], points[1])

    def start(self) -> Coord:
        return self.__start

    def end(self) -> Coord:
        return self.__end

    def points(self) -> list[Coord]:
        return [self.__start, self.__end]

    def length(self) -> int:
        return self.__start.distance(self.__end)

    def angle(self) -> int:
        return self.__start.angle_to(self.__end)

    def line_type(self) -> LineType:
        start, end = self.__start, self.__end
        if start == end:
            return LineType.POINT
        if start.y == end.y:
            return LineType.HORIZONTAL
        if start.x == end.x:
            return LineType.VERTICAL
        return LineType.ANGLED

    def contains(self, point: CoordLike) -> bool:
        return Coord.convert(point).is_between(self.__start, self.__end)

    def center(self) -> Coord:
        return self.__start.mid_point(self.__end)

    def left(self) -> int:
        return min(self.__start.x, self.__end.x)

    def top(self) -> int:
        return min(self.__start.y, self.__end.y)

    def right(self) -> int:
        return max(self.__start.x, self.__end.x)

    def bottom(self) -> int:
        return max(self.__start.y, self.__end.y)

    def as_rect(self) -> Rect:
        return Rect(self.__start, self.__end)

    def as_circle(self) -> Circle:
        """Circle centered on start, with the line as radius"""
        return Circle(self.__start, self.length())

    def as_lines(self) -> list[Line]:
        return [self]

    def outline_pixels(self) -> set[Coord]:
        return raster.line_pixels(self.__start, self.__end)

    def filled_pixels(self) -> set[Coord]:
        return raster.line_pixels(self.__start, self.__end)


@final
class Rect(AbstractShape):
    """
    Axis-aligned rectangle

    Point containment follows pygame.Rect: the right and bottom edges are excluded.
    """

    __slots__ = ("__top_left", "__bottom_right")

    kind: ClassVar[ShapeKind] = ShapeKind.RECT

    def __init__(self, top_left: CoordLike, bottom_right: CoordLike) -> None:
        a = Coord.convert(top_left)
        b = Coord.convert(bottom_right)
        self.__top_left: Coord = Coord(min(a.x, b.x), min(a.y, b.y))
        self.__bottom_right: Coord = Coord(max(a.x, b.x), max(a.y, b.y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_left={self.__top_left!r}, bottom_right={self.__bottom_right!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Rect, (self.__top_left, self.__bottom_right))

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Rect:
        """Expects [top_left, bottom_right]"""
        assert len(points) >= 2, f"Rect needs 2 points, got {len(points)}"
        return cls(points[0], points[1])

    @classmethod
    def from_size(cls, top_left: CoordLike, width: int, height: int) -> Rect:
        assert width >= 0 and height >= 0, "Negative size"
        top_left = Coord.convert(top_left)
        return cls(top_left, (top_left.x + width, top_left.y + height))

    @classmethod
    def from_pygame_rect(cls, rect: pygame.Rect) -> Rect:
        return cls(rect.topleft, rect.bottomright)

    def to_pygame_rect(self) -> pygame.Rect:
        return pygame.Rect(self.__top_left, (self.width(), self.height()))

    def top_left(self) -> Coord:
        return self.__top_left

    def bottom_right(self) -> Coord:
        return self.__bottom_right

    def corners(self) -> list[Coord]:
        """Clockwise, starting from top left"""
        tl, br = self.__top_left, self.__bottom_right
        return [tl, Coord(br.x, tl.y), br, Coord(tl.x, br.y)]

    def points(self) -> list[Coord]:
        return [self.__top_left, self.__bottom_right]

    def width(self) -> int:
        return self.__bottom_right.x - self.__top_left.x

    def height(self) -> int:
        return self.__bottom_right.y - self.__top_left.y

    def is_square(self) -> bool:
        return self.width() == self.height()

    def contains(self, point: CoordLike) -> bool:
        x, y = Coord.convert(point)
        return self.__top_left.x <= x < self.__bottom_right.x and self.__top_left.y <= y < self.__bottom_right.y

    def center(self) -> Coord:
        return self.__top_left.mid_point(self.__bottom_right)

    def left(self) -> int:
        return self.__top_left.x

    def top(self) -> int:
        return self.__top_left.y

    def right(self) -> int:
        return self.__bottom_right.x

    def bottom(self) -> int:
        return self.__bottom_right.y

    def rotate_around(self, degrees: float, pivot: CoordLike) -> Rect:
        # Only quarter turns keep a rect axis-aligned
        return Rect.from_points(rotate_points(self.points(), _snap_to_quarter_turn(degrees), pivot))

    def as_smallest_circle(self) -> Circle:
        return Circle(self.center(), min(self.width(), self.height()) // 2)

    def as_biggest_circle(self) -> Circle:
        return Circle(self.center(), max(self.width(), self.height()) // 2)

    def as_ellipse(self) -> Ellipse:
        return Ellipse.from_size(self.center(), self.width(), self.height())

    def as_triangles(self) -> tuple[Triangle, Triangle]:
        top_left, top_right, bottom_right, bottom_left = self.corners()
        return (Triangle(top_left, top_right, bottom_left), Triangle(top_right, bottom_right, bottom_left))

    def as_polygon(self) -> Polygon:
        return Polygon(self.corners())

    def as_lines(self) -> list[Line]:
        return _closed_path(self.corners())

    def outline_pixels(self) -> set[Coord]:
        return raster.rect_outline(self.left(), self.top(), self.right(), self.bottom())

    def filled_pixels(self) -> set[Coord]:
        return raster.rect_filled(self.left(), self.top(), self.right(), self.bottom())


@final
class Circle(AbstractShape):
    __slots__ = ("__center", "__radius")

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    def __init__(self, center: CoordLike, radius: int) -> None:
        assert radius >= 0, f"Negative radius: {radius}"
        self.__center: Coord = Coord.convert(center)
        self.__radius: int = int(radius)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self.__center!r}, radius={self.__radius!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Circle, (self.__center, self.__radius))

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Circle:
        """Expects [center, a point on the edge]"""
        assert len(points) >= 2, f"Circle needs 2 points, got {len(points)}"
        center = Coord.convert(points[0])
        return cls(center, center.distance(points[1]))

    def points(self) -> list[Coord]:
        return [self.__center, Coord.from_angle(self.__center, self.__radius, 0)]

    def radius(self) -> int:
        return self.__radius

    def center(self) -> Coord:
        return self.__center

    def contains(self, point: CoordLike) -> bool:
        dx, dy = Coord.convert(point) - self.__center
        return dx * dx + dy * dy <= self.__radius * self.__radius

    def left(self) -> int:
        return self.__center.x - self.__radius

    def top(self) -> int:
        return self.__center.y - self.__radius

    def right(self) -> int:
        return self.__center.x + self.__radius

    def bottom(self) -> int:
        return self.__center.y + self.__radius

    def translate_by(self, delta: CoordLike) -> Circle:
        return Circle(self.__center + delta, self.__radius)

    def rotate_around(self, degrees: float, pivot: CoordLike) -> Circle:
        return Circle(rotate_points([self.__center], degrees, pivot)[0], self.__radius)

    def scale_around(self, factor: float, pivot: CoordLike) -> Circle:
        return Circle(scale_points([self.__center], factor, pivot)[0], round(self.__radius * factor))

    def as_outer_rect(self) -> Rect:
        return Rect(self.__center - self.__radius, self.__center + self.__radius)

    def as_inner_rect(self) -> Rect:
        half_side = math.floor(self.__radius / math.sqrt(2))
        return Rect(self.__center - half_side, self.__center + half_side)

    def as_ellipse(self) -> Ellipse:
        return Ellipse.from_size(self.__center, self.__radius * 2, self.__radius * 2)

    def as_radius_line(self) -> Line:
        return Line(self.__center, Coord.from_angle(self.__center, self.__radius, 0))

    def as_horizontal_line(self) -> Line:
        cx, cy = self.__center
        return Line((cx - self.__radius, cy), (cx + self.__radius, cy))

    def as_vertical_line(self) -> Line:
        cx, cy = self.__center
        return Line((cx, cy - self.__radius), (cx, cy + self.__radius))

    def as_polygon(self) -> Polygon:
        step = environ.settings.curve_sampling_step
        return Polygon(Coord.from_angle(self.__center, self.__radius, degrees) for degrees in range(0, 360, step))

    def as_lines(self) -> list[Line]:
        return self.as_polygon().as_lines()

    def outline_pixels(self) -> set[Coord]:
        return raster.circle_outline(self.__center, self.__radius)

    def filled_pixels(self) -> set[Coord]:
        return raster.circle_filled(self.__center, self.__radius)


@final
class Ellipse(AbstractShape):
    """
    Ellipse, possibly rotated

    'top' is the end of the vertical semi-axis and 'right' the end of the horizontal one,
    both rotated by the ellipse's rotation around its center.
    """

    __slots__ = ("__center", "__top", "__right")

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    def __init__(self, center: CoordLike, top: CoordLike, right: CoordLike) -> None:
        self.__center: Coord = Coord.convert(center)
        self.__top: Coord = Coord.convert(top)
        self.__right: Coord = Coord.convert(right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self.__center!r}, top={self.__top!r}, right={self.__right!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Ellipse, (self.__center, self.__top, self.__right))

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Ellipse:
        """Expects [center, top, right]"""
        assert len(points) >= 3, f"Ellipse needs 3 points, got {len(points)}"
        return cls(points[0], points[1], points[2])

    @classmethod
    def from_size(cls, center: CoordLike, width: int, height: int) -> Ellipse:
        assert width >= 0 and height >= 0, "Negative size"
        cx, cy = center = Coord.convert(center)
        return cls(center, (cx, cy - height // 2), (cx + width // 2, cy))

    def points(self) -> list[Coord]:
        return [self.__center, self.__top, self.__right]

    def center(self) -> Coord:
        return self.__center

    def top_point(self) -> Coord:
        return self.__top

    def right_point(self) -> Coord:
        return self.__right

    def radii(self) -> tuple[int, int]:
        """(horizontal semi-axis, vertical semi-axis), before rotation"""
        return self.__center.distance(self.__right), self.__center.distance(self.__top)

    def width(self) -> int:
        """Width of the axis-aligned bounds, it follows the rotation (see radii() for the axes)"""
        return self.right() - self.left()

    def height(self) -> int:
        return self.bottom() - self.top()

    def rotation(self) -> int:
        center = self.__center
        if self.__top != center:
            return center.angle_to(self.__top)
        if self.__right != center:
            return (center.angle_to(self.__right) - 90) % 360
        return 0

    def is_flat(self) -> bool:
        return 0 in self.radii()

    def as_flat_line(self) -> Line:
        """The segment a flat ellipse collapses to"""
        assert self.is_flat(), "Not a flat ellipse"
        tip = self.__right if self.__center.distance(self.__top) == 0 else self.__top
        return Line(self.__center * 2 - tip, tip)

    def boundary_point(self, degrees: float) -> Vector2:
        """Exact point of the ellipse's edge at the parametric angle 'degrees' (0 is 'right')"""
        return Vector2(self.__center) + self.__boundary_offset(degrees)

    def __boundary_offset(self, degrees: float) -> Vector2:
        rx, ry = self.radii()
        theta = math.radians(degrees)
        return Vector2(rx * math.cos(theta), ry * math.sin(theta)).rotate(self.rotation())

    def to_local(self, point: CoordLike) -> Vector2:
        """'point' in the ellipse's own frame (centered, axis-aligned)"""
        local = Vector2(Coord.convert(point) - self.__center)
        rotation = self.rotation()
        if rotation:
            local.rotate_ip(-rotation)
        return local

    def contains(self, point: CoordLike) -> bool:
        if self.is_flat():
            return self.as_flat_line().contains(point)
        rx, ry = self.radii()
        local = self.to_local(point)
        return (local.x * local.x) / (rx * rx) + (local.y * local.y) / (ry * ry) <= 1 + _EPSILON

    def __half_extents(self) -> tuple[int, int]:
        rx, ry = self.radii()
        theta = math.radians(self.rotation())
        cos, sin = math.cos(theta), math.sin(theta)
        return round(math.hypot(rx * cos, ry * sin)), round(math.hypot(rx * sin, ry * cos))

    def left(self) -> int:
        return self.__center.x - self.__half_extents()[0]

    def top(self) -> int:
        return self.__center.y - self.__half_extents()[1]

    def right(self) -> int:
        return self.__center.x + self.__half_extents()[0]

    def bottom(self) -> int:
        return self.__center.y + self.__half_extents()[1]

    def as_rect(self) -> Rect:
        hx, hy = self.__half_extents()
        return Rect(self.__center - (hx, hy), self.__center + (hx, hy))

    def as_horizontal_line(self) -> Line:
        cy = self.__center.y
        return Line((self.left(), cy), (self.right(), cy))

    def as_vertical_line(self) -> Line:
        cx = self.__center.x
        return Line((cx, self.top()), (cx, self.bottom()))

    def as_radius_line(self) -> Line:
        return Line(self.__center, self.__top)

    def as_circle(self) -> Circle | None:
        rx, ry = self.radii()
        if rx != ry:
            return None
        return Circle(self.__center, rx)

    def as_polygon(self) -> Polygon:
        step = environ.settings.curve_sampling_step
        center = self.__center
        return Polygon(center + Coord.from_vector(self.__boundary_offset(degrees)) for degrees in range(0, 360, step))

    def as_lines(self) -> list[Line]:
        if self.is_flat():
            return [self.as_flat_line()]
        return self.as_polygon().as_lines()

    def outline_pixels(self) -> set[Coord]:
        if self.is_flat():
            return self.as_flat_line().outline_pixels()
        rx, ry = self.radii()
        return raster.ellipse_outline(self.__center, rx, ry, self.rotation())

    def filled_pixels(self) -> set[Coord]:
        if self.is_flat():
            return self.as_flat_line().outline_pixels()
        rx, ry = self.radii()
        bounds = (self.left(), self.top(), self.right(), self.bottom())
        return raster.ellipse_filled(self.__center, rx, ry, self.rotation(), bounds)


@final
class Triangle(AbstractShape):
    __slots__ = ("__points", "__angles", "__angle_type", "__side_type")

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    def __init__(self, point1: CoordLike, point2: CoordLike, point3: CoordLike) -> None:
        points = (Coord.convert(point1), Coord.convert(point2), Coord.convert(point3))
        self.__points: tuple[Coord, Coord, Coord] = points
        self.__angles: tuple[int, int, int] = (
            _interior_angle(points[2], points[0], points[1]),
            _interior_angle(points[0], points[1], points[2]),
            _interior_angle(points[1], points[2], points[0]),
        )
        self.__angle_type: TriangleAngleType = _classify_angles(points, self.__angles)
        self.__side_type: TriangleSideType = _classify_sides(points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.__points!r}"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Triangle, self.__points)

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Triangle:
        assert len(points) >= 3, f"Triangle needs 3 points, got {len(points)}"
        return cls(points[0], points[1], points[2])

    @classmethod
    def right_angle(cls, angle_coord: CoordLike, size: int, angle_position: AnglePosition) -> Triangle:
        """Right angle triangle with the right angle on 'angle_coord'"""
        point = Coord.convert(angle_coord)
        x, y = point
        half = size // 2
        match angle_position:
            case AnglePosition.TOP_LEFT:
                return cls(point, (x + size, y), (x, y + size))
            case AnglePosition.TOP_RIGHT:
                return cls(point, (x - size, y), (x, y + size))
            case AnglePosition.BOTTOM_LEFT:
                return cls(point, (x + size, y), (x, y - size))
            case AnglePosition.BOTTOM_RIGHT:
                return cls(point, (x - size, y), (x, y - size))
            case AnglePosition.TOP:
                return cls(point, (x - half, y + half), (x + half, y + half))
            case AnglePosition.RIGHT:
                return cls(point, (x - half, y - half), (x - half, y + half))
            case AnglePosition.BOTTOM:
                return cls(point, (x - half, y - half), (x + half, y - half))
            case AnglePosition.LEFT:
                return cls(point, (x + half, y - half), (x + half, y + half))
            case _:
                assert_never(angle_position)

    @classmethod
    def equilateral(cls, center: CoordLike, size: int, flat_side: FlatSide) -> Triangle:
        """Triangle with width and height of 'size' around 'center'"""
        cx, cy = Coord.convert(center)
        dist = size // 2
        left, right, top, bottom = cx - dist, cx + dist, cy - dist, cy + dist
        match flat_side:
            case FlatSide.TOP:
                return cls((left, top), (right, top), (cx, bottom))
            case FlatSide.BOTTOM:
                return cls((left, bottom), (right, bottom), (cx, top))
            case FlatSide.LEFT:
                return cls((left, top), (left, bottom), (right, cy))
            case FlatSide.RIGHT:
                return cls((right, top), (right, bottom), (left, cy))
            case _:
                assert_never(flat_side)

    def points(self) -> list[Coord]:
        return list(self.__points)

    def angles(self) -> tuple[int, int, int]:
        """Interior angles in degrees, in the order of points()"""
        return self.__angles

    def angle_type(self) -> TriangleAngleType:
        return self.__angle_type

    def side_type(self) -> TriangleSideType:
        return self.__side_type

    def contains(self, point: CoordLike) -> bool:
        p = Coord.convert(point)
        a, b, c = self.__points
        d1 = (b - a).cross_product(p - a)
        d2 = (c - b).cross_product(p - b)
        d3 = (a - c).cross_product(p - c)
        if (b - a).cross_product(c - a) == 0:
            return any(line.contains(p) for line in self.as_lines())
        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive)

    def as_rect(self) -> Rect:
        left, top, right, bottom = compute_bounds(self.__points)
        return Rect((left, top), (right, bottom))

    def as_polygon(self) -> Polygon:
        return Polygon(self.__points)

    def as_lines(self) -> list[Line]:
        return _closed_path(self.__points)

    def outline_pixels(self) -> set[Coord]:
        return raster.polygon_outline(self.__points)

    def filled_pixels(self) -> set[Coord]:
        return raster.triangle_filled(*self.__points)


@final
class Polygon(AbstractShape):
    """
    Closed polygon: the last point is implicitly linked to the first one

    Convexity and regularity are computed once, at construction.
    """

    __slots__ = ("__points", "__center", "__is_convex", "__is_regular")

    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON

    def __init__(self, points: Iterable[CoordLike]) -> None:
        points = tuple(map(Coord.convert, points))
        assert len(points) >= 3, f"Polygon needs at least 3 points, got {len(points)}"
        self.__points: tuple[Coord, ...] = points
        self.__center: Coord = get_vertices_center(points)
        self.__is_convex: bool = _is_convex(points)
        self.__is_regular: bool = len({self.__center.distance(point) for point in points}) == 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.__points)!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Polygon, (self.__points,))

    @classmethod
    def from_points(cls, points: Sequence[CoordLike]) -> Polygon:
        return cls(points)

    def points(self) -> list[Coord]:
        return list(self.__points)

    def center(self) -> Coord:
        return self.__center

    def is_convex(self) -> bool:
        return self.__is_convex

    def is_regular(self) -> bool:
        """True if every point is at the same distance from the center"""
        return self.__is_regular

    def contains(self, point: CoordLike) -> bool:
        return is_inside_polygon(self.__points, point)

    def point_closest_to_center(self) -> Coord:
        return sorted(self.__points, key=self.__center.distance)[0]

    def point_farthest_from_center(self) -> Coord:
        return sorted(self.__points, key=self.__center.distance)[-1]

    def as_inner_circle(self) -> Circle:
        return Circle(self.__center, self.__center.distance(self.point_closest_to_center()))

    def as_outer_circle(self) -> Circle:
        return Circle(self.__center, self.__center.distance(self.point_farthest_from_center()))

    def as_avg_circle(self) -> Circle:
        distances = [self.__center.distance(point) for point in self.__points]
        return Circle(self.__center, sum(distances) // len(distances))

    def as_circle(self) -> Circle | None:
        """Circle passing through every point, only for regular polygons"""
        if not self.__is_regular:
            return None
        return self.as_inner_circle()

    def as_rect(self) -> Rect:
        left, top, right, bottom = compute_bounds(self.__points)
        return Rect((left, top), (right, bottom))

    def as_triangles(self) -> list[Triangle] | None:
        """Fan of triangles around the center, only for convex polygons"""
        if not self.__is_convex:
            return None
        return [Triangle(line.start(), line.end(), self.__center) for line in self.as_lines()]

    def as_lines(self) -> list[Line]:
        return _closed_path(self.__points)

    def outline_pixels(self) -> set[Coord]:
        return raster.polygon_outline(self.__points)

    def filled_pixels(self) -> set[Coord]:
        return raster.polygon_filled(self.__points)


def _closed_path(points: Sequence[Coord]) -> list[Line]:
    return [Line(points[i - 1], points[i]) for i in range(1, len(points))] + [Line(points[-1], points[0])]


def _snap_to_quarter_turn(degrees: float) -> int:
    quarter_turns = math.floor(abs(degrees) / 90 + 0.5)
    return int(math.copysign(quarter_turns * 90, degrees))


def _interior_angle(previous: Coord, vertex: Coord, following: Coord) -> int:
    u = previous - vertex
    v = following - vertex
    if u == (0, 0) or v == (0, 0):
        return 0
    return round(math.degrees(math.atan2(abs(u.cross_product(v)), u.dot_product(v))))


def _classify_angles(points: Sequence[Coord], angles: tuple[int, int, int]) -> TriangleAngleType:
    a, b, c = points
    if (b - a).cross_product(c - a) == 0:
        return TriangleAngleType.OTHER
    if 90 in angles:
        return TriangleAngleType.RIGHT
    if angles[0] == angles[1] == angles[2]:
        return TriangleAngleType.EQUIANGULAR
    if any(angle > 90 for angle in angles):
        return TriangleAngleType.OBTUSE
    return TriangleAngleType.ACUTE


def _classify_sides(points: Sequence[Coord]) -> TriangleSideType:
    a, b, c = points
    sides = {a.distance(b), b.distance(c), c.distance(a)}
    match len(sides):
        case 1:
            return TriangleSideType.EQUILATERAL
        case 2:
            return TriangleSideType.ISOSCELES
        case _:
            return TriangleSideType.SCALENE


def _is_convex(points: Sequence[Coord]) -> bool:
    n = len(points)
    sign: bool | None = None
    for i in range(n):
        a, b, c = points[i], points[(i + 1) % n], points[(i + 2) % n]
        cross = (b - a).cross_product(c - b)
        if cross == 0:
            continue
        if sign is None:
            sign = cross > 0
        elif sign != (cross > 0):
            return False
    return True
