# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Rasterization algorithms

Every function returns a deduplicated set of pixels. The result never depends
on the order the points are given in.
"""

from __future__ import annotations

__all__ = [
    "circle_filled",
    "circle_outline",
    "ellipse_filled",
    "ellipse_outline",
    "line_pixels",
    "polygon_filled",
    "polygon_outline",
    "rect_filled",
    "rect_outline",
    "triangle_filled",
]

import math
from collections.abc import Iterator, Sequence

from pygame.math import Vector2

from .math.coord import Coord
from .math.interpolation import flerp, inv_flerp

_EPSILON = 1e-9


def line_pixels(start: Coord, end: Coord) -> set[Coord]:
    """Bresenham's line algorithm, both end points included"""
    start, end = sorted((start, end))
    if start.y == end.y:
        return {Coord(x, start.y) for x in range(start.x, end.x + 1)}
    if start.x == end.x:
        return {Coord(start.x, y) for y in range(start.y, end.y + 1)}

    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    output: set[Coord] = set()
    while True:
        output.add(Coord(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return output


def polygon_outline(points: Sequence[Coord]) -> set[Coord]:
    output: set[Coord] = set()
    for start, end in _edges(points):
        output |= line_pixels(start, end)
    return output


def rect_outline(left: int, top: int, right: int, bottom: int) -> set[Coord]:
    output: set[Coord] = set()
    for x in range(left, right + 1):
        output.add(Coord(x, top))
        output.add(Coord(x, bottom))
    for y in range(top, bottom + 1):
        output.add(Coord(left, y))
        output.add(Coord(right, y))
    return output


def rect_filled(left: int, top: int, right: int, bottom: int) -> set[Coord]:
    return {Coord(x, y) for y in range(top, bottom + 1) for x in range(left, right + 1)}


def circle_outline(center: Coord, radius: int) -> set[Coord]:
    """Midpoint circle algorithm"""
    if radius == 0:
        return {center}

    cx, cy = center
    output: set[Coord] = set()
    x, y = 0, radius
    d = 1 - radius
    while x <= y:
        output.update(
            (
                Coord(cx + x, cy + y),
                Coord(cx + y, cy + x),
                Coord(cx + y, cy - x),
                Coord(cx + x, cy - y),
                Coord(cx - x, cy - y),
                Coord(cx - y, cy - x),
                Coord(cx - y, cy + x),
                Coord(cx - x, cy + y),
            )
        )
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
    return output


def circle_filled(center: Coord, radius: int) -> set[Coord]:
    cx, cy = center
    output: set[Coord] = set()
    for dy in range(-radius, radius + 1):
        half_width = round(math.sqrt(radius * radius - dy * dy))
        output.update(Coord(cx + dx, cy + dy) for dx in range(-half_width, half_width + 1))
    return output


def ellipse_outline(center: Coord, rx: int, ry: int, rotation: float) -> set[Coord]:
    """
    Two-region midpoint ellipse algorithm

    Points are computed in the ellipse's own frame ('rx' along the local x axis)
    then rotated by 'rotation' degrees around 'center'.
    """
    assert rx > 0 and ry > 0, "Degenerate ellipse"

    local: set[tuple[int, int]] = set()
    for x, y in _ellipse_quadrant(rx, ry):
        local.update(((x, y), (-x, y), (x, -y), (-x, -y)))

    return {_from_local(center, x, y, rotation) for x, y in local}


def ellipse_filled(
    center: Coord,
    rx: int,
    ry: int,
    rotation: float,
    bounds: tuple[int, int, int, int],
) -> set[Coord]:
    """Scans the bounding box 'bounds' (left, top, right, bottom) and keeps every pixel inside the ellipse"""
    assert rx > 0 and ry > 0, "Degenerate ellipse"

    left, top, right, bottom = bounds
    rx2 = rx * rx
    ry2 = ry * ry
    output: set[Coord] = set()
    for y in range(top, bottom + 1):
        for x in range(left, right + 1):
            local = Vector2(x - center.x, y - center.y)
            if rotation % 360:
                local.rotate_ip(-rotation)
            if (local.x * local.x) / rx2 + (local.y * local.y) / ry2 <= 1 + _EPSILON:
                output.add(Coord(x, y))
    return output


def polygon_filled(points: Sequence[Coord]) -> set[Coord]:
    """Scanline polygon fill (even-odd rule), with the outline"""
    output = polygon_outline(points)
    if len(points) < 3:
        return output

    top = min(p.y for p in points)
    bottom = max(p.y for p in points)
    for y in range(top, bottom + 1):
        crossings: list[float] = []
        for a, b in _edges(points):
            # Half-open rule: an edge covers [min_y, max_y) so shared vertices are counted once
            if (a.y <= y < b.y) or (b.y <= y < a.y):
                crossings.append(flerp(a.x, b.x, inv_flerp(a.y, b.y, y)))
        crossings.sort()
        for x1, x2 in zip(crossings[::2], crossings[1::2]):
            _fill_span(output, y, x1, x2)
    return output


def triangle_filled(p1: Coord, p2: Coord, p3: Coord) -> set[Coord]:
    """Flat-bottom / flat-top triangle fill, with the outline"""
    top, middle, bottom = sorted((p1, p2, p3), key=lambda p: (p.y, p.x))
    output = polygon_outline((top, middle, bottom))

    if top.y == bottom.y:
        return output
    if middle.y == bottom.y:
        _fill_flat_bottom(output, top, middle, bottom)
    elif top.y == middle.y:
        _fill_flat_top(output, top, middle, bottom)
    else:
        split_x = flerp(top.x, bottom.x, inv_flerp(top.y, bottom.y, middle.y))
        split = (split_x, float(middle.y))
        _fill_flat_bottom(output, top, middle, split)
        _fill_flat_top(output, middle, split, bottom)
    return output


type _FPoint = tuple[float, float]


def _fill_flat_bottom(output: set[Coord], apex: _FPoint, left: _FPoint, right: _FPoint) -> None:
    inv_slope1 = (left[0] - apex[0]) / (left[1] - apex[1])
    inv_slope2 = (right[0] - apex[0]) / (right[1] - apex[1])
    for y in range(int(apex[1]), int(left[1]) + 1):
        _fill_span(output, y, apex[0] + (y - apex[1]) * inv_slope1, apex[0] + (y - apex[1]) * inv_slope2)


def _fill_flat_top(output: set[Coord], left: _FPoint, right: _FPoint, apex: _FPoint) -> None:
    inv_slope1 = (apex[0] - left[0]) / (apex[1] - left[1])
    inv_slope2 = (apex[0] - right[0]) / (apex[1] - right[1])
    for y in range(int(left[1]), int(apex[1]) + 1):
        _fill_span(output, y, left[0] + (y - left[1]) * inv_slope1, right[0] + (y - right[1]) * inv_slope2)


def _fill_span(output: set[Coord], y: int, x1: float, x2: float) -> None:
    if x1 > x2:
        x1, x2 = x2, x1
    output.update(Coord(x, y) for x in range(math.ceil(x1 - _EPSILON), math.floor(x2 + _EPSILON) + 1))


def _edges(points: Sequence[Coord]) -> Iterator[tuple[Coord, Coord]]:
    if len(points) < 2:
        yield from ((p, p) for p in points)
        return
    yield from zip(points, points[1:])
    if len(points) > 2:
        yield points[-1], points[0]


def _ellipse_quadrant(rx: int, ry: int) -> list[tuple[int, int]]:
    rx2 = rx * rx
    ry2 = ry * ry
    x, y = 0, ry
    dx = 0
    dy = 2 * rx2 * y
    points: list[tuple[int, int]] = []

    # Region 1: slope < 1
    d1 = ry2 - rx2 * ry + 0.25 * rx2
    while dx < dy:
        points.append((x, y))
        x += 1
        dx += 2 * ry2
        if d1 < 0:
            d1 += dx + ry2
        else:
            y -= 1
            dy -= 2 * rx2
            d1 += dx - dy + ry2

    # Region 2: slope >= 1
    d2 = ry2 * (x + 0.5) ** 2 + rx2 * (y - 1) ** 2 - rx2 * ry2
    while y >= 0:
        points.append((x, y))
        y -= 1
        dy -= 2 * rx2
        if d2 > 0:
            d2 += rx2 - dy
        else:
            x += 1
            dx += 2 * ry2
            d2 += dx - dy + rx2

    return points


def _from_local(center: Coord, x: int, y: int, rotation: float) -> Coord:
    if rotation % 360 == 0:
        return Coord(center.x + x, center.y + y)
    # Rounded before the translation to the center
    return center + Coord.from_vector(Vector2(x, y).rotate(rotation))
