# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape serialization module

Only the canonical fields are written. Derived values are computed again on load.
"""

from __future__ import annotations

__all__ = ["SerializationError", "dump_shape", "dumps", "load_shape", "loads"]

import json
from collections.abc import Mapping
from typing import Any

from typing_extensions import assert_never

from .box import AnyShape, ShapeBox
from .kind import ShapeKind
from .math import Coord
from .shape import Circle, Ellipse, Line, Polygon, Rect, Triangle


class SerializationError(ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


def dump_shape(shape: AnyShape | ShapeBox) -> dict[str, Any]:
    if isinstance(shape, ShapeBox):
        shape = shape.shape
    match shape:
        case Line():
            return {"kind": shape.kind.value, "start": _dump_coord(shape.start()), "end": _dump_coord(shape.end())}
        case Rect():
            return {
                "kind": shape.kind.value,
                "top_left": _dump_coord(shape.top_left()),
                "bottom_right": _dump_coord(shape.bottom_right()),
            }
        case Circle():
            return {"kind": shape.kind.value, "center": _dump_coord(shape.center()), "radius": shape.radius()}
        case Ellipse():
            return {
                "kind": shape.kind.value,
                "center": _dump_coord(shape.center()),
                "top": _dump_coord(shape.top_point()),
                "right": _dump_coord(shape.right_point()),
            }
        case Triangle() | Polygon():
            return {"kind": shape.kind.value, "points": [_dump_coord(p) for p in shape.points()]}
        case _:
            raise SerializationError(f"Cannot serialize {shape!r}")


def load_shape(data: Mapping[str, Any]) -> AnyShape:
    if not isinstance(data, Mapping):
        raise SerializationError(f"Expected a mapping, got {type(data).__name__}")
    try:
        kind = ShapeKind(data["kind"])
    except KeyError:
        raise SerializationError("Missing 'kind' field") from None
    except ValueError:
        raise SerializationError(f"Unknown shape kind: {data['kind']!r}") from None

    try:
        match kind:
            case ShapeKind.LINE:
                return Line(_load_coord(data["start"]), _load_coord(data["end"]))
            case ShapeKind.RECT:
                return Rect(_load_coord(data["top_left"]), _load_coord(data["bottom_right"]))
            case ShapeKind.CIRCLE:
                radius = data["radius"]
                if not isinstance(radius, int) or isinstance(radius, bool) or radius < 0:
                    raise SerializationError(f"Invalid radius: {radius!r}")
                return Circle(_load_coord(data["center"]), radius)
            case ShapeKind.ELLIPSE:
                return Ellipse(_load_coord(data["center"]), _load_coord(data["top"]), _load_coord(data["right"]))
            case ShapeKind.TRIANGLE:
                points = [_load_coord(p) for p in data["points"]]
                if len(points) != 3:
                    raise SerializationError(f"A triangle has 3 points, got {len(points)}")
                return Triangle(*points)
            case ShapeKind.POLYGON:
                points = [_load_coord(p) for p in data["points"]]
                if len(points) < 3:
                    raise SerializationError(f"A polygon has at least 3 points, got {len(points)}")
                return Polygon(points)
            case _:
                assert_never(kind)
    except KeyError as exc:
        raise SerializationError(f"Missing {exc.args[0]!r} field for {kind.value}") from None
    except TypeError as exc:
        raise SerializationError(f"Malformed {kind.value}: {exc}") from exc


def dumps(shape: AnyShape | ShapeBox, **kwargs: Any) -> str:
    return json.dumps(dump_shape(shape), **kwargs)


def loads(s: str | bytes) -> AnyShape:
    try:
        data = json.loads(s)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON document: {exc}") from exc
    return load_shape(data)


def _dump_coord(coord: Coord) -> list[int]:
    return [coord.x, coord.y]


def _load_coord(value: Any) -> Coord:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise SerializationError(f"Invalid coordinate: {value!r}")
    x, y = value
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
        raise SerializationError(f"Invalid coordinate: {value!r}")
    return Coord(x, y)
