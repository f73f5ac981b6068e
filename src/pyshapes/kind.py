# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape kind enumeration"""

from __future__ import annotations

__all__ = ["ShapeKind"]

from enum import auto, unique

from .system.enum import AutoLowerNameEnum


@unique
class ShapeKind(AutoLowerNameEnum):
    """The closed set of concrete shapes, in dispatch order"""

    LINE = auto()
    RECT = auto()
    CIRCLE = auto()
    ELLIPSE = auto()
    TRIANGLE = auto()
    POLYGON = auto()

    @property
    def order(self) -> int:
        return _KIND_ORDER[self]


_KIND_ORDER: dict[ShapeKind, int] = {kind: index for index, kind in enumerate(ShapeKind)}
