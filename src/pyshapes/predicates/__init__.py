# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shape intersection and containment predicates"""

from __future__ import annotations

__all__ = [
    "circle_circle",
    "contains",
    "contains_points",
    "ellipse_circle",
    "intersects",
    "line_circle",
    "line_ellipse",
    "line_line",
]


############ Package initialization ############
from .containment import *
from .intersection import *
