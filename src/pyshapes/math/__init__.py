# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""PyShapes' math module"""

from __future__ import annotations

__all__ = [
    "Coord",
    "CoordLike",
    "compute_bounds",
    "do_intersect",
    "flerp",
    "get_vertices_center",
    "inv_flerp",
    "inv_lerp",
    "is_inside_polygon",
    "lerp",
    "on_segment",
    "orientation",
    "rotate_points",
    "scale_points",
]


############ Package initialization ############
from .area import *
from .coord import *
from .interpolation import *
from .intersection import *
