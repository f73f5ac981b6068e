# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Integer 2D shapes for pixel graphics

PyShapes provides a fixed set of immutable shapes (line, rect, circle, ellipse,
triangle and polygon) over integer coordinates, with transforms, point and shape
containment, shape intersection and rasterization into pixel sets.
The float math relies on the popular pygame library (https://github.com/pygame/pygame/).

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.
This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

__all__ = [
    "AbstractShape",
    "AnglePosition",
    "Circle",
    "Coord",
    "Ellipse",
    "FlatSide",
    "Line",
    "LineType",
    "Polygon",
    "Rect",
    "ShapeBox",
    "ShapeKind",
    "Triangle",
    "TriangleAngleType",
    "TriangleSideType",
]

__author__ = "FrankySnow9"
__contact__ = "clairicia.rcj.francis@gmail.com"
__copyright__ = "Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine"
__credits__ = ["FrankySnow9"]
__deprecated__ = False
__email__ = "clairicia.rcj.francis@gmail.com"
__license__ = "GNU GPL v3.0"
__maintainer__ = "FrankySnow9"
__status__ = "Development"
__version__ = "1.0.0.dev1"

import logging
import sys

############ Environment initialization ############
if sys.version_info < (3, 12):
    raise ImportError(
        "This library must be run with python >= 3.12 (actual={}.{}.{})".format(*sys.version_info[0:3]),
        name=__name__,
        path=__file__,
    )

logging.getLogger(__name__).addHandler(logging.NullHandler())

############ Package initialization ############
#### Settings must be loaded before importing pygame
from . import environ as environ

try:
    import pygame
except ModuleNotFoundError as exc:
    raise ModuleNotFoundError(
        "'pygame' package must be installed in order to use PyShapes",
        name=exc.name,
        path=exc.path,
    ) from exc

from .box import ShapeBox
from .math import Coord
from .shape import (
    AbstractShape,
    AnglePosition,
    Circle,
    Ellipse,
    FlatSide,
    Line,
    LineType,
    Polygon,
    Rect,
    ShapeKind,
    Triangle,
    TriangleAngleType,
    TriangleSideType,
)

############ Cleanup ############
del logging, sys, pygame
