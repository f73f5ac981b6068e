# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Interpolation utils module"""

from __future__ import annotations

__all__ = ["flerp", "inv_flerp", "inv_lerp", "lerp"]


def flerp(start: float, end: float, percent: float) -> float:
    if start == end:
        return start
    return start + (end - start) * percent


def inv_flerp(start: float, end: float, point: float) -> float:
    """
    Inverse of flerp(): the percent of 'point' in between 'start' and 'end'

    Returns 0 when 'start' and 'end' are equal.
    """
    if point == start or start == end:
        return 0.0
    if point == end:
        return 1.0
    return (point - start) / (end - start)


def lerp(start: int, end: int, percent: float) -> int:
    return round(flerp(start, end, percent))


def inv_lerp(start: int, end: int, point: int) -> float:
    return inv_flerp(start, end, point)
