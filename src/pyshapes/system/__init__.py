# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""PyShapes' system module

Contains helpers shared by the library internals
"""

from __future__ import annotations

__all__ = []  # type: list[str]
