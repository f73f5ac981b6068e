# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""PyShapes' environment configuration module

Settings are read from the process environment once, when the module is imported.
"""

from __future__ import annotations

__all__ = ["ENVIRONMENT_VARIABLES", "Settings", "load_settings", "settings"]

import os
from collections.abc import Callable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Final, NamedTuple

from .system.validation import valid_optional_integer


class Settings(NamedTuple):
    curve_sampling_step: int = 10
    """Degrees between two vertices of a discretized ellipse or circle"""

    ellipse_circle_depth: int = 10
    """Refinement levels used by the ellipse/circle intersection fallback"""


ENVIRONMENT_VARIABLES: Final[MappingProxyType[str, tuple[str, Callable[[Any], int | None]]]] = MappingProxyType(
    {
        "PYSHAPES_CURVE_SAMPLING_STEP": ("curve_sampling_step", valid_optional_integer(min_value=1, max_value=90)),
        "PYSHAPES_ELLIPSE_CIRCLE_DEPTH": ("ellipse_circle_depth", valid_optional_integer(min_value=1, max_value=32)),
    }
)

PYGAME_OVERRIDEN_VARIABLES: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "PYGAME_HIDE_SUPPORT_PROMPT": "1",
    }
)


def load_settings(environ: Mapping[str, str]) -> Settings:
    values: dict[str, int] = {}
    for var, (field, validator) in ENVIRONMENT_VARIABLES.items():
        raw: str | None = environ.get(var)
        if raw is not None and not raw.strip():
            raw = None
        try:
            value = validator(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for {var!r} environment variable: {raw}") from exc
        if value is not None:
            values[field] = value
    return Settings(**values)


def arrange_pygame_environment(environ: MutableMapping[str, str]) -> None:
    for env_var, env_value in PYGAME_OVERRIDEN_VARIABLES.items():
        environ.setdefault(env_var, env_value)


arrange_pygame_environment(os.environ)

settings: Final[Settings] = load_settings(os.environ)
