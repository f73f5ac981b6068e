# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Generic validator functions module"""

from __future__ import annotations

__all__ = ["valid_optional_integer"]

from collections.abc import Callable
from functools import cache
from typing import Any, overload

_MISSING: Any = object()


@overload
def valid_optional_integer(*, min_value: int) -> Callable[[Any], int | None]: ...


@overload
def valid_optional_integer(*, max_value: int) -> Callable[[Any], int | None]: ...


@overload
def valid_optional_integer(*, min_value: int, max_value: int) -> Callable[[Any], int | None]: ...


@overload
def valid_optional_integer(*, value: Any, min_value: int) -> int | None: ...


@overload
def valid_optional_integer(*, value: Any, max_value: int) -> int | None: ...


@overload
def valid_optional_integer(*, value: Any, min_value: int, max_value: int) -> int | None: ...


def valid_optional_integer(**kwargs: Any) -> int | None | Callable[[Any], int | None]:
    value: Any = kwargs.pop("value", _MISSING)
    decorator: Callable[[Any], int | None] = __valid_optional_integer(**kwargs)
    if value is not _MISSING:
        return decorator(value)
    return decorator


def _to_integer(val: Any) -> int:
    if isinstance(val, bool):
        raise TypeError(f"Expected an integer, got {val!r}")
    if isinstance(val, str):
        try:
            return int(val.strip(), 10)
        except ValueError:
            raise ValueError(f"Invalid integer literal: {val!r}") from None
    if isinstance(val, float):
        if not val.is_integer():
            raise ValueError(f"Expected an integral value, got {val!r}")
        return int(val)
    return int(val)


@cache
def __valid_optional_integer(**kwargs: Any) -> Callable[[Any], int | None]:
    if not kwargs or any(param not in ("min_value", "max_value") for param in kwargs):
        raise TypeError("Invalid arguments")

    _min: int | None = _to_integer(kwargs["min_value"]) if "min_value" in kwargs else None
    _max: int | None = _to_integer(kwargs["max_value"]) if "max_value" in kwargs else None

    if _min is not None and _max is not None and _min > _max:
        raise ValueError(f"min_value ({_min}) > max_value ({_max})")

    def valid_optional_integer(val: Any) -> int | None:
        if val is None:
            return None
        number = _to_integer(val)
        if _min is not None and number < _min:
            raise ValueError(f"{number} is lower than {_min}")
        if _max is not None and number > _max:
            raise ValueError(f"{number} is greater than {_max}")
        return number

    return valid_optional_integer
