"""Conversion of script-native values into strict host types.

Script values arrive as plain Python objects: ``str``, ``list``/``tuple``,
``dict`` (tables), ``bool``, numbers and ``None``. Arguments documented as
"one or more strings" go through :func:`coerce_strings`, which classifies
the value once into :class:`Single`, :class:`Many` or :class:`Invalid`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from hostbridge.core.exceptions import ValueShapeError


@dataclass(frozen=True)
class Single:
    value: str


@dataclass(frozen=True)
class Many:
    values: Tuple[str, ...]


@dataclass(frozen=True)
class Invalid:
    reason: str
    source: str


StringsValue = Union[Single, Many, Invalid]


def _shape_name(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, Mapping):
        return "table"
    if isinstance(value, (list, tuple)):
        return "list"
    return type(value).__name__


def coerce_strings(value: Any) -> StringsValue:
    """Classify ``value`` as a single string, a list of strings, or invalid."""
    if isinstance(value, str):
        return Single(value)
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if not isinstance(item, str):
                return Invalid(
                    "list contains non-string values",
                    f"{_shape_name(item)} at index {index + 1}",
                )
        return Many(tuple(value))
    return Invalid("expected a string or a list of strings", _shape_name(value))


def to_strings(value: Any, err_prefix: str) -> list[str]:
    """Return ``value`` as a list of strings or raise :class:`ValueShapeError`."""
    coerced = coerce_strings(value)
    if isinstance(coerced, Single):
        return [coerced.value]
    if isinstance(coerced, Many):
        return list(coerced.values)
    raise ValueShapeError(
        f"{err_prefix} - {coerced.reason} (got {coerced.source})",
        context={"expected": "string | list<string>", "source": coerced.source},
    )


def as_table(value: Any, err_prefix: str) -> Optional[Mapping[str, Any]]:
    """Return ``value`` as a mapping; ``None`` passes through as "no table"."""
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueShapeError(
            f"{err_prefix} - value should be a table, but was {_shape_name(value)}",
            context={"expected": "table", "source": _shape_name(value)},
        )
    return value


def get_prop_as_string(value: Any, prop_name: str, err_prefix: str) -> Optional[str]:
    """Read an optional string property from an options table."""
    table = as_table(value, err_prefix)
    if table is None:
        return None
    prop = table.get(prop_name)
    if prop is None:
        return None
    if not isinstance(prop, str):
        raise ValueShapeError(
            f"{err_prefix} - options.{prop_name} must be of type string if present (got {_shape_name(prop)})",
            context={"key": prop_name, "expected": "string", "source": _shape_name(prop)},
        )
    return prop


def get_prop_as_bool(value: Any, prop_name: str, err_prefix: str, default: bool = False) -> bool:
    """Read an optional boolean property from an options table."""
    table = as_table(value, err_prefix)
    if table is None:
        return default
    prop = table.get(prop_name)
    if prop is None:
        return default
    if not isinstance(prop, bool):
        raise ValueShapeError(
            f"{err_prefix} - options.{prop_name} must be of type boolean if present (got {_shape_name(prop)})",
            context={"key": prop_name, "expected": "boolean", "source": _shape_name(prop)},
        )
    return prop


__all__ = [
    "Single",
    "Many",
    "Invalid",
    "StringsValue",
    "coerce_strings",
    "to_strings",
    "as_table",
    "get_prop_as_string",
    "get_prop_as_bool",
]
