"""Value marshaling between script-native values and host types."""
from __future__ import annotations

from .options import BaseDirOptions, EnsureExistsOptions, ListOptions, LoadOptions
from .values import (
    Invalid,
    Many,
    Single,
    StringsValue,
    as_table,
    coerce_strings,
    get_prop_as_bool,
    get_prop_as_string,
    to_strings,
)

__all__ = [
    "BaseDirOptions",
    "EnsureExistsOptions",
    "ListOptions",
    "LoadOptions",
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
