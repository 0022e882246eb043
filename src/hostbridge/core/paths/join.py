"""Path join/split engine.

Two join policies are provided:

* :func:`join` composes fragments with the host's native rules and keeps
  the separators the caller wrote.
* :func:`join_os_normalized` splits every fragment on both ``/`` and ``\\``,
  drops empty components and re-joins them with ``\\`` when the first
  fragment looks like a Windows path (``C:...`` or ``\\...``), otherwise
  with the host separator.

All functions are pure; none of them touches the filesystem or resolves
``.`` / ``..`` segments.
"""
from __future__ import annotations

import os
import re
from typing import Iterable, Optional, Tuple

_ANY_SEPARATOR = re.compile(r"[\\/]+")
WINDOWS_SEPARATOR = "\\"


def _native_separators() -> str:
    return os.sep + (os.altsep or "")


def join(*fragments: str) -> Optional[str]:
    """Join fragments verbatim; ``None`` for no fragments, ``""`` if all are empty.

    An absolute fragment restarts the path, as the host's own join does.
    """
    if not fragments:
        return None
    parts = [f for f in fragments if f]
    if not parts:
        return ""
    return os.path.join(*parts)


def is_windows_style(fragment: str) -> bool:
    """Return True for drive-letter (``C:``) or backslash-rooted fragments."""
    return fragment[1:2] == ":" or fragment.startswith(WINDOWS_SEPARATOR)


def _components(fragments: Iterable[str]) -> list[str]:
    return [c for fragment in fragments for c in _ANY_SEPARATOR.split(fragment) if c]


def join_os_normalized(*fragments: str) -> Optional[str]:
    """Join fragments with canonical separators.

    >>> join_os_normalized("C:/Users", "Admin", "file.txt")
    'C:\\\\Users\\\\Admin\\\\file.txt'
    """
    if not fragments:
        return None
    first = next((f for f in fragments if f), None)
    if first is None:
        return ""

    sep = WINDOWS_SEPARATOR if is_windows_style(first) else os.sep
    joined = sep.join(_components(fragments))
    # A rooted first fragment keeps its root marker.
    if first[0] in "/\\":
        joined = sep + joined
    return joined


def parent(path: str) -> Optional[str]:
    """Return the parent of ``path``, or ``None`` when it has none.

    Trailing separators are ignored; ``"./sub-dir/"`` has parent ``"."``
    and ``"file.txt"`` has parent ``""``.
    """
    if not path:
        return None
    seps = _native_separators()
    stripped = path.rstrip(seps)
    if not stripped:
        # The root itself.
        return None
    idx = max(stripped.rfind(s) for s in seps)
    if idx < 0:
        return ""
    head = stripped[:idx].rstrip(seps)
    if not head:
        return stripped[0]
    return head


def split(path: str) -> Tuple[str, str]:
    """Split ``path`` into ``(parent, filename)``.

    The filename is the last segment; the parent follows :func:`parent`
    with ``""`` standing in for "no parent".
    """
    seps = _native_separators()
    stripped = path.rstrip(seps)
    idx = max(stripped.rfind(s) for s in seps)
    name = stripped[idx + 1:] if idx >= 0 else stripped
    return parent(path) or "", name


__all__ = [
    "WINDOWS_SEPARATOR",
    "is_windows_style",
    "join",
    "join_os_normalized",
    "parent",
    "split",
]
