"""JSON codec used by the ``utils.json`` script namespace."""
from __future__ import annotations

import json
from typing import Any

from hostbridge.core.exceptions import CodecError


def parse(content: str) -> Any:
    """Parse JSON text into plain Python values.

    Raises:
        CodecError: with the decoder's message when ``content`` is not JSON
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise CodecError(
            f"Invalid JSON: {exc}",
            context={"line": exc.lineno, "column": exc.colno},
        ) from exc


def stringify(value: Any, *, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize ``value`` as multi-line JSON indented by ``indent`` spaces."""
    try:
        return json.dumps(value, indent=indent, ensure_ascii=ensure_ascii, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise CodecError(f"Cannot stringify value: {exc}") from exc


def stringify_to_line(value: Any, *, ensure_ascii: bool = False) -> str:
    """Serialize ``value`` as compact single-line JSON (suited to JSONL)."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=ensure_ascii, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise CodecError(f"Cannot stringify value: {exc}") from exc


__all__ = ["parse", "stringify", "stringify_to_line"]
