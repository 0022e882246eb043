"""Handlebars rendering for the ``utils.hbs`` script namespace.

Templates follow Handlebars syntax: ``{{name}}``, dotted ``{{user.name}}``,
block helpers such as ``{{#each}}`` and ``{{#if}}``, and ``{{this}}``
inside blocks. ``{{value}}`` is HTML-escaped, ``{{{value}}}`` is not, and a
missing variable renders as an empty string.
"""
from __future__ import annotations

import threading
from functools import lru_cache
from typing import Any, Callable, Mapping

from pybars import Compiler, PybarsError

from hostbridge.core.exceptions import CodecError, ValueShapeError

_compiler = Compiler()
_compile_lock = threading.Lock()


@lru_cache(maxsize=128)
def _compile(template: str) -> Callable[..., Any]:
    with _compile_lock:
        return _compiler.compile(template)


def render(template: str, data: Mapping[str, Any]) -> str:
    """Render ``template`` with the key/value pairs of ``data``.

    Raises:
        ValueShapeError: if ``data`` is not a table
        CodecError: if the template does not compile or fails to render
    """
    if not isinstance(data, Mapping):
        raise ValueShapeError(
            f"Expected a table for template data, got {type(data).__name__}",
            context={"expected": "table"},
        )
    try:
        compiled = _compile(template)
        return str(compiled({str(k): v for k, v in data.items()}))
    except (PybarsError, TypeError, ValueError) as exc:
        raise CodecError(f"Handlebars render error: {exc}") from exc


__all__ = ["render"]
