"""The ``utils.json`` namespace.

Functions:
* ``parse(content) -> value``
* ``stringify(value) -> str`` (multi-line, indented)
* ``stringify_to_line(value) -> str`` (single line, good for JSONL)
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from hostbridge.core.codecs import json as json_codec
from hostbridge.core.runtime import RuntimeContext

from .support import require_string, script_function


def init_module(ctx: RuntimeContext) -> SimpleNamespace:
    cfg = ctx.json_config

    @script_function("utils.json.parse")
    def parse(content: str) -> Any:
        return json_codec.parse(require_string(content, "content", "utils.json.parse"))

    @script_function("utils.json.stringify")
    def stringify(value: Any) -> str:
        return json_codec.stringify(value, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii)

    @script_function("utils.json.stringify_to_line")
    def stringify_to_line(value: Any) -> str:
        return json_codec.stringify_to_line(value, ensure_ascii=cfg.ensure_ascii)

    return SimpleNamespace(parse=parse, stringify=stringify, stringify_to_line=stringify_to_line)


__all__ = ["init_module"]
