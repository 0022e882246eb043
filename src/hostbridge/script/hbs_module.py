"""The ``utils.hbs`` namespace: ``render(template, data) -> str``.

    local out = utils.hbs.render("Hello, {{name}}!", { name = "Alice" })
    -- "Hello, Alice!"
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Mapping

from hostbridge.core.codecs import templates
from hostbridge.core.runtime import RuntimeContext

from .support import require_string, script_function


@script_function("utils.hbs.render")
def render(template: str, data: Mapping[str, Any]) -> str:
    return templates.render(require_string(template, "template", "utils.hbs.render"), data)


def init_module(ctx: RuntimeContext) -> SimpleNamespace:
    return SimpleNamespace(render=render)


__all__ = ["init_module", "render"]
