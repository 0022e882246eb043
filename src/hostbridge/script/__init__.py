"""Script-facing ``utils`` namespace.

The embedding engine exposes the object returned by :func:`init_utils` as
``utils``; scripts then call ``utils.file.load(...)``, ``utils.path.join(...)``,
``utils.json.parse(...)`` and ``utils.hbs.render(...)``.
"""
from __future__ import annotations

from types import SimpleNamespace

from hostbridge.core.paths import ResolverName
from hostbridge.core.runtime import RuntimeContext

from . import file_module, hbs_module, json_module, path_module


def init_utils(
    ctx: RuntimeContext,
    *,
    path_resolver: ResolverName = ResolverName.WORKSPACE_DIR,
) -> SimpleNamespace:
    """Build the ``utils`` namespace bound to ``ctx``."""
    return SimpleNamespace(
        path=path_module.init_module(ctx, path_resolver),
        file=file_module.init_module(ctx),
        json=json_module.init_module(ctx),
        hbs=hbs_module.init_module(ctx),
    )


__all__ = ["init_utils"]
