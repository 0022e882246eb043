"""The ``utils.path`` namespace.

Functions:
* ``exists(path) -> bool``
* ``is_file(path) -> bool``
* ``is_dir(path) -> bool``
* ``parent(path) -> str | None``
* ``split(path) -> (parent, filename)``
* ``join(...fragments | list) -> str | None``
* ``join_os_normalized(...fragments | list) -> str | None``

``exists``/``is_file``/``is_dir`` resolve against the resolver chosen when
the namespace is built; the other functions never touch the filesystem.
"""
from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Any, Optional, Sequence, Tuple

from hostbridge.core import paths
from hostbridge.core.paths import ResolverName
from hostbridge.core.runtime import RuntimeContext

from .support import require_string, script_function


def _fragments(args: Sequence[Any]) -> list[str]:
    # A list as first argument holds the fragments; otherwise non-string
    # arguments are skipped. No usable fragment joins to "".
    if args and isinstance(args[0], (list, tuple)):
        return [str(item) for item in args[0] if isinstance(item, (str, int, float)) and not isinstance(item, bool)]
    return [arg for arg in args if isinstance(arg, str)]


@script_function("utils.path.join")
def path_join(*args: Any) -> Optional[str]:
    if not args:
        return None
    return paths.join(*_fragments(args)) or ""


@script_function("utils.path.join_os_normalized")
def path_join_os_normalized(*args: Any) -> Optional[str]:
    if not args:
        return None
    return paths.join_os_normalized(*_fragments(args)) or ""


@script_function("utils.path.parent")
def path_parent(path: str) -> Optional[str]:
    return paths.parent(require_string(path, "path", "utils.path.parent"))


@script_function("utils.path.split")
def path_split(path: str) -> Tuple[str, str]:
    return paths.split(require_string(path, "path", "utils.path.split"))


def init_module(ctx: RuntimeContext, resolver_name: ResolverName = ResolverName.WORKSPACE_DIR) -> SimpleNamespace:
    resolver = ctx.resolver

    def _resolve(path: Any, fn_name: str) -> str:
        path = require_string(path, "path", f"utils.path.{fn_name}")
        return os.fspath(resolver.resolve(path, resolver_name))

    @script_function("utils.path.exists")
    def path_exists(path: str) -> bool:
        return os.path.exists(_resolve(path, "exists"))

    @script_function("utils.path.is_file")
    def path_is_file(path: str) -> bool:
        return os.path.isfile(_resolve(path, "is_file"))

    @script_function("utils.path.is_dir")
    def path_is_dir(path: str) -> bool:
        return os.path.isdir(_resolve(path, "is_dir"))

    return SimpleNamespace(
        exists=path_exists,
        is_file=path_is_file,
        is_dir=path_is_dir,
        parent=path_parent,
        split=path_split,
        join=path_join,
        join_os_normalized=path_join_os_normalized,
    )


__all__ = ["init_module", "path_join", "path_join_os_normalized", "path_parent", "path_split"]
