"""The ``utils.file`` namespace.

Functions:
* ``load(path, options?) -> FileRecord``
* ``save(path, content)``
* ``append(path, content)``
* ``ensure_exists(path, content?, options?) -> FileMeta``
* ``list(globs, options?) -> [FileMeta]``
* ``list_load(globs, options?) -> [FileRecord]``
* ``first(globs, options?) -> FileMeta | None``

``globs`` is a string or a list of strings; ``options`` is a table with
``base_dir`` (string) and ``absolute`` (boolean). A ``FileMeta`` is
returned as ``{path, name, stem, ext}`` and a ``FileRecord`` adds
``content``. Example::

    local files = utils.file.list({"**/*.md"}, {base_dir = "doc"})
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

from hostbridge.core.marshal import EnsureExistsOptions, ListOptions, LoadOptions, to_strings
from hostbridge.core.runtime import RuntimeContext

from .support import optional_string, require_string, script_function


def init_module(ctx: RuntimeContext) -> SimpleNamespace:
    service = ctx.file_service

    @script_function("utils.file.load")
    def file_load(path: str, options: Any = None) -> Dict[str, Any]:
        path = require_string(path, "path", "utils.file.load")
        return service.load(path, LoadOptions.from_value(options)).to_value()

    @script_function("utils.file.save")
    def file_save(path: str, content: str) -> None:
        service.save(
            require_string(path, "path", "utils.file.save"),
            require_string(content, "content", "utils.file.save"),
        )

    @script_function("utils.file.append")
    def file_append(path: str, content: str) -> None:
        service.append(
            require_string(path, "path", "utils.file.append"),
            require_string(content, "content", "utils.file.append"),
        )

    @script_function("utils.file.ensure_exists")
    def file_ensure_exists(path: str, content: Optional[str] = None, options: Any = None) -> Dict[str, Any]:
        meta = service.ensure_exists(
            require_string(path, "path", "utils.file.ensure_exists"),
            optional_string(content, "content", "utils.file.ensure_exists"),
            EnsureExistsOptions.from_value(options),
        )
        return meta.to_value()

    @script_function("utils.file.list")
    def file_list(globs: Any, options: Any = None) -> List[Dict[str, Any]]:
        patterns = to_strings(globs, "utils.file.list globs argument")
        return [meta.to_value() for meta in service.list(patterns, ListOptions.from_value(options))]

    @script_function("utils.file.list_load")
    def file_list_load(globs: Any, options: Any = None) -> List[Dict[str, Any]]:
        patterns = to_strings(globs, "utils.file.list_load globs argument")
        return [
            record.to_value()
            for record in service.list_load(patterns, ListOptions.from_value(options, "utils.file.list_load options"))
        ]

    @script_function("utils.file.first")
    def file_first(globs: Any, options: Any = None) -> Optional[Dict[str, Any]]:
        patterns = to_strings(globs, "utils.file.first globs argument")
        meta = service.first(patterns, ListOptions.from_value(options, "utils.file.first options"))
        return meta.to_value() if meta is not None else None

    return SimpleNamespace(
        load=file_load,
        save=file_save,
        append=file_append,
        ensure_exists=file_ensure_exists,
        list=file_list,
        list_load=file_list_load,
        first=file_first,
    )


__all__ = ["init_module"]
