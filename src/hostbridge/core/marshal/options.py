"""Typed option structs parsed once at the script boundary.

Defaults: ``absolute=False``, ``content_when_empty=False``, ``base_dir=None``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from hostbridge.core.paths.resolver import ResolverContext, ResolverName

from .values import get_prop_as_bool, get_prop_as_string


@dataclass(frozen=True)
class BaseDirOptions:
    """Options carrying an optional ``base_dir`` override."""

    base_dir: Optional[str] = None

    def resolve_base_dir(self, resolver: ResolverContext) -> Path:
        """Return the effective absolute base directory.

        A relative ``base_dir`` is joined onto the workspace directory, an
        absolute one is used as-is, and no override means the workspace.
        """
        workspace = resolver.resolve("", ResolverName.WORKSPACE_DIR)
        if self.base_dir is None:
            return workspace
        if os.path.isabs(self.base_dir):
            return Path(self.base_dir)
        return Path(os.path.join(workspace, self.base_dir))


@dataclass(frozen=True)
class LoadOptions(BaseDirOptions):
    @classmethod
    def from_value(cls, value: Any, err_prefix: str = "utils.file.load options") -> "LoadOptions":
        return cls(base_dir=get_prop_as_string(value, "base_dir", err_prefix))


@dataclass(frozen=True)
class ListOptions(BaseDirOptions):
    """Options for ``list``, ``list_load`` and ``first``."""

    absolute: bool = False

    @classmethod
    def from_value(cls, value: Any, err_prefix: str = "utils.file.list options") -> "ListOptions":
        return cls(
            base_dir=get_prop_as_string(value, "base_dir", err_prefix),
            absolute=get_prop_as_bool(value, "absolute", err_prefix),
        )


@dataclass(frozen=True)
class EnsureExistsOptions:
    # Write the provided content when the file holds only whitespace.
    content_when_empty: bool = False

    @classmethod
    def from_value(
        cls, value: Any, err_prefix: str = "utils.file.ensure_exists options"
    ) -> "EnsureExistsOptions":
        return cls(content_when_empty=get_prop_as_bool(value, "content_when_empty", err_prefix))


__all__ = [
    "BaseDirOptions",
    "LoadOptions",
    "ListOptions",
    "EnsureExistsOptions",
]
