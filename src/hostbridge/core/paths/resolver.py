"""Named-context path resolution for HostBridge.

A :class:`ResolverContext` maps resolver names to absolute base
directories. Resolution is pure string composition: it never touches the
filesystem and only fails when the requested resolver was never
registered.
"""
from __future__ import annotations

import enum
import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from hostbridge.core.exceptions import PathResolutionError, UnknownResolverError

PathLike = Union[str, Path]


class ResolverName(str, enum.Enum):
    """Logical roots a relative path can be resolved against."""

    WORKSPACE_DIR = "workspace_dir"
    PARENT_DIR = "parent_dir"
    BASE_DIR = "base_dir"


class ResolverContext:
    """Immutable mapping from :class:`ResolverName` to an absolute base path.

    Created once per session and shared by reference with every call; it
    holds no mutable state so concurrent use is safe.
    """

    __slots__ = ("_bases",)

    def __init__(self, bases: Mapping[ResolverName, PathLike]) -> None:
        checked = {}
        for name, base in bases.items():
            base_str = os.fspath(base)
            if not os.path.isabs(base_str):
                raise PathResolutionError(
                    f"Base path for resolver {ResolverName(name).value} must be absolute: {base_str!r}",
                    context={"resolver": ResolverName(name).value, "base": base_str},
                )
            checked[ResolverName(name)] = Path(base_str)
        self._bases: Mapping[ResolverName, Path] = MappingProxyType(checked)

    @classmethod
    def for_workspace(
        cls,
        workspace_dir: PathLike,
        *,
        base_dir: Optional[PathLike] = None,
    ) -> "ResolverContext":
        """Build the standard context anchored at ``workspace_dir``.

        Relative workspace paths are made absolute against the current
        directory; ``base_dir`` defaults to ``~/.hostbridge-base``.
        """
        wks = Path(os.path.abspath(os.fspath(workspace_dir)))
        base = Path(base_dir).expanduser() if base_dir is not None else Path.home() / ".hostbridge-base"
        return cls(
            {
                ResolverName.WORKSPACE_DIR: wks,
                ResolverName.PARENT_DIR: wks.parent,
                ResolverName.BASE_DIR: base,
            }
        )

    @property
    def workspace_dir(self) -> Path:
        return self.base_path(ResolverName.WORKSPACE_DIR)

    def names(self) -> tuple[ResolverName, ...]:
        return tuple(self._bases)

    def base_path(self, name: ResolverName) -> Path:
        try:
            return self._bases[ResolverName(name)]
        except (KeyError, ValueError):
            raise UnknownResolverError(
                f"Resolver {name!r} is not registered",
                context={"resolver": str(name)},
            ) from None

    def resolve(self, relative_path: PathLike, name: ResolverName = ResolverName.WORKSPACE_DIR) -> Path:
        """Return ``relative_path`` joined onto the base path of ``name``.

        Absolute inputs are returned unchanged and ``..`` segments are left
        unresolved.
        """
        base = self.base_path(name)
        raw = os.fspath(relative_path)
        if os.path.isabs(raw):
            return Path(raw)
        if raw == "":
            return base
        return Path(os.path.join(base, raw))

    def __repr__(self) -> str:
        items = ", ".join(f"{k.value}={str(v)!r}" for k, v in self._bases.items())
        return f"ResolverContext({items})"


__all__ = ["PathLike", "ResolverName", "ResolverContext"]
