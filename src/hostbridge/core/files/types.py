"""File references handed back to scripts."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any, Dict, Union

from hostbridge.core.exceptions import FileAccessError
from hostbridge.core.utils.io import read_text


@dataclass(frozen=True)
class FileMeta:
    """A file's identity without content; built from the path string alone."""

    path: str
    name: str
    stem: str
    ext: str

    @classmethod
    def from_path(cls, path: Union[str, PurePath]) -> "FileMeta":
        path_str = os.fspath(path)
        pure = PurePath(path_str)
        suffix = pure.suffix
        return cls(
            path=path_str,
            name=pure.name,
            stem=pure.stem,
            ext=suffix[1:] if suffix else "",
        )

    def to_value(self) -> Dict[str, Any]:
        return {"path": self.path, "name": self.name, "stem": self.stem, "ext": self.ext}


@dataclass(frozen=True)
class FileRecord:
    """A :class:`FileMeta` plus the full text read at load time."""

    meta: FileMeta
    content: str

    @property
    def path(self) -> str:
        return self.meta.path

    @property
    def name(self) -> str:
        return self.meta.name

    @property
    def stem(self) -> str:
        return self.meta.stem

    @property
    def ext(self) -> str:
        return self.meta.ext

    @classmethod
    def load(cls, base_path: Union[str, Path], rel_path: str, *, encoding: str = "utf-8") -> "FileRecord":
        """Read ``rel_path`` under ``base_path``.

        The record keeps ``rel_path`` as written. An empty ``base_path``
        means ``rel_path`` is used on its own.

        Raises:
            FileAccessError: when the file is missing, not a file, or unreadable
        """
        base = os.fspath(base_path)
        full_path = Path(os.path.join(base, rel_path)) if base else Path(rel_path)
        if not full_path.is_file():
            raise FileAccessError(
                f"File not found: {rel_path} (resolved to {full_path})",
                context={"path": rel_path, "full_path": str(full_path)},
            )
        try:
            content = read_text(full_path, encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(
                f"Cannot read {rel_path}: {exc}",
                context={"path": rel_path, "full_path": str(full_path)},
            ) from exc
        return cls(meta=FileMeta.from_path(rel_path), content=content)

    def to_value(self) -> Dict[str, Any]:
        value = self.meta.to_value()
        value["content"] = self.content
        return value


__all__ = ["FileMeta", "FileRecord"]
