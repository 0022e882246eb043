"""Core I/O utilities for HostBridge.

Single source of truth for file access patterns used by the file service:
- In-place writes that keep the target file identity (mode, symlinks)
- Exact text reads and writes (no newline translation)
- Directory management utilities
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def ensure_directory(path: PathLike, create: bool = True) -> Path:
    """Ensure directory exists.

    Args:
        path: Directory path to check/create
        create: If True, create directory if missing; if False, raise if missing

    Returns:
        Path: The directory path (guaranteed to exist if create=True)

    Raises:
        FileNotFoundError: If create=False and directory doesn't exist
        NotADirectoryError: If path exists but is not a directory
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path

    if create:
        path.mkdir(parents=True, exist_ok=True)
        return path
    raise FileNotFoundError(f"Directory does not exist: {path}")


def read_text(path: PathLike, *, encoding: str = "utf-8") -> str:
    """Read a text file exactly as stored (line endings untouched).

    Raises:
        FileNotFoundError: If the file does not exist
        IsADirectoryError: If the path is a directory
        Other I/O and decode errors are propagated to callers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> None:
    """Replace the content of ``path`` in place, creating it and its parents if needed.

    An existing file keeps its permissions, and a symlink is written through
    to its target.
    """
    path = Path(path)
    ensure_parent_dir(path)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(content)


def append_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> None:
    """Append ``content`` to ``path``, creating the file and its parents if needed."""
    path = Path(path)
    ensure_parent_dir(path)
    with open(path, "a", encoding=encoding, newline="") as f:
        f.write(content)


def is_blank_file(path: PathLike, *, encoding: str = "utf-8") -> bool:
    """Return True when ``path`` holds nothing but whitespace."""
    return read_text(path, encoding=encoding).strip() == ""


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "read_text",
    "write_text",
    "append_text",
    "is_blank_file",
]
