"""I/O utilities for HostBridge.

This package provides the file primitives the file service is built on:
- Core: in-place writes, directory management, exact text I/O
- YAML: configuration document reading
"""
from __future__ import annotations

from .core import (
    PathLike,
    append_text,
    ensure_directory,
    ensure_parent_dir,
    is_blank_file,
    read_text,
    write_text,
)
from .yaml import read_yaml

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "read_text",
    "write_text",
    "append_text",
    "is_blank_file",
    # yaml
    "read_yaml",
]
