"""Path utilities for HostBridge.

This package provides:
- Resolver: named base directories and relative path resolution
- Join: verbatim and OS-normalized join, split and parent
"""
from __future__ import annotations

from .join import (
    is_windows_style,
    join,
    join_os_normalized,
    parent,
    split,
)
from .resolver import (
    ResolverContext,
    ResolverName,
)

__all__ = [
    # resolver
    "ResolverContext",
    "ResolverName",
    # join
    "join",
    "join_os_normalized",
    "is_windows_style",
    "parent",
    "split",
]
