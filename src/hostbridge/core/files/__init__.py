"""File access for HostBridge: file references, the file service and glob listings."""
from __future__ import annotations

from .listing import GlobMatch, GlobQuery, build_query, first_meta, iter_matches, list_metas, list_records
from .service import FileService
from .types import FileMeta, FileRecord

__all__ = [
    "FileMeta",
    "FileRecord",
    "FileService",
    "GlobMatch",
    "GlobQuery",
    "build_query",
    "iter_matches",
    "list_metas",
    "list_records",
    "first_meta",
]
