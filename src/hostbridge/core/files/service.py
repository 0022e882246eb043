"""File access service: load, save, append, ensure_exists and glob listings.

Every path is resolved against the workspace resolver unless a call
supplies a ``base_dir`` override. The service keeps no mutable state
beyond its collaborators, so independent calls may run concurrently as
long as they do not target the same file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from hostbridge.core.exceptions import FileAccessError
from hostbridge.core.hub import HubEvent, NullHub, Publisher
from hostbridge.core.marshal.options import EnsureExistsOptions, ListOptions, LoadOptions
from hostbridge.core.paths.resolver import ResolverContext, ResolverName
from hostbridge.core.utils.io import append_text, ensure_parent_dir, is_blank_file, write_text

from .listing import build_query, first_meta, list_metas, list_records
from .types import FileMeta, FileRecord

logger = logging.getLogger(__name__)


class FileService:
    """Workspace file operations built on a :class:`ResolverContext`."""

    def __init__(
        self,
        resolver: ResolverContext,
        publisher: Optional[Publisher] = None,
        *,
        encoding: str = "utf-8",
        include_hidden: bool = True,
        sort_listing: bool = False,
    ) -> None:
        self.resolver = resolver
        self.publisher: Publisher = publisher if publisher is not None else NullHub()
        self.encoding = encoding
        self.include_hidden = include_hidden
        self.sort_listing = sort_listing

    def _resolve(self, rel_path: str) -> Path:
        return self.resolver.resolve(rel_path, ResolverName.WORKSPACE_DIR)

    # ------------------------------------------------------------------
    # Single-file operations
    # ------------------------------------------------------------------

    def load(self, rel_path: str, options: Optional[LoadOptions] = None) -> FileRecord:
        """Load ``rel_path`` (relative to the workspace or ``options.base_dir``).

        Raises:
            FileAccessError: if the path is not an existing readable file
        """
        options = options or LoadOptions()
        base_path = options.resolve_base_dir(self.resolver)
        return FileRecord.load(base_path, rel_path, encoding=self.encoding)

    def save(self, rel_path: str, content: str) -> None:
        """Replace ``rel_path`` with ``content``, creating parent directories."""
        path = self._resolve(rel_path)
        try:
            write_text(path, content, encoding=self.encoding)
        except OSError as exc:
            raise FileAccessError(
                f"Cannot save {rel_path}: {exc}",
                context={"path": rel_path, "full_path": str(path)},
            ) from exc
        logger.debug("Saved %s (%d chars)", path, len(content))
        self.publisher.publish(HubEvent(f"-> utils.file.save called on: {rel_path}"))

    def append(self, rel_path: str, content: str) -> None:
        """Append ``content`` to ``rel_path``, creating it if absent.

        No hub notification is emitted; appends are too frequent.
        """
        path = self._resolve(rel_path)
        try:
            append_text(path, content, encoding=self.encoding)
        except OSError as exc:
            raise FileAccessError(
                f"Cannot append to {rel_path}: {exc}",
                context={"path": rel_path, "full_path": str(path)},
            ) from exc
        logger.debug("Appended %d chars to %s", len(content), path)

    def ensure_exists(
        self,
        rel_path: str,
        content: Optional[str] = None,
        options: Optional[EnsureExistsOptions] = None,
    ) -> FileMeta:
        """Create ``rel_path`` with ``content`` when missing.

        With ``options.content_when_empty`` a whitespace-only file is
        overwritten as well. Any other existing file is left untouched.
        """
        options = options or EnsureExistsOptions()
        path = self._resolve(rel_path)
        try:
            if not path.exists():
                ensure_parent_dir(path)
                write_text(path, content or "", encoding=self.encoding)
                logger.debug("Created %s", path)
            elif options.content_when_empty and is_blank_file(path, encoding=self.encoding):
                write_text(path, content or "", encoding=self.encoding)
                logger.debug("Filled blank file %s", path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(
                f"Cannot ensure {rel_path} exists: {exc}",
                context={"path": rel_path, "full_path": str(path)},
            ) from exc
        return FileMeta.from_path(rel_path)

    # ------------------------------------------------------------------
    # Glob listings
    # ------------------------------------------------------------------

    def _query(self, patterns: Sequence[str], options: Optional[ListOptions]):
        options = options or ListOptions()
        return build_query(
            options.resolve_base_dir(self.resolver),
            patterns,
            absolute=options.absolute,
            include_hidden=self.include_hidden,
        )

    def list(self, patterns: Sequence[str], options: Optional[ListOptions] = None) -> List[FileMeta]:
        """Return the :class:`FileMeta` of every file matching ``patterns``."""
        return list_metas(self._query(patterns, options), sort=self.sort_listing)

    def list_load(self, patterns: Sequence[str], options: Optional[ListOptions] = None) -> List[FileRecord]:
        """Like :meth:`list` but with each file's content loaded."""
        return list_records(self._query(patterns, options), encoding=self.encoding, sort=self.sort_listing)

    def first(self, patterns: Sequence[str], options: Optional[ListOptions] = None) -> Optional[FileMeta]:
        """Return the first matching file, or ``None``; stops at the first match."""
        return first_meta(self._query(patterns, options))


__all__ = ["FileService"]
