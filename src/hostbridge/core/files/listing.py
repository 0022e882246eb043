"""Glob listing engine.

Patterns are expanded with the standard glob rules (``*`` stays within a
segment, ``**`` spans segments) rooted at the query's base directory.
Brace alternation (``*.{md,txt}``) is expanded before the walk, and by
default ``*`` and ``**`` also match dot-files and dot-directories. Absolute patterns are used as written. Matches keep the
order of the underlying directory walk, pattern by pattern, and a file
matched by several patterns is reported once.

Result paths are relative to the base directory unless the match lies
outside of it, in which case the absolute path is reported instead of a
``..``-climbing relative one.
"""
from __future__ import annotations

import glob
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from hostbridge.core.exceptions import GlobError

from .types import FileMeta, FileRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobQuery:
    base_path: Path
    patterns: Tuple[str, ...]
    absolute: bool = False
    include_hidden: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            raise GlobError("At least one glob pattern is required", context={"base_path": str(self.base_path)})
        if not os.path.isabs(self.base_path):
            raise GlobError(
                f"Glob base path must be absolute: {self.base_path}",
                context={"base_path": str(self.base_path)},
            )


@dataclass(frozen=True)
class GlobMatch:
    """One matched file: its absolute path and the path to report."""

    abs_path: str
    display_path: str
    outside_base: bool


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternation into plain glob patterns.

    Groups may nest. A group without a comma, or an unbalanced ``{``, is
    kept literally.

    >>> expand_braces("src/**/*.{rs,md}")
    ['src/**/*.rs', 'src/**/*.md']
    """
    start = pattern.find("{")
    while start != -1:
        depth = 0
        commas: List[int] = []
        end = -1
        for idx in range(start, len(pattern)):
            ch = pattern[idx]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    end = idx
                    break
            elif ch == "," and depth == 1:
                commas.append(idx)
        if end == -1:
            return [pattern]
        if commas:
            head, tail = pattern[:start], pattern[end + 1:]
            bounds = [start, *commas, end]
            expanded: List[str] = []
            for left, right in zip(bounds, bounds[1:]):
                for candidate in expand_braces(head + pattern[left + 1:right] + tail):
                    if candidate not in expanded:
                        expanded.append(candidate)
            return expanded
        start = pattern.find("{", start + 1)
    return [pattern]


def _full_pattern(base_path: Path, pattern: str) -> str:
    if os.path.isabs(pattern):
        return pattern
    return os.path.join(glob.escape(os.fspath(base_path)), pattern)


def relative_or_absolute(abs_path: str, base_path: Path) -> Tuple[str, bool]:
    """Return ``(path, outside)`` for ``abs_path`` seen from ``base_path``.

    ``outside`` is True when the relative form would climb out of the base
    directory (or no relative form exists), and the absolute path is
    returned in that case.
    """
    try:
        rel = os.path.relpath(abs_path, base_path)
    except ValueError:
        # Different drives on Windows.
        return abs_path, True
    first = rel.replace("\\", "/").split("/", 1)[0]
    if first == "..":
        return abs_path, True
    return rel, False


def iter_matches(query: GlobQuery) -> Iterator[GlobMatch]:
    """Lazily yield the files matched by ``query``.

    Raises:
        GlobError: for malformed patterns or when the walk fails
    """
    seen = set()
    for pattern in query.patterns:
        try:
            matches = (
                match
                for expanded in expand_braces(pattern)
                for match in glob.iglob(
                    _full_pattern(query.base_path, expanded),
                    recursive=True,
                    include_hidden=query.include_hidden,
                )
            )
            for match in matches:
                abs_path = os.path.abspath(match)
                if abs_path in seen or not os.path.isfile(abs_path):
                    continue
                seen.add(abs_path)
                if query.absolute:
                    yield GlobMatch(abs_path=abs_path, display_path=abs_path, outside_base=False)
                    continue
                display, outside = relative_or_absolute(abs_path, query.base_path)
                yield GlobMatch(abs_path=abs_path, display_path=display, outside_base=outside)
        except (OSError, ValueError) as exc:
            raise GlobError(
                f"Cannot expand glob {pattern!r} under {query.base_path}: {exc}",
                context={"pattern": pattern, "base_path": str(query.base_path)},
            ) from exc


def list_metas(query: GlobQuery, *, sort: bool = False) -> List[FileMeta]:
    metas = [FileMeta.from_path(m.display_path) for m in iter_matches(query)]
    if sort:
        metas.sort(key=lambda m: m.path)
    logger.debug("Listed %d file(s) under %s for %s", len(metas), query.base_path, list(query.patterns))
    return metas


def list_records(query: GlobQuery, *, encoding: str = "utf-8", sort: bool = False) -> List[FileRecord]:
    records: List[FileRecord] = []
    for match in iter_matches(query):
        if query.absolute or match.outside_base:
            # The absolute path is its own base.
            records.append(FileRecord.load("", match.abs_path, encoding=encoding))
        else:
            records.append(FileRecord.load(query.base_path, match.display_path, encoding=encoding))
    if sort:
        records.sort(key=lambda r: r.path)
    logger.debug("Loaded %d file(s) under %s for %s", len(records), query.base_path, list(query.patterns))
    return records


def first_meta(query: GlobQuery) -> Optional[FileMeta]:
    """Return the first match in walk order, or ``None`` when nothing matches."""
    match = next(iter_matches(query), None)
    if match is None:
        return None
    return FileMeta.from_path(match.display_path)


def build_query(
    base_path: Path,
    patterns: Sequence[str],
    *,
    absolute: bool = False,
    include_hidden: bool = True,
) -> GlobQuery:
    return GlobQuery(
        base_path=Path(base_path),
        patterns=tuple(patterns),
        absolute=absolute,
        include_hidden=include_hidden,
    )


__all__ = [
    "GlobQuery",
    "GlobMatch",
    "build_query",
    "iter_matches",
    "list_metas",
    "list_records",
    "first_meta",
    "relative_or_absolute",
    "expand_braces",
]
