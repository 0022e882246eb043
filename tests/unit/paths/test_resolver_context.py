from __future__ import annotations

import os
from pathlib import Path

import pytest

from hostbridge.core.exceptions import PathResolutionError, UnknownResolverError
from hostbridge.core.paths import ResolverContext, ResolverName


def test_for_workspace_registers_standard_resolvers(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path, base_dir=tmp_path / "base")

    assert ctx.base_path(ResolverName.WORKSPACE_DIR) == tmp_path
    assert ctx.base_path(ResolverName.PARENT_DIR) == tmp_path.parent
    assert ctx.base_path(ResolverName.BASE_DIR) == tmp_path / "base"
    assert set(ctx.names()) == set(ResolverName)


def test_resolve_relative_path_against_workspace(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path)

    assert ctx.resolve("sub-dir-a/file.txt") == tmp_path / "sub-dir-a" / "file.txt"


def test_resolve_uses_requested_resolver(tmp_path):
    wks = tmp_path / "wks"
    ctx = ResolverContext.for_workspace(wks, base_dir=tmp_path / "install")

    assert ctx.resolve("x.txt", ResolverName.PARENT_DIR) == tmp_path / "x.txt"
    assert ctx.resolve("x.txt", ResolverName.BASE_DIR) == tmp_path / "install" / "x.txt"


def test_resolve_returns_absolute_paths_unchanged(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path / "wks")
    absolute = str(tmp_path / "elsewhere" / "file.txt")

    assert ctx.resolve(absolute) == Path(absolute)


def test_resolve_does_not_touch_filesystem(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path / "does-not-exist")

    resolved = ctx.resolve("nested/missing.txt")

    assert resolved == tmp_path / "does-not-exist" / "nested" / "missing.txt"
    assert not resolved.exists()


def test_resolve_keeps_dot_segments(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path)

    resolved = ctx.resolve("./sub-dir-a/..")

    assert ".." in resolved.parts


def test_empty_relative_path_is_the_base(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path)

    assert ctx.resolve("") == tmp_path


def test_unregistered_resolver_fails_fast(tmp_path):
    ctx = ResolverContext({ResolverName.WORKSPACE_DIR: tmp_path})

    with pytest.raises(UnknownResolverError):
        ctx.resolve("a.txt", ResolverName.BASE_DIR)

    # Also a KeyError for callers that catch the builtin.
    with pytest.raises(KeyError):
        ctx.resolve("a.txt", "no-such-resolver")


def test_relative_base_paths_are_rejected():
    with pytest.raises(PathResolutionError):
        ResolverContext({ResolverName.WORKSPACE_DIR: "relative/dir"})


def test_context_mapping_is_read_only(tmp_path):
    ctx = ResolverContext.for_workspace(tmp_path)

    with pytest.raises(TypeError):
        ctx._bases[ResolverName.WORKSPACE_DIR] = Path(os.sep)  # type: ignore[index]
