from __future__ import annotations

import os

import pytest

from hostbridge.core.exceptions import GlobError
from hostbridge.core.files import FileService
from hostbridge.core.files.listing import build_query, expand_braces, iter_matches, relative_or_absolute
from hostbridge.core.marshal import ListOptions
from hostbridge.core.paths import ResolverContext


@pytest.fixture
def service(sandbox) -> FileService:
    return FileService(ResolverContext.for_workspace(sandbox))


def _paths(items):
    return sorted(item.path for item in items)


def test_single_star_stays_in_one_segment(service):
    assert _paths(service.list(["*.*"])) == ["file-01.txt", "file-02.txt"]


def test_double_star_spans_segments(service):
    found = _paths(service.list(["sub-dir-a/**/*.*"]))

    assert found == [
        "sub-dir-a/agent-hello-2.aip",
        "sub-dir-a/sub-sub-dir/agent-hello-3.aip",
        "sub-dir-a/sub-sub-dir/main.aip",
    ]


def test_base_dir_option_makes_paths_relative_to_it(service):
    found = _paths(service.list(["**/*.*"], ListOptions(base_dir="sub-dir-a")))

    assert found == ["agent-hello-2.aip", "sub-sub-dir/agent-hello-3.aip", "sub-sub-dir/main.aip"]


def test_absolute_option_reports_absolute_paths(service, sandbox):
    found = service.list(["*.txt"], ListOptions(absolute=True))

    assert _paths(found) == [str(sandbox / "file-01.txt"), str(sandbox / "file-02.txt")]
    assert all(os.path.isabs(meta.path) for meta in found)


def test_directories_are_not_listed(service):
    assert service.list(["sub-dir-a/*"])[0].name == "agent-hello-2.aip"
    assert len(service.list(["sub-dir-a/*"])) == 1


def test_overlapping_patterns_report_each_file_once(service):
    found = service.list(["*.txt", "file-0*.txt"])

    assert _paths(found) == ["file-01.txt", "file-02.txt"]


def test_no_match_gives_empty_list(service):
    assert service.list(["*.nothing"]) == []


def test_matches_outside_base_are_reported_absolute(service, sandbox):
    pattern = os.path.join(str(sandbox), "agent-script", "*.aip")

    found = service.list([pattern], ListOptions(base_dir="sub-dir-a"))

    assert _paths(found) == [str(sandbox / "agent-script" / "agent-hello.aip")]


def test_list_load_reads_outside_matches_by_absolute_path(service, sandbox):
    pattern = os.path.join(str(sandbox), "file-01.txt")

    records = service.list_load([pattern], ListOptions(base_dir="sub-dir-a"))

    assert len(records) == 1
    assert records[0].path == str(sandbox / "file-01.txt")
    assert records[0].content == "hello from file-01.txt\n"


def test_list_load_contents(service):
    records = service.list_load(["sub-dir-a/sub-sub-dir/main.aip"])

    assert [(r.path, r.content) for r in records] == [
        ("sub-dir-a/sub-sub-dir/main.aip", "some content from main.aip\n"),
    ]


def test_relative_paths_never_climb_out_of_base(service):
    for meta in service.list(["**/*.*"]):
        assert not meta.path.startswith("..")
        assert not os.path.isabs(meta.path)


def test_first_returns_single_match(service):
    meta = service.first(["sub-dir-a/**/*-2.*"])

    assert meta is not None
    assert meta.path == "sub-dir-a/agent-hello-2.aip"


def test_first_returns_none_without_match(service):
    assert service.first(["**/*.missing"]) is None


def test_sort_listing_orders_by_path(sandbox):
    service = FileService(ResolverContext.for_workspace(sandbox), sort_listing=True)

    found = [meta.path for meta in service.list(["**/*.*"])]

    assert found == sorted(found)


def test_dot_files_match_by_default(service, sandbox):
    (sandbox / ".hidden.txt").write_text("h", encoding="utf-8")
    (sandbox / ".cache" / "deep").mkdir(parents=True)
    (sandbox / ".cache" / "deep" / "note.md").write_text("n", encoding="utf-8")

    assert ".hidden.txt" in _paths(service.list(["*.txt"]))
    assert os.path.join(".cache", "deep", "note.md") in _paths(service.list(["**/*.md"]))


def test_hidden_files_can_be_excluded(sandbox):
    (sandbox / ".hidden.txt").write_text("h", encoding="utf-8")

    visible = FileService(ResolverContext.for_workspace(sandbox), include_hidden=False).list(["*.txt"])

    assert _paths(visible) == ["file-01.txt", "file-02.txt"]


def test_brace_alternation_matches_each_branch(service):
    assert _paths(service.list(["*.{txt,aip}"])) == ["file-01.txt", "file-02.txt"]
    assert _paths(service.list(["sub-dir-a/**/{main,agent-hello-2}.aip"])) == [
        "sub-dir-a/agent-hello-2.aip",
        "sub-dir-a/sub-sub-dir/main.aip",
    ]


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("*.{rs,md}", ["*.rs", "*.md"]),
        ("{a,b}/{c,d}", ["a/c", "a/d", "b/c", "b/d"]),
        ("x.{a,{b,c}}", ["x.a", "x.b", "x.c"]),
        ("plain/*.txt", ["plain/*.txt"]),
        ("{single}.txt", ["{single}.txt"]),
        ("open{a,b", ["open{a,b"]),
    ],
)
def test_expand_braces(pattern, expected):
    assert expand_braces(pattern) == expected


def test_base_path_with_glob_characters_is_taken_literally(tmp_path):
    base = tmp_path / "odd[dir]"
    base.mkdir()
    (base / "x.txt").write_text("x", encoding="utf-8")

    found = [m.display_path for m in iter_matches(build_query(base, ["*.txt"]))]

    assert found == ["x.txt"]


def test_empty_pattern_list_is_rejected(tmp_path):
    with pytest.raises(GlobError):
        build_query(tmp_path, [])


def test_relative_base_is_rejected():
    with pytest.raises(GlobError):
        build_query("relative/base", ["*.txt"])


def test_relative_or_absolute(tmp_path):
    inside = str(tmp_path / "a" / "b.txt")
    outside = str(tmp_path.parent / "elsewhere.txt")

    assert relative_or_absolute(inside, tmp_path) == (os.path.join("a", "b.txt"), False)
    assert relative_or_absolute(outside, tmp_path) == (outside, True)


def test_relative_results_point_at_the_matched_files(service, sandbox):
    base = sandbox / "sub-dir-a"

    relative = service.list(["**/*.*"], ListOptions(base_dir="sub-dir-a"))
    absolute = service.list(["**/*.*"], ListOptions(base_dir="sub-dir-a", absolute=True))

    rebuilt = sorted(os.path.realpath(os.path.join(base, meta.path)) for meta in relative)
    assert rebuilt == sorted(os.path.realpath(meta.path) for meta in absolute)
