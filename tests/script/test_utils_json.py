from __future__ import annotations

import pytest

from hostbridge.core.exceptions import CodecError
from hostbridge.core.runtime import RuntimeContext
from hostbridge.script import init_utils


def test_parse(utils):
    assert utils.json.parse('{"name": "John", "age": 30}') == {"name": "John", "age": 30}


def test_parse_error_is_prefixed(utils):
    with pytest.raises(CodecError, match=r"^utils\.json\.parse failed: Invalid JSON"):
        utils.json.parse('{"name": ')


def test_stringify_pretty(utils):
    assert utils.json.stringify({"name": "John"}) == '{\n  "name": "John"\n}'


def test_stringify_to_line(utils):
    assert utils.json.stringify_to_line({"name": "John", "age": 30}) == '{"name":"John","age":30}'


def test_stringify_uses_workspace_indent(sandbox, publisher):
    ctx = RuntimeContext.for_workspace(sandbox, publisher=publisher, config={"json": {"indent": 4}})

    assert init_utils(ctx).json.stringify([1]) == "[\n    1\n]"


def test_line_output_parses_back(utils):
    value = {"list": [1, 2.5, "three", None, True], "nested": {"k": "v"}}

    assert utils.json.parse(utils.json.stringify_to_line(value)) == value
