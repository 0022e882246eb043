from __future__ import annotations

import pytest

from hostbridge.core.exceptions import ValueShapeError
from hostbridge.core.marshal import (
    Invalid,
    Many,
    Single,
    as_table,
    coerce_strings,
    get_prop_as_bool,
    get_prop_as_string,
    to_strings,
)


def test_single_string_is_wrapped():
    assert coerce_strings("*.md") == Single("*.md")
    assert to_strings("*.md", "globs") == ["*.md"]


def test_list_of_strings_is_kept_in_order():
    assert coerce_strings(["b", "a"]) == Many(("b", "a"))
    assert to_strings(("b", "a"), "globs") == ["b", "a"]


def test_list_with_non_string_is_invalid():
    result = coerce_strings(["ok", 3])

    assert isinstance(result, Invalid)
    assert "index 2" in result.source


@pytest.mark.parametrize("value", [None, 12, True, {"a": "b"}])
def test_other_shapes_are_invalid(value):
    assert isinstance(coerce_strings(value), Invalid)


def test_to_strings_error_names_shape_and_source():
    with pytest.raises(ValueShapeError) as excinfo:
        to_strings({"not": "a list"}, "utils.file.list globs argument")

    message = str(excinfo.value)
    assert message.startswith("utils.file.list globs argument")
    assert "string or a list of strings" in message
    assert "table" in message


def test_missing_options_are_not_an_error():
    assert as_table(None, "opts") is None
    assert get_prop_as_string(None, "base_dir", "opts") is None
    assert get_prop_as_bool(None, "absolute", "opts") is False


def test_options_must_be_a_table():
    with pytest.raises(ValueShapeError, match="should be a table"):
        get_prop_as_string("base_dir=x", "base_dir", "opts")


def test_wrong_typed_string_property_names_key():
    with pytest.raises(ValueShapeError) as excinfo:
        get_prop_as_string({"base_dir": 42}, "base_dir", "utils.file.list options")

    assert "options.base_dir" in str(excinfo.value)
    assert "string" in str(excinfo.value)
    assert excinfo.value.context["key"] == "base_dir"


def test_wrong_typed_bool_property_names_key():
    with pytest.raises(ValueShapeError, match="options.absolute must be of type boolean"):
        get_prop_as_bool({"absolute": "yes"}, "absolute", "opts")


def test_absent_property_uses_default():
    assert get_prop_as_bool({}, "absolute", "opts", default=True) is True
    assert get_prop_as_string({"other": 1}, "base_dir", "opts") is None
