import string

import pytest

from alpinetransform.jsutils import (
    any_to_js_value,
    any_to_slice,
    decl_props,
    generate_random,
    is_bool_and_true,
    is_js_array_literal,
    is_js_function_literal,
    is_js_object_literal,
    make_getter,
)


def test_generate_random_shape():
    value = generate_random()
    assert len(value) == 6
    allowed = set(string.ascii_letters + string.digits)
    assert set(value) <= allowed


def test_none_and_bools():
    assert any_to_js_value(None) == "null"
    assert any_to_js_value(True) == "true"
    assert any_to_js_value(False) == "false"


def test_strings_are_double_quoted():
    assert any_to_js_value("John") == '"John"'
    assert any_to_js_value('say "hi"') == '"say \\"hi\\""'


def test_numbers():
    assert any_to_js_value(30) == "30"
    assert any_to_js_value(19.99) == "19.99"
    assert any_to_js_value(1234567.0) == "1.234567e+06"


def test_array_of_mixed_values():
    assert any_to_js_value(["apple", 1, None]) == '["apple", 1, null]'


def test_object_key_quoting():
    result = any_to_js_value({"name": "John", "my-key": True})
    assert result == '{name: "John", "my-key": true}'


def test_nested_structures_keep_brackets():
    result = any_to_js_value({"items": [1, 2]})
    assert result.startswith("{items: [")
    assert result.endswith("]}")


@pytest.mark.parametrize("value, expected", [(True, True), (False, False), (1, False), ("true", False), (None, False)])
def test_is_bool_and_true(value, expected):
    assert is_bool_and_true(value) is expected


def test_any_to_slice():
    assert any_to_slice((1, 2)) == [1, 2]
    assert any_to_slice(["a"]) == ["a"]
    assert any_to_slice(None) is None
    assert any_to_slice("abc") is None


def test_make_getter():
    assert make_getter({"count": "count"}) == "{get count() { return count }}"
    assert make_getter({}) == "{}"
    two = make_getter({"a": "x", "b": "y"})
    assert two.count("get ") == 2
    assert not two.endswith(",}")


def test_decl_props():
    assert decl_props({"name": "Bob"}) == 'let name = "Bob";\n'
    assert decl_props({}) == ""
    assert decl_props({"a": 1, "b": None}).splitlines() == ["let a = 1;", "let b = null;"]


def test_literal_checks():
    assert is_js_object_literal("  {a: 1} ")
    assert not is_js_object_literal("[1]")
    assert is_js_array_literal(" [1, 2] ")
    assert not is_js_array_literal("{}")
    assert is_js_function_literal("() => 1")
    assert is_js_function_literal("function() {}")
    assert is_js_function_literal("toggle() { x }")
    assert not is_js_function_literal("count")