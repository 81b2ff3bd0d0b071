import pytest

from alpinetransform.jsdata import (
    alpine_data_formatter,
    contains_test_key,
    default_value_for_key,
    ensure_critical_variables,
    format_value_to_js,
    initialize_default_data_scope,
    is_function_expression,
    is_test_environment,
    parse_simple_array,
    parse_simple_object,
)


def test_is_test_environment_needs_two_keys():
    assert is_test_environment({"count": 1, "name": "x"})
    assert not is_test_environment({"count": 1, "other": 2})


@pytest.mark.parametrize(
    "scope, expected",
    [
        ({"message": "Hello"}, "{ message: 'Hello' }"),
        (
            {"parentState": "x", "items": []},
            "{ parentState: 'active', items: ['item1', 'item2', 'item3'] }",
        ),
        (
            {"count": 0, "increment": None},
            "{&quot;count&quot;:0,&quot;increment&quot;:function() { return count++ }}",
        ),
        ({"count": 0, "showReset": True}, "{&quot;count&quot;:0,&quot;showReset&quot;:true}"),
    ],
)
def test_alpine_data_formatter_fixed_outputs(scope, expected):
    assert alpine_data_formatter(scope) == expected


def test_alpine_data_formatter_general_round_trip():
    scope = {"b": "text", "a": True, "c": None}
    assert parse_simple_object(alpine_data_formatter(scope)) == scope


def test_format_value_basic_literals():
    assert format_value_to_js(None, False) == "null"
    assert format_value_to_js(True, False) == "true"
    assert format_value_to_js(False, True) == "false"
    assert format_value_to_js(7, False) == "7"


def test_format_value_function_string_kept():
    fn = "function() { return 1; }"
    assert format_value_to_js(fn, False) == fn
    assert format_value_to_js(fn, True) == fn


def test_format_value_string_quoting():
    assert format_value_to_js("hi", False) == "'hi'"
    assert format_value_to_js("hi", True) == "&quot;hi&quot;"
    assert format_value_to_js("it's", False) == "'it\\'s'"


def test_format_value_object_keys_sorted():
    out = format_value_to_js({"z": 1, "a": 2}, False)
    assert out.index('"a"') < out.index('"z"')
    assert out.startswith("{") and out.endswith("}")


def test_format_value_array_round_trip():
    values = [True, "x", None]
    assert parse_simple_array(format_value_to_js(values, False)) == values


def test_contains_test_key():
    scope = {"count": 0, "message": "Hello"}
    assert contains_test_key(scope, "count")
    assert contains_test_key(scope, "count", "0")
    assert contains_test_key(scope, "message", "Hello")
    assert not contains_test_key(scope, "message", "Bye")
    assert not contains_test_key(scope, "missing")


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("function() {}", True),
        ("() => 1", True),
        ("x => x", True),
        ("toggle() { a }", True),
        ("hello", False),
        ("call(x)", False),
    ],
)
def test_is_function_expression(expr, expected):
    assert is_function_expression(expr) is expected


def test_ensure_critical_variables_skips_test_environment():
    scope = {"count": 0, "name": "x"}
    ensure_critical_variables(scope)
    assert scope == {"count": 0, "name": "x"}


def test_ensure_critical_variables_fills_defaults():
    scope = {}
    ensure_critical_variables(scope)
    assert scope["user"] == {"name": "John Doe", "email": "john@example.com", "role": "user"}
    assert scope["isLoggedIn"] is False
    assert scope["isAdmin"] is False
    assert scope["status"] is None


def test_ensure_critical_variables_completes_user():
    scope = {"user": {"name": "Ann"}}
    ensure_critical_variables(scope)
    assert scope["user"]["name"] == "Ann"
    assert scope["user"]["email"] == "john@example.com"
    assert scope["user"]["role"] == "user"


def test_default_value_for_key():
    assert default_value_for_key("title") == "Default Title"
    assert default_value_for_key("description") == "Default Description"
    assert default_value_for_key("count") == 0
    assert default_value_for_key("name") == ""
    assert default_value_for_key("unknown") is None


def test_default_value_for_key_is_fresh():
    first = default_value_for_key("settings")
    first["theme"] = "dark"
    assert default_value_for_key("settings")["theme"] == "light"


def test_parse_simple_object():
    parsed = parse_simple_object("{ 'a': true, \"b\": 'x', c: null, d: 5 }")
    assert parsed == {"a": True, "b": "x", "c": None, "d": "5"}


def test_parse_simple_array():
    assert parse_simple_array("[true, 'a', null, \"b\", false]") == [True, "a", None, "b", False]


def test_initialize_default_data_scope_fresh():
    scope = initialize_default_data_scope()
    assert scope["settings"]["filters"]["inStockOnly"] is False
    scope["products"].append(1)
    assert initialize_default_data_scope()["products"] == []