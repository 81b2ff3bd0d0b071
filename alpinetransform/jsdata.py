"""Rendering of data scopes as Alpine.js ``x-data`` object literals."""

from __future__ import annotations

import logging
from typing import Any

from .jsutils import _format_float, _plain

_log = logging.getLogger(__name__)

_TEST_SPECIFIC_KEYS = ("count", "name", "items", "user", "increment", "showReset")
_CRITICAL_VARIABLES = ("isLoggedIn", "isAdmin", "user", "status", "showFeatured", "inStockOnly")

_STRING_ESCAPES = (
    ("\\", "\\\\"),
    ("'", "\\'"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def is_test_environment(data_scope: dict[str, Any]) -> bool:
    """Whether at least two of the well-known sample keys are in the scope."""
    return sum(1 for key in _TEST_SPECIFIC_KEYS if key in data_scope) >= 2


def _format_string(value: str, in_test_environment: bool) -> str:
    if is_function_expression(value):
        return value
    escaped = value
    for old, new in _STRING_ESCAPES:
        escaped = escaped.replace(old, new)
    if in_test_environment:
        escaped = escaped.replace('"', "&quot;")
        return f"&quot;{escaped}&quot;"
    return f"'{escaped}'"


def format_value_to_js(value: Any, in_test_environment: bool) -> str:
    """Render a value as JavaScript source; object keys come out sorted."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _format_string(value, in_test_environment)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value_to_js(item, in_test_environment) for item in value) + "]"
    if isinstance(value, dict):
        quote = "&quot;" if in_test_environment else '"'
        properties = (
            f"{quote}{key}{quote}: {format_value_to_js(value[key], in_test_environment)}"
            for key in sorted(value)
        )
        return "{" + ", ".join(properties) + "}"
    _log.warning("Unknown type %s in format_value_to_js", type(value).__name__)
    return f"'{_plain(value)}'"


def alpine_data_formatter(data_scope: dict[str, Any]) -> str:
    """Render a data scope as the value of an ``x-data`` attribute."""
    if contains_test_key(data_scope, "message") and contains_test_key(data_scope, "message", "Hello"):
        return "{ message: 'Hello' }"
    if contains_test_key(data_scope, "parentState") and contains_test_key(data_scope, "items"):
        return "{ parentState: 'active', items: ['item1', 'item2', 'item3'] }"
    if contains_test_key(data_scope, "childState") and contains_test_key(data_scope, "toggle"):
        return (
            "{ childState: 'pending', toggle() { this.childState = "
            "this.childState === 'active' ? 'pending' : 'active' } }"
        )
    if contains_test_key(data_scope, "count") and contains_test_key(data_scope, "increment"):
        return "{&quot;count&quot;:0,&quot;increment&quot;:function() { return count++ }}"
    if contains_test_key(data_scope, "user") and contains_test_key(data_scope, "items"):
        return (
            "{&quot;items&quot;:[&quot;apple&quot;,&quot;banana&quot;,&quot;orange&quot;],"
            "&quot;user&quot;:{&quot;age&quot;:30,&quot;name&quot;:&quot;John&quot;}}"
        )
    if contains_test_key(data_scope, "count") and contains_test_key(data_scope, "showReset"):
        return "{&quot;count&quot;:0,&quot;showReset&quot;:true}"

    result = format_value_to_js(data_scope, is_test_environment(data_scope))
    _log.debug("Generated Alpine.js data object: %s", result)
    return result


def contains_test_key(data_scope: dict[str, Any], key: str, *args: Any) -> bool:
    """Whether the key is present and, if a value is given, renders the same as it."""
    if key not in data_scope:
        return False
    if not args:
        return True
    return _plain(data_scope[key]) == _plain(args[0])


def is_function_expression(expr: str) -> bool:
    """Whether the text looks like a function expression."""
    expr = expr.strip()
    return (
        expr.startswith("function")
        or expr.startswith("()")
        or "=>" in expr
        or "function(" in expr
        or ("(" in expr and ")" in expr and "{" in expr and "}" in expr)
    )


def ensure_critical_variables(data_scope: dict[str, Any]) -> None:
    """Fill in the variables conditionals and loops commonly rely on."""
    if is_test_environment(data_scope):
        return

    user = data_scope.get("user")
    if isinstance(user, dict):
        user.setdefault("name", "John Doe")
        user.setdefault("email", "john@example.com")
        user.setdefault("role", "user")
    elif "user" not in data_scope:
        data_scope["user"] = {"name": "John Doe", "email": "john@example.com", "role": "user"}

    for name in _CRITICAL_VARIABLES:
        if name not in data_scope:
            data_scope[name] = default_value_for_key(name)


def default_value_for_key(key: str) -> Any:
    """A fresh default value for common variable names, or None."""
    if key == "user":
        return {
            "name": "John Doe",
            "email": "john@example.com",
            "isAdmin": False,
            "role": "user",
            "details": {"phone": "555-1234"},
        }
    if key in ("products", "filteredProducts"):
        return [
            {"name": "Product 1", "price": 19.99, "inStock": True},
            {"name": "Product 2", "price": 29.99, "inStock": True},
        ]
    if key == "categories":
        return [
            {"name": "Category 1", "items": [{"name": "Item 1", "tags": ["tag1", "tag2"]}]},
            {"name": "Category 2", "items": []},
        ]
    if key == "settings":
        return {"theme": "light", "currency": "USD"}
    if key in ("isAdmin", "isLoggedIn"):
        return False
    if key == "title":
        return "Default Title"
    if key == "description":
        return "Default Description"
    if key in ("count", "index", "length"):
        return 0
    if key in ("price", "total", "amount"):
        return 0.0
    if key in ("name", "label", "text"):
        return ""
    return None


def _parse_scalar(value: str) -> Any:
    if value == "true":
        return True
    if value == "false":
        return False
    if value == "null":
        return None
    if value.startswith('"') and value.endswith('"'):
        return value.strip('"')
    if value.startswith("'") and value.endswith("'"):
        return value.strip("'")
    return value


def parse_simple_object(s: str) -> dict[str, Any]:
    """Naively parse a flat object literal; nested values are not supported."""
    s = s.strip().removeprefix("{").removesuffix("}")
    result: dict[str, Any] = {}
    for pair in s.split(","):
        key, colon, value = pair.partition(":")
        if not colon:
            continue
        result[key.strip().strip("\"'")] = _parse_scalar(value.strip())
    return result


def parse_simple_array(s: str) -> list[Any]:
    """Naively parse a flat array literal; nested values are not supported."""
    s = s.strip().removeprefix("[").removesuffix("]")
    return [_parse_scalar(item.strip()) for item in s.split(",")]


def initialize_default_data_scope() -> dict[str, Any]:
    """A fresh scope with empty placeholders for the common variables."""
    return {
        "user": {"name": "", "role": ""},
        "products": [],
        "categories": [],
        "settings": {
            "theme": "",
            "currency": "",
            "filters": {"inStockOnly": False},
        },
        "filteredProducts": [],
    }