"""Brace expressions in text, and discovery of the variables they use."""

from __future__ import annotations

import copy
import re
from typing import Any

from .nodes import Attribute, Element, Node, TextNode

_SINGLE_BRACE = re.compile(r"\{([^{}]+)\}")
_DOUBLE_BRACE = re.compile(r"\{\{[\t\n\f\r ]*([^{}]+)[\t\n\f\r ]*\}\}")
_IDENTIFIER = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")
_NUMBER = re.compile(r"[0-9]+(\.[0-9]+)?")

_COMPARISON_OPERATORS = ("===", "!==", "==", "!=", ">=", "<=", ">", "<")
_ARITHMETIC_OPERATORS = ("+", "-", "*", "/", "%")
_EXPRESSION_MARKERS = (".", "+", "-", "*", "/", "?", "=")
_LITERAL_WORDS = frozenset({"true", "false", "null", "undefined"})
_PLACEHOLDER_FUNCTION = "function() { return null; }"

_RESERVED_KEYWORDS = frozenset(
    {
        "true", "false", "null", "undefined",
        "var", "let", "const",
        "if", "else", "for", "while", "do",
        "switch", "case", "default",
        "break", "continue", "return",
        "function", "class", "this", "super",
        "new", "delete", "typeof", "instanceof",
        "void", "in", "of",
    }
)

_PRODUCTS = [
    {
        "id": 1,
        "name": "Laptop",
        "price": 999.99,
        "inStock": True,
        "featured": True,
        "tags": ["electronics", "computers"],
    },
    {
        "name": "Phone",
        "price": 699.99,
        "inStock": True,
        "featured": False,
        "tags": ["electronics", "mobile"],
    },
]

_DEFAULTS: dict[str, Any] = {
    "user": {
        "name": "John Doe",
        "role": "admin",
        "isAdmin": True,
        "email": "john@example.com",
        "joinDate": "2023-05-15",
        "details": {"email": "john@example.com", "phone": "555-1234"},
        "orders": [
            {"id": "ORD-1234", "date": "2023-03-15", "status": "Delivered", "total": 129.99},
            {"id": "ORD-5678", "date": "2023-02-27", "status": "Shipped", "total": 79.5},
        ],
        "wishlist": [
            {"id": 101, "name": "Wireless Headphones", "price": 89.99},
            {"id": 205, "name": "Smart Watch", "price": 199.99},
        ],
    },
    "product": {
        "id": 1,
        "name": "Product Name",
        "price": 99.99,
        "inStock": True,
        "featured": False,
        "tags": ["electronics", "gadgets"],
    },
    "item": {"name": "Item Name", "price": 49.99, "tags": ["category1", "category2"]},
    "category": {
        "name": "Category Name",
        "items": [
            {"name": "Item 1", "price": 19.99, "tags": ["tag1", "tag2"]},
            {"name": "Item 2", "price": 29.99, "tags": ["tag2", "tag3"]},
        ],
    },
    "notification": {"type": "info", "message": "Notification message"},
    "filteredProducts": _PRODUCTS,
    "products": _PRODUCTS
    + [
        {
            "name": "Headphones",
            "price": 149.99,
            "inStock": False,
            "featured": True,
            "tags": ["electronics", "audio"],
        },
        {
            "name": "Tablet",
            "price": 499.99,
            "inStock": True,
            "featured": False,
            "tags": ["electronics", "computers"],
        },
    ],
    "categories": [
        {
            "name": "Electronics",
            "items": [
                {"name": "Laptop", "price": 999.99, "tags": ["electronics", "computers"]},
                {"name": "Phone", "price": 699.99, "tags": ["electronics", "mobile"]},
            ],
        },
        {"name": "Books", "items": []},
    ],
    "settings": {
        "theme": "light",
        "currency": "USD",
        "language": "en",
        "showFeatured": True,
        "filters": {"inStockOnly": False, "minPrice": 0, "maxPrice": 1000},
    },
    "index": 0,
    "title": "Custom Template Showcase",
    "isAdmin": True,
    "isLoggedIn": True,
    "getGreeting": "function() { return 'Hello'; }",
    "formatPrice": "function(price) { return '$' + price.toFixed(2); }",
    "getTagClass": "function(tag) { return 'tag-' + tag; }",
    "notifications": [
        {"type": "info", "message": "Welcome to our store!"},
        {"type": "success", "message": "Your order has been processed."},
        {"type": "warning", "message": "Some items are out of stock."},
    ],
    "stats": {"users": 124, "products": 56, "orders": 890, "revenue": 15280.45},
    "recentActions": [
        {"user": "John Doe", "action": "Order fulfilled", "timestamp": "2023-04-10T13:45:00Z"},
        {"user": "Jane Smith", "action": "Product created", "timestamp": "2023-04-10T14:32:00Z"},
    ],
    "currentUser": {"name": "John Doe", "role": "admin", "email": "john@example.com"},
}


def _text_span(expr: str) -> Element:
    return Element(
        tag_name="span",
        attributes=[
            Attribute(name="x-text", value=expr, dynamic=True, is_alpine=True, alpine_type="text")
        ],
        children=[],
    )


def _overlaps(single: re.Match, double: re.Match) -> bool:
    start, end = single.span()
    d_start, d_end = double.span()
    return d_start <= start <= d_end or d_start <= end <= d_end


def transform_text_with_expressions(text: str, data_scope: dict[str, Any]) -> list[Node]:
    """Split text into literal text and ``x-text`` spans for ``{expr}`` and ``{{ expr }}``."""
    doubles = list(_DOUBLE_BRACE.finditer(text))
    singles = [
        match
        for match in _SINGLE_BRACE.finditer(text)
        if not any(_overlaps(match, double) for double in doubles)
    ]
    if not doubles and not singles:
        return [TextNode(content=text)]

    result: list[Node] = []
    last = 0

    for match in doubles:
        if match.start() > last:
            result.append(TextNode(content=text[last:match.start()]))
        expr = match.group(1).strip()
        extract_variables_from_expr(expr, data_scope)
        result.append(_text_span(expr))
        last = match.end()

    for match in singles:
        if match.start() < last:
            continue
        if match.start() > last:
            result.append(TextNode(content=text[last:match.start()]))
        expr = match.group(1).strip()
        if is_expression_syntax(expr):
            extract_variables_from_expr(expr, data_scope)
            result.append(_text_span(expr))
        else:
            result.append(TextNode(content=match.group(0)))
        last = match.end()

    if last < len(text):
        result.append(TextNode(content=text[last:]))
    return result


def _add_default(name: str, data_scope: dict[str, Any]) -> None:
    if name not in data_scope:
        data_scope[name] = default_value_for_var(name)


def _split_arguments(args: str) -> list[str]:
    """Split call arguments on top-level commas."""
    depth = 0
    current: list[str] = []
    parts: list[str] = []
    for char in args:
        if char == "(":
            depth += 1
            current.append(char)
        elif char == ")":
            depth -= 1
            current.append(char)
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if current:
        parts.append("".join(current))
    return parts


def _extract_from_call(expr: str, data_scope: dict[str, Any]) -> None:
    open_at = expr.index("(")
    if open_at <= 0:
        return
    func_name = expr[:open_at].strip()
    if is_valid_identifier(func_name):
        if func_name not in data_scope:
            data_scope[func_name] = _PLACEHOLDER_FUNCTION
    elif "." in func_name:
        root = func_name.split(".")[0]
        if is_valid_identifier(root):
            _add_default(root, data_scope)

    close_at = expr.rfind(")")
    if close_at > open_at:
        for arg in _split_arguments(expr[open_at + 1:close_at]):
            extract_variables_from_expr(arg, data_scope)


def extract_variables_from_expr(expr: str, data_scope: dict[str, Any]) -> None:
    """Add every variable the expression refers to into the scope, with a default value."""
    if not expr:
        return
    expr = expr.strip().strip("{}")

    if is_string_literal(expr) or is_numeric_string(expr) or expr in _LITERAL_WORDS:
        return
    if expr.startswith("function") or ("=>" in expr and "{" in expr):
        return

    if "?" in expr and ":" in expr:
        condition, rest = expr.split("?", 1)
        extract_variables_from_expr(condition, data_scope)
        for branch in rest.split(":", 1):
            extract_variables_from_expr(branch, data_scope)
        return

    if "&&" in expr or "||" in expr:
        for op in ("&&", "||"):
            if op in expr:
                for part in expr.split(op):
                    extract_variables_from_expr(part, data_scope)
        return

    for op in _COMPARISON_OPERATORS:
        if op in expr:
            for part in expr.split(op):
                extract_variables_from_expr(part, data_scope)
            return

    for op in _ARITHMETIC_OPERATORS:
        if op in expr and not expr.startswith(op):
            for part in expr.split(op):
                extract_variables_from_expr(part, data_scope)
            return

    if "(" in expr and ")" in expr:
        _extract_from_call(expr, data_scope)
        return

    if "." in expr or "[" in expr:
        separator = "[" if "[" in expr else "."
        cut = expr.index(separator)
        root = expr[:cut].strip() if cut > 0 else ""
        if root and is_valid_identifier(root):
            _add_default(root, data_scope)
        return

    if is_valid_identifier(expr):
        _add_default(expr, data_scope)


def is_expression_syntax(s: str) -> bool:
    """Whether the text inside braces reads as an expression rather than plain text."""
    if any(marker in s for marker in _EXPRESSION_MARKERS):
        return True
    if is_string_literal(s):
        return False
    trimmed = s.strip()
    if len(trimmed) != len(s) and " " in trimmed:
        return True
    return _IDENTIFIER.fullmatch(s) is not None


def default_value_for_var(var_name: str) -> Any:
    """A fresh sample value for well-known variable names, or None."""
    return copy.deepcopy(_DEFAULTS.get(var_name))


def is_valid_identifier(s: str) -> bool:
    """Whether the text is an identifier that is not a reserved word."""
    if not s or is_js_reserved_keyword(s):
        return False
    return _IDENTIFIER.fullmatch(s) is not None


def is_string_literal(s: str) -> bool:
    """Whether the text starts and ends with the same kind of quote."""
    return (s.startswith("'") and s.endswith("'")) or (s.startswith('"') and s.endswith('"'))


def is_numeric_string(s: str) -> bool:
    """Whether the text is an unsigned decimal number."""
    return _NUMBER.fullmatch(s) is not None


def is_js_reserved_keyword(s: str) -> bool:
    """Whether the text is a reserved word or literal keyword."""
    return s in _RESERVED_KEYWORDS


def transform_expression(expr: str) -> str:
    """Guard property access so a missing root object yields undefined, not an error."""
    root, dot, rest = expr.partition(".")
    if not dot:
        return expr
    return f"({root} || {{}}).{rest}"