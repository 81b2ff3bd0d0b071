"""Helpers for turning Python values into JavaScript source text."""

from __future__ import annotations

import logging
import math
import re
import secrets
import string
from decimal import Decimal
from typing import Any

_log = logging.getLogger(__name__)

_RANDOM_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits
_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    """Double-quote a string, escaping specials and unprintable characters."""
    parts = ['"']
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable() and not 0xD800 <= code <= 0xDFFF:
            parts.append(ch)
        elif code < 0x20 or code == 0x7F:
            parts.append(f"\\x{code:02x}")
        elif 0xD800 <= code <= 0xDFFF:
            parts.append("\\ufffd")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _format_float(value: float) -> str:
    """Shortest general-format rendering of a float (exponent from 1e6 up)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    exp = point - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _plain(value: Any) -> str:
    """Default text form of a value."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_plain(item) for item in value) + "]"
    if isinstance(value, dict):
        try:
            keys = sorted(value)
        except TypeError:
            keys = list(value)
        return "map[" + " ".join(f"{_plain(k)}:{_plain(value[k])}" for k in keys) + "]"
    return str(value)


def generate_random() -> str:
    """Return a random six-character alphanumeric string."""
    return "".join(secrets.choice(_RANDOM_CHARS) for _ in range(6))


def _format_array(values: list | tuple) -> str:
    return "[" + ", ".join(any_to_js_value(item) for item in values) + "]"


def _format_object(mapping: dict) -> str:
    pairs = []
    for key, item in mapping.items():
        key_text = _plain(key)
        if not _IDENTIFIER.match(key_text):
            key_text = _quote(key_text)
        pairs.append(f"{key_text}: {any_to_js_value(item)}")
    return "{" + ", ".join(pairs) + "}"


def _format_element(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if value is None:
        return "null"
    return _quote(_plain(value))


def any_to_js_value(value: Any) -> str:
    """Render an arbitrary value as a JavaScript literal."""
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return _format_array(value)
    if isinstance(value, dict):
        return _format_object(value)
    return _format_element(value)


def is_bool_and_true(value: Any) -> bool:
    """True only for the boolean ``True`` itself, not for truthy values."""
    return value is True


def any_to_slice(value: Any) -> list | None:
    """Return a list of the items of a list or tuple, else None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return list(value)
    _log.warning("any_to_slice could not convert value of type %s", type(value).__name__)
    return None


def make_getter(comp_data: dict[str, Any]) -> str:
    """Build an object literal of getters, one per name, returning its expression."""
    getters = ",".join(f"get {name}() {{ return {_plain(expr)} }}" for name, expr in comp_data.items())
    return "{" + getters + "}"


def decl_props(props: dict[str, Any]) -> str:
    """Render ``let name = value;`` lines for each prop."""
    return "".join(f"let {name} = {any_to_js_value(value)};\n" for name, value in props.items())


def is_js_object_literal(s: str) -> bool:
    """Whether the text looks like an object literal."""
    s = s.strip()
    return s.startswith("{") and s.endswith("}")


def is_js_array_literal(s: str) -> bool:
    """Whether the text looks like an array literal."""
    s = s.strip()
    return s.startswith("[") and s.endswith("]")


def is_js_function_literal(s: str) -> bool:
    """Whether the text looks like a function literal."""
    s = s.strip()
    return (
        "=>" in s
        or s.startswith("function")
        or ("(" in s and ")" in s and "{" in s and "}" in s)
    )