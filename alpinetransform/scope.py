"""Data scopes: the variables a template's Alpine.js state is built from."""

from __future__ import annotations

import re
from typing import Any

from .expressions import extract_variables_from_expr
from .nodes import FenceSection, Node

_INTEGER = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[0-9]*\.[0-9]+")
_QUOTES = "\"'"


def init_data_scope(props: dict[str, Any]) -> dict[str, Any]:
    """Return a new scope holding a shallow copy of the given props."""
    return dict(props)


def find_fence_section(nodes: list[Node]) -> FenceSection | None:
    """Return the first fence section among the nodes, or None."""
    return next((node for node in nodes if isinstance(node, FenceSection)), None)


def _parse_variable_value(value: str) -> Any:
    if value.startswith(_QUOTES[0]) or value.startswith(_QUOTES[1]):
        return value.strip(_QUOTES)
    if value == "true":
        return True
    if value == "false":
        return False
    if value == "null":
        return None
    if _INTEGER.fullmatch(value) or _DECIMAL.fullmatch(value):
        # Numbers stay as text; the browser side converts them.
        return value
    return None


def _parse_prop_default(value: str) -> Any:
    if value.startswith(_QUOTES[0]) or value.startswith(_QUOTES[1]):
        return value.strip(_QUOTES)
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def collect_fence_data(fence: FenceSection, data_scope: dict[str, Any]) -> None:
    """Add the fence's variables, its props' defaults and referenced names to the scope."""
    for variable in fence.variables:
        data_scope[variable.name] = _parse_variable_value(variable.value)

    for prop in fence.props:
        if prop.name in data_scope:
            continue
        data_scope[prop.name] = _parse_prop_default(prop.default_value) if prop.default_value else None

    extract_variables_from_expr(fence.raw_content, data_scope)


def create_child_scope(parent_scope: dict[str, Any]) -> dict[str, Any]:
    """Return a new scope starting with everything the parent holds."""
    return dict(parent_scope)


def merge_scopes(parent_scope: dict[str, Any], child_scope: dict[str, Any]) -> None:
    """Copy into the parent the names it lacks; existing values are kept."""
    for key, value in child_scope.items():
        if key not in parent_scope:
            parent_scope[key] = value