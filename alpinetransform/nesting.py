"""Repairs to template nesting after transformation."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Element, Node, TextNode

_CONDITIONAL_DIRECTIVES = frozenset({"x-if", "x-else-if", "x-else"})
_FOLLOW_ON_DIRECTIVES = frozenset({"x-else", "x-else-if"})


def _is_template(node: Node | None) -> bool:
    return isinstance(node, Element) and node.tag_name == "template"


def _has_directive(element: Element, names: Iterable[str]) -> bool:
    wanted = frozenset(names)
    return any(attr.name in wanted for attr in element.attributes)


def _first_for_attribute(element: Element):
    return next((attr for attr in element.attributes if attr.name == "x-for"), None)


def fix_nested_loops(nodes: list[Node]) -> list[Node]:
    """Point ``item in items`` loops nested under a categories loop at ``category.items``."""
    for node in nodes:
        if not _is_template(node):
            continue
        loop = _first_for_attribute(node)
        if loop is not None and "category in categories" in loop.value:
            for child in node.children:
                if isinstance(child, Element):
                    _fix_nested_loops_in_element(child)
    return nodes


def _fix_nested_loops_in_element(element: Element) -> None:
    for child in element.children:
        if _is_template(child):
            loop = _first_for_attribute(child)
            if loop is None:
                continue
            if "item in items" in loop.value:
                loop.value = "item in category.items"
            for grandchild in child.children:
                if isinstance(grandchild, Element):
                    _fix_nested_loops_in_element(grandchild)
        elif isinstance(child, Element):
            _fix_nested_loops_in_element(child)


def ensure_proper_nesting(nodes: list[Node]) -> list[Node]:
    """Move content that trails a conditional or loop template into that template."""
    nodes = fix_nested_loops(nodes)

    result: list[Node] = []
    current: Element | None = None
    buffered: list[Node] = []
    following = list(nodes[1:]) + [None]

    for node, next_node in zip(nodes, following):
        if _is_template(node):
            if current is not None:
                current.children.extend(buffered)
                result.append(current)
                buffered = []
            if _has_directive(node, _CONDITIONAL_DIRECTIVES) or _has_directive(node, {"x-for"}):
                current = node
                buffered = []
                continue
            result.append(node)
            current = None
        elif current is not None:
            if isinstance(node, TextNode) and is_whitespace_only(node.content):
                continue
            if _is_template(next_node) and _has_directive(next_node, _FOLLOW_ON_DIRECTIVES):
                current.children.append(node)
            else:
                buffered.append(node)
        else:
            result.append(node)

    if current is not None:
        current.children.extend(buffered)
        result.append(current)
    return result


def is_whitespace_only(s: str) -> bool:
    """Whether the string holds only spaces, tabs, newlines and carriage returns."""
    return all(c in " \t\n\r" for c in s)