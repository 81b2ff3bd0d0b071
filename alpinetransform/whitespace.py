"""Whitespace normalisation for transformed node lists."""

from __future__ import annotations

import dataclasses
import re

from .nodes import Element, Node, TextNode

_UNICODE_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)
_RUN = re.compile(r"[\t\n\f\r ]+")
_LEADING = re.compile(r"\A[\t\n\f\r ]+")
_TRAILING = re.compile(r"[\t\n\f\r ]+\Z")


def preserve_whitespace(nodes: list[Node]) -> list[Node]:
    """Normalise text nodes, dropping blank ones at the edges, recursing into elements."""
    if not nodes:
        return nodes
    last = len(nodes) - 1
    result: list[Node] = []
    for position, node in enumerate(nodes):
        if isinstance(node, TextNode):
            blank = is_only_whitespace(node.content)
            content = process_whitespace(
                node.content,
                position > 0 or not blank,
                position < last or not blank,
            )
            if content:
                result.append(TextNode(content=content))
        elif isinstance(node, Element) and node.children:
            result.append(dataclasses.replace(node, children=preserve_whitespace(node.children)))
        else:
            result.append(node)
    return result


def is_only_whitespace(s: str) -> bool:
    """Whether the string holds nothing but whitespace."""
    return s.strip(_UNICODE_SPACE) == ""


def process_whitespace(content: str, preserve_leading: bool, preserve_trailing: bool) -> str:
    """Collapse inner whitespace runs, keeping the requested edges."""
    if not content:
        return ""
    if is_only_whitespace(content) and not preserve_leading and not preserve_trailing:
        return ""

    leading = ""
    trailing = ""
    if preserve_leading:
        match = _LEADING.search(content)
        if match:
            leading = match.group(0)
    if preserve_trailing:
        match = _TRAILING.search(content)
        if match:
            trailing = match.group(0)

    trimmed = content.strip(_UNICODE_SPACE)
    if not trimmed:
        return " " if preserve_leading or preserve_trailing else ""
    return leading + _RUN.sub(" ", trimmed) + trailing