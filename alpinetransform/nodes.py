"""Template syntax tree node types."""

from __future__ import annotations

from dataclasses import dataclass, field


class Node:
    """Base class of every template node."""


@dataclass
class Attribute:
    """An element attribute, optionally an Alpine.js directive."""

    name: str = ""
    value: str = ""
    dynamic: bool = False
    is_alpine: bool = False
    alpine_type: str = ""


@dataclass
class Element(Node):
    """An HTML element with attributes and child nodes."""

    tag_name: str = ""
    attributes: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    self_closing: bool = False


@dataclass
class TextNode(Node):
    """Literal text, possibly holding brace expressions."""

    content: str = ""


@dataclass
class ExpressionNode(Node):
    """A standalone expression to be rendered as text."""

    expression: str = ""


@dataclass
class Conditional(Node):
    """An if / else-if / else block."""

    if_condition: str = ""
    if_content: list[Node] = field(default_factory=list)
    else_if_conditions: list[str] = field(default_factory=list)
    else_if_content: list[list[Node]] = field(default_factory=list)
    else_content: list[Node] = field(default_factory=list)


@dataclass
class Loop(Node):
    """A loop over a collection; ``is_of`` marks object iteration."""

    iterator: str = ""
    value: str = ""
    collection: str = ""
    content: list[Node] = field(default_factory=list)
    is_of: bool = False


@dataclass
class ComponentProp:
    """A property passed to a component."""

    name: str = ""
    value: str = ""
    is_dynamic: bool = False
    is_shorthand: bool = False


@dataclass
class ComponentNode(Node):
    """A use of a named component with its props."""

    name: str = ""
    props: list[ComponentProp] = field(default_factory=list)


@dataclass
class FenceVariable:
    """A variable declared in a fence section."""

    name: str = ""
    value: str = ""


@dataclass
class FenceProp:
    """A prop declared in a fence section, with an optional default."""

    name: str = ""
    default_value: str = ""


@dataclass
class FenceSection(Node):
    """The script fence at the top of a template."""

    variables: list[FenceVariable] = field(default_factory=list)
    props: list[FenceProp] = field(default_factory=list)
    raw_content: str = ""


@dataclass
class Template:
    """A whole template: its top-level nodes."""

    root_nodes: list[Node] = field(default_factory=list)


@dataclass
class ElseNode(Node):
    """Marker for an else clause."""


@dataclass
class ElseIfNode(Node):
    """Marker for an else-if clause."""

    condition: str = ""


@dataclass
class IfEndNode(Node):
    """Marker for the end of a conditional."""


@dataclass
class ForEndNode(Node):
    """Marker for the end of a loop."""