from alpinetransform.nodes import Attribute, Element, ExpressionNode, TextNode
from alpinetransform.whitespace import (
    is_only_whitespace,
    preserve_whitespace,
    process_whitespace,
)


def test_is_only_whitespace():
    assert is_only_whitespace("")
    assert is_only_whitespace(" \t\n ")
    assert not is_only_whitespace(" a ")


def test_process_empty():
    assert process_whitespace("", True, True) == ""


def test_process_blank_without_preservation():
    assert process_whitespace("  \n ", False, False) == ""


def test_process_blank_with_preservation_is_single_space():
    assert process_whitespace("   \n", True, False) == " "
    assert process_whitespace("\t", False, True) == " "


def test_process_collapses_inner_runs():
    assert process_whitespace("a   b\n\tc", False, False) == "a b c"


def test_process_keeps_requested_edges():
    assert process_whitespace("  a  b  ", True, True) == "  a b  "
    assert process_whitespace("  text", False, True) == "text"
    assert process_whitespace("text  ", True, False) == "text"


def test_preserve_empty_list():
    assert preserve_whitespace([]) == []


def test_preserve_drops_lone_blank_node():
    assert preserve_whitespace([TextNode(content="   ")]) == []


def test_preserve_keeps_blank_between_elements():
    first = Element(tag_name="p")
    second = Element(tag_name="p")
    result = preserve_whitespace([first, TextNode(content="  \n  "), second])
    assert len(result) == 3
    assert result[1] == TextNode(content=" ")
    assert result[0] is first
    assert result[2] is second


def test_preserve_recurses_without_mutating_original():
    inner = [TextNode(content="Hello   world")]
    element = Element(tag_name="div", attributes=[Attribute(name="class", value="x")], children=inner)
    result = preserve_whitespace([element])
    assert result[0] is not element
    assert result[0].children == [TextNode(content="Hello world")]
    assert element.children[0].content == "Hello   world"
    assert result[0].attributes == element.attributes


def test_preserve_passes_other_nodes_through():
    expr = ExpressionNode(expression="count")
    empty = Element(tag_name="span")
    result = preserve_whitespace([expr, empty])
    assert result[0] is expr
    assert result[1] is empty