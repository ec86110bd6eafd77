import pytest

from svgtidy.printer import render, render_node
from svgtidy.tree import (
    Cdata,
    Comment,
    Doctype,
    Document,
    Element,
    ProcessingInstruction,
    Text,
)


def test_empty_element_is_self_closing():
    doc = Document([Element("svg", {"class": "foo bar baz"})])
    assert render(doc) == '<svg class="foo bar baz"/>'


def test_nested_elements():
    doc = Document([Element("svg", children=[Element("rect")])])
    assert render(doc) == "<svg><rect/></svg>"


def test_attribute_order_is_preserved():
    svg = Element("svg", {"width": "100", "height": "100"}, [Element("rect")])
    assert render_node(svg) == '<svg width="100" height="100"><rect/></svg>'


def test_text_children():
    svg = Element("svg", children=[Element("g", children=[Text("visible")])])
    assert render_node(svg) == "<svg><g>visible</g></svg>"


def test_comment():
    assert render_node(Comment(" Comment 1 ")) == "<!-- Comment 1 -->"


def test_processing_instruction_with_content():
    doc = Document(
        [ProcessingInstruction("xml", 'version="1.0"'), Element("svg")]
    )
    assert render(doc) == '<?xml version="1.0"?><svg/>'


def test_processing_instruction_without_content():
    assert render_node(ProcessingInstruction("target")) == "<?target?>"


def test_doctype():
    assert render_node(Doctype("svg")) == "<!DOCTYPE svg>"


def test_cdata():
    assert render_node(Cdata("a<b")) == "<![CDATA[a<b]]>"


def test_render_concatenates_root_nodes():
    nodes = [Comment("c"), Element("svg", children=[Element("rect")])]
    assert render(Document(nodes)) == "".join(render_node(n) for n in nodes)


def test_empty_document_renders_empty():
    assert render(Document()) == ""


def test_unknown_node_raises():
    with pytest.raises(TypeError):
        render_node(42)