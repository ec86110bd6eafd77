from svgtidy.plugins.namespaces import RemoveEditorsNSData, RemoveUnusedNS
from svgtidy.printer import render
from svgtidy.tree import Document, Element

INKSCAPE = "http://www.inkscape.org/namespaces/inkscape"
SODIPODI = "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"


def test_remove_editors_ns_data():
    doc = Document(
        [
            Element(
                "svg",
                {
                    "xmlns:inkscape": INKSCAPE,
                    "xmlns:sodipodi": SODIPODI,
                    "inkscape:version": "1.0",
                    "width": "100",
                },
                [
                    Element("sodipodi:namedview", {"id": "base"}),
                    Element(
                        "rect",
                        {"width": "10", "height": "10", "inkscape:label": "rect1"},
                    ),
                ],
            )
        ]
    )
    RemoveEditorsNSData().apply(doc)
    assert render(doc) == '<svg width="100"><rect width="10" height="10"/></svg>'


def test_editors_other_namespaces_kept():
    doc = Document(
        [
            Element(
                "svg",
                {"xmlns:xlink": "urn:example:xlink"},
                [Element("use", {"xlink:href": "#a"})],
            )
        ]
    )
    RemoveEditorsNSData().apply(doc)
    assert render(doc) == '<svg xmlns:xlink="urn:example:xlink"><use xlink:href="#a"/></svg>'


def test_editors_prefix_declared_on_nested_element_applies_everywhere():
    doc = Document(
        [
            Element(
                "svg",
                {"inkscape:label": "top"},
                [Element("g", {"xmlns:inkscape": INKSCAPE, "id": "g"})],
            )
        ]
    )
    RemoveEditorsNSData().apply(doc)
    assert render(doc) == '<svg><g id="g"/></svg>'


def test_remove_unused():
    doc = Document(
        [
            Element(
                "svg",
                {
                    "xmlns:xlink": "urn:example:xlink",
                    "xmlns:sketch": "urn:example:sketch",
                },
                [Element("rect")],
            )
        ]
    )
    RemoveUnusedNS().apply(doc)
    assert render(doc) == "<svg><rect/></svg>"


def test_keep_used():
    doc = Document(
        [
            Element(
                "svg",
                {"xmlns:xlink": "urn:example:xlink"},
                [Element("use", {"xlink:href": "#id"})],
            )
        ]
    )
    before = render(doc)
    RemoveUnusedNS().apply(doc)
    assert render(doc) == before


def test_prefix_used_by_element_name_kept():
    doc = Document(
        [
            Element(
                "svg",
                {"xmlns:foo": "urn:example:foo", "xmlns:bar": "urn:example:bar"},
                [Element("foo:item")],
            )
        ]
    )
    RemoveUnusedNS().apply(doc)
    assert doc.root[0].attributes == {"xmlns:foo": "urn:example:foo"}