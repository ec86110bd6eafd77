import pytest

from svgtidy.plugins.base import (
    Plugin,
    find_used_ids,
    format_float,
    format_rounded,
)
from svgtidy.tree import Comment, Document, Element


def test_find_used_ids_from_href():
    nodes = [
        Element(
            "svg",
            children=[
                Element("rect", {"id": "unused"}),
                Element("rect", {"id": "used"}),
                Element("use", {"href": "#used"}),
            ],
        )
    ]
    assert find_used_ids(nodes) == {"used"}


def test_find_used_ids_from_url_reference():
    nodes = [
        Element(
            "svg",
            children=[
                Element("linearGradient", {"id": "grad"}),
                Element("rect", {"fill": "url(#grad)"}),
            ],
        )
    ]
    assert find_used_ids(nodes) == {"grad"}


def test_find_used_ids_url_with_spaces():
    nodes = [Element("rect", {"fill": "url( #grad )", "mask": "url(#m)"})]
    assert find_used_ids(nodes) == {"grad", "m"}


def test_find_used_ids_ignores_lone_hash_and_non_elements():
    nodes = [Comment("#used"), Element("use", {"href": "#"})]
    assert find_used_ids(nodes) == set()


@pytest.mark.parametrize("value", [100.0, 50.5, 0.1, -0.5, 1e21, 1e-7, 123.456])
def test_format_float_round_trips(value):
    text = format_float(value)
    assert float(text) == value
    assert "e" not in text.lower()


def test_format_float_drops_integer_fraction():
    assert format_float(100.0) == "100"
    assert format_float(50.5) == "50.5"


def test_format_rounded_precision():
    assert format_rounded(100.1234, 3, False) == "100.123"
    assert format_rounded(100.5, 3, False) == "100.5"


def test_format_rounded_strips_leading_zero():
    assert format_rounded(0.123456, 3, True) == ".123"
    assert format_rounded(0.5, 3, True) == ".5"
    assert format_rounded(-0.5, 3, True) == "-.5"


def test_format_rounded_keeps_leading_zero_when_asked():
    assert format_rounded(0.5, 3, False) == "0.5"


def test_format_rounded_half_away_from_zero():
    assert format_rounded(2.5, 0, False) == "3"
    assert format_rounded(-2.5, 0, False) == "-3"


def test_format_rounded_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_rounded(1.0, -1, True)


def test_plugin_is_abstract():
    with pytest.raises(TypeError):
        Plugin()


def test_plugin_subclass_applies():
    class Clear(Plugin):
        def apply(self, doc):
            doc.root.clear()

    doc = Document([Element("svg")])
    Clear().apply(doc)
    assert doc.root == []