import pytest

from svgtidy.plugins.transforms import ConvertTransform, Matrix, parse_transform
from svgtidy.printer import render
from svgtidy.tree import Document, Element


def test_translate_merge():
    out = ConvertTransform().optimize("translate(10) translate(20)")
    assert "translate(30 0)" in out


def test_scale_merge():
    out = ConvertTransform().optimize("scale(2) scale(3)")
    assert "scale(6)" in out


def test_identity():
    assert ConvertTransform().optimize("translate(0) scale(1)") == ""


def test_empty_input_is_identity():
    assert ConvertTransform().optimize("") == ""


def test_non_uniform_scale():
    assert ConvertTransform().optimize("scale(2 3)") == "scale(2 3)"


def test_translate_leading_zero_removed():
    assert ConvertTransform().optimize("translate(0.5)") == "translate(.5 0)"


def test_general_matrix_kept():
    out = ConvertTransform().optimize("matrix(1 2 3 4 5 6)")
    assert out == "matrix(1 2 3 4 5 6)"


def test_rotate_quarter_turn():
    assert ConvertTransform().optimize("rotate(90)") == "matrix(0 1 -1 0 0 0)"


def test_precision_applies():
    out = ConvertTransform(float_precision=1).optimize("translate(1.26 2)")
    assert out == "translate(1.3 2)"


def test_parse_translate_defaults():
    assert parse_transform("translate(7)") == [Matrix(1.0, 0.0, 0.0, 1.0, 7.0, 0.0)]


def test_parse_scale_single_argument_is_uniform():
    assert parse_transform("scale(4)") == [Matrix(4.0, 0.0, 0.0, 4.0, 0.0, 0.0)]


def test_parse_matrix_requires_six_arguments():
    assert parse_transform("matrix(1 2 3 4 5)") == []


def test_parse_unknown_name_ignored():
    assert parse_transform("wobble(3) translate(1, 2)") == [
        Matrix(1.0, 0.0, 0.0, 1.0, 1.0, 2.0)
    ]


def test_parse_rotate_about_point():
    (m,) = parse_transform("rotate(90, 10, 10)")
    assert m.a == pytest.approx(0.0, abs=1e-12)
    assert m.b == pytest.approx(1.0)
    assert m.c == pytest.approx(-1.0)
    assert m.e == pytest.approx(20.0)
    assert m.f == pytest.approx(0.0, abs=1e-12)


def test_matrix_identity_and_multiply():
    ident = Matrix.identity()
    assert ident.is_identity()
    m = Matrix(2.0, 0.0, 0.0, 3.0, 4.0, 5.0)
    assert ident.multiply(m) == m
    assert m.multiply(ident) == m
    assert not m.is_identity()


def test_multiply_order_applies_right_first():
    scale = Matrix(2.0, 0.0, 0.0, 2.0, 0.0, 0.0)
    shift = Matrix(1.0, 0.0, 0.0, 1.0, 10.0, 0.0)
    assert scale.multiply(shift).e == 20.0
    assert shift.multiply(scale).e == 10.0


def test_apply_removes_identity_and_rewrites_others():
    doc = Document(
        [
            Element(
                "svg",
                children=[
                    Element("rect", {"transform": "translate(0 0)"}),
                    Element("g", {"transform": "scale(2) scale(3)"}),
                ],
            )
        ]
    )
    ConvertTransform().apply(doc)
    assert render(doc) == '<svg><rect/><g transform="scale(6)"/></svg>'