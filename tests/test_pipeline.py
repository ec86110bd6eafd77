from svgtidy.pipeline import default_pipeline, optimize_document
from svgtidy.plugins.elements import RemoveComments, RemoveStyleElement
from svgtidy.plugins.paths import ConvertPathData
from svgtidy.plugins.transforms import ConvertTransform
from svgtidy.printer import render
from svgtidy.tree import (
    Comment,
    Doctype,
    Document,
    Element,
    ProcessingInstruction,
    Text,
)


def _messy_document() -> Document:
    return Document(
        [
            ProcessingInstruction("xml", 'version="1.0"'),
            Doctype("svg"),
            Element(
                "svg",
                {"width": "100", "height": "100", "viewBox": "0 0 100.000 100"},
                [
                    Text("\n  "),
                    Comment(" drawn by hand "),
                    Element("title", children=[Text("A title")]),
                    Element("desc", children=[Text("A description")]),
                    Element("metadata", children=[Text("info")]),
                    Element("script", children=[Text("run()")]),
                    Element(
                        "g",
                        children=[
                            Element(
                                "rect",
                                {
                                    "x": "10",
                                    "y": "20",
                                    "width": "100",
                                    "height": "50",
                                    "fill": "black",
                                },
                            )
                        ],
                    ),
                    Text("\n"),
                ],
            ),
        ]
    )


def test_default_pipeline_order():
    plugins = default_pipeline()
    names = [type(p).__name__ for p in plugins]
    assert len(names) == 35
    assert names[0] == "RemoveDoctype"
    assert names[-1] == "SortDefsChildren"
    assert names.index("ConvertShapeToPath") < names.index("ConvertPathData")
    assert not any(isinstance(p, RemoveStyleElement) for p in plugins)


def test_precision_reaches_configurable_plugins():
    plugins = default_pipeline(5)
    path = next(p for p in plugins if isinstance(p, ConvertPathData))
    transform = next(p for p in plugins if isinstance(p, ConvertTransform))
    assert path.float_precision == 5
    assert transform.float_precision == 5
    assert transform.deg_precision == 5


def test_optimize_is_stable_on_second_run():
    doc = _messy_document()
    first = optimize_document(doc)
    second = optimize_document(doc)
    assert second == first


def test_custom_plugin_list():
    doc = Document([Element("svg", children=[Comment(" Comment 1 "), Element("rect")])])
    assert optimize_document(doc, [RemoveComments()]) == "<svg><rect/></svg>"


def test_empty_plugin_list_leaves_document_alone():
    doc = _messy_document()
    before = render(doc)
    assert optimize_document(doc, []) == before