# svgtidy

svgtidy shrinks SVG documents. It works on an in-memory tree of the
document and runs a sequence of plugins over it. Each plugin performs one
small, safe rewrite. When the pipeline has finished, the tree is rendered
back to compact markup.

## What the plugins do

- **Removing clutter.** Comments, doctype and XML declarations, metadata,
  titles, descriptions, scripts, raster images and editor namespaces
  (Inkscape, Sodipodi, Illustrator) are dropped. Namespace declarations
  that nothing uses are dropped too.
- **Cleaning attributes.** Whitespace in attribute values is collapsed.
  Numbers and lists of numbers are rounded and the `px` unit is removed.
  Empty attributes and attributes left at their default value are dropped.
  Inline `style` declarations are turned into presentation attributes.
- **Simplifying structure.** Groups without attributes are collapsed.
  Group transforms are pushed down to the children. Inheritable attributes
  that all children share are hoisted to the group. Unused ids and
  definitions are removed, as are empty containers, hidden elements and
  shapes that draw nothing.
- **Rewriting geometry.** Shapes become paths. An ellipse with equal radii
  becomes a circle. Path data is rewritten with the shorter of absolute and
  relative commands. A chain of transforms is multiplied into one compact
  transform. Adjacent paths with identical attributes are merged.
- **Shortening colours.** `rgb(...)` values and long colour names are
  turned into short hex codes, and `#rrggbb` is shortened to `#rgb` where
  possible. A gradient with only one stop is replaced by its colour.
- **Normalising output.** Attributes are sorted, and so are the children of
  `<defs>`.

## Usage

Build a document from the classes in `svgtidy.tree`. Then run the default
pipeline over it and render the result:

```python
from svgtidy.tree import Document, Element
from svgtidy.pipeline import default_pipeline, optimize_document
from svgtidy.printer import render

doc = Document(root=[
    Element(
        name="svg",
        attributes={"width": "100px", "height": "100px", "viewBox": "0 0 100 100"},
        children=[
            Element(name="g", attributes={}, children=[
                Element(name="rect", attributes={"x": "10", "y": "20", "width": "30", "height": "40"}),
            ]),
        ],
    ),
])

optimize_document(doc, default_pipeline(3))
print(render(doc))
```

`default_pipeline(precision)` returns the standard plugins in the order
they work best. `precision` is the number of decimal places kept for
coordinates, transforms and other numeric values.

To run your own selection of plugins, pass a list of them instead. The
plugins live in the `svgtidy.plugins` sub-package:

```python
from svgtidy.plugins.elements import RemoveComments, RemoveTitle
from svgtidy.plugins.colors import ConvertColors

optimize_document(doc, [RemoveComments(), RemoveTitle(), ConvertColors()])
```

Every plugin has an `apply(doc)` method that changes the document in place.
You can write your own by subclassing `svgtidy.plugins.base.Plugin`.

## Walking the tree

`svgtidy.tree.Visitor` walks a document depth-first. Subclass it and
override `visit_element` (or `visit_node`) to inspect or change elements.
Call the base implementation to continue into the children.