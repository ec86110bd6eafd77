"""The default optimisation pipeline and a runner for plugin lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from svgtidy.plugins.base import Plugin
from svgtidy.plugins.cleanup import (
    CleanupAttrs,
    CleanupIds,
    CleanupListOfValues,
    CleanupNumericValues,
    RemoveEmptyAttrs,
    RemoveUnknownsAndDefaults,
    RemoveUselessDefs,
    RemoveUselessStrokeAndFill,
)
from svgtidy.plugins.colors import ConvertColors, ConvertOneStopGradients
from svgtidy.plugins.elements import (
    RemoveComments,
    RemoveDesc,
    RemoveDoctype,
    RemoveEmptyContainers,
    RemoveEmptyText,
    RemoveHiddenElems,
    RemoveMetadata,
    RemoveRasterImages,
    RemoveScriptElement,
    RemoveTitle,
    RemoveXMLProcInst,
)
from svgtidy.plugins.namespaces import RemoveEditorsNSData, RemoveUnusedNS
from svgtidy.plugins.paths import ConvertPathData
from svgtidy.plugins.shapes import ConvertEllipseToCircle, ConvertShapeToPath
from svgtidy.plugins.structure import (
    CollapseGroups,
    ConvertStyleToAttrs,
    MergePaths,
    MoveElemsAttrsToGroup,
    MoveGroupAttrsToElems,
    RemoveDimensions,
    SortAttrs,
    SortDefsChildren,
)
from svgtidy.plugins.transforms import ConvertTransform
from svgtidy.printer import render
from svgtidy.tree import Document


def default_pipeline(precision: int = 3) -> list[Plugin]:
    """Return the standard plugins, in the order they must run."""
    return [
        RemoveDoctype(),
        RemoveXMLProcInst(),
        RemoveComments(),
        RemoveMetadata(),
        RemoveTitle(),
        RemoveDesc(),
        RemoveEditorsNSData(),
        RemoveScriptElement(),
        RemoveRasterImages(),
        ConvertStyleToAttrs(),
        CleanupAttrs(),
        RemoveUselessStrokeAndFill(),
        RemoveDimensions(),
        MoveGroupAttrsToElems(),
        MoveElemsAttrsToGroup(),
        ConvertOneStopGradients(),
        CleanupIds(),
        RemoveUselessDefs(),
        RemoveEmptyContainers(),
        RemoveHiddenElems(),
        RemoveEmptyText(),
        CollapseGroups(),
        ConvertEllipseToCircle(),
        ConvertShapeToPath(),
        ConvertPathData(float_precision=precision, leading_zero=True),
        ConvertTransform(float_precision=precision, deg_precision=precision),
        CleanupNumericValues(
            float_precision=precision, remove_px=True, leading_zero=True
        ),
        CleanupListOfValues(
            float_precision=precision,
            default_px=True,
            convert_to_px=True,
            leading_zero=True,
        ),
        RemoveUnknownsAndDefaults(),
        MergePaths(),
        ConvertColors(),
        RemoveEmptyAttrs(),
        RemoveUnusedNS(),
        SortAttrs(),
        SortDefsChildren(),
    ]


def optimize_document(doc: Document, plugins: Optional[Iterable[Plugin]] = None) -> str:
    """Apply ``plugins`` (the default pipeline if omitted) and render the result."""
    for plugin in default_pipeline() if plugins is None else plugins:
        plugin.apply(doc)
    return render(doc)