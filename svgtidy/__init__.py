"""SVG optimizer built from a document tree, a printer and a pipeline of plugins."""

__version__ = "0.1.4"