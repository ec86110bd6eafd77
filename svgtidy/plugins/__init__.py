"""Plugins that each apply one optimization to an SVG document tree."""