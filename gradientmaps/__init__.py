"""
gradientmaps - CSS gradient maps as lookup tables
==================================================

Turns a CSS-style list of color stops into an evenly spaced table of RGBA
colors, ready to drive a per-channel lookup-table stage such as an SVG
``feComponentTransfer`` filter.

Quick Start
-----------
>>> from gradientmaps import resolve_stops, find_segment_count, distribute_colors
>>> stops = resolve_stops("red, blue 25%, green 75%, yellow")
>>> n_segs = find_segment_count(stops)
>>> n_segs
4
>>> table = distribute_colors(stops, n_segs)
>>> table[1]
(0.0, 0.0, 255.0, 1.0)

Modules
-------
- colors: CSS color string parsing and the keyword table
- stops: declaration tokenizing and stop position resolution
- segments: segment count search
- distribute: color table construction
- render: component-transfer tables, SVG filter markup, Pillow images
"""

from .types.stop_types import ColorStop
from .colors.css_parser import parse_color
from .stops.resolver import resolve_stops, parse_stops, fill_positions
from .segments import find_segment_count
from .distribute import distribute_colors
from .color_table import ColorTable
from .gradient_map import GradientMap, build_color_table, apply_gradient_map
from .render import ComponentTransferTables, build_svg_filter, filter_css, apply_to_image
from .errors import GradientStopWarning, TokenizeError

__version__ = "1.0.0"

__all__ = [
    "ColorStop",
    "ColorTable",
    "parse_color",
    "resolve_stops",
    "parse_stops",
    "fill_positions",
    "find_segment_count",
    "distribute_colors",
    "GradientMap",
    "build_color_table",
    "apply_gradient_map",
    "ComponentTransferTables",
    "build_svg_filter",
    "filter_css",
    "apply_to_image",
    "GradientStopWarning",
    "TokenizeError",
    "__version__",
]
