"""
Color parsing
=============

>>> from gradientmaps.colors import parse_color
>>> parse_color("rebeccapurple") is None
True
>>> parse_color("#f80")
(255, 136, 0, 1.0)
>>> parse_color("hsla(120, 100%, 50%, 0.5)")
(0, 255, 0, 0.5)
"""
from .keywords import CSS_COLOR_TABLE, lookup_keyword
from .css_parser import (
    parse_color,
    clamp_css_byte,
    clamp_css_float,
    parse_css_int,
    parse_css_float,
    css_hue_to_rgb,
    css_hsl_to_rgb_bytes,
)

__all__ = [
    "CSS_COLOR_TABLE",
    "lookup_keyword",
    "parse_color",
    "clamp_css_byte",
    "clamp_css_float",
    "parse_css_int",
    "parse_css_float",
    "css_hue_to_rgb",
    "css_hsl_to_rgb_bytes",
]
