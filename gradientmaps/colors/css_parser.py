"""
CSS color string parsing.

Accepts color keywords, ``#rgb``/``#rrggbb`` hex and the comma-separated
``rgb()``, ``rgba()``, ``hsl()`` and ``hsla()`` functional notations, and
returns an ``(r, g, b, a)`` tuple with byte channels in [0, 255] and alpha in
[0, 1]. Clamping and rounding follow what browsers do for CSS3 colors, so
tables built from these values match the ones a page would compute.
"""
import math
from typing import List, Optional
from boundednumbers.functions import clamp
from ..config import BYTE_MAX, ALPHA_MAX
from ..types.color_types import RGBA
from ..utils.num_utils import round_half_up, leading_number
from .keywords import lookup_keyword

_HEX_DIGITS = frozenset("0123456789abcdef")


def clamp_css_byte(value: float) -> int:
    """Round (ties up) and clamp to an integer byte in [0, 255]."""
    return round_half_up(clamp(value, 0, BYTE_MAX))


def clamp_css_float(value: float) -> float:
    """Clamp to a float in [0, 1]."""
    return float(clamp(value, 0.0, ALPHA_MAX))


def parse_css_int(text: str) -> Optional[int]:
    """Parse a byte channel: an integer, or a percentage of 255."""
    if text.endswith("%"):
        number = leading_number(text)
        return None if number is None else clamp_css_byte(number / 100 * 255)
    number = leading_number(text, allow_fraction=False)
    return None if number is None else clamp_css_byte(number)


def parse_css_float(text: str) -> Optional[float]:
    """Parse a unit value: a float, or a percentage of 1."""
    number = leading_number(text)
    if number is None:
        return None
    if text.endswith("%"):
        return clamp_css_float(number / 100)
    return clamp_css_float(number)


def css_hue_to_rgb(m1: float, m2: float, h: float) -> float:
    """One channel of the CSS3 HSL to RGB algorithm, ``h`` in turns."""
    if h < 0:
        h += 1
    elif h > 1:
        h -= 1

    if h * 6 < 1:
        return m1 + (m2 - m1) * h * 6
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1


def css_hsl_to_rgb_bytes(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert CSS HSL to byte RGB.

    Args:
        h: Hue in degrees, any range (wrapped to [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h = math.fmod(math.fmod(h, 360) + 360, 360) / 360
    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2
    return (
        clamp_css_byte(css_hue_to_rgb(m1, m2, h + 1 / 3) * 255),
        clamp_css_byte(css_hue_to_rgb(m1, m2, h) * 255),
        clamp_css_byte(css_hue_to_rgb(m1, m2, h - 1 / 3) * 255),
    )


def _parse_hex(digits: str) -> Optional[RGBA]:
    if not digits or not set(digits) <= _HEX_DIGITS:
        return None
    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return (r, g, b, 1.0)
    if len(digits) == 6:
        iv = int(digits, 16)
        return ((iv & 0xFF0000) >> 16, (iv & 0xFF00) >> 8, iv & 0xFF, 1.0)
    return None


def _parse_alpha(params: List[str]) -> Optional[float]:
    if len(params) != 4:
        return None
    return parse_css_float(params.pop())


def _parse_functional(name: str, params: List[str]) -> Optional[RGBA]:
    alpha: Optional[float] = 1.0
    if name in ("rgba", "hsla"):
        alpha = _parse_alpha(params)
        if alpha is None:
            return None
    elif name not in ("rgb", "hsl"):
        return None
    if len(params) != 3:
        return None

    if name.startswith("rgb"):
        channels = [parse_css_int(p) for p in params]
        if any(c is None for c in channels):
            return None
        r, g, b = channels
        return (r, g, b, alpha)

    hue = leading_number(params[0])
    s = parse_css_float(params[1])
    l = parse_css_float(params[2])
    if hue is None or s is None or l is None:
        return None
    return (*css_hsl_to_rgb_bytes(hue, s, l), alpha)


def parse_color(text: str) -> Optional[RGBA]:
    """
    Parse a CSS color string.

    Args:
        text: Color keyword, hex or functional notation. Spaces are ignored
            and matching is case-insensitive.

    Returns:
        (r, g, b, a) tuple, or None when the string is not a recognized color.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_color expects a string, got {type(text).__name__}")

    value = text.replace(" ", "").lower()

    keyword = lookup_keyword(value)
    if keyword is not None:
        return keyword

    if value.startswith("#"):
        return _parse_hex(value[1:])

    op = value.find("(")
    ep = value.find(")")
    if op != -1 and ep + 1 == len(value):
        params = value[op + 1:ep].split(",")
        return _parse_functional(value[:op], params)

    return None
