"""
Scanner for ``<gradient-stops>`` declarations.

A declaration is a comma-separated list of color-stop tokens. Each token is a
color term (keyword, ``#hex`` or ``name(...)`` functional notation) optionally
followed by whitespace and a position term (``<number>%`` or a bare fraction).
Commas inside parentheses belong to the color term.
"""
from __future__ import annotations
from typing import List, NamedTuple, Optional
from ..config import POSITION_MIN, POSITION_MAX
from ..errors import TokenizeError
from ..utils.num_utils import clamp_position, is_plain_number


class StopToken(NamedTuple):
    color_term: str
    position_term: Optional[str] = None


def split_declaration(declaration: str) -> List[str]:
    """
    Split a declaration on top-level commas.

    Args:
        declaration: e.g. ``"red, rgb(0, 0, 255) 30%, green"``

    Returns:
        Stripped, non-empty token strings in declaration order.
    """
    parts: List[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(declaration):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        elif char == "," and depth == 0:
            parts.append(declaration[start:index])
            start = index + 1
    parts.append(declaration[start:])
    return [part.strip() for part in parts if part.strip()]


def _scan_color_term(token: str) -> int:
    """Return the index one past the end of the leading color term."""
    index = 0
    while index < len(token) and not token[index].isspace() and token[index] not in "()":
        index += 1
    if index == 0:
        raise TokenizeError(f"Missing color in stop {token!r}")
    if index == len(token) or token[index] != "(":
        if index < len(token) and token[index] == ")":
            raise TokenizeError(f"Unbalanced parenthesis in stop {token!r}")
        return index

    depth = 0
    while index < len(token):
        if token[index] == "(":
            depth += 1
        elif token[index] == ")":
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    raise TokenizeError(f"Unbalanced parenthesis in stop {token!r}")


def split_stop_token(token: str) -> StopToken:
    """
    Split one color-stop token into its color and position terms.

    Raises:
        TokenizeError: The token is empty, has unbalanced parentheses, or has
            more than one term after the color.
    """
    token = token.strip()
    if not token:
        raise TokenizeError("Empty color stop")

    end = _scan_color_term(token)
    color_term = token[:end]
    rest = token[end:].strip()
    if not rest:
        return StopToken(color_term)
    if any(char.isspace() for char in rest) or "(" in rest or ")" in rest:
        raise TokenizeError(f"Unexpected terms after color in stop {token!r}")
    return StopToken(color_term, rest)


def parse_position(term: Optional[str]) -> Optional[float]:
    """
    Convert a position term to a percentage.

    ``"30%"`` is 30; a bare number with a decimal point is a fraction of the
    ramp, so ``"0.3"`` is also 30. A bare integer such as ``"30"`` is not a
    position. Results are clamped to [0, 100].

    Raises:
        TokenizeError: The term is not a number or percentage.
    """
    if term is None:
        return None
    if term.endswith("%"):
        number_text, scale = term[:-1], 1.0
    elif "." in term:
        number_text, scale = term, 100.0
    else:
        raise TokenizeError(f"Bare stop position {term!r} must be a fraction, e.g. '0.3'")
    if not is_plain_number(number_text):
        raise TokenizeError(f"Invalid stop position {term!r}")
    return clamp_position(float(number_text) * scale, POSITION_MIN, POSITION_MAX)
