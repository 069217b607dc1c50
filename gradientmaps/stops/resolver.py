"""
Resolve a gradient declaration into positioned color stops.

Positions are filled in with the CSS gradient rules:

- a first stop without a position sits at 0%, a last one at 100%;
- a stop positioned before an earlier stop is moved up to it;
- runs of unpositioned stops are spread evenly between their neighbours,
  using a whole-percent step that is accumulated from the left;
- if the ramp does not start at 0% or end at 100%, the end colors are
  extended with an extra stop.

Every step builds a new list; the stops handed in are never modified.
"""
from __future__ import annotations
import warnings
from typing import List, Optional
from ..config import POSITION_MIN, POSITION_MAX
from ..colors.css_parser import parse_color
from ..errors import GradientStopWarning, TokenizeError
from ..types.stop_types import ColorStop, StopList
from ..utils.num_utils import clamp_position, round_half_up
from .tokenizer import split_declaration, split_stop_token, parse_position


def parse_stop(token: str) -> Optional[ColorStop]:
    """
    Parse a single color-stop token.

    Returns:
        ColorStop with ``pos`` None when no position was given, or None when
        the token is malformed or its color is not recognized. A
        ``GradientStopWarning`` is issued for every dropped token.
    """
    try:
        stop_token = split_stop_token(token)
        pos = parse_position(stop_token.position_term)
    except TokenizeError as exc:
        warnings.warn(f"Dropping color stop: {exc}", GradientStopWarning, stacklevel=3)
        return None

    color = parse_color(stop_token.color_term)
    if color is None:
        warnings.warn(
            f"Dropping color stop {token!r}: unrecognized color {stop_token.color_term!r}",
            GradientStopWarning,
            stacklevel=3,
        )
        return None
    return ColorStop(color, pos)


def parse_stops(declaration: str) -> StopList:
    """Parse every token of a declaration, skipping the malformed ones."""
    if not isinstance(declaration, str):
        raise TypeError(f"Gradient declaration must be a string, got {type(declaration).__name__}")
    stops = (parse_stop(token) for token in split_declaration(declaration))
    return [stop for stop in stops if stop is not None]


def _default_endpoints(stops: StopList) -> StopList:
    first, *rest = stops
    first = first.with_pos(
        POSITION_MIN if first.pos is None else clamp_position(first.pos, POSITION_MIN, POSITION_MAX)
    )
    if not rest:
        return [first]
    last = rest[-1]
    last = last.with_pos(
        POSITION_MAX if last.pos is None else clamp_position(last.pos, POSITION_MIN, POSITION_MAX)
    )
    return [first, *rest[:-1], last]


def _enforce_monotonic(stops: StopList) -> StopList:
    """Raise explicit positions to the largest explicit position before them."""
    running = stops[0].pos
    result = [stops[0]]
    for stop in stops[1:]:
        if stop.pos is None:
            result.append(stop)
            continue
        pos = min(max(stop.pos, running), POSITION_MAX)
        running = pos
        result.append(stop.with_pos(pos))
    return result


def _fill_unpositioned_runs(stops: StopList) -> StopList:
    """Give every run of unpositioned stops evenly stepped positions."""
    result = [stops[0]]
    index = 1
    while index < len(stops):
        if stops[index].is_positioned:
            result.append(stops[index])
            index += 1
            continue

        # The last stop is always positioned, so the run ends before it.
        end_index = next(j for j in range(index + 1, len(stops)) if stops[j].is_positioned)
        start = result[-1].pos
        end = stops[end_index].pos
        delta = round_half_up((end - start) / (end_index - index + 1))

        pos = start
        for stop in stops[index:end_index]:
            pos = min(pos + delta, end)
            result.append(stop.with_pos(pos))
        index = end_index
    return result


def _pad_endpoints(stops: StopList) -> StopList:
    result = list(stops)
    if result[0].pos != POSITION_MIN:
        result.insert(0, ColorStop(result[0].color, POSITION_MIN))
    if result[-1].pos != POSITION_MAX:
        result.append(ColorStop(result[-1].color, POSITION_MAX))
    return result


def fill_positions(stops: StopList) -> StopList:
    """
    Resolve the positions of already parsed stops.

    Args:
        stops: Stops in declaration order; ``pos`` None where unspecified.

    Returns:
        New list, every ``pos`` set, non-decreasing, from 0 to 100.
        Empty input gives an empty list.
    """
    if not stops:
        return []
    resolved = _default_endpoints(stops)
    resolved = _enforce_monotonic(resolved)
    resolved = _fill_unpositioned_runs(resolved)
    return _pad_endpoints(resolved)


def resolve_stops(declaration: str) -> StopList:
    """
    Parse a gradient declaration and resolve every stop position.

    Args:
        declaration: Comma-separated color stops, e.g. ``"red, blue 30%, green"``.

    Returns:
        Resolved stops, or an empty list when no stop could be parsed
        (nothing to apply).

    Example:
        >>> [stop.pos for stop in resolve_stops("red, blue, green")]
        [0.0, 50.0, 100.0]
    """
    return fill_positions(parse_stops(declaration))
