"""Spread the stop colors over the entries of a ColorTable."""
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np
from .config import MAX_SEGMENTS, POSITION_MAX
from .color_table import ColorTable
from .types.stop_types import ColorStop
from .types.color_types import rgba_to_array
from .utils.num_utils import round_half_up


def nearest_entry(pos: float, n_segs: int) -> int:
    """Index of the table entry closest to ``pos``."""
    return round_half_up(pos / (POSITION_MAX / n_segs))


def _place_stops(stops: Sequence[ColorStop], n_segs: int) -> List[Optional[np.ndarray]]:
    entries: List[Optional[np.ndarray]] = [None] * (n_segs + 1)
    for stop in stops[1:-1]:
        # Later stops overwrite earlier ones landing on the same entry.
        entries[nearest_entry(stop.pos, n_segs)] = rgba_to_array(stop.color)
    entries[0] = rgba_to_array(stops[0].color)
    entries[n_segs] = rgba_to_array(stops[-1].color)
    return entries


def _fill_gaps(entries: List[Optional[np.ndarray]]) -> List[np.ndarray]:
    """Linearly interpolate every run of empty entries between two set ones."""
    filled = list(entries)
    index = 1
    while index < len(filled):
        if filled[index] is not None:
            index += 1
            continue
        end_index = next(j for j in range(index + 1, len(filled)) if filled[j] is not None)
        current = filled[index - 1]
        step = (filled[end_index] - current) / (end_index - index + 1)
        # Accumulate from the left boundary, one step per entry.
        for k in range(index, end_index):
            current = current + step
            filled[k] = current
        index = end_index
    return filled


def distribute_colors(stops: Sequence[ColorStop], n_segs: int) -> ColorTable:
    """
    Build the color table for resolved stops.

    Args:
        stops: Resolved stops (at least 2, first at 0, last at 100).
        n_segs: Number of segments, usually from ``find_segment_count``.

    Returns:
        ColorTable with ``n_segs + 1`` entries. The first and last entries are
        the end stop colors; each interior stop's color sits at its nearest
        entry; everything else is a per-channel linear blend.
    """
    if isinstance(n_segs, bool) or not isinstance(n_segs, (int, np.integer)):
        raise TypeError(f"n_segs must be an integer, got {type(n_segs).__name__}")
    if not 1 <= n_segs <= MAX_SEGMENTS:
        raise ValueError(f"n_segs must be in [1, {MAX_SEGMENTS}], got {n_segs}")
    if len(stops) < 2:
        raise ValueError(f"At least 2 stops are required, got {len(stops)}")
    if any(stop.pos is None for stop in stops):
        raise ValueError("All stops must be positioned; resolve them first")

    entries = _fill_gaps(_place_stops(stops, int(n_segs)))
    return ColorTable(np.stack(entries))
