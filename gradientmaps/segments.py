"""Choose how many equal-width segments the lookup table needs."""
import math
from typing import Sequence
from .config import MAX_SEGMENTS, ALIGNMENT_TOLERANCE, POSITION_MAX
from .types.stop_types import ColorStop


def is_aligned(pos: float, seg_size: float, tolerance: float = ALIGNMENT_TOLERANCE) -> bool:
    """
    Check that ``pos`` lies on a segment boundary, within ``tolerance``.

    Positions inside the first segment never match, so an interior stop can
    not collapse onto the first table entry.
    """
    if pos < seg_size:
        return False
    rem = math.fmod(pos, seg_size)
    return rem < tolerance or (seg_size - rem) < tolerance


def find_segment_count(
    stops: Sequence[ColorStop],
    max_segments: int = MAX_SEGMENTS,
    tolerance: float = ALIGNMENT_TOLERANCE,
) -> int:
    """
    Find the smallest segment count whose boundaries match every interior stop.

    Args:
        stops: Resolved stops (first at 0, last at 100).
        max_segments: Upper bound of the search, at most ``MAX_SEGMENTS`` so
            the result is always a valid ``distribute_colors`` input.
        tolerance: Allowed distance between a stop and its nearest boundary.

    Returns:
        Segment count in ``[1, max_segments]``. When nothing matches,
        ``max_segments`` is returned and stops may sit up to ``tolerance``
        away from their table entry.
    """
    if not 1 <= max_segments <= MAX_SEGMENTS:
        raise ValueError(f"max_segments must be in [1, {MAX_SEGMENTS}], got {max_segments}")

    interior = [stop.pos for stop in stops[1:-1]]
    for n_segs in range(1, max_segments + 1):
        seg_size = POSITION_MAX / n_segs
        if all(is_aligned(pos, seg_size, tolerance) for pos in interior):
            return n_segs
    return max_segments
