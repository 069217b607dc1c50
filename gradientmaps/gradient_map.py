"""
Gradient map pipeline: declaration -> stops -> segment count -> color table.

The table is handed to a *sink*, any callable taking a ``ColorTable``; the
render module provides sinks for component-transfer tables, SVG markup and
Pillow images.
"""
from __future__ import annotations
from typing import Callable, Optional, TypeVar
from .color_table import ColorTable
from .distribute import distribute_colors
from .segments import find_segment_count
from .stops.resolver import resolve_stops
from .types.stop_types import StopList

T = TypeVar("T")
TableSink = Callable[[ColorTable], T]


class GradientMap:
    """Result of running a declaration through the three stages."""

    __slots__ = ("declaration", "stops", "n_segs", "table")

    def __init__(self, declaration: str, stops: StopList, n_segs: int, table: Optional[ColorTable]):
        self.declaration = declaration
        self.stops = stops
        self.n_segs = n_segs
        self.table = table

    @classmethod
    def from_declaration(cls, declaration: str) -> GradientMap:
        stops = resolve_stops(declaration)
        if not stops:
            return cls(declaration, [], 0, None)
        n_segs = find_segment_count(stops)
        return cls(declaration, stops, n_segs, distribute_colors(stops, n_segs))

    @property
    def is_empty(self) -> bool:
        return self.table is None

    def apply(self, sink: TableSink[T]) -> Optional[T]:
        """Hand the table to ``sink``; an empty gradient map applies nothing."""
        if self.table is None:
            return None
        return sink(self.table)

    def __repr__(self) -> str:
        return f"GradientMap({self.declaration!r}, n_segs={self.n_segs})"


def build_color_table(declaration: str) -> Optional[ColorTable]:
    """Color table for a declaration, or None when it has no usable stop."""
    return GradientMap.from_declaration(declaration).table


def apply_gradient_map(declaration: str, sink: TableSink[T]) -> Optional[T]:
    """
    Build the color table for ``declaration`` and deliver it to ``sink``.

    Args:
        declaration: Gradient stops, e.g. ``"black, gold 60%, white"``.
        sink: Consumer of the table, e.g. ``build_svg_filter`` or
            ``functools.partial(apply_to_image, image)``.

    Returns:
        Whatever ``sink`` returns, or None without calling it when the
        declaration is empty.
    """
    return GradientMap.from_declaration(declaration).apply(sink)
