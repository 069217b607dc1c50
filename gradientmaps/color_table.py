"""
Color lookup tables
===================

A ``ColorTable`` holds the colors of a gradient sampled at ``n_segs + 1``
evenly spaced positions, from 0% to 100%. Row ``i`` is the color at position
``i * 100 / n_segs``; columns are r, g, b (0-255) and a (0-1). Values are
float64 and are not rounded, so consumers decide how to quantize.
"""
from __future__ import annotations
from typing import Iterator, List, Sequence
import numpy as np
from numpy import ndarray as NDArray
from .config import POSITION_MAX
from .types.color_types import RGBA, NUM_CHANNELS, ColorLike, rgba_to_array


class ColorTable:
    __slots__ = ("_value",)

    def __init__(self, value: NDArray | Sequence[ColorLike]) -> None:
        """
        Args:
            value: Array-like of shape (N, 4), N >= 2.
        """
        arr = np.array(value, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[-1] != NUM_CHANNELS:
            raise ValueError(f"ColorTable expects shape (N, {NUM_CHANNELS}), got {arr.shape}")
        if arr.shape[0] < 2:
            raise ValueError(f"ColorTable needs at least 2 entries, got {arr.shape[0]}")
        arr.setflags(write=False)
        self._value = arr

    @classmethod
    def from_colors(cls, colors: Sequence[ColorLike]) -> ColorTable:
        return cls(np.stack([rgba_to_array(c) for c in colors]))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> NDArray:
        return self._value

    @property
    def n_segs(self) -> int:
        return self._value.shape[0] - 1

    @property
    def positions(self) -> NDArray:
        """Stop position (percent) of every entry."""
        return np.linspace(0.0, POSITION_MAX, self._value.shape[0])

    @property
    def channels(self) -> List[NDArray]:
        """Get individual color channels as separate arrays (r, g, b, a)."""
        return [self._value[:, i] for i in range(NUM_CHANNELS)]

    def __len__(self) -> int:
        return self._value.shape[0]

    def __getitem__(self, index: int) -> RGBA:
        return tuple(self._value[index].tolist())

    def __iter__(self) -> Iterator[RGBA]:
        for row in self._value:
            yield tuple(row.tolist())

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        if dtype is None:
            return self._value.copy() if copy else self._value
        return self._value.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorTable):
            return NotImplemented
        return np.array_equal(self._value, other._value)

    def __hash__(self) -> int:
        # -0.0 and 0.0 compare equal, so they must hash alike
        return hash((self._value + 0.0).tobytes())

    def __repr__(self) -> str:
        return f"ColorTable(n_segs={self.n_segs})"

    def to_list(self) -> List[RGBA]:
        return list(self)
