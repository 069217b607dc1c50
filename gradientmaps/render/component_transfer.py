"""Per-channel lookup tables in the form a component-transfer stage consumes."""
from __future__ import annotations
from typing import Dict, NamedTuple
import numpy as np
from numpy import ndarray as NDArray
from ..config import BYTE_MAX
from ..color_table import ColorTable

CHANNEL_FUNCS = {"r": "feFuncR", "g": "feFuncG", "b": "feFuncB", "a": "feFuncA"}


def format_table_value(value: float) -> str:
    """Shortest round-trip decimal, without exponent or trailing ``.0``."""
    return np.format_float_positional(float(value), trim="-")


class ComponentTransferTables(NamedTuple):
    """
    Four tables of ``n_segs + 1`` values in [0, 1]; r/g/b are divided by 255,
    alpha is used as is.
    """

    r: NDArray
    g: NDArray
    b: NDArray
    a: NDArray

    @classmethod
    def from_table(cls, table: ColorTable) -> ComponentTransferTables:
        r, g, b, a = table.channels
        return cls(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX, a.copy())

    def table_values(self, channel: str) -> str:
        """Space-separated ``tableValues`` attribute for one channel."""
        return " ".join(format_table_value(v) for v in getattr(self, channel))

    def as_attributes(self) -> Dict[str, str]:
        """Map of ``feFuncX`` element name to its ``tableValues`` string."""
        return {func: self.table_values(channel) for channel, func in CHANNEL_FUNCS.items()}


def table_lookup(values: NDArray, table: NDArray) -> NDArray:
    """
    Apply a ``type="table"`` transfer function.

    For ``C`` in [0, 1] and ``n`` intervals, ``k = floor(C * n)`` and the
    result is ``v[k] + (C * n - k) * (v[k + 1] - v[k])``; ``C == 1`` gives
    ``v[n]``.

    Args:
        values: Input channel values, any shape
        table: 1D table with at least 2 entries

    Returns:
        Array of the same shape as ``values``
    """
    table = np.asarray(table, dtype=np.float64)
    n = table.shape[0] - 1
    scaled = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0) * n
    k = np.minimum(np.floor(scaled).astype(np.intp), n - 1)
    frac = scaled - k
    return table[k] + frac * (table[k + 1] - table[k])
