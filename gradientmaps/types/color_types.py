from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RGBA = Tuple[Scalar, Scalar, Scalar, Scalar]
ColorLike = Union[RGBA, Sequence[Scalar], ndarray]

NUM_CHANNELS = 4
CHANNEL_NAMES = ("r", "g", "b", "a")


def to_rgba(color: ColorLike) -> RGBA:
    """
    Convert a color element to a plain RGBA tuple.

    Args:
        color: 4-element tuple, list or 1D ndarray

    Returns:
        Tuple of four python scalars
    """
    if isinstance(color, ndarray):
        if color.shape != (NUM_CHANNELS,):
            raise ValueError(f"RGBA color expects shape ({NUM_CHANNELS},), got {color.shape}")
        return tuple(color.tolist())
    if isinstance(color, (str, bytes)) or not isinstance(color, Sequence):
        raise TypeError(f"Unsupported color input type: {type(color).__name__}")
    if len(color) != NUM_CHANNELS:
        raise ValueError(f"RGBA color expects {NUM_CHANNELS} channels, got {len(color)}")
    return tuple(color)


def rgba_to_array(color: ColorLike) -> np.ndarray:
    """Return the color as a float64 vector, the dtype used for interpolation."""
    return np.asarray(to_rgba(color), dtype=np.float64)
