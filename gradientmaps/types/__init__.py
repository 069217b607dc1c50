from .color_types import RGBA, Scalar, ColorLike, to_rgba
from .stop_types import ColorStop, StopList

__all__ = [
    "RGBA",
    "Scalar",
    "ColorLike",
    "to_rgba",
    "ColorStop",
    "StopList",
]
