"""Apply a gradient map to a Pillow image, in memory."""
from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from PIL import Image
from ..config import BYTE_MAX, LUMINANCE_COEFFS
from ..color_table import ColorTable
from .component_transfer import ComponentTransferTables, table_lookup


def luminance(rgb: NDArray, coeffs=LUMINANCE_COEFFS) -> NDArray:
    """
    Grayscale value of unit RGB pixels.

    Args:
        rgb: Array of shape (..., 3) in [0, 1]

    Returns:
        Array of shape (...) in [0, 1]
    """
    return np.clip(rgb @ np.asarray(coeffs, dtype=np.float64), 0.0, 1.0)


def map_pixels(rgba: NDArray, table: ColorTable) -> NDArray:
    """
    Gradient-map unit RGBA pixels.

    The color channels are replaced by the table looked up at the pixel
    luminance; the alpha channel goes through the alpha table.

    Args:
        rgba: Array of shape (..., 4) in [0, 1]

    Returns:
        Array of shape (..., 4) in [0, 1]
    """
    rgba = np.asarray(rgba, dtype=np.float64)
    gray = luminance(rgba[..., :3])
    tables = ComponentTransferTables.from_table(table)
    return np.stack(
        [
            table_lookup(gray, tables.r),
            table_lookup(gray, tables.g),
            table_lookup(gray, tables.b),
            table_lookup(rgba[..., 3], tables.a),
        ],
        axis=-1,
    )


def apply_to_image(image: Image.Image, table: ColorTable) -> Image.Image:
    """
    Return a new RGBA image with the gradient map applied.

    Args:
        image: Any Pillow image; converted to RGBA first.
        table: Color table from ``distribute_colors``.
    """
    rgba = np.asarray(image.convert("RGBA"), dtype=np.float64) / BYTE_MAX
    mapped = map_pixels(rgba, table)
    out = np.rint(np.clip(mapped, 0.0, 1.0) * BYTE_MAX).astype(np.uint8)
    return Image.fromarray(out)
