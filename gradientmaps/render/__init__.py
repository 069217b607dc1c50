from .component_transfer import ComponentTransferTables, table_lookup, format_table_value
from .svg import build_svg_filter, build_filter_element, filter_css, grayscale_matrix_values
from .image import apply_to_image, map_pixels, luminance

__all__ = [
    "ComponentTransferTables",
    "table_lookup",
    "format_table_value",
    "build_svg_filter",
    "build_filter_element",
    "filter_css",
    "grayscale_matrix_values",
    "apply_to_image",
    "map_pixels",
    "luminance",
]
