"""SVG filter markup for a gradient map."""
from __future__ import annotations
import xml.etree.ElementTree as ET
from ..config import SVG_NS, DEFAULT_FILTER_ID, LUMINANCE_COEFFS
from ..color_table import ColorTable
from .component_transfer import ComponentTransferTables, format_table_value


ET.register_namespace("", SVG_NS)


def grayscale_matrix_values(coeffs=LUMINANCE_COEFFS) -> str:
    """feColorMatrix ``values`` that writes luminance to r, g and b and keeps alpha."""
    luma_row = [format_table_value(c) for c in coeffs] + ["0", "0"]
    alpha_row = ["0", "0", "0", "1", "0"]
    return " ".join(luma_row * 3 + alpha_row)


def build_filter_element(table: ColorTable, filter_id: str = DEFAULT_FILTER_ID) -> ET.Element:
    """
    Build ``<svg><filter>`` with a grayscale color matrix followed by the
    component transfer tables.
    """
    svg = ET.Element(f"{{{SVG_NS}}}svg", {"version": "1.1", "width": "0", "height": "0"})
    filt = ET.SubElement(svg, f"{{{SVG_NS}}}filter", {"id": filter_id})
    ET.SubElement(
        filt,
        f"{{{SVG_NS}}}feColorMatrix",
        {"type": "matrix", "values": grayscale_matrix_values(), "result": "gray"},
    )
    transfer = ET.SubElement(
        filt, f"{{{SVG_NS}}}feComponentTransfer", {"color-interpolation-filters": "sRGB"}
    )
    for func, values in ComponentTransferTables.from_table(table).as_attributes().items():
        ET.SubElement(transfer, f"{{{SVG_NS}}}{func}", {"type": "table", "tableValues": values})
    return svg


def build_svg_filter(table: ColorTable, filter_id: str = DEFAULT_FILTER_ID) -> str:
    """Serialized SVG markup; reference it from CSS with ``filter_css(filter_id)``."""
    return ET.tostring(build_filter_element(table, filter_id), encoding="unicode")


def filter_css(filter_id: str = DEFAULT_FILTER_ID) -> str:
    return f"url(#{filter_id})"
