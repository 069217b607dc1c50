"""
Tests for the GradientMap pipeline and sink delivery
"""
from functools import partial
import pytest
from PIL import Image
from gradientmaps import (
    GradientMap,
    ColorTable,
    build_color_table,
    apply_gradient_map,
    build_svg_filter,
    ComponentTransferTables,
    apply_to_image,
    GradientStopWarning,
)
from gradientmaps.samples.colors import RED, BLUE, GREEN, YELLOW


def test_from_declaration():
    gmap = GradientMap.from_declaration("red, blue 25%, green 75%, yellow")
    assert not gmap.is_empty
    assert gmap.declaration == "red, blue 25%, green 75%, yellow"
    assert [stop.pos for stop in gmap.stops] == [0, 25, 75, 100]
    assert gmap.n_segs == 4
    assert isinstance(gmap.table, ColorTable)
    assert gmap.table.to_list() == [RED, BLUE, (0.0, 64.0, 127.5, 1.0), GREEN, YELLOW]


def test_empty_declaration():
    gmap = GradientMap.from_declaration("  ")
    assert gmap.is_empty
    assert gmap.stops == []
    assert gmap.table is None


def test_empty_gradient_does_not_call_sink():
    calls = []
    assert GradientMap.from_declaration("").apply(calls.append) is None
    assert apply_gradient_map("", calls.append) is None
    assert calls == []


def test_build_color_table():
    assert build_color_table("") is None
    table = build_color_table("red, blue")
    assert table.to_list() == [RED, BLUE]


def test_apply_passes_table_to_sink():
    received = []
    result = apply_gradient_map("red, blue, green", lambda table: received.append(table) or "done")
    assert result == "done"
    assert len(received) == 1
    assert received[0].to_list() == [RED, BLUE, GREEN]


def test_component_transfer_sink():
    tables = apply_gradient_map("red, blue", ComponentTransferTables.from_table)
    assert tables.table_values("r") == "1 0"
    assert tables.table_values("b") == "0 1"


def test_svg_sink():
    markup = apply_gradient_map("black, white", build_svg_filter)
    assert markup.startswith("<svg")
    assert 'tableValues="0 1"' in markup


def test_image_sink():
    image = Image.new("RGB", (3, 2), (0, 0, 0))
    result = apply_gradient_map("red, blue", partial(apply_to_image, image))
    assert result.mode == "RGBA"
    assert result.size == (3, 2)
    assert result.getpixel((0, 0)) == (255, 0, 0, 255)


def test_malformed_declaration_warns():
    with pytest.warns(GradientStopWarning):
        assert apply_gradient_map("notacolor", build_svg_filter) is None


def test_repr():
    assert repr(GradientMap.from_declaration("red, blue")) == "GradientMap('red, blue', n_segs=1)"
