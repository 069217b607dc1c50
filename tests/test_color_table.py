"""
Tests for ColorTable
"""
import numpy as np
import pytest
from gradientmaps.color_table import ColorTable
from gradientmaps.samples.colors import RED, BLUE, GREEN, TRANSPARENT


def test_color_table_creation():
    """Test creating a table from rows"""
    table = ColorTable([RED, BLUE, GREEN])
    assert len(table) == 3
    assert table.n_segs == 2
    assert table.value.shape == (3, 4)
    assert table.value.dtype == np.float64


def test_from_colors():
    table = ColorTable.from_colors([RED, np.array(BLUE), list(TRANSPARENT)])
    assert table.to_list() == [RED, BLUE, TRANSPARENT]


def test_rows_are_tuples():
    table = ColorTable([RED, BLUE])
    assert table[0] == (255.0, 0.0, 0.0, 1.0)
    assert isinstance(table[1], tuple)
    assert table[-1] == BLUE
    assert list(table) == [RED, BLUE]


def test_positions():
    table = ColorTable([RED, BLUE, GREEN, RED, BLUE])
    np.testing.assert_array_equal(table.positions, [0, 25, 50, 75, 100])


def test_channels():
    table = ColorTable([RED, BLUE])
    r, g, b, a = table.channels
    np.testing.assert_array_equal(r, [255, 0])
    np.testing.assert_array_equal(g, [0, 0])
    np.testing.assert_array_equal(b, [0, 255])
    np.testing.assert_array_equal(a, [1, 1])


def test_read_only():
    """The wrapped array can not be modified"""
    table = ColorTable([RED, BLUE])
    assert not table.value.flags.writeable
    with pytest.raises(ValueError):
        table.value[0, 0] = 0.0


def test_copy_on_construction():
    rows = np.array([RED, BLUE], dtype=np.float64)
    table = ColorTable(rows)
    rows[0, 0] = 1.0
    assert table[0] == RED


def test_array_interface():
    table = ColorTable([RED, BLUE])
    arr = np.asarray(table)
    assert arr.shape == (2, 4)
    assert np.asarray(table, dtype=np.float32).dtype == np.float32


def test_equality_and_hash():
    a = ColorTable([RED, BLUE])
    b = ColorTable.from_colors([RED, BLUE])
    c = ColorTable([RED, GREEN])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != [RED, BLUE]


def test_repr():
    assert repr(ColorTable([RED, BLUE, GREEN])) == "ColorTable(n_segs=2)"


@pytest.mark.parametrize(
    "rows",
    [
        [RED],
        [],
        [(1, 2, 3), (4, 5, 6)],
        [[RED, BLUE], [GREEN, RED]],
    ],
)
def test_invalid_shapes(rows):
    with pytest.raises(ValueError):
        ColorTable(rows)


def test_signed_zero_hashes_alike():
    """Tables equal under == share a hash, including -0.0 entries"""
    a = ColorTable([(0.0, 0.0, 0.0, 1.0), BLUE])
    b = ColorTable([(-0.0, 0.0, -0.0, 1.0), BLUE])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
