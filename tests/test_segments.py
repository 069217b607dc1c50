"""
Tests for the segment count search
"""
import pytest
from gradientmaps.distribute import distribute_colors
from gradientmaps.segments import find_segment_count, is_aligned
from gradientmaps.stops.resolver import resolve_stops
from gradientmaps.types.stop_types import ColorStop
from gradientmaps.samples.colors import RED, BLUE, GREEN, WHITE


def make_stops(*positions):
    colors = [RED, BLUE, GREEN, WHITE]
    return [ColorStop(colors[i % len(colors)], float(p)) for i, p in enumerate(positions)]


def test_no_interior_stops():
    """Two end stops need a single segment"""
    assert find_segment_count(make_stops(0, 100)) == 1
    assert find_segment_count(resolve_stops("#ff0000 0%, #0000ff 100%")) == 1
    assert find_segment_count(resolve_stops("red")) == 1


def test_scenarios():
    assert find_segment_count(resolve_stops("red, blue, green")) == 2
    assert find_segment_count(resolve_stops("red 10%, blue 10%, green")) == 10
    assert find_segment_count(resolve_stops("red, blue 25%, green 75%, yellow")) == 4


def test_smallest_count_wins():
    assert find_segment_count(make_stops(0, 50, 100)) == 2
    assert find_segment_count(make_stops(0, 20, 60, 100)) == 5
    assert find_segment_count(make_stops(0, 10, 10, 100)) == 10


def test_stop_within_first_segment_does_not_match():
    # 33 sits just before the 1/3 boundary, so 6 segments are needed
    assert find_segment_count(make_stops(0, 33, 100)) == 6


def test_fallback_to_max_segments():
    """Stops closer to 0 than any segment width never align"""
    assert find_segment_count(make_stops(0, 0.5, 100)) == 100
    assert find_segment_count(make_stops(0, 0.5, 100), max_segments=10) == 10


def test_custom_tolerance():
    stops = make_stops(0, 52, 100)
    assert find_segment_count(stops) != 2
    assert find_segment_count(stops, tolerance=3.0) == 2


def test_result_in_range():
    for declaration in ["red, blue 1%, white", "red, blue 37%, lime 61%, white", "red 99.5%, blue"]:
        n_segs = find_segment_count(resolve_stops(declaration))
        assert 1 <= n_segs <= 100


def test_invalid_max_segments():
    """The search bound can not exceed what distribute_colors accepts"""
    with pytest.raises(ValueError):
        find_segment_count(make_stops(0, 100), max_segments=0)
    with pytest.raises(ValueError):
        find_segment_count(make_stops(0, 0.5, 100), max_segments=200)


def test_is_aligned():
    assert is_aligned(25.0, 25.0)
    assert is_aligned(75.0, 25.0)
    assert is_aligned(49.5, 25.0)
    assert is_aligned(50.5, 25.0)
    assert not is_aligned(30.0, 25.0)
    # inside the first segment
    assert not is_aligned(24.5, 25.0)
    assert is_aligned(30.0, 25.0, tolerance=6.0)


def test_fallback_count_is_distributable():
    stops = make_stops(0, 0.5, 100)
    n_segs = find_segment_count(stops)
    assert len(distribute_colors(stops, n_segs)) == n_segs + 1
