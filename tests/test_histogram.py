import pytest

from histoenhance.errors import InvalidWindowError
from histoenhance.histogram import auto_window, build_cumulative, class_count, window_histogram


def test_counts_and_cumulative_small_image():
    pixels = [5, 5, 7, 10]
    assert class_count(5, 10) == 6
    assert window_histogram(pixels, 5, 10) == [2, 0, 1, 0, 0, 1]
    assert build_cumulative(pixels, 5, 10) == [2.0, 2.0, 3.0, 3.0, 3.0, 4.0]


def test_pixels_outside_window_are_ignored():
    table = build_cumulative([0, 3, 5, 6, 99, 65535], 5, 6)
    assert table == [1.0, 2.0]


def test_table_is_non_decreasing_and_totals_in_window():
    pixels = [(i * 37) % 300 for i in range(1000)]
    table = build_cumulative(pixels, 40, 250)
    assert len(table) == 211
    assert all(x <= y for x, y in zip(table, table[1:]))
    assert table[-1] == sum(1 for v in pixels if 40 <= v <= 250)
    assert table[0] == pixels.count(40)


def test_single_class_window():
    assert build_cumulative([50, 50, 50], 50, 50) == [3.0]


def test_input_is_not_mutated():
    pixels = [1, 2, 3]
    build_cumulative(pixels, 0, 5)
    assert pixels == [1, 2, 3]


@pytest.mark.parametrize("c,d", [(10, 9), (10, 0)])
def test_inverted_window_rejected(c, d):
    with pytest.raises(InvalidWindowError):
        build_cumulative([1, 2, 3], c, d)


def test_invalid_window_is_value_error():
    with pytest.raises(ValueError):
        class_count(3, 1)


def test_auto_window():
    assert auto_window([300, 12, 4000, 12]) == (12, 4000)
    with pytest.raises(InvalidWindowError):
        auto_window([])
