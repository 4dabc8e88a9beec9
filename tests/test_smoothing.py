import pytest

from tamapet.smoothing import MovingSumFilter


def test_default_false_sums_to_zero():
    assert MovingSumFilter(8).sum() == 0


def test_default_value_fills_window():
    assert MovingSumFilter(8, True).sum() == 8


def test_updates_accumulate_until_window_full():
    filt = MovingSumFilter(4)
    for count in range(1, 5):
        filt.update(True)
        assert filt.sum() == count


def test_oldest_sample_is_replaced():
    filt = MovingSumFilter(3, 0)
    for value in (1, 2, 3, 4):
        filt.update(value)
    assert filt.sum() == 2 + 3 + 4


def test_window_drains_back_to_zero():
    filt = MovingSumFilter(5, True)
    for _ in range(5):
        filt.update(False)
    assert filt.sum() == 0


def test_sum_stays_within_window_bounds():
    filt = MovingSumFilter(6)
    pattern = [True, False, True, True, False] * 7
    for value in pattern:
        filt.update(value)
        assert 0 <= filt.sum() <= 6


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        MovingSumFilter(size)