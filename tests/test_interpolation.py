import pytest

from blocksynth.interpolation import decimal_subscript


def test_documented_example():
    assert decimal_subscript([5, 10], 0.5) == pytest.approx(7.5)


def test_whole_index_returns_sample():
    samples = [0.1, 0.4, -0.3, 0.9]
    assert decimal_subscript(samples, 2.0) == pytest.approx(-0.3)
    assert decimal_subscript(samples, 0) == pytest.approx(0.1)


def test_result_between_neighbours():
    samples = [1.0, 3.0, -2.0]
    for step in range(1, 10):
        value = decimal_subscript(samples, 1 + step / 10)
        assert -2.0 <= value <= 3.0


def test_past_end_raises():
    with pytest.raises(IndexError):
        decimal_subscript([1.0, 2.0], 1.5)


def test_negative_index_raises():
    with pytest.raises(IndexError):
        decimal_subscript([1.0, 2.0], -0.5)