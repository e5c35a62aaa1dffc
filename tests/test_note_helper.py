import pytest

from blocksynth.note_helper import DURATION_STRINGS, Duration, index_to_hertz


def test_one_bar_at_240_bpm():
    assert index_to_hertz(Duration.ONE_BAR, 240) == pytest.approx(1.0)


def test_each_step_doubles_frequency():
    durations = list(Duration)
    for longer, shorter in zip(durations, durations[1:]):
        assert index_to_hertz(shorter, 120) == pytest.approx(
            2 * index_to_hertz(longer, 120)
        )


def test_linear_in_bpm():
    for duration in Duration:
        assert index_to_hertz(duration, 180) == pytest.approx(
            2 * index_to_hertz(duration, 90)
        )


def test_accepts_plain_int():
    assert index_to_hertz(3, 100) == index_to_hertz(Duration.ONE_BAR, 100)


def test_invalid_duration():
    with pytest.raises(ValueError):
        index_to_hertz(10, 120)


def test_labels():
    assert Duration(9).label == "1/64"
    assert Duration(0).label == "8"
    assert [Duration(i).label for i in range(len(DURATION_STRINGS))] == list(
        DURATION_STRINGS
    )