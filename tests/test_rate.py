from datetime import datetime, timedelta, timezone

import pytest

from llmquota.history import Sample, WindowKind
from llmquota.rate import elapsed_fraction, rate, window_duration


def at(minutes):
    return datetime(2026, 5, 26, 12, 0, tzinfo=timezone.utc) + timedelta(minutes=minutes)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (WindowKind.FIVE_HOUR, timedelta(hours=5)),
        (WindowKind.SEVEN_DAY, timedelta(days=7)),
        (WindowKind.SONNET_SEVEN_DAY, timedelta(days=7)),
    ],
)
def test_window_duration(kind, expected):
    assert window_duration(kind) == expected


def test_window_duration_unknown_is_zero():
    assert window_duration("other") == timedelta(0)
    assert elapsed_fraction("other", at(60), at(0)) == 0.0


def test_elapsed_fraction_clamps():
    now = at(0)
    assert elapsed_fraction(WindowKind.FIVE_HOUR, now + timedelta(hours=2), now) == pytest.approx(0.6, abs=0.001)
    assert elapsed_fraction(WindowKind.FIVE_HOUR, now - timedelta(hours=1), now) == 1
    assert elapsed_fraction(WindowKind.FIVE_HOUR, now + timedelta(hours=6), now) == 0


def test_rate_measured_from_lookback_baseline():
    reset = at(1000)
    samples = [Sample(at(0), 10, reset), Sample(at(60), 28, reset)]
    window_start = reset - window_duration(WindowKind.FIVE_HOUR)
    value, measured = rate(samples, at(60), timedelta(minutes=45), window_start)
    assert measured
    assert value == pytest.approx(18, abs=0.001)


def test_rate_falls_back_to_window_average():
    reset = at(180)
    samples = [Sample(at(170), 30, reset)]
    window_start = reset - window_duration(WindowKind.FIVE_HOUR)
    value, measured = rate(samples, at(180), timedelta(minutes=45), window_start)
    assert not measured
    assert value == pytest.approx(6, abs=0.001)


def test_rate_empty_samples_is_zero():
    assert rate([], at(0), timedelta(minutes=45), at(-300)) == (0.0, False)


def test_rate_is_clamped_non_negative():
    reset = at(1000)
    samples = [Sample(at(0), 50, reset), Sample(at(60), 20, reset)]
    value, measured = rate(samples, at(60), timedelta(minutes=45), at(-100))
    assert measured
    assert value == 0.0