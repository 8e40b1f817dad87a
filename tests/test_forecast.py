from datetime import datetime, timedelta, timezone

import pytest

from llmquota.forecast import compute_forecast, short_duration


def at(minutes):
    return datetime(2026, 5, 26, 12, 0, tzinfo=timezone.utc) + timedelta(minutes=minutes)


def test_at_risk_when_exhausts_before_reset():
    now = at(0)
    f = compute_forecast(40, 40, now, now + timedelta(hours=2))
    assert f.at_risk
    assert f.arrow == "↑"
    assert f.status == "full in 1h 30m"


def test_safe_shows_projected_by_reset():
    now = at(0)
    f = compute_forecast(20, 4, now, now + timedelta(hours=10))
    assert not f.at_risk
    assert f.arrow == "→"
    assert f.status == "~60% by reset"


def test_zero_rate_projects_flat():
    now = at(0)
    f = compute_forecast(33, 0, now, now + timedelta(hours=1))
    assert not f.at_risk
    assert f.status == "~33% by reset"


def test_maxed_shows_full():
    now = at(0)
    f = compute_forecast(100, 5, now, now + timedelta(hours=1))
    assert not f.at_risk
    assert f.status == "full"


def test_reset_passed_has_no_projection():
    now = at(0)
    f = compute_forecast(50, 10, now, now - timedelta(minutes=1))
    assert f.status == ""
    assert f.rate == 10


def test_projection_is_capped_at_one_hundred():
    now = at(0)
    f = compute_forecast(50, 25, now, now + timedelta(hours=2))
    assert not f.at_risk
    assert f.status == "~100% by reset"


@pytest.mark.parametrize(
    "hours, expected",
    [(0.5, "30m"), (2.25, "2h 15m"), (50, "2d")],
)
def test_short_duration(hours, expected):
    assert short_duration(hours) == expected