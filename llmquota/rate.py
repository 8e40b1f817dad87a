"""Burn-rate measurement for quota windows."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from llmquota.history import Sample, WindowKind

RATE_LOOKBACK = timedelta(minutes=45)

_DURATIONS = {
    WindowKind.FIVE_HOUR: timedelta(hours=5),
    WindowKind.SEVEN_DAY: timedelta(days=7),
    WindowKind.SONNET_SEVEN_DAY: timedelta(days=7),
}


def window_duration(kind: WindowKind) -> timedelta:
    """Fixed length of a quota window; zero for an unknown kind."""
    return _DURATIONS.get(kind, timedelta(0))


def elapsed_fraction(kind: WindowKind, resets_at: datetime, now: datetime) -> float:
    """How far through its window ``now`` is, clamped to [0, 1]."""
    duration = window_duration(kind)
    if duration <= timedelta(0):
        return 0.0
    start = resets_at - duration
    fraction = (now - start).total_seconds() / duration.total_seconds()
    return min(max(fraction, 0.0), 1.0)


def _hours(delta: timedelta) -> float:
    return delta.total_seconds() / 3600


def _clamp_rate(value: float) -> float:
    return 0.0 if value < 0 else value


def rate(
    samples: Sequence[Sample],
    now: datetime,
    lookback: timedelta,
    window_start: datetime,
) -> tuple[float, bool]:
    """Burn rate in percent per hour and whether it was measured from history.

    ``samples`` are the current epoch's points, oldest first. Without a
    baseline older than the lookback the window average is used instead.
    """
    if not samples:
        return 0.0, False
    latest = samples[-1]

    cutoff = now - lookback
    baseline = next((s for s in reversed(samples) if s.captured_at <= cutoff), None)
    if baseline is not None:
        dt = _hours(latest.captured_at - baseline.captured_at)
        if dt > 0:
            return _clamp_rate((latest.used_pct - baseline.used_pct) / dt), True

    elapsed = _hours(now - window_start)
    if elapsed <= 0:
        return 0.0, False
    return _clamp_rate(latest.used_pct / elapsed), False