"""Pace forecast for a quota window."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ARROW_AT_RISK = "↑"
ARROW_STEADY = "→"

_NS_PER_MINUTE = 60 * 1_000_000_000
_NS_PER_HOUR = 60 * _NS_PER_MINUTE
_NS_PER_DAY = 24 * _NS_PER_HOUR


@dataclass(frozen=True)
class Forecast:
    """The rendered pace signal for one window."""

    rate: float
    at_risk: bool = False
    arrow: str = ARROW_STEADY
    status: str = ""


def compute_forecast(
    used_pct: float, rate_per_hour: float, now: datetime, resets_at: datetime
) -> Forecast:
    """Derive the forecast from the current reading and burn rate."""
    if used_pct >= 100:
        return Forecast(rate=rate_per_hour, status="full")

    hours_until_reset = (resets_at - now).total_seconds() / 3600
    if hours_until_reset <= 0:
        return Forecast(rate=rate_per_hour)

    if rate_per_hour <= 0:
        return Forecast(rate=rate_per_hour, status=f"~{used_pct:.0f}% by reset")

    hours_to_full = (100 - used_pct) / rate_per_hour
    if hours_to_full < hours_until_reset:
        return Forecast(
            rate=rate_per_hour,
            at_risk=True,
            arrow=ARROW_AT_RISK,
            status="full in " + short_duration(hours_to_full),
        )

    projected = min(used_pct + rate_per_hour * hours_until_reset, 100.0)
    return Forecast(rate=rate_per_hour, status=f"~{projected:.0f}% by reset")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def short_duration(hours: float) -> str:
    """Format a duration in hours as ``30m``, ``2h 15m`` or ``2d``."""
    ns = int(hours * _NS_PER_HOUR)
    if ns < _NS_PER_HOUR:
        return f"{_trunc_div(ns, _NS_PER_MINUTE)}m"
    if ns < _NS_PER_DAY:
        whole_hours = ns // _NS_PER_HOUR
        minutes = (ns % _NS_PER_HOUR) // _NS_PER_MINUTE
        return f"{whole_hours}h {minutes}m"
    return f"{ns // _NS_PER_DAY}d"