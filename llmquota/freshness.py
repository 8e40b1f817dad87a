"""How recent each provider's quota readings are."""

from __future__ import annotations

from datetime import datetime, timedelta

from llmquota.history import Product
from llmquota.model import Model

_DAY = timedelta(days=1)
_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)


def _clock_text(moment: datetime) -> str:
    """Wall-clock time as ``3:04 PM``."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def _local(moment: datetime) -> datetime:
    return moment.astimezone() if moment.tzinfo is not None else moment


def source_freshness(
    model: Model, product: Product, now: datetime
) -> tuple[datetime, timedelta] | None:
    """The newest capture time and age of a product's windows, or None."""
    captured_at: datetime | None = None
    stale_age = timedelta(0)
    for window in model.windows.get(product, []):
        if window.captured_at is None:
            continue
        if captured_at is None or window.captured_at > captured_at:
            captured_at = window.captured_at
        if window.stale_age > stale_age:
            stale_age = window.stale_age
    if captured_at is None:
        return None
    age = stale_age if stale_age > timedelta(0) else now - captured_at
    return captured_at, max(age, timedelta(0))


def source_is_stale(model: Model, product: Product, now: datetime) -> bool:
    """Whether any window is marked stale or the newest reading is too old."""
    if any(window.stale for window in model.windows.get(product, [])):
        return True
    freshness = source_freshness(model, product, now)
    return freshness is not None and freshness[1] > model.stale_after


def group_freshness_text(model: Model, product: Product, now: datetime) -> str | None:
    """Freshness for a group header, e.g. ``updated 10:37 AM · 3m ago``."""
    freshness = source_freshness(model, product, now)
    if freshness is None:
        return None
    captured_at, age = freshness
    parts = ["updated " + _clock_text(_local(captured_at))]
    if source_is_stale(model, product, now):
        parts.append(age_text(age) + " old")
    elif age > timedelta(0):
        parts.append(age_text(age) + " ago")
    error = model.errors.get(product)
    if error is not None and error.category is not None:
        parts.append("refresh failed")
    return " · ".join(parts)


def age_text(age: timedelta) -> str:
    """A short age: whole days, hours or minutes."""
    age = max(age, timedelta(0))
    if age >= _DAY:
        return f"{age // _DAY}d"
    if age >= _HOUR:
        return f"{age // _HOUR}h"
    return f"{age // _MINUTE}m"