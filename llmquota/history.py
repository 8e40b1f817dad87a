"""Bounded per-window history of quota readings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

MAX_SAMPLES_PER_WINDOW = 64


class Product(str, Enum):
    """A provider whose quota is tracked."""

    CLAUDE = "claude"
    CODEX = "codex"


class WindowKind(str, Enum):
    """The kind of rolling quota window."""

    FIVE_HOUR = "five_hour"
    SEVEN_DAY = "seven_day"
    SONNET_SEVEN_DAY = "sonnet_seven_day"


@dataclass(frozen=True)
class Sample:
    """One observed reading of a quota window."""

    captured_at: datetime
    used_pct: float
    resets_at: datetime


def key(product: Product | str, kind: WindowKind | str) -> str:
    """Identify a window's history slot, e.g. ``claude:five_hour``."""
    product_text = product.value if isinstance(product, Enum) else str(product)
    kind_text = kind.value if isinstance(kind, Enum) else str(kind)
    return f"{product_text}:{kind_text}"


@dataclass
class History:
    """Change-points per window, oldest first."""

    windows: dict[str, list[Sample]] = field(default_factory=dict)

    def append(self, key: str, sample: Sample) -> None:
        """Record a change-point.

        Unchanged readings are ignored, points from an earlier epoch (a
        different ``resets_at``) are dropped, and at most
        ``MAX_SAMPLES_PER_WINDOW`` points are kept.
        """
        current = self.windows.get(key, [])
        if current:
            last = current[-1]
            if last.used_pct == sample.used_pct and last.resets_at == sample.resets_at:
                return
        kept = [point for point in current if point.resets_at == sample.resets_at]
        kept.append(sample)
        self.windows[key] = kept[-MAX_SAMPLES_PER_WINDOW:]

    def epoch_samples(self, key: str, resets_at: datetime) -> list[Sample]:
        """Return the points for ``key`` whose ``resets_at`` matches."""
        return [point for point in self.windows.get(key, []) if point.resets_at == resets_at]