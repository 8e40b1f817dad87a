"""Block-rune sparklines of usage samples."""

from __future__ import annotations

import math
from collections.abc import Sequence

from llmquota.history import Sample

SPARK_LEVELS = "▁▂▃▄▅▆▇█"


def _spark_rune(percent: float) -> str:
    clamped = min(max(percent, 0.0), 100.0)
    index = math.floor(clamped / 100 * (len(SPARK_LEVELS) - 1) + 0.5)
    return SPARK_LEVELS[index]


def sparkline(samples: Sequence[Sample], width: int) -> str:
    """Render the last ``width`` samples, left-padded to exactly ``width`` cells."""
    if width <= 0:
        return ""
    used = list(samples)[-width:]
    return " " * (width - len(used)) + "".join(_spark_rune(s.used_pct) for s in used)