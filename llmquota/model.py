"""Quota state shown by the dashboard, and the types it is built from."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Protocol

from llmquota.glyphs import GlyphSet, glyphs_for
from llmquota.history import History, Product, WindowKind
from llmquota.prefs import DisplayPrefs
from llmquota.store import Store

ANIM_FPS = 15
HIGHLIGHT_DURATION = timedelta(milliseconds=900)
# Fraction-unit tolerance below which a bar is visually settled (about 0.1%).
SPRING_SETTLE_EPSILON = 0.001

DEFAULT_REFRESH_EVERY = timedelta(seconds=30)
DEFAULT_STALE_AFTER = timedelta(hours=1)

_SPRING_EPSILON = 0.00000001


class ErrorCategory(str, Enum):
    """Why a source could not be read."""

    MISSING = "missing"
    MALFORMED = "malformed"
    NO_USABLE_EVENT = "no_usable_event"
    READ = "read_error"


@dataclass(frozen=True)
class Window:
    """One quota window reading from a provider."""

    product: Product
    kind: WindowKind
    label: str = ""
    used_percent: float = 0.0
    resets_at: datetime | None = None
    captured_at: datetime | None = None
    stale: bool = False
    stale_age: timedelta = timedelta(0)


class SourceError(Exception):
    """A categorised failure to read a provider's quota data."""

    def __init__(
        self,
        source: Product | None = None,
        category: ErrorCategory | None = None,
        err: BaseException | None = None,
    ) -> None:
        super().__init__(source, category, err)
        self.source = source
        self.category = category
        self.err = err

    def __str__(self) -> str:
        source = self.source.value if self.source is not None else "source"
        category = self.category.value if self.category is not None else "error"
        text = f"{source}: {category}"
        return f"{text}: {self.err}" if self.err is not None else text


@dataclass(frozen=True)
class WindowCost:
    """Spend attributed to one quota window."""

    amount: float = 0.0
    estimated: bool = False
    incomplete: bool = False


class SourceReader(Protocol):
    """Reads a provider's current quota windows."""

    def fetch(self, now: datetime) -> list[Window]:
        """Return the windows, raising on failure."""


class CostReader(Protocol):
    """Prices a provider's quota windows."""

    def window_costs(
        self, now: datetime, windows: Sequence[Window]
    ) -> Mapping[WindowKind, WindowCost]:
        """Return the cost of each window kind that could be priced."""


@dataclass(frozen=True)
class QuotaRowSpec:
    """One display row: its labels and the window it shows."""

    full: str
    short: str
    product: Product
    kind: WindowKind


QUOTA_ROW_SPECS = (
    QuotaRowSpec("Claude 5h", "Cl 5h", Product.CLAUDE, WindowKind.FIVE_HOUR),
    QuotaRowSpec("Claude 7d", "Cl 7d", Product.CLAUDE, WindowKind.SEVEN_DAY),
    QuotaRowSpec("Sonnet 7d", "Sn 7d", Product.CLAUDE, WindowKind.SONNET_SEVEN_DAY),
    QuotaRowSpec("Codex 5h", "Cx 5h", Product.CODEX, WindowKind.FIVE_HOUR),
    QuotaRowSpec("Codex 7d", "Cx 7d", Product.CODEX, WindowKind.SEVEN_DAY),
)


class Spring:
    """A damped harmonic spring stepped at a fixed time interval."""

    def __init__(
        self, delta_time: float, angular_frequency: float, damping_ratio: float
    ) -> None:
        omega = max(0.0, angular_frequency)
        zeta = max(0.0, damping_ratio)
        dt = delta_time

        if omega < _SPRING_EPSILON:
            self._coefs = (1.0, 0.0, 0.0, 1.0)
        elif zeta > 1.0 + _SPRING_EPSILON:
            za = -omega * zeta
            zb = omega * math.sqrt(zeta * zeta - 1.0)
            z1, z2 = za - zb, za + zb
            e1, e2 = math.exp(z1 * dt), math.exp(z2 * dt)
            inv_two_zb = 1.0 / (2.0 * zb)
            e1_over = e1 * inv_two_zb
            e2_over = e2 * inv_two_zb
            z1e1_over = z1 * e1_over
            z2e2_over = z2 * e2_over
            self._coefs = (
                e1_over * z2 - z2e2_over + e2,
                -e1_over + e2_over,
                (z1e1_over - z2e2_over + e2) * z2,
                -z1e1_over + z2e2_over,
            )
        elif zeta < 1.0 - _SPRING_EPSILON:
            omega_zeta = omega * zeta
            alpha = omega * math.sqrt(1.0 - zeta * zeta)
            exp_term = math.exp(-omega_zeta * dt)
            cos_term = math.cos(alpha * dt)
            sin_term = math.sin(alpha * dt)
            inv_alpha = 1.0 / alpha
            exp_sin = exp_term * sin_term
            exp_cos = exp_term * cos_term
            exp_oz_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha
            self._coefs = (
                exp_cos + exp_oz_sin_over_alpha,
                exp_sin * inv_alpha,
                -exp_sin * alpha - omega_zeta * exp_oz_sin_over_alpha,
                exp_cos - exp_oz_sin_over_alpha,
            )
        else:
            exp_term = math.exp(-omega * dt)
            time_exp = dt * exp_term
            time_exp_freq = time_exp * omega
            self._coefs = (
                time_exp_freq + exp_term,
                time_exp,
                -omega * time_exp_freq,
                -time_exp_freq + exp_term,
            )

    def update(self, pos: float, vel: float, target: float) -> tuple[float, float]:
        """Advance one step towards ``target``; return the new position and velocity."""
        pos_pos, pos_vel, vel_pos, vel_vel = self._coefs
        offset = pos - target
        return (
            offset * pos_pos + vel * pos_vel + target,
            offset * vel_pos + vel * vel_vel,
        )


def _frame_seconds(fps: int) -> float:
    return (1_000_000_000 // fps) / 1e9


@dataclass
class BarAnim:
    """A row's spring-animated fill; ``target`` is -1 until the first value."""

    pos: float = 0.0
    vel: float = 0.0
    target: float = -1.0


def _system_now() -> datetime:
    return datetime.now().astimezone()


class Model:
    """Everything the dashboard renders: readings, errors, costs and animation."""

    def __init__(
        self,
        *,
        claude_reader: SourceReader | None = None,
        codex_reader: SourceReader | None = None,
        claude_cost: CostReader | None = None,
        codex_cost: CostReader | None = None,
        costs: dict[Product, dict[WindowKind, WindowCost]] | None = None,
        clock: Callable[[], datetime] | None = None,
        refresh_every: timedelta | None = None,
        claude_hook_installed: bool = False,
        prefs: DisplayPrefs | None = None,
        store: Store | None = None,
    ) -> None:
        self.width = 0
        self.height = 0

        self.claude_reader = claude_reader
        self.codex_reader = codex_reader
        self.claude_cost = claude_cost
        self.codex_cost = codex_cost
        self.costs: dict[Product, dict[WindowKind, WindowCost]] = (
            costs if costs is not None else {}
        )
        self.clock: Callable[[], datetime] = clock or _system_now
        self.refresh_every = (
            refresh_every
            if refresh_every is not None and refresh_every > timedelta(0)
            else DEFAULT_REFRESH_EVERY
        )
        self.stale_after = DEFAULT_STALE_AFTER
        self.refreshing = False
        self.windows: dict[Product, list[Window]] = {Product.CLAUDE: [], Product.CODEX: []}
        self.errors: dict[Product, SourceError] = {}
        self.claude_hook_installed = claude_hook_installed

        self.spring = Spring(_frame_seconds(ANIM_FPS), 12.0, 1.0)
        self.bars = [BarAnim() for _ in QUOTA_ROW_SPECS]
        self.highlight_until: list[datetime | None] = [None for _ in QUOTA_ROW_SPECS]
        self.anim_phase = 0
        self.anim_running = False

        self.prefs = prefs if prefs is not None else DisplayPrefs()

        self.store = store
        self.history: History = store.load() if store is not None else History()

    def cost_active(self) -> bool:
        """Whether cost is shown and at least one cost value exists."""
        if not self.prefs.cost_visible():
            return False
        return any(by_kind for by_kind in self.costs.values())

    def glyphs(self) -> GlyphSet:
        """The glyph set for the current icon preference."""
        return glyphs_for(self.prefs.icons)