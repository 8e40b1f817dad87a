"""User display preferences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from llmquota.history import Product


class Visibility(IntEnum):
    """Which providers' rows are shown; hiding both is not representable."""

    BOTH = 0
    CLAUDE_ONLY = 1
    CODEX_ONLY = 2

    def __str__(self) -> str:
        return {
            Visibility.BOTH: "VisibilityBoth",
            Visibility.CLAUDE_ONLY: "VisibilityClaudeOnly",
            Visibility.CODEX_ONLY: "VisibilityCodexOnly",
        }[self]

    def next(self) -> Visibility:
        """The following state in the both → Claude → Codex cycle."""
        if self is Visibility.BOTH:
            return Visibility.CLAUDE_ONLY
        if self is Visibility.CLAUDE_ONLY:
            return Visibility.CODEX_ONLY
        return Visibility.BOTH

    def shows(self, product: Product) -> bool:
        """Whether rows for ``product`` are visible."""
        if self is Visibility.CLAUDE_ONLY:
            return product == Product.CLAUDE
        if self is Visibility.CODEX_ONLY:
            return product == Product.CODEX
        return True


@dataclass
class DisplayPrefs:
    """Display preferences; the defaults are the standard view."""

    visibility: Visibility = Visibility.BOTH
    hide_trend: bool = False
    hide_cost: bool = False
    icons: bool = False

    def trend_visible(self) -> bool:
        return not self.hide_trend

    def cost_visible(self) -> bool:
        return not self.hide_cost