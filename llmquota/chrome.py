"""Title band, provider group headers and the footer."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from llmquota.colors import MOCHA_PEACH, MOCHA_SUBTEXT0, MOCHA_SURFACE0, MOCHA_TEAL
from llmquota.cost_view import value_cluster
from llmquota.freshness import _clock_text, group_freshness_text
from llmquota.glyphs import GlyphSet, spinner_frame
from llmquota.history import Product
from llmquota.model import ErrorCategory, Model
from llmquota.style import HINT_STYLE, TITLE_STYLE, WIDE_THRESHOLD, Style, display_width

QUIT_HINT = "q / Ctrl-C quit"
REFRESH_HINT = "r refresh"
CLAUDE_INSTALL_HINT = "Claude: run install-claude-hook"
CLAUDE_OPEN_HINT = "Claude: open Claude"
CODEX_OPEN_HINT = "Codex: open Codex"

_TITLE_TEXT = "LLM QUOTA"
_BAND_RULE_STYLE = Style(foreground=MOCHA_SURFACE0)
_CLOCK_STYLE = Style(foreground=MOCHA_SUBTEXT0)


def accent_for(product: Product) -> str:
    """The accent colour of a provider."""
    return MOCHA_TEAL if product == Product.CODEX else MOCHA_PEACH


def render_title_band(width: int, now: datetime, glyphs: GlyphSet) -> str:
    """Bold title left, wall clock right, over a rule; the clock drops when cramped."""
    clock = _clock_text(now)
    if glyphs.clock:
        clock = f"{glyphs.clock} {clock}"
    title = TITLE_STYLE.render(_TITLE_TEXT)
    rule = "━" if width >= WIDE_THRESHOLD else "─"
    rule_line = _BAND_RULE_STYLE.render(rule * max(width, 1))

    gap = width - display_width(_TITLE_TEXT) - display_width(clock)
    if gap < 1:
        return f"{title}\n{rule_line}"
    return f"{title}{' ' * gap}{_CLOCK_STYLE.render(clock)}\n{rule_line}"


def provider_mark(glyphs: GlyphSet, product: Product) -> str:
    """The provider icon, empty in safe glyph mode."""
    return glyphs.codex_mark if product == Product.CODEX else glyphs.claude_mark


def render_group_header(
    model: Model, product: Product, label: str, now: datetime, width: int
) -> str:
    """The accent-striped provider label with cost or freshness on the right."""
    glyphs = model.glyphs()
    accent = Style(foreground=accent_for(product))
    left = accent.render(glyphs.stripe) + " "
    mark = provider_mark(glyphs, product)
    if mark:
        left += accent.render(mark) + " "
    left += replace(accent, bold=True).render(label)

    if model.cost_active():
        cluster = value_cluster(model, product)
        if cluster is None:
            return left
        gap = width - display_width(left) - display_width(cluster)
        if gap < 1:
            return left
        return left + " " * gap + accent.render(cluster)

    fresh = group_freshness_text(model, product, now)
    if model.refreshing:
        spinner = spinner_frame(model.anim_phase, glyphs)
        fresh = f"{spinner} {fresh}" if fresh is not None else f"{spinner} refreshing"
    if fresh is None:
        return left
    gap = width - display_width(left) - display_width(fresh)
    if gap < 1:
        return left
    return left + " " * gap + HINT_STYLE.render(fresh)


def render_footer(model: Model, inner_width: int) -> str:
    """Key hints, or recovery hints when a visible provider has no data."""
    hints = footer_recovery_hints(model)
    if not hints:
        full = [QUIT_HINT, REFRESH_HINT, "c cost", "v view", "t trend", "i icons"]
        return append_hint_within_width("", full, inner_width)
    footer = append_hint_within_width("", hints, inner_width)
    if footer:
        return footer
    return append_hint_within_width("", [QUIT_HINT], inner_width)


def _has_windows(model: Model, product: Product) -> bool:
    return bool(model.windows.get(product))


def footer_recovery_hints(model: Model) -> list[str]:
    """Hints for visible providers that failed without any data to show."""
    hints = []
    visibility = model.prefs.visibility
    if visibility.shows(Product.CLAUDE) and not _has_windows(model, Product.CLAUDE):
        error = model.errors.get(Product.CLAUDE)
        if error is not None:
            if error.category == ErrorCategory.MISSING and not model.claude_hook_installed:
                hints.append(CLAUDE_INSTALL_HINT)
            else:
                hints.append(CLAUDE_OPEN_HINT)
    if visibility.shows(Product.CODEX) and not _has_windows(model, Product.CODEX):
        if Product.CODEX in model.errors:
            hints.append(CODEX_OPEN_HINT)
    return hints


def append_hint_within_width(base: str, hints: list[str], width: int) -> str:
    """Join hints with `` · ``, skipping any that would overflow ``width``."""
    footer = base
    for hint in hints:
        candidate = f"{footer} · {hint}" if footer else hint
        if display_width(candidate) > width:
            continue
        footer = candidate
    return footer