"""Spend values for the group headers and the consolidated freshness line."""

from __future__ import annotations

from datetime import datetime

from llmquota.freshness import age_text, source_freshness, source_is_stale
from llmquota.history import Product, WindowKind
from llmquota.model import Model, WindowCost
from llmquota.style import HINT_STYLE, format_cell

_PRODUCT_LABELS = ((Product.CLAUDE, "Claude"), (Product.CODEX, "Codex"))


def format_value(cost: WindowCost) -> str:
    """Render a cost: ``$3.20``, ``~$0.90`` (estimate), ``$3.20*`` (incomplete), ``$1.2k``."""
    prefix = "~" if cost.estimated else ""
    if cost.amount >= 1000:
        amount = f"${cost.amount / 1000:.1f}k"
    else:
        amount = f"${cost.amount:.2f}"
    suffix = "*" if cost.incomplete else ""
    return prefix + amount + suffix


def value_cluster(model: Model, product: Product) -> str | None:
    """``5h $X · 7d $Y`` for a product, or None when it has no cost data."""
    by_kind = model.costs.get(product)
    if not by_kind:
        return None
    parts = [
        f"{label} {format_value(by_kind[kind])}"
        for kind, label in ((WindowKind.FIVE_HOUR, "5h"), (WindowKind.SEVEN_DAY, "7d"))
        if kind in by_kind
    ]
    if not parts:
        return None
    return " · ".join(parts)


def render_freshness_line(model: Model, now: datetime, width: int) -> str | None:
    """The dim ``fresh: Claude 2m · Codex 1h`` line, or None without freshness."""
    parts = []
    codex_shown = False
    for product, label in _PRODUCT_LABELS:
        if not model.prefs.visibility.shows(product):
            continue
        if product == Product.CODEX and model.costs.get(product):
            codex_shown = True
        freshness = source_freshness(model, product, now)
        if freshness is None:
            continue
        token = f"{label} {age_text(freshness[1])}"
        if source_is_stale(model, product, now):
            token += " old"
        error = model.errors.get(product)
        if error is not None and error.category is not None:
            token += " " + model.glyphs().warning
        parts.append(token)
    if not parts:
        return None
    text = "fresh: " + " · ".join(parts)
    if codex_shown:
        text += " · ~ est"
    return HINT_STYLE.render(format_cell(text, width, False))