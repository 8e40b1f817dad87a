from datetime import datetime, timedelta

import pytest

from llmquota.cost_view import format_value, render_freshness_line, value_cluster
from llmquota.history import Product, WindowKind
from llmquota.model import ErrorCategory, Model, SourceError, Window, WindowCost
from llmquota.prefs import DisplayPrefs, Visibility
from llmquota.style import display_width, strip_ansi

NOW = datetime(2026, 5, 29, 12, 0)


@pytest.mark.parametrize(
    "cost, expected",
    [
        (WindowCost(amount=3.2), "$3.20"),
        (WindowCost(amount=47.5), "$47.50"),
        (WindowCost(amount=0), "$0.00"),
        (WindowCost(amount=0.9, estimated=True), "~$0.90"),
        (WindowCost(amount=3.2, incomplete=True), "$3.20*"),
        (WindowCost(amount=1234, estimated=True, incomplete=True), "~$1.2k*"),
    ],
)
def test_format_value(cost, expected):
    assert format_value(cost) == expected


def test_value_cluster_text():
    model = Model(
        costs={
            Product.CLAUDE: {
                WindowKind.FIVE_HOUR: WindowCost(amount=3.2),
                WindowKind.SEVEN_DAY: WindowCost(amount=47.5),
            }
        }
    )
    assert value_cluster(model, Product.CLAUDE) == "5h $3.20 · 7d $47.50"
    assert value_cluster(model, Product.CODEX) is None


def test_value_cluster_single_window():
    model = Model(costs={Product.CLAUDE: {WindowKind.SEVEN_DAY: WindowCost(amount=47.5)}})
    assert value_cluster(model, Product.CLAUDE) == "7d $47.50"


def test_value_cluster_none_for_unrelated_kinds():
    model = Model(
        costs={Product.CLAUDE: {WindowKind.SONNET_SEVEN_DAY: WindowCost(amount=1.0)}}
    )
    assert value_cluster(model, Product.CLAUDE) is None


def _window(product, captured_at):
    return Window(
        product=product,
        kind=WindowKind.FIVE_HOUR,
        captured_at=captured_at,
        resets_at=NOW + timedelta(hours=1),
    )


def test_freshness_line_marks_stale():
    model = Model(
        clock=lambda: NOW,
        costs={Product.CLAUDE: {WindowKind.FIVE_HOUR: WindowCost(amount=3.2)}},
    )
    model.windows[Product.CLAUDE] = [_window(Product.CLAUDE, NOW - timedelta(hours=2))]
    line = render_freshness_line(model, NOW, 60)
    assert line is not None
    assert "old" in strip_ansi(line)


def test_freshness_line_mentions_products_and_legend():
    model = Model(
        clock=lambda: NOW,
        costs={
            Product.CODEX: {WindowKind.FIVE_HOUR: WindowCost(amount=0.9, estimated=True)}
        },
    )
    model.windows[Product.CODEX] = [_window(Product.CODEX, NOW - timedelta(minutes=2))]
    line = render_freshness_line(model, NOW, 46)
    assert line is not None
    plain = strip_ansi(line)
    assert "Codex" in plain
    assert "~ est" in plain
    assert display_width(line) == 46


def test_freshness_line_none_without_captures():
    model = Model(
        clock=lambda: NOW,
        costs={Product.CLAUDE: {WindowKind.FIVE_HOUR: WindowCost(amount=3.2)}},
    )
    assert render_freshness_line(model, NOW, 60) is None


def test_freshness_line_respects_visibility():
    model = Model(
        clock=lambda: NOW,
        prefs=DisplayPrefs(visibility=Visibility.CODEX_ONLY),
        costs={Product.CLAUDE: {WindowKind.FIVE_HOUR: WindowCost(amount=3.2)}},
    )
    model.windows[Product.CLAUDE] = [_window(Product.CLAUDE, NOW)]
    assert render_freshness_line(model, NOW, 60) is None


def test_freshness_line_warns_on_error():
    model = Model(
        clock=lambda: NOW,
        costs={Product.CLAUDE: {WindowKind.FIVE_HOUR: WindowCost(amount=3.2)}},
    )
    model.windows[Product.CLAUDE] = [_window(Product.CLAUDE, NOW)]
    model.errors[Product.CLAUDE] = SourceError(Product.CLAUDE, ErrorCategory.READ)
    plain = strip_ansi(render_freshness_line(model, NOW, 60))
    assert plain.startswith("fresh: Claude")
    assert model.glyphs().warning in plain