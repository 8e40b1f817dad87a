import pytest

from llmquota.history import Product
from llmquota.prefs import DisplayPrefs, Visibility


def test_visibility_next_cycles():
    seen = []
    v = Visibility.BOTH
    for _ in range(4):
        seen.append(v)
        v = v.next()
    assert seen == [
        Visibility.BOTH,
        Visibility.CLAUDE_ONLY,
        Visibility.CODEX_ONLY,
        Visibility.BOTH,
    ]


@pytest.mark.parametrize(
    "visibility, claude, codex",
    [
        (Visibility.BOTH, True, True),
        (Visibility.CLAUDE_ONLY, True, False),
        (Visibility.CODEX_ONLY, False, True),
    ],
)
def test_visibility_shows(visibility, claude, codex):
    assert visibility.shows(Product.CLAUDE) is claude
    assert visibility.shows(Product.CODEX) is codex


def test_visibility_names():
    assert str(Visibility.CODEX_ONLY.next()) == "VisibilityBoth"
    assert str(Visibility.CLAUDE_ONLY.next()) == "VisibilityCodexOnly"


def test_trend_visible_defaults_on():
    p = DisplayPrefs()
    assert p.trend_visible() is True
    p.hide_trend = True
    assert p.trend_visible() is False


def test_icons_default_off():
    assert DisplayPrefs().icons is False


def test_cost_visible_defaults_on():
    p = DisplayPrefs()
    assert p.cost_visible() is True
    p.hide_cost = True
    assert p.cost_visible() is False


def test_default_visibility_is_both():
    assert DisplayPrefs().visibility is Visibility.BOTH