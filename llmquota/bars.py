"""Gradient progress bars, pace ticks and the at-risk pulse."""

from __future__ import annotations

import math

from llmquota.colors import MOCHA_SURFACE0, MOCHA_TEXT, RAMP_HIGH, Color, ramp_color
from llmquota.style import Style

BAR_EMPTY_RUNE = "░"
BAR_FULL_RUNE = "█"
PACE_MARKER_RUNE = "╎"
PULSE_PERIOD = 30  # animation frames per full pulse cycle

PULSE_DIM = Color.from_hex("#7d4859")

# FRACTIONAL_TIP_RUNES[i] is the left-aligned partial block for i/8 of a cell.
FRACTIONAL_TIP_RUNES = (" ", "▏", "▎", "▍", "▌", "▋", "▊", "▉")

BAR_TRACK_STYLE = Style(foreground=MOCHA_SURFACE0)
_TICK_STYLE = Style(foreground=MOCHA_TEXT)


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def pulse_colorful(phase: int) -> Color:
    """Oscillate between a dim and a full red over ``PULSE_PERIOD`` frames."""
    t = (math.sin(2 * math.pi * phase / PULSE_PERIOD) + 1) / 2
    return PULSE_DIM.blend_hcl(RAMP_HIGH, t).clamped()


def pulse_color(phase: int) -> str:
    """The pulse colour for ``phase`` as a hex string."""
    return pulse_colorful(phase).hex()


def paced_bar(fraction: float, width: int, even_use: float) -> str:
    """A gradient bar with the even-use tick overlaid."""
    return overlay_even_use_tick(render_gradient_bar(fraction, width), width, even_use)


def render_gradient_bar(fraction: float, width: int) -> str:
    """Draw a ``width``-cell bar filled to ``fraction`` along the usage ramp.

    Cell ``i`` takes the ramp colour at ``i / (width - 1)`` so the tip colour
    encodes the percentage; a partial block gives sub-cell precision.
    """
    width = max(width, 1)
    fraction = _clamp_unit(fraction)

    def cell_color(index: int) -> str:
        if width == 1:
            return ramp_color(fraction)
        return ramp_color(index / (width - 1))

    filled = fraction * width
    full_cells = min(int(filled), width)

    cells = [Style(foreground=cell_color(i)).render(BAR_FULL_RUNE) for i in range(full_cells)]
    if full_cells < width:
        tip = int((filled - full_cells) * 8)
        if tip > 0:
            cells.append(Style(foreground=cell_color(full_cells)).render(FRACTIONAL_TIP_RUNES[tip]))
    cells.extend(BAR_TRACK_STYLE.render(BAR_EMPTY_RUNE) for _ in range(width - len(cells)))
    return "".join(cells)


def overlay_even_use_tick(bar: str, width: int, fraction: float) -> str:
    """Replace the cell at the elapsed-fraction position with a tick marker."""
    if width <= 0:
        return bar
    fraction = _clamp_unit(fraction)
    column = min(max(math.floor(fraction * (width - 1) + 0.5), 0), width - 1)
    return replace_cell_at(bar, column, _TICK_STYLE.render(PACE_MARKER_RUNE))


def replace_cell_at(s: str, col: int, replacement: str) -> str:
    """Swap the visible character at column ``col`` for ``replacement``.

    Escape sequences are copied verbatim, and the last one seen is emitted
    again after the replacement so the following cells keep their style.
    """
    out: list[str] = []
    visible = 0
    last_escape = ""
    i = 0
    length = len(s)
    while i < length:
        if s[i] == "\x1b":
            j = i + 1
            if j < length and s[j] == "[":
                j += 1
                while j < length and not ("@" <= s[j] <= "~"):
                    j += 1
                if j < length:
                    j += 1
            last_escape = s[i:j]
            out.append(last_escape)
            i = j
            continue
        if visible == col:
            out.append(replacement)
            out.append(last_escape)
        else:
            out.append(s[i])
        visible += 1
        i += 1
    return "".join(out)


def progress_fraction(percent: float) -> float:
    """A percentage as a fraction clamped to [0, 1]."""
    if percent < 0:
        return 0.0
    if percent > 100:
        return 1.0
    return percent / 100