"""Glyphs for the safe Unicode and Nerd Font display modes."""

from __future__ import annotations

from dataclasses import dataclass

SPINNER_HOLD = 2

_SPINNER = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


@dataclass(frozen=True)
class GlyphSet:
    """Strings that differ between display modes."""

    stripe: str = "▎"
    claude_mark: str = ""
    codex_mark: str = ""
    clock: str = ""
    warning: str = "⚠"
    spinner: tuple[str, ...] = _SPINNER


def glyphs_for(icons: bool) -> GlyphSet:
    """The glyph set for Nerd Font icon mode or the safe default."""
    if icons:
        return GlyphSet(
            claude_mark="\uf0e7",  # nf-fa-bolt
            codex_mark="\uf121",  # nf-fa-code
            clock="\uf017",  # nf-fa-clock_o
            warning="\uf071",  # nf-fa-warning
        )
    return GlyphSet()


def spinner_frame(phase: int, glyphs: GlyphSet) -> str:
    """The spinner glyph for an animation phase."""
    if not glyphs.spinner:
        return ""
    return glyphs.spinner[(phase // SPINNER_HOLD) % len(glyphs.spinner)]