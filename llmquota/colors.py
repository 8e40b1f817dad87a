"""Palette and perceptual colour ramps for the quota display."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

MOCHA_BASE = "#1e1e2e"
MOCHA_SURFACE0 = "#313244"
MOCHA_TEXT = "#cdd6f4"
MOCHA_SUBTEXT0 = "#a6adc8"
MOCHA_BLUE = "#89b4fa"
MOCHA_GREEN = "#a6e3a1"
MOCHA_YELLOW = "#f9e2af"
MOCHA_RED = "#f38ba8"

MOCHA_PEACH = "#fab387"  # Claude accent
MOCHA_TEAL = "#94e2d5"  # Codex accent

_D65 = (0.95047, 1.00000, 1.08883)
_HEX_DIGITS = frozenset(string.hexdigits)
_RAD_TO_DEG = 57.29577951308232087721
_DEG_TO_RAD = 0.01745329251994329576
_CHROMA_FLOOR = 0.00015
_RGB_DELTA = 1.0 / 255.0


def _linearize(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return math.pow((v + 0.055) / 1.055, 2.4)


def _delinearize(v: float) -> float:
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * math.pow(v, 1.0 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    if t > 6.0 / 29.0 * 6.0 / 29.0 * 6.0 / 29.0:
        return t ** (1.0 / 3.0)
    return t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0


def _lab_finv(t: float) -> float:
    if t > 6.0 / 29.0:
        return t * t * t
    return 3.0 * 6.0 / 29.0 * 6.0 / 29.0 * (t - 4.0 / 29.0)


def _interp_angle(a0: float, a1: float, t: float) -> float:
    delta = math.fmod(math.fmod(a1 - a0, 360.0) + 540.0, 360.0) - 180.0
    return math.fmod(a0 + t * delta + 360.0, 360.0)


@dataclass(frozen=True)
class Color:
    """An sRGB colour with channels nominally in [0, 1]."""

    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` or ``#rgb``; raise ValueError otherwise."""
        if not value.startswith("#") or not set(value[1:]) <= _HEX_DIGITS:
            raise ValueError(f"invalid hex colour {value!r}")
        digits = value[1:]
        if len(digits) == 6:
            channels = [int(digits[i : i + 2], 16) / 255.0 for i in (0, 2, 4)]
        elif len(digits) == 3:
            channels = [int(d, 16) / 15.0 for d in digits]
        else:
            raise ValueError(f"invalid hex colour {value!r}")
        return cls(*channels)

    def _rgb255(self) -> tuple[int, int, int]:
        def channel(v: float) -> int:
            return min(max(int(v * 255.0 + 0.5), 0), 255)

        return channel(self.r), channel(self.g), channel(self.b)

    def hex(self) -> str:
        """The colour as ``#rrggbb``."""
        red, green, blue = self._rgb255()
        return f"#{red:02x}{green:02x}{blue:02x}"

    def clamped(self) -> Color:
        """The colour with each channel clamped to [0, 1]."""
        return Color(*(min(max(c, 0.0), 1.0) for c in (self.r, self.g, self.b)))

    def _lab(self) -> tuple[float, float, float]:
        r, g, b = (_linearize(c) for c in (self.r, self.g, self.b))
        x = 0.41239079926595948 * r + 0.35758433938387796 * g + 0.18048078840183429 * b
        y = 0.21263900587151036 * r + 0.71516867876775593 * g + 0.072192315360733715 * b
        z = 0.019330818715591851 * r + 0.11919477979462599 * g + 0.95053215224966058 * b
        fy = _lab_f(y / _D65[1])
        lightness = 1.16 * fy - 0.16
        a = 5.0 * (_lab_f(x / _D65[0]) - fy)
        bb = 2.0 * (fy - _lab_f(z / _D65[2]))
        return lightness, a, bb

    @classmethod
    def _from_lab(cls, lightness: float, a: float, b: float) -> Color:
        l2 = (lightness + 0.16) / 1.16
        x = _D65[0] * _lab_finv(l2 + a / 5.0)
        y = _D65[1] * _lab_finv(l2)
        z = _D65[2] * _lab_finv(l2 - b / 2.0)
        r = 3.2409699419045214 * x - 1.5373831775700935 * y - 0.49861076029300328 * z
        g = -0.96924363628087983 * x + 1.8759675015077207 * y + 0.041555057407175613 * z
        bl = 0.055630079696993609 * x - 0.20397695888897657 * y + 1.0569715142428786 * z
        return cls(_delinearize(r), _delinearize(g), _delinearize(bl))

    def hcl(self) -> tuple[float, float, float]:
        """Hue in degrees, chroma and lightness (D65 white)."""
        lightness, a, b = self._lab()
        if abs(b - a) > 1e-4 and abs(a) > 1e-4:
            hue = math.fmod(_RAD_TO_DEG * math.atan2(b, a) + 360.0, 360.0)
        else:
            hue = 0.0
        return hue, math.hypot(a, b), lightness

    @classmethod
    def _from_hcl(cls, hue: float, chroma: float, lightness: float) -> Color:
        angle = _DEG_TO_RAD * hue
        return cls._from_lab(lightness, chroma * math.cos(angle), chroma * math.sin(angle))

    def blend_hcl(self, other: Color, t: float) -> Color:
        """Blend towards ``other`` in HCL space; ``t`` runs from 0 to 1."""
        h1, c1, l1 = self.hcl()
        h2, c2, l2 = other.hcl()
        if c1 <= _CHROMA_FLOOR and c2 >= _CHROMA_FLOOR:
            h1 = h2
        elif c2 <= _CHROMA_FLOOR and c1 >= _CHROMA_FLOOR:
            h2 = h1
        return Color._from_hcl(
            _interp_angle(h1, h2, t), c1 + t * (c2 - c1), l1 + t * (l2 - l1)
        ).clamped()

    def distance_lab(self, other: Color) -> float:
        """Euclidean distance in Lab space."""
        return math.dist(self._lab(), other._lab())

    def almost_equal_rgb(self, other: Color) -> bool:
        """Whether the two colours differ by less than one 8-bit step per channel."""
        total = abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)
        return total < 3.0 * _RGB_DELTA


RAMP_LOW = Color.from_hex("#a6e3a1")  # green  (low usage)
RAMP_MID = Color.from_hex("#f9e2af")  # yellow (mid usage)
RAMP_HIGH = Color.from_hex("#f38ba8")  # red    (high usage)


def ramp_colorful(f: float) -> Color:
    """Bar fill colour at position ``f``: green → yellow → red, blended in HCL."""
    if f <= 0:
        return RAMP_LOW
    if f >= 1:
        return RAMP_HIGH
    if f < 0.5:
        return RAMP_LOW.blend_hcl(RAMP_MID, f / 0.5).clamped()
    return RAMP_MID.blend_hcl(RAMP_HIGH, (f - 0.5) / 0.5).clamped()


def ramp_color(f: float) -> str:
    """The ramp colour at ``f`` as a hex string."""
    return ramp_colorful(f).hex()


def threshold_color(percent: float) -> str:
    """Red from 85%, yellow from 60%, green below."""
    if percent >= 85:
        return MOCHA_RED
    if percent >= 60:
        return MOCHA_YELLOW
    return MOCHA_GREEN