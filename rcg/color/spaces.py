# File: rcg/color/spaces.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Espacios de color RGB / HSL y conversión entre ambos.
# Notes:
#   - Sin validación de rangos: valores fuera de [0,1] se propagan tal cual.
#   - h viaja en sextantes (1 unidad = 60°): es lo que produce rgb_to_hsl y lo que divide hsl_to_rgb.
#   - HslMode.LEGACY reproduce byte a byte la conversión histórica (ver docstrings).
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rcg.utils.numbers import fmt_num, round_half_up


class HslMode(str, Enum):
    """Which RGB<->HSL conversion to run.

    - standard: textbook conversion (blue-max hue branch, blue channel at hue - 1/3).
    - legacy: historical behaviour. The blue-max hue branch tests
      ``b - max`` for truthiness, so blue-max colours keep hue 0; and the blue
      channel is evaluated at the *red result* instead of hue - 1/3.
    """

    STANDARD = "standard"
    LEGACY = "legacy"


DEFAULT_HSL_MODE = HslMode.STANDARD


def coerce_hsl_mode(v: object, default: HslMode = DEFAULT_HSL_MODE) -> HslMode:
    if isinstance(v, HslMode):
        return v
    s = str(v or "").strip().lower()
    for m in HslMode:
        if m.value == s:
            return m
    return default


@dataclass(frozen=True)
class RGBColor:
    """RGB colour, channels in [0,1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def to_hsl(self, mode: HslMode = DEFAULT_HSL_MODE) -> "HSLColor":
        return HSLColor.from_rgb(self, mode=mode)

    def __str__(self) -> str:
        # Formato compatible con fillStyle/strokeStyle de canvas.
        return "rgb({},{},{})".format(
            fmt_num(round_half_up(self.r * 255.0)),
            fmt_num(round_half_up(self.g * 255.0)),
            fmt_num(round_half_up(self.b * 255.0)),
        )


@dataclass(frozen=True)
class HSLColor:
    """HSL colour: hue in sextants, saturation and luminosity in [0,1]."""

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    def to_rgb(self, mode: HslMode = DEFAULT_HSL_MODE) -> RGBColor:
        return hsl_to_rgb(self, mode=mode)

    @staticmethod
    def from_rgb(rgb: RGBColor, mode: HslMode = DEFAULT_HSL_MODE) -> "HSLColor":
        return rgb_to_hsl(rgb, mode=mode)

    def __str__(self) -> str:
        # Valores crudos (no es un string CSS válido: h en sextantes, s/l sin %).
        return f"hsl({fmt_num(self.h)},{fmt_num(self.s)},{fmt_num(self.l)})"


def _channel(c: float, t1: float, t2: float) -> float:
    """One RGB channel from a hue fraction `c` (wrapped once into [0,1])."""
    if c < 0.0:
        c += 1.0
    if c > 1.0:
        c -= 1.0
    if 6.0 * c < 1.0:
        return t1 + (t2 - t1) * 6.0 * c
    if 2.0 * c < 1.0:
        return t2
    if 3.0 * c < 2.0:
        return t1 + (t2 - t1) * (2.0 / 3.0 - c) * 6.0
    return t1


def hsl_to_rgb(hsl: HSLColor, mode: HslMode = DEFAULT_HSL_MODE) -> RGBColor:
    """HSL -> RGB.

    Zero saturation is achromatic and rounds the luminosity itself (half up)
    for every channel, giving 0 or 1 for l in [0,1]; it is not scaled gray.
    """
    if hsl.s == 0.0:
        x = round_half_up(hsl.l)
        return RGBColor(x, x, x)

    th = hsl.h / 6.0
    if hsl.l < 0.5:
        t2 = hsl.l * (1.0 + hsl.s)
    else:
        t2 = (hsl.l + hsl.s) - (hsl.l * hsl.s)
    t1 = 2.0 * hsl.l - t2

    r = _channel(th + 1.0 / 3.0, t1, t2)
    g = _channel(th, t1, t2)
    if mode is HslMode.LEGACY:
        b = _channel(r, t1, t2)
    else:
        b = _channel(th - 1.0 / 3.0, t1, t2)
    return RGBColor(r, g, b)


def rgb_to_hsl(rgb: RGBColor, mode: HslMode = DEFAULT_HSL_MODE) -> HSLColor:
    """RGB -> HSL (hue in sextants, may be negative when red is max and g < b)."""
    rmin = min(rgb.r, rgb.g, rgb.b)
    rmax = max(rgb.r, rgb.g, rgb.b)
    delta = rmax - rmin
    h = 0.0
    s = 0.0
    l = (rmax + rmin) / 2.0  # noqa: E741

    if delta != 0.0:
        if l < 0.5:
            s = delta / (rmax + rmin)
        else:
            s = delta / (2.0 - rmax - rmin)

        if rgb.r == rmax:
            h = (rgb.g - rgb.b) / delta
        elif rgb.g == rmax:
            h = 2.0 + (rgb.b - rgb.r) / delta
        elif _blue_is_max(rgb.b, rmax, mode):
            h = 4.0 + (rgb.r - rgb.g) / delta

    return HSLColor(h, s, l)


def _blue_is_max(b: float, rmax: float, mode: HslMode) -> bool:
    if mode is HslMode.LEGACY:
        # Histórico: test de "distinto de cero" en vez de igualdad.
        return (b - rmax) != 0.0
    return b == rmax
