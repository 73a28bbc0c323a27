"""RGB / HSL colour value types and conversion functions."""

from __future__ import annotations

from .spaces import (
    DEFAULT_HSL_MODE,
    HSLColor,
    HslMode,
    RGBColor,
    coerce_hsl_mode,
    hsl_to_rgb,
    rgb_to_hsl,
)

__all__ = [
    "RGBColor",
    "HSLColor",
    "HslMode",
    "DEFAULT_HSL_MODE",
    "coerce_hsl_mode",
    "rgb_to_hsl",
    "hsl_to_rgb",
]
