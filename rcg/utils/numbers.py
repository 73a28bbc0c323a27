# File: rcg/utils/numbers.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Redondeo y formateo numérico compartido por geom/color.
# Notes: Formato de números como Number#toString de JS ("1", "0.5", "NaN", "1e-7").
from __future__ import annotations

import math
from decimal import Decimal


def round_half_up(v: float) -> float:
    """Redondeo .5 hacia arriba (no bancario). NaN/inf pasan sin tocar."""
    if not math.isfinite(v):
        return v
    return float(math.floor(v + 0.5))


def fmt_num(v: float) -> str:
    """Número -> texto con las reglas de Number#toString de JS.

    Enteros sin '.0', NaN/Infinity, y notación exponencial solo fuera de
    [1e-6, 1e21) con exponente sin ceros a la izquierda ("1e-7", "1e+21").
    Los dígitos son los del repr más corto de Python (mismo criterio que JS).
    """
    v = float(v)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0.0:
        return "0"
    a = abs(v)
    if a >= 1e21 or a < 1e-6:
        sign, digits, exp = Decimal(repr(v)).normalize().as_tuple()
        n = len(digits) + exp - 1
        mant = str(digits[0])
        if len(digits) > 1:
            mant += "." + "".join(str(d) for d in digits[1:])
        return f"{'-' if sign else ''}{mant}e{'+' if n >= 0 else '-'}{abs(n)}"
    return format(Decimal(repr(v)).normalize(), "f")
