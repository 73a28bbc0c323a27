# File: rcg/geom/curves.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Curvas Bézier cuadrática/cúbica + intersección curva-línea por aplanado.
# Notes:
#   - El mapeo cp -> término de cada fórmula NO es el convencional; render lo respeta.
#   - El barrido t: 1 -> -1 (decreciente) define qué intersección se devuelve.
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

from rcg.core.version import DEFAULT_CURVE_RESOLUTION, DEFAULT_PARALLEL_EPS
from rcg.geom.primitives import Line, Point
from rcg.geom.surface import DrawingSurface
from rcg.utils.errors import RcgValidationError

log = logging.getLogger(__name__)

# El barrido sigue mientras t > SWEEP_END (sobrepasa el dominio natural [0,1]).
SWEEP_START = 1.0
SWEEP_END = -1.0


def flatten_line_intersection(
    point_in_time: Callable[[float], Point],
    start: Point,
    line: Line,
    *,
    resolution: float = DEFAULT_CURVE_RESOLUTION,
    parallel_eps: float = DEFAULT_PARALLEL_EPS,
) -> Optional[Point]:
    """First intersection of `line` with a flattened curve.

    The curve is sampled at t = 1, 1 - r, 1 - 2r, ... while t > -1 (t is
    decremented in floating point, so the samples drift exactly like a
    running sum). Each sample is joined to the previous one (the first to
    `start`) by a secant, and `line.line_intersection(secant)` is tested.

    The first hit in that decreasing-t order is returned: when the line
    crosses the curve more than once, the crossing with the largest t wins.
    The point lies on `line` (it is the receiver of the segment test).
    """
    if not math.isfinite(resolution) or resolution <= 0.0:
        raise RcgValidationError(f"resolution debe ser > 0 (recibido {resolution!r})")

    last = start
    t = SWEEP_START
    secants = 0
    while t > SWEEP_END:
        p = point_in_time(t)
        hit = line.line_intersection(Line(last, p), parallel_eps=parallel_eps)
        secants += 1
        if hit is not None:
            log.debug("flatten: hit at t=%.6f after %d secants -> %s", t, secants, hit)
            return hit
        last = p
        t -= resolution

    log.debug("flatten: no hit after %d secants (resolution=%s)", secants, resolution)
    return None


@dataclass(frozen=True)
class QuadraticCurve:
    """Quadratic Bézier. `cp0` and `cp2` are the ends (t=1 and t=0), `cp1` the control."""

    cp0: Point = field(default_factory=Point)
    cp1: Point = field(default_factory=Point)
    cp2: Point = field(default_factory=Point)

    def point_in_time(self, t: float) -> Point:
        """P(t) = cp0*t^2 + cp1*2t(1-t) + cp2*(1-t)^2, for any real t."""
        a = t * t
        b = 2.0 * t * (1.0 - t)
        c = (1.0 - t) ** 2
        return Point(
            self.cp0.x * a + self.cp1.x * b + self.cp2.x * c,
            self.cp0.y * a + self.cp1.y * b + self.cp2.y * c,
        )

    def line_intersection(
        self,
        line: Line,
        resolution: float = DEFAULT_CURVE_RESOLUTION,
        parallel_eps: float = DEFAULT_PARALLEL_EPS,
    ) -> Optional[Point]:
        # TODO: a quadratic admits a closed-form root solve; swap in once the
        # sweep tie-break (largest t first) is reproduced by it.
        return flatten_line_intersection(
            self.point_in_time,
            self.cp0,
            line,
            resolution=resolution,
            parallel_eps=parallel_eps,
        )

    def render(self, surface: DrawingSurface, width: float, height: float) -> None:
        surface.moveTo(*self.cp0.scaled(width, height))
        surface.quadraticCurveTo(
            *self.cp1.scaled(width, height),
            *self.cp2.scaled(width, height),
        )

    def __str__(self) -> str:
        return f"({self.cp0},{self.cp1},{self.cp2})"


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bézier with the project's control-point mapping.

    t=1 -> cp0 and t=0 -> cp1; cp3 weighs the t^2 term and cp2 the t term:

        P(t) = cp0*t^3 + cp3*3t^2(1-t) + cp2*3t(1-t)^2 + cp1*(1-t)^3

    `render` draws from cp0 with controls (cp3, cp2) ending at cp1, which is
    the same curve.
    """

    cp0: Point = field(default_factory=Point)
    cp1: Point = field(default_factory=Point)
    cp2: Point = field(default_factory=Point)
    cp3: Point = field(default_factory=Point)

    def point_in_time(self, t: float) -> Point:
        u = 1.0 - t
        k0 = t ** 3
        k3 = 3.0 * (t * t) * u
        k2 = 3.0 * t * (u * u)
        k1 = u ** 3
        return Point(
            self.cp0.x * k0 + self.cp3.x * k3 + self.cp2.x * k2 + self.cp1.x * k1,
            self.cp0.y * k0 + self.cp3.y * k3 + self.cp2.y * k2 + self.cp1.y * k1,
        )

    def line_intersection(
        self,
        line: Line,
        resolution: float = DEFAULT_CURVE_RESOLUTION,
        parallel_eps: float = DEFAULT_PARALLEL_EPS,
    ) -> Optional[Point]:
        return flatten_line_intersection(
            self.point_in_time,
            self.cp0,
            line,
            resolution=resolution,
            parallel_eps=parallel_eps,
        )

    def render(self, surface: DrawingSurface, width: float, height: float) -> None:
        surface.moveTo(*self.cp0.scaled(width, height))
        surface.bezierCurveTo(
            *self.cp3.scaled(width, height),
            *self.cp2.scaled(width, height),
            *self.cp1.scaled(width, height),
        )

    def __str__(self) -> str:
        return f"({self.cp0},{self.cp1},{self.cp2},{self.cp3})"