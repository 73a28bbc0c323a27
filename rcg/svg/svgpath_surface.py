# File: rcg/svg/svgpath_surface.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Adaptador DrawingSurface -> svgelements.Path (para export SVG).
# Notes:
#   - Los arcos van como segmentos Arc de svgelements (vuelta completa = 2 medias vueltas).
#   - Se guarda el punto actual porque cada segmento svgelements lleva su start explícito.
from __future__ import annotations

from typing import Optional, Tuple

from svgelements import Arc, CubicBezier, Line, Move, Path, Point, QuadraticBezier

from rcg.geom.surface import TAU, arc_sweep


class SvgPathSurface:
    """Accumulates canvas-style draw calls as an svgelements Path."""

    def __init__(self) -> None:
        self.path = Path()
        self._current: Optional[Tuple[float, float]] = None

    def _pt(self, x: float, y: float) -> Tuple[float, float]:
        return (float(x), float(y))

    def moveTo(self, x: float, y: float) -> None:
        end = self._pt(x, y)
        self.path.append(Move(start=self._current, end=end))
        self._current = end

    def lineTo(self, x: float, y: float) -> None:
        end = self._pt(x, y)
        if self._current is None:
            # canvas: lineTo sin subpath equivale a moveTo
            self.moveTo(*end)
            return
        self.path.append(Line(start=self._current, end=end))
        self._current = end

    def arc(self, x, y, radius, startAngle, endAngle, counterclockwise=False) -> None:
        cx, cy, r = float(x), float(y), float(radius)
        a0 = float(startAngle)
        sweep = arc_sweep(a0, float(endAngle), bool(counterclockwise))

        center = Point(cx, cy)
        start = Point.polar(center, a0, r)
        if self._current is None:
            self.moveTo(start.x, start.y)
        elif self._current != (start.x, start.y):
            self.lineTo(start.x, start.y)

        if sweep == 0.0 or r == 0.0:
            return

        # Un Arc SVG no puede cerrar sobre su propio start.
        parts = 2 if abs(sweep) >= TAU else 1
        step = sweep / parts
        for i in range(parts):
            seg_start = self._pt(*self._current)
            end = Point.polar(center, a0 + step * (i + 1), r)
            seg_end = self._pt(end.x, end.y)
            self.path.append(Arc(start=seg_start, end=seg_end, center=(cx, cy), sweep=step))
            self._current = seg_end

    def quadraticCurveTo(self, cpx, cpy, x, y) -> None:
        if self._current is None:
            self.moveTo(cpx, cpy)
        end = self._pt(x, y)
        self.path.append(QuadraticBezier(self._current, self._pt(cpx, cpy), end))
        self._current = end

    def bezierCurveTo(self, cp1x, cp1y, cp2x, cp2y, x, y) -> None:
        if self._current is None:
            self.moveTo(cp1x, cp1y)
        end = self._pt(x, y)
        self.path.append(CubicBezier(self._current, self._pt(cp1x, cp1y), self._pt(cp2x, cp2y), end))
        self._current = end

    def d(self) -> str:
        """SVG path data for everything drawn so far."""
        return self.path.d()
