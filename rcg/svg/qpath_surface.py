# File: rcg/svg/qpath_surface.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Adaptador DrawingSurface -> QPainterPath (PySide6).
# Notes:
#   - No necesita QApplication: QPainterPath es solo geometría.
#   - Qt mide ángulos en grados y antihorario; el canvas en radianes con y hacia abajo.
from __future__ import annotations

import math

from PySide6.QtCore import QRectF
from PySide6.QtGui import QPainterPath

from rcg.geom.surface import arc_sweep


class QPainterPathSurface:
    """Builds a QPainterPath from canvas-style draw calls."""

    def __init__(self, path: QPainterPath | None = None) -> None:
        self.path = path if path is not None else QPainterPath()

    def moveTo(self, x: float, y: float) -> None:
        self.path.moveTo(float(x), float(y))

    def lineTo(self, x: float, y: float) -> None:
        self.path.lineTo(float(x), float(y))

    def arc(self, x, y, radius, startAngle, endAngle, counterclockwise=False) -> None:
        r = float(radius)
        rect = QRectF(float(x) - r, float(y) - r, 2.0 * r, 2.0 * r)
        sweep = arc_sweep(float(startAngle), float(endAngle), bool(counterclockwise))

        # Canvas angle a == Qt angle -a (ejes y opuestos).
        start_deg = -math.degrees(float(startAngle))
        sweep_deg = -math.degrees(sweep)

        # Path vacío: arcTo uniría desde (0,0); el canvas arranca en el inicio del arco.
        if self.path.elementCount() == 0:
            self.path.arcMoveTo(rect, start_deg)
        self.path.arcTo(rect, start_deg, sweep_deg)

    def quadraticCurveTo(self, cpx, cpy, x, y) -> None:
        self.path.quadTo(float(cpx), float(cpy), float(x), float(y))

    def bezierCurveTo(self, cp1x, cp1y, cp2x, cp2y, x, y) -> None:
        self.path.cubicTo(float(cp1x), float(cp1y), float(cp2x), float(cp2y), float(x), float(y))
