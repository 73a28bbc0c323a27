# File: rcg/geom/surface.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Contrato del "drawing surface" (API estilo canvas) + superficie que graba llamadas.
# Notes:
#   - Sin dependencias: los adaptadores Qt/svgelements viven en rcg.svg.*
#   - Los nombres camelCase son los del contrato canvas (y coinciden con el estilo Qt).
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple, runtime_checkable

TAU = math.pi * 2.0


@runtime_checkable
class DrawingSurface(Protocol):
    """Minimal path-building API every `render` method draws into."""

    def moveTo(self, x: float, y: float) -> None: ...

    def lineTo(self, x: float, y: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        startAngle: float,
        endAngle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def quadraticCurveTo(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def bezierCurveTo(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None: ...


DrawCall = Tuple[str, Tuple[Any, ...]]


@dataclass
class RecordingSurface:
    """Surface that only records calls, in order. Used by tests and debug dumps."""

    calls: List[DrawCall] = field(default_factory=list)

    def moveTo(self, x: float, y: float) -> None:
        self.calls.append(("moveTo", (x, y)))

    def lineTo(self, x: float, y: float) -> None:
        self.calls.append(("lineTo", (x, y)))

    def arc(self, x, y, radius, startAngle, endAngle, counterclockwise=False) -> None:
        self.calls.append(("arc", (x, y, radius, startAngle, endAngle, bool(counterclockwise))))

    def quadraticCurveTo(self, cpx, cpy, x, y) -> None:
        self.calls.append(("quadraticCurveTo", (cpx, cpy, x, y)))

    def bezierCurveTo(self, cp1x, cp1y, cp2x, cp2y, x, y) -> None:
        self.calls.append(("bezierCurveTo", (cp1x, cp1y, cp2x, cp2y, x, y)))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def clear(self) -> None:
        self.calls.clear()


def arc_sweep(start_angle: float, end_angle: float, counterclockwise: bool) -> float:
    """Signed sweep (radians, canvas orientation) of an `arc` call.

    Follows canvas rules, except that any request spanning at least a full
    turn in either direction draws the full circle (`arc(x, y, r, 0, 2π, True)`
    is how points are drawn).
    """
    if abs(end_angle - start_angle) >= TAU:
        return -TAU if counterclockwise else TAU
    if counterclockwise:
        return -((start_angle - end_angle) % TAU)
    return (end_angle - start_angle) % TAU

