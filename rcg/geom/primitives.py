# File: rcg/geom/primitives.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Point / Line / Rectangle (valores inmutables) + render sobre un DrawingSurface.
# Notes: Las coordenadas son fracciones [0,1] del canvas; render escala a px.
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from rcg.core.version import DEFAULT_PARALLEL_EPS, DEFAULT_POINT_RADIUS
from rcg.geom.surface import DrawingSurface
from rcg.utils.errors import RcgNotImplementedError, RcgValidationError
from rcg.utils.numbers import fmt_num


@dataclass(frozen=True)
class Point:
    """2D point. Defaults to the origin."""

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to `other`."""
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)

    def scaled(self, width: float, height: float) -> tuple[float, float]:
        return (self.x * width, self.y * height)

    def render(
        self,
        surface: DrawingSurface,
        width: float,
        height: float,
        radius: float = DEFAULT_POINT_RADIUS,
    ) -> None:
        """Full circle of `radius` px at the scaled position."""
        x, y = self.scaled(width, height)
        surface.arc(x, y, radius, 0.0, math.pi * 2.0, True)

    def __str__(self) -> str:
        return f"({fmt_num(self.x)},{fmt_num(self.y)})"


@dataclass(frozen=True)
class Line:
    """Finite segment from `a` to `b`."""

    a: Point = field(default_factory=Point)
    b: Point = field(default_factory=Point)

    def mid_point(self) -> Point:
        return Point((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)

    def length(self) -> float:
        return self.a.distance_to(self.b)

    def line_intersection(
        self,
        other: "Line",
        parallel_eps: float = DEFAULT_PARALLEL_EPS,
    ) -> Optional[Point]:
        """Intersection of this segment with `other` (Bourke's determinant method).

        `ua` is the fraction along this segment, `ub` along `other`. A hit
        needs ``0 <= ua <= 1`` and ``0 < ub <= 1``: touching `other` exactly
        at its start (`ub == 0`) does not count, touching this segment at
        either end does.

        Lines whose denominator satisfies ``abs(d) <= parallel_eps`` are
        treated as parallel and return None. The default eps of 0.0 is the
        exact ``d == 0`` test; this also covers collinear/coincident lines
        and zero-length segments.

        Raises RcgValidationError if `parallel_eps` is negative or not finite.

        Returns the point on *this* segment, or None.
        """
        if not math.isfinite(parallel_eps) or parallel_eps < 0.0:
            raise RcgValidationError(f"parallel_eps debe ser >= 0 (recibido {parallel_eps!r})")

        a, b = self.a, self.b
        oa, ob = other.a, other.b

        # Same denominator for ua and ub.
        d = (ob.y - oa.y) * (b.x - a.x) - (ob.x - oa.x) * (b.y - a.y)
        if abs(d) <= parallel_eps:
            return None

        n_a = (ob.x - oa.x) * (a.y - oa.y) - (ob.y - oa.y) * (a.x - oa.x)
        n_b = (b.x - a.x) * (a.y - oa.y) - (b.y - a.y) * (a.x - oa.x)

        ua = n_a / d
        ub = n_b / d

        # Outside [0,1] the segments would need to be longer to meet.
        if 0.0 <= ua <= 1.0 and 0.0 < ub <= 1.0:
            return Point(a.x + ua * (b.x - a.x), a.y + ua * (b.y - a.y))
        return None

    def render(self, surface: DrawingSurface, width: float, height: float) -> None:
        surface.moveTo(*self.a.scaled(width, height))
        surface.lineTo(*self.b.scaled(width, height))

    def __str__(self) -> str:
        return f"({self.a},{self.b})"


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box: top-left `position` plus `width`/`height`.

    Unlike Point/Line, `width` and `height` are absolute pixel offsets: only
    `position` is scaled by the canvas size when rendering.
    """

    position: Point = field(default_factory=Point)
    width: float = 0.0
    height: float = 0.0

    def corners(self, width: float, height: float) -> list[tuple[float, float]]:
        """TL, TR, BR, BL in px for a canvas of `width` x `height`."""
        x, y = self.position.scaled(width, height)
        return [
            (x, y),
            (x + self.width, y),
            (x + self.width, y + self.height),
            (x, y + self.height),
        ]

    def render(self, surface: DrawingSurface, width: float, height: float) -> None:
        tl, tr, br, bl = self.corners(width, height)
        surface.moveTo(*tl)
        surface.lineTo(*tr)
        surface.lineTo(*br)
        surface.lineTo(*bl)
        surface.lineTo(*tl)

    def point_intersection(self, point: Point) -> bool:
        """Point containment. Not supported: always raises."""
        raise RcgNotImplementedError(
            f"Rectangle.point_intersection no está soportado (punto {point})"
        )

    def __str__(self) -> str:
        return f"({self.position},{fmt_num(self.width)},{fmt_num(self.height)})"
