"""Geometry primitives for a 2D drawing context.

Coordinates are normalised fractions of the canvas ([0,1]); every `render`
takes the target surface plus the canvas size in pixels. The only
non-trivial numeric code is the line/line test in `primitives` and the
flattening sweep in `curves`.
"""

from __future__ import annotations

from .primitives import Line, Point, Rectangle
from .curves import CubicCurve, QuadraticCurve, flatten_line_intersection
from .surface import DrawingSurface, RecordingSurface

__all__ = [
    "Point",
    "Line",
    "Rectangle",
    "QuadraticCurve",
    "CubicCurve",
    "flatten_line_intersection",
    "DrawingSurface",
    "RecordingSurface",
]
