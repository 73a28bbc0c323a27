# File: rcg/core/scene.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Modelo de escena (.rcg): lista ordenada de shapes + tamaño de canvas.
# Notes:
#   - Los shapes son los valores de rcg.geom; acá solo se serializan.
#   - Coordenadas normalizadas [0,1]; Rectangle.width/height en px (igual que en render).
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from rcg.color.spaces import HSLColor, HslMode, RGBColor, hsl_to_rgb
from rcg.core.version import DEFAULT_CANVAS_PX, SCHEMA_VERSION
from rcg.geom.curves import CubicCurve, QuadraticCurve
from rcg.geom.primitives import Line, Point, Rectangle
from rcg.utils.errors import RcgSchemaError

Shape = Union[Point, Line, Rectangle, QuadraticCurve, CubicCurve]
Color = Union[RGBColor, HSLColor]

# kind -> cantidad de puntos en "points"
_POINT_COUNT = {
    "point": 1,
    "line": 2,
    "rectangle": 1,
    "quadratic": 3,
    "cubic": 4,
}


def shape_kind(shape: Shape) -> str:
    if isinstance(shape, Point):
        return "point"
    if isinstance(shape, Line):
        return "line"
    if isinstance(shape, Rectangle):
        return "rectangle"
    if isinstance(shape, QuadraticCurve):
        return "quadratic"
    if isinstance(shape, CubicCurve):
        return "cubic"
    raise RcgSchemaError(f"Shape no soportado: {type(shape).__name__}")


def shape_points(shape: Shape) -> list[Point]:
    if isinstance(shape, Point):
        return [shape]
    if isinstance(shape, Line):
        return [shape.a, shape.b]
    if isinstance(shape, Rectangle):
        return [shape.position]
    if isinstance(shape, QuadraticCurve):
        return [shape.cp0, shape.cp1, shape.cp2]
    if isinstance(shape, CubicCurve):
        return [shape.cp0, shape.cp1, shape.cp2, shape.cp3]
    raise RcgSchemaError(f"Shape no soportado: {type(shape).__name__}")


def _build_shape(kind: str, pts: list[Point], d: dict[str, Any], where: str) -> Shape:
    if kind == "point":
        return pts[0]
    if kind == "line":
        return Line(pts[0], pts[1])
    if kind == "rectangle":
        return Rectangle(
            pts[0],
            _as_float(d.get("width", 0.0), f"{where}.width"),
            _as_float(d.get("height", 0.0), f"{where}.height"),
        )
    if kind == "quadratic":
        return QuadraticCurve(*pts)
    return CubicCurve(*pts)


def color_to_dict(color: Optional[Color]) -> Optional[dict[str, Any]]:
    if color is None:
        return None
    if isinstance(color, RGBColor):
        return {"rgb": [float(color.r), float(color.g), float(color.b)]}
    return {"hsl": [float(color.h), float(color.s), float(color.l)]}


def color_from_dict(d: Any, where: str) -> Optional[Color]:
    if d is None:
        return None
    if not isinstance(d, dict):
        raise RcgSchemaError(f"{where} inválido: se espera objeto")
    for key, cls in (("rgb", RGBColor), ("hsl", HSLColor)):
        raw = d.get(key)
        if raw is None:
            continue
        if not (isinstance(raw, (list, tuple)) and len(raw) == 3):
            raise RcgSchemaError(f"{where}.{key} inválido: se esperan 3 números")
        return cls(*(_as_float(v, f"{where}.{key}[{i}]") for i, v in enumerate(raw)))
    raise RcgSchemaError(f"{where} inválido: falta 'rgb' o 'hsl'")


@dataclass
class SceneShape:
    id: str
    shape: Shape
    stroke: Optional[Color] = None

    @property
    def kind(self) -> str:
        return shape_kind(self.shape)

    def stroke_rgb(self, mode: HslMode) -> Optional[RGBColor]:
        """Stroke como RGB (convirtiendo HSL con `mode`)."""
        if self.stroke is None or isinstance(self.stroke, RGBColor):
            return self.stroke
        return hsl_to_rgb(self.stroke, mode=mode)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": str(self.id),
            "kind": self.kind,
            "points": [[float(p.x), float(p.y)] for p in shape_points(self.shape)],
            "stroke": color_to_dict(self.stroke),
        }
        if isinstance(self.shape, Rectangle):
            d["width"] = float(self.shape.width)
            d["height"] = float(self.shape.height)
        return d

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "SceneShape":
        if not isinstance(d, dict):
            raise RcgSchemaError("Shape inválido: se esperaba dict")
        sid = str(d.get("id", "")).strip()
        if not sid:
            raise RcgSchemaError("Shape inválido: falta 'id'")

        kind = d.get("kind")
        if kind not in _POINT_COUNT:
            raise RcgSchemaError(f"Shape {sid!r}: kind inválido: {kind!r}")

        raw_pts = d.get("points")
        n = _POINT_COUNT[kind]
        if not (isinstance(raw_pts, list) and len(raw_pts) == n):
            raise RcgSchemaError(f"Shape {sid!r}: se esperan {n} puntos en 'points'")
        pts = [_as_point(p, f"shapes[{sid}].points[{i}]") for i, p in enumerate(raw_pts)]

        return SceneShape(
            id=sid,
            shape=_build_shape(kind, pts, d, f"shapes[{sid}]"),
            stroke=color_from_dict(d.get("stroke"), f"shapes[{sid}].stroke"),
        )


@dataclass
class Scene:
    schema_version: int = SCHEMA_VERSION
    canvas_px: tuple[float, float] = DEFAULT_CANVAS_PX
    shapes: list[SceneShape] = field(default_factory=list)

    # Runtime (NO se serializa)
    file_path: Optional[Path] = None

    def set_file_path(self, path: Optional[str | Path]) -> None:
        self.file_path = Path(path) if path else None

    def get_shape(self, shape_id: str) -> SceneShape | None:
        for s in self.shapes:
            if s.id == shape_id:
                return s
        return None

    def add_shape(self, shape: Shape, *, stroke: Optional[Color] = None, shape_id: str | None = None) -> SceneShape:
        sid = shape_id or new_shape_id(shape_kind(shape))
        if self.get_shape(sid) is not None:
            raise RcgSchemaError(f"Ya existe un shape con id={sid!r}")
        item = SceneShape(id=sid, shape=shape, stroke=stroke)
        self.shapes.append(item)
        return item

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": int(self.schema_version),
            "canvas_px": [float(self.canvas_px[0]), float(self.canvas_px[1])],
            "shapes": [s.to_dict() for s in self.shapes],
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Scene":
        if not isinstance(d, dict):
            raise RcgSchemaError(".rcg inválido: raíz no es objeto JSON")

        missing = [k for k in ("schema_version", "canvas_px", "shapes") if k not in d]
        if missing:
            raise RcgSchemaError(f".rcg inválido: faltan claves requeridas: {', '.join(missing)}")

        schema_version = _as_int(d.get("schema_version"), "schema_version")
        if schema_version != SCHEMA_VERSION:
            raise RcgSchemaError(
                f".rcg incompatible: schema_version={schema_version} (se espera {SCHEMA_VERSION})"
            )

        canvas = d.get("canvas_px")
        if not (isinstance(canvas, (list, tuple)) and len(canvas) == 2):
            raise RcgSchemaError("canvas_px inválido: se espera [w,h]")
        canvas_px = (_as_float(canvas[0], "canvas_px[0]"), _as_float(canvas[1], "canvas_px[1]"))
        if canvas_px[0] <= 0 or canvas_px[1] <= 0:
            raise RcgSchemaError("canvas_px inválido: w/h deben ser > 0")

        shapes_raw = d.get("shapes")
        if not isinstance(shapes_raw, list):
            raise RcgSchemaError("shapes inválido: se espera lista")
        shapes = [SceneShape.from_dict(x) for x in shapes_raw]
        _uniq_ids(shapes)

        return Scene(schema_version=schema_version, canvas_px=canvas_px, shapes=shapes)


def _as_point(value: Any, field: str) -> Point:
    if not (isinstance(value, (list, tuple)) and len(value) == 2):
        raise RcgSchemaError(f"Campo {field} inválido: se espera [x,y]")
    return Point(_as_float(value[0], f"{field}[0]"), _as_float(value[1], f"{field}[1]"))


def _as_float(value: Any, field: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise RcgSchemaError(f"Campo {field} inválido (float): {value!r}") from e


def _as_int(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise RcgSchemaError(f"Campo {field} inválido (int): {value!r}") from e


def _uniq_ids(shapes: Iterable[SceneShape]) -> None:
    seen: set[str] = set()
    for s in shapes:
        if s.id in seen:
            raise RcgSchemaError(f"IDs duplicados en shapes[]: {s.id!r}")
        seen.add(s.id)


def new_shape_id(prefix: str = "shape") -> str:
    """Id corto y único (UUID truncado)."""
    return f"{prefix}_{uuid.uuid4().hex[:8]}"
