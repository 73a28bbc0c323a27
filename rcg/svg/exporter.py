# File: rcg/svg/exporter.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Export de una Scene a SVG (un <path> por shape, en px).
# Notes:
#   - Cada shape se dibuja con su propio render() sobre un SvgPathSurface.
#   - Contornos solamente (fill="none"); stroke negro si el shape no trae color.
from __future__ import annotations

import logging
from pathlib import Path
from xml.etree.ElementTree import Element, SubElement, tostring

from rcg.core.scene import Scene, SceneShape
from rcg.core.settings import GeomSettings
from rcg.core.version import APP_SHORT
from rcg.geom.primitives import Point
from rcg.svg.svgpath_surface import SvgPathSurface
from rcg.utils.errors import RcgIOError, RcgValidationError
from rcg.utils.numbers import fmt_num

log = logging.getLogger(__name__)

DEFAULT_STROKE = "black"


def shape_path_d(item: SceneShape, canvas_px: tuple[float, float], settings: GeomSettings) -> str:
    """SVG path data of a single scene shape."""
    w, h = canvas_px
    surface = SvgPathSurface()
    if isinstance(item.shape, Point):
        item.shape.render(surface, w, h, radius=settings.point_radius)
    else:
        item.shape.render(surface, w, h)
    return surface.d()


def build_scene_svg(scene: Scene, settings: GeomSettings | None = None) -> Element:
    settings = settings or GeomSettings()
    w, h = scene.canvas_px
    svg = Element(
        "svg",
        {
            "xmlns": "http://www.w3.org/2000/svg",
            "version": "1.1",
            "width": f"{fmt_num(w)}px",
            "height": f"{fmt_num(h)}px",
            "viewBox": f"0 0 {fmt_num(w)} {fmt_num(h)}",
        },
    )
    g = SubElement(svg, "g", {"id": f"{APP_SHORT}_EXPORT", "fill": "none"})

    for item in scene.shapes:
        d = shape_path_d(item, scene.canvas_px, settings)
        if not d:
            log.debug("Shape %s sin geometría, se omite", item.id)
            continue
        rgb = item.stroke_rgb(settings.hsl_mode)
        SubElement(
            g,
            "path",
            {
                "id": item.id,
                "d": d,
                "stroke": str(rgb) if rgb is not None else DEFAULT_STROKE,
            },
        )
    return svg


def export_scene_svg(scene: Scene, out_path: str | Path, settings: GeomSettings | None = None) -> Path:
    """Exporta la escena a SVG. Devuelve el path escrito (fuerza extensión .svg)."""
    if scene.canvas_px[0] <= 0 or scene.canvas_px[1] <= 0:
        raise RcgValidationError("canvas_px inválido: w/h deben ser > 0")

    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    svg = build_scene_svg(scene, settings)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        xml = tostring(svg, encoding="unicode")
        p.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise RcgIOError(f"No se pudo exportar SVG: {p}") from e

    log.info("SVG exportado: %s (%d shapes)", p, len(scene.shapes))
    return p
