# File: rcg/app.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Entry-point CLI: export de escena a SVG y reporte de intersecciones.
# Notes: Los defaults salen de rcg_settings.json / RCG_*; los flags los pisan.
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import replace
from typing import Any, Dict, List

from rcg.core.scene import Scene
from rcg.core.serialization import load_scene
from rcg.core.settings import GeomSettings, apply_project_settings
from rcg.core.version import APP_NAME, APP_VERSION
from rcg.geom.curves import CubicCurve, QuadraticCurve
from rcg.geom.primitives import Line
from rcg.svg.exporter import export_scene_svg
from rcg.utils.errors import RcgError, RcgValidationError
from rcg.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def scene_intersections(scene: Scene, settings: GeomSettings) -> List[Dict[str, Any]]:
    """Each line in the scene against every other line/curve.

    Rows: {"line", "other", "kind", "point": [x, y] | None}. Curves use the
    flattening sweep with `settings.curve_resolution`.
    """
    rows: List[Dict[str, Any]] = []
    for item in scene.shapes:
        if not isinstance(item.shape, Line):
            continue
        line = item.shape
        for other in scene.shapes:
            if other is item:
                continue
            shape = other.shape
            if isinstance(shape, Line):
                hit = line.line_intersection(shape, parallel_eps=settings.parallel_eps)
            elif isinstance(shape, (QuadraticCurve, CubicCurve)):
                hit = shape.line_intersection(
                    line,
                    resolution=settings.curve_resolution,
                    parallel_eps=settings.parallel_eps,
                )
            else:
                continue
            rows.append(
                {
                    "line": item.id,
                    "other": other.id,
                    "kind": other.kind,
                    "point": [hit.x, hit.y] if hit is not None else None,
                }
            )
    return rows


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rcg",
        description=f"{APP_NAME}: geometría 2D (export SVG e intersecciones de una escena .rcg).",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    ap.add_argument("--log-dir", default="logs", help="Carpeta para rcg.log (default: ./logs)")
    ap.add_argument("--verbose", action="store_true", help="Logging DEBUG")
    ap.add_argument("--resolution", type=float, default=None, help="Paso de t al aplanar curvas")
    ap.add_argument("--parallel-eps", type=float, default=None, help="Tolerancia para paralelas (0 = exacto)")

    sub = ap.add_subparsers(dest="cmd", required=True)

    ex = sub.add_parser("export", help="Exporta la escena a SVG")
    ex.add_argument("scene", help="Archivo .rcg")
    ex.add_argument("out", help="Archivo .svg de salida")

    it = sub.add_parser("intersect", help="Reporta intersecciones línea/shape como JSON")
    it.add_argument("scene", help="Archivo .rcg")
    return ap


def _settings_from_args(args: argparse.Namespace) -> GeomSettings:
    """GeomSettings de env + flags. Los flags se validan (el env ya viene filtrado)."""
    settings = GeomSettings.from_env()
    if args.resolution is not None:
        if not math.isfinite(args.resolution) or args.resolution <= 0.0:
            raise RcgValidationError(f"--resolution debe ser > 0 (recibido {args.resolution!r})")
        settings = replace(settings, curve_resolution=args.resolution)
    if args.parallel_eps is not None:
        if not math.isfinite(args.parallel_eps) or args.parallel_eps < 0.0:
            raise RcgValidationError(f"--parallel-eps debe ser >= 0 (recibido {args.parallel_eps!r})")
        settings = replace(settings, parallel_eps=args.parallel_eps)
    return settings


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    setup_logging(args.log_dir, level=logging.DEBUG if args.verbose else logging.INFO)
    # Project-level defaults (repo-local): rcg_settings.json
    apply_project_settings(logger=log, prefer_env=True)

    try:
        settings = _settings_from_args(args)
        scene = load_scene(args.scene)
        if args.cmd == "export":
            out = export_scene_svg(scene, args.out, settings)
            print(out)
        else:
            rows = scene_intersections(scene, settings)
            print(json.dumps(rows, ensure_ascii=False, indent=2))
    except RcgError as e:
        log.error("%s: %s", type(e).__name__, e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
