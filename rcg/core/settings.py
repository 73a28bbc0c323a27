# File: rcg/core/settings.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Defaults reproducibles por proyecto (rcg_settings.json) + overrides por env (RCG_*).
# Notes: No depende de Qt. La geometría NO lee settings: los recibe como parámetros.
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from rcg.color.spaces import DEFAULT_HSL_MODE, HslMode, coerce_hsl_mode
from rcg.core.version import (
    DEFAULT_CURVE_RESOLUTION,
    DEFAULT_PARALLEL_EPS,
    DEFAULT_POINT_RADIUS,
)

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rcg_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rcg_settings.json"

ENV_CURVE_RESOLUTION = "RCG_CURVE_RESOLUTION"
ENV_PARALLEL_EPS = "RCG_PARALLEL_EPS"
ENV_POINT_RADIUS = "RCG_POINT_RADIUS"
ENV_HSL_MODE = "RCG_HSL_MODE"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rcg_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def save_project_settings(data: Dict[str, Any], start: Path | None = None, *, logger: logging.Logger | None = None) -> Path | None:
    """Guarda project settings en rcg_settings.json.

    - Si se encuentra un archivo existente, lo pisa.
    - Si no existe, lo crea en `start` (o el CWD).

    Devuelve el Path guardado o None si falla.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        p = (start or Path.cwd()).resolve() / PROJECT_SETTINGS_FILENAME
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return p
    except OSError as e:
        _log.warning("No se pudo guardar %s: %s", p, e)
        return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rcg_settings.json (si existe) y lo vuelca a variables de entorno RCG_*.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}

    data = load_project_settings(start, logger=_log)
    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    res = _deep_get(data, "geom.curve_resolution")
    if isinstance(res, (int, float)) and 1e-6 <= float(res) <= 1.0:
        applied["geom.curve_resolution"] = float(res)
        _set_env(ENV_CURVE_RESOLUTION, float(res))

    eps = _deep_get(data, "geom.parallel_eps")
    if isinstance(eps, (int, float)) and 0.0 <= float(eps) <= 1.0:
        applied["geom.parallel_eps"] = float(eps)
        _set_env(ENV_PARALLEL_EPS, float(eps))

    radius = _deep_get(data, "geom.point_radius")
    if isinstance(radius, (int, float)) and 0.0 <= float(radius) <= 256.0:
        applied["geom.point_radius"] = float(radius)
        _set_env(ENV_POINT_RADIUS, float(radius))

    mode = _deep_get(data, "color.hsl_mode")
    if isinstance(mode, str):
        mode = mode.strip().lower()
        if mode in (m.value for m in HslMode):
            applied["color.hsl_mode"] = mode
            _set_env(ENV_HSL_MODE, mode)

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


@dataclass(frozen=True)
class GeomSettings:
    """Valores efectivos para render / intersección / color."""

    curve_resolution: float = DEFAULT_CURVE_RESOLUTION
    parallel_eps: float = DEFAULT_PARALLEL_EPS
    point_radius: float = DEFAULT_POINT_RADIUS
    hsl_mode: HslMode = DEFAULT_HSL_MODE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeomSettings":
        """Lee RCG_* (tolerante: valores inválidos caen al default)."""
        env = os.environ if environ is None else environ
        out = cls(
            curve_resolution=_coerce_float(env.get(ENV_CURVE_RESOLUTION), 1e-6, 1.0, DEFAULT_CURVE_RESOLUTION),
            parallel_eps=_coerce_float(env.get(ENV_PARALLEL_EPS), 0.0, 1.0, DEFAULT_PARALLEL_EPS),
            point_radius=_coerce_float(env.get(ENV_POINT_RADIUS), 0.0, 256.0, DEFAULT_POINT_RADIUS),
            hsl_mode=coerce_hsl_mode(env.get(ENV_HSL_MODE)),
        )
        log.debug("GeomSettings: %s", out)
        return out


def _coerce_float(v: Any, min_v: float, max_v: float, default: float) -> float:
    if v is None:
        return float(default)
    try:
        f = float(v)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(f) or f < min_v or f > max_v:
        return float(default)
    return f
