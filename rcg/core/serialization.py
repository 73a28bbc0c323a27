# File: rcg/core/serialization.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Carga/guardado de escenas .rcg (JSON legible).
# Notes: Escritura atómica (tmp + replace).
from __future__ import annotations

import json
import logging
from pathlib import Path

from rcg.core.scene import Scene
from rcg.utils.errors import RcgIOError, RcgValidationError

log = logging.getLogger(__name__)

SCENE_SUFFIX = ".rcg"


def save_scene(scene: Scene, path: str | Path | None = None) -> Path:
    """Guarda una Scene en JSON con extensión .rcg.

    - Si `path` es None, usa scene.file_path (si existe).
    - Escribe de forma atómica (tmp + replace) para evitar archivos corruptos.
    """
    p = Path(path) if path else scene.file_path
    if p is None:
        raise RcgValidationError("No hay path de guardado para la escena")

    p = Path(p)
    if p.suffix.lower() != SCENE_SUFFIX:
        p = p.with_suffix(SCENE_SUFFIX)

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        txt = json.dumps(scene.to_dict(), ensure_ascii=False, indent=2)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(txt, encoding="utf-8")
        tmp.replace(p)
    except OSError as e:
        raise RcgIOError(f"No se pudo guardar .rcg: {p}") from e

    scene.set_file_path(p)
    log.info("Escena guardada: %s (%d shapes)", p, len(scene.shapes))
    return p


def load_scene(path: str | Path) -> Scene:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RcgIOError(f"No se pudo leer .rcg: {p}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RcgValidationError(
            f".rcg inválido (JSON malformado): {p} (línea {e.lineno}, columna {e.colno})"
        ) from e

    if not isinstance(data, dict):
        raise RcgValidationError("Estructura .rcg inválida: raíz no es objeto JSON")

    scene = Scene.from_dict(data)
    scene.set_file_path(p)
    log.debug("Escena cargada: %s (%d shapes)", p, len(scene.shapes))
    return scene
