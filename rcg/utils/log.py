# File: rcg/utils/log.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Logging de la CLI rcg: consola + logs/rcg.log.
# Notes:
#   - Solo rcg.app llama setup_logging (una vez); la librería usa getLogger(__name__).
#   - rcg.geom emite DEBUG por barrido de curva (visible con --verbose).
#   - log_dir=None: solo consola, sin crear carpeta ni archivo.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILE_NAME = "rcg.log"


def setup_logging(log_dir: str | os.PathLike | None = "logs", level: int = logging.INFO) -> None:
    """Configura logging en consola + archivo.

    Nota:
        - Si `log_dir` es None, solo consola.
        - No lanza excepción si no puede escribir el archivo; cae a consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Consola
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Archivo
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
