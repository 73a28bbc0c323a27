# File: rcg/utils/errors.py
# Project: RusticCanvasGeom (RCG)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Errores tipados del proyecto.
# Notes: Los casos numéricos degenerados (paralelas, saturación 0) NO son errores.
from __future__ import annotations


class RcgError(Exception):
    """Error base del proyecto."""


class RcgValidationError(RcgError):
    """Error de validación (parámetros, escena, estructura)."""


class RcgIOError(RcgError):
    """Error de E/S (lectura/escritura de escena o SVG)."""


class RcgSchemaError(RcgValidationError):
    """Error de esquema (.rcg): versión o tipo de shape desconocido."""


class RcgNotImplementedError(RcgError, NotImplementedError):
    """Operación declarada pero no soportada (p.ej. contención en Rectangle)."""
