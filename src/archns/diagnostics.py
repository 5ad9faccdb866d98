'''
clase Diagnostic y excepciones del registro (defectos de arranque, nombres desconocidos)
'''

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Optional, Literal

logger = logging.getLogger(__name__)

# Solo hay defectos fatales; la severidad se conserva para el formato del mensaje
Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

@dataclass(frozen=True)
class Diagnostic:
    """Diagnóstico de un defecto de configuración.

    `owner` es la arquitectura (o tabla) que declara el dato erróneo,
    de modo que el mensaje se lee como 'riscv: ERROR: ...'.
    """
    severity: Severity
    message: str
    hint: Optional[str] = None
    owner: Optional[str] = None

    def __str__(self) -> str:
        loc = f"{self.owner}: " if self.owner is not None else ""
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, owner: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, hint, owner)


class ConfigDefect(Exception):
    """Defecto en las declaraciones estáticas de una arquitectura.

    Es fatal: solo el arranque del proceso lo captura para imprimirlo y terminar.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


def defect(message: str, *, owner: str | None = None, hint: str | None = None) -> ConfigDefect:
    """Construye (y registra en el log) un ConfigDefect con severidad error."""
    diag = error(message, owner=owner, hint=hint)
    logger.error("%s", diag)
    return ConfigDefect(diag)


_MISS_LABEL = {
    "registro": "Registro inválido",
    "instrucción": "Instrucción desconocida",
    "arquitectura": "Arquitectura desconocida",
}


class UnknownName(KeyError, ValueError):
    """Búsqueda por nombre sin resultado (registro, instrucción o arquitectura)."""

    def __init__(self, kind: str, name: str):
        super().__init__(name)
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        label = _MISS_LABEL.get(self.kind, f"Nombre inválido ({self.kind})")
        return f"{label}: {self.name}"
