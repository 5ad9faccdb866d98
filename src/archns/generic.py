'''
mnemónicos genéricos compartidos por todas las arquitecturas (la posición es el ID)
'''

from __future__ import annotations
from typing import Tuple

# Pseudo-operaciones independientes de la arquitectura. Ocupan el rango [0, len).
# El índice 0 queda reservado como "ninguna instrucción".
GENERIC_ANAMES: Tuple[str, ...] = (
    "xxx",
    "call",
    "end",
    "funcdata",
    "jmp",
    "nop",
    "pcalign",
    "pcdata",
    "ret",
    "text",
    "undef",
)

GENERIC_OWNER = "generic"
