'''
arranque: registra cada arquitectura compilada y congela el espacio de nombres
'''

from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, Optional, Sequence

from . import mips, riscv
from .generic import GENERIC_ANAMES
from .namespace import FrozenNamespace, GlobalNamespace
from .registrar import ArchitectureRegistrar

logger = logging.getLogger(__name__)

BUILTIN_REGISTRARS: Dict[str, Callable[[], ArchitectureRegistrar]] = {
    "mips": mips.registrar,
    "riscv": riscv.registrar,
}

def bootstrap(registrars: Optional[Iterable[ArchitectureRegistrar]] = None, *,
              generic: Sequence[str] = GENERIC_ANAMES) -> FrozenNamespace:
    """Construye un espacio de nombres nuevo, registra las arquitecturas en secuencia y lo congela.

    Cualquier ConfigDefect se propaga tal cual: el proceso no debe arrancar con tablas incompletas.
    """
    namespace = GlobalNamespace(generic)
    if registrars is None:
        registrars = [factory() for factory in BUILTIN_REGISTRARS.values()]
    for registrar in registrars:
        registrar.register(namespace)
    frozen = namespace.freeze()
    logger.info("espacio de nombres listo: %s", ", ".join(frozen.architectures()))
    return frozen
