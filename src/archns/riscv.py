'''
declaración de la arquitectura RISC-V para el registro de nombres
'''

from __future__ import annotations
from functools import lru_cache

from .isa import ANAMES
from .regs import ABI_TO_F, ABI_TO_X
from .registrar import Architecture, ArchitectureRegistrar, ArchSpec, RegisterBank

REG_BASE = 15 * 1024
OP_BASE = 7 << 11

RISCV = ArchSpec(
    name="riscv",
    reg_base=REG_BASE,
    banks=(
        RegisterBank("x", 32, display_abi=True),
        RegisterBank("f", 32, display_abi=True),
    ),
    abi_names=tuple(ABI_TO_X.items()) + tuple(ABI_TO_F.items()),
    op_base=OP_BASE,
    anames=ANAMES,
)

def registrar() -> ArchitectureRegistrar:
    return ArchitectureRegistrar(RISCV)

@lru_cache(maxsize=None)
def architecture() -> Architecture:
    """Tablas RISC-V fuera de cualquier espacio de nombres (solo lectura, construidas una vez)."""
    return registrar().build()
