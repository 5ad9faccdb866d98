'''
registros RISC-V: bancos xN/fN, alias ABI y utilidades de normalización
'''

from __future__ import annotations
from typing import Dict

# Mapeo de nombres ABI a nombres numerados 'xN'; el primero de cada ID es el de presentación
ABI_TO_X: Dict[str, str] = {
    "zero":"x0","ra":"x1","sp":"x2","gp":"x3","tp":"x4",
    "t0":"x5","t1":"x6","t2":"x7",
    "s0":"x8","fp":"x8","s1":"x9",
    "a0":"x10","a1":"x11","a2":"x12","a3":"x13","a4":"x14","a5":"x15","a6":"x16","a7":"x17",
    "s2":"x18","s3":"x19","s4":"x20","s5":"x21","s6":"x22","s7":"x23","s8":"x24","s9":"x25","s10":"x26","s11":"x27",
    "t3":"x28","t4":"x29","t5":"x30","t6":"x31",
}

# Nombres ABI de coma flotante (extensiones F/D)
ABI_TO_F: Dict[str, str] = {
    **{f"ft{i}": f"f{i}" for i in range(8)},
    "fs0":"f8","fs1":"f9",
    **{f"fa{i}": f"f{10 + i}" for i in range(8)},
    **{f"fs{i}": f"f{16 + i}" for i in range(2, 12)},
    **{f"ft{i}": f"f{20 + i}" for i in range(8, 12)},
}

def _riscv():
    # riscv importa este módulo para sus declaraciones
    from .riscv import architecture
    return architecture()

def is_reg(token: str) -> bool:
    """Indica si el token representa un registro válido (ABI, 'xN' o 'fN')."""
    return token in _riscv().registers

def normalize_reg(token: str) -> str:
    """Devuelve el nombre de presentación del registro o lanza UnknownName."""
    arch = _riscv()
    return arch.format_register(arch.lookup_register_by_name(token))

def reg_num(token: str) -> int:
    """Devuelve el índice 0..31 del registro dentro de su banco."""
    arch = _riscv()
    return arch.register_index(arch.lookup_register_by_name(token))
