'''
mnemónicos RV32I agrupados por formato; su orden fija los IDs de opcode específicos
'''

from __future__ import annotations
from typing import Tuple

# Tipo R
_R = ("add", "sub", "sll", "slt", "sltu", "xor", "srl", "sra", "or", "and")
# Tipo I: ALU con inmediato, desplazamientos, cargas y jalr
_I = ("addi", "slti", "sltiu", "xori", "ori", "andi",
      "slli", "srli", "srai",
      "lb", "lh", "lw", "lbu", "lhu",
      "jalr")
# Tipo S
_S = ("sb", "sh", "sw")
# Tipo B
_B = ("beq", "bne", "blt", "bge", "bltu", "bgeu")
# Tipos U y J
_UJ = ("lui", "auipc", "jal")
# Sistema y FENCE
_SYS = ("ecall", "ebreak", "fence", "fence.i")

# Lista densa de mnemónicos específicos: ANAMES[k] tiene el ID base + k.
# Añadir al final; insertar en medio renumera los opcodes siguientes.
ANAMES: Tuple[str, ...] = _R + _I + _S + _B + _UJ + _SYS
