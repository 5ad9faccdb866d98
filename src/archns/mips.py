'''
declaración de la arquitectura MIPS32: registros rN/fN con nombres o32 y mnemónicos del núcleo
'''

from __future__ import annotations
from typing import Tuple

from .registrar import ArchitectureRegistrar, ArchSpec, RegisterBank

REG_BASE = 13 * 1024
OP_BASE = 5 << 11

# Convención o32; fp y s8 comparten r30, se presenta como fp
ABI_TO_R: Tuple[Tuple[str, str], ...] = (
    ("zero", "r0"), ("at", "r1"),
    ("v0", "r2"), ("v1", "r3"),
    *((f"a{i}", f"r{4 + i}") for i in range(4)),
    *((f"t{i}", f"r{8 + i}") for i in range(8)),
    *((f"s{i}", f"r{16 + i}") for i in range(8)),
    ("t8", "r24"), ("t9", "r25"),
    ("k0", "r26"), ("k1", "r27"),
    ("gp", "r28"), ("sp", "r29"), ("fp", "r30"), ("s8", "r30"), ("ra", "r31"),
)

ANAMES: Tuple[str, ...] = (
    "add", "addu", "addi", "addiu", "sub", "subu",
    "and", "andi", "or", "ori", "xor", "xori", "nor",
    "slt", "slti", "sltu", "sltiu",
    "sll", "srl", "sra", "sllv", "srlv", "srav",
    "lui", "lb", "lbu", "lh", "lhu", "lw", "sb", "sh", "sw",
    "beq", "bne", "blez", "bgtz", "bltz", "bgez",
    "j", "jal", "jr", "jalr",
    "mult", "multu", "div", "divu", "mfhi", "mflo", "mthi", "mtlo",
    "syscall", "break", "sync",
)

MIPS = ArchSpec(
    name="mips",
    reg_base=REG_BASE,
    banks=(
        RegisterBank("r", 32, display_abi=True),
        RegisterBank("f", 32),
    ),
    abi_names=ABI_TO_R,
    op_base=OP_BASE,
    anames=ANAMES,
)

def registrar() -> ArchitectureRegistrar:
    return ArchitectureRegistrar(MIPS)
