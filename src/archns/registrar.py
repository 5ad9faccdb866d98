'''
declaraciones estáticas por arquitectura y su construcción/registro en el espacio global
'''

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from .diagnostics import defect
from .generic import GENERIC_ANAMES
from .names import (
    NameTable, FrozenNameTable, REG_PLACEHOLDER, OP_PLACEHOLDER,
)
from .numrange import NumericRange

if TYPE_CHECKING:
    from .namespace import GlobalNamespace

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RegisterBank:
    """Bloque denso de registros numerados: prefix0 .. prefix{count-1}.

    Con display_abi=True el nombre de presentación de cada registro es su nombre ABI,
    y todos los registros del bloque deben tener uno.
    """
    prefix: str
    count: int
    display_abi: bool = False

    def names(self) -> List[str]:
        return [f"{self.prefix}{i}" for i in range(self.count)]

@dataclass(frozen=True)
class ArchSpec:
    """Configuración estática de una arquitectura.

    - reg_base: primer ID de registro; los bancos se colocan seguidos a partir de él.
    - abi_names: pares (alias ABI, nombre numerado), en orden de preferencia.
    - op_base: desplazamiento de los opcodes específicos; anames[k] recibe op_base + k.
    """
    name: str
    reg_base: int
    banks: Tuple[RegisterBank, ...]
    abi_names: Tuple[Tuple[str, str], ...]
    op_base: int
    anames: Tuple[str, ...]

    @property
    def register_range(self) -> NumericRange:
        return NumericRange(self.reg_base, sum(b.count for b in self.banks))

    @property
    def opcode_range(self) -> NumericRange:
        return NumericRange(self.op_base, len(self.anames))

@dataclass(frozen=True)
class Architecture:
    """Tablas ya construidas y validadas de una arquitectura (solo lectura)."""
    name: str
    register_range: NumericRange
    opcode_range: NumericRange
    generic_range: NumericRange
    banks: Tuple[NumericRange, ...]
    registers: FrozenNameTable
    opcodes: FrozenNameTable

    def lookup_register_by_name(self, name: str) -> int:
        return self.registers.lookup_by_name(name)

    def lookup_instruction_by_name(self, name: str) -> int:
        """Busca en el espacio combinado genérico + específico."""
        return self.opcodes.lookup_by_name(name)

    def format_register(self, value: int) -> str:
        return self.registers.lookup_by_id(value)

    def format_opcode(self, value: int) -> str:
        return self.opcodes.lookup_by_id(value)

    def register_index(self, value: int) -> int:
        """Índice del registro dentro de su banco (p.ej. x10 -> 10, f3 -> 3)."""
        for bank in self.banks:
            if bank.contains(value):
                return bank.offset(value)
        raise ValueError(f"{value} no pertenece a ningún banco de {self.name}")


class ArchitectureRegistrar:
    """Construye las tablas de una arquitectura y las registra en un GlobalNamespace.

    build() sigue un orden fijo de fases:
      1. nombres numerados generados por banco,
      2. alias ABI superpuestos (solo sobre nombres ya generados),
      3. nombre canónico por ID,
      4. validación de completitud del rango de registros,
      5. tabla de opcodes: genéricos en [0, G), específicos en op_base + k.
    """

    def __init__(self, spec: ArchSpec):
        self.spec = spec
        self._built: Optional[Architecture] = None
        self._generic: Optional[Tuple[str, ...]] = None
        self._registered = False

    @property
    def name(self) -> str:
        return self.spec.name

    def build(self, generic_anames: Sequence[str] = GENERIC_ANAMES) -> Architecture:
        generic = tuple(generic_anames)
        if self._built is not None:
            if generic != self._generic:
                raise defect("tablas ya construidas con otra lista de mnemónicos genéricos",
                             owner=self.name)
            return self._built
        registers, banks = self._build_registers()
        opcodes = self._build_opcodes(generic)
        self._built = Architecture(
            name=self.name,
            register_range=self.spec.register_range,
            opcode_range=self.spec.opcode_range,
            generic_range=NumericRange(0, len(generic)),
            banks=banks,
            registers=registers,
            opcodes=opcodes,
        )
        self._generic = generic
        logger.debug("%s: %d registros en %s, %d opcodes específicos en %s",
                     self.name, len(self.spec.register_range), self.spec.register_range,
                     len(self.spec.anames), self.spec.opcode_range)
        return self._built

    def _build_registers(self) -> Tuple[FrozenNameTable, Tuple[NumericRange, ...]]:
        spec = self.spec
        table = NameTable("registro", REG_PLACEHOLDER, owner=spec.name)

        # 1. nombres numerados
        numbered: Dict[int, Tuple[str, RegisterBank]] = {}
        banks: List[NumericRange] = []
        value = spec.reg_base
        for bank in spec.banks:
            banks.append(NumericRange(value, bank.count))
            for name in bank.names():
                table.define(name, value)
                numbered[value] = (name, bank)
                value += 1

        # 2. alias ABI; el primero declarado para un ID es su nombre de presentación
        abi_display: Dict[int, str] = {}
        for abi, target in spec.abi_names:
            reg = table.alias(abi, target)
            abi_display.setdefault(reg, abi)

        # 3. nombres canónicos
        for reg, (name, bank) in numbered.items():
            if not bank.display_abi:
                table.set_canonical(reg, name)
            elif reg in abi_display:
                table.set_canonical(reg, abi_display[reg])

        # 4.
        table.validate_complete(spec.register_range)
        return table.freeze(), tuple(banks)

    def _build_opcodes(self, generic: Tuple[str, ...]) -> FrozenNameTable:
        spec = self.spec
        generic_range = NumericRange(0, len(generic))
        if spec.op_base < generic_range.end:
            raise defect(f"base de opcodes {spec.op_base} invade el rango genérico {generic_range}",
                         owner=spec.name)
        table = NameTable("instrucción", OP_PLACEHOLDER, owner=spec.name)
        for i, name in enumerate(generic):
            table.define(name, i)
            table.set_canonical(i, name)
        for k, name in enumerate(spec.anames):
            table.define(name, spec.op_base + k)
            table.set_canonical(spec.op_base + k, name)
        return table.freeze()

    def register(self, namespace: GlobalNamespace) -> Architecture:
        """Registra rangos y resolutores en `namespace`; solo una vez por proceso."""
        if self._registered:
            raise defect(f"la arquitectura '{self.name}' ya fue registrada", owner=self.name)
        arch = self.build(namespace.generic_anames)
        # todo o nada: ningún rango se escribe si alguno choca
        namespace.check_registrable(arch)
        namespace.register_register_range(arch.register_range, arch.format_register,
                                          owner=arch.name)
        namespace.register_opcode_range(arch.opcode_range, arch.format_opcode,
                                        owner=arch.name)
        namespace.attach(arch)
        self._registered = True
        return arch
