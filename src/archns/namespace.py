'''
espacio de nombres global: fase de registro (GlobalNamespace) y fase de consulta (FrozenNamespace)
'''

from __future__ import annotations
import bisect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .diagnostics import UnknownName, defect
from .generic import GENERIC_ANAMES, GENERIC_OWNER
from .names import NameTable, OP_PLACEHOLDER, REG_PLACEHOLDER, placeholder
from .numrange import NumericRange

if TYPE_CHECKING:
    from .registrar import Architecture

logger = logging.getLogger(__name__)

# Un resolutor traduce un ID de su rango a texto; nunca debe fallar.
Resolver = Callable[[int], str]

@dataclass(frozen=True)
class RangeDescriptor:
    """Rango registrado, su resolutor y la arquitectura que lo posee."""
    range: NumericRange
    resolver: Resolver
    owner: str


class _RangeIndex:
    """Descriptores disjuntos ordenados por base; búsqueda binaria por contención."""

    def __init__(self, descriptors: Iterable[RangeDescriptor]):
        # los rangos vacíos no contienen nada y romperían el orden por base
        self._items = tuple(sorted((d for d in descriptors if d.range.size),
                                   key=lambda d: d.range.base))
        self._bases = [d.range.base for d in self._items]

    def find(self, value: int) -> Optional[RangeDescriptor]:
        i = bisect.bisect_right(self._bases, value) - 1
        if i < 0:
            return None
        d = self._items[i]
        return d if d.range.contains(value) else None

    def __iter__(self):
        return iter(self._items)


class GlobalNamespace:
    """Registro compartido entre arquitecturas, en su fase de escritura.

    Se construye explícitamente y se pasa a cada ArchitectureRegistrar. freeze()
    termina la fase de escritura y devuelve el FrozenNamespace para las consultas;
    después, cualquier registro sobre este objeto es un defecto.
    """

    def __init__(self, generic_anames: Sequence[str] = GENERIC_ANAMES):
        self.generic_anames: Tuple[str, ...] = tuple(generic_anames)
        self._registers: List[RangeDescriptor] = []
        self._opcodes: List[RangeDescriptor] = []
        self._archs: Dict[str, Architecture] = {}
        self._frozen: Optional[FrozenNamespace] = None

        generic = NameTable("instrucción", OP_PLACEHOLDER, owner=GENERIC_OWNER)
        for i, name in enumerate(self.generic_anames):
            generic.define(name, i)
            generic.set_canonical(i, name)
        self.generic = generic.freeze()
        self.register_opcode_range(NumericRange(0, len(self.generic_anames)),
                                   self.generic.lookup_by_id, owner=GENERIC_OWNER)

    def _check_open(self, op: str, owner: str) -> None:
        if self._frozen is not None:
            raise defect(f"espacio de nombres congelado: {op} no permitido", owner=owner)

    def _check_disjoint(self, bucket: List[RangeDescriptor], category: str,
                        rng: NumericRange, owner: str) -> None:
        self._check_open(f"registrar rango de {category}", owner)
        for d in bucket:
            if d.range.overlaps(rng):
                raise defect(f"rango de {category} {rng} solapa {d.range} de '{d.owner}'",
                             owner=owner)

    def _add(self, bucket: List[RangeDescriptor], category: str,
             rng: NumericRange, resolver: Resolver, owner: str) -> None:
        self._check_disjoint(bucket, category, rng, owner)
        bucket.append(RangeDescriptor(rng, resolver, owner))
        logger.debug("%s: rango de %s %s registrado", owner, category, rng)

    def register_register_range(self, rng: NumericRange, resolver: Resolver, *, owner: str) -> None:
        self._add(self._registers, "registros", rng, resolver, owner)

    def register_opcode_range(self, rng: NumericRange, resolver: Resolver, *, owner: str) -> None:
        self._add(self._opcodes, "opcodes", rng, resolver, owner)

    def check_registrable(self, arch: Architecture) -> None:
        """Comprueba, sin escribir nada, que `arch` puede registrarse entera."""
        self._check_open("registrar arquitectura", arch.name)
        if arch.name in self._archs:
            raise defect(f"la arquitectura '{arch.name}' ya fue registrada", owner=arch.name)
        self._check_disjoint(self._registers, "registros", arch.register_range, arch.name)
        self._check_disjoint(self._opcodes, "opcodes", arch.opcode_range, arch.name)

    def attach(self, arch: Architecture) -> None:
        """Publica las tablas de consulta por nombre de una arquitectura."""
        self._check_open("attach", arch.name)
        if arch.name in self._archs:
            raise defect(f"la arquitectura '{arch.name}' ya fue registrada", owner=arch.name)
        self._archs[arch.name] = arch

    def freeze(self) -> FrozenNamespace:
        if self._frozen is None:
            self._frozen = FrozenNamespace(self._registers, self._opcodes, self._archs)
            logger.debug("espacio de nombres congelado: %s", ", ".join(self._archs) or "(vacío)")
        return self._frozen


class FrozenNamespace:
    """Fase de consulta: inmutable, apta para compartirse entre hilos sin bloqueo."""

    def __init__(self, registers: Iterable[RangeDescriptor], opcodes: Iterable[RangeDescriptor],
                 archs: Mapping[str, Architecture]):
        self._registers = _RangeIndex(registers)
        self._opcodes = _RangeIndex(opcodes)
        self._archs: Tuple[Tuple[str, Architecture], ...] = tuple(archs.items())

    def format_register(self, value: int) -> str:
        """Nombre de presentación del registro `value`, o 'R???<id>' si nadie lo posee."""
        d = self._registers.find(value)
        if d is None:
            return placeholder(REG_PLACEHOLDER, value)
        return d.resolver(value)

    def format_opcode(self, value: int) -> str:
        """Nombre de presentación del opcode `value`, o 'A???<id>' si nadie lo posee."""
        d = self._opcodes.find(value)
        if d is None:
            return placeholder(OP_PLACEHOLDER, value)
        return d.resolver(value)

    def register_owner(self, value: int) -> Optional[str]:
        d = self._registers.find(value)
        return d.owner if d else None

    def opcode_owner(self, value: int) -> Optional[str]:
        d = self._opcodes.find(value)
        return d.owner if d else None

    def register_ranges(self) -> List[Tuple[str, NumericRange]]:
        return [(d.owner, d.range) for d in self._registers]

    def opcode_ranges(self) -> List[Tuple[str, NumericRange]]:
        return [(d.owner, d.range) for d in self._opcodes]

    def architectures(self) -> List[str]:
        return [name for name, _ in self._archs]

    def architecture(self, name: str) -> Architecture:
        for arch_name, arch in self._archs:
            if arch_name == name.strip().lower():
                return arch
        raise UnknownName("arquitectura", name)

    def lookup_register_by_name(self, arch: str, name: str) -> int:
        return self.architecture(arch).lookup_register_by_name(name)

    def lookup_instruction_by_name(self, arch: str, name: str) -> int:
        return self.architecture(arch).lookup_instruction_by_name(name)
