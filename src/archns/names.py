'''
tabla bidireccional nombre↔ID: alias para la entrada, un nombre canónico por ID para la salida
'''

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .diagnostics import ConfigDefect, UnknownName, defect
from .numrange import NumericRange

logger = logging.getLogger(__name__)

# Prefijos de los textos de reserva para IDs sin nombre
REG_PLACEHOLDER = "R???"
OP_PLACEHOLDER = "A???"

def placeholder(prefix: str, value: int) -> str:
    """Texto de reserva para un ID sin nombre canónico (p.ej. 'R???999999')."""
    return f"{prefix}{value}"


class _Lookup:
    """Consultas compartidas por la tabla en construcción y la congelada."""

    kind: str
    placeholder_prefix: str
    fold_case: bool
    owner: Optional[str]
    _by_name: Mapping[str, int]
    _canonical: Mapping[int, str]

    def _key(self, name: str) -> str:
        t = name.strip()
        return t.lower() if self.fold_case else t

    def lookup_by_name(self, name: str) -> int:
        """Devuelve el ID de `name` (canónico o alias) o lanza UnknownName."""
        key = self._key(name)
        if key not in self._by_name:
            raise UnknownName(self.kind, name)
        return self._by_name[key]

    def lookup_by_id(self, value: int) -> str:
        """Nombre canónico de `value`; nunca falla, usa el texto de reserva si no hay nombre."""
        name = self._canonical.get(value)
        if name is None:
            return placeholder(self.placeholder_prefix, value)
        return name

    def has_canonical(self, value: int) -> bool:
        return value in self._canonical

    def aliases(self, value: int) -> List[str]:
        """Nombres que resuelven a `value`, excluido el canónico, en orden de definición."""
        canon = self._canonical.get(value)
        canon_key = self._key(canon) if canon is not None else None
        return [n for n, v in self._by_name.items() if v == value and n != canon_key]

    def names(self) -> List[str]:
        return list(self._by_name)

    def canonical_items(self) -> Iterator[Tuple[int, str]]:
        """Pares (ID, nombre canónico) ordenados por ID."""
        return iter(sorted(self._canonical.items()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


class NameTable(_Lookup):
    """Tabla mutable durante el arranque.

    - define/alias: cualquier número de nombres por ID (entrada de ensamblador).
    - set_canonical: exactamente un nombre de presentación por ID (salida, diagnósticos).
    - validate_complete: todo ID del rango declarado debe tener nombre canónico.
    Tras freeze() la tabla ya no admite escrituras.
    """

    def __init__(self, kind: str, placeholder_prefix: str, *,
                 fold_case: bool = True, owner: str | None = None):
        self.kind = kind
        self.placeholder_prefix = placeholder_prefix
        self.fold_case = fold_case
        self.owner = owner
        self._by_name: Dict[str, int] = {}
        self._canonical: Dict[int, str] = {}
        self._frozen: Optional[FrozenNameTable] = None

    def _defect(self, message: str, hint: str | None = None) -> ConfigDefect:
        return defect(message, owner=self.owner, hint=hint)

    def _check_open(self, op: str) -> None:
        if self._frozen is not None:
            raise self._defect(f"tabla de {self.kind} congelada: {op} no permitido")

    def define(self, name: str, value: int) -> None:
        """Asocia `name` a `value`. Redefinirlo con otro ID es un defecto."""
        self._check_open("define")
        key = self._key(name)
        if not key:
            raise self._defect(f"nombre de {self.kind} vacío para el ID {value}")
        prev = self._by_name.get(key)
        if prev is not None and prev != value:
            raise self._defect(
                f"'{key}' ya está definido como {prev}; no puede redefinirse como {value}")
        self._by_name[key] = value

    def alias(self, name: str, existing: str) -> int:
        """Define `name` como alias del ID al que ya resuelve `existing`.

        El nombre de destino debe existir: los alias se superponen a los nombres
        generados, nunca los sustituyen.
        """
        self._check_open("alias")
        target = self._by_name.get(self._key(existing))
        if target is None:
            raise self._defect(
                f"alias '{self._key(name)}' apunta a '{self._key(existing)}', que no está definido",
                hint="genere los nombres numerados antes de superponer alias")
        self.define(name, target)
        return target

    def set_canonical(self, value: int, name: str) -> None:
        """Fija el nombre de presentación de `value` (uno solo por ID).

        Se conserva tal como se declara; solo la clave de búsqueda se normaliza.
        """
        self._check_open("set_canonical")
        display = name.strip()
        if self._by_name.get(self._key(display)) != value:
            raise self._defect(
                f"nombre canónico '{display}' no resuelve a {value}",
                hint="defina el nombre antes de hacerlo canónico")
        prev = self._canonical.get(value)
        if prev is not None and self._key(prev) != self._key(display):
            raise self._defect(
                f"{self.kind} {value} ya tiene nombre canónico '{prev}'; '{display}' rechazado")
        if prev is None:
            self._canonical[value] = display

    def validate_complete(self, rng: NumericRange) -> None:
        """Falla en el primer ID de `rng` sin nombre canónico."""
        for value in rng:
            if value not in self._canonical:
                raise self._defect(
                    f"{self.kind} {value} (posición {rng.offset(value)} de {rng}) sin nombre canónico")
        logger.debug("tabla de %s completa en %s (%s)", self.kind, rng, self.owner)

    def freeze(self) -> FrozenNameTable:
        """Cierra la tabla y devuelve su vista de solo lectura."""
        if self._frozen is None:
            self._frozen = FrozenNameTable(self)
        return self._frozen


class FrozenNameTable(_Lookup):
    """Vista inmutable de una NameTable: solo consultas."""

    def __init__(self, table: NameTable):
        self.kind = table.kind
        self.placeholder_prefix = table.placeholder_prefix
        self.fold_case = table.fold_case
        self.owner = table.owner
        self._by_name = MappingProxyType(dict(table._by_name))
        self._canonical = MappingProxyType(dict(table._canonical))
