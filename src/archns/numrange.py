'''
rangos numéricos (base, tamaño) para repartir el espacio de IDs compartido
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

@dataclass(frozen=True)
class NumericRange:
    """Intervalo semiabierto [base, base+size) dentro del espacio global de IDs."""
    base: int
    size: int

    def __post_init__(self) -> None:
        if self.base < 0:
            raise ValueError(f"base negativa: {self.base}")
        if self.size < 0:
            raise ValueError(f"tamaño negativo: {self.size}")

    @property
    def end(self) -> int:
        """Límite superior exclusivo."""
        return self.base + self.size

    def contains(self, value: int) -> bool:
        return self.base <= value < self.end

    def overlaps(self, other: NumericRange) -> bool:
        """Indica si ambos rangos comparten al menos un ID (los rangos vacíos no solapan)."""
        return self.base < other.end and other.base < self.end

    def offset(self, value: int) -> int:
        """Posición de value dentro del rango; ValueError si cae fuera."""
        if not self.contains(value):
            raise ValueError(f"{value} fuera de {self}")
        return value - self.base

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.base, self.end))

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return f"[{self.base}, {self.end})"
