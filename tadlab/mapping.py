"""Bounded associations from natural numbers to real numbers."""

from __future__ import annotations

from typing import Dict, Iterator


class Mapping:
    """Holds at most ``capacidad`` associations ``clave -> valor``."""

    def __init__(self, capacidad: int) -> None:
        if capacidad < 0:
            raise ValueError("the capacity must not be negative")
        self._capacidad = capacidad
        self._asociaciones: Dict[int, float] = {}

    def __repr__(self) -> str:
        return f"Mapping({self._capacidad}, {self._asociaciones!r})"

    def __len__(self) -> int:
        return len(self._asociaciones)

    def __iter__(self) -> Iterator[int]:
        return iter(self._asociaciones)

    @property
    def capacidad(self) -> int:
        """The greatest number of associations the mapping may hold."""
        return self._capacidad

    def asociar(self, clave: int, valor: float) -> None:
        """Associate ``clave`` with ``valor``.

        The mapping must not be full and ``clave`` must not be associated yet.
        """
        if self.esta_lleno():
            raise ValueError("the mapping is full")
        if clave in self._asociaciones:
            raise ValueError(f"{clave} is already associated")
        self._asociaciones[clave] = valor

    def desasociar(self, clave: int) -> None:
        """Remove the association of ``clave``."""
        if clave not in self._asociaciones:
            raise KeyError(clave)
        del self._asociaciones[clave]

    def __contains__(self, clave: object) -> bool:
        return clave in self._asociaciones

    def valor(self, clave: int) -> float:
        """Return the value associated with ``clave``."""
        if clave not in self._asociaciones:
            raise KeyError(clave)
        return self._asociaciones[clave]

    def esta_lleno(self) -> bool:
        """Return whether the mapping holds as many associations as its capacity."""
        return len(self._asociaciones) == self._capacidad