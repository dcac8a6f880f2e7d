"""One-way iterators over collections of natural numbers."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


class PosicionIndefinida(LookupError):
    """The current position of an iterator is not defined."""


class Iterador:
    """A collection of naturals with an implicit current position.

    Elements may be added only until the iterator is restarted for the
    first time. After that it can be walked as many times as wanted.
    """

    def __init__(self, elems: Iterable[int] = ()) -> None:
        self._elems: List[int] = []
        self._actual: Optional[int] = None
        self._bloqueado = False
        for elem in elems:
            self.agregar(elem)

    def __repr__(self) -> str:
        return f"Iterador({self._elems!r})"

    def agregar(self, elem: int) -> None:
        """Append ``elem`` unless the iterator has already been restarted."""
        if not self._bloqueado:
            self._elems.append(elem)

    def reiniciar(self) -> None:
        """Move to the first element, if any, and forbid further additions."""
        if self._elems:
            self._actual = 0
        self._bloqueado = True

    def avanzar(self) -> None:
        """Move to the next element; past the last one the position is undefined."""
        if self._actual is None:
            return
        self._actual += 1
        if self._actual >= len(self._elems):
            self._actual = None

    def actual(self) -> int:
        """Return the element at the current position."""
        if self._actual is None:
            raise PosicionIndefinida("the current position is not defined")
        return self._elems[self._actual]

    def esta_definida_actual(self) -> bool:
        """Return whether the current position is defined."""
        return self._actual is not None

    def __iter__(self) -> Iterator[int]:
        """Restart and walk every element; the position ends undefined."""
        self.reiniciar()
        while self.esta_definida_actual():
            yield self.actual()
            self.avanzar()