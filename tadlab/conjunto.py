"""Sets of natural numbers kept as sorted sequences."""

from __future__ import annotations

from bisect import bisect_left
from itertools import pairwise
from typing import Iterable, Iterator, Sequence, Tuple

from .iterador import Iterador


def _mezclar(a: Sequence[int], b: Sequence[int], conservar_b: bool) -> Iterator[int]:
    """Merge two sorted sequences: the union, or ``a`` minus ``b``."""
    i = j = 0
    while i < len(a) or (conservar_b and j < len(b)):
        if i < len(a) and j < len(b):
            if a[i] < b[j]:
                yield a[i]
                i += 1
            elif b[j] < a[i]:
                if conservar_b:
                    yield b[j]
                j += 1
            else:
                if conservar_b:
                    yield a[i]
                i += 1
                j += 1
        elif i < len(a):
            yield a[i]
            i += 1
        else:
            yield b[j]
            j += 1


class Conjunto:
    """An immutable set of naturals stored in increasing order."""

    def __init__(self, elems: Iterable[int] = ()) -> None:
        self._elems: Tuple[int, ...] = tuple(sorted(set(elems)))

    @classmethod
    def _ordenado(cls, elems: Iterable[int]) -> Conjunto:
        conjunto = cls()
        conjunto._elems = tuple(elems)
        return conjunto

    @classmethod
    def singleton(cls, elem: int) -> Conjunto:
        """Return the set whose only element is ``elem``."""
        return cls._ordenado((elem,))

    @classmethod
    def desde_arreglo(cls, elems: Sequence[int]) -> Conjunto:
        """Return the set of a non-empty, strictly increasing sequence."""
        if not elems:
            raise ValueError("the sequence must not be empty")
        if not all(a < b for a, b in pairwise(elems)):
            raise ValueError("the sequence must be strictly increasing")
        return cls._ordenado(elems)

    def union(self, otro: Conjunto) -> Conjunto:
        """Return the elements in this set or in ``otro``."""
        return Conjunto._ordenado(_mezclar(self._elems, otro._elems, True))

    def diferencia(self, otro: Conjunto) -> Conjunto:
        """Return the elements of this set that are not in ``otro``."""
        return Conjunto._ordenado(_mezclar(self._elems, otro._elems, False))

    def __contains__(self, elem: object) -> bool:
        if not isinstance(elem, int):
            return False
        pos = bisect_left(self._elems, elem)
        return pos < len(self._elems) and self._elems[pos] == elem

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[int]:
        return iter(self._elems)

    def __eq__(self, otro: object) -> bool:
        if not isinstance(otro, Conjunto):
            return NotImplemented
        return self._elems == otro._elems

    def __hash__(self) -> int:
        return hash(self._elems)

    def __repr__(self) -> str:
        return f"Conjunto({list(self._elems)!r})"

    def esta_vacio(self) -> bool:
        """Return whether the set has no elements."""
        return not self._elems

    def iterador(self) -> Iterador:
        """Return a restarted iterator over the elements in increasing order."""
        iterador = Iterador(self._elems)
        iterador.reiniciar()
        return iterador