"""Priority queues of naturals in the range 1..N with real priorities."""

from __future__ import annotations

from typing import Dict, List


class ColaDePrioridadVacia(LookupError):
    """The priority queue has no elements."""


class ColaDePrioridad:
    """A binary min-heap of distinct naturals between 1 and ``rango``.

    An element is more urgent than another when its priority value is
    smaller. Among equal values any of them may be the urgent one.
    """

    def __init__(self, rango: int) -> None:
        if rango < 0:
            raise ValueError("the range must not be negative")
        self._rango = rango
        self._heap: List[int] = []
        self._prioridades: Dict[int, float] = {}
        self._posiciones: Dict[int, int] = {}

    def __repr__(self) -> str:
        pares = {elem: self._prioridades[elem] for elem in self._heap}
        return f"ColaDePrioridad({self._rango}, {pares!r})"

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def rango(self) -> int:
        """The greatest element the queue may hold."""
        return self._rango

    def _prioridad_en(self, posicion: int) -> float:
        return self._prioridades[self._heap[posicion]]

    def _intercambiar(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._posiciones[heap[i]] = i
        self._posiciones[heap[j]] = j

    def _subir(self, i: int) -> None:
        while i > 0:
            padre = (i - 1) // 2
            if not self._prioridad_en(i) < self._prioridad_en(padre):
                break
            self._intercambiar(i, padre)
            i = padre

    def _bajar(self, i: int) -> None:
        cantidad = len(self._heap)
        while True:
            izq = 2 * i + 1
            der = izq + 1
            if izq >= cantidad:
                return
            if der < cantidad and not self._prioridad_en(izq) < self._prioridad_en(der):
                elegido = der
            else:
                elegido = izq
            if not self._prioridad_en(elegido) < self._prioridad_en(i):
                return
            self._intercambiar(i, elegido)
            i = elegido

    def insertar(self, elem: int, valor: float) -> None:
        """Insert ``elem`` with priority ``valor``.

        ``elem`` must be between 1 and ``rango`` and not already queued.
        """
        if not 1 <= elem <= self._rango:
            raise ValueError(f"{elem} is outside the range 1..{self._rango}")
        if elem in self._posiciones:
            raise ValueError(f"{elem} is already in the queue")
        self._heap.append(elem)
        posicion = len(self._heap) - 1
        self._posiciones[elem] = posicion
        self._prioridades[elem] = valor
        self._subir(posicion)

    def esta_vacia(self) -> bool:
        """Return whether the queue has no elements."""
        return not self._heap

    def prioritario(self) -> int:
        """Return the element with the smallest priority value."""
        if not self._heap:
            raise ColaDePrioridadVacia("the priority queue is empty")
        return self._heap[0]

    def eliminar_prioritario(self) -> int:
        """Remove the most urgent element and return it."""
        elem = self.prioritario()
        ultimo = self._heap.pop()
        del self._posiciones[elem]
        del self._prioridades[elem]
        if self._heap:
            self._heap[0] = ultimo
            self._posiciones[ultimo] = 0
            self._bajar(0)
        return elem

    def __contains__(self, elem: object) -> bool:
        return elem in self._posiciones

    def prioridad(self, elem: int) -> float:
        """Return the priority value of ``elem``."""
        if elem not in self._prioridades:
            raise KeyError(elem)
        return self._prioridades[elem]

    def actualizar(self, elem: int, valor: float) -> None:
        """Change the priority value of ``elem`` to ``valor``."""
        if elem not in self._posiciones:
            raise KeyError(elem)
        self._prioridades[elem] = valor
        posicion = self._posiciones[elem]
        self._subir(posicion)
        self._bajar(posicion)