"""Undirected weighted graphs with numbered vertices and bounded edges."""

from __future__ import annotations

from typing import Dict, List

from .iterador import Iterador


class Grafo:
    """A graph with vertices 1..``n`` and at most ``m`` pairs of neighbours."""

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("the number of vertices and edges must not be negative")
        self._n = n
        self._m = m
        self._adyacencias: List[Dict[int, float]] = [{} for _ in range(n + 1)]
        self._parejas = 0

    def __repr__(self) -> str:
        return f"Grafo({self._n}, {self._m})"

    def _exigir_vertice(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise ValueError(f"{v} is not a vertex between 1 and {self._n}")

    def cantidad_vertices(self) -> int:
        """Return the number of vertices."""
        return self._n

    def hay_m_parejas(self) -> bool:
        """Return whether the graph already holds its maximum number of pairs."""
        return self._parejas == self._m

    def hacer_vecinos(self, v1: int, v2: int, d: float) -> None:
        """Make ``v1`` and ``v2`` neighbours at distance ``d``."""
        self._exigir_vertice(v1)
        self._exigir_vertice(v2)
        if v1 == v2:
            raise ValueError("a vertex cannot be its own neighbour")
        if self.son_vecinos(v1, v2):
            raise ValueError(f"{v1} and {v2} are already neighbours")
        if self.hay_m_parejas():
            raise ValueError("the graph already holds its maximum number of pairs")
        if d < 0:
            raise ValueError("the distance must not be negative")
        self._adyacencias[v1][v2] = d
        self._adyacencias[v2][v1] = d
        self._parejas += 1

    def son_vecinos(self, v1: int, v2: int) -> bool:
        """Return whether ``v1`` and ``v2`` are neighbours."""
        self._exigir_vertice(v1)
        self._exigir_vertice(v2)
        return v2 in self._adyacencias[v1]

    def distancia(self, v1: int, v2: int) -> float:
        """Return the distance between the neighbours ``v1`` and ``v2``."""
        if not self.son_vecinos(v1, v2):
            raise KeyError((v1, v2))
        return self._adyacencias[v1][v2]

    def vecinos(self, v: int) -> Iterador:
        """Return a restarted iterator over the neighbours of ``v`` in increasing order."""
        self._exigir_vertice(v)
        iterador = Iterador(sorted(self._adyacencias[v]))
        iterador.reiniciar()
        return iterador