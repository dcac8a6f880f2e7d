"""Algorithms built on chains, trees, sets and graphs."""

from __future__ import annotations

import sys
from itertools import pairwise
from typing import Dict, Iterator, List, Optional

from .binario import Binario
from .cadena import Cadena, Localizador
from .cola_de_prioridad import ColaDePrioridad
from .conjunto import Conjunto
from .grafo import Grafo
from .info import Info

INFINITO = sys.float_info.max
"""Length reported for vertices that cannot be reached."""


def _localizadores(cad: Cadena) -> Iterator[Localizador]:
    loc = cad.inicio()
    while loc is not None:
        siguiente = cad.siguiente(loc)
        yield loc
        loc = siguiente


def _exigir_vertice(v: int, g: Grafo) -> None:
    if not 1 <= v <= g.cantidad_vertices():
        raise ValueError(f"{v} is not a vertex between 1 and {g.cantidad_vertices()}")


def accesibles(v: int, g: Grafo) -> List[bool]:
    """Return, for each vertex 1..N (index 0 unused), whether it is reachable from ``v``."""
    _exigir_vertice(v, g)
    alcanzados = [False] * (g.cantidad_vertices() + 1)
    alcanzados[v] = True
    pendientes = [v]
    while pendientes:
        u = pendientes.pop()
        for w in g.vecinos(u):
            if not alcanzados[w]:
                alcanzados[w] = True
                pendientes.append(w)
    return alcanzados


def longitudes_caminos_mas_cortos(v: int, g: Grafo) -> List[float]:
    """Return the length of the shortest path from ``v`` to each vertex 1..N.

    Index 0 is unused; unreachable vertices get ``INFINITO``.
    """
    _exigir_vertice(v, g)
    n = g.cantidad_vertices()
    definitivos: Dict[int, float] = {}
    provisorios = ColaDePrioridad(n)
    provisorios.insertar(v, 0.0)
    while not provisorios.esta_vacia():
        u = provisorios.prioritario()
        du = provisorios.prioridad(u)
        provisorios.eliminar_prioritario()
        definitivos[u] = du
        for w in g.vecinos(u):
            if w in definitivos:
                continue
            dw = du + g.distancia(u, w)
            if w not in provisorios:
                provisorios.insertar(w, dw)
            elif dw < provisorios.prioridad(w):
                provisorios.actualizar(w, dw)
    return [definitivos.get(u, INFINITO) for u in range(n + 1)]


def interseccion_de_conjuntos(c1: Conjunto, c2: Conjunto) -> Conjunto:
    """Return the elements that belong to both ``c1`` and ``c2``."""
    union = c1.union(c2)
    simetrica = c1.diferencia(c2).union(c2.diferencia(c1))
    return union.diferencia(simetrica)


def nivel_en_binario(l: int, b: Binario) -> Cadena:
    """Return copies of the elements at level ``l`` of ``b`` (the root is level 1).

    The chain is in increasing order of the natural components.
    """
    if l < 1:
        raise ValueError("the level must be positive")
    nivel = [b.nodo] if b.nodo is not None else []
    for _ in range(l - 1):
        nivel = [h for nodo in nivel for h in (nodo.izq, nodo.der) if h is not None]
    return Cadena(nodo.dato.copia() for nodo in nivel)


def es_camino(c: Cadena, b: Binario) -> bool:
    """Return whether a root-to-leaf path of ``b`` matches ``c`` by naturals.

    Two empty structures match; an empty chain matches any tree.
    """
    if b.es_vacio():
        return c.es_vacia()
    naturales = [info.natural for info in c]
    if not naturales:
        return True
    nodo = b.nodo
    assert nodo is not None
    if nodo.dato.natural != naturales[0]:
        return False
    for siguiente in naturales[1:]:
        proximo: Optional[object] = None
        for hijo in (nodo.izq, nodo.der):
            if hijo is not None and hijo.dato.natural == siguiente:
                proximo = hijo
                break
        if proximo is None:
            return False
        nodo = proximo  # type: ignore[assignment]
    return nodo.izq is None and nodo.der is None


def pertenece(elem: int, cad: Cadena) -> bool:
    """Return whether some element of ``cad`` has natural ``elem``."""
    return any(info.natural == elem for info in cad)


def longitud(cad: Cadena) -> int:
    """Return the number of elements of ``cad``."""
    return sum(1 for _ in cad)


def esta_ordenada_por_naturales(cad: Cadena) -> bool:
    """Return whether ``cad`` is non-decreasing by natural component."""
    return all(a.natural <= b.natural for a, b in pairwise(cad))


def hay_nats_repetidos(cad: Cadena) -> bool:
    """Return whether two elements of ``cad`` share their natural component."""
    naturales = [info.natural for info in cad]
    return len(set(naturales)) != len(naturales)


def son_iguales_cadena(c1: Cadena, c2: Cadena) -> bool:
    """Return whether both chains hold equal elements in the same order."""
    return list(c1) == list(c2)


def concatenar(c1: Cadena, c2: Cadena) -> Cadena:
    """Return a new chain with copies of the elements of ``c1`` then ``c2``."""
    return Cadena(info.copia() for cadena in (c1, c2) for info in cadena)


def ordenar(cad: Cadena) -> None:
    """Sort ``cad`` in place by natural, keeping its locators in their positions.

    The naturals of ``cad`` must be distinct.
    """
    if hay_nats_repetidos(cad):
        raise ValueError("the chain has repeated naturals")
    ordenados = sorted(cad, key=lambda info: info.natural)
    for loc, info in zip(list(_localizadores(cad)), ordenados):
        cad.cambiar(info, loc)


def cambiar_todos(original: int, nuevo: int, cad: Cadena) -> None:
    """Replace the natural ``original`` with ``nuevo`` in every element of ``cad``."""
    if original == nuevo:
        return
    for loc in list(_localizadores(cad)):
        info = cad.info(loc)
        if info.natural == original:
            cad.cambiar(Info(nuevo, info.real), loc)


def sub_cadena(menor: int, mayor: int, cad: Cadena) -> Cadena:
    """Return copies of the elements with ``menor <= natural <= mayor``.

    ``cad`` must be ordered and contain both ``menor`` and ``mayor``.
    """
    if not esta_ordenada_por_naturales(cad):
        raise ValueError("the chain is not ordered by naturals")
    if menor > mayor:
        raise ValueError("'menor' must not exceed 'mayor'")
    if not (pertenece(menor, cad) and pertenece(mayor, cad)):
        raise ValueError("both bounds must be in the chain")
    desde = cad.siguiente_clave(menor, cad.inicio())
    hasta = cad.anterior_clave(mayor, cad.final())
    return cad.copiar_segmento(desde, hasta)