"""Self-balancing AVL trees of natural numbers."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterator, List, Optional, Sequence

from .binario import ArbolVacio
from .iterador import Iterador


@dataclass(eq=False)
class NodoAvl:
    """A node of an AVL tree that keeps its height and subtree size."""

    dato: int
    altura: int = 1
    cant: int = 1
    izq: Optional[NodoAvl] = None
    der: Optional[NodoAvl] = None


def _altura(nodo: Optional[NodoAvl]) -> int:
    return 0 if nodo is None else nodo.altura


def _cant(nodo: Optional[NodoAvl]) -> int:
    return 0 if nodo is None else nodo.cant


def _actualizar(nodo: NodoAvl) -> None:
    nodo.altura = max(_altura(nodo.izq), _altura(nodo.der)) + 1
    nodo.cant = _cant(nodo.izq) + _cant(nodo.der) + 1


def _rotar_con_izq(nodo: NodoAvl) -> NodoAvl:
    aux = nodo.izq
    assert aux is not None
    nodo.izq = aux.der
    aux.der = nodo
    _actualizar(nodo)
    _actualizar(aux)
    return aux


def _rotar_con_der(nodo: NodoAvl) -> NodoAvl:
    aux = nodo.der
    assert aux is not None
    nodo.der = aux.izq
    aux.izq = nodo
    _actualizar(nodo)
    _actualizar(aux)
    return aux


def _insertar(elem: int, nodo: Optional[NodoAvl]) -> NodoAvl:
    if nodo is None:
        return NodoAvl(elem)
    if elem < nodo.dato:
        nodo.izq = _insertar(elem, nodo.izq)
        if _altura(nodo.izq) - _altura(nodo.der) == 2:
            assert nodo.izq is not None
            if elem < nodo.izq.dato:
                nodo = _rotar_con_izq(nodo)
            else:
                nodo.izq = _rotar_con_der(nodo.izq)
                nodo = _rotar_con_izq(nodo)
    elif elem > nodo.dato:
        nodo.der = _insertar(elem, nodo.der)
        if _altura(nodo.der) - _altura(nodo.izq) == 2:
            assert nodo.der is not None
            if elem > nodo.der.dato:
                nodo = _rotar_con_der(nodo)
            else:
                nodo.der = _rotar_con_izq(nodo.der)
                nodo = _rotar_con_der(nodo)
    _actualizar(nodo)
    return nodo


class Avl:
    """An AVL tree of naturals.

    Subtrees obtained from ``izquierdo``, ``derecho`` or ``buscar`` share
    their nodes with the tree they come from.
    """

    def __init__(self, nodo: Optional[NodoAvl] = None) -> None:
        self._nodo = nodo

    def __repr__(self) -> str:
        return f"Avl({list(self)!r})"

    @property
    def nodo(self) -> Optional[NodoAvl]:
        """The root node, or ``None`` for the empty tree."""
        return self._nodo

    def _exigir_nodo(self) -> NodoAvl:
        if self._nodo is None:
            raise ArbolVacio("the tree is empty")
        return self._nodo

    def es_vacio(self) -> bool:
        """Return whether the tree has no elements."""
        return self._nodo is None

    @property
    def raiz(self) -> int:
        """The element at the root."""
        return self._exigir_nodo().dato

    @property
    def izquierdo(self) -> Avl:
        """The left subtree."""
        return Avl(self._exigir_nodo().izq)

    @property
    def derecho(self) -> Avl:
        """The right subtree."""
        return Avl(self._exigir_nodo().der)

    def insertar(self, elem: int) -> None:
        """Insert ``elem``, which must not already be in the tree."""
        if not self.buscar(elem).es_vacio():
            raise ValueError(f"{elem} is already in the tree")
        self._nodo = _insertar(elem, self._nodo)

    def buscar(self, elem: int) -> Avl:
        """Return the subtree rooted at ``elem``, or an empty tree."""
        nodo = self._nodo
        while nodo is not None and nodo.dato != elem:
            nodo = nodo.izq if elem < nodo.dato else nodo.der
        return Avl(nodo)

    def __len__(self) -> int:
        return _cant(self._nodo)

    def altura(self) -> int:
        """Return the height; the empty tree has height 0."""
        return _altura(self._nodo)

    def __iter__(self) -> Iterator[int]:
        pendientes: List[NodoAvl] = []
        nodo = self._nodo
        while pendientes or nodo is not None:
            while nodo is not None:
                pendientes.append(nodo)
                nodo = nodo.izq
            nodo = pendientes.pop()
            yield nodo.dato
            nodo = nodo.der

    def en_orden(self) -> Iterador:
        """Return a restarted iterator over the elements in increasing order."""
        iterador = Iterador(self)
        iterador.reiniciar()
        return iterador

    def texto_por_niveles(self) -> str:
        """Return one line per level, deepest first, each in increasing order.

        Every number is followed by a space; the empty tree gives ``""``.
        """
        niveles: List[List[int]] = []
        nivel = [self._nodo] if self._nodo is not None else []
        while nivel:
            niveles.append([nodo.dato for nodo in nivel])
            nivel = [h for nodo in nivel for h in (nodo.izq, nodo.der) if h is not None]
        return "".join(
            "".join(f"{elem} " for elem in fila) + "\n" for fila in reversed(niveles)
        )


def _desde_rango(elems: Sequence[int], desde: int, hasta: int) -> Optional[NodoAvl]:
    if desde == hasta:
        return None
    medio = (hasta + desde - 1) // 2
    nodo = NodoAvl(
        elems[medio],
        izq=_desde_rango(elems, desde, medio),
        der=_desde_rango(elems, medio + 1, hasta),
    )
    _actualizar(nodo)
    return nodo


def arreglo_a_avl(elems: Sequence[int]) -> Avl:
    """Build a tree from a non-empty, strictly increasing sequence.

    In every node the left subtree has as many elements as the right one,
    or one fewer.
    """
    if not elems:
        raise ValueError("the sequence must not be empty")
    if not all(a < b for a, b in pairwise(elems)):
        raise ValueError("the sequence must be strictly increasing")
    return Avl(_desde_rango(elems, 0, len(elems)))


def _cantidades_minimas(h: int) -> List[int]:
    cantidades = [0, 1]
    while len(cantidades) <= h:
        cantidades.append(cantidades[-1] + cantidades[-2] + 1)
    return cantidades


def avl_min(h: int) -> Avl:
    """Return an AVL tree of height ``h`` with the fewest possible nodes.

    Its elements are 1 to n and no right subtree is larger than its left sibling.
    """
    if h < 0:
        raise ValueError("the height must not be negative")
    cantidades = _cantidades_minimas(h)

    def construir(altura: int, minimo: int) -> Optional[NodoAvl]:
        if altura == 0:
            return None
        if altura == 1:
            return NodoAvl(minimo)
        actual = cantidades[altura - 1] + minimo
        nodo = NodoAvl(
            actual,
            izq=construir(altura - 1, minimo),
            der=construir(altura - 2, actual + 1),
        )
        _actualizar(nodo)
        return nodo

    return Avl(construir(h, 1))