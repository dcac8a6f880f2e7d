"""Binary search trees of ``Info`` ordered by their natural component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .cadena import Cadena
from .info import Info


class ArbolVacio(LookupError):
    """An operation needs a non-empty tree."""


@dataclass(eq=False)
class NodoBinario:
    """A node of a binary search tree."""

    dato: Info
    izq: Optional[NodoBinario] = None
    der: Optional[NodoBinario] = None


class Binario:
    """A binary search tree keyed by ``Info.natural``.

    Subtrees obtained from ``izquierdo``, ``derecho`` or ``buscar_subarbol``
    share their nodes with the tree they come from.
    """

    def __init__(self, nodo: Optional[NodoBinario] = None) -> None:
        self._nodo = nodo

    def __repr__(self) -> str:
        return f"Binario({[info for info in self._infos()]!r})"

    @property
    def nodo(self) -> Optional[NodoBinario]:
        """The root node, or ``None`` for the empty tree."""
        return self._nodo

    def _exigir_nodo(self) -> NodoBinario:
        if self._nodo is None:
            raise ArbolVacio("the tree is empty")
        return self._nodo

    def _recorrido(self, inverso: bool = False) -> Iterator[Tuple[NodoBinario, int]]:
        """Yield nodes in order (or reverse order) with their depth."""
        pendientes: list = []
        nodo = self._nodo
        profundidad = 0
        while pendientes or nodo is not None:
            while nodo is not None:
                pendientes.append((nodo, profundidad))
                nodo = nodo.der if inverso else nodo.izq
                profundidad += 1
            nodo, profundidad = pendientes.pop()
            yield nodo, profundidad
            nodo = nodo.izq if inverso else nodo.der
            profundidad += 1

    def _infos(self) -> Iterator[Info]:
        for nodo, _ in self._recorrido():
            yield nodo.dato

    def es_vacio(self) -> bool:
        """Return whether the tree has no elements."""
        return self._nodo is None

    @property
    def raiz(self) -> Info:
        """The element at the root."""
        return self._exigir_nodo().dato

    @property
    def izquierdo(self) -> Binario:
        """The left subtree."""
        return Binario(self._exigir_nodo().izq)

    @property
    def derecho(self) -> Binario:
        """The right subtree."""
        return Binario(self._exigir_nodo().der)

    def insertar(self, info: Info) -> None:
        """Insert ``info``; its natural must not already be in the tree."""
        if not self.buscar_subarbol(info.natural).es_vacio():
            raise ValueError(f"{info.natural} is already in the tree")
        nuevo = NodoBinario(info)
        if self._nodo is None:
            self._nodo = nuevo
            return
        actual = self._nodo
        while True:
            if info.natural > actual.dato.natural:
                if actual.der is None:
                    actual.der = nuevo
                    return
                actual = actual.der
            else:
                if actual.izq is None:
                    actual.izq = nuevo
                    return
                actual = actual.izq

    def mayor(self) -> Info:
        """Return the element with the greatest natural."""
        nodo = self._exigir_nodo()
        while nodo.der is not None:
            nodo = nodo.der
        return nodo.dato

    def remover_mayor(self) -> Info:
        """Remove the node holding the greatest element and return that element."""
        nodo = self._exigir_nodo()
        if nodo.der is None:
            self._nodo = nodo.izq
            return nodo.dato
        padre = nodo
        while padre.der.der is not None:  # type: ignore[union-attr]
            padre = padre.der  # type: ignore[assignment]
        quitado = padre.der
        assert quitado is not None
        padre.der = quitado.izq
        return quitado.dato

    def _reemplazar_hijo(
        self, padre: Optional[NodoBinario], hijo: NodoBinario, nuevo: Optional[NodoBinario]
    ) -> None:
        if padre is None:
            self._nodo = nuevo
        elif padre.izq is hijo:
            padre.izq = nuevo
        else:
            padre.der = nuevo

    def remover(self, elem: int) -> None:
        """Remove the node whose natural is ``elem``.

        A node with a left subtree is replaced by the greatest element of
        that subtree; one with only a right subtree by the least of it.
        """
        padre: Optional[NodoBinario] = None
        nodo = self._nodo
        while nodo is not None and nodo.dato.natural != elem:
            padre = nodo
            nodo = nodo.izq if elem < nodo.dato.natural else nodo.der
        if nodo is None:
            raise KeyError(elem)
        if nodo.izq is None and nodo.der is None:
            self._reemplazar_hijo(padre, nodo, None)
        elif nodo.izq is None:
            previo, sucesor = nodo, nodo.der
            assert sucesor is not None
            while sucesor.izq is not None:
                previo, sucesor = sucesor, sucesor.izq
            nodo.dato = sucesor.dato
            if previo is nodo:
                nodo.der = sucesor.der
            else:
                previo.izq = sucesor.der
        else:
            previo, predecesor = nodo, nodo.izq
            while predecesor.der is not None:
                previo, predecesor = predecesor, predecesor.der
            nodo.dato = predecesor.dato
            if previo is nodo:
                nodo.izq = predecesor.izq
            else:
                previo.der = predecesor.izq

    def es_avl(self) -> bool:
        """Return whether every node's subtrees differ in height by at most one."""
        alturas: dict = {}
        pendientes = [(self._nodo, False)]
        while pendientes:
            nodo, visitado = pendientes.pop()
            if nodo is None:
                continue
            if not visitado:
                pendientes.append((nodo, True))
                pendientes.append((nodo.der, False))
                pendientes.append((nodo.izq, False))
                continue
            alt_izq = alturas.pop(id(nodo.izq), 0) if nodo.izq is not None else 0
            alt_der = alturas.pop(id(nodo.der), 0) if nodo.der is not None else 0
            if abs(alt_izq - alt_der) > 1:
                return False
            alturas[id(nodo)] = max(alt_izq, alt_der) + 1
        return True

    def buscar_subarbol(self, elem: int) -> Binario:
        """Return the subtree rooted at ``elem``, or an empty tree."""
        nodo = self._nodo
        while nodo is not None and nodo.dato.natural != elem:
            nodo = nodo.izq if elem < nodo.dato.natural else nodo.der
        return Binario(nodo)

    def altura(self) -> int:
        """Return the height; the empty tree has height 0."""
        altura = 0
        nivel = [self._nodo] if self._nodo is not None else []
        while nivel:
            altura += 1
            nivel = [hijo for nodo in nivel for hijo in (nodo.izq, nodo.der) if hijo is not None]
        return altura

    def cantidad(self) -> int:
        """Return the number of elements."""
        return sum(1 for _ in self._recorrido())

    def suma_ultimos_positivos(self, i: int) -> float:
        """Sum the reals of the last ``i`` elements (by natural) whose real is positive."""
        suma = 0.0
        cuenta = 0
        for nodo, _ in self._recorrido(inverso=True):
            if cuenta >= i:
                break
            if nodo.dato.real > 0:
                suma += nodo.dato.real
                cuenta += 1
        return suma

    def linealizacion(self) -> Cadena:
        """Return a chain with copies of the elements in increasing order."""
        return Cadena(info.copia() for info in self._infos())

    def menores(self, cota: float) -> Binario:
        """Return a tree with copies of the elements whose real is below ``cota``.

        Elements are inserted in preorder, so the shape follows the original.
        """
        resultado = Binario()
        pendientes = [self._nodo]
        while pendientes:
            nodo = pendientes.pop()
            if nodo is None:
                continue
            if nodo.dato.real < cota:
                resultado.insertar(nodo.dato.copia())
            pendientes.append(nodo.der)
            pendientes.append(nodo.izq)
        return resultado

    def texto(self) -> str:
        """Return the elements in decreasing order, one per line, preceded by a newline.

        Each element is prefixed with as many dashes as its depth.
        """
        lineas = "".join(
            f"{'-' * profundidad}{nodo.dato.texto()}\n"
            for nodo, profundidad in self._recorrido(inverso=True)
        )
        return "\n" + lineas