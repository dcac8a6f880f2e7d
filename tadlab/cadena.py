"""Doubly linked chains of ``Info`` elements accessed through locators."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .info import Info


class LocalizadorInvalido(ValueError):
    """A locator does not reach an element of the chain it was used with."""


class Localizador:
    """A position in a ``Cadena``; ``None`` stands for an invalid locator."""

    __slots__ = ("_info", "_anterior", "_siguiente")

    def __init__(self, info: Info) -> None:
        self._info = info
        self._anterior: Optional[Localizador] = None
        self._siguiente: Optional[Localizador] = None

    def __repr__(self) -> str:
        return f"Localizador({self._info!r})"


class Cadena:
    """A doubly linked list of ``Info`` with references to both ends."""

    def __init__(self, infos: Iterable[Info] = ()) -> None:
        self._inicio: Optional[Localizador] = None
        self._final: Optional[Localizador] = None
        self._cantidad = 0
        for info in infos:
            self.insertar_al_final(info)

    def _nodos(self) -> Iterator[Localizador]:
        nodo = self._inicio
        while nodo is not None:
            siguiente = nodo._siguiente
            yield nodo
            nodo = siguiente

    def _exigir(self, loc: Optional[Localizador]) -> Localizador:
        if not self.contiene(loc):
            raise LocalizadorInvalido("the locator is not in the chain")
        return loc  # type: ignore[return-value]

    def _desenlazar(self, loc: Localizador) -> None:
        anterior, siguiente = loc._anterior, loc._siguiente
        if anterior is None:
            self._inicio = siguiente
        else:
            anterior._siguiente = siguiente
        if siguiente is None:
            self._final = anterior
        else:
            siguiente._anterior = anterior
        loc._anterior = loc._siguiente = None
        self._cantidad -= 1

    def __iter__(self) -> Iterator[Info]:
        for nodo in self._nodos():
            yield nodo._info

    def __len__(self) -> int:
        return self._cantidad

    def __repr__(self) -> str:
        return f"Cadena({list(self)!r})"

    def es_vacia(self) -> bool:
        """Return whether the chain has no elements."""
        return self._inicio is None

    def inicio(self) -> Optional[Localizador]:
        """Return the locator of the first element, or ``None`` if empty."""
        return self._inicio

    def final(self) -> Optional[Localizador]:
        """Return the locator of the last element, or ``None`` if empty."""
        return self._final

    def info(self, loc: Optional[Localizador]) -> Info:
        """Return the element reached by ``loc``."""
        return self._exigir(loc)._info

    def siguiente(self, loc: Optional[Localizador]) -> Optional[Localizador]:
        """Return the locator after ``loc``, or ``None`` at the end."""
        return self._exigir(loc)._siguiente

    def anterior(self, loc: Optional[Localizador]) -> Optional[Localizador]:
        """Return the locator before ``loc``, or ``None`` at the start."""
        return self._exigir(loc)._anterior

    def es_final(self, loc: Optional[Localizador]) -> bool:
        """Return whether ``loc`` reaches the last element."""
        return self.contiene(loc) and loc._siguiente is None  # type: ignore[union-attr]

    def es_inicio(self, loc: Optional[Localizador]) -> bool:
        """Return whether ``loc`` reaches the first element."""
        return self.contiene(loc) and loc._anterior is None  # type: ignore[union-attr]

    def insertar_al_final(self, info: Info) -> Localizador:
        """Append ``info`` and return its locator."""
        nodo = Localizador(info)
        if self._final is None:
            self._inicio = nodo
        else:
            self._final._siguiente = nodo
            nodo._anterior = self._final
        self._final = nodo
        self._cantidad += 1
        return nodo

    def insertar_antes(self, info: Info, loc: Optional[Localizador]) -> Localizador:
        """Insert ``info`` immediately before ``loc`` and return its locator."""
        destino = self._exigir(loc)
        nodo = Localizador(info)
        nodo._siguiente = destino
        nodo._anterior = destino._anterior
        if destino._anterior is None:
            self._inicio = nodo
        else:
            destino._anterior._siguiente = nodo
        destino._anterior = nodo
        self._cantidad += 1
        return nodo

    def remover(self, loc: Optional[Localizador]) -> None:
        """Remove the element reached by ``loc``."""
        self._desenlazar(self._exigir(loc))

    def texto(self) -> str:
        """Return every element as ``(n,r)``, one after another."""
        return "".join(f"({info.natural},{info.real:.2f})" for info in self)

    def kesimo(self, k: int) -> Optional[Localizador]:
        """Return the locator of the k-th element (from 1), or ``None``."""
        if k < 1:
            return None
        for posicion, nodo in enumerate(self._nodos(), start=1):
            if posicion == k:
                return nodo
        return None

    def contiene(self, loc: Optional[Localizador]) -> bool:
        """Return whether ``loc`` reaches an element of this chain."""
        if loc is None:
            return False
        return any(nodo is loc for nodo in self._nodos())

    def precede(self, loc1: Optional[Localizador], loc2: Optional[Localizador]) -> bool:
        """Return whether ``loc1`` equals or comes before ``loc2``."""
        if not self.contiene(loc1):
            return False
        cursor = loc1
        while cursor is not None:
            if cursor is loc2:
                return True
            cursor = cursor._siguiente
        return False

    def insertar_segmento_despues(self, sgm: Cadena, loc: Optional[Localizador]) -> None:
        """Move every node of ``sgm`` right after ``loc``; ``sgm`` ends empty.

        When this chain is empty ``loc`` is ignored.
        """
        if sgm is self:
            raise ValueError("a chain cannot be inserted into itself")
        if not self.es_vacia():
            self._exigir(loc)
        if sgm.es_vacia():
            return
        primero, ultimo, cantidad = sgm._inicio, sgm._final, sgm._cantidad
        sgm._inicio = sgm._final = None
        sgm._cantidad = 0
        assert primero is not None and ultimo is not None
        if self.es_vacia():
            self._inicio, self._final = primero, ultimo
        else:
            assert loc is not None
            siguiente = loc._siguiente
            loc._siguiente = primero
            primero._anterior = loc
            ultimo._siguiente = siguiente
            if siguiente is None:
                self._final = ultimo
            else:
                siguiente._anterior = ultimo
        self._cantidad += cantidad

    def copiar_segmento(
        self, desde: Optional[Localizador], hasta: Optional[Localizador]
    ) -> Cadena:
        """Return a new chain with copies of the elements from ``desde`` to ``hasta``."""
        resultado = Cadena()
        if self.es_vacia():
            return resultado
        if not self.precede(desde, hasta):
            raise LocalizadorInvalido("'desde' does not precede 'hasta'")
        cursor = desde
        while cursor is not None:
            resultado.insertar_al_final(cursor._info.copia())
            if cursor is hasta:
                break
            cursor = cursor._siguiente
        return resultado

    def borrar_segmento(
        self, desde: Optional[Localizador], hasta: Optional[Localizador]
    ) -> None:
        """Remove the elements from ``desde`` to ``hasta``, both included."""
        if self.es_vacia():
            return
        if not self.precede(desde, hasta):
            raise LocalizadorInvalido("'desde' does not precede 'hasta'")
        cursor = desde
        while cursor is not None:
            siguiente = cursor._siguiente
            ultimo = cursor is hasta
            self._desenlazar(cursor)
            if ultimo:
                break
            cursor = siguiente

    def cambiar(self, info: Info, loc: Optional[Localizador]) -> None:
        """Replace the element reached by ``loc`` with ``info``."""
        self._exigir(loc)._info = info

    def intercambiar(self, loc1: Optional[Localizador], loc2: Optional[Localizador]) -> None:
        """Swap the elements reached by ``loc1`` and ``loc2``."""
        nodo1 = self._exigir(loc1)
        nodo2 = self._exigir(loc2)
        nodo1._info, nodo2._info = nodo2._info, nodo1._info

    def _buscar_clave(
        self, clave: int, loc: Optional[Localizador], hacia_adelante: bool
    ) -> Optional[Localizador]:
        if self.es_vacia():
            return None
        cursor = self._exigir(loc)
        while cursor is not None and cursor._info.natural != clave:
            cursor = cursor._siguiente if hacia_adelante else cursor._anterior
        return cursor

    def siguiente_clave(self, clave: int, loc: Optional[Localizador]) -> Optional[Localizador]:
        """Return the first locator from ``loc`` forward whose natural is ``clave``."""
        return self._buscar_clave(clave, loc, True)

    def anterior_clave(self, clave: int, loc: Optional[Localizador]) -> Optional[Localizador]:
        """Return the first locator from ``loc`` backward whose natural is ``clave``."""
        return self._buscar_clave(clave, loc, False)

    def menor(self, loc: Optional[Localizador]) -> Localizador:
        """Return the first locator with the least natural from ``loc`` to the end."""
        resultado = self._exigir(loc)
        cursor = resultado._siguiente
        while cursor is not None:
            if cursor._info.natural < resultado._info.natural:
                resultado = cursor
            cursor = cursor._siguiente
        return resultado