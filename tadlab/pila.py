"""Bounded LIFO stacks of natural numbers."""

from __future__ import annotations

from typing import List


class PilaVacia(LookupError):
    """The stack has no elements."""


class Pila:
    """A stack that holds at most ``tamanio`` naturals."""

    def __init__(self, tamanio: int) -> None:
        if tamanio < 1:
            raise ValueError("the size of a stack must be positive")
        self._tamanio = tamanio
        self._elems: List[int] = []

    def __len__(self) -> int:
        return len(self._elems)

    def __repr__(self) -> str:
        return f"Pila({self._tamanio}, {self._elems!r})"

    def apilar(self, num: int) -> None:
        """Push ``num``; does nothing when the stack is full."""
        if not self.esta_llena():
            self._elems.append(num)

    def desapilar(self) -> None:
        """Pop the top element; does nothing when the stack is empty."""
        if self._elems:
            self._elems.pop()

    def cima(self) -> int:
        """Return the top element."""
        if not self._elems:
            raise PilaVacia("the stack is empty")
        return self._elems[-1]

    def esta_vacia(self) -> bool:
        """Return whether the stack has no elements."""
        return not self._elems

    def esta_llena(self) -> bool:
        """Return whether the stack holds as many elements as its size."""
        return len(self._elems) == self._tamanio