"""FIFO queues of AVL trees."""

from __future__ import annotations

from collections import deque
from typing import Deque

from .avl import Avl


class ColaVacia(LookupError):
    """The queue has no elements."""


class ColaAvls:
    """A first-in first-out queue of ``Avl`` trees."""

    def __init__(self) -> None:
        self._elems: Deque[Avl] = deque()

    def __len__(self) -> int:
        return len(self._elems)

    def __repr__(self) -> str:
        return f"ColaAvls({list(self._elems)!r})"

    def encolar(self, avl: Avl) -> None:
        """Add ``avl`` at the back of the queue."""
        self._elems.append(avl)

    def desencolar(self) -> None:
        """Remove the front element; does nothing when the queue is empty."""
        if self._elems:
            self._elems.popleft()

    def frente(self) -> Avl:
        """Return the element at the front."""
        if not self._elems:
            raise ColaVacia("the queue is empty")
        return self._elems[0]

    def esta_vacia(self) -> bool:
        """Return whether the queue has no elements."""
        return not self._elems