"""Elements made of a natural number and a real number."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Info:
    """A pair formed by a natural component and a real component.

    Two values are equal when both components are equal.
    """

    natural: int
    real: float

    def copia(self) -> Info:
        """Return an independent copy of this element."""
        return replace(self)

    def texto(self) -> str:
        """Return the element as ``(natural,real)`` with two decimals."""
        return f"({self.natural},{self.real:4.2f})"

    def __str__(self) -> str:
        return self.texto()