"""A stack of integers."""

from __future__ import annotations


class Pila:
    """Last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._elementos: list[int] = []

    def apilar(self, elem: int) -> None:
        """Push ``elem`` on top."""
        self._elementos.append(elem)

    def desapilar(self) -> int:
        """Remove and return the top element."""
        if not self._elementos:
            raise IndexError("desapilar de una pila vacía")
        return self._elementos.pop()

    def cima(self) -> int:
        """Return the top element without removing it."""
        if not self._elementos:
            raise IndexError("cima de una pila vacía")
        return self._elementos[-1]

    def __len__(self) -> int:
        return len(self._elementos)

    def __str__(self) -> str:
        """Elements from bottom to top, after the ``Pila:`` label."""
        return "Pila:" + "".join(f" {elem}" for elem in self._elementos)