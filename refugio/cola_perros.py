"""First-in, first-out queue of dogs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from refugio.perro import Perro


class ColaPerros:
    """A queue of dogs in arrival order."""

    def __init__(self) -> None:
        self._perros: deque[Perro] = deque()

    def encolar(self, perro: Perro) -> None:
        """Add ``perro`` at the back."""
        self._perros.append(perro)

    def desencolar(self) -> Perro:
        """Remove and return the dog at the front."""
        if not self._perros:
            raise IndexError("desencolar de una cola vacía")
        return self._perros.popleft()

    def frente(self) -> Perro:
        """Return the dog at the front without removing it."""
        if not self._perros:
            raise IndexError("frente de una cola vacía")
        return self._perros[0]

    def __len__(self) -> int:
        return len(self._perros)

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def __str__(self) -> str:
        return "\n".join(["Cola de Perros:", *(str(perro) for perro in self._perros)])