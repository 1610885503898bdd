"""Dogs kept sorted by age."""

from __future__ import annotations

from collections.abc import Iterator

from refugio.perro import Perro


class LDEPerros:
    """Dogs in ascending age; a new dog goes before others of the same age."""

    def __init__(self) -> None:
        self._perros: list[Perro] = []

    def insertar(self, perro: Perro) -> None:
        """Insert ``perro`` before the first dog at least as old."""
        posicion = next(
            (i for i, actual in enumerate(self._perros) if actual.edad >= perro.edad),
            len(self._perros),
        )
        self._perros.insert(posicion, perro)

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def __reversed__(self) -> Iterator[Perro]:
        return reversed(self._perros)

    def __len__(self) -> int:
        return len(self._perros)

    def primero(self) -> Perro:
        """The youngest dog."""
        if not self._perros:
            raise IndexError("la lista está vacía")
        return self._perros[0]

    def ultimo(self) -> Perro:
        """The oldest dog."""
        if not self._perros:
            raise IndexError("la lista está vacía")
        return self._perros[-1]

    def nesimo(self, n: int) -> Perro:
        """The dog at position ``n``, counting from 1."""
        if not 1 <= n <= len(self._perros):
            raise IndexError(n)
        return self._perros[n - 1]

    def existe(self, id_perro: int) -> bool:
        return any(perro.id == id_perro for perro in self._perros)

    def remover(self, id_perro: int) -> Perro:
        """Remove and return the first dog with ``id_perro``."""
        for i, perro in enumerate(self._perros):
            if perro.id == id_perro:
                return self._perros.pop(i)
        raise KeyError(id_perro)

    def remover_primero(self) -> Perro:
        if not self._perros:
            raise IndexError("la lista está vacía")
        return self._perros.pop(0)

    def remover_ultimo(self) -> Perro:
        if not self._perros:
            raise IndexError("la lista está vacía")
        return self._perros.pop()

    def formato(self) -> str:
        """Listing from youngest to oldest."""
        return "\n".join(["LDE Perros:", *(str(perro) for perro in self._perros)])

    def formato_invertido(self) -> str:
        """Listing from oldest to youngest."""
        return "\n".join(["LDE Perros:", *(str(perro) for perro in reversed(self._perros))])