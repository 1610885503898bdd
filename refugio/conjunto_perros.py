"""Bounded sets of dog ids."""

from __future__ import annotations

from collections.abc import Iterable


class ConjuntoPerros:
    """A set of dog ids drawn from 1..cant_max; other ids are ignored."""

    def __init__(self, cant_max: int) -> None:
        self.cant_max = cant_max
        self._ids: set[int] = set()

    def insertar(self, id_perro: int) -> None:
        """Add ``id_perro`` if it lies in 1..cant_max."""
        if 0 < id_perro <= self.cant_max:
            self._ids.add(id_perro)

    def borrar(self, id_perro: int) -> None:
        """Remove ``id_perro`` if present."""
        self._ids.discard(id_perro)

    def __contains__(self, id_perro: object) -> bool:
        return id_perro in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def es_vacio(self) -> bool:
        return not self._ids

    def _con(self, ids: Iterable[int]) -> ConjuntoPerros:
        nuevo = ConjuntoPerros(self.cant_max)
        for id_perro in ids:
            nuevo.insertar(id_perro)
        return nuevo

    def union(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """New set with ids in either set, bounded by this set's cant_max."""
        return self._con(self._ids | otro._ids)

    def interseccion(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """New set with ids in both sets."""
        return self._con(self._ids & otro._ids)

    def diferencia(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """New set with ids in this set but not in ``otro``."""
        return self._con(self._ids - otro._ids)

    def __str__(self) -> str:
        return " ".join(str(id_perro) for id_perro in sorted(self._ids))