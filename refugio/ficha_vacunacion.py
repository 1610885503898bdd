"""Vaccination records as a general tree of vaccine codes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _Nodo:
    codigo: int
    hijos: list[_Nodo] = field(default_factory=list)


def _insertar(nodos: list[_Nodo], cod_padre: int, cod_vacuna: int) -> None:
    for nodo in nodos:
        if nodo.codigo == cod_padre:
            nodo.hijos.insert(0, _Nodo(cod_vacuna))
            return
        _insertar(nodo.hijos, cod_padre, cod_vacuna)


def _remover(nodos: list[_Nodo], cod_vacuna: int) -> None:
    for i, nodo in enumerate(nodos):
        if nodo.codigo == cod_vacuna:
            del nodos[i]
            return
        _remover(nodo.hijos, cod_vacuna)


def _preorden(nodos: list[_Nodo], nivel: int = 0) -> Iterator[tuple[int, _Nodo]]:
    for nodo in nodos:
        yield nivel, nodo
        yield from _preorden(nodo.hijos, nivel + 1)


class FichaVacunacion:
    """A tree of vaccines; each vaccine's children follow it in the schedule."""

    def __init__(self) -> None:
        self._raices: list[_Nodo] = []

    def insertar(self, cod_padre: int, cod_vacuna: int) -> None:
        """Add ``cod_vacuna`` as first child of ``cod_padre``; -1 creates the root of an empty record."""
        if not self._raices:
            if cod_padre == -1:
                self._raices.append(_Nodo(cod_vacuna))
        elif cod_padre != -1:
            _insertar(self._raices, cod_padre, cod_vacuna)

    def existe(self, cod_vacuna: int) -> bool:
        return any(nodo.codigo == cod_vacuna for _, nodo in _preorden(self._raices))

    def altura(self) -> int:
        """Number of levels; 0 when empty."""
        return max((nivel + 1 for nivel, _ in _preorden(self._raices)), default=0)

    def __len__(self) -> int:
        return sum(1 for _ in _preorden(self._raices))

    def remover(self, cod_vacuna: int) -> None:
        """Remove the vaccine and everything below it; absent codes are ignored."""
        _remover(self._raices, cod_vacuna)

    def __eq__(self, otra: object) -> bool:
        if not isinstance(otra, FichaVacunacion):
            return NotImplemented
        return self._raices == otra._raices

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(
            [
                "Ficha Vacunacion:",
                *("    " * nivel + str(nodo.codigo) for nivel, nodo in _preorden(self._raices)),
            ]
        )