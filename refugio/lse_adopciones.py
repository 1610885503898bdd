"""Adoption records kept in date order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from refugio.fecha import Fecha
from refugio.perro import Perro
from refugio.persona import Persona

_SEPARADOR = "---------------------------"


@dataclass
class Adopcion:
    """A dog adopted by a person on a date."""

    fecha: Fecha
    persona: Persona
    perro: Perro

    def __str__(self) -> str:
        return "\n".join(
            [
                _SEPARADOR,
                f"Adopcion en fecha {self.fecha}",
                "Adoptante:",
                f"Persona {self.persona.nombre} {self.persona.apellido}",
                f"CI: {self.persona.ci}",
                "Adoptado:",
                f"Perro {self.perro.id}",
                f"Nombre: {self.perro.nombre}",
                f"Fecha de ingreso: {self.perro.fecha_ingreso}",
                _SEPARADOR,
            ]
        )


class ListaAdopciones:
    """Adoptions sorted by date; equal dates keep insertion order."""

    def __init__(self) -> None:
        self._adopciones: list[Adopcion] = []

    def insertar(self, fecha: Fecha, persona: Persona, perro: Perro) -> None:
        """Insert an adoption after every adoption on or before ``fecha``."""
        posicion = next(
            (i for i, adopcion in enumerate(self._adopciones) if fecha.comparar(adopcion.fecha) < 0),
            len(self._adopciones),
        )
        self._adopciones.insert(posicion, Adopcion(fecha, persona, perro))

    def existe(self, ci_persona: int, id_perro: int) -> bool:
        """Return True if the person adopted the dog."""
        return any(self._coincide(a, ci_persona, id_perro) for a in self._adopciones)

    def remover(self, ci_persona: int, id_perro: int) -> Adopcion:
        """Remove and return the first matching adoption."""
        for i, adopcion in enumerate(self._adopciones):
            if self._coincide(adopcion, ci_persona, id_perro):
                return self._adopciones.pop(i)
        raise KeyError((ci_persona, id_perro))

    @staticmethod
    def _coincide(adopcion: Adopcion, ci_persona: int, id_perro: int) -> bool:
        return adopcion.persona.ci == ci_persona and adopcion.perro.id == id_perro

    def es_vacia(self) -> bool:
        return not self._adopciones

    def __iter__(self) -> Iterator[Adopcion]:
        return iter(self._adopciones)

    def __str__(self) -> str:
        return "\n".join(str(adopcion) for adopcion in self._adopciones)