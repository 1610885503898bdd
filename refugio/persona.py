"""People who can adopt dogs."""

from __future__ import annotations

from dataclasses import dataclass, field

from refugio.fecha import Fecha
from refugio.perro import Perro


@dataclass
class Persona:
    """A person identified by national id, with the dogs they adopted."""

    ci: int
    nombre: str
    apellido: str
    nacimiento: Fecha
    perros: list[Perro] = field(default_factory=list)

    def agregar_perro(self, perro: Perro) -> None:
        """Add a copy of ``perro`` to this person's dogs."""
        self.perros.append(perro.copiar())

    def tiene_perro(self, id_perro: int) -> bool:
        """Return True if a dog with ``id_perro`` belongs to this person."""
        return any(perro.id == id_perro for perro in self.perros)

    def cantidad_perros(self) -> int:
        """Number of dogs this person has adopted."""
        return len(self.perros)

    def copiar(self) -> Persona:
        """Return a deep copy of this person and their dogs."""
        return Persona(
            self.ci,
            self.nombre,
            self.apellido,
            self.nacimiento.copiar(),
            [perro.copiar() for perro in self.perros],
        )

    def __str__(self) -> str:
        lineas = [
            f"Persona {self.nombre} {self.apellido}",
            f"CI: {self.ci}",
            f"Fecha de Nacimiento: {self.nacimiento}",
            "Perros adoptados:",
        ]
        lineas.extend(str(perro) for perro in self.perros)
        return "\n".join(lineas)