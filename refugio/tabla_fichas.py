"""Hash table from dog ids to vaccination records."""

from __future__ import annotations

from refugio.ficha_vacunacion import FichaVacunacion


class TablaFichaVacunacion:
    """Open hash table with ``cant_estimada`` buckets; key ``id % cant_estimada``.

    New entries go to the front of their bucket.
    """

    def __init__(self, cant_estimada: int) -> None:
        self.cant_estimada = cant_estimada
        self._cubetas: list[list[tuple[int, FichaVacunacion]]] = [
            [] for _ in range(max(cant_estimada, 0))
        ]
        self._cantidad = 0

    def _cubeta(self, id_perro: int) -> list[tuple[int, FichaVacunacion]]:
        return self._cubetas[id_perro % self.cant_estimada]

    def insertar(self, id_perro: int, ficha: FichaVacunacion) -> None:
        """Associate ``ficha`` with ``id_perro``."""
        self._cubeta(id_perro).insert(0, (id_perro, ficha))
        self._cantidad += 1

    def eliminar(self, id_perro: int) -> None:
        """Remove the most recent entry for ``id_perro``; absent ids are ignored."""
        cubeta = self._cubeta(id_perro)
        for i, (clave, _) in enumerate(cubeta):
            if clave == id_perro:
                del cubeta[i]
                self._cantidad -= 1
                return

    def __contains__(self, id_perro: object) -> bool:
        if not isinstance(id_perro, int):
            return False
        return any(clave == id_perro for clave, _ in self._cubeta(id_perro))

    def obtener(self, id_perro: int) -> FichaVacunacion | None:
        """The most recent record for ``id_perro``, or None."""
        return next((ficha for clave, ficha in self._cubeta(id_perro) if clave == id_perro), None)

    def __len__(self) -> int:
        return self._cantidad

    def __str__(self) -> str:
        return "\n".join(
            f"Perro ID: {clave}\n{ficha}" for cubeta in self._cubetas for clave, ficha in cubeta
        )