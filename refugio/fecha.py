"""Calendar dates with day-based arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, replace

_MESES_31 = frozenset({1, 3, 5, 7, 8, 10, 12})
_MESES_30 = frozenset({4, 6, 9, 11})


def es_bisiesto(anio: int) -> bool:
    """Return True if ``anio`` is a leap year in the Gregorian calendar."""
    return anio % 4 == 0 and (anio % 400 == 0 or anio % 100 != 0)


def dias_mes(mes: int, anio: int) -> int:
    """Number of days in ``mes`` of ``anio``; 0 for a month outside 1..12."""
    if mes in _MESES_31:
        return 31
    if mes in _MESES_30:
        return 30
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return 0


@dataclass
class Fecha:
    """A day/month/year date."""

    dia: int
    mes: int
    anio: int

    def aumentar(self, dias: int) -> None:
        """Move this date ``dias`` days forward, in place."""
        self.dia += dias
        while self.dia > (largo := dias_mes(self.mes, self.anio)):
            if largo == 0:
                raise ValueError(f"mes inválido: {self.mes}")
            self.dia -= largo
            self.mes += 1
            if self.mes > 12:
                self.mes = 1
                self.anio += 1

    def comparar(self, otra: Fecha) -> int:
        """Return 1 if this date is later than ``otra``, -1 if earlier, 0 if equal."""
        propia = (self.anio, self.mes, self.dia)
        ajena = (otra.anio, otra.mes, otra.dia)
        return (propia > ajena) - (propia < ajena)

    def copiar(self) -> Fecha:
        """Return an independent copy of this date."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"