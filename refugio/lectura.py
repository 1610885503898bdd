"""Token reading from a text stream, in the manner of scanf."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

MAX_LINEA = 256
_BLANCOS = " \t\n\r\v\f"
_DIGITOS = "0123456789"


class Lector:
    """Reads words, numbers and line remainders from a character stream."""

    def __init__(self, flujo: TextIO) -> None:
        self._flujo = flujo
        self._pendiente = ""

    def _mirar(self) -> str:
        if not self._pendiente:
            self._pendiente = self._flujo.read(1)
        return self._pendiente

    def _tomar(self) -> str:
        caracter = self._mirar()
        self._pendiente = ""
        return caracter

    def _tomar_mientras(self, condicion: Callable[[str], bool]) -> str:
        partes = []
        while (caracter := self._mirar()) and condicion(caracter):
            partes.append(self._tomar())
        return "".join(partes)

    def _saltar_blancos(self) -> None:
        self._tomar_mientras(lambda c: c in _BLANCOS)

    def _inicio_numero(self) -> str:
        self._saltar_blancos()
        caracter = self._mirar()
        if not caracter:
            raise EOFError("fin de la entrada")
        return self._tomar() if caracter in "+-" else ""

    def _digitos(self) -> str:
        return self._tomar_mientras(lambda c: c in _DIGITOS)

    def _leer_entero(self) -> int:
        signo = self._inicio_numero()
        digitos = self._digitos()
        if not digitos:
            raise ValueError("se esperaba un número entero")
        return int(signo + digitos)

    def leer_palabra(self) -> str:
        """Skip blanks and read a run of non-blank characters."""
        self._saltar_blancos()
        palabra = self._tomar_mientras(lambda c: c not in _BLANCOS)
        if not palabra:
            raise EOFError("fin de la entrada")
        return palabra

    def leer_nat(self) -> int:
        """Read an unsigned 32-bit integer; negative input wraps around."""
        return self._leer_entero() % (1 << 32)

    def leer_int(self) -> int:
        """Read a signed integer."""
        return self._leer_entero()

    def leer_char(self) -> str:
        """Skip blanks and read one character."""
        self._saltar_blancos()
        caracter = self._tomar()
        if not caracter:
            raise EOFError("fin de la entrada")
        return caracter

    def leer_double(self) -> float:
        """Read a decimal floating-point number."""
        texto = self._inicio_numero() + self._digitos()
        if self._mirar() == ".":
            texto += self._tomar() + self._digitos()
        if not any(c in _DIGITOS for c in texto):
            raise ValueError("se esperaba un número real")
        if (caracter := self._mirar()) and caracter in "eE":
            self._tomar()
            signo = self._tomar() if (c := self._mirar()) and c in "+-" else ""
            exponente = self._digitos()
            if exponente:
                texto += "e" + signo + exponente
        return float(texto)

    def leer_resto_linea(self) -> str:
        """Read up to, but not including, the next newline."""
        return self._tomar_mientras(lambda c: c != "\n")

    def descartar_linea(self) -> str:
        """Consume the rest of the line, newline included, up to MAX_LINEA characters."""
        partes = []
        while len(partes) < MAX_LINEA and (caracter := self._tomar()):
            partes.append(caracter)
            if caracter == "\n":
                break
        return "".join(partes)