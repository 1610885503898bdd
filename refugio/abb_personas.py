"""Binary search tree of people keyed by national id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from refugio.fecha import Fecha
from refugio.persona import Persona


@dataclass
class _Nodo:
    persona: Persona
    izq: _Nodo | None = None
    der: _Nodo | None = None


def _signo(valor: int) -> int:
    return (valor > 0) - (valor < 0)


def _maximo(nodo: _Nodo) -> _Nodo:
    while nodo.der is not None:
        nodo = nodo.der
    return nodo


def _remover(raiz: _Nodo | None, ci: int) -> _Nodo | None:
    """Remove the first node with ``ci`` from the subtree and return its new root."""
    padre: _Nodo | None = None
    nodo = raiz
    while nodo is not None and nodo.persona.ci != ci:
        padre = nodo
        nodo = nodo.der if ci > nodo.persona.ci else nodo.izq
    if nodo is None:
        raise KeyError(ci)
    if nodo.izq is not None and nodo.der is not None:
        nodo.persona = _maximo(nodo.izq).persona.copiar()
        nodo.izq = _remover(nodo.izq, nodo.persona.ci)
        return raiz
    reemplazo = nodo.der if nodo.izq is None else nodo.izq
    if padre is None:
        return reemplazo
    if padre.izq is nodo:
        padre.izq = reemplazo
    else:
        padre.der = reemplazo
    return raiz


def _postorden(raiz: _Nodo | None) -> Iterator[_Nodo]:
    pendientes = [(raiz, False)] if raiz is not None else []
    while pendientes:
        nodo, visitado = pendientes.pop()
        if visitado:
            yield nodo
            continue
        pendientes.append((nodo, True))
        for hijo in (nodo.der, nodo.izq):
            if hijo is not None:
                pendientes.append((hijo, False))


class ABBPersonas:
    """People ordered by ci; equal ids go to the right subtree."""

    def __init__(self) -> None:
        self._raiz: _Nodo | None = None

    def insertar(self, persona: Persona) -> None:
        """Insert ``persona`` as a new leaf."""
        nuevo = _Nodo(persona)
        if self._raiz is None:
            self._raiz = nuevo
            return
        nodo = self._raiz
        while True:
            if persona.ci < nodo.persona.ci:
                if nodo.izq is None:
                    nodo.izq = nuevo
                    return
                nodo = nodo.izq
            else:
                if nodo.der is None:
                    nodo.der = nuevo
                    return
                nodo = nodo.der

    def _buscar(self, ci: int) -> _Nodo | None:
        nodo = self._raiz
        while nodo is not None and nodo.persona.ci != ci:
            nodo = nodo.izq if ci < nodo.persona.ci else nodo.der
        return nodo

    def existe(self, ci: int) -> bool:
        """Return True if a person with ``ci`` is in the tree."""
        return self._buscar(ci) is not None

    def obtener(self, ci: int) -> Persona | None:
        """Return the person with ``ci``, or None if absent."""
        nodo = self._buscar(ci)
        return nodo.persona if nodo is not None else None

    def altura(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        altura = 0
        nivel = [self._raiz] if self._raiz is not None else []
        while nivel:
            altura += 1
            nivel = [hijo for nodo in nivel for hijo in (nodo.izq, nodo.der) if hijo is not None]
        return altura

    def max_ci(self) -> Persona:
        """Return the person with the largest ci."""
        if self._raiz is None:
            raise ValueError("el árbol está vacío")
        return _maximo(self._raiz).persona

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def nesima(self, n: int) -> Persona:
        """Return the n-th person in ci order, counting from 1."""
        if not 1 <= n <= len(self):
            raise IndexError(n)
        return next(islice(self, n - 1, None))

    def remover(self, ci: int) -> None:
        """Remove the person with ``ci``; raise KeyError if absent."""
        self._raiz = _remover(self._raiz, ci)

    def filtrado_por_fecha(self, fecha: Fecha, criterio: int) -> ABBPersonas:
        """New tree with copies of the people whose birth date compares to ``fecha``
        with the sign of ``criterio``: before if negative, equal if 0, after if positive."""
        filtrados: dict[int, _Nodo | None] = {}
        signo = _signo(criterio)
        for nodo in _postorden(self._raiz):
            izq = filtrados.pop(id(nodo.izq)) if nodo.izq is not None else None
            der = filtrados.pop(id(nodo.der)) if nodo.der is not None else None
            if nodo.persona.nacimiento.comparar(fecha) == signo:
                resultado = _Nodo(nodo.persona.copiar(), izq, der)
            elif izq is None:
                resultado = der
            elif der is None:
                resultado = izq
            else:
                persona = _maximo(izq).persona.copiar()
                resultado = _Nodo(persona, _remover(izq, persona.ci), der)
            filtrados[id(nodo)] = resultado
        arbol = ABBPersonas()
        if self._raiz is not None:
            arbol._raiz = filtrados[id(self._raiz)]
        return arbol

    def __iter__(self) -> Iterator[Persona]:
        pendientes: list[_Nodo] = []
        nodo = self._raiz
        while pendientes or nodo is not None:
            while nodo is not None:
                pendientes.append(nodo)
                nodo = nodo.izq
            nodo = pendientes.pop()
            yield nodo.persona
            nodo = nodo.der

    def __str__(self) -> str:
        return "\n".join(str(persona) for persona in self)