"""Priority queue of dogs ordered by vitality, backed by a binary heap."""

from __future__ import annotations

from dataclasses import dataclass

from refugio.perro import Perro


@dataclass
class _Nodo:
    perro: Perro
    vitalidad: int


class ColaPrioridadPerros:
    """Heap of dogs with ids in 1..n.

    By default a lower vitality means a higher priority; ``invertir_prioridad``
    flips that. The vitality is taken when a dog is inserted.
    """

    def __init__(self, n: int) -> None:
        self.maximo = n
        self._heap: list[_Nodo] = []
        self._vitalidades: dict[int, int] = {}
        self._es_min = True

    def _antes_al_subir(self, a: _Nodo, b: _Nodo) -> bool:
        if self._es_min:
            return a.vitalidad < b.vitalidad
        return a.vitalidad > b.vitalidad

    def _antes_al_bajar(self, a: _Nodo, b: _Nodo) -> bool:
        if a.vitalidad == b.vitalidad:
            return a.perro.id < b.perro.id
        return self._antes_al_subir(a, b)

    def _subir(self, posicion: int) -> None:
        heap = self._heap
        while posicion > 0:
            padre = (posicion - 1) // 2
            if not self._antes_al_subir(heap[posicion], heap[padre]):
                break
            heap[posicion], heap[padre] = heap[padre], heap[posicion]
            posicion = padre

    def _hundir(self, posicion: int) -> None:
        heap = self._heap
        while True:
            elegido = posicion
            for hijo in (2 * posicion + 1, 2 * posicion + 2):
                if hijo < len(heap) and self._antes_al_bajar(heap[hijo], heap[elegido]):
                    elegido = hijo
            if elegido == posicion:
                return
            heap[posicion], heap[elegido] = heap[elegido], heap[posicion]
            posicion = elegido

    def insertar(self, perro: Perro) -> None:
        """Add ``perro``; ignored when the queue is full or its id is outside 1..n."""
        if len(self._heap) >= self.maximo or not 0 < perro.id <= self.maximo:
            return
        self._heap.append(_Nodo(perro, perro.vitalidad))
        self._vitalidades[perro.id] = perro.vitalidad
        self._subir(len(self._heap) - 1)

    def esta_vacia(self) -> bool:
        return not self._heap

    def __contains__(self, id_perro: object) -> bool:
        return (
            bool(self._heap)
            and isinstance(id_perro, int)
            and 0 < id_perro <= self.maximo
            and id_perro in self._vitalidades
        )

    def prioridad(self, id_perro: int) -> int:
        """Vitality the dog was inserted with, or -1 if it is not in the queue."""
        if not 0 <= id_perro <= self.maximo:
            raise KeyError(id_perro)
        return self._vitalidades.get(id_perro, -1)

    def prioritario(self) -> Perro:
        """The dog with the highest priority."""
        if not self._heap:
            raise IndexError("la cola de prioridad está vacía")
        return self._heap[0].perro

    def eliminar_prioritario(self) -> Perro | None:
        """Remove and return the highest-priority dog; does nothing when empty."""
        if not self._heap:
            return None
        raiz = self._heap[0]
        self._vitalidades.pop(raiz.perro.id, None)
        ultimo = self._heap.pop()
        if self._heap:
            self._heap[0] = ultimo
            self._hundir(0)
        return raiz.perro

    def invertir_prioridad(self) -> None:
        """Swap between lowest-vitality-first and highest-vitality-first."""
        self._es_min = not self._es_min
        for posicion in range(len(self._heap) // 2 - 1, -1, -1):
            self._hundir(posicion)

    def __len__(self) -> int:
        return len(self._heap)