"""Algorithms that combine the shelter's data structures."""

from __future__ import annotations

import math

from refugio.cola_perros import ColaPerros
from refugio.conjunto_perros import ConjuntoPerros
from refugio.lde_perros import LDEPerros
from refugio.pila import Pila


def mismos_elementos(pila: Pila, cola: ColaPerros) -> bool:
    """True if the stack, bottom to top, holds the queue's dog ids front to back.

    Both are consumed when the sizes match; otherwise only the first half of each is."""
    if len(pila) != len(cola):
        for _ in range((len(pila) + 1) // 2):
            pila.desapilar()
        for _ in range((len(cola) + 1) // 2):
            cola.desencolar()
        return False
    desde_la_cima = [pila.desapilar() for _ in range(len(pila))]
    ids_cola = [cola.desencolar().id for _ in range(len(cola))]
    return desde_la_cima[::-1] == ids_cola


def menores_que_el_resto(lista: LDEPerros) -> Pila:
    """Stack the vitality of every dog lower than all dogs after it; empties ``lista``."""
    perros = [lista.remover_primero() for _ in range(len(lista))]
    menores = []
    minimo_resto = math.inf
    for perro in reversed(perros):
        menores.append(perro.vitalidad < minimo_resto)
        minimo_resto = min(minimo_resto, perro.vitalidad)
    resultado = Pila()
    for perro, es_menor in zip(perros, reversed(menores)):
        if es_menor:
            resultado.apilar(perro.vitalidad)
    return resultado


def suma_pares(k: int, conjunto: ConjuntoPerros) -> bool:
    """True if two ids below cant_max, possibly the same one, add up to ``k``."""
    ids = {i for i in range(conjunto.cant_max) if i in conjunto}
    return any(k - i in ids for i in ids)