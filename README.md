# refugio

A small library of data structures for running a dog shelter. It also has a
set of interpreter commands that work on a shared session.

## What it contains

- `refugio.fecha`: `Fecha` holds a calendar date. It can add days with leap-year handling (`aumentar`) and compare two dates (`comparar`). The module also has the helpers `es_bisiesto` and `dias_mes`.
- `refugio.perro`: `Perro`, a dog with id, name, age, vitality, description and admission date.
- `refugio.persona`: `Persona`, which keeps copies of the dogs the person adopted.
- `refugio.pila`: `Pila`, a stack of integers.
- `refugio.cola_perros`: `ColaPerros`, a FIFO queue of dogs.
- `refugio.conjunto_perros`: `ConjuntoPerros`, a set of dog ids bounded to `1..cant_max`. It has `union`, `interseccion` and `diferencia`.
- `refugio.lde_perros`: `LDEPerros`, dogs kept sorted by age. It can be traversed from either end.
- `refugio.abb_personas`: `ABBPersonas`, a binary search tree of people keyed by CI. It has height, n-th person, removal and filtering by birth date.
- `refugio.lse_adopciones`: `Adopcion` and `ListaAdopciones`. The list keeps adoptions sorted by date.
- `refugio.ficha_vacunacion`: `FichaVacunacion`, a general tree of vaccine codes.
- `refugio.cola_prioridad_perros`: `ColaPrioridadPerros`, a binary heap of dogs keyed on vitality. Its order can be inverted with `invertir_prioridad`.
- `refugio.tabla_fichas`: `TablaFichaVacunacion`, an open hash table that maps dog ids to vaccination records.
- `refugio.refugio`: `Refugio`, which ties all of the above together. It covers registering people, admitting dogs, walks, adoptions and vaccinations.
- `refugio.aplicaciones`: the functions `mismos_elementos`, `menores_que_el_resto` and `suma_pares`.
- `refugio.lectura`: `Lector`, which reads words, integers, characters, reals and line remainders from a text stream, in the manner of `scanf`.
- `refugio.comandos_basicos`: `Sesion`, `leer_fecha` and `comandos()`.
  - `Sesion` holds the input `Lector`, the output stream and the objects the commands act on.
  - `leer_fecha` reads a date written as `dd/mm/aaaa`.
  - `comandos()` maps command names to functions that take a `Sesion`. The commands cover dates, dogs, people, the adoption list and the people tree.

## Installation

```
pip install .
```

## Using the library

```python
from refugio.fecha import Fecha
from refugio.perro import Perro
from refugio.persona import Persona
from refugio.refugio import Refugio

refugio = Refugio(10)
refugio.registrar_persona(Persona(123, "Ana", "Perez", Fecha(2, 5, 1990)))
refugio.ingresar_perro(Perro(1, "Toby", 3, 5, "Marron", Fecha(1, 1, 2024)))
refugio.adoptar_perro(1, 123, Fecha(10, 2, 2024))
print(refugio.formato_adopciones())
```

## Running a command

A command reads its arguments from the session's `Lector` and writes its
results to the session's output stream:

```python
import io

from refugio.comandos_basicos import Sesion, comandos
from refugio.lectura import Lector

salida = io.StringIO()
sesion = Sesion(Lector(io.StringIO("1/2/2024")), salida)
comandos()["crearFecha"](sesion)
comandos()["imprimirFecha"](sesion)
print(salida.getvalue())
# Fecha creada en forma exitosa.
# 1/2/2024
```

## What it does not do

- The package has no command-line program.
- Nothing reads commands one after another from standard input with a prompt.
- The commands in `comandos()` cover only dates, dogs, people, the adoption list and the people tree. There are no commands for the other structures, such as the stack, queues, sets, vaccination records, the hash table or the shelter. Those structures are used by calling their classes directly.

## Running the tests

```
pip install .[test]
pytest
```