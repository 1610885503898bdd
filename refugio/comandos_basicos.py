"""Session state and the interpreter commands for dates, dogs, people, adoptions and the people tree."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from refugio.abb_personas import ABBPersonas
from refugio.cola_perros import ColaPerros
from refugio.cola_prioridad_perros import ColaPrioridadPerros
from refugio.conjunto_perros import ConjuntoPerros
from refugio.fecha import Fecha
from refugio.ficha_vacunacion import FichaVacunacion
from refugio.lde_perros import LDEPerros
from refugio.lectura import Lector
from refugio.lse_adopciones import ListaAdopciones
from refugio.perro import Perro
from refugio.persona import Persona
from refugio.pila import Pila
from refugio.refugio import Refugio
from refugio.tabla_fichas import TablaFichaVacunacion

Comando = Callable[["Sesion"], None]


@dataclass
class Sesion:
    """Input, output and the objects the interpreter's commands work on."""

    lector: Lector
    salida: TextIO
    fecha: Fecha | None = None
    persona: Persona | None = None
    perro: Perro | None = None
    abb_personas: ABBPersonas | None = None
    adopciones: ListaAdopciones | None = None
    lde_perros: LDEPerros | None = None
    ficha: FichaVacunacion | None = None
    cola: ColaPerros | None = None
    conjunto: ConjuntoPerros | None = None
    pila: Pila | None = None
    cola_prioridad: ColaPrioridadPerros | None = None
    tabla: TablaFichaVacunacion | None = None
    refugio: Refugio | None = None


def _escribir(sesion: Sesion, *lineas: str) -> None:
    for linea in lineas:
        sesion.salida.write(linea + "\n")


def _bloque(sesion: Sesion, texto: str) -> None:
    """Write a multi-line listing; an empty listing writes nothing."""
    if texto:
        _escribir(sesion, texto)


def _requerir(valor, que: str):
    if valor is None:
        raise RuntimeError(f"no hay {que}")
    return valor


def _sin(valor, que: str) -> None:
    if valor is not None:
        raise RuntimeError(f"ya hay {que}")


def leer_fecha(lector: Lector) -> Fecha:
    """Read a date written as ``dd/mm/aaaa``."""
    partes = [lector.leer_nat()]
    for _ in range(2):
        separador = lector.leer_char()
        if separador != "/":
            raise ValueError(f"se esperaba '/' y se leyó {separador!r}")
        partes.append(lector.leer_nat())
    return Fecha(*partes)


# Fechas


def _crear_fecha(sesion: Sesion) -> None:
    _sin(sesion.fecha, "una fecha")
    sesion.fecha = leer_fecha(sesion.lector)
    _escribir(sesion, "Fecha creada en forma exitosa.")


def _imprimir_fecha(sesion: Sesion) -> None:
    _escribir(sesion, str(_requerir(sesion.fecha, "fecha")))


def _liberar_fecha(sesion: Sesion) -> None:
    _requerir(sesion.fecha, "fecha")
    sesion.fecha = None
    _escribir(sesion, "Fecha liberada en forma exitosa.")


def _aumentar_dias(sesion: Sesion) -> None:
    fecha = _requerir(sesion.fecha, "fecha")
    dias = sesion.lector.leer_nat()
    fecha.aumentar(dias)
    _escribir(sesion, f"La nueva fecha aplazada {dias} dias es: ", str(fecha))


def _comparar_fechas(sesion: Sesion) -> None:
    primera = leer_fecha(sesion.lector)
    segunda = leer_fecha(sesion.lector)
    comparacion = primera.comparar(segunda)
    if comparacion == 0:
        _escribir(sesion, "Las fechas son iguales. ")
    elif comparacion == 1:
        _escribir(sesion, "La primera fecha es posterior a la segunda. ")
    else:
        _escribir(sesion, "La primera fecha es anterior a la segunda. ")


# Perros


def _crear_perro(sesion: Sesion) -> None:
    _sin(sesion.perro, "un perro")
    fecha = _requerir(sesion.fecha, "fecha")
    lector = sesion.lector
    id_perro = lector.leer_nat()
    nombre = lector.leer_palabra()
    edad = lector.leer_nat()
    vitalidad = lector.leer_nat()
    descripcion = lector.leer_resto_linea()
    sesion.perro = Perro(id_perro, nombre, edad, vitalidad, descripcion, fecha)
    sesion.fecha = None


def _liberar_perro(sesion: Sesion) -> None:
    _requerir(sesion.perro, "perro")
    sesion.perro = None


def _imprimir_id_perro(sesion: Sesion) -> None:
    _escribir(sesion, f"El id del perro es: {_requerir(sesion.perro, 'perro').id}")


def _imprimir_nombre_perro(sesion: Sesion) -> None:
    _escribir(sesion, f"El nombre del perro es: {_requerir(sesion.perro, 'perro').nombre}")


def _imprimir_edad_perro(sesion: Sesion) -> None:
    _escribir(sesion, f"La edad del perro es: {_requerir(sesion.perro, 'perro').edad}")


def _imprimir_descripcion_perro(sesion: Sesion) -> None:
    perro = _requerir(sesion.perro, "perro")
    _escribir(sesion, f"La descripcion del perro es: {perro.descripcion}")


def _imprimir_fecha_ingreso_perro(sesion: Sesion) -> None:
    perro = _requerir(sesion.perro, "perro")
    fecha = _requerir(perro.fecha_ingreso, "fecha de ingreso")
    _escribir(sesion, f"La fecha de ingreso del perro es: {fecha}")


def _imprimir_vitalidad_perro(sesion: Sesion) -> None:
    perro = _requerir(sesion.perro, "perro")
    _escribir(sesion, f"La vitalidad del perro es: {perro.vitalidad}")


def _imprimir_perro(sesion: Sesion) -> None:
    _escribir(sesion, str(_requerir(sesion.perro, "perro")))


def _actualizar_edad_perro(sesion: Sesion) -> None:
    perro = _requerir(sesion.perro, "perro")
    perro.edad = sesion.lector.leer_nat()


def _actualizar_vitalidad_perro(sesion: Sesion) -> None:
    perro = _requerir(sesion.perro, "perro")
    perro.vitalidad = sesion.lector.leer_nat()


# Personas


def _crear_persona(sesion: Sesion) -> None:
    _sin(sesion.persona, "una persona")
    lector = sesion.lector
    ci = lector.leer_int()
    nombre = lector.leer_palabra()
    apellido = lector.leer_palabra()
    dia = lector.leer_nat()
    mes = lector.leer_nat()
    anio = lector.leer_nat()
    sesion.persona = Persona(ci, nombre, apellido, Fecha(dia, mes, anio))


def _imprimir_ci_persona(sesion: Sesion) -> None:
    _escribir(sesion, f"La CI de la persona es: {_requerir(sesion.persona, 'persona').ci}")


def _imprimir_nombre_y_apellido_persona(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    _escribir(
        sesion,
        f"El nombre de la persona es: {persona.nombre}",
        f"El apellido de la persona es: {persona.apellido}",
    )


def _imprimir_fecha_nacimiento_persona(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    _escribir(sesion, f"La fecha de nacimiento de la persona es: {persona.nacimiento}")


def _imprimir_persona(sesion: Sesion) -> None:
    _escribir(sesion, str(_requerir(sesion.persona, "persona")))


def _copiar_persona(sesion: Sesion) -> None:
    copia = _requerir(sesion.persona, "persona").copiar()
    _escribir(sesion, "Persona copiada. Datos de la copia:", str(copia))


def _agregar_perro_persona(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    persona.agregar_perro(_requerir(sesion.perro, "perro"))


def _pertenece_perro_persona(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    id_perro = sesion.lector.leer_int()
    if persona.tiene_perro(id_perro):
        _escribir(sesion, f"El perro con id {id_perro} pertenece a la persona.")
    else:
        _escribir(sesion, f"El perro con id {id_perro} NO pertenece a la persona.")


def _cantidad_perros_persona(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    _escribir(sesion, f"La persona tiene {persona.cantidad_perros()} perro/s.")


def _liberar_persona(sesion: Sesion) -> None:
    _requerir(sesion.persona, "persona")
    sesion.persona = None


# Lista de adopciones: una lista vacía y una ausente valen lo mismo.


def _adopciones(sesion: Sesion) -> ListaAdopciones:
    if sesion.adopciones is None:
        sesion.adopciones = ListaAdopciones()
    return sesion.adopciones


def _crear_lse_adopciones(sesion: Sesion) -> None:
    if sesion.adopciones is not None and not sesion.adopciones.es_vacia():
        raise RuntimeError("ya hay una lista de adopciones")
    sesion.adopciones = ListaAdopciones()
    _escribir(sesion, "Lista de adopciones creada de forma exitosa.")


def _insertar_lse_adopciones(sesion: Sesion) -> None:
    fecha = _requerir(sesion.fecha, "fecha")
    persona = _requerir(sesion.persona, "persona")
    perro = _requerir(sesion.perro, "perro")
    _adopciones(sesion).insertar(fecha, persona, perro)
    _escribir(
        sesion,
        f"Adopcion de persona de CI {persona.ci} y perro de id {perro.id} agregada de forma exitosa.",
    )
    sesion.fecha = sesion.persona = sesion.perro = None


def _imprimir_lse_adopciones(sesion: Sesion) -> None:
    _escribir(sesion, "Lista de adopciones:")
    _bloque(sesion, str(_adopciones(sesion)))
    _escribir(sesion, "Fin lista de adopciones.")


def _liberar_lse_adopciones(sesion: Sesion) -> None:
    sesion.adopciones = None
    _escribir(sesion, "Lista de adopciones liberada con exito.")


def _es_vacia_lse_adopciones(sesion: Sesion) -> None:
    if _adopciones(sesion).es_vacia():
        _escribir(sesion, "La lista de adopciones es vacia.")
    else:
        _escribir(sesion, "La lista de adopciones NO es vacia.")


def _existe_adopcion_lse_adopciones(sesion: Sesion) -> None:
    ci = sesion.lector.leer_int()
    id_perro = sesion.lector.leer_int()
    if _adopciones(sesion).existe(ci, id_perro):
        _escribir(sesion, f"Existe una adopcion de la persona de CI {ci} al perro {id_perro} en la lista.")
    else:
        _escribir(
            sesion, f"NO Existe una adopcion de la persona de CI {ci} al perro {id_perro} en la lista."
        )


def _remover_adopcion_lse_adopciones(sesion: Sesion) -> None:
    ci = sesion.lector.leer_int()
    id_perro = sesion.lector.leer_int()
    adopciones = _adopciones(sesion)
    if not adopciones.existe(ci, id_perro):
        raise RuntimeError(f"no existe la adopcion ({ci}, {id_perro})")
    adopciones.remover(ci, id_perro)
    _escribir(
        sesion,
        f"Adopcion de la persona de CI {ci} al perro {id_perro} removida de la lista exitosamente.",
    )


# Árbol de personas: un árbol vacío y uno ausente valen lo mismo.


def _abb(sesion: Sesion) -> ABBPersonas:
    if sesion.abb_personas is None:
        sesion.abb_personas = ABBPersonas()
    return sesion.abb_personas


def _crear_abb_personas(sesion: Sesion) -> None:
    if sesion.abb_personas is not None and len(sesion.abb_personas) > 0:
        raise RuntimeError("ya hay un arbol de personas")
    sesion.abb_personas = ABBPersonas()
    _escribir(sesion, "El abb de personas ha sido creado de forma exitosa.")


def _insertar_persona_abb(sesion: Sesion) -> None:
    persona = _requerir(sesion.persona, "persona")
    _abb(sesion).insertar(persona)
    _escribir(sesion, "Persona agregada al arbol exitosamente.")
    sesion.persona = None


def _imprimir_abb(sesion: Sesion) -> None:
    _bloque(sesion, str(_abb(sesion)))


def _existe_persona_abb(sesion: Sesion) -> None:
    ci = sesion.lector.leer_int()
    if _abb(sesion).existe(ci):
        _escribir(sesion, f"La persona con ci {ci} pertenece al arbol.")
    else:
        _escribir(sesion, f"La persona con ci {ci} NO pertenece al arbol.")


def _obtener_persona_abb(sesion: Sesion) -> None:
    ci = sesion.lector.leer_int()
    persona = _abb(sesion).obtener(ci)
    if persona is None:
        _escribir(sesion, f"La persona con CI {ci} no se puede imprimir pues NO pertenece al arbol.")
    else:
        _escribir(sesion, str(persona))


def _altura_abb(sesion: Sesion) -> None:
    _escribir(sesion, f"La altura del arbol es {_abb(sesion).altura()}.")


def _max_ci_abb(sesion: Sesion) -> None:
    _escribir(sesion, f"La mayor cedula en el arbol es {_abb(sesion).max_ci().ci}.")


def _cantidad_abb(sesion: Sesion) -> None:
    _escribir(sesion, f"La cantidad de personas en el arbol es {len(_abb(sesion))}.")


def _nesima_persona_abb(sesion: Sesion) -> None:
    n = sesion.lector.leer_int()
    arbol = _abb(sesion)
    cantidad = len(arbol)
    if cantidad >= n:
        _escribir(sesion, f"Persona nro {n} del abb personas:", str(arbol.nesima(n)))
    else:
        _escribir(
            sesion, f"No se puede imprimir la persona nro {n} del arbol porque solo hay {cantidad}."
        )


def _remover_persona_abb(sesion: Sesion) -> None:
    ci = sesion.lector.leer_int()
    arbol = _abb(sesion)
    if arbol.existe(ci):
        arbol.remover(ci)
        _escribir(sesion, f"La persona con id {ci} se removio del arbol.")
    else:
        _escribir(sesion, f"La persona con CI {ci} no se puede remover porque NO pertenece al arbol.")


def _liberar_abb(sesion: Sesion) -> None:
    sesion.abb_personas = None
    _escribir(sesion, "ABB personas liberado con exito.")


def _filtrado_por_fecha_abb(sesion: Sesion) -> None:
    fecha = leer_fecha(sesion.lector)
    criterio = sesion.lector.leer_int()
    filtrado = _abb(sesion).filtrado_por_fecha(fecha, criterio)
    _escribir(sesion, "Arbol filtrado:")
    _bloque(sesion, str(filtrado))


def _arbol_balanceado(tamanio: int) -> ABBPersonas:
    """Tree of people with ci 0..tamanio-1, inserted middle first."""
    arbol = ABBPersonas()
    rangos = [(0, tamanio - 1)]
    while rangos:
        inicio, final = rangos.pop()
        if inicio > final:
            continue
        medio = (inicio + final) // 2
        arbol.insertar(Persona(medio, "Carlos", "Luna", Fecha(2, 5, 1960)))
        rangos.append((medio + 1, final))
        rangos.append((inicio, medio - 1))
    return arbol


def _altura_abb_tiempo(sesion: Sesion) -> None:
    tamanio = sesion.lector.leer_nat()
    limite = sesion.lector.leer_nat()
    arbol = _arbol_balanceado(tamanio)
    inicio = time.process_time()
    altura = arbol.altura()
    tiempo = time.process_time() - inicio
    if tiempo > limite:
        _escribir(sesion, f"ERROR, tiempo excedido; {tiempo:.1f} > {limite} ")
    else:
        _escribir(
            sesion,
            f"La altura del argbol es {altura}. Calculado correctamente en menos de {limite}s.",
        )


def _obtener_existe_persona_abb_tiempo(sesion: Sesion) -> None:
    tamanio = sesion.lector.leer_nat()
    limite = sesion.lector.leer_double()
    arbol = _arbol_balanceado(tamanio)
    cis = (0, tamanio - 1, tamanio // 3, (2 * tamanio) // 3)
    inicio = time.process_time()
    existen = [arbol.existe(ci) for ci in cis]
    personas = [arbol.obtener(ci) for ci in cis]
    tiempo = time.process_time() - inicio
    if any(persona is None for persona in personas):
        raise ValueError("el arbol no contiene las personas buscadas")
    if tiempo > limite:
        _escribir(sesion, f"ERROR, tiempo excedido: {tiempo:.3f} > {limite:.3f} ")
    else:
        marcas = " ".join(str(int(existe)) for existe in existen)
        cedulas = " ".join(str(persona.ci) for persona in personas)
        _escribir(
            sesion,
            f"Se obtuvieron las personas {marcas} con cis respectivas {cedulas}",
            f"Calculado correctamente en menos de {limite:.3f}s.",
        )


def comandos() -> dict[str, Comando]:
    """Commands for dates, dogs, people, the adoption list and the people tree."""
    return {
        "crearFecha": _crear_fecha,
        "imprimirFecha": _imprimir_fecha,
        "liberarFecha": _liberar_fecha,
        "aumentarDias": _aumentar_dias,
        "compararFechas": _comparar_fechas,
        "crearPerro": _crear_perro,
        "liberarPerro": _liberar_perro,
        "imprimirIdPerro": _imprimir_id_perro,
        "imprimirNombrePerro": _imprimir_nombre_perro,
        "imprimirEdadPerro": _imprimir_edad_perro,
        "imprimirDescripcionPerro": _imprimir_descripcion_perro,
        "imprimirFechaIngresoPerro": _imprimir_fecha_ingreso_perro,
        "imprimirVitalidadPerro": _imprimir_vitalidad_perro,
        "imprimirPerro": _imprimir_perro,
        "actualizarEdadPerro": _actualizar_edad_perro,
        "actualizarVitalidadPerro": _actualizar_vitalidad_perro,
        "crearPersona": _crear_persona,
        "imprimirCIPersona": _imprimir_ci_persona,
        "imprimirNombreYApellidoPersona": _imprimir_nombre_y_apellido_persona,
        "imprimirFechaNacimientoPersona": _imprimir_fecha_nacimiento_persona,
        "imprimirPersona": _imprimir_persona,
        "copiarPersona": _copiar_persona,
        "agregarPerroPersona": _agregar_perro_persona,
        "pertenecePerroPersona": _pertenece_perro_persona,
        "cantidadPerrosPersona": _cantidad_perros_persona,
        "liberarPersona": _liberar_persona,
        "crearLSEAdopcionesVacia": _crear_lse_adopciones,
        "insertarLSEAdopciones": _insertar_lse_adopciones,
        "imprimirLSEAdopciones": _imprimir_lse_adopciones,
        "liberarLSEAdopciones": _liberar_lse_adopciones,
        "esVaciaLSEAdopciones": _es_vacia_lse_adopciones,
        "existeAdopcionLSEAdopciones": _existe_adopcion_lse_adopciones,
        "removerAdopcionLSEAdopciones": _remover_adopcion_lse_adopciones,
        "crearABBPersonasVacio": _crear_abb_personas,
        "insertarPersonaABBPersonas": _insertar_persona_abb,
        "imprimirPersonaABB": _imprimir_abb,
        "existePersonaABBPersonas": _existe_persona_abb,
        "obtenerPersonaABBPersonas": _obtener_persona_abb,
        "alturaABBPersonas": _altura_abb,
        "maxCIPersonaABBPersonas": _max_ci_abb,
        "cantidadABBPersonas": _cantidad_abb,
        "obtenerNesimaPersonaABBPersonas": _nesima_persona_abb,
        "removerPersonaABBPersonas": _remover_persona_abb,
        "liberarABBPersonas": _liberar_abb,
        "filtradoPorFechaDeNacimientoABBPersonas": _filtrado_por_fecha_abb,
        "alturaABBPersonasTiempo": _altura_abb_tiempo,
        "obtenerExistePersonaABBPersonasTiempo": _obtener_existe_persona_abb_tiempo,
    }