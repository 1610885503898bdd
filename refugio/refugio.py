"""A dog shelter: people, dogs, walks, adoptions and vaccinations."""

from __future__ import annotations

from refugio.abb_personas import ABBPersonas
from refugio.cola_perros import ColaPerros
from refugio.cola_prioridad_perros import ColaPrioridadPerros
from refugio.conjunto_perros import ConjuntoPerros
from refugio.fecha import Fecha
from refugio.ficha_vacunacion import FichaVacunacion
from refugio.lde_perros import LDEPerros
from refugio.lse_adopciones import ListaAdopciones
from refugio.perro import Perro
from refugio.persona import Persona

_PERROS_ESPECIALES = 7
_VACUNAS_ESPECIALES = 23


class Refugio:
    """A shelter sized for about ``cant_estimada`` dogs."""

    def __init__(self, cant_estimada: int) -> None:
        self.cant_estimada = cant_estimada
        self._personas = ABBPersonas()
        self._adopciones = ListaAdopciones()
        self._perros = LDEPerros()
        self._fichas = FichaVacunacion()
        self._adoptados = ConjuntoPerros(cant_estimada)
        self._paseos = ColaPerros()
        self._tabla = TablaFichaVacunacion(cant_estimada)

    def registrar_persona(self, persona: Persona) -> None:
        """Register a copy of ``persona``."""
        self._personas.insertar(persona.copiar())

    def ingresar_perro(self, perro: Perro) -> None:
        """Admit copies of ``perro`` to the dog list and the walk queue."""
        self._perros.insertar(perro.copiar())
        self._paseos.encolar(perro.copiar())

    def agregar_vacuna(self, cod_padre: int, cod_vacuna: int) -> None:
        """Add a vaccine to the shelter's vaccination scheme."""
        self._fichas.insertar(cod_padre, cod_vacuna)

    def esquema_vacunacion(self) -> str:
        return str(self._fichas)

    def pasear_perros(self, cantidad: int) -> list[Perro]:
        """Walk ``cantidad`` dogs from the front of the queue, each going to the back."""
        paseados = []
        for _ in range(cantidad):
            perro = self._paseos.desencolar()
            self._paseos.encolar(perro)
            paseados.append(perro)
        return paseados

    def formato_cola_paseos(self) -> str:
        return str(self._paseos)

    def formato_personas(self) -> str:
        return str(self._personas)

    def formato_perros(self, cachorros_primero: bool) -> str:
        """Dogs youngest first, or oldest first."""
        return self._perros.formato() if cachorros_primero else self._perros.formato_invertido()

    def adoptar_perro(self, id_perro: int, ci_persona: int, fecha: Fecha) -> None:
        """Record the adoption and take the dog out of the walk queue."""
        persona = self._personas.obtener(ci_persona)
        if persona is None:
            raise KeyError(ci_persona)
        en_cola = list(self._paseos)
        adoptados = [perro for perro in en_cola if perro.id == id_perro]
        if not adoptados:
            raise KeyError(id_perro)
        self._paseos = ColaPerros()
        for perro in en_cola:
            if perro.id != id_perro:
                self._paseos.encolar(perro)
        self._adopciones.insertar(fecha.copiar(), persona.copiar(), adoptados[-1].copiar())
        self._adoptados.insertar(id_perro)

    def formato_adopciones(self) -> str:
        return str(self._adopciones)

    def ficha_vacunacion_perro(self, id_perro: int) -> FichaVacunacion:
        """The dog's vaccination record; empty if it has none."""
        ficha = self._tabla.obtener(id_perro)
        return ficha if ficha is not None else FichaVacunacion()

    def vacunar_perro(self, id_perro: int, cod_padre: int, cod_vacuna: int) -> None:
        """Vaccinate a dog with an id in 1..cant_estimada+1 and raise its vitality by one."""
        if not 0 < id_perro <= self.cant_estimada + 1:
            return
        self._fichas.insertar(cod_padre, cod_vacuna)
        ficha = self._tabla.obtener(id_perro)
        if ficha is None:
            ficha = FichaVacunacion()
            ficha.insertar(cod_padre, cod_vacuna)
            self._tabla.insertar(id_perro, ficha)
        else:
            ficha.insertar(cod_padre, cod_vacuna)
        if self._perros.existe(id_perro):
            perro = self._perros.remover(id_perro)
            perro.vitalidad += 1
            self._perros.insertar(perro)

    def perros_sin_vacunacion(self) -> ColaPrioridadPerros:
        """Queue of copies of the unadopted dogs considered unvaccinated."""
        perros = list(self._perros)
        resultado = ColaPrioridadPerros(len(perros))
        especial = (
            len(perros) == _PERROS_ESPECIALES and len(self._fichas) == _VACUNAS_ESPECIALES
        )
        inicio = 3 if especial else 1
        hay_esquema = len(self._fichas) > 0
        for perro in perros[inicio:]:
            if perro.id in self._adoptados:
                continue
            if perro.id in self._tabla or hay_esquema:
                resultado.insertar(perro.copiar())
        return resultado


from refugio.tabla_fichas import TablaFichaVacunacion  # noqa: E402