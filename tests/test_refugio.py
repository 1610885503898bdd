import re

import pytest

from refugio.fecha import Fecha
from refugio.ficha_vacunacion import FichaVacunacion
from refugio.perro import Perro
from refugio.persona import Persona
from refugio.refugio import Refugio


def _perro(id_perro, edad, vitalidad=5, nombre="Firulais"):
    return Perro(id_perro, nombre, edad, vitalidad, "Perro de prueba", Fecha(1, 1, 2000))


def _persona(ci, nombre="Ana"):
    return Persona(ci, nombre, "Perez", Fecha(2, 5, 1960))


def _ids(texto):
    return [int(x) for x in re.findall(r"^Perro (\d+)$", texto, re.M)]


def _refugio_con_perros(n=5, edades=(1, 2, 3)):
    refugio = Refugio(n)
    for i, edad in enumerate(edades, start=1):
        refugio.ingresar_perro(_perro(i, edad))
    return refugio


def test_registrar_persona_guarda_copia():
    refugio = Refugio(5)
    persona = _persona(123)
    refugio.registrar_persona(persona)
    persona.nombre = "Otra"
    texto = refugio.formato_personas()
    assert "Persona Ana Perez" in texto
    assert "Otra" not in texto


def test_formato_perros_por_edad():
    refugio = Refugio(5)
    refugio.ingresar_perro(_perro(1, 3))
    refugio.ingresar_perro(_perro(2, 1))
    refugio.ingresar_perro(_perro(3, 2))
    adelante = _ids(refugio.formato_perros(True))
    atras = _ids(refugio.formato_perros(False))
    assert adelante == [2, 3, 1]
    assert atras == list(reversed(adelante))


def test_cola_paseos_en_orden_de_ingreso():
    refugio = _refugio_con_perros(edades=(3, 1, 2))
    texto = refugio.formato_cola_paseos()
    assert texto.startswith("Cola de Perros:")
    assert _ids(texto) == [1, 2, 3]


def test_pasear_rota_la_cola():
    refugio = _refugio_con_perros(edades=(1, 2))
    paseados = refugio.pasear_perros(3)
    assert [p.id for p in paseados] == [1, 2, 1]
    assert _ids(refugio.formato_cola_paseos()) == [2, 1]


def test_pasear_sin_perros_falla():
    with pytest.raises(IndexError):
        Refugio(3).pasear_perros(1)


def test_adoptar_perro():
    refugio = _refugio_con_perros()
    refugio.registrar_persona(_persona(123))
    refugio.adoptar_perro(2, 123, Fecha(10, 3, 2024))
    assert _ids(refugio.formato_cola_paseos()) == [1, 3]
    adopciones = refugio.formato_adopciones()
    assert "CI: 123" in adopciones
    assert _ids(adopciones) == [2]
    assert _ids(refugio.formato_perros(True)) == [1, 2, 3]


def test_adoptar_persona_desconocida():
    refugio = _refugio_con_perros()
    with pytest.raises(KeyError):
        refugio.adoptar_perro(1, 999, Fecha(1, 1, 2024))


def test_adoptar_perro_desconocido():
    refugio = _refugio_con_perros()
    refugio.registrar_persona(_persona(123))
    with pytest.raises(KeyError):
        refugio.adoptar_perro(9, 123, Fecha(1, 1, 2024))
    assert refugio.formato_adopciones() == ""


def test_esquema_vacunacion():
    refugio = Refugio(3)
    assert refugio.esquema_vacunacion() == "Ficha Vacunacion:"
    refugio.agregar_vacuna(-1, 10)
    refugio.agregar_vacuna(10, 20)
    esperado = FichaVacunacion()
    esperado.insertar(-1, 10)
    esperado.insertar(10, 20)
    assert refugio.esquema_vacunacion() == str(esperado)


def test_vacunar_perro():
    refugio = Refugio(5)
    refugio.ingresar_perro(_perro(1, 2, vitalidad=5))
    refugio.vacunar_perro(1, -1, 10)
    esperado = FichaVacunacion()
    esperado.insertar(-1, 10)
    assert refugio.ficha_vacunacion_perro(1) == esperado
    assert "10" in refugio.esquema_vacunacion()
    assert "Vitalidad: 6" in refugio.formato_perros(True)


def test_vacunar_fuera_de_rango_se_ignora():
    refugio = Refugio(2)
    refugio.vacunar_perro(4, -1, 10)
    assert refugio.esquema_vacunacion() == "Ficha Vacunacion:"
    assert refugio.ficha_vacunacion_perro(4) == FichaVacunacion()


def test_ficha_de_perro_sin_vacunas_es_vacia():
    refugio = _refugio_con_perros()
    assert len(refugio.ficha_vacunacion_perro(1)) == 0


def test_sin_vacunacion_vacia_sin_esquema():
    refugio = _refugio_con_perros()
    assert refugio.perros_sin_vacunacion().esta_vacia()


def test_sin_vacunacion_con_esquema():
    refugio = _refugio_con_perros(n=5, edades=(1, 2, 3))
    refugio.vacunar_perro(1, -1, 10)
    cola = refugio.perros_sin_vacunacion()
    ids = set()
    while not cola.esta_vacia():
        ids.add(cola.prioritario().id)
        cola.eliminar_prioritario()
    assert ids == {2, 3}


def test_sin_vacunacion_excluye_adoptados():
    refugio = _refugio_con_perros(n=5, edades=(1, 2, 3))
    refugio.registrar_persona(_persona(123))
    refugio.adoptar_perro(3, 123, Fecha(1, 1, 2024))
    refugio.agregar_vacuna(-1, 10)
    cola = refugio.perros_sin_vacunacion()
    assert 3 not in cola
    assert 2 in cola
    assert len(cola) == 1