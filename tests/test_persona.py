from refugio.fecha import Fecha
from refugio.perro import Perro
from refugio.persona import Persona


def hacer_persona():
    return Persona(123, "Ana", "Perez", Fecha(1, 2, 1990))


def hacer_perro(id_perro=5):
    return Perro(id_perro, "Toby", 2, 40, "Chico", Fecha(3, 3, 2023))


def test_str_sin_perros():
    esperado = "\n".join(
        [
            "Persona Ana Perez",
            "CI: 123",
            "Fecha de Nacimiento: 1/2/1990",
            "Perros adoptados:",
        ]
    )
    assert str(hacer_persona()) == esperado


def test_str_con_perro():
    persona = hacer_persona()
    perro = hacer_perro()
    persona.agregar_perro(perro)
    assert str(persona).endswith("Perros adoptados:\n" + str(perro))


def test_agregar_guarda_copia():
    persona = hacer_persona()
    perro = hacer_perro()
    persona.agregar_perro(perro)
    perro.nombre = "Otro"
    assert persona.perros[0].nombre == "Toby"


def test_tiene_perro_y_cantidad():
    persona = hacer_persona()
    assert persona.cantidad_perros() == 0
    persona.agregar_perro(hacer_perro(5))
    persona.agregar_perro(hacer_perro(8))
    assert persona.tiene_perro(5)
    assert persona.tiene_perro(8)
    assert not persona.tiene_perro(6)
    assert persona.cantidad_perros() == 2


def test_copiar_profunda():
    persona = hacer_persona()
    persona.agregar_perro(hacer_perro())
    copia = persona.copiar()
    assert copia == persona
    copia.nacimiento.aumentar(1)
    copia.perros[0].edad = 9
    copia.agregar_perro(hacer_perro(9))
    assert persona.nacimiento == Fecha(1, 2, 1990)
    assert persona.perros[0].edad == 2
    assert persona.cantidad_perros() == 1