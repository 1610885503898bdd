from refugio.fecha import Fecha
from refugio.perro import Perro


def hacer_perro():
    return Perro(7, "Firulais", 3, 50, "Marron y blanco", Fecha(4, 6, 2022))


def test_str_formato():
    esperado = "\n".join(
        [
            "Perro 7",
            "Nombre: Firulais",
            "Edad: 3",
            "Descripcion: Marron y blanco",
            "Fecha de ingreso: 4/6/2022",
            "Vitalidad: 50",
        ]
    )
    assert str(hacer_perro()) == esperado


def test_copiar_igual_pero_independiente():
    perro = hacer_perro()
    copia = perro.copiar()
    assert copia == perro
    assert copia.fecha_ingreso is not perro.fecha_ingreso
    copia.fecha_ingreso.aumentar(1)
    copia.vitalidad = 10
    assert perro.fecha_ingreso == Fecha(4, 6, 2022)
    assert perro.vitalidad == 50


def test_actualizar_campos():
    perro = hacer_perro()
    perro.edad = 4
    perro.vitalidad = 80
    assert "Edad: 4" in str(perro)
    assert str(perro).endswith("Vitalidad: 80")