import io

import pytest

from refugio.lectura import MAX_LINEA, Lector


def lector(texto):
    return Lector(io.StringIO(texto))


def test_leer_palabra_salta_blancos():
    entrada = lector("  crearFecha  \n 12")
    assert entrada.leer_palabra() == "crearFecha"
    assert entrada.leer_int() == 12


def test_leer_int_negativo_deja_el_resto():
    entrada = lector("-42abc")
    assert entrada.leer_int() == -42
    assert entrada.leer_palabra() == "abc"


def test_leer_nat():
    assert lector(" 7\n").leer_nat() == 7


def test_leer_nat_negativo_da_la_vuelta():
    assert lector("-1").leer_nat() == 2**32 - 1


def test_fecha_con_barras():
    entrada = lector("12/5/2020")
    assert entrada.leer_nat() == 12
    assert entrada.leer_char() == "/"
    assert entrada.leer_nat() == 5
    assert entrada.leer_char() == "/"
    assert entrada.leer_nat() == 2020


def test_leer_char_y_resto():
    entrada = lector("   T resto")
    assert entrada.leer_char() == "T"
    assert entrada.leer_resto_linea() == " resto"


def test_leer_double():
    entrada = lector(" 0.25 x")
    assert entrada.leer_double() == 0.25
    assert entrada.leer_palabra() == "x"
    assert lector("1e3").leer_double() == 1000.0


def test_resto_linea_no_consume_salto():
    entrada = lector(" hola mundo\nsig")
    assert entrada.leer_resto_linea() == " hola mundo"
    assert entrada.leer_palabra() == "sig"


def test_descartar_linea():
    entrada = lector("resto\nFin\n")
    assert entrada.descartar_linea() == "resto\n"
    assert entrada.leer_palabra() == "Fin"


def test_descartar_linea_limitada():
    entrada = lector("x" * 300 + "\n")
    assert len(entrada.descartar_linea()) == MAX_LINEA


def test_fin_de_entrada():
    with pytest.raises(EOFError):
        lector("   ").leer_palabra()
    with pytest.raises(EOFError):
        lector("").leer_int()
    with pytest.raises(EOFError):
        lector(" \n").leer_char()


def test_no_es_numero():
    with pytest.raises(ValueError):
        lector("abc").leer_int()
    with pytest.raises(ValueError):
        lector(".").leer_double()