import pytest

from refugio.pila import Pila


def pila_con(*elems):
    pila = Pila()
    for elem in elems:
        pila.apilar(elem)
    return pila


def test_orden_lifo():
    pila = pila_con(1, 2, 3)
    assert pila.cima() == 3
    assert pila.desapilar() == 3
    assert pila.cima() == 2
    assert len(pila) == 2


def test_str_de_fondo_a_cima():
    assert str(pila_con(1, 2, 3)) == "Pila: 1 2 3"


def test_str_vacia():
    assert str(Pila()) == "Pila:"


def test_vacia_lanza():
    pila = Pila()
    assert len(pila) == 0
    with pytest.raises(IndexError):
        pila.cima()
    with pytest.raises(IndexError):
        pila.desapilar()


def test_apilar_y_desapilar_vuelve_a_vacia():
    pila = pila_con(4, 5)
    pila.desapilar()
    pila.desapilar()
    assert len(pila) == 0