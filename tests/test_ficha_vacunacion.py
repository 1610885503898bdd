from refugio.ficha_vacunacion import FichaVacunacion


def ficha_con(*pares):
    ficha = FichaVacunacion()
    for padre, vacuna in pares:
        ficha.insertar(padre, vacuna)
    return ficha


ARBOL = [(-1, 1), (1, 2), (1, 3), (2, 4), (2, 5), (4, 6)]


def test_empty():
    ficha = FichaVacunacion()
    assert len(ficha) == 0
    assert ficha.altura() == 0
    assert str(ficha) == "Ficha Vacunacion:"


def test_str_newest_child_first():
    ficha = ficha_con((-1, 1), (1, 2), (1, 3))
    assert str(ficha) == "Ficha Vacunacion:\n1\n    3\n    2"


def test_insert_ignored_cases():
    ficha = ficha_con((-1, 1))
    ficha.insertar(-1, 9)
    ficha.insertar(42, 9)
    assert len(ficha) == 1
    assert not ficha.existe(9)
    vacia = FichaVacunacion()
    vacia.insertar(1, 2)
    assert len(vacia) == 0


def test_existe_len_altura():
    ficha = ficha_con(*ARBOL)
    assert len(ficha) == len(ARBOL)
    for _, vacuna in ARBOL:
        assert ficha.existe(vacuna)
    assert not ficha.existe(99)
    assert ficha.altura() == 4


def test_altura_chain():
    codigos = list(range(1, 5))
    ficha = FichaVacunacion()
    ficha.insertar(-1, codigos[0])
    for padre, hijo in zip(codigos, codigos[1:]):
        ficha.insertar(padre, hijo)
    assert ficha.altura() == len(codigos)


def test_remover_subtree():
    ficha = ficha_con(*ARBOL)
    ficha.remover(2)
    for codigo in (2, 4, 5, 6):
        assert not ficha.existe(codigo)
    assert ficha.existe(3)
    assert ficha == ficha_con((-1, 1), (1, 3))


def test_remover_root_and_missing():
    ficha = ficha_con(*ARBOL)
    ficha.remover(99)
    assert len(ficha) == len(ARBOL)
    ficha.remover(1)
    assert len(ficha) == 0


def test_equality():
    assert ficha_con(*ARBOL) == ficha_con(*ARBOL)
    assert ficha_con((-1, 1), (1, 2), (1, 3)) != ficha_con((-1, 1), (1, 3), (1, 2))
    assert FichaVacunacion() == FichaVacunacion()
    assert ficha_con((-1, 1)) != FichaVacunacion()
    assert (FichaVacunacion() == "ficha") is False