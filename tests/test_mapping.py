import pytest

from tadlab.mapping import Mapping


def test_asociar_y_valor():
    m = Mapping(10)
    m.asociar(3, 1.5)
    assert 3 in m
    assert m.valor(3) == 1.5
    assert len(m) == 1


def test_claves_que_colisionan():
    m = Mapping(10)
    m.asociar(3, 1.0)
    m.asociar(13, 2.0)
    m.asociar(23, 3.0)
    assert m.valor(13) == 2.0
    m.desasociar(13)
    assert 13 not in m
    assert m.valor(3) == 1.0
    assert m.valor(23) == 3.0


def test_no_existe():
    m = Mapping(5)
    assert 7 not in m
    with pytest.raises(KeyError):
        m.valor(7)
    with pytest.raises(KeyError):
        m.desasociar(7)


def test_lleno():
    m = Mapping(2)
    assert not m.esta_lleno()
    m.asociar(1, 1.0)
    m.asociar(2, 2.0)
    assert m.esta_lleno()
    with pytest.raises(ValueError):
        m.asociar(3, 3.0)
    m.desasociar(1)
    assert not m.esta_lleno()


def test_asociar_repetida():
    m = Mapping(5)
    m.asociar(4, 1.0)
    with pytest.raises(ValueError):
        m.asociar(4, 2.0)
    assert m.valor(4) == 1.0


def test_reasociar_tras_desasociar():
    m = Mapping(3)
    m.asociar(8, 0.5)
    m.desasociar(8)
    m.asociar(8, 0.75)
    assert m.valor(8) == 0.75


def test_capacidad_negativa():
    with pytest.raises(ValueError):
        Mapping(-1)