import pytest

from tadlab.iterador import Iterador, PosicionIndefinida


def test_recorrida_en_orden_de_agregado():
    it = Iterador()
    for elem in [7, 2, 9]:
        it.agregar(elem)
    it.reiniciar()
    vistos = []
    while it.esta_definida_actual():
        vistos.append(it.actual())
        it.avanzar()
    assert vistos == [7, 2, 9]


def test_no_se_agrega_despues_de_reiniciar():
    it = Iterador([1, 2])
    it.reiniciar()
    it.agregar(3)
    assert list(it) == [1, 2]


def test_reiniciar_vacio_bloquea_y_queda_indefinida():
    it = Iterador()
    it.reiniciar()
    it.agregar(5)
    assert not it.esta_definida_actual()
    assert list(it) == []


def test_actual_indefinida_sin_reiniciar():
    it = Iterador([4])
    assert not it.esta_definida_actual()
    with pytest.raises(PosicionIndefinida):
        it.actual()


def test_avanzar_mas_alla_del_final():
    it = Iterador([4, 6])
    it.reiniciar()
    it.avanzar()
    assert it.actual() == 6
    it.avanzar()
    assert not it.esta_definida_actual()
    it.avanzar()
    assert not it.esta_definida_actual()
    with pytest.raises(PosicionIndefinida):
        it.actual()


def test_se_puede_recorrer_varias_veces():
    it = Iterador([3, 1, 2])
    primera = list(it)
    segunda = list(it)
    assert primera == segunda == [3, 1, 2]
    assert not it.esta_definida_actual()


def test_reiniciar_vuelve_al_primero():
    it = Iterador([8, 9])
    it.reiniciar()
    it.avanzar()
    it.reiniciar()
    assert it.actual() == 8