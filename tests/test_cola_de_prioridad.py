import random

import pytest

from tadlab.cola_de_prioridad import ColaDePrioridad, ColaDePrioridadVacia


def vaciar(cp):
    orden = []
    while not cp.esta_vacia():
        orden.append(cp.prioridad(cp.prioritario()))
        cp.eliminar_prioritario()
    return orden


def test_nueva_esta_vacia():
    cp = ColaDePrioridad(10)
    assert cp.esta_vacia()
    assert cp.rango == 10
    assert len(cp) == 0


def test_prioritario_es_el_de_menor_valor():
    cp = ColaDePrioridad(10)
    cp.insertar(3, 5.0)
    cp.insertar(7, 1.5)
    cp.insertar(1, 9.0)
    assert cp.prioritario() == 7
    assert not cp.esta_vacia()


def test_eliminar_devuelve_en_orden():
    cp = ColaDePrioridad(10)
    for elem, valor in [(4, 4.0), (2, 2.0), (9, 9.0), (1, 1.0), (5, 5.0)]:
        cp.insertar(elem, valor)
    extraidos = [cp.eliminar_prioritario() for _ in range(5)]
    assert extraidos == [1, 2, 4, 5, 9]
    assert cp.esta_vacia()


def test_orden_con_valores_aleatorios():
    rng = random.Random(7)
    cp = ColaDePrioridad(200)
    valores = {elem: rng.uniform(-100, 100) for elem in range(1, 201)}
    for elem in rng.sample(list(valores), 200):
        cp.insertar(elem, valores[elem])
    extraidos = vaciar(cp)
    assert extraidos == sorted(valores.values())


def test_pertenencia_y_prioridad():
    cp = ColaDePrioridad(5)
    cp.insertar(2, 3.25)
    assert 2 in cp
    assert 3 not in cp
    assert 99 not in cp
    assert cp.prioridad(2) == 3.25
    cp.eliminar_prioritario()
    assert 2 not in cp


def test_actualizar_sube_y_baja():
    cp = ColaDePrioridad(10)
    for elem in range(1, 8):
        cp.insertar(elem, float(elem))
    cp.actualizar(6, 0.5)
    assert cp.prioritario() == 6
    assert cp.prioridad(6) == 0.5
    cp.actualizar(6, 100.0)
    assert cp.prioritario() == 1
    extraidos = [cp.eliminar_prioritario() for _ in range(7)]
    assert extraidos == [1, 2, 3, 4, 5, 7, 6]


def test_reinsertar_tras_eliminar():
    cp = ColaDePrioridad(4)
    cp.insertar(4, 4.0)
    cp.insertar(1, 1.0)
    cp.eliminar_prioritario()
    cp.insertar(1, 1.0)
    assert cp.prioritario() == 1
    assert len(cp) == 2


def test_insertar_fuera_de_rango():
    cp = ColaDePrioridad(3)
    with pytest.raises(ValueError):
        cp.insertar(0, 1.0)
    with pytest.raises(ValueError):
        cp.insertar(4, 1.0)


def test_insertar_repetido():
    cp = ColaDePrioridad(3)
    cp.insertar(2, 1.0)
    with pytest.raises(ValueError):
        cp.insertar(2, 5.0)


def test_operaciones_sobre_vacia():
    cp = ColaDePrioridad(3)
    with pytest.raises(ColaDePrioridadVacia):
        cp.prioritario()
    with pytest.raises(ColaDePrioridadVacia):
        cp.eliminar_prioritario()


def test_elemento_ausente():
    cp = ColaDePrioridad(3)
    with pytest.raises(KeyError):
        cp.prioridad(1)
    with pytest.raises(KeyError):
        cp.actualizar(1, 2.0)


def test_rango_negativo():
    with pytest.raises(ValueError):
        ColaDePrioridad(-1)