import pytest

from tadlab.avl import Avl, arreglo_a_avl
from tadlab.cola_avls import ColaAvls, ColaVacia


def test_fifo():
    cola = ColaAvls()
    a = arreglo_a_avl([1, 2, 3])
    b = arreglo_a_avl([10])
    c = Avl()
    for avl in (a, b, c):
        cola.encolar(avl)
    assert len(cola) == 3
    assert cola.frente() is a
    cola.desencolar()
    assert cola.frente() is b
    cola.desencolar()
    assert cola.frente() is c
    assert cola.frente().es_vacio()
    cola.desencolar()
    assert cola.esta_vacia()


def test_vacia():
    cola = ColaAvls()
    assert cola.esta_vacia()
    cola.desencolar()
    assert len(cola) == 0
    with pytest.raises(ColaVacia):
        cola.frente()


def test_desencolar_no_altera_arbol():
    cola = ColaAvls()
    avl = arreglo_a_avl([4, 5, 6])
    cola.encolar(avl)
    cola.desencolar()
    assert list(avl) == [4, 5, 6]
    assert cola.esta_vacia()


def test_reencolar_tras_vaciar():
    cola = ColaAvls()
    primero = arreglo_a_avl([7])
    cola.encolar(primero)
    cola.desencolar()
    segundo = arreglo_a_avl([8])
    cola.encolar(segundo)
    assert cola.frente() is segundo
    assert not cola.esta_vacia()