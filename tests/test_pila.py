import pytest

from tadlab.pila import Pila, PilaVacia


def test_nueva_vacia():
    p = Pila(3)
    assert p.esta_vacia()
    assert not p.esta_llena()
    assert len(p) == 0


def test_lifo():
    p = Pila(5)
    for n in [1, 2, 3]:
        p.apilar(n)
    vistos = []
    while not p.esta_vacia():
        vistos.append(p.cima())
        p.desapilar()
    assert vistos == [3, 2, 1]


def test_llena_ignora_apilar():
    p = Pila(2)
    p.apilar(4)
    p.apilar(6)
    assert p.esta_llena()
    p.apilar(8)
    assert p.cima() == 6
    assert len(p) == 2


def test_desapilar_vacia_no_hace_nada():
    p = Pila(2)
    p.desapilar()
    assert p.esta_vacia()
    p.apilar(1)
    assert p.cima() == 1


def test_cima_vacia_falla():
    with pytest.raises(PilaVacia):
        Pila(1).cima()


@pytest.mark.parametrize("tamanio", [0, -1])
def test_tamanio_invalido(tamanio):
    with pytest.raises(ValueError):
        Pila(tamanio)


def test_deja_de_estar_llena_al_desapilar():
    p = Pila(1)
    p.apilar(9)
    assert p.esta_llena()
    p.desapilar()
    assert not p.esta_llena()
    assert p.esta_vacia()