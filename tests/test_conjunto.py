import pytest

from tadlab.conjunto import Conjunto


def test_vacio():
    c = Conjunto()
    assert c.esta_vacio()
    assert len(c) == 0
    assert 1 not in c
    assert not c.iterador().esta_definida_actual()


def test_singleton():
    c = Conjunto.singleton(7)
    assert len(c) == 1
    assert 7 in c
    assert 6 not in c
    assert list(c) == [7]


def test_desde_arreglo_y_pertenencia():
    elems = [1, 4, 9, 16, 25]
    c = Conjunto.desde_arreglo(elems)
    assert len(c) == 5
    assert list(c) == elems
    for e in elems:
        assert e in c
    for e in (0, 2, 10, 26):
        assert e not in c


def test_desde_arreglo_errores():
    with pytest.raises(ValueError):
        Conjunto.desde_arreglo([])
    with pytest.raises(ValueError):
        Conjunto.desde_arreglo([1, 1])
    with pytest.raises(ValueError):
        Conjunto.desde_arreglo([3, 2])


def test_union_ejemplo():
    a = Conjunto.desde_arreglo([1, 3, 5])
    b = Conjunto.desde_arreglo([2, 3, 6])
    assert list(a.union(b)) == [1, 2, 3, 5, 6]


def test_diferencia_ejemplo():
    a = Conjunto.desde_arreglo([1, 3, 5, 7])
    b = Conjunto.desde_arreglo([3, 4, 7])
    assert list(a.diferencia(b)) == [1, 5]


@pytest.mark.parametrize(
    "xs, ys",
    [
        ([], []),
        ([1, 2, 3], []),
        ([], [4, 5]),
        ([1, 5, 9, 12], [2, 5, 10, 12, 20]),
        ([10, 20], [1, 2, 3]),
    ],
)
def test_union_y_diferencia_propiedades(xs, ys):
    a = Conjunto(xs)
    b = Conjunto(ys)
    u = a.union(b)
    d = a.diferencia(b)
    assert set(u) == set(xs) | set(ys)
    assert set(d) == set(xs) - set(ys)
    assert list(u) == sorted(u)
    assert list(d) == sorted(d)
    assert a.union(b) == b.union(a)
    assert a.diferencia(a).esta_vacio()


def test_operaciones_no_modifican_operandos():
    a = Conjunto.desde_arreglo([1, 2])
    b = Conjunto.desde_arreglo([2, 3])
    a.union(b)
    a.diferencia(b)
    assert list(a) == [1, 2]
    assert list(b) == [2, 3]


def test_iterador_en_orden():
    c = Conjunto([8, 3, 5, 3])
    it = c.iterador()
    vistos = []
    while it.esta_definida_actual():
        vistos.append(it.actual())
        it.avanzar()
    assert vistos == [3, 5, 8]