import pytest

from tadlab.grafo import Grafo


def test_cantidad_vertices():
    assert Grafo(10, 30).cantidad_vertices() == 10


def test_hacer_vecinos_es_simetrico():
    g = Grafo(5, 5)
    g.hacer_vecinos(1, 2, 2.5)
    assert g.son_vecinos(1, 2)
    assert g.son_vecinos(2, 1)
    assert g.distancia(1, 2) == 2.5
    assert g.distancia(2, 1) == 2.5
    assert not g.son_vecinos(1, 3)


def test_vecinos_en_orden_creciente():
    g = Grafo(6, 10)
    g.hacer_vecinos(1, 5, 1.0)
    g.hacer_vecinos(1, 3, 1.0)
    g.hacer_vecinos(4, 1, 1.0)
    assert list(g.vecinos(1)) == [3, 4, 5]
    assert list(g.vecinos(4)) == [1]
    assert list(g.vecinos(2)) == []


def test_vecinos_devuelve_iterador_reiniciado():
    g = Grafo(3, 3)
    g.hacer_vecinos(1, 2, 1.0)
    it = g.vecinos(1)
    assert it.esta_definida_actual()
    assert it.actual() == 2


def test_hay_m_parejas():
    g = Grafo(4, 2)
    assert not g.hay_m_parejas()
    g.hacer_vecinos(1, 2, 1.0)
    g.hacer_vecinos(3, 4, 1.0)
    assert g.hay_m_parejas()
    with pytest.raises(ValueError):
        g.hacer_vecinos(1, 3, 1.0)


@pytest.mark.parametrize(
    "v1, v2, d",
    [(1, 1, 1.0), (0, 2, 1.0), (1, 5, 1.0), (1, 2, -1.0)],
)
def test_hacer_vecinos_invalidos(v1, v2, d):
    g = Grafo(4, 10)
    with pytest.raises(ValueError):
        g.hacer_vecinos(v1, v2, d)


def test_hacer_vecinos_repetidos():
    g = Grafo(4, 10)
    g.hacer_vecinos(1, 2, 1.0)
    with pytest.raises(ValueError):
        g.hacer_vecinos(2, 1, 3.0)
    assert g.distancia(1, 2) == 1.0


def test_distancia_de_no_vecinos():
    g = Grafo(3, 3)
    with pytest.raises(KeyError):
        g.distancia(1, 2)


def test_vertice_fuera_de_rango():
    g = Grafo(3, 3)
    with pytest.raises(ValueError):
        g.son_vecinos(1, 4)
    with pytest.raises(ValueError):
        g.vecinos(0)