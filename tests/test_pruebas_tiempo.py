import io
from unittest import mock

import pytest

from tadlab.binario import Binario
from tadlab.pruebas_tiempo import (
    ins_sub_arbol,
    tiempo_cp,
    tiempo_es_avl,
    tiempo_grafo,
    tiempo_map,
    tiempo_suma_ultimos_positivos,
)


def test_ins_sub_arbol_builds_balanced_search_tree():
    arbol = Binario()
    ins_sub_arbol(8, 8, arbol)
    naturales = [info.natural for info in arbol.linealizacion()]
    assert arbol.raiz.natural == 8
    assert naturales == sorted(naturales)
    assert len(set(naturales)) == arbol.cantidad()
    assert arbol.es_avl()


def test_ins_sub_arbol_reals_match_naturals():
    arbol = Binario()
    ins_sub_arbol(4, 4, arbol)
    assert all(info.real == float(info.natural) for info in arbol.linealizacion())


def test_ins_sub_arbol_single_when_increment_is_one():
    arbol = Binario()
    ins_sub_arbol(5, 1, arbol)
    assert arbol.cantidad() == 1
    assert arbol.raiz.natural == 5


def test_tiempo_grafo_writes_newline():
    out = io.StringIO()
    tiempo_grafo(20, out)
    assert out.getvalue() == "\n"


def test_tiempo_grafo_too_small_fails():
    with pytest.raises(ValueError):
        tiempo_grafo(1, io.StringIO())


def test_tiempo_map_messages():
    out = io.StringIO()
    tiempo_map(50, out)
    assert out.getvalue() == (
        "prueba asociar, desasociar, existeAsociacion. \n"
        "prueba existeAsociacion, valorEnMap. \n"
    )


def test_tiempo_cp_messages():
    out = io.StringIO()
    tiempo_cp(30, out)
    assert out.getvalue() == "\n prueba 1. \n prueba 2. \n prueba 3. \n prueba 4. \n"


def test_tiempo_cp_with_one_element_breaks_precondition():
    with pytest.raises(ValueError):
        tiempo_cp(1, io.StringIO())


def test_tiempo_suma_without_timeout():
    out = io.StringIO()
    tiempo = tiempo_suma_ultimos_positivos(0, 50, 20, 1000, out)
    assert tiempo >= 0
    assert out.getvalue() == (
        "\n Construyendo el árbol. \n"
        " Obteniendo suma ultimos positivos. \n"
        " Liberando binario. \n"
    )


def test_tiempo_suma_reports_timeout():
    out = io.StringIO()
    with mock.patch("time.process_time", side_effect=[0.0, 5.0]):
        tiempo = tiempo_suma_ultimos_positivos(0, 10, 3, 1, out)
    assert tiempo == 5.0
    assert "ERROR, tiempo excedido; 5.0 > 1 \n" in out.getvalue()
    assert out.getvalue().endswith(" Liberando binario. \n")


def test_tiempo_es_avl_without_timeout():
    out = io.StringIO()
    tiempo_es_avl(16, 16, 5, 1000, out)
    assert out.getvalue() == (
        "\n Construyendo el árbol. \n"
        " Evaluando si es AVL. \n"
        " Liberando binario. \n"
    )


def test_tiempo_es_avl_reports_timeout():
    out = io.StringIO()
    with mock.patch("time.process_time", side_effect=[1.0, 4.0]):
        tiempo_es_avl(8, 8, 2, 1, out)
    assert "ERROR, tiempo excedido: 3.0 > 1 \n" in out.getvalue()