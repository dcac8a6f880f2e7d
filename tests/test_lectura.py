import io

import pytest

from tadlab.info import Info
from tadlab.lectura import Lector


def test_leer_nat_salta_blancos():
    lector = Lector("  12\n   7 ")
    assert lector.leer_nat() == 12
    assert lector.leer_nat() == 7


def test_leer_nat_invalido():
    lector = Lector("abc")
    with pytest.raises(ValueError):
        lector.leer_nat()


def test_leer_nat_fin_de_entrada():
    lector = Lector("   \n")
    with pytest.raises(EOFError):
        lector.leer_nat()


def test_leer_double_formatos():
    lector = Lector("2.5 -1.25 3 .5 1e2")
    assert lector.leer_double() == 2.5
    assert lector.leer_double() == -1.25
    assert lector.leer_double() == 3.0
    assert lector.leer_double() == 0.5
    assert lector.leer_double() == 100.0


def test_leer_double_se_detiene_en_parentesis():
    lector = Lector("4.75)")
    assert lector.leer_double() == 4.75
    assert lector.leer_char() == ")"


def test_leer_double_invalido():
    with pytest.raises(ValueError):
        Lector("x").leer_double()


def test_leer_char_y_palabra():
    lector = Lector("  insertarEnAvl 5\n")
    assert lector.leer_palabra() == "insertarEnAvl"
    assert lector.leer_nat() == 5
    lector2 = Lector("\n  #x")
    assert lector2.leer_char() == "#"
    assert lector2.leer_char() == "x"


def test_resto_de_linea_no_consume_el_fin():
    lector = Lector("# hola mundo\nFin\n")
    assert lector.leer_palabra() == "#"
    assert lector.leer_resto_linea() == " hola mundo"
    assert lector.saltar_linea() == "\n"
    assert lector.leer_palabra() == "Fin"


def test_saltar_linea_descarta_lo_que_queda():
    lector = Lector("cima sobra\nsiguiente\n")
    assert lector.leer_palabra() == "cima"
    assert lector.saltar_linea() == " sobra\n"
    assert lector.leer_palabra() == "siguiente"


def test_leer_info():
    lector = Lector("(4,2.0) ( 9 , -1.2 )")
    assert lector.leer_info() == Info(4, 2.0)
    assert lector.leer_info() == Info(9, -1.2)


def test_leer_info_mal_formada():
    with pytest.raises(ValueError):
        Lector("[4,2.0]").leer_info()


def test_leer_cadena():
    lector = Lector("3 (1,1.5) (2,2.5) (3,3.5) ")
    cadena = lector.leer_cadena()
    assert list(cadena) == [Info(1, 1.5), Info(2, 2.5), Info(3, 3.5)]


def test_leer_cadena_vacia():
    cadena = Lector("0 ").leer_cadena()
    assert cadena.es_vacia()


def test_leer_arreglo_ordenado():
    salida = io.StringIO()
    lector = Lector("4 1 3 8 10", salida)
    assert lector.leer_arreglo_ordenado() == [1, 3, 8, 10]
    assert salida.getvalue() == ""


def test_leer_arreglo_no_ordenado():
    salida = io.StringIO()
    lector = Lector("3 5 2 9 Fin", salida)
    assert lector.leer_arreglo_ordenado() == []
    assert salida.getvalue() == "Secuencia no ordenada. \n"
    assert lector.leer_palabra() == "Fin"


def test_leer_arreglo_con_repetidos():
    salida = io.StringIO()
    lector = Lector("2 4 4", salida)
    assert lector.leer_arreglo_ordenado() == []
    assert "no ordenada" in salida.getvalue()


def test_desde_flujo_de_texto():
    lector = Lector(io.StringIO("apilar 3\n"))
    assert lector.leer_palabra() == "apilar"
    assert lector.leer_nat() == 3