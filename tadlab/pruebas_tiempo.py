"""Timing exercises that build large structures and run operations on them."""

from __future__ import annotations

import random
import time
from typing import TextIO

from .binario import Binario
from .cola_de_prioridad import ColaDePrioridad
from .grafo import Grafo
from .info import Info
from .mapping import Mapping

_MODULO = 1_000_000


def ins_sub_arbol(dato: int, inc: int, b: Binario) -> None:
    """Insert ``dato`` into ``b`` and then, halving ``inc``, the subtrees around it.

    Each inserted element has ``dato`` as both its natural and its real.
    """
    b.insertar(Info(dato, float(dato)))
    if inc > 1:
        inc >>= 1
        ins_sub_arbol(dato - inc, inc, b)
        ins_sub_arbol(dato + inc, inc, b)


def tiempo_grafo(tamanio: int, out: TextIO) -> None:
    """Build a star-shaped graph of ``tamanio`` vertices around its middle vertex."""
    grafo = Grafo(tamanio, 2 * tamanio)
    centro = tamanio // 2
    for i in range(1, centro):
        grafo.hacer_vecinos(i, centro, 10)
    for i in range(tamanio, centro, -1):
        grafo.hacer_vecinos(i, centro, 10)
    out.write("\n")


def tiempo_map(tamanio: int, out: TextIO) -> None:
    """Fill a mapping with pseudo-random keys and then look many keys up."""
    aleatorio = random.Random(1)
    mapping = Mapping(tamanio)
    out.write("prueba asociar, desasociar, existeAsociacion. \n")
    for _ in range(1, tamanio):
        clave = aleatorio.randrange(_MODULO)
        if clave in mapping:
            mapping.desasociar(clave)
        mapping.asociar(clave, float(clave))
    out.write("prueba existeAsociacion, valorEnMap. \n")
    for _ in range(_MODULO):
        clave = aleatorio.randrange(_MODULO)
        if clave in mapping:
            mapping.valor(clave)


def tiempo_cp(n: int, out: TextIO) -> None:
    """Run four insertion, removal and membership workloads on priority queues."""
    out.write("\n prueba 1. \n")
    cola = ColaDePrioridad(n)
    for i in range(n, 0, -1):
        cola.insertar(i, float(i))
    for _ in range(n):
        cola.eliminar_prioritario()

    out.write(" prueba 2. \n")
    cola = ColaDePrioridad(n)
    for i in range(1, n + 1):
        cola.insertar(i, float(i))
    for _ in range(n):
        cola.eliminar_prioritario()

    out.write(" prueba 3. \n")
    cola = ColaDePrioridad(n)
    cola.insertar(n, float(n))
    for _ in range(n):
        cola.insertar(1, 1.0)
        cola.eliminar_prioritario()
        cola.prioritario()

    out.write(" prueba 4. \n")
    cola = ColaDePrioridad(n)
    cola.insertar(1, 1.0)
    cola.insertar(n, float(n))
    for _ in range(n):
        _ = 1 in cola
        _ = n // 2 in cola
        _ = n in cola


def tiempo_suma_ultimos_positivos(
    minimo: int, maximo: int, iteraciones: int, limite: int, out: TextIO
) -> float:
    """Time repeated sums over a degenerate tree and return the seconds taken.

    An error line is written when the time exceeds ``limite`` seconds.
    """
    out.write("\n Construyendo el árbol. \n")
    arbol = Binario()
    for i in range(maximo, minimo, -1):
        arbol.insertar(Info(i, float(i)))
    out.write(" Obteniendo suma ultimos positivos. \n")
    inicio = time.process_time()
    for i in range(iteraciones):
        arbol.suma_ultimos_positivos(i)
    tiempo = time.process_time() - inicio
    if tiempo > limite:
        out.write(f"ERROR, tiempo excedido; {tiempo:.1f} > {limite} \n")
    out.write(" Liberando binario. \n")
    return tiempo


def tiempo_es_avl(
    raiz: int, dos_h: int, iteraciones: int, limite: int, out: TextIO
) -> float:
    """Time repeated balance checks over a complete tree and return the seconds taken.

    An error line is written when the time exceeds ``limite`` seconds.
    """
    out.write("\n Construyendo el árbol. \n")
    arbol = Binario()
    ins_sub_arbol(raiz, dos_h, arbol)
    out.write(" Evaluando si es AVL. \n")
    inicio = time.process_time()
    for _ in range(iteraciones):
        arbol.es_avl()
    tiempo = time.process_time() - inicio
    if tiempo > limite:
        out.write(f"ERROR, tiempo excedido: {tiempo:.1f} > {limite} \n")
    out.write(" Liberando binario. \n")
    return tiempo