"""Command interpreter that exercises every data structure of the package."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, TextIO

from . import pruebas_tiempo
from .avl import Avl, arreglo_a_avl, avl_min
from .binario import Binario
from .cadena import Cadena
from .cola_avls import ColaAvls
from .cola_de_prioridad import ColaDePrioridad
from .conjunto import Conjunto
from .grafo import Grafo
from .iterador import Iterador
from .lectura import Lector
from .mapping import Mapping
from .pila import Pila
from .uso_tads import (
    INFINITO,
    accesibles,
    cambiar_todos,
    concatenar,
    es_camino,
    esta_ordenada_por_naturales,
    hay_nats_repetidos,
    interseccion_de_conjuntos,
    longitud,
    longitudes_caminos_mas_cortos,
    nivel_en_binario,
    ordenar,
    pertenece,
    son_iguales_cadena,
    sub_cadena,
)

MAX_PILA = 10
MAX_CP = 10
MAX_MAP = 10
MAX_N = 10
MAX_M = 30


class ComandoInvalido(ValueError):
    """A command was given arguments that break one of its preconditions."""


def _exigir(condicion: bool, mensaje: str) -> None:
    if not condicion:
        raise ComandoInvalido(mensaje)


_Manejador = Callable[["Interprete", Lector], None]
_COMANDOS: Dict[str, _Manejador] = {}


def _comando(nombre: str) -> Callable[[_Manejador], _Manejador]:
    def registrar(funcion: _Manejador) -> _Manejador:
        _COMANDOS[nombre] = funcion
        return funcion

    return registrar


def _lista(elems) -> str:
    return "".join(f"{elem} " for elem in elems) + "\n"


class Interprete:
    """Reads commands and applies them to one instance of each structure."""

    def __init__(self, salida: Optional[TextIO] = None) -> None:
        self._salida = salida
        self.reiniciar()

    @property
    def salida(self) -> TextIO:
        """Where command results are written."""
        return self._salida if self._salida is not None else sys.stdout

    def _escribir(self, texto: str) -> None:
        self.salida.write(texto)

    def reiniciar(self) -> None:
        """Replace every structure with a fresh empty one."""
        self._cad = Cadena()
        self._loc = self._cad.inicio()
        self._b = Binario()
        self._p = Pila(MAX_PILA)
        self._avl = Avl()
        self._cavl = ColaAvls()
        self._it = Iterador()
        self._conj = Conjunto()
        self._cp = ColaDePrioridad(MAX_CP)
        self._map = Mapping(MAX_MAP)
        self._g = Grafo(MAX_N, MAX_M)

    def ejecutar(self, lector: Lector) -> None:
        """Run commands from ``lector`` until ``Fin`` or the end of the input."""
        contador = 0
        while True:
            contador += 1
            self._escribir(f"{contador}>")
            try:
                nombre = lector.leer_palabra()
            except EOFError:
                return
            if nombre == "Fin":
                self._escribir("Fin.\n")
                lector.saltar_linea()
                return
            manejador = _COMANDOS.get(nombre)
            if manejador is None:
                self._escribir("Comando no reconocido.\n")
            else:
                manejador(self, lector)
            lector.saltar_linea()

    def _leer_conjunto(self, lector: Lector) -> Conjunto:
        elems = lector.leer_arreglo_ordenado()
        return Conjunto.desde_arreglo(elems) if elems else Conjunto()

    # comment

    @_comando("#")
    def _comentario(self, lector: Lector) -> None:
        self._escribir(f"# {lector.leer_resto_linea()}.\n")

    # graph

    @_comando("cantidadVertices")
    def _cantidad_vertices(self, lector: Lector) -> None:
        self._escribir(f"{self._g.cantidad_vertices()}.\n")

    @_comando("hayMParejas")
    def _hay_m_parejas(self, lector: Lector) -> None:
        self._escribir("Hay M parejas.\n" if self._g.hay_m_parejas() else "NO hay M parejas.\n")

    @_comando("hacerVecinos")
    def _hacer_vecinos(self, lector: Lector) -> None:
        v1, v2 = lector.leer_nat(), lector.leer_nat()
        d = lector.leer_double()
        self._g.hacer_vecinos(v1, v2, d)
        self._escribir(f"Nuevos vecinos: {v1} {v2} {d:4.2f}.\n")

    @_comando("sonVecinos")
    def _son_vecinos(self, lector: Lector) -> None:
        v1, v2 = lector.leer_nat(), lector.leer_nat()
        self._escribir("Son vecinos.\n" if self._g.son_vecinos(v1, v2) else "NO son vecinos.\n")

    @_comando("distancia")
    def _distancia(self, lector: Lector) -> None:
        v1, v2 = lector.leer_nat(), lector.leer_nat()
        self._escribir(f"{self._g.distancia(v1, v2):.2f}\n")

    @_comando("vecinos")
    def _vecinos(self, lector: Lector) -> None:
        self._escribir(_lista(self._g.vecinos(lector.leer_nat())))

    # stack

    @_comando("apilar")
    def _apilar(self, lector: Lector) -> None:
        if self._p.esta_llena():
            self._escribir("p está llena.\n")
        else:
            self._p.apilar(lector.leer_nat())
            self._escribir("Apilado.\n")

    @_comando("cima")
    def _cima(self, lector: Lector) -> None:
        self._escribir(f"{self._p.cima()}.\n")

    @_comando("desapilar")
    def _desapilar(self, lector: Lector) -> None:
        if self._p.esta_vacia():
            self._escribir("p está vacía.\n")
        else:
            self._p.desapilar()
            self._escribir("Desapilado.\n")

    @_comando("estaVaciaPila")
    def _esta_vacia_pila(self, lector: Lector) -> None:
        self._escribir("p está vacia.\n" if self._p.esta_vacia() else "p NO está vacia.\n")

    @_comando("estaLlenaPila")
    def _esta_llena_pila(self, lector: Lector) -> None:
        self._escribir("p está llena.\n" if self._p.esta_llena() else "p NO está llena.\n")

    # queue of AVL trees

    @_comando("encolar")
    def _encolar(self, lector: Lector) -> None:
        nuevo = Avl()
        elem = lector.leer_nat()
        while elem != 0:
            nuevo.insertar(elem)
            elem = lector.leer_nat()
        self._cavl.encolar(nuevo)
        self._escribir("Encolado.\n")

    @_comando("frente")
    def _frente(self, lector: Lector) -> None:
        avl = self._cavl.frente()
        self._escribir("Avl vacío.\n" if avl.es_vacio() else f"{avl.raiz}\n")

    @_comando("desencolar")
    def _desencolar(self, lector: Lector) -> None:
        if self._cavl.esta_vacia():
            self._escribir("cb está vacía.\n")
        else:
            self._cavl.desencolar()
            self._escribir("Desencolado.\n")

    @_comando("estaVaciaColaAvls")
    def _esta_vacia_cola_avls(self, lector: Lector) -> None:
        vacia = self._cavl.esta_vacia()
        self._escribir("cavl está vacia.\n" if vacia else "cavl NO está vacia.\n")

    # AVL tree

    @_comando("estaVacioAvl")
    def _esta_vacio_avl(self, lector: Lector) -> None:
        self._escribir("Vacio.\n" if self._avl.es_vacio() else "No vacío.\n")

    @_comando("insertarEnAvl")
    def _insertar_en_avl(self, lector: Lector) -> None:
        self._avl.insertar(lector.leer_nat())
        self._escribir("Insertado.\n")

    @_comando("buscarEnAvl")
    def _buscar_en_avl(self, lector: Lector) -> None:
        sub = self._avl.buscar(lector.leer_nat())
        if sub.es_vacio():
            self._escribir("sub es vacío.\n")
            return
        izq, der = sub.izquierdo, sub.derecho
        texto_izq = " | " if izq.es_vacio() else f"{izq.raiz}"
        texto_der = " | " if der.es_vacio() else f"{der.raiz}"
        self._escribir(f"{sub.raiz}\n{texto_izq} - {texto_der}\n")

    @_comando("raizAvl")
    def _raiz_avl(self, lector: Lector) -> None:
        self._escribir(f"{self._avl.raiz}\n")

    @_comando("izqAvl")
    def _izq_avl(self, lector: Lector) -> None:
        izq = self._avl.izquierdo
        self._escribir("Izquierdo es vacío\n" if izq.es_vacio() else f"{izq.raiz}\n")

    @_comando("derAvl")
    def _der_avl(self, lector: Lector) -> None:
        der = self._avl.derecho
        self._escribir("Derecho es vacío\n" if der.es_vacio() else f"{der.raiz}\n")

    @_comando("cantidadEnAvl")
    def _cantidad_en_avl(self, lector: Lector) -> None:
        self._escribir(f"Cantidad en avl: {len(self._avl)}.\n")

    @_comando("alturaDeAvl")
    def _altura_de_avl(self, lector: Lector) -> None:
        self._escribir(f"Altura de avl: {self._avl.altura()}.\n")

    @_comando("enOrdenAvl")
    def _en_orden_avl(self, lector: Lector) -> None:
        elems = list(self._avl.en_orden())
        self._escribir(_lista(elems) if elems else "No hay elementos en el avl.\n")

    @_comando("arregloAAvl")
    def _arreglo_a_avl(self, lector: Lector) -> None:
        elems = lector.leer_arreglo_ordenado()
        self._avl = arreglo_a_avl(elems) if elems else Avl()
        self._escribir("\n")

    @_comando("avlMin")
    def _avl_min(self, lector: Lector) -> None:
        minimo = avl_min(lector.leer_nat())
        self._escribir("\n" + minimo.texto_por_niveles() + f"Cantidad: {len(minimo)}.\n")

    @_comando("imprimirAvl")
    def _imprimir_avl(self, lector: Lector) -> None:
        self._escribir("\n" + self._avl.texto_por_niveles())

    # set

    @_comando("estaVacioConjunto")
    def _esta_vacio_conjunto(self, lector: Lector) -> None:
        self._escribir("Vacio.\n" if self._conj.esta_vacio() else "No vacío.\n")

    @_comando("cardinalidad")
    def _cardinalidad(self, lector: Lector) -> None:
        self._escribir(f"{len(self._conj)}.\n")

    @_comando("perteneceAConjunto")
    def _pertenece_a_conjunto(self, lector: Lector) -> None:
        esta = lector.leer_nat() in self._conj
        self._escribir("Pertenece.\n" if esta else "No pertenece.\n")

    @_comando("singleton")
    def _singleton(self, lector: Lector) -> None:
        self._conj = Conjunto.singleton(lector.leer_nat())
        self._escribir("Creado el singleton.\n")

    @_comando("arregloAConjunto")
    def _arreglo_a_conjunto(self, lector: Lector) -> None:
        self._conj = self._leer_conjunto(lector)
        self._escribir(f"Arreglo a conjunto con {len(self._conj)} elementos.\n")

    @_comando("unionDeConjuntos")
    def _union_de_conjuntos(self, lector: Lector) -> None:
        self._conj = self._conj.union(self._leer_conjunto(lector))
        self._escribir("Union.\n")

    @_comando("diferenciaDeConjuntos")
    def _diferencia_de_conjuntos(self, lector: Lector) -> None:
        self._conj = self._conj.diferencia(self._leer_conjunto(lector))
        self._escribir("Diferencia.\n")

    @_comando("iteradorDeConjunto")
    def _iterador_de_conjunto(self, lector: Lector) -> None:
        elems = list(self._conj.iterador())
        self._escribir(_lista(elems) if elems else "No hay elementos en el conjunto.\n")

    # mapping

    @_comando("asociarEnMap")
    def _asociar_en_map(self, lector: Lector) -> None:
        _exigir(not self._map.esta_lleno(), "the mapping is full")
        clave = lector.leer_nat()
        valor = lector.leer_double()
        self._map.asociar(clave, valor)
        self._escribir("Establecida la asociación.\n")

    @_comando("desasociarEnMap")
    def _desasociar_en_map(self, lector: Lector) -> None:
        self._map.desasociar(lector.leer_nat())
        self._escribir("Eliminada la asociación.\n")

    @_comando("existeAsociacionEnMap")
    def _existe_asociacion_en_map(self, lector: Lector) -> None:
        existe = lector.leer_nat() in self._map
        self._escribir("Existe asociacion.\n" if existe else "No existe asociacion.\n")

    @_comando("valorEnMap")
    def _valor_en_map(self, lector: Lector) -> None:
        self._escribir(f"{self._map.valor(lector.leer_nat()):.2f}\n")

    @_comando("estaLlenoMap")
    def _esta_lleno_map(self, lector: Lector) -> None:
        self._escribir("LLeno.\n" if self._map.esta_lleno() else "No lleno.\n")

    # priority queue

    @_comando("insertarEnCP")
    def _insertar_en_cp(self, lector: Lector) -> None:
        elem = lector.leer_nat()
        valor = lector.leer_double()
        self._cp.insertar(elem, valor)
        self._escribir("Se insertó el elemento.\n")

    @_comando("actualizarEnCP")
    def _actualizar_en_cp(self, lector: Lector) -> None:
        elem = lector.leer_nat()
        valor = lector.leer_double()
        self._cp.actualizar(elem, valor)
        self._escribir("Se actualizó el valor.\n")

    @_comando("eliminarPrioritario")
    def _eliminar_prioritario(self, lector: Lector) -> None:
        self._cp.eliminar_prioritario()
        self._escribir("Eliminado.\n")

    @_comando("prioritario")
    def _prioritario(self, lector: Lector) -> None:
        self._escribir(f"{self._cp.prioritario()}\n")

    @_comando("estaVaciaCP")
    def _esta_vacia_cp(self, lector: Lector) -> None:
        self._escribir("Vacia.\n" if self._cp.esta_vacia() else "No vacía.\n")

    @_comando("rangoCP")
    def _rango_cp(self, lector: Lector) -> None:
        self._escribir(f"{self._cp.rango}.\n")

    @_comando("estaEnCP")
    def _esta_en_cp(self, lector: Lector) -> None:
        self._escribir("Está.\n" if lector.leer_nat() in self._cp else "No está.\n")

    @_comando("prioridad")
    def _prioridad(self, lector: Lector) -> None:
        self._escribir(f"{self._cp.prioridad(lector.leer_nat()):.2f}.\n")

    # iterator

    @_comando("agregarAIterador")
    def _agregar_a_iterador(self, lector: Lector) -> None:
        self._it.agregar(lector.leer_nat())
        self._escribir("Agregando.\n")

    @_comando("reiniciarIterador")
    def _reiniciar_iterador(self, lector: Lector) -> None:
        self._it.reiniciar()
        self._escribir("Reiniciado.\n")

    @_comando("avanzarIterador")
    def _avanzar_iterador(self, lector: Lector) -> None:
        self._it.avanzar()
        self._escribir("Avanzando.\n")

    @_comando("actualEnIterador")
    def _actual_en_iterador(self, lector: Lector) -> None:
        self._escribir(f"{self._it.actual()}\n")

    @_comando("estaDefinidaActual")
    def _esta_definida_actual(self, lector: Lector) -> None:
        estado = "está" if self._it.esta_definida_actual() else "NO está"
        self._escribir(f"Actual de it {estado} definida.\n")

    # binary search tree

    @_comando("insertarEnBinario")
    def _insertar_en_binario(self, lector: Lector) -> None:
        self._b.insertar(lector.leer_info())
        self._escribir("Insertado.\n")

    @_comando("mayor")
    def _mayor(self, lector: Lector) -> None:
        self._escribir(self._b.mayor().texto() + "\n")

    @_comando("removerMayor")
    def _remover_mayor(self, lector: Lector) -> None:
        self._b.remover_mayor()
        self._escribir("Removido el mayor.\n")

    @_comando("removerDeBinario")
    def _remover_de_binario(self, lector: Lector) -> None:
        self._b.remover(lector.leer_nat())
        self._escribir("Removido.\n")

    @_comando("esVacioBinario")
    def _es_vacio_binario(self, lector: Lector) -> None:
        self._escribir("Vacio.\n" if self._b.es_vacio() else "No vacío.\n")

    @_comando("esAvl")
    def _es_avl(self, lector: Lector) -> None:
        self._escribir("AVL.\n" if self._b.es_avl() else "No AVL.\n")

    @_comando("raiz")
    def _raiz(self, lector: Lector) -> None:
        self._escribir(self._b.raiz.texto() + "\n")

    @_comando("izquierdo")
    def _izquierdo(self, lector: Lector) -> None:
        izq = self._b.izquierdo
        self._escribir("izquierdo de b es vacío.\n" if izq.es_vacio() else izq.raiz.texto() + "\n")

    @_comando("derecho")
    def _derecho(self, lector: Lector) -> None:
        der = self._b.derecho
        self._escribir("derecho de b es vacío.\n" if der.es_vacio() else der.raiz.texto() + "\n")

    @_comando("buscarSubarbol")
    def _buscar_subarbol(self, lector: Lector) -> None:
        sub = self._b.buscar_subarbol(lector.leer_nat())
        self._escribir("sub es vacío.\n" if sub.es_vacio() else sub.raiz.texto() + "\n")

    @_comando("alturaBinario")
    def _altura_binario(self, lector: Lector) -> None:
        self._escribir(f"{self._b.altura()}.\n")

    @_comando("cantidadBinario")
    def _cantidad_binario(self, lector: Lector) -> None:
        self._escribir(f"{self._b.cantidad()}.\n")

    @_comando("sumaUltimosPositivos")
    def _suma_ultimos_positivos(self, lector: Lector) -> None:
        self._escribir(f"{self._b.suma_ultimos_positivos(lector.leer_nat()):4.2f}\n")

    @_comando("linealizacion")
    def _linealizacion(self, lector: Lector) -> None:
        self._escribir(self._b.linealizacion().texto() + "\n")

    @_comando("menores")
    def _menores(self, lector: Lector) -> None:
        self._escribir(self._b.menores(lector.leer_nat()).texto())

    @_comando("imprimirBinario")
    def _imprimir_binario(self, lector: Lector) -> None:
        self._escribir(self._b.texto())

    # chain

    @_comando("esLocalizador")
    def _es_localizador(self, lector: Lector) -> None:
        self._escribir("loc válido.\n" if self._loc is not None else "loc no válido.\n")

    @_comando("esVaciaCadena")
    def _es_vacia_cadena(self, lector: Lector) -> None:
        self._escribir("cad vacia.\n" if self._cad.es_vacia() else "cad no vacia.\n")

    @_comando("inicioCadena")
    def _inicio_cadena(self, lector: Lector) -> None:
        self._loc = self._cad.inicio()
        self._escribir("loc al inicio.\n")

    @_comando("finalCadena")
    def _final_cadena(self, lector: Lector) -> None:
        self._loc = self._cad.final()
        self._escribir("loc al final.\n")

    @_comando("infoCadena")
    def _info_cadena(self, lector: Lector) -> None:
        self._escribir(self._cad.info(self._loc).texto() + "\n")

    @_comando("esFinalCadena")
    def _es_final_cadena(self, lector: Lector) -> None:
        es = self._cad.es_final(self._loc)
        self._escribir("loc es final de cad.\n" if es else "loc no es final de cad.\n")

    @_comando("esInicioCadena")
    def _es_inicio_cadena(self, lector: Lector) -> None:
        es = self._cad.es_inicio(self._loc)
        self._escribir("loc es incio de cad.\n" if es else "loc no es incio de cad.\n")

    @_comando("siguiente")
    def _siguiente(self, lector: Lector) -> None:
        self._loc = self._cad.siguiente(self._loc)
        self._escribir("loc al siguiente.\n")

    @_comando("anterior")
    def _anterior(self, lector: Lector) -> None:
        self._loc = self._cad.anterior(self._loc)
        self._escribir("loc al anterior.\n")

    @_comando("insertarAlFinal")
    def _insertar_al_final(self, lector: Lector) -> None:
        self._cad.insertar_al_final(lector.leer_info())
        self._escribir("Insertado al final.\n")

    @_comando("insertarAntes")
    def _insertar_antes(self, lector: Lector) -> None:
        _exigir(self._cad.contiene(self._loc), "loc is not in the chain")
        self._cad.insertar_antes(lector.leer_info(), self._loc)
        self._escribir("Insertado antes de loc.\n")

    @_comando("removerDeCadena")
    def _remover_de_cadena(self, lector: Lector) -> None:
        self._cad.remover(self._loc)
        self._escribir("Removido.\n")

    @_comando("imprimirCadena")
    def _imprimir_cadena(self, lector: Lector) -> None:
        self._escribir(self._cad.texto() + "\n")

    @_comando("kesimo")
    def _kesimo(self, lector: Lector) -> None:
        k = lector.leer_nat()
        self._loc = self._cad.kesimo(k)
        if self._loc is not None:
            self._escribir(f"loc en la posición {k}.\n")
        else:
            self._escribir("loc quedó no válido.\n")

    @_comando("localizadorEnCadena")
    def _localizador_en_cadena(self, lector: Lector) -> None:
        esta = self._cad.contiene(self._loc)
        self._escribir("loc pertenece a cad.\n" if esta else "loc no pertenece a cad.\n")

    @_comando("precedeEnCadena")
    def _precede_en_cadena(self, lector: Lector) -> None:
        loc1 = self._cad.kesimo(lector.leer_nat())
        precede = self._cad.precede(loc1, self._loc)
        self._escribir("loc1 precede a loc.\n" if precede else "loc1 no precede a loc.\n")

    @_comando("insertarSegmentoDespues")
    def _insertar_segmento_despues(self, lector: Lector) -> None:
        _exigir(
            self._cad.es_vacia() or self._cad.contiene(self._loc), "loc is not in the chain"
        )
        self._cad.insertar_segmento_despues(lector.leer_cadena(), self._loc)
        self._escribir("Segmento insertado después de loc.\n")

    def _leer_segmento(self, lector: Lector):
        k1, k2 = lector.leer_nat(), lector.leer_nat()
        _exigir(1 <= k1 <= k2, "positions must satisfy 1 <= k1 <= k2")
        return self._cad.kesimo(k1), self._cad.kesimo(k2)

    @_comando("copiarSegmento")
    def _copiar_segmento(self, lector: Lector) -> None:
        desde, hasta = self._leer_segmento(lector)
        self._escribir(self._cad.copiar_segmento(desde, hasta).texto() + "\n")

    @_comando("borrarSegmento")
    def _borrar_segmento(self, lector: Lector) -> None:
        desde, hasta = self._leer_segmento(lector)
        self._cad.borrar_segmento(desde, hasta)
        self._escribir("Segmento borrado.\n")

    @_comando("cambiarEnCadena")
    def _cambiar_en_cadena(self, lector: Lector) -> None:
        _exigir(self._cad.contiene(self._loc), "loc is not in the chain")
        self._cad.cambiar(lector.leer_info(), self._loc)
        self._escribir("Cambio.\n")

    @_comando("intercambiar")
    def _intercambiar(self, lector: Lector) -> None:
        k1, k2 = lector.leer_nat(), lector.leer_nat()
        _exigir(k1 >= 1 and k2 >= 1, "positions start at 1")
        self._cad.intercambiar(self._cad.kesimo(k1), self._cad.kesimo(k2))
        self._escribir("Intercambio.\n")

    @_comando("siguienteClave")
    def _siguiente_clave(self, lector: Lector) -> None:
        clave = lector.leer_nat()
        self._loc = self._cad.siguiente_clave(clave, self._loc)
        if self._loc is not None:
            self._escribir(f"loc avanzó buscando {clave}.\n")
        else:
            self._escribir("loc quedó no válido.\n")

    @_comando("anteriorClave")
    def _anterior_clave(self, lector: Lector) -> None:
        clave = lector.leer_nat()
        self._loc = self._cad.anterior_clave(clave, self._loc)
        if self._loc is not None:
            self._escribir(f"loc retrocedió buscando {clave}.\n")
        else:
            self._escribir("loc quedó no válido.\n")

    @_comando("menorEnCadena")
    def _menor_en_cadena(self, lector: Lector) -> None:
        self._loc = self._cad.menor(self._loc)
        self._escribir(f"El menor es {self._cad.info(self._loc).natural}.\n")

    # algorithms over the structures

    @_comando("accesibles")
    def _accesibles(self, lector: Lector) -> None:
        alcanzados = accesibles(lector.leer_nat(), self._g)
        self._escribir(_lista(1 if alcanzado else 0 for alcanzado in alcanzados[1:]))

    @_comando("longitudesCaminosMasCortos")
    def _longitudes(self, lector: Lector) -> None:
        longitudes = longitudes_caminos_mas_cortos(lector.leer_nat(), self._g)
        partes: List[str] = [
            "INF" if valor == INFINITO else f"{valor:.2f}" for valor in longitudes[1:]
        ]
        self._escribir(_lista(partes))

    @_comando("interseccionDeConjuntos")
    def _interseccion(self, lector: Lector) -> None:
        self._conj = interseccion_de_conjuntos(self._conj, self._leer_conjunto(lector))
        self._escribir("Intersección.\n")

    @_comando("esCamino")
    def _es_camino(self, lector: Lector) -> None:
        camino = lector.leer_cadena()
        self._escribir("Es camino.\n" if es_camino(camino, self._b) else "NO es camino.\n")

    @_comando("nivelEnBinario")
    def _nivel_en_binario(self, lector: Lector) -> None:
        nivel = lector.leer_nat()
        if nivel == 0:
            self._escribir("l = 0.\n")
        else:
            self._escribir(nivel_en_binario(nivel, self._b).texto() + "\n")

    @_comando("pertenece")
    def _pertenece(self, lector: Lector) -> None:
        elem = lector.leer_nat()
        if pertenece(elem, self._cad):
            self._escribir(f"{elem} pertenece a cad.\n")
        else:
            self._escribir(f"{elem} no pertenece a cad.\n")

    @_comando("longitud")
    def _longitud(self, lector: Lector) -> None:
        self._escribir(f"Longitud: {longitud(self._cad)}\n")

    @_comando("estaOrdenadaPorNaturales")
    def _esta_ordenada(self, lector: Lector) -> None:
        ordenada = esta_ordenada_por_naturales(self._cad)
        self._escribir("cad ordenada.\n" if ordenada else "cad no ordenada.\n")

    @_comando("hayNatsRepetidos")
    def _hay_nats_repetidos(self, lector: Lector) -> None:
        if hay_nats_repetidos(self._cad):
            self._escribir("En cad hay naturales repetidos.\n")
        else:
            self._escribir("En cad no hay naturales repetidos.\n")

    @_comando("sonIgualesCadena")
    def _son_iguales(self, lector: Lector) -> None:
        otra = lector.leer_cadena()
        iguales = son_iguales_cadena(self._cad, otra)
        self._escribir("Son iguales.\n" if iguales else "No son iguales.\n")

    @_comando("concatenar")
    def _concatenar(self, lector: Lector) -> None:
        otra = lector.leer_cadena()
        self._escribir(concatenar(self._cad, otra).texto() + "\n")

    @_comando("ordenar")
    def _ordenar(self, lector: Lector) -> None:
        ordenar(self._cad)
        self._escribir("Quedó ordenada.\n")

    @_comando("cambiarTodos")
    def _cambiar_todos(self, lector: Lector) -> None:
        original, nuevo = lector.leer_nat(), lector.leer_nat()
        cambiar_todos(original, nuevo, self._cad)
        self._escribir("Cambiados.\n")

    @_comando("subCadena")
    def _sub_cadena(self, lector: Lector) -> None:
        _exigir(esta_ordenada_por_naturales(self._cad), "the chain is not ordered")
        menor, mayor = lector.leer_nat(), lector.leer_nat()
        self._escribir(sub_cadena(menor, mayor, self._cad).texto() + "\n")

    # timing exercises

    @_comando("tiempo_grafo")
    def _tiempo_grafo(self, lector: Lector) -> None:
        pruebas_tiempo.tiempo_grafo(lector.leer_nat(), self.salida)

    @_comando("tiempo_map")
    def _tiempo_map(self, lector: Lector) -> None:
        pruebas_tiempo.tiempo_map(lector.leer_nat(), self.salida)

    @_comando("tiempo_cp")
    def _tiempo_cp(self, lector: Lector) -> None:
        pruebas_tiempo.tiempo_cp(lector.leer_nat(), self.salida)

    @_comando("tiempo_sumaUltimosPositivos")
    def _tiempo_suma(self, lector: Lector) -> None:
        valores = [lector.leer_nat() for _ in range(4)]
        pruebas_tiempo.tiempo_suma_ultimos_positivos(*valores, self.salida)

    @_comando("tiempo_esAvl")
    def _tiempo_es_avl(self, lector: Lector) -> None:
        valores = [lector.leer_nat() for _ in range(4)]
        pruebas_tiempo.tiempo_es_avl(*valores, self.salida)

    @_comando("reiniciar")
    def _reiniciar(self, lector: Lector) -> None:
        self.reiniciar()
        self._escribir("Estructuras reiniciadas.\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the interpreter on a command file, or on standard input."""
    parser = argparse.ArgumentParser(
        prog="tadlab", description="Run commands over the package's data structures."
    )
    parser.add_argument(
        "entrada", nargs="?", help="file with commands; standard input when omitted"
    )
    args = parser.parse_args(argv)
    salida = sys.stdout
    interprete = Interprete(salida)
    try:
        if args.entrada is None:
            interprete.ejecutar(Lector(sys.stdin, salida))
        else:
            with open(args.entrada, encoding="utf-8") as fuente:
                interprete.ejecutar(Lector(fuente, salida))
    except (ValueError, LookupError, EOFError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())