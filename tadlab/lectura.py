"""Whitespace-separated reading of command input."""

from __future__ import annotations

import io
import sys
from itertools import pairwise
from typing import List, Optional, TextIO, Union

from .cadena import Cadena
from .info import Info

_BLANCOS = " \t\n\r\v\f"
_DIGITOS = "0123456789"


class Lector:
    """Reads naturals, reals, characters and words from a text stream.

    Values are separated by whitespace, which is skipped before each value
    except when reading the rest of a line.
    """

    def __init__(self, entrada: Union[TextIO, str], salida: Optional[TextIO] = None) -> None:
        self._fuente = io.StringIO(entrada) if isinstance(entrada, str) else entrada
        self._salida = salida
        self._buffer = ""
        self._pos = 0

    @property
    def salida(self) -> TextIO:
        """Where reading diagnostics are written."""
        return self._salida if self._salida is not None else sys.stdout

    def _ver(self, desplazamiento: int = 0) -> str:
        while self._pos + desplazamiento >= len(self._buffer):
            linea = self._fuente.readline()
            if not linea:
                return ""
            self._buffer = self._buffer[self._pos:] + linea
            self._pos = 0
        return self._buffer[self._pos + desplazamiento]

    def _tomar(self) -> str:
        caracter = self._ver()
        if caracter:
            self._pos += 1
        return caracter

    def _saltar_blancos(self) -> None:
        while True:
            caracter = self._ver()
            if caracter == "":
                raise EOFError("end of input")
            if caracter not in _BLANCOS:
                return
            self._pos += 1

    def _digitos(self) -> str:
        texto = []
        while (caracter := self._ver()) and caracter in _DIGITOS:
            texto.append(self._tomar())
        return "".join(texto)

    def leer_nat(self) -> int:
        """Read a natural number."""
        self._saltar_blancos()
        if self._ver() == "+":
            self._tomar()
        digitos = self._digitos()
        if not digitos:
            raise ValueError(f"expected a natural number, found {self._ver()!r}")
        return int(digitos)

    def leer_char(self) -> str:
        """Read the next character that is not whitespace."""
        self._saltar_blancos()
        return self._tomar()

    def leer_double(self) -> float:
        """Read a real number in decimal notation."""
        self._saltar_blancos()
        texto = ""
        if self._ver() in ("+", "-"):
            texto += self._tomar()
        enteros = self._digitos()
        decimales = ""
        if self._ver() == ".":
            texto_punto = self._tomar()
            decimales = self._digitos()
            texto += enteros + texto_punto + decimales
        else:
            texto += enteros
        if not enteros and not decimales:
            raise ValueError(f"expected a real number, found {self._ver()!r}")
        if self._ver() in ("e", "E"):
            desplazamiento = 1
            if self._ver(1) in ("+", "-"):
                desplazamiento = 2
            siguiente = self._ver(desplazamiento)
            if siguiente and siguiente in _DIGITOS:
                for _ in range(desplazamiento):
                    texto += self._tomar()
                texto += self._digitos()
        return float(texto)

    def leer_palabra(self) -> str:
        """Read a run of characters that are not whitespace."""
        self._saltar_blancos()
        texto = []
        while (caracter := self._ver()) and caracter not in _BLANCOS:
            texto.append(self._tomar())
        return "".join(texto)

    def leer_resto_linea(self) -> str:
        """Read up to, but not including, the end of the current line."""
        texto = []
        while (caracter := self._ver()) and caracter != "\n":
            texto.append(self._tomar())
        return "".join(texto)

    def saltar_linea(self) -> str:
        """Consume the rest of the current line, its newline included, and return it."""
        texto = []
        while caracter := self._tomar():
            texto.append(caracter)
            if caracter == "\n":
                break
        return "".join(texto)

    def _esperar(self, simbolo: str) -> None:
        encontrado = self.leer_char()
        if encontrado != simbolo:
            raise ValueError(f"expected {simbolo!r}, found {encontrado!r}")

    def leer_info(self) -> Info:
        """Read an element written as ``(natural,real)``."""
        self._esperar("(")
        natural = self.leer_nat()
        self._esperar(",")
        real = self.leer_double()
        self._esperar(")")
        return Info(natural, real)

    def leer_cadena(self) -> Cadena:
        """Read a count followed by that many elements."""
        cantidad = self.leer_nat()
        return Cadena(self.leer_info() for _ in range(cantidad))

    def leer_arreglo_ordenado(self) -> List[int]:
        """Read a count followed by that many naturals.

        When they are not strictly increasing a message is written and an
        empty list is returned.
        """
        cantidad = self.leer_nat()
        datos = [self.leer_nat() for _ in range(cantidad)]
        if not all(a < b for a, b in pairwise(datos)):
            self.salida.write("Secuencia no ordenada. \n")
            return []
        return datos