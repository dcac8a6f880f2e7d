# tadlab

Classic abstract data types in plain Python, with a command interpreter
that drives them from text input. The package has no dependencies beyond
the standard library.

## Data types

- `tadlab.info.Info`: a dataclass that pairs a natural (`natural`) with a
  real (`real`). `texto()` renders it as `(n,r)` with two decimals.
- `tadlab.cadena.Cadena`: a doubly linked list of `Info` values. You reach
  its elements through `Localizador` positions, and `None` stands for an
  invalid position. It supports insertion before a position and at the end,
  removal, segment copy, delete and splice, swaps, and key searches forward
  and backward. Using a position that is not in the chain raises
  `LocalizadorInvalido`.
- `tadlab.iterador.Iterador`: a collection of naturals that you use in two
  phases. You `agregar` elements until the first `reiniciar`, and after that
  you walk it with `actual`, `avanzar` and `esta_definida_actual`, or with
  a plain `for` loop.
- `tadlab.binario.Binario`: a binary search tree of `Info` values, keyed by
  their natural part. It has:
  - `insertar`, `remover`, `mayor` and `remover_mayor`;
  - `es_avl`, `altura` and `cantidad`;
  - `suma_ultimos_positivos`, `linealizacion` (which returns a `Cadena`),
    `menores` and `texto`.
- `tadlab.avl.Avl`: a self-balancing tree of naturals.
  - It supports `insertar`, `buscar`, `len()`, `altura`, `en_orden` and
    `texto_por_niveles`.
  - `arreglo_a_avl(elems)` builds a balanced tree from a strictly increasing
    sequence.
  - `avl_min(h)` builds the smallest AVL tree of height `h`.
- `tadlab.pila.Pila`: a stack of naturals with a size limit. `apilar` does
  nothing when the stack is full, and `desapilar` does nothing when it is
  empty.
- `tadlab.cola_avls.ColaAvls`: a FIFO queue of `Avl` trees.
- `tadlab.conjunto.Conjunto`: an immutable set of naturals, kept sorted.
  - You can build one with `singleton` or `desde_arreglo`.
  - It supports `union`, `diferencia`, `in`, `len()` and `iterador`.
- `tadlab.cola_de_prioridad.ColaDePrioridad`: a min-heap over the elements
  `1..rango`. The element with the smallest value comes first. It has
  `insertar`, `prioritario`, `eliminar_prioritario`, `prioridad` and
  `actualizar`.
- `tadlab.mapping.Mapping`: a map from naturals to reals that holds at most
  `capacidad` entries. It has `asociar`, `desasociar`, `valor`, `in` and
  `esta_lleno`.
- `tadlab.grafo.Grafo`: an undirected weighted graph. Its vertices are
  `1..n`, and it holds at most `m` pairs of neighbours. It has
  `hacer_vecinos`, `son_vecinos`, `distancia` and `vecinos` (which returns
  an `Iterador` in increasing order).
- `tadlab.uso_tads`: algorithms built on the types above:
  - graphs: `accesibles` and `longitudes_caminos_mas_cortos`, a Dijkstra
    search where vertices it cannot reach get `INFINITO`;
  - sets: `interseccion_de_conjuntos`;
  - trees: `nivel_en_binario` and `es_camino`;
  - chains: `pertenece`, `longitud`, `esta_ordenada_por_naturales`,
    `hay_nats_repetidos`, `son_iguales_cadena`, `concatenar`, `ordenar`,
    `cambiar_todos` and `sub_cadena`.
- `tadlab.pruebas_tiempo`: timing exercises that build large structures and
  run operations on them.
- `tadlab.lectura.Lector`: reads the interpreter's input. Values are
  separated by whitespace.

An operation whose precondition does not hold raises an exception. For
example, inserting a key that is already present raises `ValueError`, and
asking an empty tree for its root raises `ArbolVacio`.

## Example

```python
from tadlab.avl import Avl

arbol = Avl()
for n in (5, 3, 8, 1):
    arbol.insertar(n)
print(list(arbol.en_orden()))  # [1, 3, 5, 8]
print(arbol.altura())          # 3
```

## Command interpreter

To read commands from standard input, run:

```
tadlab
```

To read them from a file instead, run:

```
tadlab commands.txt
```

The interpreter starts with one instance of each structure:

- a chain and a locator;
- a binary tree, an AVL tree and a queue of AVL trees;
- a stack of size 10 and an iterator;
- a set, a priority queue of range 10 and a map of capacity 10;
- a graph with 10 vertices and at most 30 pairs of neighbours.

It shows a numbered prompt before each command. Command names follow the
camelCase operation names, for example `insertarEnAvl`, `imprimirBinario`
and `hacerVecinos`.

Some commands take values:

- An `Info` value is written as `(n,r)`.
- A list is written as a count followed by that many values.

A few commands control the session:

- `# text` echoes a comment.
- `reiniciar` recreates every structure.
- `Fin` ends the session, and so does the end of the input.

The interpreter also has timing commands: `tiempo_grafo`, `tiempo_map`,
`tiempo_cp`, `tiempo_sumaUltimosPositivos` and `tiempo_esAvl`.

If it meets an unknown command, it prints `Comando no reconocido.` and goes
on.

## Limitations

When a command breaks a precondition, or the input is malformed, the
interpreter does not recover. It prints `error: ...` on standard error, stops
and exits with status 1.

## Tests

```
pip install -e .[test]
pytest
```