# estruturas

Classic data structures built around records that carry an integer `id`.

## Records (`estruturas.elemento`)

- `Elemento`: abstract base with an `id`. Subclasses implement `info()`,
  which returns a text description; `imprimir_info()` writes that description
  to standard output.
- `Pessoa(id, nome, idade)`: a person.
- `Produto(id, item_nome, preco, tipo)`: a product.

## Structures

| Module | Class | What it is |
| --- | --- | --- |
| `estruturas.lista_nao_ordenada` | `ListaNaoOrdenada` | fixed-capacity list in insertion order |
| `estruturas.lista_ordenada` | `ListaOrdenada` | fixed-capacity list kept sorted by id, binary search in `buscar_id` |
| `estruturas.lista_encadeada` | `ListaEncadeada` | singly linked list |
| `estruturas.lista_duplamente_encadeada` | `ListaDuplamenteEncadeada` | doubly linked list of any values with an `id` attribute |
| `estruturas.pilha` | `Pilha` | bounded stack |
| `estruturas.fila` | `Fila`, `FilaOtimizada` | bounded queue, and a bounded queue kept as two stacks |
| `estruturas.deque` | `Deque` | bounded double-ended queue |
| `estruturas.arvore_binaria` | `ArvoreBinaria` | unbalanced binary search tree without duplicates |

Every structure supports `len()`. The four lists and the tree can be
iterated; `ListaDuplamenteEncadeada` also supports `reversed()`, the tree
yields its values in ascending order and supports `in`, and
`ListaNaoOrdenada` supports indexing.

## Errors

- Adding to a full bounded structure, or removing from or peeking into an
  empty one, raises `IndexError`.
- `remover_id` and `alterar` on the array lists, the `*_pelo_id` methods of
  `ListaDuplamenteEncadeada`, `ListaEncadeada.alterar_id`, and
  `ArvoreBinaria.remover_valor` / `buscar_valor` raise `KeyError` when nothing
  matches.
- `buscar_id` on `ListaNaoOrdenada`, `ListaOrdenada` and `ListaEncadeada`
  returns `None` when nothing matches; `ListaEncadeada.remover_ini`,
  `remover_fim` and `remover_id` return `None` when there is nothing to remove.

## Example

```python
from estruturas.elemento import Pessoa
from estruturas.lista_encadeada import ListaEncadeada

lista = ListaEncadeada()
lista.inserir_ini(Pessoa(1, "Breno", 20))
lista.inserir_ini(Pessoa(2, "Joao", 25))
lista.inserir_fim(Pessoa(5, "Pedro", 30))
lista.print_dados()
```

```python
from estruturas.arvore_binaria import ArvoreBinaria

arvore = ArvoreBinaria()
for valor in (8, 3, 10, 1, 6):
    arvore.inserir_valor(valor)
list(arvore)        # [1, 3, 6, 8, 10]
arvore.altura()     # 3
```

## Installation

```
pip install .
```

## Command line

The `estruturas` command fills a linked list with a few people and prints
them:

```
estruturas
```

## Tests

```
pip install ".[test]"
pytest
```