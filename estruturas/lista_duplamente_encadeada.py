"""Doubly linked list of values identified by an ``id`` attribute."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TypeVar

from .lista_encadeada import _Encadeada, _No

T = TypeVar("T")


class ListaDuplamenteEncadeada(_Encadeada[T]):
    """An unbounded doubly linked list with access to both ends."""

    def __init__(self) -> None:
        super().__init__()
        self._tail: _No[T] | None = None

    def _no_existente(self, id_: Any) -> _No[T]:
        no = self._no_pelo_id(id_)
        if no is None:
            raise KeyError(id_)
        return no

    def _desligar(self, no: _No[T]) -> T:
        if no.anterior is not None:
            no.anterior.proximo = no.proximo
        else:
            self._head = no.proximo
        if no.proximo is not None:
            no.proximo.anterior = no.anterior
        else:
            self._tail = no.anterior
        self._tamanho -= 1
        return no.dado

    @staticmethod
    def _ponta(no: _No[T] | None, mensagem: str) -> _No[T]:
        if no is None:
            raise IndexError(mensagem)
        return no

    def inserir_no_inicio(self, elemento: T) -> None:
        novo = _No(elemento, proximo=self._head)
        if self._head is not None:
            self._head.anterior = novo
        else:
            self._tail = novo
        self._head = novo
        self._tamanho += 1

    def inserir_no_final(self, elemento: T) -> None:
        novo = _No(elemento, anterior=self._tail)
        if self._tail is not None:
            self._tail.proximo = novo
        else:
            self._head = novo
        self._tail = novo
        self._tamanho += 1

    def remover_primeiro(self) -> T:
        return self._desligar(self._ponta(self._head, "A lista está vazia"))

    def remover_ultimo(self) -> T:
        return self._desligar(self._ponta(self._tail, "A lista está vazia"))

    def remover_pelo_id(self, id_: Any) -> T:
        """Remove and return the first value whose id matches."""
        self._ponta(self._head, "Lista vazia")
        return self._desligar(self._no_existente(id_))

    def buscar_pelo_id(self, id_: Any) -> T:
        """Return the first value whose id matches."""
        return self._no_existente(id_).dado

    def alterar_pelo_id(self, id_: Any, novo_elemento: T) -> None:
        """Replace the first value whose id matches."""
        self._no_existente(id_).dado = novo_elemento

    def esta_vazia(self) -> bool:
        return self._tamanho == 0

    def primeiro(self) -> T:
        return self._ponta(self._head, "Lista vazia").dado

    def ultimo(self) -> T:
        return self._ponta(self._tail, "Lista vazia").dado

    def imprimir_lista(self) -> None:
        """Write the values from head to tail, each followed by an arrow."""
        partes = [f"{dado} -> " for dado in self]
        partes.append("null\n")
        sys.stdout.write("".join(partes))

    def __len__(self) -> int:
        return self._tamanho

    def __iter__(self) -> Iterator[T]:
        return (no.dado for no in self._nos())

    def __reversed__(self) -> Iterator[T]:
        atual = self._tail
        while atual is not None:
            yield atual.dado
            atual = atual.anterior