"""Singly linked list of elements."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .elemento import Elemento

T = TypeVar("T")


@dataclass(eq=False)
class _No(Generic[T]):
    dado: T
    proximo: Optional[_No[T]] = None
    anterior: Optional[_No[T]] = None


class _Encadeada(Generic[T]):
    """Node traversal shared by the linked lists."""

    def __init__(self) -> None:
        self._head: _No[T] | None = None
        self._tamanho = 0

    def _nos(self) -> Iterator[_No[T]]:
        atual = self._head
        while atual is not None:
            yield atual
            atual = atual.proximo

    def _no_pelo_id(self, id_: Any) -> _No[T] | None:
        return next((no for no in self._nos() if no.dado.id == id_), None)


class ListaEncadeada(_Encadeada[Elemento]):
    """An unbounded singly linked list."""

    def inserir_ini(self, item: Elemento) -> None:
        self._head = _No(item, self._head)
        self._tamanho += 1

    def inserir_fim(self, item: Elemento) -> None:
        novo = _No(item)
        ultimo = None
        for ultimo in self._nos():
            pass
        if ultimo is None:
            self._head = novo
        else:
            ultimo.proximo = novo
        self._tamanho += 1

    def remover_ini(self) -> Elemento | None:
        """Remove and return the first element; None if the list is empty."""
        if self._head is None:
            return None
        removido = self._head
        self._head = removido.proximo
        self._tamanho -= 1
        return removido.dado

    def remover_fim(self) -> Elemento | None:
        """Remove and return the last element; None if the list is empty."""
        if self._head is None:
            return None
        if self._head.proximo is None:
            dado = self._head.dado
            self._head = None
        else:
            anterior = self._head
            while anterior.proximo.proximo is not None:
                anterior = anterior.proximo
            dado = anterior.proximo.dado
            anterior.proximo = None
        self._tamanho -= 1
        return dado

    def alterar_id(self, id_: int, item: Elemento) -> None:
        """Replace the first element with the given id."""
        no = self._no_pelo_id(id_)
        if no is None:
            raise KeyError(id_)
        no.dado = item

    def remover_id(self, id_: int) -> Elemento | None:
        """Remove and return the first element with the given id; None if absent."""
        anterior = None
        for atual in self._nos():
            if atual.dado.id == id_:
                if anterior is None:
                    self._head = atual.proximo
                else:
                    anterior.proximo = atual.proximo
                self._tamanho -= 1
                return atual.dado
            anterior = atual
        return None

    def buscar_id(self, id_: int) -> Elemento | None:
        """Return the first element with the given id, or None."""
        no = self._no_pelo_id(id_)
        return None if no is None else no.dado

    def print_dados(self) -> None:
        for elemento in self:
            elemento.imprimir_info()
        print()

    def __len__(self) -> int:
        return self._tamanho

    def __iter__(self) -> Iterator[Elemento]:
        return (no.dado for no in self._nos())