"""Bounded stack built on top of :class:`ListaNaoOrdenada`."""

from __future__ import annotations

from .elemento import Elemento
from .lista_nao_ordenada import ListaNaoOrdenada


class Pilha:
    """A last-in, first-out stack with a fixed capacity."""

    def __init__(self, capacidade_maxima: int) -> None:
        self._lista = ListaNaoOrdenada(capacidade_maxima)

    def empilhar(self, elemento: Elemento) -> None:
        """Push an element on top of the stack."""
        if self.pilha_cheia():
            raise IndexError(
                f"Pilha cheia! Nao foi possivel empilhar o elemento (ID: {elemento.id})."
            )
        self._lista.inserir_fim(elemento)

    def desempilhar(self) -> Elemento:
        """Remove and return the element on top of the stack."""
        if self.pilha_vazia():
            raise IndexError("Pilha vazia nao foi possivel desempilhar.")
        return self._lista.remover_ultimo()

    def consultar_topo(self) -> Elemento:
        """Return the element on top of the stack without removing it."""
        if self.pilha_vazia():
            raise IndexError("Pilha vazia! Nao ha topo para consultar.")
        return self._lista[-1]

    def pilha_cheia(self) -> bool:
        return self._lista.is_full()

    def pilha_vazia(self) -> bool:
        return self._lista.is_empty()

    def __len__(self) -> int:
        return len(self._lista)