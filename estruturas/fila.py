"""Bounded queues: one over a list, one over two stacks."""

from __future__ import annotations

from .elemento import Elemento
from .lista_nao_ordenada import ListaNaoOrdenada
from .pilha import Pilha


class Fila:
    """A first-in, first-out queue with a fixed capacity."""

    def __init__(self, capacidade_maxima: int) -> None:
        self._lista = ListaNaoOrdenada(capacidade_maxima)

    def enfileirar(self, elemento: Elemento) -> None:
        if self.fila_cheia():
            raise IndexError("Fila cheia")
        self._lista.inserir_fim(elemento)

    def desenfileirar(self) -> Elemento:
        if self.fila_vazia():
            raise IndexError("Fila vazia. Nao foi possivel desenfileirar.")
        return self._lista.remover_ini()

    def consultar_primeiro(self) -> Elemento:
        if self.fila_vazia():
            raise IndexError("Fila vazia. Não tem primeiro elemento para consultar.")
        return self._lista[0]

    def fila_cheia(self) -> bool:
        return self._lista.is_full()

    def fila_vazia(self) -> bool:
        return self._lista.is_empty()

    def __len__(self) -> int:
        return len(self._lista)


class FilaOtimizada:
    """A queue kept as an input stack and an output stack."""

    def __init__(self, capacidade_total: int) -> None:
        self._entrada = Pilha(capacidade_total)
        self._saida = Pilha(capacidade_total)
        self.capacidade = capacidade_total

    def _transferir(self) -> None:
        while not self._entrada.pilha_vazia() and not self._saida.pilha_cheia():
            self._saida.empilhar(self._entrada.desempilhar())

    def enfileirar(self, elemento: Elemento) -> None:
        if self.fila_cheia():
            raise IndexError("Fila otimizada cheia!")
        self._entrada.empilhar(elemento)

    def desenfileirar(self) -> Elemento:
        if self.fila_vazia():
            raise IndexError("Fila otimizada vazia!")
        if self._saida.pilha_vazia():
            self._transferir()
        return self._saida.desempilhar()

    def consultar_primeiro(self) -> Elemento:
        if self.fila_vazia():
            raise IndexError("Fila otimizada vazia!")
        if self._saida.pilha_vazia():
            self._transferir()
        return self._saida.consultar_topo()

    def fila_cheia(self) -> bool:
        return len(self) >= self.capacidade

    def fila_vazia(self) -> bool:
        return self._entrada.pilha_vazia() and self._saida.pilha_vazia()

    def __len__(self) -> int:
        return len(self._entrada) + len(self._saida)