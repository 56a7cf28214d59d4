"""Bounded list that keeps elements in insertion order."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Iterator

from .elemento import Elemento


class _Limitada:
    """Storage and checks shared by collections with a fixed capacity."""

    _MSG_CHEIA = "a lista esta cheia"
    _MSG_VAZIA = "Lista vazia, não é possível remover!"

    def __init__(self, tamanho: int) -> None:
        if tamanho < 0:
            raise ValueError("a capacidade nao pode ser negativa")
        self.capacidade = tamanho
        self._dados: MutableSequence[Elemento] = self._armazenamento()

    @staticmethod
    def _armazenamento() -> MutableSequence[Elemento]:
        return []

    def _cheia(self) -> bool:
        return len(self._dados) == self.capacidade

    def _checar_espaco(self) -> None:
        if self._cheia():
            raise IndexError(self._MSG_CHEIA)

    def _checar_vazia(self) -> None:
        if not self._dados:
            raise IndexError(self._MSG_VAZIA)

    def _indice_id(self, id_: int) -> int:
        indices = [i for i, e in enumerate(self._dados) if e.id == id_]
        if not indices:
            raise KeyError(id_)
        return indices[-1]

    def _remover_ini(self) -> Elemento:
        self._checar_vazia()
        return self._dados.pop(0)

    def _remover_ultimo(self) -> Elemento:
        self._checar_vazia()
        return self._dados.pop()

    def _remover_id(self, id_: int) -> Elemento:
        return self._dados.pop(self._indice_id(id_))

    def _alterar(self, id_: int, item: Elemento) -> None:
        self._dados[self._indice_id(id_)] = item

    def _imprimir(self) -> None:
        if not self._dados:
            print("Lista vazia!")
            return
        print("=== Dados da Lista ===")
        for posicao, elemento in enumerate(self._dados, start=1):
            print(f"Elemento {posicao}:")
            elemento.imprimir_info()
            print("---")


class ListaNaoOrdenada(_Limitada):
    """A list with a fixed capacity; elements keep the order they were inserted in."""

    def is_full(self) -> bool:
        return self._cheia()

    def is_empty(self) -> bool:
        return not self._dados

    def inserir_ini(self, item: Elemento) -> None:
        """Insert an element at the front."""
        self._checar_espaco()
        self._dados.insert(0, item)

    def inserir_fim(self, item: Elemento) -> None:
        """Insert an element at the end."""
        self._checar_espaco()
        self._dados.append(item)

    def remover_ini(self) -> Elemento:
        """Remove and return the first element."""
        return self._remover_ini()

    def remover_ultimo(self) -> Elemento:
        """Remove and return the last element."""
        return self._remover_ultimo()

    def buscar_id(self, id_: int) -> Elemento | None:
        """Return the first element with the given id, or None."""
        return next((e for e in self._dados if e.id == id_), None)

    def remover_id(self, id_: int) -> Elemento:
        """Remove and return the last element with the given id."""
        return self._remover_id(id_)

    def alterar(self, id_: int, item: Elemento) -> None:
        """Replace, in place, the last element with the given id."""
        self._alterar(id_, item)

    def print_dados(self) -> None:
        self._imprimir()

    def __len__(self) -> int:
        return len(self._dados)

    def __iter__(self) -> Iterator[Elemento]:
        return iter(self._dados)

    def __getitem__(self, index):
        return self._dados[index]