"""Bounded list that keeps elements sorted by id."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator

from .elemento import Elemento
from .lista_nao_ordenada import _Limitada


def _chave(elemento: Elemento) -> int:
    return elemento.id


class ListaOrdenada(_Limitada):
    """A list with a fixed capacity whose elements stay ordered by id."""

    _MSG_CHEIA = "Lista cheia"

    def is_full(self) -> bool:
        return self._cheia()

    def is_empty(self) -> bool:
        return not self._dados

    def inserir(self, item: Elemento) -> None:
        """Insert keeping the order; equal ids go after the existing ones."""
        self._checar_espaco()
        insort(self._dados, item, key=_chave)

    def remover_ini(self) -> Elemento:
        """Remove and return the first element."""
        return self._remover_ini()

    def remover_ultimo(self) -> Elemento:
        """Remove and return the last element."""
        return self._remover_ultimo()

    def buscar_id(self, id_: int) -> Elemento | None:
        """Binary search for an element with the given id; None if absent."""
        pos = bisect_left(self._dados, id_, key=_chave)
        if pos < len(self._dados) and self._dados[pos].id == id_:
            return self._dados[pos]
        return None

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