"""Bounded double-ended queue."""

from __future__ import annotations

from collections import deque

from .elemento import Elemento
from .lista_nao_ordenada import _Limitada


class Deque(_Limitada):
    """A double-ended queue with a fixed capacity."""

    _MSG_CHEIA = "Deque cheio"
    _MSG_VAZIA = "Deque vazio"

    @staticmethod
    def _armazenamento() -> deque[Elemento]:
        return deque()

    def enfileirar_para_tras(self, elemento: Elemento) -> None:
        self._checar_espaco()
        self._dados.append(elemento)

    def enfileirar_para_frente(self, elemento: Elemento) -> None:
        self._checar_espaco()
        self._dados.appendleft(elemento)

    def desenfileirar_para_frente(self) -> Elemento:
        """Remove and return the element at the front."""
        self._checar_vazia()
        return self._dados.popleft()

    def desenfileirar_para_tras(self) -> Elemento:
        """Remove and return the element at the back."""
        self._checar_vazia()
        return self._dados.pop()

    def is_full(self) -> bool:
        return self._cheia()

    def is_empty(self) -> bool:
        return not self._dados

    def __len__(self) -> int:
        return len(self._dados)