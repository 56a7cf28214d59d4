"""Binary search tree without duplicate values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _No:
    dado: Any
    esquerda: Optional["_No"] = None
    direita: Optional["_No"] = None


class ArvoreBinaria:
    """An unbalanced binary search tree; inserting an existing value does nothing."""

    def __init__(self) -> None:
        self._raiz: _No | None = None
        self._tamanho = 0

    def _localizar(self, elemento: Any) -> tuple[_No | None, _No | None]:
        """Return (parent, node) for the value; node is None if absent."""
        pai, no = None, self._raiz
        while no is not None:
            if elemento < no.dado:
                pai, no = no, no.esquerda
            elif no.dado < elemento:
                pai, no = no, no.direita
            else:
                break
        return pai, no

    def inserir_valor(self, elemento: Any) -> None:
        if self._raiz is None:
            self._raiz = _No(elemento)
            self._tamanho += 1
            return
        no = self._raiz
        while True:
            if elemento < no.dado:
                if no.esquerda is None:
                    no.esquerda = _No(elemento)
                    break
                no = no.esquerda
            elif no.dado < elemento:
                if no.direita is None:
                    no.direita = _No(elemento)
                    break
                no = no.direita
            else:
                return
        self._tamanho += 1

    def remover_valor(self, elemento: Any) -> None:
        """Remove a value; a node with two children takes its in-order predecessor."""
        pai, no = self._localizar(elemento)
        if no is None:
            raise KeyError("Elemento não encontrado")
        if no.esquerda is not None and no.direita is not None:
            pai_sub, sub = no, no.esquerda
            while sub.direita is not None:
                pai_sub, sub = sub, sub.direita
            no.dado = sub.dado
            pai, no = pai_sub, sub
        filho = no.esquerda if no.esquerda is not None else no.direita
        if pai is None:
            self._raiz = filho
        elif pai.esquerda is no:
            pai.esquerda = filho
        else:
            pai.direita = filho
        self._tamanho -= 1

    def buscar_valor(self, elemento: Any) -> Any:
        """Return the stored value equal to the given one."""
        _, no = self._localizar(elemento)
        if no is None:
            raise KeyError("Elemento não encontrado")
        return no.dado

    def altura(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        altura = 0
        nivel = [self._raiz] if self._raiz is not None else []
        while nivel:
            altura += 1
            nivel = [
                filho
                for no in nivel
                for filho in (no.esquerda, no.direita)
                if filho is not None
            ]
        return altura

    def __contains__(self, elemento: Any) -> bool:
        return self._localizar(elemento)[1] is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        pilha: list[_No] = []
        no = self._raiz
        while pilha or no is not None:
            while no is not None:
                pilha.append(no)
                no = no.esquerda
            no = pilha.pop()
            yield no.dado
            no = no.direita

    def __len__(self) -> int:
        return self._tamanho