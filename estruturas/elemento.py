"""Elements stored in the collections: an abstract base and two concrete kinds."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(eq=False)
class Elemento(ABC):
    """Anything that can be stored in a collection, identified by an integer id."""

    id: int

    @abstractmethod
    def info(self) -> str:
        """Return a human-readable description of the element."""

    def _descrever(self, *campos: tuple[str, object]) -> str:
        cabecalho = f"Classe {type(self).__name__}:id: {self.id}"
        return "\n".join([cabecalho, *(f"{rotulo}{valor}" for rotulo, valor in campos)])

    def imprimir_info(self) -> None:
        """Write the description returned by :meth:`info` to standard output."""
        texto = self.info()
        sys.stdout.write(texto if texto.endswith("\n") else f"{texto}\n")


@dataclass(eq=False)
class Pessoa(Elemento):
    """A person with a name and an age."""

    nome: str
    idade: int

    def info(self) -> str:
        return self._descrever(("Nome: ", self.nome), ("Idade: ", self.idade))


@dataclass(eq=False)
class Produto(Elemento):
    """A product with a name, a price and a type."""

    item_nome: str
    preco: int
    tipo: str

    def info(self) -> str:
        return self._descrever(
            ("Nome: ", self.item_nome), ("preco", self.preco), ("Tipo: ", self.tipo)
        )