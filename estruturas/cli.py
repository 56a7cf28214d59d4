"""Small demonstration of the linked list with a few people."""

from __future__ import annotations

import argparse

from .elemento import Pessoa
from .lista_encadeada import ListaEncadeada


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="estruturas",
        description="Insere algumas pessoas numa lista encadeada e imprime-as.",
    )
    parser.parse_args(argv)

    print("iniciando")
    lista = ListaEncadeada()

    breno = Pessoa(1, "Breno", 20)
    joao = Pessoa(2, "Joao", 25)
    Pessoa(3, "jose", 30)
    pedro = Pessoa(5, "Pedro", 30)

    print("inserindo")
    lista.inserir_ini(breno)
    lista.inserir_ini(joao)
    lista.inserir_fim(pedro)

    lista.print_dados()

    print("funciona")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())