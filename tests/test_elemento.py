import pytest

from estruturas.elemento import Elemento, Pessoa, Produto


def test_elemento_is_abstract():
    with pytest.raises(TypeError):
        Elemento(1)


def test_pessoa_fields():
    p = Pessoa(1, "Breno", 20)
    assert (p.id, p.nome, p.idade) == (1, "Breno", 20)


def test_pessoa_info_format():
    p = Pessoa(1, "Breno", 20)
    assert p.info() == "Classe Pessoa:id: 1\nNome: Breno\nIdade: 20"


def test_pessoa_info_contains_fields():
    p = Pessoa(3, "jose", 30)
    lines = p.info().splitlines()
    assert lines[0].startswith("Classe Pessoa:")
    assert "Nome: jose" in lines
    assert "Idade: 30" in lines


def test_imprimir_info_prints_info(capsys):
    p = Pessoa(2, "Joao", 25)
    p.imprimir_info()
    assert capsys.readouterr().out == p.info() + "\n"


def test_produto_fields():
    prod = Produto(7, "Caneta", 3, "papelaria")
    assert (prod.id, prod.item_nome, prod.preco, prod.tipo) == (7, "Caneta", 3, "papelaria")


def test_produto_info_format():
    prod = Produto(7, "Caneta", 3, "papelaria")
    assert prod.info() == "Classe Produto:id: 7\nNome: Caneta\npreco3\nTipo: papelaria"


def test_produto_imprimir_info(capsys):
    prod = Produto(4, "Lapis", 2, "escolar")
    prod.imprimir_info()
    out = capsys.readouterr().out
    assert out.startswith("Classe Produto:")
    assert "Tipo: escolar" in out


def test_identity_equality():
    a = Pessoa(1, "Ana", 10)
    b = Pessoa(1, "Ana", 10)
    assert (a == b) is False
    assert a == a