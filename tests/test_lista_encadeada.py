import pytest

from estruturas.elemento import Pessoa
from estruturas.lista_encadeada import ListaEncadeada


@pytest.fixture
def pessoas():
    return {
        "breno": Pessoa(1, "Breno", 20),
        "joao": Pessoa(2, "Joao", 25),
        "jose": Pessoa(3, "jose", 30),
        "pedro": Pessoa(5, "Pedro", 30),
    }


@pytest.fixture
def lista(pessoas):
    lst = ListaEncadeada()
    lst.inserir_ini(pessoas["breno"])
    lst.inserir_ini(pessoas["joao"])
    lst.inserir_fim(pessoas["pedro"])
    return lst


def test_insertion_order(lista, pessoas):
    assert list(lista) == [pessoas["joao"], pessoas["breno"], pessoas["pedro"]]
    assert len(lista) == 3


def test_inserir_fim_on_empty(pessoas):
    lst = ListaEncadeada()
    lst.inserir_fim(pessoas["jose"])
    assert list(lst) == [pessoas["jose"]]
    assert len(lst) == 1


def test_remover_on_empty_returns_none():
    lst = ListaEncadeada()
    assert lst.remover_ini() is None
    assert lst.remover_fim() is None
    assert len(lst) == 0


def test_remover_ini(lista, pessoas):
    assert lista.remover_ini() is pessoas["joao"]
    assert list(lista) == [pessoas["breno"], pessoas["pedro"]]
    assert len(lista) == 2


def test_remover_fim(lista, pessoas):
    assert lista.remover_fim() is pessoas["pedro"]
    assert lista.remover_fim() is pessoas["breno"]
    assert lista.remover_fim() is pessoas["joao"]
    assert list(lista) == []
    assert len(lista) == 0


def test_remover_id_head_and_middle(lista, pessoas):
    assert lista.remover_id(1) is pessoas["breno"]
    assert lista.remover_id(2) is pessoas["joao"]
    assert list(lista) == [pessoas["pedro"]]
    assert len(lista) == 1


def test_remover_id_tail(lista, pessoas):
    assert lista.remover_id(5) is pessoas["pedro"]
    lista.inserir_fim(pessoas["jose"])
    assert list(lista)[-1] is pessoas["jose"]


def test_remover_id_missing(lista):
    assert lista.remover_id(42) is None
    assert len(lista) == 3
    assert ListaEncadeada().remover_id(1) is None


def test_buscar_id(lista, pessoas):
    assert lista.buscar_id(1) is pessoas["breno"]
    assert lista.buscar_id(5) is pessoas["pedro"]
    assert lista.buscar_id(3) is None


def test_alterar_id(lista, pessoas):
    lista.alterar_id(1, pessoas["jose"])
    assert list(lista) == [pessoas["joao"], pessoas["jose"], pessoas["pedro"]]
    assert len(lista) == 3


def test_alterar_id_missing_raises(lista, pessoas):
    with pytest.raises(KeyError):
        lista.alterar_id(99, pessoas["jose"])
    with pytest.raises(KeyError):
        ListaEncadeada().alterar_id(1, pessoas["jose"])


def test_print_dados(lista, capsys):
    lista.print_dados()
    out = capsys.readouterr().out
    esperado = "".join(e.info() + "\n" for e in lista) + "\n"
    assert out == esperado


def test_print_dados_empty(capsys):
    ListaEncadeada().print_dados()
    assert capsys.readouterr().out == "\n"