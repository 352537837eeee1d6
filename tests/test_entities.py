import math

import pytest

from app.api.catalogo.entities.produto import Categoria, Produto
from app.api.pedidos.entities.cpf import Cpf
from app.api.pedidos.entities.pedido import Pedido, Status, TERMINAIS, ordenar_fila_cozinha
from app.core.exceptions import EmptyError, InvalidError
from app.core.timestamps import agora, assert_timestamp_format
from tests.factories import TS, make_produto


# ---------------- Cpf ----------------
def test_cpf_com_mascara_e_sem_mascara():
    assert Cpf("529.982.247-25").numero == "52998224725"
    assert Cpf("52998224725") == Cpf("529.982.247-25")
    assert Cpf("52998224725").formatado() == "529.982.247-25"


def test_cpf_convidado():
    cpf = Cpf("000.000.000-00")
    assert cpf.numero == "00000000000"
    assert cpf.is_convidado()


@pytest.mark.parametrize("valor", ["529.982.247-24", "123", "529982247-25", "abc.def.ghi-jk"])
def test_cpf_invalido(valor):
    with pytest.raises(InvalidError) as exc:
        Cpf(valor)
    assert exc.value.reason == "CPF"


def test_cpf_vazio():
    with pytest.raises(EmptyError):
        Cpf("   ")


# ---------------- Enums ----------------
def test_categoria_parse_e_format():
    for categoria in Categoria:
        assert Categoria.parse(str(categoria)) is categoria
    with pytest.raises(InvalidError):
        Categoria.parse("Pizza")


def test_status_parse_e_format():
    for status in Status:
        assert Status.parse(str(status)) is status
    assert str(Status.EM_PREPARACAO) == "EmPreparacao"
    with pytest.raises(InvalidError):
        Status.parse("Recebido")


def test_status_terminais():
    assert TERMINAIS == {Status.FINALIZADO, Status.CANCELADO}


# ---------------- Timestamps ----------------
def test_agora_respeita_formato():
    assert_timestamp_format(agora())


@pytest.mark.parametrize("valor", [
    "2024-01-17",
    "2024-01-17 10:00:00+0000",
    "2024-01-17 10:00:00.00+0000",
    "2024-13-40 10:00:00.000+0000",
    "2024-01-17T10:00:00.000+0000",
])
def test_timestamp_fora_do_formato(valor):
    with pytest.raises(InvalidError):
        assert_timestamp_format(valor)


# ---------------- Produto ----------------
def test_produto_valido():
    produto = make_produto(ingredientes=["Pão", " Carne ", "Pão"])
    assert produto.ingredientes == ["Pão", "Carne"]
    assert produto.categoria is Categoria.LANCHE


def test_produto_sem_ingredientes():
    with pytest.raises(EmptyError):
        Produto(
            nome="X", descricao="X", categoria=Categoria.LANCHE, preco=1.0,
            ingredientes=[], data_criacao=TS, data_atualizacao=TS,
        )


@pytest.mark.parametrize("preco", [-1.0, math.inf, math.nan])
def test_produto_preco_invalido(preco):
    with pytest.raises(InvalidError):
        make_produto(preco=preco)


def test_produto_timestamp_invalido_na_construcao():
    with pytest.raises(InvalidError):
        make_produto(data_criacao="17/01/2024")


def test_produto_setters_revalidam():
    produto = make_produto()
    produto.set_preco(12.5)
    produto.set_nome("Duplo")
    assert produto.preco == 12.5
    assert produto.nome == "Duplo"

    with pytest.raises(InvalidError):
        produto.set_data_atualizacao("ontem")
    with pytest.raises(EmptyError):
        produto.set_nome("")
    with pytest.raises(EmptyError):
        produto.set_ingredientes([])
    assert produto.data_atualizacao == TS


# ---------------- Pedido ----------------
def _pedido(**kwargs):
    dados = {"data_criacao": TS, "data_atualizacao": TS}
    dados.update(kwargs)
    return Pedido(**dados)


def test_pedido_sem_itens_e_invalido():
    with pytest.raises(InvalidError):
        _pedido().validate_entity()


@pytest.mark.parametrize("slot", ["lanche", "acompanhamento", "bebida"])
def test_pedido_com_um_item_e_valido(slot):
    _pedido(**{slot: make_produto()}).validate_entity()


def test_pedido_timestamp_invalido_falha_na_validacao():
    pedido = _pedido(lanche=make_produto(), data_criacao="2024-01-17")
    with pytest.raises(InvalidError):
        pedido.validate_entity()


def test_valor_total_apenas_lanche():
    pedido = _pedido(lanche=make_produto(preco=9.99))
    assert pedido.valor_total() == pytest.approx(9.99)


def test_valor_total_tres_itens():
    pedido = _pedido(
        lanche=make_produto(preco=9.99),
        acompanhamento=make_produto(preco=9.99, categoria=Categoria.ACOMPANHAMENTO),
        bebida=make_produto(preco=9.99, categoria=Categoria.BEBIDA),
    )
    assert pedido.valor_total() == pytest.approx(29.97)


def test_valor_total_sem_itens_e_zero():
    assert _pedido().valor_total() == 0


def test_pedido_setters():
    pedido = _pedido(lanche=make_produto())
    assert pedido.status is Status.PENDENTE
    assert pedido.pagamento is None

    pedido.set_pagamento("pay-1")
    pedido.set_status(Status.PAGO)
    pedido.set_data_atualizacao("2024-01-17 11:00:00.000+0000")
    assert pedido.pagamento == "pay-1"
    assert pedido.status is Status.PAGO
    assert pedido.data_atualizacao == "2024-01-17 11:00:00.000+0000"

    with pytest.raises(InvalidError):
        pedido.set_data_atualizacao("2024-01-17 11:00")
    assert pedido.data_atualizacao == "2024-01-17 11:00:00.000+0000"


def test_pedido_cliente_aceita_texto():
    pedido = _pedido(cliente="000.000.000-00", lanche=make_produto())
    assert pedido.cliente == Cpf("00000000000")
    assert pedido.model_dump()["cliente"] == "00000000000"


def test_pedido_terminal():
    assert _pedido(status=Status.CANCELADO).is_terminal()
    assert not _pedido(status=Status.PRONTO).is_terminal()


def test_fila_cozinha():
    pedidos = [
        _pedido(id=1, status=Status.PENDENTE, data_criacao="2024-01-17 10:00:00.000+0000"),
        _pedido(id=2, status=Status.FINALIZADO, data_criacao="2024-01-17 10:00:01.000+0000"),
        _pedido(id=3, status=Status.PRONTO, data_criacao="2024-01-17 10:00:02.000+0000"),
        _pedido(id=4, status=Status.EM_PREPARACAO, data_criacao="2024-01-17 10:00:03.000+0000"),
        _pedido(id=5, status=Status.CANCELADO, data_criacao="2024-01-17 09:00:00.000+0000"),
        _pedido(id=6, status=Status.PRONTO, data_criacao="2024-01-17 09:59:00.000+0000"),
        _pedido(id=7, status=Status.PAGO, data_criacao="2024-01-17 09:30:00.000+0000"),
    ]
    assert [p.id for p in ordenar_fila_cozinha(pedidos)] == [6, 3, 4, 7, 1, 5]
