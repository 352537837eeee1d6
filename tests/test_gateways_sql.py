import pytest

from app.api.catalogo.entities.produto import Categoria
from app.api.pedidos.entities.cpf import Cpf
from app.api.pedidos.entities.pedido import Pedido, Status
from app.api.pedidos.models.model_pedido import PedidoModel
from app.core.exceptions import InvalidError, NotFoundError
from app.core.timestamps import assert_timestamp_format
from tests.factories import TS, make_produto


def _novo_pedido(lanche, **kwargs) -> Pedido:
    dados = {"lanche": lanche, "data_criacao": TS, "data_atualizacao": TS}
    dados.update(kwargs)
    return Pedido(**dados)


# ---------------- Produtos ----------------
@pytest.mark.asyncio
async def test_crud_produto(sql_produto_gateway):
    gateway = sql_produto_gateway
    criado = await gateway.create_produto(make_produto(nome="X-Salada", preco=12.0))
    assert criado.id == 1
    assert_timestamp_format(criado.data_criacao)

    buscado = await gateway.get_produto_by_id(criado.id)
    assert buscado.nome == "X-Salada"
    assert buscado.categoria is Categoria.LANCHE
    assert buscado.ingredientes == ["Pão", "Hambúrguer", "Queijo"]
    assert buscado.preco == pytest.approx(12.0)

    buscado.set_preco(13.5)
    atualizado = await gateway.update_produto(buscado)
    assert atualizado.preco == pytest.approx(13.5)

    await gateway.delete_produto(criado.id)
    with pytest.raises(NotFoundError):
        await gateway.get_produto_by_id(criado.id)
    with pytest.raises(NotFoundError):
        await gateway.delete_produto(criado.id)


@pytest.mark.asyncio
async def test_update_produto_inexistente(sql_produto_gateway):
    with pytest.raises(NotFoundError):
        await sql_produto_gateway.update_produto(make_produto(id=7))


@pytest.mark.asyncio
async def test_produtos_por_categoria_sql(sql_produto_gateway):
    await sql_produto_gateway.create_produto(make_produto(nome="Cheeseburger"))
    await sql_produto_gateway.create_produto(make_produto(nome="Suco", categoria=Categoria.BEBIDA))

    bebidas = await sql_produto_gateway.get_produtos_by_categoria(Categoria.BEBIDA)
    assert [p.nome for p in bebidas] == ["Suco"]
    assert await sql_produto_gateway.get_produtos_by_categoria(Categoria.SOBREMESA) == []
    assert len(await sql_produto_gateway.get_produtos()) == 2


# ---------------- Pedidos ----------------
@pytest.mark.asyncio
async def test_create_pedido_guarda_copia_do_produto(sql_produto_gateway, sql_pedido_gateway):
    lanche = await sql_produto_gateway.create_produto(make_produto(preco=9.99))
    pedido = await sql_pedido_gateway.create_pedido(
        _novo_pedido(lanche, cliente=Cpf("000.000.000-00"))
    )
    assert pedido.id == 1
    assert pedido.cliente.is_convidado()
    assert pedido.status is Status.PENDENTE
    assert pedido.pagamento is None

    # Mudança de preço no catálogo não afeta o pedido já feito
    lanche.set_preco(20.0)
    await sql_produto_gateway.update_produto(lanche)
    buscado = await sql_pedido_gateway.get_pedido_by_id(pedido.id)
    assert buscado.lanche.id == lanche.id
    assert buscado.valor_total() == pytest.approx(9.99)


@pytest.mark.asyncio
async def test_atualiza_status_sql(sql_pedido_gateway):
    await sql_pedido_gateway.create_pedido(_novo_pedido(make_produto(id=1)))

    atualizado = await sql_pedido_gateway.atualiza_status(1, Status.PRONTO)
    assert atualizado.status is Status.PRONTO

    with pytest.raises(InvalidError):
        await sql_pedido_gateway.atualiza_status(1, Status.INVALIDO)
    assert (await sql_pedido_gateway.get_pedido_by_id(1)).status is Status.PRONTO

    with pytest.raises(NotFoundError):
        await sql_pedido_gateway.atualiza_status(99, Status.PRONTO)


@pytest.mark.asyncio
async def test_atualiza_pagamento_status_sql(sql_pedido_gateway, session_factory):
    await sql_pedido_gateway.create_pedido(_novo_pedido(make_produto(id=1)))

    atualizado = await sql_pedido_gateway.atualiza_pagamento_status(1, "pay-1", Status.PAGO)
    assert atualizado.pagamento == "pay-1"
    assert atualizado.status is Status.PAGO

    with session_factory() as db:
        row = db.get(PedidoModel, 1)
        assert (row.pagamento, row.status) == ("pay-1", "Pago")

    with pytest.raises(NotFoundError):
        await sql_pedido_gateway.atualiza_pagamento_status(99, "pay-2", Status.PAGO)


@pytest.mark.asyncio
async def test_cadastrar_itens_sql(sql_pedido_gateway):
    await sql_pedido_gateway.create_pedido(_novo_pedido(make_produto(id=1)))
    await sql_pedido_gateway.cadastrar_acompanhamento(
        1, make_produto(id=2, nome="Batata", categoria=Categoria.ACOMPANHAMENTO, preco=5.0)
    )
    await sql_pedido_gateway.cadastrar_bebida(
        1, make_produto(id=3, nome="Suco", categoria=Categoria.BEBIDA, preco=6.0)
    )
    atualizado = await sql_pedido_gateway.cadastrar_lanche(
        1, make_produto(id=5, nome="Duplo", preco=20.0)
    )
    assert atualizado.lanche.nome == "Duplo"
    assert atualizado.acompanhamento.categoria is Categoria.ACOMPANHAMENTO
    assert atualizado.valor_total() == pytest.approx(31.0)


@pytest.mark.asyncio
async def test_lista_pedidos_sql_fila_cozinha(sql_pedido_gateway):
    lanche = make_produto(id=1)
    for _ in range(5):
        await sql_pedido_gateway.create_pedido(_novo_pedido(lanche))

    await sql_pedido_gateway.atualiza_status(1, Status.FINALIZADO)
    await sql_pedido_gateway.atualiza_status(2, Status.EM_PREPARACAO)
    await sql_pedido_gateway.atualiza_status(4, Status.PRONTO)
    await sql_pedido_gateway.atualiza_status(5, Status.CANCELADO)

    assert [p.id for p in await sql_pedido_gateway.lista_pedidos()] == [4, 2, 3, 5]
    assert [p.id for p in await sql_pedido_gateway.get_pedidos_novos()] == [2, 3]
