import pytest

from app.api.catalogo.entities.produto import Categoria
from app.api.catalogo.schemas.schema_produtos import CreateProdutoInput, UpdateProdutoInput
from app.api.catalogo.services.service_produto import ProdutoService
from app.core.exceptions import EmptyError, InvalidError, NotFoundError


@pytest.fixture
def service(produto_lock):
    return ProdutoService(produto_lock)


def _input(**kwargs):
    dados = {
        "nome": "X-Bacon",
        "foto": "xbacon.png",
        "descricao": "Pão, carne e bacon",
        "categoria": "Lanche",
        "preco": 18.5,
        "ingredientes": ["Pão", "Carne", "Bacon"],
    }
    dados.update(kwargs)
    return CreateProdutoInput(**dados)


@pytest.mark.asyncio
async def test_create_e_busca_por_id(service):
    req = _input()
    criado = await service.create_produto(req)
    buscado = await service.get_produto_by_id(criado.id)

    assert criado.id == 5
    for campo in ("nome", "foto", "descricao", "categoria", "preco", "ingredientes"):
        assert getattr(buscado, campo) == getattr(req, campo)


@pytest.mark.asyncio
async def test_create_sem_ingredientes(service):
    with pytest.raises(EmptyError):
        await service.create_produto(_input(ingredientes=[]))
    assert len(await service.get_produtos()) == 4


@pytest.mark.asyncio
async def test_update_parcial(service):
    antes = await service.get_produto_by_id(1)
    depois = await service.update_produto(1, UpdateProdutoInput(preco=11.0))

    assert depois.preco == 11.0
    assert depois.nome == antes.nome
    assert depois.ingredientes == antes.ingredientes
    assert depois.data_criacao == antes.data_criacao
    assert depois.data_atualizacao != antes.data_atualizacao


@pytest.mark.asyncio
async def test_update_invalido_nao_altera(service):
    with pytest.raises(EmptyError):
        await service.update_produto(1, UpdateProdutoInput(preco=1.0, nome="  "))
    assert (await service.get_produto_by_id(1)).preco == 9.99


@pytest.mark.asyncio
async def test_update_inexistente(service):
    with pytest.raises(NotFoundError):
        await service.update_produto(99, UpdateProdutoInput(nome="Nada"))


@pytest.mark.asyncio
async def test_delete(service):
    await service.delete_produto(4)
    with pytest.raises(NotFoundError):
        await service.get_produto_by_id(4)
    with pytest.raises(NotFoundError):
        await service.delete_produto(4)


@pytest.mark.asyncio
async def test_por_categoria(service):
    sobremesas = await service.get_produtos_by_categoria("Sobremesa")
    assert [p.categoria for p in sobremesas] == [Categoria.SOBREMESA]

    with pytest.raises(InvalidError):
        await service.get_produtos_by_categoria("Pizza")
