import logging
from typing import List

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.catalogo.entities.produto import Categoria, Produto
from app.api.catalogo.schemas.schema_produtos import CreateProdutoInput, UpdateProdutoInput
from app.core.gateway_lock import GatewayLock
from app.core.timestamps import agora

logger = logging.getLogger(__name__)


class ProdutoService:
    """Gerenciamento do catálogo. Toda chamada segura o lock do gateway de produtos."""

    def __init__(self, produto_lock: GatewayLock[IProdutoGateway]):
        self.produto_lock = produto_lock

    async def get_produtos(self) -> List[Produto]:
        async with self.produto_lock.acquire() as gateway:
            return await gateway.get_produtos()

    async def get_produto_by_id(self, produto_id: int) -> Produto:
        async with self.produto_lock.acquire() as gateway:
            return await gateway.get_produto_by_id(produto_id)

    async def get_produtos_by_categoria(self, categoria: str) -> List[Produto]:
        categoria_enum = Categoria.parse(categoria)
        async with self.produto_lock.acquire() as gateway:
            return await gateway.get_produtos_by_categoria(categoria_enum)

    async def create_produto(self, req: CreateProdutoInput) -> Produto:
        _now = agora()
        produto = Produto(
            id=0,
            nome=req.nome,
            foto=req.foto,
            descricao=req.descricao,
            categoria=req.categoria,
            preco=req.preco,
            ingredientes=req.ingredientes,
            data_criacao=_now,
            data_atualizacao=_now,
        )
        async with self.produto_lock.acquire() as gateway:
            return await gateway.create_produto(produto)

    async def update_produto(self, produto_id: int, req: UpdateProdutoInput) -> Produto:
        async with self.produto_lock.acquire() as gateway:
            produto = await gateway.get_produto_by_id(produto_id)

            # Atualização parcial: só o que veio no request sobrescreve
            if req.nome is not None:
                produto.set_nome(req.nome)
            if req.foto is not None:
                produto.set_foto(req.foto)
            if req.descricao is not None:
                produto.set_descricao(req.descricao)
            if req.categoria is not None:
                produto.set_categoria(req.categoria)
            if req.preco is not None:
                produto.set_preco(req.preco)
            if req.ingredientes is not None:
                produto.set_ingredientes(req.ingredientes)
            produto.set_data_atualizacao(agora())

            atualizado = await gateway.update_produto(produto)
        logger.info(f"Produto atualizado: {atualizado.id}")
        return atualizado

    async def delete_produto(self, produto_id: int) -> None:
        async with self.produto_lock.acquire() as gateway:
            await gateway.delete_produto(produto_id)
        logger.info(f"Produto removido: {produto_id}")
