import asyncio
import logging
from typing import List

from sqlalchemy.orm import Session, sessionmaker

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.catalogo.entities.produto import Categoria, Produto
from app.api.catalogo.models.model_produto import ProdutoModel
from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.core.exceptions import NotFoundError
from app.core.timestamps import agora
from app.database.db_connection import executar_transacao

logger = logging.getLogger(__name__)


def produto_from_model(model: ProdutoModel) -> Produto:
    return Produto(
        id=model.id,
        nome=model.nome,
        foto=model.foto or "",
        descricao=model.descricao,
        categoria=Categoria.parse(model.categoria),
        preco=model.preco,
        ingredientes=list(model.ingredientes or []),
        data_criacao=model.data_criacao,
        data_atualizacao=model.data_atualizacao,
    )


def _colunas(produto: Produto) -> dict:
    return {
        "nome": produto.nome,
        "foto": produto.foto,
        "descricao": produto.descricao,
        "categoria": produto.categoria.value,
        "preco": produto.preco,
        "ingredientes": list(produto.ingredientes),
        "data_criacao": produto.data_criacao,
        "data_atualizacao": produto.data_atualizacao,
    }


class SqlProdutoGateway(IProdutoGateway):
    """
    Implementação do catálogo sobre o banco relacional.

    Cada operação abre sua própria sessão e roda o ORM (síncrono) numa thread
    de trabalho para não travar o event loop.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def _run(self, operacao):
        return await asyncio.to_thread(executar_transacao, self.session_factory, operacao)

    async def get_produtos(self) -> List[Produto]:
        def operacao(db: Session):
            return [produto_from_model(p) for p in ProdutoRepository(db).listar()]
        return await self._run(operacao)

    async def get_produto_by_id(self, produto_id: int) -> Produto:
        def operacao(db: Session):
            produto = ProdutoRepository(db).buscar_por_id(produto_id)
            if not produto:
                raise NotFoundError("Produto")
            return produto_from_model(produto)
        return await self._run(operacao)

    async def get_produtos_by_categoria(self, categoria: Categoria) -> List[Produto]:
        def operacao(db: Session):
            return [
                produto_from_model(p)
                for p in ProdutoRepository(db).listar_por_categoria(categoria.value)
            ]
        return await self._run(operacao)

    async def create_produto(self, produto: Produto) -> Produto:
        _now = agora()
        data = _colunas(produto)
        data.update(data_criacao=_now, data_atualizacao=_now)

        def operacao(db: Session):
            return produto_from_model(ProdutoRepository(db).criar(**data))

        novo = await self._run(operacao)
        logger.info(f"Produto cadastrado: {novo.id} - {novo.nome}")
        return novo

    async def update_produto(self, produto: Produto) -> Produto:
        def operacao(db: Session):
            atualizado = ProdutoRepository(db).atualizar(produto.id, **_colunas(produto))
            if not atualizado:
                raise NotFoundError("Produto")
            return produto_from_model(atualizado)
        return await self._run(operacao)

    async def delete_produto(self, produto_id: int) -> None:
        def operacao(db: Session):
            if not ProdutoRepository(db).deletar(produto_id):
                raise NotFoundError("Produto")
        await self._run(operacao)
