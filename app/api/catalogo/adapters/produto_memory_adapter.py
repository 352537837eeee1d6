import logging
from typing import Dict, Iterable, List, Optional

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.catalogo.entities.produto import Categoria, Produto
from app.core.exceptions import NotFoundError
from app.core.timestamps import agora

logger = logging.getLogger(__name__)


def produtos_iniciais() -> List[Produto]:
    """Cardápio mínimo usado quando a aplicação roda sem banco."""
    _now = agora()
    return [
        Produto(
            id=1,
            nome="Hamburguer",
            foto="hamburguer.png",
            descricao="hamburguer com uma carne e salada",
            categoria=Categoria.LANCHE,
            preco=15.99,
            ingredientes=["Carne", "Pao", "Alface"],
            data_criacao=_now,
            data_atualizacao=_now,
        )
    ]


class InMemoryProdutoGateway(IProdutoGateway):
    """Implementação em memória do catálogo, para testes e ambiente sem banco."""

    def __init__(self, produtos: Optional[Iterable[Produto]] = None):
        self._produtos: Dict[int, Produto] = {}
        for produto in produtos or []:
            self._produtos[produto.id] = produto.model_copy(deep=True)
        # Ids nunca são reaproveitados, mesmo após exclusões
        self._ultimo_id = max(self._produtos, default=0)
        logger.info("Usando repositório de produtos em memória!")

    async def get_produtos(self) -> List[Produto]:
        return [p.model_copy(deep=True) for p in self._produtos.values()]

    async def get_produto_by_id(self, produto_id: int) -> Produto:
        produto = self._produtos.get(produto_id)
        if produto is None:
            raise NotFoundError("Produto")
        return produto.model_copy(deep=True)

    async def get_produtos_by_categoria(self, categoria: Categoria) -> List[Produto]:
        return [
            p.model_copy(deep=True)
            for p in self._produtos.values()
            if p.categoria == categoria
        ]

    async def create_produto(self, produto: Produto) -> Produto:
        _now = agora()
        self._ultimo_id += 1
        novo = produto.model_copy(
            update={"id": self._ultimo_id, "data_criacao": _now, "data_atualizacao": _now},
            deep=True,
        )
        self._produtos[novo.id] = novo
        return novo.model_copy(deep=True)

    async def update_produto(self, produto: Produto) -> Produto:
        if produto.id not in self._produtos:
            raise NotFoundError("Produto")
        self._produtos[produto.id] = produto.model_copy(deep=True)
        return produto.model_copy(deep=True)

    async def delete_produto(self, produto_id: int) -> None:
        if self._produtos.pop(produto_id, None) is None:
            raise NotFoundError("Produto")
