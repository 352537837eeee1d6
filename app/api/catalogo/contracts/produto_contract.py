"""
Contract (Interface) do catálogo de produtos.
Os casos de uso dependem apenas deste contrato; o armazenamento concreto
(memória ou banco) é escolhido na montagem da aplicação.
"""
from abc import ABC, abstractmethod
from typing import List

from app.api.catalogo.entities.produto import Categoria, Produto


class IProdutoGateway(ABC):
    """Contrato assíncrono de acesso ao catálogo de produtos."""

    @abstractmethod
    async def get_produtos(self) -> List[Produto]:
        raise NotImplementedError

    @abstractmethod
    async def get_produto_by_id(self, produto_id: int) -> Produto:
        """Levanta NotFoundError se o id não existir."""
        raise NotImplementedError

    @abstractmethod
    async def get_produtos_by_categoria(self, categoria: Categoria) -> List[Produto]:
        """Filtro puro de leitura; sem resultados devolve lista vazia."""
        raise NotImplementedError

    @abstractmethod
    async def create_produto(self, produto: Produto) -> Produto:
        """Atribui o próximo id, carimba criação/atualização e devolve o produto salvo."""
        raise NotImplementedError

    @abstractmethod
    async def update_produto(self, produto: Produto) -> Produto:
        """Substitui o produto de mesmo id. Levanta NotFoundError se não existir."""
        raise NotImplementedError

    @abstractmethod
    async def delete_produto(self, produto_id: int) -> None:
        """Levanta NotFoundError se o id não existir."""
        raise NotImplementedError
