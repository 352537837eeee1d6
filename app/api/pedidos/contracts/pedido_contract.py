"""
Contract (Interface) para persistência de pedidos.
Os casos de uso só conhecem este contrato; a implementação (memória ou banco)
é escolhida na montagem da aplicação.
"""
from abc import ABC, abstractmethod
from typing import List

from app.api.catalogo.entities.produto import Produto
from app.api.pedidos.entities.pedido import Pedido, Status


class IPedidoGateway(ABC):
    """
    Contrato assíncrono de pedidos.

    Toda operação que recebe um id levanta NotFoundError quando o pedido não
    existe. Mutações renovam ``data_atualizacao``.
    """

    @abstractmethod
    async def create_pedido(self, pedido: Pedido) -> Pedido:
        """Atribui id, carimba os timestamps e devolve o pedido salvo."""
        raise NotImplementedError

    @abstractmethod
    async def lista_pedidos(self) -> List[Pedido]:
        """Fila da cozinha: sem Finalizados, Pronto > EmPreparacao > recém recebidos."""
        raise NotImplementedError

    @abstractmethod
    async def get_pedidos_novos(self) -> List[Pedido]:
        """Pedidos em Pendente ou EmPreparacao, do mais antigo para o mais novo."""
        raise NotImplementedError

    @abstractmethod
    async def get_pedido_by_id(self, pedido_id: int) -> Pedido:
        raise NotImplementedError

    @abstractmethod
    async def atualiza_status(self, pedido_id: int, status: Status) -> Pedido:
        """Levanta InvalidError para Status.INVALIDO, sem escrita."""
        raise NotImplementedError

    @abstractmethod
    async def atualiza_pagamento_status(
        self, pedido_id: int, pagamento_id: str, status: Status
    ) -> Pedido:
        """Grava pagamento e status numa única operação atômica."""
        raise NotImplementedError

    @abstractmethod
    async def cadastrar_lanche(self, pedido_id: int, lanche: Produto) -> Pedido:
        raise NotImplementedError

    @abstractmethod
    async def cadastrar_acompanhamento(self, pedido_id: int, acompanhamento: Produto) -> Pedido:
        raise NotImplementedError

    @abstractmethod
    async def cadastrar_bebida(self, pedido_id: int, bebida: Produto) -> Pedido:
        raise NotImplementedError
