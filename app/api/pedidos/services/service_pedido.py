from __future__ import annotations

import logging
from typing import List, Optional

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.catalogo.entities.produto import Categoria, Produto
from app.api.pagamentos.schemas.schema_pagamento import InfoPagamento, StatusPagamento
from app.api.pedidos.contracts.pedido_contract import IPedidoGateway
from app.api.pedidos.entities.cpf import Cpf
from app.api.pedidos.entities.pedido import Pedido, Status
from app.api.pedidos.schemas.schema_pedido import CreatePedidoInput
from app.core.exceptions import InvalidError
from app.core.gateway_lock import GatewayLock
from app.core.timestamps import agora

logger = logging.getLogger(__name__)

STATUS_POR_PAGAMENTO = {
    StatusPagamento.APROVADO: Status.PAGO,
    StatusPagamento.RECUSADO: Status.CANCELADO,
}


class PedidoService:
    """
    Pedidos e pagamentos.

    Produto e pedido ficam atrás de locks independentes: montar um pedido lê
    os produtos em seções críticas próprias e só depois grava o pedido.
    """

    def __init__(
        self,
        pedido_lock: GatewayLock[IPedidoGateway],
        produto_lock: GatewayLock[IProdutoGateway],
    ):
        self.pedido_lock = pedido_lock
        self.produto_lock = produto_lock

    # ---------------- Consultas ----------------
    async def lista_pedidos(self) -> List[Pedido]:
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.lista_pedidos()

    async def seleciona_pedido_por_id(self, pedido_id: int) -> Pedido:
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.get_pedido_by_id(pedido_id)

    async def get_pedidos_novos(self) -> List[Pedido]:
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.get_pedidos_novos()

    # ---------------- Criação ----------------
    async def _busca_produto(self, produto_id: Optional[int]) -> Optional[Produto]:
        if produto_id is None:
            return None
        async with self.produto_lock.acquire() as gateway:
            return await gateway.get_produto_by_id(produto_id)

    async def novo_pedido(self, req: CreatePedidoInput) -> Pedido:
        cliente = Cpf(req.cliente_id) if req.cliente_id is not None else None

        lanche = await self._busca_produto(req.lanche_id)
        acompanhamento = await self._busca_produto(req.acompanhamento_id)
        bebida = await self._busca_produto(req.bebida_id)

        _now = agora()
        pedido = Pedido(
            id=0,
            cliente=cliente,
            lanche=lanche,
            acompanhamento=acompanhamento,
            bebida=bebida,
            pagamento=None,
            status=Status.PENDENTE,
            data_criacao=_now,
            data_atualizacao=_now,
        )
        pedido.validate_entity()

        async with self.pedido_lock.acquire() as gateway:
            novo = await gateway.create_pedido(pedido)
        logger.info(f"Novo pedido {novo.id} - total {novo.valor_total():.2f}")
        return novo

    # ---------------- Itens ----------------
    async def _produto_da_categoria(self, produto_id: int, categoria: Categoria) -> Produto:
        produto = await self._busca_produto(produto_id)
        if produto.categoria != categoria:
            raise InvalidError(
                f"Produto {produto_id} é da categoria {produto.categoria}, esperado {categoria}"
            )
        return produto

    async def cadastrar_lanche(self, pedido_id: int, produto_id: int) -> Pedido:
        lanche = await self._produto_da_categoria(produto_id, Categoria.LANCHE)
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.cadastrar_lanche(pedido_id, lanche)

    async def cadastrar_acompanhamento(self, pedido_id: int, produto_id: int) -> Pedido:
        acompanhamento = await self._produto_da_categoria(produto_id, Categoria.ACOMPANHAMENTO)
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.cadastrar_acompanhamento(pedido_id, acompanhamento)

    async def cadastrar_bebida(self, pedido_id: int, produto_id: int) -> Pedido:
        bebida = await self._produto_da_categoria(produto_id, Categoria.BEBIDA)
        async with self.pedido_lock.acquire() as gateway:
            return await gateway.cadastrar_bebida(pedido_id, bebida)

    # ---------------- Status / Pagamento ----------------
    async def atualiza_status(self, pedido_id: int, status: str) -> Pedido:
        # Nome desconhecido falha aqui, antes de tocar no gateway
        status_enum = Status.parse(status)
        async with self.pedido_lock.acquire() as gateway:
            pedido = await gateway.atualiza_status(pedido_id, status_enum)
        logger.info(f"Pedido {pedido_id} -> {status_enum}")
        return pedido

    async def atualiza_pagamento(self, info_pagamento: InfoPagamento) -> Pedido:
        """
        Confirmação vinda da fila de pagamentos. Não espera pelo lock: se o
        gateway estiver ocupado, falha na hora com InvalidError.
        """
        async with self.pedido_lock.try_acquire() as gateway:
            status = STATUS_POR_PAGAMENTO[info_pagamento.status]
            pedido = await gateway.atualiza_pagamento_status(
                info_pagamento.pedido_id, info_pagamento.pagamento_id, status
            )
        logger.info(
            f"Pagamento {info_pagamento.pagamento_id} ({info_pagamento.status.value}) "
            f"aplicado ao pedido {pedido.id}: {pedido.status}"
        )
        return pedido
