import logging
from typing import Dict, Iterable, List, Optional

from app.api.catalogo.entities.produto import Produto
from app.api.pedidos.contracts.pedido_contract import IPedidoGateway
from app.api.pedidos.entities.pedido import STATUS_NOVOS, Pedido, Status, ordenar_fila_cozinha
from app.core.exceptions import InvalidError, NotFoundError
from app.core.timestamps import agora

logger = logging.getLogger(__name__)


class InMemoryPedidoGateway(IPedidoGateway):
    """Implementação em memória dos pedidos, para testes e ambiente sem banco."""

    def __init__(self, pedidos: Optional[Iterable[Pedido]] = None):
        self._pedidos: Dict[int, Pedido] = {}
        for pedido in pedidos or []:
            self._pedidos[pedido.id] = pedido.model_copy(deep=True)
        self._ultimo_id = max(self._pedidos, default=0)
        logger.info("Usando repositório de pedidos em memória!")

    def _get(self, pedido_id: int) -> Pedido:
        pedido = self._pedidos.get(pedido_id)
        if pedido is None:
            raise NotFoundError("Pedido")
        return pedido

    async def create_pedido(self, pedido: Pedido) -> Pedido:
        _now = agora()
        self._ultimo_id += 1
        novo = pedido.model_copy(
            update={"id": self._ultimo_id, "data_criacao": _now, "data_atualizacao": _now},
            deep=True,
        )
        self._pedidos[novo.id] = novo
        return novo.model_copy(deep=True)

    async def lista_pedidos(self) -> List[Pedido]:
        return [p.model_copy(deep=True) for p in ordenar_fila_cozinha(self._pedidos.values())]

    async def get_pedidos_novos(self) -> List[Pedido]:
        novos = [p for p in self._pedidos.values() if p.status in STATUS_NOVOS]
        novos.sort(key=lambda p: p.data_criacao)
        return [p.model_copy(deep=True) for p in novos]

    async def get_pedido_by_id(self, pedido_id: int) -> Pedido:
        return self._get(pedido_id).model_copy(deep=True)

    async def atualiza_status(self, pedido_id: int, status: Status) -> Pedido:
        if status == Status.INVALIDO:
            raise InvalidError("status")
        pedido = self._get(pedido_id)
        pedido.set_status(status)
        pedido.set_data_atualizacao(agora())
        return pedido.model_copy(deep=True)

    async def atualiza_pagamento_status(
        self, pedido_id: int, pagamento_id: str, status: Status
    ) -> Pedido:
        if status == Status.INVALIDO:
            raise InvalidError("status")
        # Monta a nova versão antes de trocar: nunca existe estado parcial visível
        atualizado = self._get(pedido_id).model_copy(deep=True)
        atualizado.set_pagamento(pagamento_id)
        atualizado.set_status(status)
        atualizado.set_data_atualizacao(agora())
        self._pedidos[pedido_id] = atualizado
        return atualizado.model_copy(deep=True)

    async def cadastrar_lanche(self, pedido_id: int, lanche: Produto) -> Pedido:
        pedido = self._get(pedido_id)
        pedido.set_lanche(lanche.model_copy(deep=True))
        pedido.set_data_atualizacao(agora())
        return pedido.model_copy(deep=True)

    async def cadastrar_acompanhamento(self, pedido_id: int, acompanhamento: Produto) -> Pedido:
        pedido = self._get(pedido_id)
        pedido.set_acompanhamento(acompanhamento.model_copy(deep=True))
        pedido.set_data_atualizacao(agora())
        return pedido.model_copy(deep=True)

    async def cadastrar_bebida(self, pedido_id: int, bebida: Produto) -> Pedido:
        pedido = self._get(pedido_id)
        pedido.set_bebida(bebida.model_copy(deep=True))
        pedido.set_data_atualizacao(agora())
        return pedido.model_copy(deep=True)
