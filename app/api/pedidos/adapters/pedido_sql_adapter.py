import asyncio
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, sessionmaker

from app.api.catalogo.entities.produto import Produto
from app.api.pedidos.contracts.pedido_contract import IPedidoGateway
from app.api.pedidos.entities.cpf import Cpf
from app.api.pedidos.entities.pedido import Pedido, Status
from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.core.exceptions import InvalidError, NotFoundError
from app.core.timestamps import agora
from app.database.db_connection import executar_transacao

logger = logging.getLogger(__name__)


def _snapshot(produto: Optional[Produto]) -> Optional[dict]:
    return produto.model_dump(mode="json") if produto is not None else None


def _produto(snapshot: Optional[dict]) -> Optional[Produto]:
    return Produto.model_validate(snapshot) if snapshot else None


def pedido_from_model(model: PedidoModel) -> Pedido:
    return Pedido(
        id=model.id,
        cliente=Cpf(model.cliente_id) if model.cliente_id else None,
        lanche=_produto(model.lanche_snapshot),
        acompanhamento=_produto(model.acompanhamento_snapshot),
        bebida=_produto(model.bebida_snapshot),
        pagamento=model.pagamento,
        status=Status.parse(model.status),
        data_criacao=model.data_criacao,
        data_atualizacao=model.data_atualizacao,
    )


class SqlPedidoGateway(IPedidoGateway):
    """
    Pedidos no banco relacional. Cada item é gravado como id do produto de
    origem + cópia JSON; o que volta para o chamador é sempre a cópia.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def _run(self, operacao):
        return await asyncio.to_thread(executar_transacao, self.session_factory, operacao)

    async def _atualizar(self, pedido_id: int, **data) -> Pedido:
        data["data_atualizacao"] = agora()

        def operacao(db: Session):
            pedido = PedidoRepository(db).atualizar(pedido_id, **data)
            if not pedido:
                raise NotFoundError("Pedido")
            return pedido_from_model(pedido)

        return await self._run(operacao)

    async def create_pedido(self, pedido: Pedido) -> Pedido:
        _now = agora()
        data = {
            "cliente_id": pedido.cliente.numero if pedido.cliente else None,
            "lanche_id": pedido.lanche.id if pedido.lanche else None,
            "lanche_snapshot": _snapshot(pedido.lanche),
            "acompanhamento_id": pedido.acompanhamento.id if pedido.acompanhamento else None,
            "acompanhamento_snapshot": _snapshot(pedido.acompanhamento),
            "bebida_id": pedido.bebida.id if pedido.bebida else None,
            "bebida_snapshot": _snapshot(pedido.bebida),
            "pagamento": pedido.pagamento,
            "status": pedido.status.value,
            "data_criacao": _now,
            "data_atualizacao": _now,
        }

        def operacao(db: Session):
            return pedido_from_model(PedidoRepository(db).criar(**data))

        novo = await self._run(operacao)
        logger.info(f"Pedido criado: {novo.id}")
        return novo

    async def lista_pedidos(self) -> List[Pedido]:
        def operacao(db: Session):
            return [pedido_from_model(p) for p in PedidoRepository(db).listar_fila_cozinha()]
        return await self._run(operacao)

    async def get_pedidos_novos(self) -> List[Pedido]:
        def operacao(db: Session):
            return [pedido_from_model(p) for p in PedidoRepository(db).listar_novos()]
        return await self._run(operacao)

    async def get_pedido_by_id(self, pedido_id: int) -> Pedido:
        def operacao(db: Session):
            pedido = PedidoRepository(db).buscar_por_id(pedido_id)
            if not pedido:
                raise NotFoundError("Pedido")
            return pedido_from_model(pedido)
        return await self._run(operacao)

    async def atualiza_status(self, pedido_id: int, status: Status) -> Pedido:
        if status == Status.INVALIDO:
            raise InvalidError("status")
        return await self._atualizar(pedido_id, status=status.value)

    async def atualiza_pagamento_status(
        self, pedido_id: int, pagamento_id: str, status: Status
    ) -> Pedido:
        if status == Status.INVALIDO:
            raise InvalidError("status")
        _now = agora()

        def operacao(db: Session):
            repo = PedidoRepository(db)
            if not repo.atualizar_pagamento_status(pedido_id, pagamento_id, status.value, _now):
                raise NotFoundError("Pedido")
            return pedido_from_model(repo.buscar_por_id(pedido_id))

        return await self._run(operacao)

    async def cadastrar_lanche(self, pedido_id: int, lanche: Produto) -> Pedido:
        return await self._atualizar(
            pedido_id, lanche_id=lanche.id, lanche_snapshot=_snapshot(lanche)
        )

    async def cadastrar_acompanhamento(self, pedido_id: int, acompanhamento: Produto) -> Pedido:
        return await self._atualizar(
            pedido_id,
            acompanhamento_id=acompanhamento.id,
            acompanhamento_snapshot=_snapshot(acompanhamento),
        )

    async def cadastrar_bebida(self, pedido_id: int, bebida: Produto) -> Pedido:
        return await self._atualizar(
            pedido_id, bebida_id=bebida.id, bebida_snapshot=_snapshot(bebida)
        )
