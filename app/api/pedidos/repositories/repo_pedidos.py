from __future__ import annotations

from typing import List, Optional

from sqlalchemy import case, update
from sqlalchemy.orm import Session

from app.api.pedidos.entities.pedido import STATUS_NOVOS, Status
from app.api.pedidos.models.model_pedido import PedidoModel

# Prioridade da fila da cozinha; status fora da tabela vão para o fim
_PRIORIDADE_COZINHA = case(
    (PedidoModel.status == Status.PRONTO.value, 0),
    (PedidoModel.status == Status.EM_PREPARACAO.value, 1),
    (PedidoModel.status.in_([Status.PAGO.value, Status.PENDENTE.value]), 2),
    else_=3,
)


class PedidoRepository:
    def __init__(self, db: Session):
        self.db = db

    # ------------- Queries -------------
    def buscar_por_id(self, pedido_id: int) -> Optional[PedidoModel]:
        return self.db.query(PedidoModel).filter_by(id=pedido_id).first()

    def listar_fila_cozinha(self) -> List[PedidoModel]:
        return (
            self.db.query(PedidoModel)
            .filter(PedidoModel.status != Status.FINALIZADO.value)
            .order_by(_PRIORIDADE_COZINHA, PedidoModel.data_criacao.asc(), PedidoModel.id.asc())
            .all()
        )

    def listar_novos(self) -> List[PedidoModel]:
        return (
            self.db.query(PedidoModel)
            .filter(PedidoModel.status.in_([s.value for s in STATUS_NOVOS]))
            .order_by(PedidoModel.data_criacao.asc(), PedidoModel.id.asc())
            .all()
        )

    # ------------- Mutations -------------
    def criar(self, **data) -> PedidoModel:
        obj = PedidoModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def atualizar(self, pedido_id: int, **data) -> Optional[PedidoModel]:
        pedido = self.buscar_por_id(pedido_id)
        if not pedido:
            return None
        for key, value in data.items():
            setattr(pedido, key, value)
        self.db.flush()
        return pedido

    def atualizar_pagamento_status(
        self, pedido_id: int, pagamento: str, status: str, data_atualizacao: str
    ) -> bool:
        """Um único UPDATE para pagamento e status. Retorna False se o id não existe."""
        result = self.db.execute(
            update(PedidoModel)
            .where(PedidoModel.id == pedido_id)
            .values(pagamento=pagamento, status=status, data_atualizacao=data_atualizacao)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
