from sqlalchemy import Column, Integer, String, JSON, Enum as SAEnum, Index

from app.api.pedidos.entities.pedido import Status
from app.database.db_connection import Base

StatusPedidoEnum = SAEnum(
    *[s.value for s in Status],
    name="pedido_status_enum",
    native_enum=False,
    create_constraint=True,
)


class PedidoModel(Base):
    __tablename__ = "pedido"
    __table_args__ = (
        Index("idx_pedido_status_criacao", "status", "data_criacao"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente_id = Column(String(11), nullable=True)  # só dígitos

    # Cada item guarda o id de origem e a cópia do produto no momento da compra
    lanche_id = Column(Integer, nullable=True)
    lanche_snapshot = Column(JSON, nullable=True)
    acompanhamento_id = Column(Integer, nullable=True)
    acompanhamento_snapshot = Column(JSON, nullable=True)
    bebida_id = Column(Integer, nullable=True)
    bebida_snapshot = Column(JSON, nullable=True)

    pagamento = Column(String(255), nullable=True)
    status = Column(StatusPedidoEnum, nullable=False, default=Status.PENDENTE.value)

    data_criacao = Column(String(32), nullable=False)
    data_atualizacao = Column(String(32), nullable=False)
