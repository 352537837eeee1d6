from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.catalogo.schemas.schema_produtos import ProdutoOut
from app.api.pedidos.entities.pedido import Pedido, Status


# ------ Requests ------
class CreatePedidoInput(BaseModel):
    # CPF com ou sem máscara; "000.000.000-00" identifica o cliente anônimo
    cliente_id: Optional[str] = None
    lanche_id: Optional[int] = Field(None, ge=0)
    acompanhamento_id: Optional[int] = Field(None, ge=0)
    bebida_id: Optional[int] = Field(None, ge=0)


# ------ Responses ------
class PedidoOut(BaseModel):
    id: int
    cliente: Optional[str] = None
    lanche: Optional[ProdutoOut] = None
    acompanhamento: Optional[ProdutoOut] = None
    bebida: Optional[ProdutoOut] = None
    pagamento: Optional[str] = None
    status: Status
    data_criacao: str
    data_atualizacao: str
    valor_total: float

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, pedido: Pedido) -> "PedidoOut":
        return cls(
            id=pedido.id,
            cliente=str(pedido.cliente) if pedido.cliente else None,
            lanche=ProdutoOut.model_validate(pedido.lanche) if pedido.lanche else None,
            acompanhamento=(
                ProdutoOut.model_validate(pedido.acompanhamento) if pedido.acompanhamento else None
            ),
            bebida=ProdutoOut.model_validate(pedido.bebida) if pedido.bebida else None,
            pagamento=pedido.pagamento,
            status=pedido.status,
            data_criacao=pedido.data_criacao,
            data_atualizacao=pedido.data_atualizacao,
            valor_total=pedido.valor_total(),
        )
