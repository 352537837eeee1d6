from enum import Enum

from pydantic import BaseModel, Field, field_validator


class StatusPagamento(str, Enum):
    """Resultado do pagamento informado pelo meio de pagamento."""
    APROVADO = "Aprovado"
    RECUSADO = "Recusado"


class InfoPagamento(BaseModel):
    """Payload das mensagens da fila de pagamentos."""
    pedido_id: int = Field(..., ge=0)
    pagamento_id: str
    status: StatusPagamento

    @field_validator("pagamento_id")
    @classmethod
    def _pagamento_id(cls, valor: str) -> str:
        if not valor.strip():
            raise ValueError("pagamento_id não pode ser vazio")
        return valor
