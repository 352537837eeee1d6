from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from app.api.catalogo.entities.produto import Produto
from app.api.pedidos.entities.cpf import Cpf
from app.core.exceptions import InvalidError
from app.core.timestamps import assert_timestamp_format


# Ordem conceitual:
# Pendente => Pago => EmPreparacao => Pronto => Finalizado
# Cancelado em qualquer ponto não terminal
class Status(str, Enum):
    PENDENTE = "Pendente"
    PAGO = "Pago"
    EM_PREPARACAO = "EmPreparacao"
    PRONTO = "Pronto"
    FINALIZADO = "Finalizado"
    CANCELADO = "Cancelado"
    INVALIDO = "Invalido"

    @classmethod
    def parse(cls, valor: str) -> "Status":
        try:
            return cls(valor)
        except ValueError:
            raise InvalidError(f"Status desconhecido: {valor!r}")

    def __str__(self) -> str:
        return self.value

    def prioridade_cozinha(self) -> int:
        """Menor valor aparece primeiro na fila da cozinha."""
        return _PRIORIDADE_COZINHA.get(self, 3)


TERMINAIS = frozenset({Status.FINALIZADO, Status.CANCELADO})

# Pago e Pendente são os "recém recebidos"; demais status vão para o fim
_PRIORIDADE_COZINHA = {
    Status.PRONTO: 0,
    Status.EM_PREPARACAO: 1,
    Status.PAGO: 2,
    Status.PENDENTE: 2,
}

# Status que entram na fila de pedidos novos
STATUS_NOVOS = (Status.PENDENTE, Status.EM_PREPARACAO)


class Pedido(BaseModel):
    """
    Pedido do totem: até três itens (lanche, acompanhamento e bebida), cada um
    guardado como cópia do produto no momento da compra.

    Os timestamps não são checados na construção; ``validate_entity`` faz
    isso antes de persistir.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: int = Field(0, ge=0)
    cliente: Optional[Cpf] = None
    lanche: Optional[Produto] = None
    acompanhamento: Optional[Produto] = None
    bebida: Optional[Produto] = None
    pagamento: Optional[str] = None
    status: Status = Status.PENDENTE
    data_criacao: str
    data_atualizacao: str

    @field_validator("cliente", mode="before")
    @classmethod
    def _cliente(cls, valor):
        if isinstance(valor, str):
            return Cpf(valor)
        return valor

    @field_serializer("cliente")
    def _serializa_cliente(self, cliente: Optional[Cpf]):
        return str(cliente) if cliente is not None else None

    def validate_entity(self) -> None:
        if self.lanche is None and self.acompanhamento is None and self.bebida is None:
            raise InvalidError(
                "Pedido deve conter pelo menos um item entre Lanche, Acompanhamento ou Bebida"
            )
        assert_timestamp_format(self.data_criacao)
        assert_timestamp_format(self.data_atualizacao)

    def valor_total(self) -> float:
        return sum(
            produto.preco
            for produto in (self.lanche, self.acompanhamento, self.bebida)
            if produto is not None
        )

    def is_terminal(self) -> bool:
        return self.status in TERMINAIS

    # Setters
    def set_pagamento(self, pagamento: str):
        self.pagamento = pagamento

    def set_status(self, status: Status):
        self.status = status

    def set_data_atualizacao(self, data_atualizacao: str):
        assert_timestamp_format(data_atualizacao)
        self.data_atualizacao = data_atualizacao

    def set_lanche(self, lanche: Produto):
        self.lanche = lanche

    def set_acompanhamento(self, acompanhamento: Produto):
        self.acompanhamento = acompanhamento

    def set_bebida(self, bebida: Produto):
        self.bebida = bebida


def ordenar_fila_cozinha(pedidos: Iterable[Pedido]) -> List[Pedido]:
    """Fila operacional: sem Finalizados, por prioridade e depois por criação."""
    return sorted(
        (p for p in pedidos if p.status != Status.FINALIZADO),
        key=lambda p: (p.status.prioridade_cozinha(), p.data_criacao),
    )
