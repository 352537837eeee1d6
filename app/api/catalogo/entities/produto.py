from __future__ import annotations

import math
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.exceptions import EmptyError, InvalidError
from app.core.timestamps import assert_timestamp_format


class Categoria(str, Enum):
    """Categorias do cardápio. Conjunto fechado."""
    LANCHE = "Lanche"
    ACOMPANHAMENTO = "Acompanhamento"
    BEBIDA = "Bebida"
    SOBREMESA = "Sobremesa"

    @classmethod
    def parse(cls, valor: str) -> "Categoria":
        try:
            return cls(valor)
        except ValueError:
            raise InvalidError(f"Categoria desconhecida: {valor!r}")

    def __str__(self) -> str:
        return self.value


def validar_ingredientes(ingredientes: List[str]) -> List[str]:
    """Lista ordenada, sem repetições e não vazia de nomes de ingredientes."""
    nomes: List[str] = []
    for nome in ingredientes or []:
        nome = (nome or "").strip()
        if not nome:
            raise EmptyError("ingrediente")
        if nome not in nomes:
            nomes.append(nome)
    if not nomes:
        raise EmptyError("ingredientes")
    return nomes


def validar_preco(preco: float) -> float:
    if not math.isfinite(preco) or preco < 0:
        raise InvalidError(f"Preço inválido: {preco}")
    return preco


class Produto(BaseModel):
    """Item vendável do cardápio."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(0, ge=0)
    nome: str
    foto: str = ""
    descricao: str
    categoria: Categoria
    preco: float
    ingredientes: List[str]
    data_criacao: str
    data_atualizacao: str

    @field_validator("nome", "descricao")
    @classmethod
    def _texto_obrigatorio(cls, valor: str, info):
        if not valor or not valor.strip():
            raise EmptyError(info.field_name)
        return valor

    @field_validator("preco")
    @classmethod
    def _preco(cls, valor: float) -> float:
        return validar_preco(valor)

    @field_validator("ingredientes")
    @classmethod
    def _ingredientes(cls, valor: List[str]) -> List[str]:
        return validar_ingredientes(valor)

    @field_validator("data_criacao", "data_atualizacao")
    @classmethod
    def _timestamp(cls, valor: str) -> str:
        assert_timestamp_format(valor)
        return valor

    # Setters: a validação roda na atribuição (validate_assignment)
    def set_nome(self, nome: str):
        self.nome = nome

    def set_foto(self, foto: str):
        self.foto = foto

    def set_descricao(self, descricao: str):
        self.descricao = descricao

    def set_categoria(self, categoria: Categoria):
        self.categoria = categoria

    def set_preco(self, preco: float):
        self.preco = preco

    def set_ingredientes(self, ingredientes: List[str]):
        self.ingredientes = ingredientes

    def set_data_atualizacao(self, data_atualizacao: str):
        self.data_atualizacao = data_atualizacao
