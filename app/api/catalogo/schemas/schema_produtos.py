"""
Schemas de Produtos
Entrada e saída HTTP do catálogo
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.catalogo.entities.produto import Categoria


# ------ Requests de criação/edição ------
class CreateProdutoInput(BaseModel):
    nome: str
    foto: str = ""
    descricao: str
    categoria: Categoria
    preco: float = Field(..., ge=0)
    ingredientes: List[str]


class UpdateProdutoInput(BaseModel):
    # Campos ausentes ficam intocados
    nome: Optional[str] = None
    foto: Optional[str] = None
    descricao: Optional[str] = None
    categoria: Optional[Categoria] = None
    preco: Optional[float] = Field(None, ge=0)
    ingredientes: Optional[List[str]] = None


# ------ DTOs / Responses ------
class ProdutoOut(BaseModel):
    id: int
    nome: str
    foto: str
    descricao: str
    categoria: Categoria
    preco: float
    ingredientes: List[str]
    data_criacao: str
    data_atualizacao: str

    model_config = ConfigDict(from_attributes=True)
