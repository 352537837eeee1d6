# app/api/catalogo/router/router_produtos.py
from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.catalogo.schemas.schema_produtos import CreateProdutoInput, ProdutoOut, UpdateProdutoInput
from app.api.catalogo.services.dependencies import get_produto_service
from app.api.catalogo.services.service_produto import ProdutoService
from app.utils.logger import logger

router = APIRouter(prefix="/api/catalogo/produtos", tags=["Catalogo - Produtos"])


@router.get("/", response_model=List[ProdutoOut], summary="Lista todos os produtos")
async def listar_produtos(svc: ProdutoService = Depends(get_produto_service)):
    return await svc.get_produtos()


# Rota mais específica antes de /{produto_id}
@router.get(
    "/categoria/{categoria}",
    response_model=List[ProdutoOut],
    summary="Lista produtos de uma categoria",
    description="Categorias válidas: Lanche, Acompanhamento, Bebida, Sobremesa.",
)
async def listar_produtos_por_categoria(
    categoria: str = Path(..., description="Nome da categoria"),
    svc: ProdutoService = Depends(get_produto_service),
):
    return await svc.get_produtos_by_categoria(categoria)


@router.get("/{produto_id}", response_model=ProdutoOut)
async def buscar_produto(
    produto_id: int = Path(..., ge=0, description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    return await svc.get_produto_by_id(produto_id)


@router.post("/", response_model=ProdutoOut, status_code=status.HTTP_201_CREATED)
async def criar_produto(
    req: CreateProdutoInput,
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Criar - {req.nome} ({req.categoria})")
    return await svc.create_produto(req)


@router.put("/{produto_id}", response_model=ProdutoOut)
async def atualizar_produto(
    req: UpdateProdutoInput,
    produto_id: int = Path(..., ge=0, description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Atualizar - ID={produto_id}")
    return await svc.update_produto(produto_id, req)


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deletar_produto(
    produto_id: int = Path(..., ge=0, description="ID do produto"),
    svc: ProdutoService = Depends(get_produto_service),
):
    logger.info(f"[Produtos] Deletar - ID={produto_id}")
    await svc.delete_produto(produto_id)
    return None
