"""
Router de pedidos do totem.
Fila da cozinha, criação de pedido, troca de itens e de status.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.pedidos.schemas.schema_pedido import CreatePedidoInput, PedidoOut
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.utils.logger import logger

router = APIRouter(prefix="/api/pedidos", tags=["Pedidos"])


@router.get("/", response_model=List[PedidoOut], summary="Fila da cozinha")
async def listar_pedidos(svc: PedidoService = Depends(get_pedido_service)):
    """
    Pedidos em andamento, sem os finalizados.

    Ordem: Pronto, EmPreparacao, recém recebidos (Pago/Pendente), demais;
    dentro de cada grupo, do mais antigo para o mais novo.
    """
    pedidos = await svc.lista_pedidos()
    return [PedidoOut.from_entity(p) for p in pedidos]


@router.get("/novos", response_model=List[PedidoOut], summary="Pedidos novos")
async def listar_pedidos_novos(svc: PedidoService = Depends(get_pedido_service)):
    pedidos = await svc.get_pedidos_novos()
    return [PedidoOut.from_entity(p) for p in pedidos]


@router.get("/{pedido_id}", response_model=PedidoOut)
async def buscar_pedido(
    pedido_id: int = Path(..., ge=0, description="ID do pedido"),
    svc: PedidoService = Depends(get_pedido_service),
):
    return PedidoOut.from_entity(await svc.seleciona_pedido_por_id(pedido_id))


@router.post("/", response_model=PedidoOut, status_code=status.HTTP_201_CREATED)
async def criar_pedido(
    req: CreatePedidoInput,
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(
        f"[Pedidos] Criar - lanche={req.lanche_id} acompanhamento={req.acompanhamento_id} "
        f"bebida={req.bebida_id}"
    )
    return PedidoOut.from_entity(await svc.novo_pedido(req))


@router.put("/{pedido_id}/status/{status_pedido}", response_model=PedidoOut)
async def atualizar_status(
    pedido_id: int = Path(..., ge=0, description="ID do pedido"),
    status_pedido: str = Path(..., description="Novo status, ex.: EmPreparacao"),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Status - ID={pedido_id} -> {status_pedido}")
    return PedidoOut.from_entity(await svc.atualiza_status(pedido_id, status_pedido))


# ---------------- Itens do pedido ----------------
@router.put("/{pedido_id}/lanche/{produto_id}", response_model=PedidoOut)
async def cadastrar_lanche(
    pedido_id: int = Path(..., ge=0),
    produto_id: int = Path(..., ge=0),
    svc: PedidoService = Depends(get_pedido_service),
):
    return PedidoOut.from_entity(await svc.cadastrar_lanche(pedido_id, produto_id))


@router.put("/{pedido_id}/acompanhamento/{produto_id}", response_model=PedidoOut)
async def cadastrar_acompanhamento(
    pedido_id: int = Path(..., ge=0),
    produto_id: int = Path(..., ge=0),
    svc: PedidoService = Depends(get_pedido_service),
):
    return PedidoOut.from_entity(await svc.cadastrar_acompanhamento(pedido_id, produto_id))


@router.put("/{pedido_id}/bebida/{produto_id}", response_model=PedidoOut)
async def cadastrar_bebida(
    pedido_id: int = Path(..., ge=0),
    produto_id: int = Path(..., ge=0),
    svc: PedidoService = Depends(get_pedido_service),
):
    return PedidoOut.from_entity(await svc.cadastrar_bebida(pedido_id, produto_id))
