from fastapi import Depends

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.pedidos.contracts.pedido_contract import IPedidoGateway
from app.api.pedidos.services.service_pedido import PedidoService
from app.core.gateway_lock import GatewayLock
from app.core.gateways import get_pedido_lock, get_produto_lock


def get_pedido_service(
    pedido_lock: GatewayLock[IPedidoGateway] = Depends(get_pedido_lock),
    produto_lock: GatewayLock[IProdutoGateway] = Depends(get_produto_lock),
) -> PedidoService:
    return PedidoService(pedido_lock, produto_lock)
