from fastapi import Depends

from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.catalogo.services.service_produto import ProdutoService
from app.core.gateway_lock import GatewayLock
from app.core.gateways import get_produto_lock


def get_produto_service(
    produto_lock: GatewayLock[IProdutoGateway] = Depends(get_produto_lock),
) -> ProdutoService:
    return ProdutoService(produto_lock)
