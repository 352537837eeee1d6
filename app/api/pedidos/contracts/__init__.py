"""
Contracts do bounded context de Pedidos.
"""

from .pedido_contract import IPedidoGateway

__all__ = [
    "IPedidoGateway",
]
