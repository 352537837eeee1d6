"""
Models do bounded context de Pedidos.
"""

from .model_pedido import PedidoModel, StatusPedidoEnum

__all__ = [
    "PedidoModel",
    "StatusPedidoEnum",
]
