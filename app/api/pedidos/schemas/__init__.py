"""
Schemas (DTOs) do bounded context de Pedidos.
"""

from .schema_pedido import CreatePedidoInput, PedidoOut

__all__ = [
    "CreatePedidoInput",
    "PedidoOut",
]
