from .pedido_memory_adapter import InMemoryPedidoGateway
from .pedido_sql_adapter import SqlPedidoGateway

__all__ = [
    "InMemoryPedidoGateway",
    "SqlPedidoGateway",
]
