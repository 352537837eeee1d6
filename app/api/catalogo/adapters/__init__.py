from .produto_memory_adapter import InMemoryProdutoGateway, produtos_iniciais
from .produto_sql_adapter import SqlProdutoGateway

__all__ = [
    "InMemoryProdutoGateway",
    "SqlProdutoGateway",
    "produtos_iniciais",
]
