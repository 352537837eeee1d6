from .service_produto import ProdutoService

__all__ = [
    "ProdutoService",
]
