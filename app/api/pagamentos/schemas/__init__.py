from .schema_pagamento import InfoPagamento, StatusPagamento

__all__ = [
    "InfoPagamento",
    "StatusPagamento",
]
