"""
Instâncias globais dos gateways, compartilhadas por HTTP e pelo consumidor
de pagamentos no mesmo processo.

Com ``ENV=test`` os gateways em memória substituem o banco.
"""
import logging
from typing import Optional

from app.api.catalogo.adapters.produto_memory_adapter import InMemoryProdutoGateway, produtos_iniciais
from app.api.catalogo.adapters.produto_sql_adapter import SqlProdutoGateway
from app.api.catalogo.contracts.produto_contract import IProdutoGateway
from app.api.pedidos.adapters.pedido_memory_adapter import InMemoryPedidoGateway
from app.api.pedidos.adapters.pedido_sql_adapter import SqlPedidoGateway
from app.api.pedidos.contracts.pedido_contract import IPedidoGateway
from app.config.settings import DB_URL, usa_repositorio_em_memoria
from app.core.gateway_lock import GatewayLock
from app.database.db_connection import criar_engine, criar_session_factory
from app.database.init_db import inicializar_banco

logger = logging.getLogger(__name__)

produto_lock: Optional[GatewayLock[IProdutoGateway]] = None
pedido_lock: Optional[GatewayLock[IPedidoGateway]] = None


def inicializar_gateways(em_memoria: Optional[bool] = None, db_url: Optional[str] = None):
    """Monta os dois gateways e seus locks. Chamado uma vez por processo."""
    global produto_lock, pedido_lock

    if em_memoria is None:
        em_memoria = usa_repositorio_em_memoria()

    if em_memoria:
        produto_gateway: IProdutoGateway = InMemoryProdutoGateway(produtos_iniciais())
        pedido_gateway: IPedidoGateway = InMemoryPedidoGateway()
    else:
        engine = criar_engine(db_url or DB_URL)
        inicializar_banco(engine)
        session_factory = criar_session_factory(engine)
        produto_gateway = SqlProdutoGateway(session_factory)
        pedido_gateway = SqlPedidoGateway(session_factory)

    produto_lock = GatewayLock(produto_gateway)
    pedido_lock = GatewayLock(pedido_gateway)
    logger.info(
        "Gateways inicializados (%s)", "memória" if em_memoria else "banco de dados"
    )


def get_produto_lock() -> GatewayLock[IProdutoGateway]:
    if produto_lock is None:
        inicializar_gateways()
    return produto_lock


def get_pedido_lock() -> GatewayLock[IPedidoGateway]:
    if pedido_lock is None:
        inicializar_gateways()
    return pedido_lock
