import os

# Gateways em memória para a suíte inteira
os.environ["ENV"] = "test"

import pytest

from app.api.catalogo.adapters.produto_memory_adapter import InMemoryProdutoGateway
from app.api.catalogo.adapters.produto_sql_adapter import SqlProdutoGateway
from app.api.pedidos.adapters.pedido_memory_adapter import InMemoryPedidoGateway
from app.api.pedidos.adapters.pedido_sql_adapter import SqlPedidoGateway
from app.api.pedidos.services.service_pedido import PedidoService
from app.core.gateway_lock import GatewayLock
from app.database.db_connection import criar_engine, criar_session_factory
from app.database.init_db import inicializar_banco
from tests.factories import cardapio


@pytest.fixture
def produto_gateway():
    return InMemoryProdutoGateway(cardapio())


@pytest.fixture
def pedido_gateway():
    return InMemoryPedidoGateway()


@pytest.fixture
def produto_lock(produto_gateway):
    return GatewayLock(produto_gateway)


@pytest.fixture
def pedido_lock(pedido_gateway):
    return GatewayLock(pedido_gateway)


@pytest.fixture
def pedido_service(pedido_lock, produto_lock):
    return PedidoService(pedido_lock, produto_lock)


@pytest.fixture
def session_factory():
    engine = criar_engine("sqlite://")
    inicializar_banco(engine)
    yield criar_session_factory(engine)
    engine.dispose()


@pytest.fixture
def sql_produto_gateway(session_factory):
    return SqlProdutoGateway(session_factory)


@pytest.fixture
def sql_pedido_gateway(session_factory):
    return SqlPedidoGateway(session_factory)
