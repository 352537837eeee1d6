import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from .db_connection import Base

logger = logging.getLogger(__name__)

TABELAS = ["produto", "pedido"]


def importar_models():
    """Importa os models para registrá-los no metadata antes do create_all."""
    from app.api.catalogo.models.model_produto import ProdutoModel  # noqa: F401
    from app.api.pedidos.models.model_pedido import PedidoModel  # noqa: F401


def verificar_banco_inicializado(engine: Engine) -> bool:
    """Considera inicializado quando todas as tabelas principais existem."""
    existentes = set(inspect(engine).get_table_names())
    return all(tabela in existentes for tabela in TABELAS)


def inicializar_banco(engine: Engine):
    """Cria as tabelas que ainda não existem."""
    importar_models()
    if verificar_banco_inicializado(engine):
        logger.info("ℹ️ Tabelas já existem, nada a criar")
        return
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Tabelas criadas: %s", ", ".join(TABELAS))
    except Exception as e:
        logger.error(f"❌ Erro ao criar tabelas: {e}")
        raise
