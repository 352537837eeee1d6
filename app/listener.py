"""
Processo consumidor das atualizações de pagamento.

Uso: ``python -m app.listener`` (ou o script ``pedido-pagamento-listener``).
"""
import asyncio
import sys

from app.api.pagamentos.core.pagamento_consumer import PagamentoUpdateConsumer
from app.api.pedidos.services.service_pedido import PedidoService
from app.config.settings import ENV, QUEUE_NAME, RABBITMQ_ADDR
from app.core.gateways import get_pedido_lock, get_produto_lock
from app.utils.logger import logger


async def run():
    if not RABBITMQ_ADDR:
        logger.error("RABBITMQ_ADDR não configurado; listener não iniciado")
        return 1

    logger.info(f"Iniciando listener de pagamentos (ENV={ENV}, fila={QUEUE_NAME})")
    pedido_service = PedidoService(get_pedido_lock(), get_produto_lock())
    consumer = PagamentoUpdateConsumer(pedido_service, RABBITMQ_ADDR, QUEUE_NAME)
    try:
        await consumer.subscribe()
    finally:
        await consumer.stop()
    return 0


def main():
    try:
        sys.exit(asyncio.run(run()))
    except KeyboardInterrupt:
        logger.info("Listener interrompido")


if __name__ == "__main__":
    main()
