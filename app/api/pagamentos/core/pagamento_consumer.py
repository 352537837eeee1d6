import logging
from typing import Optional

import aio_pika
from aio_pika.abc import AbstractChannel, AbstractRobustConnection
from pydantic import ValidationError

from app.api.pagamentos.schemas.schema_pagamento import InfoPagamento
from app.api.pedidos.entities.pedido import Pedido
from app.api.pedidos.services.service_pedido import PedidoService
from app.core.exceptions import DomainError

logger = logging.getLogger(__name__)

CONSUMER_TAG = "pedido-pagamento-service"


class PagamentoUpdateConsumer:
    """
    Assinante da fila de atualizações de pagamento.

    Cada mensagem é confirmada (ack) antes do processamento; a redelivery fica
    por conta do broker. Mensagem malformada ou erro do caso de uso é só
    registrado no log, o loop segue para a próxima.
    """

    def __init__(self, pedido_service: PedidoService, rabbitmq_addr: str, queue_name: str):
        self.pedido_service = pedido_service
        self.rabbitmq_addr = rabbitmq_addr
        self.queue_name = queue_name

        self.connection: Optional[AbstractRobustConnection] = None
        self.channel: Optional[AbstractChannel] = None
        self._running = False

    async def processar_mensagem(self, body: bytes) -> Optional[Pedido]:
        """Decodifica o payload e aplica o pagamento. Nunca levanta."""
        try:
            info = InfoPagamento.model_validate_json(body)
        except (ValidationError, UnicodeDecodeError) as e:
            logger.error(f"[PagamentoConsumer] Mensagem inválida ignorada: {e}")
            return None

        try:
            return await self.pedido_service.atualiza_pagamento(info)
        except DomainError as e:
            logger.error(
                f"[PagamentoConsumer] Falha ao atualizar pedido {info.pedido_id} "
                f"(pagamento {info.pagamento_id}): {e}"
            )
            return None
        except Exception:
            # Qualquer outra falha também não pode derrubar a assinatura
            logger.exception(
                f"[PagamentoConsumer] Erro inesperado ao processar pedido {info.pedido_id} "
                f"(pagamento {info.pagamento_id})"
            )
            return None

    async def connect(self):
        self.connection = await aio_pika.connect_robust(self.rabbitmq_addr)
        self.channel = await self.connection.channel()
        # Uma mensagem por vez
        await self.channel.set_qos(prefetch_count=1)
        logger.info(f"[PagamentoConsumer] Conectado ao RabbitMQ, fila '{self.queue_name}'")

    async def subscribe(self):
        """Loop principal: roda até ``stop()`` ou até a conexão cair de vez."""
        if self.channel is None:
            await self.connect()

        queue = await self.channel.declare_queue(self.queue_name, durable=True)
        self._running = True

        async with queue.iterator(consumer_tag=CONSUMER_TAG) as queue_iter:
            async for message in queue_iter:
                # At-most-once: confirma antes de processar
                await message.ack()
                logger.info(f"[PagamentoConsumer] Mensagem recebida ({len(message.body)} bytes)")
                await self.processar_mensagem(message.body)

                if not self._running:
                    break

        logger.info("[PagamentoConsumer] Consumo encerrado")

    async def stop(self):
        self._running = False
        if self.connection and not self.connection.is_closed:
            await self.connection.close()
        logger.info("[PagamentoConsumer] Desconectado do RabbitMQ")
