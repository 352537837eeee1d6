import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, TypeVar

from app.core.exceptions import InvalidError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GatewayLock(Generic[T]):
    """
    Guarda de exclusão mútua compartilhada por todos os chamadores de um gateway.

    Apenas uma operação lógica por instância executa de cada vez. HTTP e o
    consumidor de pagamentos precisam receber o mesmo ``GatewayLock``.
    """

    def __init__(self, gateway: T):
        self._gateway = gateway
        self._lock = asyncio.Lock()
        self._ocupado = False
        self._aguardando = 0

    @property
    def gateway(self) -> T:
        return self._gateway

    def locked(self) -> bool:
        return self._ocupado or self._lock.locked()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[T]:
        """Aguarda a vez e entrega o gateway."""
        self._aguardando += 1
        try:
            await self._lock.acquire()
        finally:
            self._aguardando -= 1
        self._ocupado = True
        try:
            yield self._gateway
        finally:
            self._ocupado = False
            self._lock.release()

    @asynccontextmanager
    async def try_acquire(self) -> AsyncIterator[T]:
        """
        Tentativa sem espera: se outro chamador detém o lock ou já está na fila,
        falha na hora com InvalidError em vez de entrar na fila.
        """
        # Liberado mas com alguém na fila: Lock.acquire() suspenderia atrás dele
        if self.locked() or self._aguardando:
            logger.warning("Gateway ocupado; tentativa sem espera recusada")
            raise InvalidError("Erro ao acessar o banco de dados")
        # Lock livre e fila vazia: acquire() retorna sem suspender
        await self._lock.acquire()
        self._ocupado = True
        try:
            yield self._gateway
        finally:
            self._ocupado = False
            self._lock.release()
