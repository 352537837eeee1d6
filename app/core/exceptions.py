"""
Erros de domínio compartilhados por entidades, gateways e casos de uso.

A camada HTTP é a única responsável por transformar estes erros em resposta
para o usuário (ver ``app.core.exception_handlers``).
"""
from typing import Optional


class DomainError(Exception):
    """Raiz da taxonomia de erros de domínio."""

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)


class AlreadyExistsError(DomainError):
    """Uma restrição de unicidade foi violada."""


class NotFoundError(DomainError):
    """O id referenciado não existe."""

    def __init__(self, recurso: Optional[str] = None):
        self.recurso = recurso
        super().__init__(f"{recurso} não encontrado" if recurso else "Não encontrado")


class EmptyError(DomainError):
    """Valor obrigatório ausente ou em branco."""

    def __init__(self, campo: Optional[str] = None):
        self.campo = campo
        super().__init__(f"{campo} vazio" if campo else "Valor vazio")


class UnauthorizedError(DomainError):
    """Credencial ou papel exigido ausente."""


class InvalidError(DomainError):
    """Regra de negócio ou formato violado; ``reason`` é só para diagnóstico."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class NonPositiveError(DomainError):
    """Valor numérico que deveria ser positivo não é."""


class DatabaseError(DomainError):
    """Falha reportada pelo armazenamento; ``detail`` vai apenas para os logs."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)
