"""
Exception handlers globais: convertem erros de domínio em ``{"msg", "status"}``
e registram os detalhes nos logs.
"""
import json
import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    AlreadyExistsError,
    DatabaseError,
    DomainError,
    EmptyError,
    InvalidError,
    NotFoundError,
    UnauthorizedError,
)
from app.utils.logger import logger


MENSAGENS_POR_STATUS = {
    status.HTTP_400_BAD_REQUEST: "Input inválido",
    status.HTTP_401_UNAUTHORIZED: "Credenciais invalidas",
    status.HTTP_404_NOT_FOUND: "Recurso não encontrado",
    status.HTTP_409_CONFLICT: "Recurso já existente",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Erro inesperado. Tente novamente mais tarde",
}


def status_http_para_erro(error: DomainError) -> int:
    """Tabela única de erro de domínio -> status HTTP."""
    if isinstance(error, AlreadyExistsError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, (EmptyError, InvalidError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"msg": MENSAGENS_POR_STATUS[status_code], "status": status_code},
    )


async def domain_exception_handler(request: Request, exc: DomainError):
    """
    Handler para erros de domínio.
    O motivo de InvalidError e o detalhe de DatabaseError só aparecem nos logs.
    """
    status_code = status_http_para_erro(exc)

    log_message = (
        f"[DOMAIN ERROR {status_code}] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {exc}"
    )
    if isinstance(exc, DatabaseError):
        logger.error(f"{log_message} | detalhe do banco: {exc.detail}")
    elif status_code >= 500:
        logger.error(log_message)
    else:
        logger.warning(log_message)

    return error_response(status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Erros de validação do corpo/parâmetros viram 400, como qualquer input inválido.
    """
    error_details = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "type": error.get("type", "unknown"),
            "message": error.get("msg", "Erro de validação"),
        }
        for error in exc.errors()
    ]
    logger.warning(
        f"[VALIDATION ERROR] {request.method} {request.url.path} - "
        f"{json.dumps(error_details, ensure_ascii=False)}"
    )
    return error_response(status.HTTP_400_BAD_REQUEST)


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handler para exceções não tratadas. Nunca devolve detalhes internos.
    """
    logger.error(
        f"[UNHANDLED EXCEPTION] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {str(exc)}"
    )
    logger.error(f"[UNHANDLED EXCEPTION] Traceback completo:\n{traceback.format_exc()}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
