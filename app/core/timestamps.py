import re
from datetime import datetime, timezone

from app.core.exceptions import InvalidError

# Ex.: 2021-08-01 00:00:00.000+0000
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"
_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{4}$")


def formatar_timestamp(momento: datetime) -> str:
    """Formata com milissegundos e offset numérico (datetimes ingênuos são tratados como UTC)."""
    if momento.tzinfo is None:
        momento = momento.replace(tzinfo=timezone.utc)
    return (
        momento.strftime("%Y-%m-%d %H:%M:%S.")
        + f"{momento.microsecond // 1000:03d}"
        + momento.strftime("%z")
    )


def agora() -> str:
    """Timestamp atual em UTC no formato fixo."""
    return formatar_timestamp(datetime.now(timezone.utc))


def assert_timestamp_format(valor: str) -> None:
    if not isinstance(valor, str) or not _TIMESTAMP_RE.match(valor):
        raise InvalidError(f"Timestamp fora do formato esperado: {valor!r}")
    try:
        datetime.strptime(valor, TIMESTAMP_FORMAT)
    except ValueError:
        raise InvalidError(f"Timestamp inválido: {valor!r}")
