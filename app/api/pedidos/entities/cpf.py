import re

from app.core.exceptions import EmptyError, InvalidError

_CPF_RE = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$|^\d{11}$")

# Cliente anônimo do totem
CPF_CONVIDADO = "000.000.000-00"


def _digito_verificador(digitos: str) -> int:
    peso = len(digitos) + 1
    soma = sum(int(d) * (peso - i) for i, d in enumerate(digitos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


class Cpf:
    """CPF validado; guarda apenas os 11 dígitos."""

    def __init__(self, numero: str):
        if numero is None or not numero.strip():
            raise EmptyError("cpf")
        numero = numero.strip()

        if numero == CPF_CONVIDADO:
            self._numero = "0" * 11
            return

        if not _CPF_RE.match(numero):
            raise InvalidError("CPF")
        digitos = re.sub(r"\D", "", numero)
        if (
            _digito_verificador(digitos[:9]) != int(digitos[9])
            or _digito_verificador(digitos[:10]) != int(digitos[10])
        ):
            raise InvalidError("CPF")
        self._numero = digitos

    @property
    def numero(self) -> str:
        return self._numero

    def is_convidado(self) -> bool:
        return self._numero == "0" * 11

    def formatado(self) -> str:
        n = self._numero
        return f"{n[:3]}.{n[3:6]}.{n[6:9]}-{n[9:]}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cpf):
            return NotImplemented
        return self._numero == other._numero

    def __hash__(self) -> int:
        return hash(self._numero)

    def __str__(self) -> str:
        return self._numero

    def __repr__(self) -> str:
        return f"Cpf({self._numero!r})"
