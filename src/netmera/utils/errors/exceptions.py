"""Hierarquia de exceções do cliente Netmera.

Somente ConfigurationError é levantada de forma síncrona. As demais são
entregues ao callback (on_failure) e nunca propagadas por send_request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netmera.api.errors import ErrorBody


class NetmeraException(Exception):
    """Base para todas as falhas do cliente."""


class ConfigurationError(NetmeraException, ValueError):
    """Configuração ausente, vazia ou fora do intervalo permitido."""


class RequestValidationError(NetmeraException, ValueError):
    """Request não pode ser despachado (ex.: página seguinte inexistente)."""


class NetmeraApiError(NetmeraException):
    """Resposta não-2xx decodificada em erro estruturado."""

    def __init__(self, status_code: int, error: ErrorBody) -> None:
        super().__init__(f"Netmera API error {status_code}: {error.code} {error.message}")
        self.status_code = status_code
        self.error = error

    @property
    def code(self) -> int | str | None:
        return self.error.code

    @property
    def message(self) -> str | None:
        return self.error.message


class TransportFailure(NetmeraException):
    """Falha de rede/protocolo sem corpo estruturado.

    A exceção original do httpx fica disponível em ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(TransportFailure):
    """Corpo de resposta mal formado para o tipo esperado."""


class CallbackAlreadyInvokedError(NetmeraException, RuntimeError):
    """Callback single-shot recebeu uma segunda entrega."""
