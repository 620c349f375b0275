"""Exceções compartilhadas do cliente Netmera."""

from .exceptions import (
    CallbackAlreadyInvokedError,
    ConfigurationError,
    NetmeraApiError,
    NetmeraException,
    RequestValidationError,
    ResponseDecodeError,
    TransportFailure,
)

__all__ = [
    "CallbackAlreadyInvokedError",
    "ConfigurationError",
    "NetmeraApiError",
    "NetmeraException",
    "RequestValidationError",
    "ResponseDecodeError",
    "TransportFailure",
]
