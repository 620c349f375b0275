"""Transporte HTTP autenticado com retry para a REST API da Netmera."""

from netmera.api.http.config import TransportConfig, create_connection_pool
from netmera.api.http.retry_policy import RetryPolicy, TimeUnit
from netmera.api.http.transport import (
    ApiKeyTransport,
    CallTimeoutError,
    RetryTransport,
    build_authenticated_transport,
)

__all__ = [
    "ApiKeyTransport",
    "CallTimeoutError",
    "RetryPolicy",
    "RetryTransport",
    "TimeUnit",
    "TransportConfig",
    "build_authenticated_transport",
    "create_connection_pool",
]
