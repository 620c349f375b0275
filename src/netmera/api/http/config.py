"""Configuração de timeouts e pool de conexões do transporte."""

from __future__ import annotations

import math
from dataclasses import dataclass

import httpx

from netmera.utils.validation import must_between

# Mesmos padrões de um pool OkHttp: 5 conexões ociosas por até 5 minutos
DEFAULT_MAX_KEEPALIVE_CONNECTIONS = 5
DEFAULT_KEEPALIVE_EXPIRY_SECONDS = 300.0


def create_connection_pool(
    max_connections: int | None = None,
    max_keepalive_connections: int = DEFAULT_MAX_KEEPALIVE_CONNECTIONS,
    keepalive_expiry: float = DEFAULT_KEEPALIVE_EXPIRY_SECONDS,
) -> httpx.HTTPTransport:
    """Cria o pool de conexões reutilizável (um HTTPTransport do httpx).

    O mesmo pool pode ser compartilhado entre vários clientes via
    NetmeraApiBuilder.with_connection_pool.
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_keepalive_connections,
        keepalive_expiry=keepalive_expiry,
    )
    return httpx.HTTPTransport(limits=limits)


def _or_none(seconds: float) -> float | None:
    # 0 significa "sem timeout"
    return seconds if seconds > 0 else None


@dataclass(frozen=True)
class TransportConfig:
    """Timeouts (em segundos) e pool de conexões do cliente.

    Attributes:
        connect_timeout: Timeout para abrir a conexão
        read_timeout: Timeout de leitura de cada resposta
        write_timeout: Timeout de escrita de cada request
        call_timeout: Prazo total da chamada, incluindo retries e backoff
        connection_pool: Transporte base com o pool; None cria um novo
    """

    connect_timeout: float = 30.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    call_timeout: float = 30.0
    connection_pool: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        must_between(0, math.inf, self.connect_timeout, "Connection Timeout")
        must_between(0, math.inf, self.read_timeout, "Read Timeout")
        must_between(0, math.inf, self.write_timeout, "Write Timeout")
        must_between(0, math.inf, self.call_timeout, "Call Timeout")

    @property
    def call_deadline_seconds(self) -> float | None:
        """Prazo total da chamada ou None quando desativado."""
        return _or_none(self.call_timeout)

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Converte para httpx.Timeout (pool usa o timeout de conexão)."""
        return httpx.Timeout(
            connect=_or_none(self.connect_timeout),
            read=_or_none(self.read_timeout),
            write=_or_none(self.write_timeout),
            pool=_or_none(self.connect_timeout),
        )

    def resolve_connection_pool(self) -> httpx.BaseTransport:
        return self.connection_pool or create_connection_pool()
