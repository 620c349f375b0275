"""Builder fluente do cliente Netmera.

Host e API key são validados na construção do builder; cada setter
opcional valida no momento em que é chamado (fail fast). build() monta a
cadeia de transporte e devolve o dispatcher.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import httpx

from netmera.api.http import (
    RetryPolicy,
    TransportConfig,
    build_authenticated_transport,
)
from netmera.api.http.retry_policy import MAX_RETRIES_LIMIT
from netmera.app.dispatcher import DEFAULT_MAX_WORKERS, NetmeraDispatcher
from netmera.config.logging import configure_logging
from netmera.config.settings import get_netmera_settings
from netmera.utils.errors import ConfigurationError
from netmera.utils.validation import must_between, not_empty, not_null

if TYPE_CHECKING:
    from netmera.config.settings import NetmeraSettings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRY_COUNT = 3


class NetmeraApiBuilder:
    """Acumula configurações e constrói o NetmeraDispatcher.

    Exemplo:
        api = (
            NetmeraApiBuilder("https://restapi.netmera.com", api_key)
            .with_max_retry_count(5)
            .with_call_timeout(60)
            .build()
        )
    """

    def __init__(self, target_host: str, api_key: str) -> None:
        self._target_host: str = not_empty(target_host, "Target Host")
        self._api_key: str = not_empty(api_key, "Rest Api Key")
        self._retry_policy = RetryPolicy()
        self._max_retry_count = DEFAULT_MAX_RETRY_COUNT
        self._connect_timeout = DEFAULT_TIMEOUT_SECONDS
        self._read_timeout = DEFAULT_TIMEOUT_SECONDS
        self._write_timeout = DEFAULT_TIMEOUT_SECONDS
        self._call_timeout = DEFAULT_TIMEOUT_SECONDS
        self._connection_pool: httpx.BaseTransport | None = None
        self._max_workers = DEFAULT_MAX_WORKERS

    @classmethod
    def from_settings(cls, settings: NetmeraSettings | None = None) -> NetmeraApiBuilder:
        """Cria builder a partir de NetmeraSettings (env quando None).

        Raises:
            ConfigurationError: Se as settings forem inválidas.
        """
        settings = settings or get_netmera_settings()
        errors = settings.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))
        return (
            cls(settings.target_host, settings.api_key)
            .with_connect_timeout(settings.connect_timeout_seconds)
            .with_read_timeout(settings.read_timeout_seconds)
            .with_write_timeout(settings.write_timeout_seconds)
            .with_call_timeout(settings.call_timeout_seconds)
            .with_max_retry_count(settings.max_retries)
        )

    def with_retry_policy(self, retry_policy: RetryPolicy) -> NetmeraApiBuilder:
        """Define a política de backoff; o limite vem de with_max_retry_count."""
        self._retry_policy = not_null(retry_policy, "Retry Policy")
        return self

    def with_connect_timeout(self, seconds: float) -> NetmeraApiBuilder:
        self._connect_timeout = must_between(0, math.inf, seconds, "Connection Timeout")
        return self

    def with_read_timeout(self, seconds: float) -> NetmeraApiBuilder:
        self._read_timeout = must_between(0, math.inf, seconds, "Read Timeout")
        return self

    def with_write_timeout(self, seconds: float) -> NetmeraApiBuilder:
        self._write_timeout = must_between(0, math.inf, seconds, "Write Timeout")
        return self

    def with_call_timeout(self, seconds: float) -> NetmeraApiBuilder:
        self._call_timeout = must_between(0, math.inf, seconds, "Call Timeout")
        return self

    def with_max_retry_count(self, max_retry_count: int) -> NetmeraApiBuilder:
        if isinstance(max_retry_count, bool) or not isinstance(max_retry_count, int):
            raise ConfigurationError("Max Retry Count deve ser inteiro")
        self._max_retry_count = int(
            must_between(0, MAX_RETRIES_LIMIT, max_retry_count, "Max Retry Count")
        )
        return self

    def with_connection_pool(self, connection_pool: httpx.BaseTransport) -> NetmeraApiBuilder:
        """Reusa um pool existente (ex.: create_connection_pool())."""
        self._connection_pool = not_null(connection_pool, "Connection Pool")
        return self

    def with_max_workers(self, max_workers: int) -> NetmeraApiBuilder:
        """Threads que executam as chamadas e esperas de backoff."""
        if isinstance(max_workers, bool) or not isinstance(max_workers, int):
            raise ConfigurationError("Max Workers deve ser inteiro")
        self._max_workers = int(must_between(1, 256, max_workers, "Max Workers"))
        return self

    def build(self) -> NetmeraDispatcher:
        config = TransportConfig(
            connect_timeout=self._connect_timeout,
            read_timeout=self._read_timeout,
            write_timeout=self._write_timeout,
            call_timeout=self._call_timeout,
            connection_pool=self._connection_pool,
        )
        policy = self._retry_policy.with_max_retries(self._max_retry_count)
        transport = build_authenticated_transport(config, self._api_key, policy)
        client = httpx.Client(
            base_url=self._target_host,
            transport=transport,
            timeout=config.to_httpx_timeout(),
        )
        logger.info(
            "netmera_client_created",
            extra={
                "target_host": self._target_host,
                "max_retries": policy.max_retries,
                "call_timeout": config.call_timeout,
            },
        )
        return NetmeraDispatcher(client, max_workers=self._max_workers)


def create_netmera_client(
    settings: NetmeraSettings | None = None,
    *,
    configure_logs: bool = False,
) -> NetmeraDispatcher:
    """Factory com configuração padrão a partir do ambiente.

    Com ``configure_logs=True`` também instala o logging JSON no nível de
    ``settings.log_level`` (NETMERA_LOG_LEVEL).
    """
    settings = settings or get_netmera_settings()
    builder = NetmeraApiBuilder.from_settings(settings)
    if configure_logs:
        configure_logging(level=settings.log_level)
    return builder.build()
