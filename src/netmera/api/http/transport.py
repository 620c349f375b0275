"""Camadas de transporte httpx: autenticação e retry.

A cadeia montada por build_authenticated_transport é:

    ApiKeyTransport -> RetryTransport -> pool de conexões

A API key é injetada uma única vez; o RetryTransport reenvia o mesmo
request já autenticado.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import httpx

from netmera.api.constants import NETMERA_HEADER_KEY
from netmera.api.http.config import TransportConfig
from netmera.api.http.retry_policy import RetryPolicy
from netmera.api.logging import log_retry_attempt

logger = logging.getLogger(__name__)


class CallTimeoutError(httpx.TimeoutException):
    """Prazo total da chamada (tentativas + backoff) esgotado."""


class ApiKeyTransport(httpx.BaseTransport):
    """Injeta o header de API key em todo request de saída."""

    def __init__(
        self,
        transport: httpx.BaseTransport,
        api_key: str,
        header_name: str = NETMERA_HEADER_KEY,
    ) -> None:
        self._transport = transport
        self._api_key = api_key
        self._header_name = header_name

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.headers[self._header_name] = self._api_key
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()


_TIMEOUT_KEYS = ("connect", "read", "write", "pool")


def _cap_timeouts(request: httpx.Request, remaining: float) -> None:
    # O timeout de cada fase nunca ultrapassa o restante do prazo total
    current = request.extensions.get("timeout", {})
    capped: dict[str, float] = {}
    for key in _TIMEOUT_KEYS:
        value = current.get(key)
        capped[key] = remaining if value is None else min(value, remaining)
    request.extensions["timeout"] = capped


class RetryTransport(httpx.BaseTransport):
    """Reenvia requests com falha transitória conforme a RetryPolicy.

    A primeira resposta que não casa com o predicado de status é devolvida
    sem passar pelo caminho de retry. Ao esgotar as tentativas, devolve a
    última resposta ou relança a última exceção. Com ``call_timeout``, cada
    tentativa é limitada ao tempo restante e estourar o prazo levanta
    CallTimeoutError.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport,
        policy: RetryPolicy,
        call_timeout: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._transport = transport
        self._policy = policy
        self._call_timeout = call_timeout
        self._sleep = sleep
        self._clock = clock

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        deadline = self._clock() + self._call_timeout if self._call_timeout else None
        try:
            response = self._send(request, deadline)
        except CallTimeoutError:
            raise
        except Exception as exc:
            if not self._policy.should_retry_exception(exc):
                raise
            return self._retry(request, deadline, None, exc)

        if not self._policy.should_retry_response(response):
            return response
        return self._retry(request, deadline, response, None)

    def _retry(
        self,
        request: httpx.Request,
        deadline: float | None,
        last_response: httpx.Response | None,
        last_exc: Exception | None,
    ) -> httpx.Response:
        self._log_failed_attempt(1, request, last_response, last_exc)

        for retry_number in range(self._policy.max_retries):
            wait = self._policy.backoff_seconds(retry_number)
            if last_response is not None:
                # Libera a conexão da resposta descartada
                last_response.close()
            self._check_deadline(request, deadline, wait)
            self._sleep(wait)

            try:
                response = self._send(request, deadline)
            except CallTimeoutError:
                raise
            except Exception as exc:
                if not self._policy.should_retry_exception(exc):
                    raise
                last_response, last_exc = None, exc
            else:
                if not self._policy.should_retry_response(response):
                    return response
                last_response, last_exc = response, None

            self._log_failed_attempt(retry_number + 2, request, last_response, last_exc)

        if last_response is not None:
            return last_response
        assert last_exc is not None
        raise last_exc

    def _send(self, request: httpx.Request, deadline: float | None) -> httpx.Response:
        """Executa uma tentativa limitada ao tempo restante do prazo total."""
        if deadline is None:
            return self._transport.handle_request(request)

        remaining = deadline - self._clock()
        if remaining <= 0:
            raise self._deadline_error(request)
        _cap_timeouts(request, remaining)

        try:
            response = self._transport.handle_request(request)
        except httpx.TimeoutException as exc:
            if self._clock() >= deadline:
                raise self._deadline_error(request) from exc
            raise

        if self._clock() > deadline:
            response.close()
            raise self._deadline_error(request)
        return response

    def _check_deadline(
        self,
        request: httpx.Request,
        deadline: float | None,
        wait: float,
    ) -> None:
        if deadline is not None and self._clock() + wait > deadline:
            raise self._deadline_error(request)

    def _deadline_error(self, request: httpx.Request) -> CallTimeoutError:
        return CallTimeoutError(
            f"Prazo total de {self._call_timeout}s esgotado",
            request=request,
        )

    def _log_failed_attempt(
        self,
        attempt: int,
        request: httpx.Request,
        response: httpx.Response | None,
        exc: Exception | None,
    ) -> None:
        log_retry_attempt(
            attempt,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code if response is not None else None,
            error_type=type(exc).__name__ if exc is not None else None,
        )

    def close(self) -> None:
        self._transport.close()


def build_authenticated_transport(
    config: TransportConfig,
    api_key: str,
    policy: RetryPolicy,
    sleep: Callable[[float], None] = time.sleep,
) -> ApiKeyTransport:
    """Monta a cadeia autenticação -> retry -> pool."""
    retry = RetryTransport(
        config.resolve_connection_pool(),
        policy,
        call_timeout=config.call_deadline_seconds,
        sleep=sleep,
    )
    return ApiKeyTransport(retry, api_key)
