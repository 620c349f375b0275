"""Dispatcher tipado: request + callback -> chamada HTTP assíncrona.

send_request valida e monta o httpx.Request na thread do chamador (falhas
aqui são síncronas) e agenda a execução em um pool de threads próprio. O
resultado chega ao callback na thread de trabalho, exatamente uma vez.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from netmera.api.endpoints import Operation, resolve_operation
from netmera.api.errors import decode_api_error
from netmera.api.logging import log_api_error, log_success
from netmera.app.observability import (
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    import httpx

    from netmera.app.callback import ErrorDecoder, NetmeraCallback

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class NetmeraDispatcher:
    """Cliente Netmera: um ponto de entrada polimórfico por tipo de request.

    Não guarda estado por chamada; o httpx.Client (host, transporte
    autenticado e pool) e o pool de threads são compartilhados e somente
    leitura após a construção.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
        error_decoder: ErrorDecoder = decode_api_error,
    ) -> None:
        self._client = client
        self._error_decoder = error_decoder
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="netmera-dispatch",
        )

    def __enter__(self) -> NetmeraDispatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send_request(self, request: Any, callback: NetmeraCallback[Any]) -> Future[None]:
        """Despacha ``request`` sem bloquear.

        Args:
            request: Request tipado (ou response paginada para a próxima página)
            callback: Recebe o resultado exatamente uma vez

        Returns:
            Future concluído quando o callback terminar; resultados e falhas
            trafegam apenas pelo callback.

        Raises:
            TypeError: Tipo de request não suportado.
            RequestValidationError: Response paginada sem ``next_page``.
        """
        operation = resolve_operation(request)
        callback.set_error_decoder(self._error_decoder)
        http_request = operation.build_request(self._client, request)

        correlation_id = generate_correlation_id()
        logger.debug(
            "netmera_send_request_started",
            extra={
                "operation": operation.name,
                "request_type": type(request).__name__,
                "correlation_id": correlation_id,
            },
        )
        return self._executor.submit(
            self._execute, operation, http_request, callback, correlation_id
        )

    def _execute(
        self,
        operation: Operation,
        http_request: httpx.Request,
        callback: NetmeraCallback[Any],
        correlation_id: str,
    ) -> None:
        token = set_correlation_id(correlation_id)
        try:
            try:
                response = self._client.send(http_request)
            except Exception as exc:
                logger.warning(
                    "netmera_transport_failure",
                    extra={"operation": operation.name, "error_type": type(exc).__name__},
                )
                callback.deliver_exception(exc)
                return

            try:
                self._log_outcome(operation, response)
                callback.deliver_response(response, operation.decode)
            finally:
                response.close()
        finally:
            reset_correlation_id(token)

    def _log_outcome(self, operation: Operation, response: httpx.Response) -> None:
        if response.is_success:
            log_success(operation.name, response.status_code)
        else:
            log_api_error(operation.name, response.status_code)

    def close(self) -> None:
        """Aguarda as chamadas em andamento e libera threads e conexões."""
        self._executor.shutdown(wait=True)
        self._client.close()

