"""Contrato de entrega de resultado: callback single-shot.

O dispatcher injeta o decodificador de erro (set_error_decoder) logo antes
do despacho; a thread de trabalho chama deliver_response ou
deliver_exception exatamente uma vez, que por sua vez chamam on_success ou
on_failure.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Future
from typing import Generic, TypeVar

import httpx

from netmera.api.errors import decode_api_error
from netmera.utils.errors import (
    CallbackAlreadyInvokedError,
    NetmeraApiError,
    NetmeraException,
    ResponseDecodeError,
    TransportFailure,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorDecoder = Callable[[httpx.Response], NetmeraApiError]


class NetmeraCallback(ABC, Generic[T]):
    """Base para callbacks de despacho.

    Subclasses implementam on_success/on_failure e devem chamar
    ``super().__init__()``. ``on_failure`` recebe NetmeraApiError para erros
    estruturados e TransportFailure (ou ResponseDecodeError) para falhas
    genéricas.
    """

    def __init__(self) -> None:
        self._error_decoder: ErrorDecoder | None = None
        self._lock = threading.Lock()
        self._invoked = False

    @abstractmethod
    def on_success(self, result: T) -> None:
        """Recebe o valor decodificado (None para operações sem corpo)."""

    @abstractmethod
    def on_failure(self, error: NetmeraException) -> None:
        """Recebe a falha tipada da chamada."""

    @property
    def invoked(self) -> bool:
        return self._invoked

    def set_error_decoder(self, decoder: ErrorDecoder) -> None:
        self._error_decoder = decoder

    def deliver_response(
        self,
        response: httpx.Response,
        decode: Callable[[httpx.Response], T],
    ) -> None:
        """Decodifica a resposta e entrega sucesso ou erro estruturado."""
        if response.is_success:
            try:
                result = decode(response)
            except ResponseDecodeError as exc:
                self._complete(failure=exc)
                return
            self._complete(result=result)
            return

        decoder = self._error_decoder or decode_api_error
        failure: NetmeraException
        try:
            failure = decoder(response)
        except ResponseDecodeError as exc:
            failure = exc
        self._complete(failure=failure)

    def deliver_exception(self, exc: BaseException) -> None:
        """Entrega falha de transporte sem corpo estruturado."""
        status_code = None
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
        failure = TransportFailure(f"{type(exc).__name__}: {exc}", status_code=status_code)
        failure.__cause__ = exc
        self._complete(failure=failure)

    def _claim(self) -> None:
        with self._lock:
            if self._invoked:
                raise CallbackAlreadyInvokedError(
                    f"{type(self).__name__} já recebeu um resultado"
                )
            self._invoked = True

    def _complete(
        self,
        *,
        result: T | None = None,
        failure: NetmeraException | None = None,
    ) -> None:
        self._claim()
        try:
            if failure is not None:
                self.on_failure(failure)
            else:
                self.on_success(result)  # type: ignore[arg-type]
        except Exception:
            logger.exception(
                "netmera_callback_error",
                extra={"callback": type(self).__name__},
            )
            raise


class FunctionCallback(NetmeraCallback[T]):
    """Callback a partir de duas funções."""

    def __init__(
        self,
        on_success: Callable[[T], None],
        on_failure: Callable[[NetmeraException], None],
    ) -> None:
        super().__init__()
        self._on_success = on_success
        self._on_failure = on_failure

    def on_success(self, result: T) -> None:
        self._on_success(result)

    def on_failure(self, error: NetmeraException) -> None:
        self._on_failure(error)


class FutureCallback(NetmeraCallback[T]):
    """Callback que resolve um Future, para quem precisa esperar o resultado.

    Exemplo:
        callback = FutureCallback[GetPushStatsResponse]()
        api.send_request(GetPushStatsRequest(notification_key=42), callback)
        stats = callback.result(timeout=10)
    """

    def __init__(self) -> None:
        super().__init__()
        self.future: Future[T] = Future()

    def on_success(self, result: T) -> None:
        self.future.set_result(result)

    def on_failure(self, error: NetmeraException) -> None:
        self.future.set_exception(error)

    def result(self, timeout: float | None = None) -> T:
        """Bloqueia até o resultado; relança a falha entregue."""
        return self.future.result(timeout=timeout)
