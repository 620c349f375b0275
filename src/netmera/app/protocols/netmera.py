"""Contrato público de despacho."""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from netmera.app.callback import NetmeraCallback


class NetmeraProtocol(Protocol):
    """Contrato mínimo do cliente Netmera."""

    def send_request(self, request: Any, callback: NetmeraCallback[Any]) -> Future[None]: ...

    def close(self) -> None: ...
