"""Política declarativa de retry para falhas transitórias.

Define quais respostas/exceções são retentáveis, o formato do backoff e o
número máximo de novas tentativas. É imutável e compartilhada entre todas
as chamadas de um cliente.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

import httpx

from netmera.utils.errors import ConfigurationError
from netmera.utils.validation import must_between

TimeUnit = Literal["milliseconds", "seconds", "minutes"]

_UNIT_SECONDS: dict[str, float] = {
    "milliseconds": 0.001,
    "seconds": 1.0,
    "minutes": 60.0,
}

MAX_RETRIES_LIMIT = 50


def is_server_error(status_code: int) -> bool:
    """Status retentável padrão: qualquer 5xx."""
    return status_code > 499


@dataclass(frozen=True)
class RetryPolicy:
    """Política de retry com backoff exponencial limitado.

    Attributes:
        delay: Espera antes da primeira nova tentativa (na unidade ``unit``)
        max_delay: Teto de espera entre tentativas (na unidade ``unit``)
        unit: Unidade de ``delay`` e ``max_delay``
        factor: Multiplicador aplicado a cada nova tentativa
        max_retries: Novas tentativas além da primeira (0 a 50)
        retry_on: Exceções de conexão retentáveis
        retry_on_status: Predicado de status retentável
    """

    delay: float = 1.0
    max_delay: float = 10.0
    unit: TimeUnit = "seconds"
    factor: float = 2.0
    max_retries: int = 3
    retry_on: tuple[type[Exception], ...] = (httpx.NetworkError,)
    retry_on_status: Callable[[int], bool] = is_server_error

    def __post_init__(self) -> None:
        if self.unit not in _UNIT_SECONDS:
            raise ConfigurationError(
                f"Backoff Unit inválida: {self.unit}. "
                f"Válidas: {', '.join(sorted(_UNIT_SECONDS))}"
            )
        must_between(0, math.inf, self.delay, "Delay")
        must_between(self.delay, math.inf, self.max_delay, "Max Delay")
        must_between(1, math.inf, self.factor, "Backoff Factor")
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise ConfigurationError("Max Retry Count deve ser inteiro")
        must_between(0, MAX_RETRIES_LIMIT, self.max_retries, "Max Retry Count")

    def with_max_retries(self, max_retries: int) -> RetryPolicy:
        """Cópia da política com outro limite de novas tentativas."""
        return dataclasses.replace(self, max_retries=max_retries)

    def backoff_seconds(self, retry_number: int) -> float:
        """Espera antes da nova tentativa ``retry_number`` (0 = primeira)."""
        scaled = self.delay * (self.factor**retry_number)
        return min(scaled, self.max_delay) * _UNIT_SECONDS[self.unit]

    def should_retry_response(self, response: httpx.Response) -> bool:
        return self.retry_on_status(response.status_code)

    def should_retry_exception(self, exc: BaseException) -> bool:
        return isinstance(exc, self.retry_on)
