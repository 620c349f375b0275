"""Settings da integração com a REST API da Netmera.

Centraliza a leitura de variáveis de ambiente; o builder consome estas
settings via NetmeraApiBuilder.from_settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from netmera.config.logging.config import VALID_LOG_LEVELS

DEFAULT_TARGET_HOST: str = "https://restapi.netmera.com"


@dataclass(frozen=True)
class NetmeraSettings:
    """Configurações do cliente Netmera.

    Attributes:
        target_host: URL base da REST API
        api_key: REST API key do painel Netmera
        connect_timeout_seconds: Timeout de conexão (0 = sem limite)
        read_timeout_seconds: Timeout de leitura (0 = sem limite)
        write_timeout_seconds: Timeout de escrita (0 = sem limite)
        call_timeout_seconds: Prazo total da chamada, retries incluídos (0 = sem limite)
        max_retries: Máximo de novas tentativas para falhas transitórias
        log_level: Nível sugerido para configure_logging
    """

    target_host: str = DEFAULT_TARGET_HOST
    api_key: str = ""

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: float = 30.0
    write_timeout_seconds: float = 30.0
    call_timeout_seconds: float = 30.0

    max_retries: int = 3

    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.target_host:
            errors.append("NETMERA_TARGET_HOST não configurado")

        if not self.api_key:
            errors.append("NETMERA_API_KEY não configurado")

        for name, value in (
            ("NETMERA_CONNECT_TIMEOUT_SECONDS", self.connect_timeout_seconds),
            ("NETMERA_READ_TIMEOUT_SECONDS", self.read_timeout_seconds),
            ("NETMERA_WRITE_TIMEOUT_SECONDS", self.write_timeout_seconds),
            ("NETMERA_CALL_TIMEOUT_SECONDS", self.call_timeout_seconds),
        ):
            if value < 0:
                errors.append(f"{name} deve ser >= 0")

        if not 0 <= self.max_retries <= 50:
            errors.append("NETMERA_MAX_RETRIES deve estar entre 0 e 50")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"NETMERA_LOG_LEVEL inválido: {self.log_level}")

        return errors


def _load_from_env() -> NetmeraSettings:
    """Carrega NetmeraSettings a partir de variáveis de ambiente."""
    return NetmeraSettings(
        target_host=os.getenv("NETMERA_TARGET_HOST", DEFAULT_TARGET_HOST),
        api_key=os.getenv("NETMERA_API_KEY", ""),
        connect_timeout_seconds=float(os.getenv("NETMERA_CONNECT_TIMEOUT_SECONDS", "30")),
        read_timeout_seconds=float(os.getenv("NETMERA_READ_TIMEOUT_SECONDS", "30")),
        write_timeout_seconds=float(os.getenv("NETMERA_WRITE_TIMEOUT_SECONDS", "30")),
        call_timeout_seconds=float(os.getenv("NETMERA_CALL_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("NETMERA_MAX_RETRIES", "3")),
        log_level=os.getenv("NETMERA_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_netmera_settings() -> NetmeraSettings:
    """Retorna instância cacheada de NetmeraSettings."""
    return _load_from_env()
