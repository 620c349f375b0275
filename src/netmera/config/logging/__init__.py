"""Logging estruturado (JSON) do cliente Netmera.

Uso:
    from netmera.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="billing-worker")

    logger = get_logger(__name__)
    logger.info("netmera_call_done", extra={"status_code": 200})

O cliente nunca configura logging por conta própria; a aplicação que o
usa decide se chama configure_logging.
"""

from netmera.config.logging.config import configure_logging, get_logger
from netmera.config.logging.filters import CorrelationIdFilter
from netmera.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
