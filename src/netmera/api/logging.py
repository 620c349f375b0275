"""Helpers de logging para chamadas à Netmera (sem API key nem payloads)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_retry_attempt(
    attempt: int,
    *,
    method: str,
    path: str,
    status_code: int | None = None,
    error_type: str | None = None,
) -> None:
    """Loga tentativa falha que disparou (ou esgotou) o retry."""
    logger.warning(
        "netmera_retry_attempt_failed",
        extra={
            "attempt": attempt,
            "method": method,
            "path": path,
            "status_code": status_code,
            "error_type": error_type,
        },
    )


def log_api_error(operation: str, status_code: int) -> None:
    """Loga resposta não-2xx devolvida pela API."""
    logger.warning(
        "netmera_api_error",
        extra={"operation": operation, "status_code": status_code},
    )


def log_success(operation: str, status_code: int) -> None:
    logger.debug(
        "netmera_call_success",
        extra={"operation": operation, "status_code": status_code},
    )
