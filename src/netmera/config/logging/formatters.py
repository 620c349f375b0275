"""Formatter JSON com campos obrigatórios."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos de REQUIRED_LOG_FIELDS.

    Exemplo de output:
        {"asctime": "...", "level": "WARNING",
         "logger": "netmera.api.http.transport",
         "message": "netmera_retry_attempt_failed",
         "correlation_id": "5f0c...", "service": "netmera_client",
         "status_code": 503, "attempt": 1}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
