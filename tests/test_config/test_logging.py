"""Testes para netmera.config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter e integração com o correlation_id do despacho.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from netmera.app.observability import reset_correlation_id, set_correlation_id
from netmera.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from netmera.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "message", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Níveis válidos (case insensitive) são aplicados ao logger raiz."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_correlation_filter(self) -> None:
        """O handler instalado carrega o CorrelationIdFilter."""
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        """DEFAULT_SERVICE_NAME está definido."""
        assert DEFAULT_SERVICE_NAME == "netmera_client"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("netmera.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "netmera.test"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        """Filter adiciona correlation_id do getter e o service."""
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """correlation_id passado via extra tem precedência."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""

    def test_default_getter_reads_dispatch_correlation_id(self) -> None:
        """Sem getter explícito, configure_logging usa o id do contexto."""
        configure_logging()
        filter_ = next(
            f for f in logging.getLogger().handlers[0].filters
            if isinstance(f, CorrelationIdFilter)
        )
        token = set_correlation_id("dispatch-42")
        try:
            record = _record()
            filter_.filter(record)
        finally:
            reset_correlation_id(token)
        assert record.correlation_id == "dispatch-42"
        assert record.service == DEFAULT_SERVICE_NAME


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        """Saída é JSON com level/logger renomeados e extras preservados."""
        formatter = create_json_formatter()
        record = _record("netmera_retry_attempt_failed", name="netmera.api.logging")
        record.correlation_id = "abc-123"
        record.service = "netmera_client"
        record.status_code = 503

        output = json.loads(formatter.format(record))

        assert output["message"] == "netmera_retry_attempt_failed"
        assert output["logger"] == "netmera.api.logging"
        assert output["level"] == "INFO"
        assert output["correlation_id"] == "abc-123"
        assert output["status_code"] == 503


class TestLoggingIntegration:
    """Fluxo completo: configure, get_logger, log."""

    def test_full_logging_flow(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        get_logger("netmera.integration").info("netmera_call_success", extra={"status_code": 200})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["service"] == "integration_test"
        assert payload["correlation_id"] == "int-test-001"
        assert payload["status_code"] == 200
