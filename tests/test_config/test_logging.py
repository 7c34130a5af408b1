"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
SecretRedactionFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REDACTED,
    REQUIRED_LOG_FIELDS,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    SecretRedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO, name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restaura handlers e nível do root após cada teste."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


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
        """Nível é case insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filters(self) -> None:
        """Handler recebe filters de correlation_id e de segredos."""
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SecretRedactionFilter) for f in filters)

    def test_valid_log_levels_constant(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "flow_gateway"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
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
        assert record.service == "service_name"


class TestSecretRedactionFilter:
    """Testes para SecretRedactionFilter."""

    @pytest.mark.parametrize("field", sorted(SENSITIVE_FIELDS))
    def test_sensitive_extra_is_redacted(self, field: str) -> None:
        record = _record()
        setattr(record, field, "top-secret")

        assert SecretRedactionFilter().filter(record) is True
        assert getattr(record, field) == REDACTED

    def test_other_fields_untouched(self) -> None:
        record = _record()
        record.error_kind = "decryption_failed"

        SecretRedactionFilter().filter(record)

        assert record.error_kind == "decryption_failed"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """Saída é JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _record("flow_request_failed", logging.WARNING, "test.logger")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.error_kind = "decryption_failed"

        output = json.loads(formatter.format(record))

        assert output["message"] == "flow_request_failed"
        assert output["logger"] == "test.logger"
        assert output["level"] == "WARNING"
        assert output["correlation_id"] == "abc-123"
        assert output["error_kind"] == "decryption_failed"


class TestLoggingIntegration:
    """Fluxo completo: configure, get_logger, log."""

    def test_emitted_json_carries_context_and_hides_secrets(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )

        get_logger("integration.test").warning(
            "flow_request_failed", extra={"aes_key": "00ff", "error_kind": "decryption_failed"}
        )

        line = capsys.readouterr().err.strip().splitlines()[-1]
        output = json.loads(line)
        assert output["service"] == "integration_test"
        assert output["correlation_id"] == "int-test-001"
        assert output["aes_key"] == REDACTED
        assert "00ff" not in line
