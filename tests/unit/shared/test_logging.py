from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass

from src.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "probe.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)
    assert logging.getLogger("httpx").level == logging.WARNING

    logger = get_logger(__name__)
    logger.info("structured log test")


def test_production_renders_json_to_given_stream(monkeypatch) -> None:
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    stream = io.StringIO()
    configure_logging(level="INFO", environment="production", stream=stream)

    logging.getLogger("third.party").warning("upstream slow")

    line = stream.getvalue().strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "upstream slow"
    assert record["level"] == "warning"
    assert record["logger"] == "third.party"


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None
    format: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_explicit_format_overrides_environment() -> None:
    stream = io.StringIO()
    configure_logging(
        level="INFO", environment="production", stream=stream, log_format="console"
    )

    logging.getLogger("third.party").warning("upstream slow")

    line = stream.getvalue().strip().splitlines()[-1]
    assert "upstream slow" in line
    assert not line.startswith("{")


def test_update_logging_from_settings_applies_format() -> None:
    stream = io.StringIO()
    settings = _Settings(
        logging=_LoggingSettings(level="INFO", format="json"),
        environment="development",
    )

    update_logging_from_settings(settings, stream=stream)
    logging.getLogger("third.party").warning("json anyway")

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "json anyway"
