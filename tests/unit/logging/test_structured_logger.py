"""
Tests unitaires pour Logging - Structured Logger
"""

import json
import re
from typing import List

import pytest

from aerolink.logging import (
    InvalidLogLevelError,
    IStructuredLogger,
    LogConfig,
    LogEntry,
    LogLevel,
    StructuredLogger,
    null_logger,
)


def make_logger(min_level: LogLevel = LogLevel.TRACE, **config) -> tuple:
    lines: List[str] = []
    logger = StructuredLogger(
        "test",
        config=LogConfig(min_level=min_level, **config),
        output_handler=lines.append,
    )
    return logger, lines


class TestJsonOutput:
    """Sortie JSON structurée."""

    def test_implements_interface(self) -> None:
        """StructuredLogger implémente IStructuredLogger."""
        logger, _ = make_logger()
        assert isinstance(logger, IStructuredLogger)

    def test_output_is_json_line(self) -> None:
        """Une ligne JSON par log."""
        logger, lines = make_logger()
        logger.info("client", "connected")

        assert len(lines) == 1
        parsed = json.loads(lines[0])
        assert parsed["level"] == "INFO"
        assert parsed["module"] == "client"
        assert parsed["message"] == "connected"
        assert parsed["logger"] == "test"
        assert parsed["correlation_id"] == logger.correlation_id

    def test_timestamp_iso8601_utc(self) -> None:
        """Timestamp ISO 8601 avec millisecondes et Z."""
        logger, _ = make_logger()
        entry = logger.info("client", "connected")

        assert entry is not None
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", entry.timestamp)

    def test_extra_included(self) -> None:
        """Données extra dans le JSON."""
        logger, lines = make_logger()
        logger.info("client", "connected", endpoint="10.0.0.1:3000")

        assert json.loads(lines[0])["extra"] == {"endpoint": "10.0.0.1:3000"}

    def test_fixed_correlation_id(self) -> None:
        """Correlation ID fixé par la configuration."""
        logger, _ = make_logger(correlation_id="corr-1")
        entry = logger.info("client", "x")
        assert entry.correlation_id == "corr-1"


class TestLevels:
    """Filtrage par niveau."""

    def test_below_threshold_filtered(self) -> None:
        """DEBUG filtré au seuil INFO."""
        logger, lines = make_logger(LogLevel.INFO)
        assert logger.debug("net", "dialing") is None
        assert lines == []

    def test_at_threshold_emitted(self) -> None:
        """WARN émis au seuil WARN."""
        logger, lines = make_logger(LogLevel.WARN)
        assert logger.warn("client", "failing over") is not None
        assert len(lines) == 1

    def test_off_silences_everything(self) -> None:
        """Seuil OFF: rien n'est émis, même ERROR."""
        logger, lines = make_logger(LogLevel.OFF)
        assert logger.error("client", "failed") is None
        assert lines == []

    def test_wrappers_levels(self) -> None:
        """Chaque wrapper utilise son niveau."""
        logger, _ = make_logger()
        logger.trace("m", "a")
        logger.debug("m", "b")
        logger.info("m", "c")
        logger.warn("m", "d")
        logger.error("m", "e")

        levels = [e.level for e in logger.get_entries()]
        assert levels == [
            LogLevel.TRACE,
            LogLevel.DEBUG,
            LogLevel.INFO,
            LogLevel.WARN,
            LogLevel.ERROR,
        ]

    def test_off_not_emittable(self) -> None:
        """OFF n'est pas un niveau de message."""
        logger, _ = make_logger()
        with pytest.raises(InvalidLogLevelError):
            logger.log(LogLevel.OFF, "m", "x")

    def test_invalid_level_type(self) -> None:
        """Niveau non-LogLevel refusé."""
        logger, _ = make_logger()
        with pytest.raises(InvalidLogLevelError):
            logger.log("INFO", "m", "x")  # type: ignore[arg-type]


class TestRedaction:
    """Redaction avant stockage et émission."""

    def test_sensitive_message_replaced(self) -> None:
        """Message avec password= remplacé en entier."""
        logger, lines = make_logger()
        entry = logger.info("auth", "using password=hunter2")

        assert entry.message == "[REDACTED]"
        assert "hunter2" not in lines[0]

    def test_sensitive_extra_masked(self) -> None:
        """Extra masqué par clé."""
        logger, lines = make_logger()
        logger.info("auth", "credentials loaded", password="hunter2", user="admin")

        extra = json.loads(lines[0])["extra"]
        assert extra == {"password": "[REDACTED]", "user": "admin"}

    def test_message_always_redacted(self) -> None:
        """mask_extra=False ne désactive jamais la redaction du message."""
        logger, lines = make_logger(mask_extra=False)
        entry = logger.info("auth", "user=admin password=hunter2")

        assert entry.message == "[REDACTED]"
        assert "hunter2" not in lines[0]

    def test_extra_masking_can_be_disabled(self) -> None:
        """mask_extra=False conserve les valeurs extra."""
        logger, _ = make_logger(mask_extra=False)
        entry = logger.info("client", "connected", token_ttl=30)
        assert entry.extra == {"token_ttl": 30}

    def test_sanitize_exposed(self) -> None:
        """sanitize() applique le prédicat du logger."""
        logger, _ = make_logger()
        assert logger.sanitize("token=abc") == "[REDACTED]"
        assert logger.sanitize("plain") == "plain"


class TestEntries:
    """Entrées capturées."""

    def test_entries_captured(self) -> None:
        """get_entries retourne des LogEntry."""
        logger, _ = make_logger()
        logger.info("client", "a")
        logger.info("net", "b")

        entries = logger.get_entries()
        assert all(isinstance(e, LogEntry) for e in entries)
        assert [e.module for e in logger.get_entries_by_module("net")] == ["net"]

    def test_clear_entries(self) -> None:
        """clear_entries vide la capture."""
        logger, _ = make_logger()
        logger.info("client", "a")
        logger.clear_entries()
        assert logger.get_entries() == []

    def test_empty_name_rejected(self) -> None:
        """Nom vide refusé."""
        with pytest.raises(ValueError):
            StructuredLogger("  ")

    def test_null_logger_silent(self) -> None:
        """null_logger n'enregistre rien."""
        logger = null_logger()
        assert logger.error("client", "x") is None
        assert logger.get_entries() == []

    def test_entries_bounded(self) -> None:
        """Seules les max_entries dernières entrées sont conservées."""
        logger, lines = make_logger(max_entries=3)
        for i in range(10):
            logger.info("client", f"ping {i}")

        assert [e.message for e in logger.get_entries()] == ["ping 7", "ping 8", "ping 9"]
        assert len(lines) == 10

    def test_capture_disabled(self) -> None:
        """max_entries=0: émission sans capture."""
        logger, lines = make_logger(max_entries=0)
        logger.info("client", "a")

        assert logger.get_entries() == []
        assert len(lines) == 1

    def test_default_capture_bounded(self) -> None:
        """La capture est bornée par défaut."""
        assert LogConfig().max_entries is not None
