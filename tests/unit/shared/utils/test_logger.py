"""
Logger Tests

Covers the manager lifecycle (install / uninstall), file rotation setup,
structured output and the module-level helpers.
"""

import json
import logging
from pathlib import Path

import pytest

import recordprobe.shared.utils.logger as logger_module
from recordprobe.shared.config import LoggingConfig
from recordprobe.shared.utils.logger import (
    PACKAGE_LOGGER,
    LoggerManager,
    StructuredFormatter,
    get_logger,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "recordprobe.core.runner", logging.WARNING, __file__, 10, "step failed", (), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """JSON formatting"""

    def test_basic_fields(self) -> None:
        payload = json.loads(StructuredFormatter().format(_record()))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "recordprobe.core.runner"
        assert payload["message"] == "step failed"

    def test_extra_fields_included(self) -> None:
        payload = json.loads(
            StructuredFormatter().format(_record(probe="required", attribute="name"))
        )
        assert payload["probe"] == "required"
        assert payload["attribute"] == "name"


class TestLoggerManager:
    """Manager configuration and lifecycle"""

    def test_normalize_defaults_and_bad_values(self) -> None:
        manager = LoggerManager({"level": "nonsense", "max_bytes": "abc", "backup_count": -3})
        assert manager.config["level"] == "INFO"
        assert manager.config["max_bytes"] == 10485760
        assert manager.config["backup_count"] == 0
        manager.uninstall()

    def test_file_path_maps_to_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "nested" / "probe.log"
        manager = LoggerManager({"to_file": True, "file_path": str(log_file)})

        assert "main" in manager.handlers
        assert log_file.parent.is_dir()
        manager.uninstall()

    def test_unusable_log_dir_disables_file_logging(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        manager = LoggerManager({"to_file": True, "log_file": str(blocker / "app.log")})

        assert "main" not in manager.handlers
        assert manager.config["to_file"] is False
        manager.uninstall()

    def test_install_and_uninstall(self) -> None:
        manager = LoggerManager({"level": "DEBUG"})
        package = manager.install()

        assert package.name == PACKAGE_LOGGER
        assert package.level == logging.DEBUG
        assert manager.handlers["console"] in package.handlers
        assert package.propagate is False

        manager.uninstall()

        assert manager.handlers["console"] not in package.handlers
        assert package.propagate is True

    def test_outside_logger_gets_handlers(self) -> None:
        manager = LoggerManager()
        outside = manager.get_logger("tests.somewhere")

        assert manager.handlers["console"] in outside.handlers
        assert manager.get_logger("tests.somewhere") is outside

        manager.uninstall()
        assert manager.handlers["console"] not in outside.handlers

    def test_package_child_relies_on_parent(self) -> None:
        manager = LoggerManager()
        child = manager.get_logger("recordprobe.core.runner")
        assert child.handlers == []
        manager.uninstall()


class TestModuleHelpers:
    """setup_logging / get_logger"""

    def test_get_logger_before_setup_is_plain(self) -> None:
        assert logger_module._logger_manager is None
        assert get_logger("recordprobe.x") is logging.getLogger("recordprobe.x")

    def test_setup_accepts_model(self) -> None:
        manager = setup_logging(LoggingConfig(level="ERROR"))
        assert manager.config["level"] == "ERROR"
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_setup_replaces_previous_manager(self) -> None:
        first = setup_logging({"level": "DEBUG"})
        second = setup_logging({"level": "WARNING"})

        package = logging.getLogger(PACKAGE_LOGGER)
        assert first.handlers["console"] not in package.handlers
        assert second.handlers["console"] in package.handlers

    @pytest.mark.parametrize("structured", [True, False])
    def test_formatter_choice(self, structured: bool) -> None:
        manager = setup_logging({"structured": structured})
        formatter = manager.handlers["console"].formatter
        assert isinstance(formatter, StructuredFormatter) is structured
