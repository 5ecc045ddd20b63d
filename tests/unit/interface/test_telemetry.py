"""Unit tests for ProjectTelemetry."""
import logging
from unittest.mock import MagicMock

from rich.logging import RichHandler

from variant_registry.interface.telemetry import ProjectTelemetry


def test_handshake_prints_banner():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.handshake()
    tel.console.print.assert_called()
    tel.logger.info.assert_called_once_with("Hello")


def test_step_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.step("Done")
    tel.console.print.assert_called_once()
    tel.logger.info.assert_called_once_with("Done")


def test_error_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.error("Failed")
    tel.console.print.assert_called_once()
    tel.logger.error.assert_called_once_with("Failed")


def test_warning_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.warning("Careful")
    tel.logger.warning.assert_called_once_with("Careful")


def test_debug_logs_only():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.debug("Detail")
    tel.logger.debug.assert_called_once_with("Detail")
    tel.console.print.assert_not_called()


def test_logger_named_after_project():
    assert ProjectTelemetry("Shop", "red", "Hi").logger.name == "shop"


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        ProjectTelemetry.configure_logging("DEBUG")
        ProjectTelemetry.configure_logging("WARNING")
        rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_messages_reach_stderr_once(capsys):
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        ProjectTelemetry.configure_logging("INFO")
        tel = ProjectTelemetry("Once", "blue", "Hello")
        tel.step("unique-step-line")
        tel.error("unique-error-line")
        err = capsys.readouterr().err
        assert err.count("unique-step-line") == 1
        assert err.count("unique-error-line") == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
