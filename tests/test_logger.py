"""Tests for progress sinks and the logger mixin."""
import logging
from unittest.mock import Mock

from rich.console import Console

from appcenter_uploader.console import ConsoleSink
from appcenter_uploader.exceptions import AppCenterError
from appcenter_uploader.logger import AppCenterLogger, LoggingSink


class Reporter(AppCenterLogger):
    def __init__(self, sink):
        self._sink = sink


def test_log_failure_returns_error_and_writes_once():
    sink = Mock()
    cause = ConnectionError("network timeout")

    error = Reporter(sink).log_failure("Create upload resource for app unsuccessful", cause)

    assert isinstance(error, AppCenterError)
    assert error.context == "Create upload resource for app unsuccessful"
    assert error.cause is cause
    sink.write.assert_called_once_with("Create upload resource for app unsuccessful: network timeout")


def test_log_failure_describes_empty_cause():
    sink = Mock()

    error = Reporter(sink).log_failure("stage", TimeoutError())

    assert str(error).startswith("stage: TimeoutError")


def test_log_ignores_sink_errors(caplog):
    sink = Mock()
    sink.write.side_effect = OSError("closed")

    with caplog.at_level(logging.WARNING, logger="appcenter_uploader.logger"):
        Reporter(sink).log("hello")

    assert "closed" in caplog.text


def test_logging_sink_forwards_to_logger(caplog):
    target = logging.getLogger("tests.sink")

    with caplog.at_level(logging.INFO, logger="tests.sink"):
        LoggingSink(target).write("Creating an upload resource for app.")

    assert caplog.records[-1].getMessage() == "Creating an upload resource for app."


def test_console_sink_prints_line():
    target = Console(record=True, width=120)

    ConsoleSink(target, prefix="").write("Create upload resource for app successful.")

    assert "Create upload resource for app successful." in target.export_text()
