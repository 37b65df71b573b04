# tests/test_logging.py

import json
import logging

from blockwatch.core.logging import (
    WatcherFormatter,
    WatcherLogger,
    LoggingMixin,
    log_with_context,
)


def make_record(message="blockNumber 5", **context):
    record = logging.LogRecord("blockwatch.test", logging.INFO, "", 0, message, (), None)
    for key, value in context.items():
        setattr(record, key, value)
    return record


def test_plain_format_appends_context():
    line = WatcherFormatter(include_context=True).format(make_record(block_number=5, tx_count=2))

    assert line.endswith("blockwatch.test - INFO - blockNumber 5 | block_number=5 tx_count=2")


def test_context_omitted_when_disabled():
    line = WatcherFormatter(include_context=False).format(make_record(block_number=5))

    assert line.endswith("blockNumber 5")


def test_structured_format_is_json():
    line = WatcherFormatter(include_context=True, structured=True).format(make_record(block_number=5))
    entry = json.loads(line)

    assert entry["message"] == "blockNumber 5"
    assert entry["level"] == "INFO"
    assert entry["context"] == {"block_number": 5}


def test_get_logger_namespaces_names():
    assert WatcherLogger.get_logger("cli.watch").name == "blockwatch.cli.watch"
    assert WatcherLogger.get_logger("blockwatch.core").name == "blockwatch.core"
    assert WatcherLogger.is_configured()


def test_file_handlers(tmp_path):
    WatcherLogger.configure(log_dir=tmp_path / "logs", log_level="INFO",
                            console_enabled=False, file_enabled=True, force=True)
    logger = WatcherLogger.get_logger("test.files")

    log_with_context(logger, logging.INFO, "informational", block_number=1)
    log_with_context(logger, logging.ERROR, "broken", block_number=2)
    for handler in logging.getLogger("blockwatch").handlers:
        handler.flush()

    main_log = (tmp_path / "logs" / "blockwatch.log").read_text()
    error_log = (tmp_path / "logs" / "blockwatch_errors.log").read_text()
    assert "informational" in main_log and "broken" in main_log
    assert "informational" not in error_log
    assert "broken | block_number=2" in error_log


def test_mixin_logger_uses_class_name(caplog):
    class Probe(LoggingMixin):
        pass

    probe = Probe()
    with caplog.at_level(logging.WARNING):
        probe.log_warning("lagging", head=10)

    assert probe.logger.name == f"blockwatch.{Probe.__module__}.Probe"
    assert caplog.records[-1].head == 10
