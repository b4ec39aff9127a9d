"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from freightdesk.infrastructure.logging import logger as logger_module


def _pin_stamp(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240630"),
    )


def _file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_builder_writes_dated_file_under_subdir(tmp_path, monkeypatch):
    """The built logger should log to logs/<subdir>/<stamp>_<prefix>.log."""
    _pin_stamp(monkeypatch, tmp_path)

    builder = logger_module.LoggerBuilder()
    statements_logger = (
        builder.name("freightdesk.test.statements")
        .subdir("statements")
        .prefix("statement_runs")
        .console(True)
        .level(logging.WARNING)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
        .console_handler(logger_module.LoggerBuilder._default_console_handler)
        .build()
    )

    assert statements_logger.name == "freightdesk.test.statements"
    assert statements_logger.level == logging.WARNING
    assert statements_logger.propagate is False
    [file_handler] = _file_handlers(statements_logger)
    expected = tmp_path / "logs" / "statements" / "20240630_statement_runs.log"
    assert file_handler.baseFilename == str(expected)
    assert expected.parent.is_dir()
    assert builder.build() is statements_logger
    assert len(statements_logger.handlers) == 2


def test_builder_without_console_has_only_file_handler(tmp_path, monkeypatch):
    _pin_stamp(monkeypatch, tmp_path)

    quiet = (
        logger_module.LoggerBuilder()
        .name("freightdesk.test.quiet")
        .console(False)
        .build()
    )

    assert len(quiet.handlers) == 1
    assert isinstance(quiet.handlers[0], logging.FileHandler)


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates(monkeypatch):
    """Logger methods should forward to the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    logger_module.Logger._instance = None

    logger = logger_module.Logger("freightdesk")
    logger.info("ledger loaded")
    logger.warning("unmapped code")
    logger.error("db down")
    logger.debug("amount missing")
    logger.critical("halt")
    logger.exception("boom")

    fake_logger.info.assert_called_with("ledger loaded")
    fake_logger.warning.assert_called_with("unmapped code")
    fake_logger.error.assert_called_with("db down")
    fake_logger.debug.assert_called_with("amount missing")
    fake_logger.critical.assert_called_with("halt")
    fake_logger.exception.assert_called_with("boom")
    assert logger_module.Logger("freightdesk") is logger
    logger_module.Logger._instance = None


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    built_subdirs: list[str] = []

    def _fake_build(self):
        built_subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_subdirs == ["app", "usage"]
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
