"""
Tests for bootstrap, the service container and the logger.

Tests verify:
- bootstrap() binds the logger and presenter once
- reset() drops every binding
- resolve_or_default() falls back when nothing is bound
- RecursiveLogger only writes to the sinks its config enables
"""

import logging
from unittest.mock import MagicMock

import pytest

from cargo_recursive.core import bootstrap, get_container, reset
from cargo_recursive.core.di import resolve_or_default
from cargo_recursive.core.interfaces import ILogger, IPresenter
from cargo_recursive.core.models.config import LoggingConfig
from cargo_recursive.core.settings import RecursiveSettings
from cargo_recursive.presenters import ConsolePresenter
from cargo_recursive.services.logging import NullLogger, RecursiveLogger


def close_handlers(name: str) -> None:
    stdlib_logger = logging.getLogger(name)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()


class TestBootstrap:
    def test_binds_core_services(self):
        container = bootstrap(RecursiveSettings())

        assert isinstance(container.resolve(IPresenter), ConsolePresenter)
        assert isinstance(container.resolve(ILogger), RecursiveLogger)

    def test_logger_is_created_once(self):
        container = bootstrap(RecursiveSettings())

        assert container.resolve(ILogger) is container.resolve(ILogger)

    def test_second_call_keeps_bindings(self):
        first = bootstrap(RecursiveSettings())
        presenter = first.resolve(IPresenter)

        second = bootstrap(RecursiveSettings(output={"color": False}))

        assert second is first
        assert second.resolve(IPresenter) is presenter

    def test_reset_drops_bindings(self):
        bootstrap(RecursiveSettings())

        reset()

        assert get_container().lookup(ILogger) is None

    def test_resolve_unbound_raises(self):
        with pytest.raises(LookupError, match="ILogger is not registered"):
            get_container().resolve(ILogger)

    def test_register_instance_replaces_binding(self):
        container = bootstrap(RecursiveSettings())
        fake = MagicMock()

        container.register_instance(IPresenter, fake)

        assert container.resolve(IPresenter) is fake


class TestResolveOrDefault:
    def test_falls_back_to_default(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)

    def test_prefers_binding(self):
        container = bootstrap(RecursiveSettings())

        assert resolve_or_default(ILogger, NullLogger) is container.resolve(ILogger)


class TestRecursiveLogger:
    def test_no_sinks_by_default(self):
        name = "cargo_recursive.test.silent"

        RecursiveLogger.from_config(LoggingConfig(), name=name)

        handlers = logging.getLogger(name).handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]
        close_handlers(name)

    def test_file_sink_respects_level(self, tmp_path):
        name = "cargo_recursive.test.file"
        log_file = tmp_path / "logs" / "cargo-recursive.log"
        logger = RecursiveLogger.from_config(
            LoggingConfig(level="info", file=True), name=name, log_file=log_file
        )

        logger.debug("hidden %s", "detail")
        logger.info("visited %d directories", 3)
        close_handlers(name)

        content = log_file.read_text()
        assert "INFO" in content
        assert "visited 3 directories" in content
        assert "hidden" not in content

    def test_console_sink_uses_stderr(self, capsys):
        name = "cargo_recursive.test.console"
        logger = RecursiveLogger.from_config(
            LoggingConfig(level="WARNING", console=True), name=name
        )

        logger.info("not shown")
        logger.warning("config %s ignored", "x.toml")
        close_handlers(name)

        captured = capsys.readouterr()
        assert "config x.toml ignored" in captured.err
        assert "not shown" not in captured.err
        assert captured.out == ""

    def test_recreating_replaces_handlers(self, tmp_path):
        name = "cargo_recursive.test.replace"
        RecursiveLogger.from_config(
            LoggingConfig(file=True), name=name, log_file=tmp_path / "x.log"
        )

        RecursiveLogger.from_config(LoggingConfig(), name=name)

        assert [type(h) for h in logging.getLogger(name).handlers] == [logging.NullHandler]
        close_handlers(name)

    def test_null_logger_accepts_everything(self):
        logger = NullLogger()

        logger.debug("a %s", 1)
        logger.error("b")
