"""Unit tests for toolbox.logging helpers."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from toolbox import config
from toolbox.logging import (
    CONSOLE_HANDLER_NAME,
    PROJECT_PREFIX,
    ThirdPartyPrefixFilter,
    config_console_handler,
    configure_logging,
    is_project_logger,
)

# pylint: disable=redefined-outer-name


def make_record(name: str) -> logging.LogRecord:
    """Build a minimal LogRecord for the given logger name."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.fixture
def project_logger() -> Iterator[logging.Logger]:
    """Yield the toolbox logger; undo handler and level changes on it and root."""
    loggers = [logging.getLogger(PROJECT_PREFIX), logging.getLogger()]
    saved = [(list(lg.handlers), lg.level) for lg in loggers]
    yield loggers[0]
    for lg, (handlers, level) in zip(loggers, saved):
        for handler in list(lg.handlers):
            if handler not in handlers:
                lg.removeHandler(handler)
                handler.close()
        lg.setLevel(level)


class TestThirdPartyPrefixFilter:
    """Tests for ThirdPartyPrefixFilter."""

    @staticmethod
    def test_third_party_records_get_prefix() -> None:
        """Records from other libraries get a bracketed prefix."""
        record = make_record("urllib3.connectionpool")
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == "[urllib3]"  # type: ignore[attr-defined]

    @staticmethod
    def test_project_records_get_empty_prefix() -> None:
        """Records from toolbox loggers get no prefix."""
        record = make_record("toolbox.domain.outcome")
        assert ThirdPartyPrefixFilter().filter(record) is True
        assert record.prefix == ""  # type: ignore[attr-defined]

    @staticmethod
    @pytest.mark.parametrize("name", ["toolbox", "toolbox.config"])
    def test_project_logger_names(name: str) -> None:
        """The toolbox logger itself and its children count as project loggers."""
        record = make_record(name)
        ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == ""  # type: ignore[attr-defined]

    @staticmethod
    def test_similar_names_are_third_party() -> None:
        """A logger merely starting with "toolbox" is not a project logger."""
        record = make_record("toolboxes.core")
        ThirdPartyPrefixFilter().filter(record)
        assert record.prefix == "[toolboxes]"  # type: ignore[attr-defined]
        assert not is_project_logger("toolboxes")


class TestConfigConsoleHandler:
    """Tests for config_console_handler."""

    @staticmethod
    def test_default_mode() -> None:
        """Normal mode uses the given level, a prefix format and the filter."""
        handler = config_console_handler(level=logging.INFO)

        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO
        assert handler.formatter is not None
        assert handler.formatter._fmt == "%(prefix)s %(message)s"  # pylint: disable=protected-access
        assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    @staticmethod
    def test_debug_mode_forces_debug_level() -> None:
        """Debug mode overrides the level and drops the prefix filter."""
        handler = config_console_handler(level=logging.ERROR, debug_mode=True)

        assert handler.level == logging.DEBUG
        assert handler.formatter is not None
        assert handler.formatter._fmt == "%(asctime)s %(name)s: %(message)s"  # pylint: disable=protected-access
        assert not handler.filters

    @staticmethod
    def test_level_defaults_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an explicit level TOOLBOX_LOG_LEVEL is used."""
        monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "info")
        assert config_console_handler().level == logging.INFO

    @staticmethod
    def test_invalid_environment_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
        """An invalid TOOLBOX_LOG_LEVEL surfaces as InvalidLogLevelError."""
        monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "loud")
        with pytest.raises(config.InvalidLogLevelError):
            config_console_handler()

    @staticmethod
    def test_no_color() -> None:
        """color=False disables the console color system."""
        handler = config_console_handler(level=logging.INFO, color=False)
        assert handler.console.color_system is None


class TestConfigureLogging:
    """Tests for configure_logging."""

    @staticmethod
    def test_attaches_handler_to_project_logger(project_logger: logging.Logger) -> None:
        """The handler goes on the toolbox logger, not the root logger."""
        handler = configure_logging(level=logging.DEBUG)

        assert handler in project_logger.handlers
        assert handler not in logging.getLogger().handlers
        assert handler.get_name() == CONSOLE_HANDLER_NAME
        assert project_logger.level == logging.DEBUG

    @staticmethod
    def test_reconfiguring_replaces_handler(project_logger: logging.Logger) -> None:
        """Calling configure_logging twice leaves a single console handler."""
        first = configure_logging(level=logging.INFO)
        second = configure_logging(level=logging.ERROR)

        consoles = [
            h for h in project_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME
        ]
        assert consoles == [second]
        assert first not in project_logger.handlers
        assert project_logger.level == logging.ERROR

    @staticmethod
    def test_root_mode_shows_third_party_records(
        project_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """With root=True third-party records reach the handler with a prefix."""
        handler = configure_logging(level=logging.INFO, root=True)
        seen: list[str] = []
        monkeypatch.setattr(handler, "emit", lambda r: seen.append(handler.format(r)))

        logging.getLogger("urllib3.pool").warning("retrying")

        root_logger = logging.getLogger()
        assert handler in root_logger.handlers
        assert handler not in project_logger.handlers
        assert root_logger.level == logging.INFO
        assert seen == ["[urllib3] retrying"]

    @staticmethod
    def test_switching_to_root_moves_handler(project_logger: logging.Logger) -> None:
        """Reconfiguring with root=True removes the handler from the toolbox logger."""
        first = configure_logging(level=logging.INFO)
        second = configure_logging(level=logging.INFO, root=True)

        assert first not in project_logger.handlers
        assert second in logging.getLogger().handlers
