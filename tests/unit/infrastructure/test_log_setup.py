"""Tests for infrastructure/log_setup.py."""

import io
import logging
from collections.abc import Iterator

import pytest
from rich.console import Console
from rich.logging import RichHandler

from packagelint.infrastructure.log_setup import LOG_LEVEL_ENV_VAR, configure_logging


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    logger = logging.getLogger("packagelint")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _rich_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if isinstance(handler, RichHandler)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        logger = configure_logging()
        assert logger.name == "packagelint"
        assert logger.level == logging.WARNING

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert configure_logging().level == logging.DEBUG

    def test_explicit_level(self) -> None:
        assert configure_logging(logging.INFO).level == logging.INFO
        assert configure_logging("error").level == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")

    def test_idempotent(self) -> None:
        configure_logging()
        logger = configure_logging()
        assert len(_rich_handlers(logger)) == 1

    def test_writes_to_console(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, force_terminal=False)
        configure_logging("INFO", console=console)
        logging.getLogger("packagelint.tests").info("hello from a rule")
        assert "hello from a rule" in buffer.getvalue()
