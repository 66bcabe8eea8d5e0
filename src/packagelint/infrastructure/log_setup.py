"""Logging setup for hosts that embed packagelint.

The library only creates module loggers; it never configures handlers on import.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "PACKAGELINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _level_from_env() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()


def configure_logging(
    level: int | str | None = None,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich handler to the "packagelint" logger.

    Idempotent: a second call replaces the handler instead of adding another.

    Args:
        level: Log level. None = $PACKAGELINT_LOG_LEVEL, else WARNING.
        console: Rich console to write to. None = stderr.

    Returns:
        The configured "packagelint" logger.

    Raises:
        ValueError: If level is an unknown level name.
    """
    resolved = level if level is not None else _level_from_env()
    if isinstance(resolved, str):
        numeric = logging.getLevelName(resolved.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {resolved!r}")
        resolved = numeric

    logger = logging.getLogger("packagelint")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return logger
