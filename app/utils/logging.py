"""structlog configuration shared by every pokescript module.

Log output goes to stderr so stdout carries nothing but sprite, title and
list output.  The level comes from ``POKESCRIPT_LOG_LEVEL`` (default
``WARNING``), which keeps ordinary runs silent.
"""

import logging
import os
import sys

import structlog

_DEFAULT_LEVEL = "WARNING"

_configured = False


def _level_from_env() -> int:
    name = os.environ.get("POKESCRIPT_LOG_LEVEL", _DEFAULT_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names.
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    """Configure structlog to render key/value events on stderr.

    Args:
        level: A ``logging`` level number or name.  Defaults to the
            ``POKESCRIPT_LOG_LEVEL`` env var.
    """
    global _configured

    if level is None:
        level_no = _level_from_env()
    elif isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level_no = resolved if isinstance(resolved, int) else logging.WARNING
    else:
        level_no = level

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        # Resolve sys.stderr per call so redirected streams are honoured.
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a named structlog logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
