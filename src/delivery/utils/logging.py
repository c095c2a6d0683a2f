"""Logging configuration for the delivery domain.

Standard library logging carries the handlers; structlog renders the events.
Tick runners and command handlers log with key/value context so a single
dispatch or movement can be followed across log lines.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def current_environment() -> str:
    """Deployment environment, falling back to the Protean environment name."""
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """An explicit ``LOG_LEVEL`` wins over the per-environment default."""
    return os.getenv("LOG_LEVEL", LOG_LEVELS.get(current_environment(), "INFO")).upper()


def _rotating_file(path: Path, level: int | str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: str | None = None) -> None:
    """Route every log record to stdout, ``delivery.log`` and ``delivery_error.log``."""
    level = get_log_level()
    directory = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    directory.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating_file(directory / "delivery.log", level),
        _rotating_file(directory / "delivery_error.log", logging.ERROR),
    ]

    # Framework chatter stays out of the tick logs
    for noisy in ("protean", "asyncio", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def setup_structlog() -> None:
    """JSON lines in production and staging, readable console output elsewhere."""
    renderer = (
        structlog.processors.JSONRenderer()
        if current_environment() in ("production", "staging")
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str | None = None) -> None:
    setup_stdlib_logging(log_dir)
    setup_structlog()


def log_context(**kwargs):
    """Bind ``kwargs`` to every log line emitted inside the ``with`` block.

    Bindings live in context variables, so a tick running in a worker thread
    does not leak its context into other ticks.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
