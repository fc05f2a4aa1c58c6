"""Structlog configuration for qiitafetch."""

import logging
import sys

import structlog

from qiitafetch.config import ClientConfig, LogFormat


def configure_logging(config: ClientConfig | None = None) -> None:
    """
    Route qiitafetch diagnostics to stderr.

    Stdout is reserved for profile output (the CLI table or JSON), so both
    the stdlib root logger and structlog write to stderr. Colours are only
    used when stderr is a terminal. JSON output renders tracebacks inline.

    Args:
        config: Client settings providing log_level and log_format,
            defaults read from QIITAFETCH_* variables if None
    """
    if config is None:
        config = ClientConfig()

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    # Loggers are not cached so a later configure_logging call takes effect
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, bound to ``logger_name=component`` when given."""
    logger = structlog.get_logger()
    if component:
        logger = logger.bind(logger_name=component)
    return logger
