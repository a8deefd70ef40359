"""Structured logging for the library.

Every logger lives under the ``afinn_sentiment`` namespace so applications
can route or silence it with ``logging.getLogger("afinn_sentiment")``.
``setup_logging`` installs a handler on that namespace only; handlers the
application put on the root logger are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

from afinn_sentiment.core.config import LogFormat, get_settings

LIBRARY_LOGGER = "afinn_sentiment"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


class _LibraryHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces our handler, not someone else's."""


def _renderer(fmt: LogFormat) -> structlog.types.Processor:
    if fmt == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(level: str | None = None, fmt: LogFormat | None = None) -> logging.Logger:
    """Route ``afinn_sentiment.*`` events to stdout through structlog.

    Safe to call more than once. Returns the namespace logger.

    Args:
        level: Log level for the namespace. Default: settings.
        fmt: ``json`` or ``console``. Default: settings.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = _LibraryHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(fmt or settings.log_format),
            ],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in [h for h in library_logger.handlers if isinstance(h, _LibraryHandler)]:
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(log_level)
    # Our handler renders these events; the root must not print them again.
    library_logger.propagate = False
    return library_logger


def get_logger(name: str, **initial_context: str) -> structlog.stdlib.BoundLogger:
    """Logger for ``name`` under the ``afinn_sentiment`` namespace.

    ``get_logger("lexicon")`` and ``get_logger("afinn_sentiment.lexicon")``
    name the same logger.
    """
    if name != LIBRARY_LOGGER and not name.startswith(LIBRARY_LOGGER + "."):
        name = f"{LIBRARY_LOGGER}.{name}"
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
