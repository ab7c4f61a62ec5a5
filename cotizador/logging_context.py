"""Correlation ID logging context for tracing one quote through the pipeline.

Provides a quote_id-aware logger that attaches a correlation ID to every
log message, so the validate -> calculate -> summarize -> dispatch run
for a single submission can be followed in the logs.

Usage:
    from cotizador.logging_context import get_quote_logger, set_quote_id

    set_quote_id("QT-3F9A1C")
    logger = get_quote_logger(__name__)
    logger.info("Summary built")  # record.quote_id == "QT-3F9A1C"
"""

import logging
import uuid
from contextvars import ContextVar

_quote_id: ContextVar[str] = ContextVar("quote_id", default="NO_QUOTE_ID")


def new_quote_id() -> str:
    """Generate a short correlation ID for a quote submission."""
    return f"QT-{uuid.uuid4().hex[:6].upper()}"


def set_quote_id(quote_id: str) -> None:
    """Set the correlation ID for the current context."""
    _quote_id.set(quote_id)


def get_quote_id() -> str:
    """Retrieve the current correlation ID."""
    return _quote_id.get()


class QuoteIdFilter(logging.Filter):
    """Injects quote_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.quote_id = _quote_id.get()  # type: ignore[attr-defined]
        return True


def get_quote_logger(name: str) -> logging.Logger:
    """Return a logger with the QuoteIdFilter attached.

    The filter adds ``quote_id`` to each record so formatters can
    include ``%(quote_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, QuoteIdFilter) for f in logger.filters):
        logger.addFilter(QuoteIdFilter())
    return logger


def install_quote_id_filter(handler: logging.Handler) -> None:
    """Attach a QuoteIdFilter to a handler so every record it emits has quote_id.

    Handler filters also see records propagated from loggers that never
    went through ``get_quote_logger``, so ``%(quote_id)s`` is safe to use
    in that handler's format.
    """
    if not any(isinstance(f, QuoteIdFilter) for f in handler.filters):
        handler.addFilter(QuoteIdFilter())
