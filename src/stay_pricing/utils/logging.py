"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper for logging pricing engine operations

Usage:
    from stay_pricing.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Quote computed", extra={"scope_id": "property-42"})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new UUID-based correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID, or None if not set."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes every line with the correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def log_pricing_operation(
    logger: logging.Logger,
    operation: str,
    *,
    scope_id: str | None = None,
    check_in: str | None = None,
    check_out: str | None = None,
    nights: int | None = None,
    total_price: int | None = None,
    bookable: bool | None = None,
    error_code: str | None = None,
    **extra: Any,
) -> None:
    """Log a pricing operation with structured context.

    Caller-fixable failures are logged at WARNING, everything else at INFO.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "quote", "validate_profile")
        scope_id: Property or room identifier if relevant
        check_in: Requested check-in date
        check_out: Requested check-out date
        nights: Number of nights resolved
        total_price: Quote total in cents
        bookable: Whether the range can be booked
        error_code: ErrorCode value if the operation failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if scope_id:
        context["scope_id"] = scope_id
    if check_in:
        context["check_in"] = check_in
    if check_out:
        context["check_out"] = check_out
    if nights is not None:
        context["nights"] = nights
    if total_price is not None:
        context["total_price"] = total_price
    if bookable is not None:
        context["bookable"] = bookable
    if error_code:
        context["error_code"] = error_code

    context.update(extra)

    msg_parts = [f"Pricing operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error_code:
        logger.warning(message, extra=context)
    else:
        logger.info(message, extra=context)
