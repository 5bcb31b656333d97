"""
Structured logging helpers.

Values passed as log context go through safe_log_value first, so PDF bytes,
embedding vectors and long chunk texts show up as short summaries.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 300

# LogRecord attributes; passing one of these in `extra` raises KeyError.
RESERVED_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a context value for a log record.

    Args:
        value: Arbitrary value
        max_length: Strings longer than this are cut

    Returns:
        str: Short printable form
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, float) for v in value[:8]):
            return f"<vector dim={len(value)}>"
        return f"<{type(value).__name__} of {len(value)}>"
    if isinstance(value, dict):
        return f"<dict keys={sorted(map(str, value))[:10]}>"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    /,
    **context,
) -> None:
    """Log `message` at `level` with every context value made safe."""
    logger.log(level, message, extra=_safe_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    /,
    **context,
) -> None:
    """
    Log a failure with its traceback.

    Application errors contribute their `details` dict to the record, so a
    failed ingestion logs e.g. the document id and item index alongside the
    message.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: Extra key-value pairs
    """
    fields = dict(getattr(exc, "details", None) or {})
    fields.update(context)
    extra = _safe_extra(fields)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(getattr(exc, "message", None) or str(exc))
    logger.error(message, exc_info=exc, extra=extra)


def _safe_extra(context: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in RESERVED_KEYS else key): safe_log_value(val)
        for key, val in context.items()
    }
