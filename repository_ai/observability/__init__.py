"""
Observability package.

Exports: configure_logging, log_with_context, log_exception_with_context, safe_log_value
"""

from repository_ai.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from repository_ai.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
]
