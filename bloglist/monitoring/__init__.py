"""Logging and observability helpers."""

from bloglist.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    redact_secrets,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact_secrets",
    "sanitize_headers",
    "sanitize_log_message",
]
