"""Sentry error reporting: init and request context."""

from risk_api.core.sentry.config import (
    capture_exception,
    clear_sentry_context,
    init_sentry,
    set_sentry_context,
)

__all__ = [
    "init_sentry",
    "set_sentry_context",
    "clear_sentry_context",
    "capture_exception",
]
