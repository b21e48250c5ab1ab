"""Shared core utilities for the catalogue services.

Provides common health check and logging functionality across all services.
"""

from .health import ServiceHealth, HealthStatus
from .logging_config import (
    CORRELATION_ID_HEADER,
    setup_logging,
    get_logger,
    RequestLoggingMiddleware,
    set_request_context,
    generate_correlation_id,
    resolve_correlation_id,
    LoggerAdapter,
)

__all__ = [
    # Health checks
    "ServiceHealth",
    "HealthStatus",
    # Logging
    "CORRELATION_ID_HEADER",
    "setup_logging",
    "get_logger",
    "RequestLoggingMiddleware",
    "set_request_context",
    "generate_correlation_id",
    "resolve_correlation_id",
    "LoggerAdapter",
]
