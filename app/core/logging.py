"""
Privacy-safe logging module.
CRITICAL: Never log payloads, names, contact details or warning text.
Only log: requestId, latencyMs, status, errorCode and aggregate counts.
"""
import logging
import sys
from typing import Any, Optional

from app.core.config import get_settings


def setup_logging() -> None:
    """Configure application logging with privacy-safe format."""
    settings = get_settings()

    # Determine log level based on environment
    log_level = logging.DEBUG if settings.service_env == "dev" else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class SafeLogger:
    """
    Privacy-safe logger wrapper.
    Only allows logging of allow-listed context fields.
    """

    SAFE_FIELDS = frozenset({
        "request_id",
        "latency_ms",
        "status",
        "status_code",
        "error_code",
        "method",
        "path",
        "payload_chars",
        "max_chars",
        "warning_count",
        "vendor_count",
        "budget_item_count",
        "task_count",
        "profile_field_count",
        "exception_class",
    })

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _format_safe_context(self, context: dict[str, Any]) -> str:
        """Format only safe fields from context."""
        safe_items = []
        for key, value in context.items():
            if key in self.SAFE_FIELDS:
                safe_items.append(f"{key}={value}")
        return " | ".join(safe_items) if safe_items else ""

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        ctx = self._format_safe_context(context)
        full_message = f"{message} | {ctx}" if ctx else message
        self._logger.log(level, full_message)

    def info(self, message: str, **context: Any) -> None:
        """Log info with safe context only."""
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        """Log warning with safe context only."""
        self._log(logging.WARNING, message, context)

    def error(
        self,
        message: str,
        error_code: Optional[str] = None,
        **context: Any
    ) -> None:
        """
        Log error with safe context only.
        NEVER log exception messages, they may echo user text.
        """
        if error_code:
            context["error_code"] = error_code
        self._log(logging.ERROR, message, context)

    def debug(self, message: str, **context: Any) -> None:
        """Log debug with safe context only."""
        self._log(logging.DEBUG, message, context)


def get_safe_logger(name: str) -> SafeLogger:
    """Get a privacy-safe logger instance."""
    return SafeLogger(name)
