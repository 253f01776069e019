"""
Error reports for the media proxy.
Failed upstream fetches are written to the dedicated error_reports logger
with enough context to find the mirror URL that broke.
"""

import logging
import json
import traceback
from typing import Any, Dict, Optional
from datetime import datetime


class ErrorReporter:
    """Structured error logging on top of a dedicated logger"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        message: str = "",
        include_traceback: bool = True
    ) -> None:
        """
        Log an error together with its context

        Args:
            error: The exception to report
            context: Extra context (url, method, attempt, etc.)
            message: Human readable prefix for the report
            include_traceback: Whether the traceback goes into the report
        """
        error_info = {
            "error_type": type(error).__name__,
            "error_message": str(error),
            "timestamp": datetime.now().isoformat(),
            "context": context or {},
            "custom_message": message
        }

        if include_traceback:
            error_info["traceback"] = traceback.format_exc()

        log_message = f"Error: {error_info['error_type']} - {error_info['error_message']}"
        if message:
            log_message = f"{message} | {log_message}"
        if context:
            log_message += f" | Context: {json.dumps(context, ensure_ascii=False, default=str)}"

        self.logger.error(log_message, exc_info=include_traceback, extra={
            "error_info": error_info
        })

    def log_fetch_error(
        self,
        error: Exception,
        method: str,
        url: str,
        attempt: str,
        status_code: Optional[int] = None
    ) -> None:
        """Report a transport failure while fetching from the mirror"""
        context = {
            "method": method,
            "url": url,
            "attempt": attempt,
            "status_code": status_code,
        }

        message = f"Mirror fetch failed ({attempt})"
        self.log_error(error, context, message)


# Initialised in main.py
error_reporter: Optional[ErrorReporter] = None


def get_error_reporter() -> ErrorReporter:
    """Return the process-wide ErrorReporter"""
    if error_reporter is None:
        raise RuntimeError("Error reporter not initialized. Call setup_error_reporting() first.")
    return error_reporter


def setup_error_reporting(error_logger: logging.Logger) -> None:
    """Bind the process-wide ErrorReporter to the given logger"""
    global error_reporter
    error_reporter = ErrorReporter(error_logger)
