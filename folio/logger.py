"""
Application logger.

Provides logging interface for the page bootstrap and the process-wide error
handlers with automatic [app] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[app]"


def _log_info(message: str) -> None:
    """Log info message with [app] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [app] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [app] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_exception(message: str, error) -> None:
    """
    Log error message with [app] prefix and the traceback attached.

    Args:
        message: Log message
        error: Exception instance or (type, value, traceback) tuple
    """
    logger.opt(exception=error).error(f"{CONTEXT_PREFIX} {message}")
