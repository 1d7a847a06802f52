"""
Serving context logger.

Provides logging interface for serving context with automatic [serve] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[serve]"


def _log_debug(message: str) -> None:
    """Log debug message with [serve] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
