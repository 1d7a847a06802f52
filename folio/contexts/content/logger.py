"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
All content modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_result(source: str, content, elapsed_time: float) -> None:
    """Log a successful content load with per-section record counts."""
    _log_success(f"Portfolio data loaded successfully ({elapsed_time:.2f}s)")
    _log_debug(f"  Source: {source}")
    _log_debug(
        f"  Records: experience={len(content.experience)}, education={len(content.education)}, "
        f"projects={len(content.projects)}, certifications={len(content.certifications)}, "
        f"hobbies={len(content.hobbies)}"
    )


def log_load_failure(error: Exception) -> None:
    """Log a failed content load; the caller falls back to placeholder content."""
    _log_error("Error loading portfolio data, using fallback content")
    for line in str(error).splitlines():
        _log_error(f"  {line}")
