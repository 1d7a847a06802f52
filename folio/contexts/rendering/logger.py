"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_missing_mount(section: str, selector: str) -> None:
    """Mount points are optional; a missing one is only worth a debug line."""
    _log_debug(f"{section}: mount point {selector} not found, skipping")


def log_render_pass(rendered: list, failures: list) -> None:
    """
    Log the outcome of a full render pass.

    Args:
        rendered: Names of sections that rendered
        failures: RenderError instances for sections that failed
    """
    if not failures:
        _log_success(f"All content rendered successfully ({len(rendered)} sections)")
        return

    _log_error(f"Rendered {len(rendered)} sections, {len(failures)} failed")
    for failure in failures:
        for line in str(failure).splitlines():
            _log_error(f"  {line}")
