"""
Navigation context logger.

Provides logging interface for navigation context with automatic [nav] prefix.
All navigation modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[nav]"


def _log_info(message: str) -> None:
    """Log info message with [nav] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [nav] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_transition(event, previous, current) -> None:
    """Log a state change caused by a navigation event."""
    changes = [
        f"{field}: {getattr(previous, field)!r} -> {getattr(current, field)!r}"
        for field in ("active_section_id", "is_mobile_menu_open", "is_loading", "is_scrolled")
        if getattr(previous, field) != getattr(current, field)
    ]
    _log_debug(f"{type(event).__name__}: {', '.join(changes)}")
