"""Timestamp helpers."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def current_year() -> int:
    """Current calendar year, as shown in the page footer."""
    return datetime.now().year
