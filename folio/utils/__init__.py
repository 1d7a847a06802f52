"""
Shared utilities for folio.

Common functionality used across contexts:
- Settings loading
- Logger setup
- Debouncing
- Timestamps
"""

from folio.utils.config import load_settings
from folio.utils.timestamp import current_year, now

__all__ = ["load_settings", "current_year", "now"]
