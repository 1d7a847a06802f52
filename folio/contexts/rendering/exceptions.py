"""Custom exceptions for rendering context."""

from typing import Optional


class RenderError(Exception):
    """
    Exception raised when one section renderer fails.

    Attributes:
        message: Error description
        section: Name of the section being rendered (e.g., 'projects')
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.section = section
        self.original_error = original_error

        parts = [message]

        if section:
            parts.append(f"Section: {section}")

        if original_error:
            parts.append(f"Original error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
