"""Custom exceptions for the content context."""

from typing import Optional


class ContentLoadError(Exception):
    """
    Exception raised when the content document cannot be loaded.

    Covers transport failures, non-success HTTP status, unreadable files,
    invalid JSON and malformed documents.

    Attributes:
        message: Error description
        source: Content source that was being loaded
        status_code: HTTP status code when the failure was a bad response
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source = source
        self.status_code = status_code
        self.original_error = original_error

        parts = [message]

        if source:
            parts.append(f"Source: {source}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidContentError(ValueError):
    """
    Exception raised when a content record has the wrong shape.

    Raised when a record that should be a JSON object (a job, a degree, the
    about block, ...) is something else, e.g. a string or a number.
    """

    pass
