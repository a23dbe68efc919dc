"""Root of the error hierarchy."""

from typing import Any, Optional


class ReadingError(Exception):
    """Base class for all errors raised by the reading package."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True
