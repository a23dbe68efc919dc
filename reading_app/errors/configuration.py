"""Configuration errors."""

from typing import Any, Optional

from .base import ReadingError


class ConfigurationError(ReadingError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.recoverable = False
