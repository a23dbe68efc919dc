"""
Plan text format errors.

Raised by the plan parser when the indented text cannot be turned into a
plan. The text is left untouched, so these are always recoverable: fix the
file and parse again.
"""

from typing import Optional

from .base import ReadingError


class ParseError(ReadingError):
    """Base class for malformed plan text."""


class EmptyPlanError(ParseError):
    """The text contains no entries."""

    def __init__(self, message: str = "cannot construct an empty plan", **kwargs):
        super().__init__(message, **kwargs)


class LeadingDescriptionError(ParseError):
    """An indented description line does not belong to any entry."""

    def __init__(self, message: Optional[str] = None, line_number: Optional[int] = None,
                 line: Optional[str] = None, **kwargs):
        if message is None:
            message = f"description on line {line_number} does not correspond to any entry"
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.line = line
