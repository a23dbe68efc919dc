"""Errors raised while moving a plan's cursor."""

from typing import Any, Optional

from .base import ReadingError


class NavigatorError(ReadingError):
    """Base class for navigation failures."""


class InvalidStepError(NavigatorError):
    """Step count is negative or not an integer."""

    def __init__(self, message: str, steps: Any = None,
                 direction: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.steps = steps
        self.direction = direction


class PlanStateError(NavigatorError):
    """A cursor that is not valid for the plan it belongs to."""

    def __init__(self, message: str, cursor: Optional[str] = None,
                 cyclic: Optional[bool] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.cursor = cursor
        self.cyclic = cyclic
