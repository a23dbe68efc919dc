"""
Plan storage errors.

These come from the plans directory and the files in it. They are not
recoverable by retrying; the user has to add, rename or repair a plan.
"""

from typing import Optional

from .base import ReadingError


class StorageError(ReadingError):
    """Base class for plan storage failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target
        self.recoverable = False


class StorageDirectoryMissingError(StorageError):
    """The plans directory has not been created yet."""


class PlanNotFoundError(StorageError):
    """No stored plan has the requested name."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"plan '{name}' does not exist", **kwargs)
        self.name = name


class PlanAlreadyExistsError(StorageError):
    """A stored plan with the same name is already present."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"plan '{name}' already exists", **kwargs)
        self.name = name


class CorruptPlanError(StorageError):
    """A plan file exists but does not hold a valid plan document."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class InvalidPlanNameError(StorageError):
    """A plan name cannot be used as a file name inside the plans directory."""

    def __init__(self, name: str, reason: str, **kwargs):
        super().__init__(f"invalid plan name '{name}': {reason}", **kwargs)
        self.name = name
