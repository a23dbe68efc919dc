"""
Error classification for plan parsing, navigation and storage.

Every exception raised by the package derives from ReadingError, so callers
such as the CLI can surface any failure with a single handler.
"""

from .base import ReadingError
from .plan_format import (
    ParseError,
    EmptyPlanError,
    LeadingDescriptionError,
)
from .navigation import (
    NavigatorError,
    InvalidStepError,
    PlanStateError,
)
from .storage import (
    StorageError,
    StorageDirectoryMissingError,
    PlanNotFoundError,
    PlanAlreadyExistsError,
    CorruptPlanError,
    InvalidPlanNameError,
)
from .configuration import ConfigurationError

__all__ = [
    "ReadingError",
    # Plan text format
    "ParseError",
    "EmptyPlanError",
    "LeadingDescriptionError",
    # Navigation
    "NavigatorError",
    "InvalidStepError",
    "PlanStateError",
    # Storage
    "StorageError",
    "StorageDirectoryMissingError",
    "PlanNotFoundError",
    "PlanAlreadyExistsError",
    "CorruptPlanError",
    "InvalidPlanNameError",
    # Configuration
    "ConfigurationError",
]
