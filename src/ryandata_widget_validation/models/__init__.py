"""Validation models package.

Re-exports the result classes, the type enumeration and the error
classes.
"""

from __future__ import annotations

from ryandata_widget_validation.models.enums import VALIDATION_TYPES, ValidationType
from ryandata_widget_validation.models.errors import PACKAGE_NAME, WidgetValidationError
from ryandata_widget_validation.models.results import (
    PropertyValidationResult,
    ValidationResponse,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "WidgetValidationError",
    # Enums and constants
    "ValidationType",
    "VALIDATION_TYPES",
    # Results
    "ValidationResponse",
    "PropertyValidationResult",
]
