"""Package-specific error classes.

Validators never raise. These errors are only used at the edges of the
package: strict pydantic fields and property validation that opts into
raising.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_widget_validation"


class WidgetValidationError(PydanticCustomError):
    """Custom exception for ryandata_widget_validation that wraps Pydantic errors.

    Inherits from PydanticCustomError so that raising it inside a pydantic
    validator surfaces as a regular ``pydantic.ValidationError`` entry.
    """

    @classmethod
    def from_response(
        cls,
        validation_type: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> WidgetValidationError:
        """Build an error from a failed validation response.

        Args:
            validation_type: Tag of the type the value was checked against.
            message: Diagnostic message of the failed response.
            value: The rejected input (stringified into the context).
            context: Additional context to include in the error.

        Returns:
            WidgetValidationError instance with package context.
        """
        ctx = {
            "package": PACKAGE_NAME,
            "validation_type": validation_type,
            "value": str(value) if value is not None else None,
            **(context or {}),
        }
        return cls("widget_validation", message, ctx)

