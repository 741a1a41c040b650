"""Abstract base class for single-type value validators.

Each validator maps one raw value to a ValidationResponse for one semantic
type. Validators hold only their injected collaborators and never keep
state between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ryandata_widget_validation.constants import type_mismatch_message
from ryandata_widget_validation.models import ValidationResponse


class BaseTypeValidator(ABC):
    """Abstract base class for type validators.

    Subclasses set ``label`` (shown in messages) and implement ``validate``.

    Example:
        class UpperValidator(BaseTypeValidator):
            label = "upper"

            @property
            def name(self) -> str:
                return "upper"

            def validate(self, value: Any) -> ValidationResponse:
                if isinstance(value, str) and value.isupper():
                    return self.valid(value)
                return self.invalid("")
    """

    label: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...

    @abstractmethod
    def validate(self, value: Any) -> ValidationResponse:
        """Validate and coerce a raw value.

        Args:
            value: The untyped input.

        Returns:
            ValidationResponse with the coerced value or the type default.
        """
        ...

    def __call__(self, value: Any) -> ValidationResponse:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def message(self) -> str:
        """Type-mismatch message for this validator's label."""
        return type_mismatch_message(self.label)

    @staticmethod
    def valid(parsed: Any) -> ValidationResponse:
        """Build a successful response."""
        return ValidationResponse(is_valid=True, parsed=parsed)

    def invalid(self, parsed: Any, message: str | None = None) -> ValidationResponse:
        """Build a failed response.

        Args:
            parsed: The default (or preserved) value to hand back.
            message: Override for the type-mismatch message.
        """
        return ValidationResponse(
            is_valid=False,
            parsed=parsed,
            message=message if message is not None else self.message,
        )
