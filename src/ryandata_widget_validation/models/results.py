"""Result classes for validation operations.

This module contains dataclasses for the per-value validation response
and the aggregated result of validating a set of widget properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from abstract_validation_base import ProcessEntry, ProcessLog, ValidationResult


@dataclass(frozen=True)
class ValidationResponse:
    """Outcome of validating one raw value against one type.

    Attributes:
        is_valid: True if the value (after coercion) satisfies the type.
        parsed: The coerced value, or the type's default when invalid.
        message: Diagnostic naming the type; empty when valid.
    """

    is_valid: bool
    parsed: Any
    message: str = ""

    def as_tuple(self) -> tuple[bool, Any, str]:
        """Unpack as ``(is_valid, parsed, message)``."""
        return self.is_valid, self.parsed, self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape consumed by editors."""
        return {"isValid": self.is_valid, "parsed": self.parsed, "message": self.message}


@dataclass
class PropertyValidationResult:
    """Result of validating a mapping of widget properties.

    Mirrors a parse result: coerced values, per-property failures, a
    ValidationResult for pipeline consumers and a ProcessLog audit trail.
    """

    raw_input: dict[str, Any]
    parsed: dict[str, Any] = field(default_factory=dict)
    invalid_properties: dict[str, str] = field(default_factory=dict)
    validation: ValidationResult = field(default_factory=lambda: ValidationResult(is_valid=True))
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def is_valid(self) -> bool:
        """Check if every typed property validated."""
        return not self.invalid_properties

    def add_process_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Track a property that failed validation.

        Args:
            field: Name of the property.
            message: Diagnostic message from the validator.
            value: The rejected raw value (optional).
            context: Additional context dict (optional).
        """
        self.invalid_properties[field] = message
        self.validation.add_error(field=field, message=message, value=value)
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

    def add_process_cleaning(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "coercion",
    ) -> None:
        """Track a property whose value was coerced.

        Args:
            field: Name of the property that was coerced.
            original_value: The raw value before coercion.
            new_value: The value after coercion.
            reason: Explanation of the coercion.
            operation_type: Category of operation.
        """
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": operation_type},
        )
        self.process_log.cleaning.append(entry)

    def aggregate_logs(self) -> list[dict[str, Any]]:
        """Export coercion and error entries, sorted by timestamp.

        Returns:
            List of dicts suitable for pd.DataFrame().
        """
        entries = [
            {**entry.model_dump(), "source": "properties"}
            for entry in [*self.process_log.cleaning, *self.process_log.errors]
        ]
        return sorted(entries, key=lambda x: x.get("timestamp", ""))
