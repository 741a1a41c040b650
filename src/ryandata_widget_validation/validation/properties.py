"""Validation of a whole set of widget properties.

The caller supplies which ValidationType applies to which property; this
module runs the matching validators and collects the outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from abstract_validation_base import BaseValidator, ValidationResult

from ryandata_widget_validation.models import (
    PACKAGE_NAME,
    PropertyValidationResult,
    ValidationType,
    WidgetValidationError,
)
from ryandata_widget_validation.validation.registry import ValidatorRegistry, get_validator

logger = logging.getLogger(__name__)

PropertyTypes = Mapping[str, "ValidationType | str"]


def _was_coerced(original: Any, parsed: Any) -> bool:
    if parsed is original:
        return False
    return type(parsed) is not type(original) or parsed != original


def validate_properties(
    properties: Mapping[str, Any],
    types: PropertyTypes,
    *,
    registry: ValidatorRegistry | None = None,
    errors: str = "coerce",
) -> PropertyValidationResult:
    """Validate each property against its declared type.

    Properties without a declared type pass through untouched. Declared
    types for properties that are not present are ignored.

    Args:
        properties: Raw property values keyed by property name.
        types: Declared ValidationType (or tag) per property name.
        registry: Validator table. Defaults to the built-in one.
        errors: How to handle invalid properties:
            - "coerce": Record them and use the type defaults
            - "raise": Raise WidgetValidationError after validating all

    Returns:
        PropertyValidationResult with parsed values, failures and audit log.

    Raises:
        ValueError: If ``errors`` is unknown or a declared tag is unknown.
        WidgetValidationError: If errors="raise" and a property is invalid.
    """
    if errors not in ("coerce", "raise"):
        raise ValueError(f"Unknown errors mode: {errors}. Available modes: coerce, raise")

    result = PropertyValidationResult(raw_input=dict(properties))

    for name, value in properties.items():
        declared = types.get(name)
        if declared is None:
            result.parsed[name] = value
            continue

        validator = get_validator(declared, registry)
        response = validator.validate(value)
        result.parsed[name] = response.parsed

        if not response.is_valid:
            result.add_process_error(
                name,
                response.message,
                value,
                context={"validation_type": ValidationType(declared).value},
            )
        elif _was_coerced(value, response.parsed):
            result.add_process_cleaning(
                name,
                value,
                response.parsed,
                reason=f"Coerced to {validator.label}",
            )

    if result.invalid_properties:
        logger.debug("Invalid properties: %s", ", ".join(result.invalid_properties))
        if errors == "raise":
            details = "; ".join(f"{k}: {v}" for k, v in result.invalid_properties.items())
            raise WidgetValidationError(
                "widget_validation",
                f"Validation failed: {details}",
                {"package": PACKAGE_NAME, "properties": list(result.invalid_properties)},
            )

    return result


class PropertyValidator(BaseValidator[Mapping[str, Any]]):
    """Pipeline-compatible validator for a mapping of widget properties.

    Example:
        >>> builder = ValidatorPipelineBuilder("widget")
        >>> builder.add(PropertyValidator({"label": ValidationType.TEXT}))
        >>> pipeline = builder.build()
    """

    def __init__(
        self,
        types: PropertyTypes,
        registry: ValidatorRegistry | None = None,
    ) -> None:
        """Initialize property validator.

        Args:
            types: Declared ValidationType (or tag) per property name.
            registry: Validator table. Defaults to the built-in one.
        """
        self._types = dict(types)
        self._registry = registry

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "widget_properties"

    def validate(self, item: Mapping[str, Any]) -> ValidationResult:
        """Validate the properties.

        Args:
            item: Raw property values keyed by property name.

        Returns:
            ValidationResult with one error per invalid property.
        """
        return validate_properties(item, self._types, registry=self._registry).validation
