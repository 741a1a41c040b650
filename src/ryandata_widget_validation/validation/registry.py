"""Validator registry: the fixed table from type tag to validator.

The table is built once and exposed read-only. Use ``build_registry`` to
get a table wired to custom collaborators.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from ryandata_widget_validation.models import ValidationResponse, ValidationType
from ryandata_widget_validation.protocols import ArgumentExtractorProtocol, DateParserProtocol
from ryandata_widget_validation.validation.base import BaseTypeValidator
from ryandata_widget_validation.validation.primitives import (
    BooleanValidator,
    DateValidator,
    NumberValidator,
    RegexValidator,
    TextValidator,
)
from ryandata_widget_validation.validation.selectors import (
    ActionSelectorValidator,
    ArrayActionSelectorValidator,
)
from ryandata_widget_validation.validation.shaped import (
    ChartDataValidator,
    MarkersValidator,
    OptionsDataValidator,
    TableDataValidator,
)
from ryandata_widget_validation.validation.structured import ArrayValidator, ObjectValidator

ValidatorRegistry = Mapping[ValidationType, BaseTypeValidator]


def build_registry(
    extractor: ArgumentExtractorProtocol | None = None,
    date_parser: DateParserProtocol | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ValidatorRegistry:
    """Build a read-only validator table covering every ValidationType.

    Composite validators share the instances of the validators they build
    on (regex uses text, shaped arrays use array, and so on).

    Args:
        extractor: Argument extractor for action selectors.
        date_parser: Calendar parser for the date validator.
        clock: Source of the current time for date defaults.

    Returns:
        Immutable mapping from ValidationType to validator.

    Raises:
        ValueError: If a type tag has no validator.
    """
    text = TextValidator()
    array = ArrayValidator()
    action = ActionSelectorValidator(extractor)

    table: dict[ValidationType, BaseTypeValidator] = {
        ValidationType.TEXT: text,
        ValidationType.REGEX: RegexValidator(text),
        ValidationType.NUMBER: NumberValidator(),
        ValidationType.BOOLEAN: BooleanValidator(),
        ValidationType.OBJECT: ObjectValidator(),
        ValidationType.ARRAY: array,
        ValidationType.TABLE_DATA: TableDataValidator(array),
        ValidationType.CHART_DATA: ChartDataValidator(array),
        ValidationType.MARKERS: MarkersValidator(array),
        ValidationType.OPTIONS_DATA: OptionsDataValidator(array),
        ValidationType.DATE: DateValidator(date_parser, clock),
        ValidationType.ACTION_SELECTOR: action,
        ValidationType.ARRAY_ACTION_SELECTOR: ArrayActionSelectorValidator(action, array),
    }

    missing = [t.value for t in ValidationType if t not in table]
    if missing:
        raise ValueError(f"No validator registered for: {', '.join(missing)}")

    return MappingProxyType(table)


# Default table, built at import and never mutated
VALIDATORS: ValidatorRegistry = build_registry()


def get_validator(
    validation_type: ValidationType | str,
    registry: ValidatorRegistry | None = None,
) -> BaseTypeValidator:
    """Look up the validator for a type tag.

    Args:
        validation_type: A ValidationType or its string tag (e.g. "NUMBER").
        registry: Table to look in. Defaults to VALIDATORS.

    Returns:
        The validator for that type.

    Raises:
        ValueError: If the tag is not a known validation type.
    """
    table = registry if registry is not None else VALIDATORS
    try:
        key = ValidationType(validation_type)
        return table[key]
    except (ValueError, KeyError):
        available = ", ".join(sorted(t.value for t in table))
        raise ValueError(
            f"Unknown validation type: {validation_type}. Available types: {available}"
        ) from None


def validate(
    validation_type: ValidationType | str,
    value: Any,
    registry: ValidatorRegistry | None = None,
) -> ValidationResponse:
    """Validate a value against a type tag.

    Args:
        validation_type: A ValidationType or its string tag.
        value: The untyped input.
        registry: Table to look in. Defaults to VALIDATORS.

    Returns:
        ValidationResponse from the matching validator.

    Raises:
        ValueError: If the tag is not a known validation type.
    """
    return get_validator(validation_type, registry).validate(value)
