"""Value validator implementations.

This module provides one validator per ValidationType and the fixed table
that maps each type tag to its validator.
"""

from ryandata_widget_validation.validation.base import BaseTypeValidator
from ryandata_widget_validation.validation.primitives import (
    BooleanValidator,
    DateValidator,
    NumberValidator,
    RegexValidator,
    TextValidator,
)
from ryandata_widget_validation.validation.properties import (
    PropertyValidator,
    validate_properties,
)
from ryandata_widget_validation.validation.registry import (
    VALIDATORS,
    ValidatorRegistry,
    build_registry,
    get_validator,
    validate,
)
from ryandata_widget_validation.validation.selectors import (
    ActionSelectorValidator,
    ArrayActionSelectorValidator,
    is_valid_url,
)
from ryandata_widget_validation.validation.shaped import (
    ChartDataValidator,
    MarkersValidator,
    OptionsDataValidator,
    ShapedArrayValidator,
    TableDataValidator,
)
from ryandata_widget_validation.validation.structured import ArrayValidator, ObjectValidator

__all__ = [
    "BaseTypeValidator",
    # Primitives
    "BooleanValidator",
    "DateValidator",
    "NumberValidator",
    "RegexValidator",
    "TextValidator",
    # Structured
    "ArrayValidator",
    "ObjectValidator",
    # Shaped arrays
    "ChartDataValidator",
    "MarkersValidator",
    "OptionsDataValidator",
    "ShapedArrayValidator",
    "TableDataValidator",
    # Selectors
    "ActionSelectorValidator",
    "ArrayActionSelectorValidator",
    "is_valid_url",
    # Registry
    "VALIDATORS",
    "ValidatorRegistry",
    "build_registry",
    "get_validator",
    "validate",
    # Properties
    "PropertyValidator",
    "validate_properties",
]
