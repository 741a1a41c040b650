"""ryandata-widget-validation: type-driven validation and coercion of widget values.

This package decides whether an untyped value conforms to a declared
semantic type, coerces it when possible, and always hands back a usable
value:
- One validator per ValidationType (text, number, boolean, date, regex,
  object, array, table/chart/marker/options data, action selectors)
- An immutable registry mapping each type tag to its validator
- Batch validation of widget properties with an audit log
- Pydantic integration for model fields

Quick Start:
    >>> from ryandata_widget_validation import ValidationType, validate
    >>> response = validate(ValidationType.NUMBER, "42")
    >>> response.is_valid, response.parsed
    (True, 42)

    >>> validate("BOOLEAN", "yes").message
    'Value does not match type: boolean'

    # Validate a set of properties
    >>> from ryandata_widget_validation import validate_properties
    >>> result = validate_properties(
    ...     {"label": "Save", "isVisible": "true"},
    ...     {"label": ValidationType.TEXT, "isVisible": ValidationType.BOOLEAN},
    ... )
    >>> result.parsed
    {'label': 'Save', 'isVisible': True}
"""

from __future__ import annotations

from ryandata_widget_validation.constants import (
    URL_HTTP_VALIDATION_ERROR,
    URL_REGEX,
    WIDGET_TYPE_VALIDATION_ERROR,
)
from ryandata_widget_validation.models import (
    PACKAGE_NAME,
    VALIDATION_TYPES,
    PropertyValidationResult,
    ValidationResponse,
    ValidationType,
    WidgetValidationError,
)
from ryandata_widget_validation.parsers import (
    DateParseResult,
    PydanticDateParser,
    extract_text_argument,
)
from ryandata_widget_validation.protocols import (
    ArgumentExtractorProtocol,
    DateParserProtocol,
)
from ryandata_widget_validation.pydantic_ext import coerced
from ryandata_widget_validation.validation import (
    VALIDATORS,
    BaseTypeValidator,
    PropertyValidator,
    ValidatorRegistry,
    build_registry,
    get_validator,
    validate,
    validate_properties,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-widget-validation"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "validate",
    "get_validator",
    "build_registry",
    "VALIDATORS",
    "ValidatorRegistry",
    "validate_properties",
    "PropertyValidator",
    "coerced",
    # Models
    "ValidationType",
    "VALIDATION_TYPES",
    "ValidationResponse",
    "PropertyValidationResult",
    # Errors
    "PACKAGE_NAME",
    "WidgetValidationError",
    # Messages and patterns
    "WIDGET_TYPE_VALIDATION_ERROR",
    "URL_HTTP_VALIDATION_ERROR",
    "URL_REGEX",
    # Protocols
    "ArgumentExtractorProtocol",
    "DateParserProtocol",
    # Collaborators
    "DateParseResult",
    "PydanticDateParser",
    "extract_text_argument",
    # Validators
    "BaseTypeValidator",
]
