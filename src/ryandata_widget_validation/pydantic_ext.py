"""Pydantic integration.

Lets pydantic model fields reuse the validators:

    >>> from typing import Annotated, Any
    >>> from pydantic import BaseModel
    >>> class ChartProps(BaseModel):
    ...     data: Annotated[Any, coerced(ValidationType.CHART_DATA)]
    ...     visible: Annotated[Any, coerced(ValidationType.BOOLEAN, strict=True)]
"""

from __future__ import annotations

from typing import Any

from pydantic import BeforeValidator

from ryandata_widget_validation.models import ValidationType, WidgetValidationError
from ryandata_widget_validation.validation.registry import ValidatorRegistry, get_validator


def coerced(
    validation_type: ValidationType | str,
    *,
    strict: bool = False,
    registry: ValidatorRegistry | None = None,
) -> BeforeValidator:
    """Build a pydantic BeforeValidator running a widget validator.

    Args:
        validation_type: Type the field value is validated against.
        strict: If True, invalid values raise instead of using the default.
        registry: Validator table. Defaults to the built-in one.

    Returns:
        BeforeValidator for use in ``Annotated[...]``.

    Raises:
        ValueError: If the tag is not a known validation type.
    """
    validator = get_validator(validation_type, registry)
    tag = ValidationType(validation_type).value

    def _coerce(value: Any) -> Any:
        response = validator.validate(value)
        if strict and not response.is_valid:
            raise WidgetValidationError.from_response(tag, response.message, value)
        return response.parsed

    return BeforeValidator(_coerce)
