"""Validators for arrays whose elements must have a specific shape.

All of them run the array validator first and then check every element.
One malformed element rejects the whole collection.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ryandata_widget_validation.constants import (
    CHART_DATA_LABEL,
    MARKERS_LABEL,
    OPTIONS_DATA_LABEL,
    TABLE_DATA_LABEL,
)
from ryandata_widget_validation.models import ValidationResponse
from ryandata_widget_validation.validation.base import BaseTypeValidator
from ryandata_widget_validation.validation.structured import ArrayValidator


class ShapedArrayValidator(BaseTypeValidator):
    """Array validator with a per-element predicate.

    Subclasses override ``is_valid_element``; the default requires a record.
    """

    def __init__(self, array_validator: ArrayValidator | None = None) -> None:
        """Initialize shaped array validator.

        Args:
            array_validator: Validator used for the array step.
        """
        self._array_validator = array_validator or ArrayValidator()

    def is_valid_element(self, element: Any) -> bool:
        """Check a single element of the collection."""
        return isinstance(element, Mapping)

    def validate(self, value: Any) -> ValidationResponse:
        response = self._array_validator.validate(value)
        if not response.is_valid:
            return self.invalid(response.parsed)
        if not all(self.is_valid_element(element) for element in response.parsed):
            return self.invalid([])
        return response


class TableDataValidator(ShapedArrayValidator):
    """Validates table rows: an array of records."""

    label = TABLE_DATA_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "table_data"


class ChartDataValidator(ShapedArrayValidator):
    """Validates chart series data: an array of records."""

    label = CHART_DATA_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "chart_data"


class MarkersValidator(ShapedArrayValidator):
    """Validates map markers: an array of records."""

    label = MARKERS_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "markers"


class OptionsDataValidator(ShapedArrayValidator):
    """Validates select options.

    Every element must be a record with string ``label`` and ``value``.
    """

    label = OPTIONS_DATA_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "options_data"

    def is_valid_element(self, element: Any) -> bool:
        return (
            isinstance(element, Mapping)
            and isinstance(element.get("label"), str)
            and isinstance(element.get("value"), str)
        )
