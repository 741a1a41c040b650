"""Validators for structured values: records and arrays."""

from __future__ import annotations

from typing import Any

from ryandata_widget_validation.constants import ARRAY_LABEL, OBJECT_LABEL
from ryandata_widget_validation.core.coercion import from_json, is_sequence, is_structured
from ryandata_widget_validation.models import ValidationResponse
from ryandata_widget_validation.validation.base import BaseTypeValidator


class ObjectValidator(BaseTypeValidator):
    """Validates structured values, decoding JSON text.

    Records and sequences pass as-is. Strings must decode to a record or
    sequence; anything else falls back to an empty dict.
    """

    label = OBJECT_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "object"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            return self.invalid({})
        if is_structured(value):
            return self.valid(value)
        if not isinstance(value, str):
            return self.invalid({})

        result = from_json(value)
        if not result.ok or not is_structured(result.value):
            return self.invalid({})
        return self.valid(result.value)


class ArrayValidator(BaseTypeValidator):
    """Validates ordered sequences, decoding JSON text.

    Element types are not checked here; shaped validators build on this.
    """

    label = ARRAY_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "array"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            return self.invalid([])

        parsed = value
        if isinstance(value, str):
            result = from_json(value)
            if not result.ok:
                return self.invalid([])
            parsed = result.value

        if not is_sequence(parsed):
            return self.invalid([])
        return self.valid(parsed)
