"""Validators for scalar types: text, regex, number, boolean and date."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from ryandata_widget_validation.constants import (
    BOOLEAN_LABEL,
    DATE_LABEL,
    NUMBER_LABEL,
    REGEX_LABEL,
    TEXT_LABEL,
)
from ryandata_widget_validation.core.coercion import (
    compile_pattern,
    is_number,
    is_structured,
    to_number,
    to_pretty_json,
    to_text,
)
from ryandata_widget_validation.models import ValidationResponse
from ryandata_widget_validation.parsers.dates import PydanticDateParser
from ryandata_widget_validation.protocols import DateParserProtocol
from ryandata_widget_validation.validation.base import BaseTypeValidator


class TextValidator(BaseTypeValidator):
    """Validates text values.

    ``None`` is "not yet set" and passes unchanged. Records and sequences
    are rejected, with their pretty-printed JSON handed back for display.
    Any other scalar is stringified.
    """

    label = TEXT_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "text"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            return self.valid(value)
        if is_structured(value):
            return self.invalid(to_pretty_json(value))

        result = to_text(value)
        if not result.ok:
            return self.invalid("")
        return self.valid(result.value)


class RegexValidator(BaseTypeValidator):
    """Validates regular expression sources.

    Runs the text validator first, then checks that the text compiles.
    """

    label = REGEX_LABEL

    def __init__(self, text_validator: TextValidator | None = None) -> None:
        """Initialize regex validator.

        Args:
            text_validator: Validator used for the text step.
        """
        self._text_validator = text_validator or TextValidator()

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "regex"

    def validate(self, value: Any) -> ValidationResponse:
        response = self._text_validator.validate(value)
        if response.is_valid and response.parsed is not None:
            if not compile_pattern(response.parsed).ok:
                return self.invalid(response.parsed)
        return response


class NumberValidator(BaseTypeValidator):
    """Validates numbers, coercing numeric strings and booleans."""

    label = NUMBER_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "number"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            return self.invalid(0)
        if is_number(value):
            return self.valid(value)

        result = to_number(value)
        if not result.ok:
            return self.invalid(0)
        return self.valid(result.value)


class BooleanValidator(BaseTypeValidator):
    """Validates booleans, accepting the strings "true" and "false".

    Unlike the other validators, an unrecognized value is handed back
    unchanged instead of being replaced with a default.
    """

    label = BOOLEAN_LABEL

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "boolean"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            return self.invalid(False)
        if isinstance(value, bool):
            return self.valid(value)
        if value == "true" or value == "false":
            return self.valid(value == "true")
        return self.invalid(value)


class DateValidator(BaseTypeValidator):
    """Validates calendar dates.

    A missing value defaults to today at midnight; an unparseable value
    defaults to the current instant.
    """

    label = DATE_LABEL

    def __init__(
        self,
        date_parser: DateParserProtocol | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize date validator.

        Args:
            date_parser: Calendar parser. Defaults to PydanticDateParser.
            clock: Source of the current time. Defaults to datetime.now.
        """
        self._date_parser = date_parser or PydanticDateParser()
        self._clock = clock or datetime.now

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "date"

    def validate(self, value: Any) -> ValidationResponse:
        if value is None:
            today = self._clock().replace(hour=0, minute=0, second=0)
            return self.invalid(today)

        result = self._date_parser.parse(value)
        if result.valid and result.date is not None:
            return self.valid(result.date)
        return self.invalid(self._clock())

