"""Validators for action selectors (trigger expressions)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ryandata_widget_validation.constants import (
    ACTION_SELECTOR_LABEL,
    DYNAMIC_TRIGGER_FIELD,
    NAVIGATE_TO_URL,
    URL_HTTP_VALIDATION_ERROR,
    URL_REGEX,
)
from ryandata_widget_validation.models import ValidationResponse
from ryandata_widget_validation.parsers.expressions import extract_text_argument
from ryandata_widget_validation.protocols import ArgumentExtractorProtocol
from ryandata_widget_validation.validation.base import BaseTypeValidator
from ryandata_widget_validation.validation.structured import ArrayValidator


def is_valid_url(url: str) -> bool:
    """Check a URL against the URL shape pattern (shape only, no allow-list)."""
    return URL_REGEX.fullmatch(url) is not None


class ActionSelectorValidator(BaseTypeValidator):
    """Gatekeeps navigateToUrl actions.

    Only string triggers calling navigateToUrl are checked: the URL
    argument must look like a URL. Every other value passes unchanged.
    """

    label = ACTION_SELECTOR_LABEL

    def __init__(self, extractor: ArgumentExtractorProtocol | None = None) -> None:
        """Initialize action selector validator.

        Args:
            extractor: Pulls the URL argument out of the trigger expression.
        """
        self._extractor = extractor or extract_text_argument

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "action_selector"

    def validate(self, value: Any) -> ValidationResponse:
        if isinstance(value, str) and NAVIGATE_TO_URL in value:
            # Read the navigateToUrl call, not an earlier one in the expression
            url = self._extractor(value[value.index(NAVIGATE_TO_URL) :])
            if not is_valid_url(url):
                return self.invalid(value, URL_HTTP_VALIDATION_ERROR)
        return self.valid(value)


class ArrayActionSelectorValidator(BaseTypeValidator):
    """Validates a list of actions, annotating each element.

    Each element's trigger is checked independently and the element is
    copied with its own ``isValid``/``message`` keys. A bad element does not
    discard the list; the aggregate is valid only if every element is.
    """

    label = ACTION_SELECTOR_LABEL

    def __init__(
        self,
        action_validator: ActionSelectorValidator | None = None,
        array_validator: ArrayValidator | None = None,
        trigger_field: str = DYNAMIC_TRIGGER_FIELD,
    ) -> None:
        """Initialize array action selector validator.

        Args:
            action_validator: Validator applied to each element's trigger.
            array_validator: Validator used for the array step.
            trigger_field: Element key holding the trigger expression.
        """
        self._action_validator = action_validator or ActionSelectorValidator()
        self._array_validator = array_validator or ArrayValidator()
        self._trigger_field = trigger_field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "array_action_selector"

    def _annotate(self, element: Any) -> tuple[dict[str, Any], ValidationResponse]:
        # Non-record elements carry no trigger
        record = dict(element) if isinstance(element, Mapping) else {}
        response = self._action_validator.validate(record.get(self._trigger_field))
        record["isValid"] = response.is_valid
        record["message"] = response.message
        return record, response

    def validate(self, value: Any) -> ValidationResponse:
        response = self._array_validator.validate(value)
        if not response.is_valid:
            return response

        annotated: list[dict[str, Any]] = []
        messages: list[str] = []
        for element in response.parsed:
            record, element_response = self._annotate(element)
            annotated.append(record)
            if not element_response.is_valid:
                messages.append(element_response.message)

        if messages:
            return ValidationResponse(is_valid=False, parsed=annotated, message=messages[0])
        return self.valid(annotated)
