from __future__ import annotations

from typing import Annotated, Any

import pytest
from pydantic import BaseModel, ValidationError

from ryandata_widget_validation import ValidationType, coerced


class ButtonProps(BaseModel):
    label: Annotated[Any, coerced(ValidationType.TEXT)]
    count: Annotated[int, coerced(ValidationType.NUMBER)]
    options: Annotated[Any, coerced(ValidationType.OPTIONS_DATA)] = []
    visible: Annotated[bool, coerced("BOOLEAN", strict=True)] = True


def test_fields_are_coerced() -> None:
    props = ButtonProps(label=5, count="42", options='[{"label": "A", "value": "a"}]', visible="false")
    assert props.label == "5"
    assert props.count == 42
    assert props.options == [{"label": "A", "value": "a"}]
    assert props.visible is False


def test_non_strict_uses_default() -> None:
    props = ButtonProps(label="x", count="abc", options=[{"label": "A"}])
    assert props.count == 0
    assert props.options == []


def test_strict_raises_validation_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ButtonProps(label="x", count=1, visible="yes")
    errors = exc_info.value.errors()
    assert len(errors) == 1
    assert errors[0]["type"] == "widget_validation"
    assert errors[0]["msg"] == "Value does not match type: boolean"


def test_unknown_type() -> None:
    with pytest.raises(ValueError):
        coerced("COLOR")
