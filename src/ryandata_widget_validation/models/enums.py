"""Validation type enumeration."""

from __future__ import annotations

from enum import Enum


class ValidationType(str, Enum):
    """Enumeration of all semantic type tags a property can declare."""

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    REGEX = "REGEX"
    DATE = "DATE"
    TABLE_DATA = "TABLE_DATA"
    CHART_DATA = "CHART_DATA"
    MARKERS = "MARKERS"
    OPTIONS_DATA = "OPTIONS_DATA"
    ACTION_SELECTOR = "ACTION_SELECTOR"
    ARRAY_ACTION_SELECTOR = "ARRAY_ACTION_SELECTOR"


# All type tags as a list
VALIDATION_TYPES: list[str] = [t.value for t in ValidationType]
