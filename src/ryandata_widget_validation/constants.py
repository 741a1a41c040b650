"""Centralized message templates and patterns.

This module provides the single source of truth for diagnostic messages
and the URL shape pattern used by the action selector validator.
"""

from __future__ import annotations

import re

# Prefix of every generic type-mismatch message ("<prefix>: <label>")
WIDGET_TYPE_VALIDATION_ERROR = "Value does not match type"

# Message for a navigateToUrl action whose URL argument is malformed
URL_HTTP_VALIDATION_ERROR = "Please enter a valid URL"

# Marker of a "navigate to URL" action inside a trigger expression
NAVIGATE_TO_URL = "navigateToUrl"

# Field of an action selector array element holding its trigger expression
DYNAMIC_TRIGGER_FIELD = "dynamicTrigger"

# Case-sensitive on purpose: uppercase hosts and schemes are rejected
URL_REGEX = re.compile(
    r"^(http://www\.|https://www\.|http://|https://)?"
    r"[a-z0-9]+([-.]{1}[a-z0-9]+)*\.[a-z]{2,5}"
    r"(:[0-9]{1,5})?(/.*)?$"
)

# Type labels used in messages (label shown to the user, per validator)
TEXT_LABEL = "text"
REGEX_LABEL = "regex"
NUMBER_LABEL = "number"
BOOLEAN_LABEL = "boolean"
OBJECT_LABEL = "Object"
ARRAY_LABEL = "Array/List"
DATE_LABEL = "Date"
TABLE_DATA_LABEL = "Table Data"
CHART_DATA_LABEL = "Chart Data"
MARKERS_LABEL = "Marker Data"
OPTIONS_DATA_LABEL = "Options Data"
ACTION_SELECTOR_LABEL = "Action"


def type_mismatch_message(label: str) -> str:
    """Build the standard type-mismatch message for a type label."""
    return f"{WIDGET_TYPE_VALIDATION_ERROR}: {label}"
