"""Generic coercion utilities shared by the validators."""

from __future__ import annotations

from ryandata_widget_validation.core.coercion import (
    CoercionResult,
    compile_pattern,
    from_json,
    is_number,
    is_sequence,
    is_structured,
    to_number,
    to_pretty_json,
    to_text,
)

__all__ = [
    "CoercionResult",
    "compile_pattern",
    "from_json",
    "is_number",
    "is_sequence",
    "is_structured",
    "to_number",
    "to_pretty_json",
    "to_text",
]
