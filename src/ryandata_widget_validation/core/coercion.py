"""Best-effort coercion steps.

Each step returns a CoercionResult instead of raising, so validators can
fold a failed coercion into their default response without exception
handling of their own.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Decimal literal with optional sign, fraction and exponent ("1", "-2.5", ".5e3")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")
# Unsigned radix literals ("0x1f", "0b101", "0o17")
_RADIX_RE = re.compile(r"^0([xXbBoO])([0-9a-fA-F]+)$")
_RADIX_BASES = {"x": 16, "b": 2, "o": 8}


@dataclass(frozen=True)
class CoercionResult:
    """Result of a single coercion step.

    Attributes:
        value: The coerced value (None if the coercion failed).
        error: Reason for the failure, None on success.
    """

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the coercion succeeded."""
        return self.error is None


def _preview(value: Any, limit: int = 50) -> str:
    text = repr(value)
    return text if len(text) <= limit else f"{text[:limit]}..."


def is_structured(value: Any) -> bool:
    """Check if a value is a record or a sequence (not a scalar or string)."""
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


def is_sequence(value: Any) -> bool:
    """Check if a value is an ordered sequence of elements."""
    return isinstance(value, (list, tuple))


def is_number(value: Any) -> bool:
    """Check if a value is already numeric (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> CoercionResult:
    """Coerce a value to a number.

    Booleans become 1/0. Strings are trimmed; an empty string is 0, decimal
    and exponent literals, ``Infinity`` and 0x/0b/0o literals are accepted.
    Integral literals produce an ``int``.

    Args:
        value: The value to coerce.

    Returns:
        CoercionResult with the number, or an error for not-a-number.
    """
    if isinstance(value, bool):
        return CoercionResult(int(value))
    if is_number(value):
        return CoercionResult(value)
    if not isinstance(value, str):
        return CoercionResult(error=f"Cannot convert {type(value).__name__} to number")

    text = value.strip()
    if not text:
        return CoercionResult(0)

    infinity = _INFINITY_RE.match(text)
    if infinity:
        return CoercionResult(-math.inf if infinity.group(1) == "-" else math.inf)

    try:
        if _DECIMAL_RE.match(text):
            if "." in text or "e" in text.lower():
                return CoercionResult(float(text))
            try:
                return CoercionResult(int(text))
            except ValueError:
                # More digits than int() converts; overflows to infinity
                return CoercionResult(float(text))

        radix = _RADIX_RE.match(text)
        if radix:
            base = _RADIX_BASES[radix.group(1).lower()]
            return CoercionResult(int(radix.group(2), base))
    except ValueError as e:
        # Bad radix digits
        logger.debug("Failed to parse number: %s - %s", _preview(value), e)

    return CoercionResult(error=f"Not a number: {_preview(value)}")


def to_text(value: Any) -> CoercionResult:
    """Stringify a scalar value.

    Booleans are rendered as ``"true"``/``"false"``. Failures raised by a
    value's own ``__str__`` are caught and logged.

    Args:
        value: The value to stringify.

    Returns:
        CoercionResult with the string, or an error.
    """
    if isinstance(value, str):
        return CoercionResult(value)
    if isinstance(value, bool):
        return CoercionResult("true" if value else "false")
    try:
        return CoercionResult(str(value))
    except Exception as e:
        logger.warning("Error when parsing %s to string: %s", type(value).__name__, e)
        return CoercionResult(error=str(e))


def to_pretty_json(value: Any) -> str:
    """Serialize a structured value for display."""
    try:
        return json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError, RecursionError) as e:
        # Non-scalar keys or circular references
        logger.debug("Failed to serialize %s: %s", type(value).__name__, e)
        return repr(value)


def from_json(text: str) -> CoercionResult:
    """Decode a JSON document.

    Args:
        text: Serialized JSON.

    Returns:
        CoercionResult with the decoded value, or the decode error.
    """
    try:
        return CoercionResult(json.loads(text))
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to decode JSON: %s - %s", _preview(text), e)
        return CoercionResult(error=str(e))


def compile_pattern(pattern: str) -> CoercionResult:
    """Compile a regular expression.

    Args:
        pattern: The pattern source.

    Returns:
        CoercionResult with the compiled pattern, or the compile error.
    """
    try:
        return CoercionResult(re.compile(pattern))
    except (re.error, RecursionError, OverflowError) as e:
        logger.debug("Invalid regular expression: %s - %s", _preview(pattern), e)
        return CoercionResult(error=str(e))
