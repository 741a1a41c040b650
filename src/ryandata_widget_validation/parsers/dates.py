"""Calendar parsing backed by pydantic's datetime validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateParseResult:
    """Result of parsing a value into a datetime.

    Attributes:
        valid: True if the value denotes a calendar instant.
        date: The parsed datetime (None if invalid).
    """

    valid: bool
    date: datetime | None = None


class PydanticDateParser:
    """Parse ISO 8601 strings, Unix timestamps, dates and datetimes.

    Delegates string and timestamp handling to a pydantic
    ``TypeAdapter[datetime]``. Timestamps are seconds, or milliseconds when
    large enough (pydantic's rule).
    """

    def __init__(self) -> None:
        """Initialize the parser."""
        self._adapter: TypeAdapter[datetime] = TypeAdapter(datetime)

    def parse(self, value: Any) -> DateParseResult:
        """Parse a value.

        Args:
            value: Raw value to parse.

        Returns:
            DateParseResult; never raises.
        """
        if isinstance(value, datetime):
            return DateParseResult(True, value)
        if isinstance(value, date):
            return DateParseResult(True, datetime.combine(value, time()))
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return DateParseResult(False)
        if isinstance(value, str) and not value.strip():
            return DateParseResult(False)

        try:
            parsed = self._adapter.validate_python(value.strip() if isinstance(value, str) else value)
        except (ValidationError, ValueError, OverflowError) as e:
            logger.debug("Failed to parse date: %r - %s", value, e)
            return DateParseResult(False)
        return DateParseResult(True, parsed)
