from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_widget_validation.parsers.dates import DateParseResult


@runtime_checkable
class ArgumentExtractorProtocol(Protocol):
    """Protocol for pulling a textual argument out of an expression string.

    Used by the action selector validator to read the URL passed to a
    ``navigateToUrl(...)`` call.
    """

    def __call__(self, expression: str) -> str:
        """Extract the argument.

        Args:
            expression: The full trigger expression.

        Returns:
            The argument text, or an empty string if none was found.
        """
        ...


@runtime_checkable
class DateParserProtocol(Protocol):
    """Protocol for calendar parsing implementations.

    Implementations must not raise; unparseable input is reported through
    ``DateParseResult.valid``.
    """

    def parse(self, value: Any) -> DateParseResult:
        """Parse a value into a datetime.

        Args:
            value: Raw value (string, timestamp, date or datetime).

        Returns:
            DateParseResult with the parsed datetime when valid.
        """
        ...

