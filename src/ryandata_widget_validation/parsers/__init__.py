"""Collaborator implementations used by the validators."""

from ryandata_widget_validation.parsers.dates import DateParseResult, PydanticDateParser
from ryandata_widget_validation.parsers.expressions import extract_text_argument

__all__ = ["DateParseResult", "PydanticDateParser", "extract_text_argument"]
