"""Argument extraction from trigger expressions.

Trigger expressions look like ``{{navigateToUrl('https://x.io', 'NEW_WINDOW')}}``.
Only the first argument is of interest.
"""

from __future__ import annotations

import re

_CALL_RE = re.compile(r"[A-Za-z_$][\w$.]*\s*\((?P<args>.*)\)", re.DOTALL)
_QUOTES = ("'", '"', "`")


def _first_argument(args: str) -> str:
    args = args.strip()
    if not args:
        return ""

    quote = args[0]
    if quote in _QUOTES:
        escaped = False
        for i, ch in enumerate(args[1:], start=1):
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                return args[1:i]
        # Unterminated string literal: take the rest as-is
        return args[1:]

    depth = 0
    for i, ch in enumerate(args):
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
            if depth < 0:
                # Closing bracket of the call itself
                return args[:i].strip()
        elif ch == "," and depth == 0:
            return args[:i].strip()
    return args


def extract_text_argument(expression: str, function: str | None = None) -> str:
    """Extract the first argument of a call in an expression.

    Matching quotes around a string literal argument are stripped. Bare
    arguments (bindings, numbers) are returned trimmed.

    Args:
        expression: Trigger expression, with or without ``{{ }}``.
        function: Name of the call to read. Defaults to the first call found.

    Returns:
        The first argument's text, or an empty string if there is no call.

    Example:
        >>> extract_text_argument("{{navigateToUrl('https://example.com')}}")
        'https://example.com'
    """
    pattern = _CALL_RE
    if function is not None:
        pattern = re.compile(rf"{re.escape(function)}\s*\((?P<args>.*)\)", re.DOTALL)
    match = pattern.search(expression)
    if match is None:
        return ""
    return _first_argument(match.group("args"))
