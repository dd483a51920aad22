"""
Utilities for rendering offending input characters in error messages.
"""

import unicodedata


def _escape_char(c: str) -> str:
    """Escape one character if it is a Unicode control or whitespace character."""
    # control category codes vary: Cc, Cf, Cn etc.
    # so check via first character
    if c.isspace() or unicodedata.category(c)[0] == "C":
        return f"\\u{ord(c):04x}"
    return c


def render_char(s: str) -> str:
    """
    Make offending input safe to embed in a log line or message.

    Usually a single character, but lookups may be handed longer strings.
    Whitespace stays visible as an escape instead of vanishing from the output.
    """
    return "".join(_escape_char(c) for c in s)
