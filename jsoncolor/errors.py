"""
Exception types raised by jsoncolor.

Write failures are not wrapped: whatever OSError the output stream raises
reaches the caller unchanged.
"""

import json


class JsonColorError(Exception):
    """Base class for errors raised by jsoncolor itself."""


class ParseError(JsonColorError, ValueError):
    """
    Raised when input text is not valid JSON.

    Carries the position details of the underlying ``json.JSONDecodeError``.

    Attributes:
        msg (str): The unformatted error message
        doc (str): The document being parsed
        pos (int): Index in ``doc`` where parsing failed
        lineno (int): Line corresponding to ``pos``
        colno (int): Column corresponding to ``pos``
    """

    def __init__(self, error: json.JSONDecodeError):
        super().__init__(f"invalid JSON: {error}")
        self.msg = error.msg
        self.doc = error.doc
        self.pos = error.pos
        self.lineno = error.lineno
        self.colno = error.colno


class PlatformError(JsonColorError, OSError):
    """Raised when the console refuses to interpret ANSI escape sequences."""
