"""
=============================================================================
ERRORS
=============================================================================

Exceptions raised while decoding untrusted text (query strings, percent
escapes, HTTP dates).

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        EXCEPTION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   ValueError                                                         │
    │      └── HTTPCommonError        status_code = 400                    │
    │             ├── FormatError     "a=b=c", "a", bad HTTP-date          │
    │             └── DecodingError   "%zz", "%4", invalid UTF-8           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Nothing in this package catches these. A server layer that parses a query
string from a URL should catch HTTPCommonError and answer with
`error.status_code` (400 Bad Request).

=============================================================================
"""

from typing import Optional


class HTTPCommonError(ValueError):
    """
    Base class for all errors raised by httpcommon.

    Subclasses ValueError so callers that already guard parsing code with
    `except ValueError` keep working.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code  # HTTP status to return


class FormatError(HTTPCommonError):
    """
    Raised when structured text does not have the expected shape.

    Attributes:
        field: The offending piece of input (a query-string field, or the
            whole date string for HTTP-date parsing).
    """

    def __init__(self, message: str, field: str, status_code: int = 400):
        super().__init__(message, status_code)
        self.field = field


class DecodingError(HTTPCommonError):
    """
    Raised when a percent-encoded string cannot be decoded.

    Attributes:
        text: The full input being decoded.
        position: Index of the offending '%' in `text`, or None when the
            escapes were well-formed but the bytes are not valid UTF-8.
    """

    def __init__(
        self,
        message: str,
        text: str,
        position: Optional[int] = None,
        status_code: int = 400,
    ):
        super().__init__(message, status_code)
        self.text = text
        self.position = position
