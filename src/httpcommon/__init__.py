"""
=============================================================================
HTTPCOMMON
=============================================================================

Shared vocabulary for HTTP messages, for use by HTTP clients and servers
that do their own I/O.

    ┌─────────────────────────────────────────────────────────────────────┐
    │ MESSAGE MODEL                                                       │
    │   Request, Response, Cookie         request.py, response.py, ...    │
    │        │                                                             │
    │        ▼                                                             │
    │ HEADERS                                                             │
    │   Headers (ordered multimap)        headers.py                      │
    │        │                                                             │
    │        ▼                                                             │
    │ UTILITIES                                                           │
    │   escape_html, encode/decode_uri_component       codec.py           │
    │   parse_query_string                             query.py           │
    │   format_rfc1123, parse_rfc1123                  dates.py           │
    │   HTTPStatus, STATUS_CODES                       status_codes.py    │
    └─────────────────────────────────────────────────────────────────────┘

Quick example:

    from httpcommon import Cookie, Response, escape_html, parse_query_string

    params = parse_query_string("name=Ada%20Lovelace")
    response = Response.from_body(f"<p>Hello {escape_html(params['name'])}</p>")
    response.set_cookie(Cookie("seen", "1", {"Path": "/"}))
    print(response)   # Response(200 OK, 4 headers, 25 bytes in body)

Nothing here performs I/O, and nothing here is thread-safe: share a
message between threads only with your own locking.

=============================================================================
"""

from ._version import __version__
from .codec import (
    escape_html,
    encode_uri_component,
    decode_uri_component,
    # camelCase aliases
    escapeHTML,
    encodeURIComponent,
    decodeURIComponent,
)
from .config import HeaderDefaults, DEFAULT_CONFIG
from .cookie import Cookie
from .dates import format_rfc1123, now_rfc1123, parse_rfc1123, RFC1123_datetime
from .errors import HTTPCommonError, FormatError, DecodingError
from .headers import Headers, default_headers, headersforkey
from .query import parse_query_string, parsequerystring
from .request import Request
from .response import Response
from .status_codes import HTTPStatus, STATUS_CODES, status_description

__all__ = [
    "__version__",

    # Message model
    "Request",
    "Response",
    "Cookie",
    "Headers",
    "default_headers",
    "headersforkey",

    # Configuration
    "HeaderDefaults",
    "DEFAULT_CONFIG",

    # Text utilities
    "escape_html",
    "encode_uri_component",
    "decode_uri_component",
    "escapeHTML",
    "encodeURIComponent",
    "decodeURIComponent",
    "parse_query_string",
    "parsequerystring",

    # Dates
    "format_rfc1123",
    "now_rfc1123",
    "parse_rfc1123",
    "RFC1123_datetime",

    # Status codes
    "HTTPStatus",
    "STATUS_CODES",
    "status_description",

    # Errors
    "HTTPCommonError",
    "FormatError",
    "DecodingError",
]
