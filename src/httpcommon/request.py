"""
=============================================================================
HTTP REQUEST
=============================================================================

The data model for a request sent by a client to a server. Producing one
from raw bytes (or bytes from one) is the job of the client/server layer
that imports this package.

    Request(
        method="GET",                      ← HTTP method
        resource="/search?q=python",       ← request target as sent
        headers=Headers([...]),            ← ordered multimap
        body=b"",                          ← raw body bytes
        uri=urlsplit(""),                  ← parsed URI, filled by the caller
    )

=============================================================================
COERCION
=============================================================================

Fields are normalised on construction so the rest of the code can rely on
their types:

    method, resource    str(...)
    headers             Headers(...)   from a Headers, dict or list of pairs
    body                bytes          str is UTF-8 encoded
    uri                 SplitResult    str is parsed with urlsplit()

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Union
from urllib.parse import SplitResult, urlsplit

from .headers import Headers
from .query import parse_query_string


def _to_bytes(body: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


def _empty_uri() -> SplitResult:
    return urlsplit("")


@dataclass
class Request:
    """
    An HTTP request.

    Request() gives an empty request: no method, no resource, no headers,
    no body. Unlike Response, a Request has NO default headers.
    """

    method: str = ""
    resource: str = ""
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    uri: SplitResult = field(default_factory=_empty_uri)

    def __post_init__(self):
        self.method = str(self.method)
        self.resource = str(self.resource)
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)
        self.body = _to_bytes(self.body)
        if isinstance(self.uri, str):
            self.uri = urlsplit(self.uri)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def path(self) -> str:
        """The resource without its query string or fragment."""
        return urlsplit(self.resource).path

    @property
    def query(self) -> Dict[str, str]:
        """
        The resource's query string, parsed with parse_query_string().

        Raises:
            FormatError, DecodingError: If the query string is malformed.
                Server layers should answer those with error.status_code.
        """
        return parse_query_string(urlsplit(self.resource).query)

    def __str__(self) -> str:
        return (
            f"Request({self.uri.geturl()}, {len(self.headers)} headers, "
            f"{len(self.body)} bytes in body)"
        )
