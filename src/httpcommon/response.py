"""
=============================================================================
HTTP RESPONSE
=============================================================================

The data model for a response sent by a server to a client.

=============================================================================
FIELDS AND DEFAULTS
=============================================================================

    Field       Default                     Notes
    ─────       ───────                     ─────────────────────────────
    status      200                         any int; not range-checked
    headers     default_headers()           also used when None is passed;
                                            Server, Content-Type,
                                            Content-Language, Date
    cookies     {}                          name → Cookie
    body        b""                         str is UTF-8 encoded
    request     None                        the Request that produced it
    history     []                          earlier Responses in a
                                            redirect chain, oldest first
    finished    False                       legacy, kept for old callers
    requests    []                          legacy, kept for old callers

=============================================================================
CONSTRUCTORS
=============================================================================

All of these end up in the same dataclass __init__:

    Response()                              200, defaults
    Response.from_status(404)               404, default headers
    Response.from_status_headers(204, h)    204, h, empty body
    Response.from_status_body(500, "oops")  500, default headers
    Response.from_body("<p>hi</p>")         200, default headers
    Response.from_body(b"{}", h)            200, h

The HTTP client owns `history`: when it follows a redirect it appends the
previous Response before handing the new one to anyone else.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .cookie import Cookie
from .headers import Headers, HeaderSource, default_headers
from .request import Request, _to_bytes
from .status_codes import status_description


Body = Union[str, bytes, bytearray, memoryview]


@dataclass
class Response:
    """
    An HTTP response.

    This is the canonical constructor; every field has a default. The
    classmethods below are shortcuts for the common combinations.
    """

    status: int = 200
    headers: Headers = field(default_factory=default_headers)
    cookies: Dict[str, Cookie] = field(default_factory=dict)
    body: bytes = b""
    request: Optional[Request] = None
    history: List["Response"] = field(default_factory=list)

    # Deprecated: not used by anything in this package
    finished: bool = False
    requests: List[Request] = field(default_factory=list)

    def __post_init__(self):
        self.status = int(self.status)
        if self.headers is None:
            self.headers = default_headers()
        elif not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)
        self.cookies = dict(self.cookies)
        self.body = _to_bytes(self.body)
        self.history = list(self.history)
        self.finished = bool(self.finished)
        self.requests = list(self.requests)

    # =========================================================================
    # CONVENIENCE CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_status(cls, status: int) -> "Response":
        """Response with `status`, default headers and an empty body."""
        return cls(status=status)

    @classmethod
    def from_status_headers(cls, status: int, headers: HeaderSource) -> "Response":
        """Response with `status` and exactly `headers`; empty body."""
        return cls(status=status, headers=headers)

    @classmethod
    def from_status_body(cls, status: int, body: Body) -> "Response":
        """Response with `status`, default headers and `body`."""
        return cls(status=status, body=body)

    @classmethod
    def from_body(cls, body: Body, headers: Optional[HeaderSource] = None) -> "Response":
        """
        200 response with `body`.

        Args:
            body: Response body (str is UTF-8 encoded)
            headers: Headers to use instead of the default set (None = defaults)

        Returns:
            Response with status 200
        """
        return cls(headers=headers, body=body)

    # =========================================================================
    # MUTATORS
    # =========================================================================

    def set_header(self, name: str, value: str) -> "Response":
        """
        Append a header. Existing values for `name` are kept.

        Returns self for method chaining:
            response.set_header("X-One", "1").set_header("X-Two", "2")
        """
        self.headers.set(name, value)
        return self

    def set_cookie(self, cookie: Cookie) -> "Response":
        """Store `cookie` under its own name, replacing any previous one."""
        self.cookies[cookie.name] = cookie
        return self

    # =========================================================================
    # DISPLAY
    # =========================================================================

    @property
    def description(self) -> str:
        """Status description, e.g. "Not Found", or "Unknown Code"."""
        return status_description(self.status)

    def __str__(self) -> str:
        return (
            f"Response({self.status} {self.description}, "
            f"{len(self.headers)} headers, {len(self.body)} bytes in body)"
        )
