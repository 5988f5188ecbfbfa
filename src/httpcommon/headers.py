"""
=============================================================================
HEADERS
=============================================================================

The header section of an HTTP message, stored as an ordered list of
(name, value) pairs rather than a dict.

=============================================================================
WHY NOT A DICT?
=============================================================================

Some header fields legitimately repeat. The classic case is Set-Cookie,
which cannot be folded into one comma-separated line:

    HTTP/1.1 200 OK
    Content-Type: text/html
    Set-Cookie: user=me; Path=/
    Set-Cookie: theme=dark; Path=/

A dict would keep only the last Set-Cookie. Headers keeps all of them:

    ┌─────────────────────────────────────────────────────────────────────┐
    │  Headers                                                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │   0  ("Content-Type", "text/html")                                   │
    │   1  ("Set-Cookie",   "user=me; Path=/")      ◄── get() returns this │
    │   2  ("Set-Cookie",   "theme=dark; Path=/")                          │
    └─────────────────────────────────────────────────────────────────────┘

        headers["Set-Cookie"]             → "user=me; Path=/"   (first)
        headers.get_all("Set-Cookie")     → [both, in order]
        len(headers)                      → 3                   (pairs)
        del headers["Set-Cookie"]         → removes both

Note that `headers[name] = value` APPENDS. Use replace() when you want
to overwrite.

Header names are compared exactly ("content-type" != "Content-Type").

=============================================================================
"""

from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, HeaderDefaults
from .dates import format_rfc1123


HeaderPair = Tuple[str, str]
HeaderSource = Union["Headers", Mapping[str, str], Iterable[HeaderPair]]


class Headers:
    """
    Ordered multimap of header names to header values.

    Accepts another Headers, a mapping, or an iterable of pairs:

        Headers()
        Headers({"Host": "example.com"})
        Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
    """

    __slots__ = ("_pairs",)

    def __init__(self, source: Optional[HeaderSource] = None):
        self._pairs: List[HeaderPair] = []
        if source is not None:
            self.extend(source)

    @classmethod
    def default(cls, config: Optional[HeaderDefaults] = None) -> "Headers":
        """Build the default header set. See default_headers()."""
        return default_headers(config)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the FIRST value stored for `name`.

        Args:
            name: Header name (exact match)
            default: Value to return if the header is missing

        Returns:
            First value or default
        """
        for key, value in self._pairs:
            if key == name:
                return value
        return default

    def get_all(self, name: str) -> List[str]:
        """
        Get every value stored for `name`, in insertion order.

        Example:
            headers.get_all("Set-Cookie")   # ["user=me;", "pass=secret;"]
        """
        return [value for key, value in self._pairs if key == name]

    def names(self) -> List[str]:
        """Distinct header names, in order of first appearance."""
        return list(dict.fromkeys(key for key, _ in self._pairs))

    def items(self) -> List[HeaderPair]:
        """All (name, value) pairs, in insertion order."""
        return list(self._pairs)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def set(self, name: str, value: str) -> "Headers":
        """
        Append a (name, value) pair. Existing pairs are kept.

        Returns self for method chaining:
            headers.set("Set-Cookie", "a=1").set("Set-Cookie", "b=2")
        """
        self._pairs.append((str(name), str(value)))
        return self

    def replace(self, name: str, value: str) -> "Headers":
        """Remove every pair for `name`, then append (name, value)."""
        self.delete(name)
        return self.set(name, value)

    def extend(self, source: HeaderSource) -> "Headers":
        """Append all pairs from another Headers, a mapping, or pairs."""
        if isinstance(source, Headers):
            pairs: Iterable[HeaderPair] = list(source._pairs)
        elif isinstance(source, Mapping):
            pairs = source.items()
        else:
            pairs = source

        for name, value in pairs:
            self.set(name, value)
        return self

    def delete(self, name: str) -> None:
        """Remove every pair for `name`. Does nothing if there is none."""
        self._pairs = [pair for pair in self._pairs if pair[0] != name]

    def copy(self) -> "Headers":
        return Headers(self)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __getitem__(self, name: str) -> str:
        for key, value in self._pairs:
            if key == name:
                return value
        raise KeyError(name)

    def __setitem__(self, name: str, value: str) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.delete(name)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __iter__(self) -> Iterator[HeaderPair]:
        # Pairs, not names: a name may occur more than once
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"Headers({self._pairs!r})"


def default_headers(config: Optional[HeaderDefaults] = None) -> Headers:
    """
    Build the standard default header set for a Response.

        Server: <config.server_name>
        Content-Type: text/html; charset=utf-8
        Content-Language: en
        Date: <now, RFC 1123>

    A fresh Headers is returned on every call, so the Date is current and
    callers may mutate the result freely.
    """
    config = config or DEFAULT_CONFIG
    return Headers([
        ("Server", config.server_name),
        ("Content-Type", config.content_type),
        ("Content-Language", config.content_language),
        ("Date", format_rfc1123()),
    ])


def headersforkey(headers: Headers, name: str) -> List[str]:
    """Legacy alias for Headers.get_all()."""
    return headers.get_all(name)
