"""
Query string parsing.

Turns "foo=bar&baz=%3Cb%3E" into {"foo": "bar", "baz": "<b>"}.

Unlike headers, query parameters are NOT a multimap here: if a key is
repeated, the last value wins.

    "a=1&a=2"   ──►   {"a": "2"}

Parsing is all-or-nothing. One malformed field ("a", "a=b=c") fails the
whole string with FormatError, so a server never acts on half of a
request's parameters.
"""

import logging
from typing import Dict

from .codec import decode_uri_component
from .errors import FormatError

logger = logging.getLogger(__name__)


def parse_query_string(query: str) -> Dict[str, str]:
    """
    Parse an `a=b&c=d` query string into a dict.

    Keys and values are percent-decoded with decode_uri_component()
    (strict policy). A literal '=' inside a value must be sent as %3D.

    Args:
        query: Query string without the leading '?'.

    Returns:
        Mapping of decoded key to decoded value. Empty for "".

    Raises:
        FormatError: If a field does not contain exactly one '='.
        DecodingError: If a key or value has a malformed percent escape.

    Example:
        parse_query_string("page=2&q=hello%20world")
        # {'page': '2', 'q': 'hello world'}
    """
    params: Dict[str, str] = {}
    if not query:
        return params

    for field in query.split("&"):
        parts = field.split("=")
        if len(parts) != 2:
            logger.debug(f"Rejecting query string {query!r}: bad field {field!r}")
            raise FormatError(f"Field {field!r} did not contain exactly one '='", field=field)

        key, value = parts
        params[decode_uri_component(key)] = decode_uri_component(value)

    return params


# Legacy alias
parsequerystring = parse_query_string
