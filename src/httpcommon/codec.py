"""
=============================================================================
TEXT CODEC
=============================================================================

Pure functions for making text safe to put in HTML and in URIs.

=============================================================================
HTML ESCAPING
=============================================================================

Five characters have special meaning inside HTML text and attributes:

    Character   Escape      Why
    ─────────   ──────      ───────────────────────────────────────────
    &           &amp;       Starts an entity reference
    "           &quot;      Ends a double-quoted attribute
    '           &#39;       Ends a single-quoted attribute
    <           &lt;        Starts a tag
    >           &gt;        Ends a tag

The ampersand MUST be replaced first. Otherwise "<" would become "&lt;"
and then "&amp;lt;".

=============================================================================
PERCENT-ENCODING
=============================================================================

A byte is written as '%' followed by two uppercase hex digits:

    "<a href='x'>"   ──UTF-8──►   3C 61 20 68 ...   ──►   "%3Ca%20href%3D%27x%27%3E"

This module uses the strictest possible policy: only ASCII letters and
digits are left alone. Everything else, including "-_.~" and "/", is
encoded. The output is therefore safe in a path segment, a query key,
a query value or a fragment without further thought.

Decoding is the inverse. By default a '%' that is not followed by two
hex digits raises DecodingError. Pass strict=False to leave such
sequences unchanged, as browsers do.

=============================================================================
"""

import logging
import re
import string

from .errors import DecodingError

logger = logging.getLogger(__name__)


# Bytes left unencoded by encode_uri_component()
_UNRESERVED = frozenset((string.ascii_letters + string.digits).encode("ascii"))

# Order matters: "&" first
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)

_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{2}")


def escape_html(text: str) -> str:
    """
    Escape the HTML special characters & " ' < > in `text`.

    Not idempotent: escaping "&amp;" again gives "&amp;amp;".

    Example:
        escape_html("<b>Tom & Jerry</b>")
        # '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    """
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def encode_uri_component(text: str) -> str:
    """
    Percent-encode every byte of the UTF-8 form of `text` that is not an
    ASCII letter or digit.

    Args:
        text: Text to encode.

    Returns:
        ASCII string made of letters, digits and %XX triplets.

    Lone surrogates such as "\\ud800" are encoded as their three-byte
    form, so decode_uri_component() (strict) gives them back unchanged.

    Example:
        encode_uri_component("run&++")   # 'run%26%2B%2B'
        encode_uri_component("é")        # '%C3%A9'
    """
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in text.encode("utf-8", errors="surrogatepass")
    )


def decode_uri_component(
    text: str,
    *,
    strict: bool = True,
    plus_as_space: bool = False,
) -> str:
    """
    Decode %XX escapes in `text` and interpret the result as UTF-8.

    =====================================================================
    DECODING POLICY
    =====================================================================

        Input            strict=True          strict=False
        ─────            ───────────          ────────────
        "a%20b"          "a b"                "a b"
        "100%"           DecodingError        "100%"
        "%zz"            DecodingError        "%zz"
        "%FF"            DecodingError        "\\ufffd"  (invalid UTF-8)

    =====================================================================

    Args:
        text: Percent-encoded text.
        strict: Raise DecodingError on malformed input instead of
            passing it through.
        plus_as_space: Also decode '+' as a space, as HTML forms
            (application/x-www-form-urlencoded) do.

    Returns:
        The decoded text.

    Raises:
        DecodingError: In strict mode, if a '%' is not followed by two
            hex digits or the decoded bytes are not valid UTF-8.
    """
    if plus_as_space:
        text = text.replace("+", " ")

    # Fast path: nothing to decode
    if "%" not in text:
        return text

    buffer = bytearray()
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if char == "%":
            pair = text[i + 1:i + 3]
            if _HEX_PAIR.fullmatch(pair):
                buffer.append(int(pair, 16))
                i += 3
                continue
            if strict:
                logger.debug(f"Malformed percent escape at {i} in {text!r}")
                raise DecodingError(
                    f"Malformed percent escape {text[i:i + 3]!r} at position {i}",
                    text=text,
                    position=i,
                )
        buffer.extend(char.encode("utf-8", errors="surrogatepass"))
        i += 1

    try:
        return buffer.decode("utf-8", errors="surrogatepass" if strict else "replace")
    except UnicodeDecodeError as e:
        logger.debug(f"Percent escapes in {text!r} are not valid UTF-8")
        raise DecodingError(
            f"Decoded bytes are not valid UTF-8: {e.reason}",
            text=text,
        ) from e


# camelCase aliases
escapeHTML = escape_html
encodeURIComponent = encode_uri_component
decodeURIComponent = decode_uri_component
