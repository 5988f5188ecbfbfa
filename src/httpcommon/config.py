"""
=============================================================================
CONFIGURATION
=============================================================================

Values used to build the default header set of a Response:

    Server: httpcommon/1.0.0 Python/3.12.1      ← server_name
    Content-Type: text/html; charset=utf-8      ← content_type
    Content-Language: en                        ← content_language
    Date: Thu, 02 May 2013 13:45:07 GMT         ← always "now"

Usage:

    from httpcommon import HeaderDefaults, default_headers

    config = HeaderDefaults(server_name="MyApp/2.1")
    config.validate()
    headers = default_headers(config)

There are no environment variables; pass a HeaderDefaults explicitly
wherever the defaults need to differ.

=============================================================================
"""

import platform
from dataclasses import dataclass

from ._version import __version__


def _server_identity() -> str:
    # Multiple whitespace-separated product[/version] tokens
    return f"httpcommon/{__version__} Python/{platform.python_version()}"


@dataclass(frozen=True)
class HeaderDefaults:
    """
    Values for the default header set.

    Frozen: a single instance (DEFAULT_CONFIG) is shared by every caller
    that does not pass its own.
    """

    server_name: str = _server_identity()
    """
    Value of the Server header.
    Some deployments shorten this to avoid advertising versions.
    """

    content_type: str = "text/html; charset=utf-8"
    """
    Value of the Content-Type header.
    """

    content_language: str = "en"
    """
    Value of the Content-Language header (a BCP 47 language tag).
    """

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If a value is empty or would break the header
                section (contains CR or LF).
        """
        for name in ("server_name", "content_type", "content_language"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            if "\r" in value or "\n" in value:
                raise ValueError(f"{name} must not contain CR or LF: {value!r}")


DEFAULT_CONFIG = HeaderDefaults()
