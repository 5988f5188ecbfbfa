"""
HTTP cookies.

A Cookie is a name, a value and a dict of attributes:

    Set-Cookie: session=abc123; Path=/; HttpOnly
                ───┬─── ───┬──  ──────┬──────────
                  name   value      attrs  {"Path": "/", "HttpOnly": ""}

Cookies live in Response.cookies, keyed by their own name.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Cookie:
    """
    An HTTP cookie.

    Cookie("session", "abc123") has no attributes; pass a dict as the third
    argument to set some. Name and value are coerced to str and attrs is
    copied, so the caller's dict is never shared.
    """

    name: str
    value: str
    attrs: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.name = str(self.name)
        self.value = str(self.value)
        self.attrs = {str(k): str(v) for k, v in self.attrs.items()}

    def __str__(self) -> str:
        return f"Cookie({self.name}, {self.value}, {len(self.attrs)} attributes)"
