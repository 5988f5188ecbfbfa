"""
Unit tests for the Headers multimap.
"""

import pytest

from httpcommon.headers import Headers, default_headers, headersforkey
from httpcommon.config import HeaderDefaults


class TestHeadersDuplicates:
    """Tests for duplicate-preserving behaviour."""

    def test_length_counts_pairs(self):
        """Test length grows by one per set(), even for repeated names."""
        h = Headers()
        assert len(h) == 0

        h["Content-Type"] = "text/html"
        assert len(h) == 1

        h["Set-Cookie"] = "user=me;"
        assert len(h) == 2

        h["Set-Cookie"] = "pass=secret;"
        assert len(h) == 3

    def test_get_returns_first(self, cookie_headers: Headers):
        """Test single-value lookup returns the first value set."""
        assert cookie_headers["Set-Cookie"] == "user=me;"
        assert cookie_headers.get("Set-Cookie") == "user=me;"
        assert cookie_headers["Content-Type"] == "text/html"

    def test_get_all_in_insertion_order(self, cookie_headers: Headers):
        """Test get_all() returns every value in order."""
        assert cookie_headers.get_all("Set-Cookie") == ["user=me;", "pass=secret;"]
        assert headersforkey(cookie_headers, "Set-Cookie") == ["user=me;", "pass=secret;"]

    def test_get_all_missing(self):
        """Test get_all() of an absent name is empty."""
        assert Headers().get_all("X-Missing") == []

    def test_iteration_yields_pairs(self, cookie_headers: Headers):
        """Test iterating gives (name, value) pairs in insertion order."""
        assert list(cookie_headers) == [
            ("Content-Type", "text/html"),
            ("Set-Cookie", "user=me;"),
            ("Set-Cookie", "pass=secret;"),
        ]
        assert sorted(cookie_headers) == [
            ("Content-Type", "text/html"),
            ("Set-Cookie", "pass=secret;"),
            ("Set-Cookie", "user=me;"),
        ]

    def test_delete_removes_all(self, cookie_headers: Headers):
        """Test delete removes every pair for the name."""
        del cookie_headers["Set-Cookie"]

        assert len(cookie_headers) == 1
        assert cookie_headers["Content-Type"] == "text/html"
        assert cookie_headers.get("Set-Cookie", "**DEFAULT**") == "**DEFAULT**"
        assert "Set-Cookie" not in cookie_headers

    def test_delete_missing_is_noop(self, cookie_headers: Headers):
        """Test deleting an absent name changes nothing."""
        cookie_headers.delete("X-Missing")
        del cookie_headers["X-Other"]

        assert len(cookie_headers) == 3


class TestHeadersAccess:
    """Tests for lookup and mutation helpers."""

    def test_getitem_missing_raises(self):
        """Test h[name] raises KeyError for absent names."""
        with pytest.raises(KeyError):
            Headers()["Host"]

    def test_get_default(self):
        """Test get() default handling."""
        h = Headers()

        assert h.get("Host") is None
        assert h.get("Host", "localhost") == "localhost"

    def test_names_are_case_sensitive(self):
        """Test names are matched exactly."""
        h = Headers({"Content-Type": "text/plain"})

        assert h.get("content-type") is None
        assert "Content-Type" in h

    def test_set_chaining(self):
        """Test set() returns self."""
        h = Headers().set("X-One", "1").set("X-One", "2")

        assert h.get_all("X-One") == ["1", "2"]

    def test_replace_overwrites(self, cookie_headers: Headers):
        """Test replace() leaves a single pair at the end."""
        cookie_headers.replace("Set-Cookie", "only=1;")

        assert cookie_headers.get_all("Set-Cookie") == ["only=1;"]
        assert cookie_headers.items()[-1] == ("Set-Cookie", "only=1;")

    def test_names(self, cookie_headers: Headers):
        """Test names() lists each name once."""
        assert cookie_headers.names() == ["Content-Type", "Set-Cookie"]

    def test_values_coerced_to_str(self):
        """Test non-string values are stored as strings."""
        h = Headers()
        h["Content-Length"] = 42

        assert h["Content-Length"] == "42"


class TestHeadersConstruction:
    """Tests for building Headers from other sources."""

    def test_from_mapping(self):
        """Test construction from a dict."""
        h = Headers({"Host": "example.com", "Accept": "*/*"})

        assert h.items() == [("Host", "example.com"), ("Accept", "*/*")]

    def test_from_pairs(self):
        """Test construction from pairs keeps duplicates."""
        h = Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])

        assert len(h) == 2

    def test_copy_is_independent(self, cookie_headers: Headers):
        """Test copy() does not share storage."""
        clone = cookie_headers.copy()
        clone["X-New"] = "1"

        assert clone != cookie_headers
        assert "X-New" not in cookie_headers

    def test_equality_is_ordered(self):
        """Test equality compares pairs in order."""
        a = Headers([("A", "1"), ("B", "2")])
        b = Headers([("B", "2"), ("A", "1")])

        assert a == Headers(a)
        assert a != b

    def test_extend_with_self(self):
        """Test extending with itself duplicates each pair once."""
        h = Headers({"A": "1"})
        h.extend(h)

        assert h.get_all("A") == ["1", "1"]


class TestDefaultHeaders:
    """Tests for the default header set."""

    def test_four_default_pairs(self):
        """Test the default set and its order."""
        h = default_headers()

        assert len(h) == 4
        assert h.names() == ["Server", "Content-Type", "Content-Language", "Date"]
        assert h["Content-Type"] == "text/html; charset=utf-8"
        assert h["Content-Language"] == "en"
        assert h["Date"].endswith(" GMT")
        assert h["Server"].startswith("httpcommon/")

    def test_classmethod(self):
        """Test Headers.default() matches default_headers()."""
        assert Headers.default().names() == default_headers().names()

    def test_custom_config(self, custom_defaults: HeaderDefaults):
        """Test defaults come from the given configuration."""
        h = default_headers(custom_defaults)

        assert h["Server"] == "TestServer/0.1"
        assert h["Content-Type"] == "application/json"
        assert h["Content-Language"] == "fr"

    def test_fresh_instance_each_call(self):
        """Test callers never share the default set."""
        first = default_headers()
        first["X-Mine"] = "1"

        assert "X-Mine" not in default_headers()
