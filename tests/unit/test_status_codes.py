"""
Unit tests for status codes and descriptions.
"""

import pytest

from httpcommon.status_codes import HTTPStatus, STATUS_CODES, status_description


class TestHTTPStatus:
    """Tests for the HTTPStatus enum."""

    def test_int_comparison(self):
        """Test members compare equal to their codes."""
        assert HTTPStatus.OK == 200
        assert HTTPStatus(404) is HTTPStatus.NOT_FOUND

    def test_phrase(self):
        """Test reason phrases."""
        assert HTTPStatus.OK.phrase == "OK"
        assert HTTPStatus.NOT_FOUND.phrase == "Not Found"
        assert HTTPStatus.IM_A_TEAPOT.phrase == "I'm a teapot"

    def test_categories(self):
        """Test category predicates."""
        assert HTTPStatus.CONTINUE.is_informational
        assert HTTPStatus.CREATED.is_success
        assert HTTPStatus.FOUND.is_redirect
        assert HTTPStatus.NOT_FOUND.is_client_error
        assert HTTPStatus.BAD_GATEWAY.is_server_error
        assert HTTPStatus.FORBIDDEN.is_error
        assert not HTTPStatus.OK.is_error


class TestStatusCodes:
    """Tests for the STATUS_CODES table."""

    def test_table_matches_enum(self):
        """Test every enum member appears in the table."""
        assert len(STATUS_CODES) == len(HTTPStatus)
        assert STATUS_CODES[500] == "Internal Server Error"

    def test_table_is_read_only(self):
        """Test the shared table cannot be mutated."""
        with pytest.raises(TypeError):
            STATUS_CODES[999] = "Nope"

    def test_status_description(self):
        """Test lookup with fallback."""
        assert status_description(301) == "Moved Permanently"
        assert status_description(HTTPStatus.GONE) == "Gone"
        assert status_description(799) == "Unknown Code"
