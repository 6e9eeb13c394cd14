"""Unit tests for viewer resolution."""

from uuid import uuid4

import pytest

from grifi.config import AuthSettings
from grifi.interface.api.viewer import Viewer, extract_token
from grifi.interface.error import UnauthorizedError


class TestExtractToken:
    """Tests for extract_token."""

    def test_bearer_header(self):
        token = extract_token({"authorization": "Bearer abc.def"}, {}, AuthSettings())

        assert token == "abc.def"

    def test_header_wins_over_cookie(self):
        token = extract_token(
            {"authorization": "bearer from-header"},
            {"sb-access-token": "from-cookie"},
            AuthSettings(),
        )

        assert token == "from-header"

    def test_cookie_fallback(self):
        token = extract_token(
            {"authorization": "Basic dXNlcjpwYXNz"},
            {"sb-access-token": "from-cookie"},
            AuthSettings(),
        )

        assert token == "from-cookie"

    def test_nothing_sent(self):
        assert extract_token({}, {}, AuthSettings()) is None


class TestViewer:
    """Tests for Viewer."""

    def test_require_returns_user_id(self):
        user_id = uuid4()

        assert Viewer(user_id=user_id).require() == str(user_id)

    def test_anonymous_require_raises(self):
        viewer = Viewer()

        assert not viewer.is_authenticated
        with pytest.raises(UnauthorizedError):
            viewer.require()
