"""Unit tests for JWT utilities and JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from grifi.config import AuthSettings
from grifi.domain.service import JWTService
from grifi.util.jwt import JWTError, create_token, verify_token


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trip(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = str(uuid4())

        payload = verify_token(
            create_token(user_id, settings, email="me@example.com"), settings
        )

        assert payload.sub == user_id
        assert payload.email == "me@example.com"
        assert payload.role == "authenticated"

    def test_expired_token_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        token = create_token(str(uuid4()), settings, expires_in=timedelta(seconds=-5))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)

    def test_wrong_secret_rejected(self):
        token = create_token(str(uuid4()), AuthSettings(jwt_secret="one"))

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_wrong_audience_rejected(self):
        token = create_token(
            str(uuid4()), AuthSettings(jwt_secret="s", jwt_audience="other")
        )

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="s"))


class TestJWTService:
    """Tests for JWTService.get_user_id_from_token."""

    def test_valid_token_gives_user_id(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = uuid4()

        result = JWTService(settings).get_user_id_from_token(
            create_token(str(user_id), settings)
        )

        assert result == user_id

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_invalid_token_gives_none(self, token):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))

        assert service.get_user_id_from_token(token) is None

    def test_non_uuid_subject_gives_none(self):
        settings = AuthSettings(jwt_secret="test-secret")

        result = JWTService(settings).get_user_id_from_token(
            create_token("not-a-uuid", settings)
        )

        assert result is None
