"""Unit tests for JWTService."""

import string
from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from conduit_auth import TokenError
from conduit_auth.services import JWTService

SECRET = "test-secret-key-with-at-least-32-characters"
OTHER_SECRET = "another-secret-key-with-32-plus-characters"
BASE64URL = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"


def _tampered_variants(token: str):
    """Yield every token with exactly one character replaced.

    The replacement flips the top bit of the base64url value, which is
    always a data bit, so every variant decodes to different bytes.
    """
    for i, char in enumerate(token):
        if char == ".":
            continue
        replacement = BASE64URL[BASE64URL.index(char) ^ 32]
        yield token[:i] + replacement + token[i + 1 :]


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key=SECRET)
        assert service.access_token_expire == timedelta(hours=24)

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    @pytest.mark.parametrize("hours", [0, None])
    def test_zero_or_none_expiry_disables_expiration(self, hours):
        service = JWTService(secret_key=SECRET, access_token_expire_hours=hours)
        assert service.access_token_expire is None

    def test_repr_does_not_leak_secret(self):
        service = JWTService(secret_key=SECRET)
        assert SECRET not in repr(service)


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()

    def test_create_access_token(self):
        token = self.service.create_access_token(self.user_id)

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_verify_valid_token_returns_user_id(self):
        token = self.service.create_access_token(self.user_id)

        result = self.service.verify_token(token)

        assert result.is_success()
        payload = result.unwrap()
        assert payload.user_id == self.user_id
        assert payload.expires_at is not None
        assert payload.expires_at > payload.issued_at
        assert not payload.is_expired()

    def test_token_claims_use_hs256_and_subject(self):
        token = self.service.create_access_token(self.user_id)

        header = jwt.get_unverified_header(token)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert header["alg"] == "HS256"
        assert claims["sub"] == str(self.user_id)
        assert {"sub", "iat", "exp"} <= set(claims)

    def test_token_without_expiry_policy_verifies(self):
        service = JWTService(secret_key=SECRET, access_token_expire_hours=None)
        token = service.create_access_token(self.user_id)

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        payload = service.verify_token(token).unwrap()

        assert "exp" not in claims
        assert payload.expires_at is None
        assert payload.user_id == self.user_id

    def test_verify_expired_token_fails(self):
        token = self.service.create_access_token(
            self.user_id,
            expires_delta=timedelta(seconds=-1),
        )

        result = self.service.verify_token(token)

        assert result.is_failure()
        assert result.error is TokenError.EXPIRED

    def test_verify_wrong_secret_fails(self):
        other_service = JWTService(secret_key=OTHER_SECRET)
        token = other_service.create_access_token(self.user_id)

        result = self.service.verify_token(token)

        assert result.is_failure()
        assert result.error is TokenError.INVALID_SIGNATURE

    @pytest.mark.parametrize(
        "token",
        ["", "invalid", "invalid.token.string", "a.b", "...."],
    )
    def test_verify_malformed_token_fails(self, token):
        result = self.service.verify_token(token)

        assert result.is_failure()
        assert result.error is TokenError.MALFORMED

    def test_every_single_character_tamper_is_rejected(self):
        token = self.service.create_access_token(self.user_id)

        variants = list(_tampered_variants(token))

        assert len(variants) == len(token) - token.count(".")
        for tampered in variants:
            assert tampered != token
            result = self.service.verify_token(tampered)
            assert result.is_failure(), tampered

    def test_token_missing_subject_is_malformed(self):
        token = jwt.encode({"iat": 1_700_000_000}, SECRET, algorithm="HS256")

        assert self.service.verify_token(token).error is TokenError.MALFORMED

    def test_token_with_non_uuid_subject_is_malformed(self):
        token = jwt.encode(
            {"sub": "not-a-uuid", "iat": 1_700_000_000},
            SECRET,
            algorithm="HS256",
        )

        assert self.service.verify_token(token).error is TokenError.MALFORMED
