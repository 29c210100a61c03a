"""Unit tests for JwtGuard."""

from datetime import timedelta
from uuid import uuid4

import pytest

from conduit.domain.shared.result import Failure
from conduit_auth import JWTService
from conduit_identity.application.context import JwtContext
from conduit_identity.application.services import JwtGuard, Unauthenticated

SECRET = "test-secret-key-with-at-least-32-characters"
OTHER_SECRET = "another-secret-key-with-32-plus-characters"


class TestJwtGuard:
    def setup_method(self):
        self.jwt_service = JWTService(secret_key=SECRET)
        self.guard = JwtGuard(self.jwt_service)
        self.user_id = uuid4()
        self.token = self.jwt_service.create_access_token(self.user_id)

    @pytest.mark.parametrize("scheme", ["Token", "Bearer", "token", "BEARER"])
    def test_accepts_known_schemes(self, scheme):
        result = self.guard.authenticate(f"{scheme} {self.token}")

        assert result.unwrap() == JwtContext(user_id=self.user_id, token=self.token)

    def test_context_does_not_print_token(self):
        context = self.guard.authenticate(f"Token {self.token}").unwrap()

        assert self.token not in repr(context)
        assert self.token not in str(context)

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "Token",
            "Basic dXNlcjpwYXNz",
            "Token a b",
            "Token not.a.jwt",
        ],
    )
    def test_rejects_missing_or_malformed_header(self, header):
        assert self.guard.authenticate(header) == Failure(Unauthenticated())

    def test_rejects_token_without_scheme(self):
        assert self.guard.authenticate(self.token) == Failure(Unauthenticated())

    def test_rejects_foreign_signature(self):
        forged = JWTService(secret_key=OTHER_SECRET).create_access_token(self.user_id)

        assert self.guard.authenticate(f"Token {forged}") == Failure(Unauthenticated())

    def test_rejects_expired_token(self):
        expired = self.jwt_service.create_access_token(
            self.user_id,
            expires_delta=timedelta(seconds=-1),
        )

        assert self.guard.authenticate(f"Token {expired}") == Failure(Unauthenticated())

    def test_extract_token(self):
        assert JwtGuard.extract_token(f"  Token {self.token} ") == self.token
        assert JwtGuard.extract_token("Digest abc") is None
