# =============================================================================
# tests/test_auth.py - JWT Verification Tests
# =============================================================================
# Tokens are signed with the HS256 test secret from conftest.py, the same
# way Supabase signs them for projects on the legacy JWT secret.
# =============================================================================

import base64
import json
import time
from unittest.mock import patch
from uuid import UUID

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from jose import jwt

from app.auth import decode_access_token
from app.config import settings
from app.main import app

from tests.conftest import USER_ID


def make_claims(**overrides) -> dict:
    now = int(time.time())
    claims = {
        "sub": USER_ID,
        "aud": "authenticated",
        "email": "alex@example.com",
        "user_metadata": {"display_name": "Alex"},
        "iat": now,
        "exp": now + 3600,
    }
    claims.update(overrides)
    return claims


def make_token(secret: str | None = None, algorithm: str = "HS256", **overrides) -> str:
    return jwt.encode(make_claims(**overrides), secret or settings.SUPABASE_JWT_SECRET, algorithm=algorithm)


def unsigned_token(**overrides) -> str:
    """A token with alg "none" and an empty signature."""
    def segment(data: dict) -> str:
        return base64.urlsafe_b64encode(json.dumps(data).encode()).rstrip(b"=").decode()

    header = segment({"alg": "none", "typ": "JWT"})
    return f"{header}.{segment(make_claims(**overrides))}."


class TestDecodeAccessToken:

    def test_valid_token(self):
        user = decode_access_token(make_token())

        assert user.id == UUID(USER_ID)
        assert user.email == "alex@example.com"
        assert user.display_name == "Alex"

    def test_expired(self):
        with pytest.raises(HTTPException) as exc:
            decode_access_token(make_token(exp=int(time.time()) - 60))

        assert exc.value.status_code == 401
        assert exc.value.detail == "Token has expired"

    def test_wrong_signature(self):
        with pytest.raises(HTTPException) as exc:
            decode_access_token(make_token(secret="some-other-secret-of-decent-length"))

        assert exc.value.status_code == 401
        assert exc.value.detail.startswith("Invalid token")

    def test_wrong_audience(self):
        with pytest.raises(HTTPException):
            decode_access_token(make_token(aud="anon"))

    def test_malformed_subject(self):
        with pytest.raises(HTTPException) as exc:
            decode_access_token(make_token(sub="not-a-uuid"))

        assert exc.value.detail == "Invalid token: malformed user ID"

    def test_garbage(self):
        with pytest.raises(HTTPException) as exc:
            decode_access_token("not.a.jwt")

        assert exc.value.status_code == 401

    def test_missing_metadata(self):
        user = decode_access_token(make_token(user_metadata=None))

        assert user.display_name is None

    def test_hs256_rejected_without_secret(self):
        token = make_token()

        with patch.object(settings, "SUPABASE_JWT_SECRET", ""):
            with pytest.raises(HTTPException) as exc:
                decode_access_token(token)

        assert exc.value.status_code == 401
        assert "JWT secret" in exc.value.detail

    @pytest.mark.parametrize("token", [
        pytest.param(lambda: make_token(algorithm="HS512"), id="hs512"),
        pytest.param(unsigned_token, id="none"),
    ])
    def test_unsupported_algorithm(self, token):
        with pytest.raises(HTTPException) as exc:
            decode_access_token(token())

        assert exc.value.status_code == 401
        assert "Unsupported signing algorithm" in exc.value.detail


class TestBearerAuth:

    def test_verify_with_real_token(self):
        client = TestClient(app)

        response = client.get(
            "/api/auth/verify",
            headers={"Authorization": f"Bearer {make_token()}"},
        )

        assert response.status_code == 200
        assert response.json()["user_id"] == USER_ID

    def test_expired_token_is_401(self):
        client = TestClient(app)

        response = client.get(
            "/api/auth/verify",
            headers={"Authorization": f"Bearer {make_token(exp=int(time.time()) - 60)}"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"
