# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Verifies Supabase access tokens locally:
# - HS256 tokens with the project's legacy JWT secret
# - ES256/RS256 tokens with the project's JWKS (cached for an hour)
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/couples")
#   async def list_couples(user: AuthUser = Depends(get_current_user)):
#       ...
# =============================================================================

import logging
import time
from typing import Any
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AuthUser
from app.config import settings

logger = logging.getLogger(__name__)

TOKEN_AUDIENCE = "authenticated"
JWKS_CACHE_TTL = 3600  # 1 hour
ALLOWED_ALGORITHMS = {"HS256", "ES256", "RS256"}

# HTTP Bearer token extractor
security = HTTPBearer()

_jwks_cache: dict[str, Any] = {}
_jwks_cache_time: float = 0


def _jwks_url() -> str:
    return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"


def _fetch_jwks() -> dict[str, Any]:
    """Fetch the project's JWKS, serving a cached copy for up to an hour."""
    global _jwks_cache, _jwks_cache_time

    now = time.time()
    if _jwks_cache and (now - _jwks_cache_time) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        response = httpx.get(_jwks_url(), timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = now
        logger.debug("Refreshed JWKS cache")
    except Exception as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # A stale key set is better than none
        if not _jwks_cache:
            return {"keys": []}

    return _jwks_cache


def _signing_key(token: str) -> tuple[Any, str]:
    """
    Pick the verification key for a token from its header.

    Returns:
        (key, algorithm)

    Raises:
        JWTError: algorithm not allowed, HS256 with no secret configured,
            or an asymmetric token whose kid isn't in the JWKS
    """
    header = jwt.get_unverified_header(token)
    alg = header.get("alg", "HS256")

    if alg not in ALLOWED_ALGORITHMS:
        raise JWTError(f"Unsupported signing algorithm: {alg}")

    if alg == "HS256":
        if not settings.SUPABASE_JWT_SECRET:
            logger.warning("Rejected HS256 token: SUPABASE_JWT_SECRET is not set")
            raise JWTError("HS256 tokens are not accepted without a JWT secret")
        return settings.SUPABASE_JWT_SECRET, alg

    kid = header.get("kid")
    for key in _fetch_jwks().get("keys", []):
        if key.get("kid") == kid:
            return key, alg

    raise JWTError(f"No signing key found for kid={kid}")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str) -> AuthUser:
    """
    Verify a Supabase access token and build the AuthUser from its claims.

    Raises:
        HTTPException: 401 if the token is invalid, expired or has no
            usable subject
    """
    try:
        key, algorithm = _signing_key(token)
        payload = jwt.decode(token, key, algorithms=[algorithm], audience=TOKEN_AUDIENCE)
    except ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {e}")

    try:
        user_id = UUID(payload.get("sub") or "")
    except ValueError:
        logger.warning(f"Token has missing or malformed sub: {payload.get('sub')!r}")
        raise _unauthorized("Invalid token: malformed user ID")

    metadata = payload.get("user_metadata") or {}
    return AuthUser(
        id=user_id,
        email=payload.get("email"),
        display_name=metadata.get("display_name"),
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """
    FastAPI dependency: the user behind the Bearer token.

    A missing Authorization header is rejected by HTTPBearer itself.
    """
    user = decode_access_token(credentials.credentials)
    logger.debug(f"Authenticated user: {user.id}")
    return user
