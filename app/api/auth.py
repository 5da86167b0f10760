"""
app/api/auth.py

Bearer-token check against the hosted auth service, exposed as a FastAPI dependency.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import requests
from fastapi import Depends, Header, HTTPException, status

from app.config import AuthSettings, ExternalHTTPSettings, get_auth_settings, get_external_http_settings

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


class AuthVerificationError(RuntimeError):
    """
    Raised when a bearer token cannot be verified.
    """


class SupabaseTokenVerifier:
    """
    Resolves a bearer token to its user via ``GET /auth/v1/user``.
    """

    def __init__(
        self,
        *,
        settings: AuthSettings,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        if not settings.is_configured:
            raise ValueError("Auth settings require SUPABASE_URL and SUPABASE_ANON_KEY.")
        self._user_url = f"{str(settings.supabase_url).rstrip('/')}/auth/v1/user"
        self._anon_key = str(settings.anon_key)
        self._timeout_seconds = http_settings.timeout_seconds
        self._session = session or requests.Session()

    def verify(self, token: str) -> dict[str, Any]:
        try:
            response = self._session.get(
                self._user_url,
                headers={
                    "apikey": self._anon_key,
                    "Authorization": f"{_BEARER_PREFIX}{token}",
                },
                timeout=self._timeout_seconds,
            )
        except (requests.Timeout, requests.ConnectionError) as exc:
            raise AuthVerificationError(f"Auth service unreachable: {exc}") from exc

        if response.status_code != 200:
            raise AuthVerificationError(f"Invalid token (status {response.status_code})")
        try:
            user = response.json()
        except ValueError as exc:
            raise AuthVerificationError("Auth service returned invalid JSON.") from exc
        if not isinstance(user, dict) or not user.get("id"):
            raise AuthVerificationError("Invalid token")
        return user


@lru_cache(maxsize=1)
def get_token_verifier() -> SupabaseTokenVerifier | None:
    """
    Build and cache the token verifier; ``None`` when auth is not configured.
    """

    settings = get_auth_settings()
    if not settings.is_configured:
        return None
    return SupabaseTokenVerifier(settings=settings, http_settings=get_external_http_settings())


def extract_bearer_token(authorization: str | None) -> str:
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise AuthVerificationError("Missing or invalid Authorization header")
    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise AuthVerificationError("Missing or invalid Authorization header")
    return token


def require_authenticated_user(
    authorization: str | None = Header(default=None),
    verifier: SupabaseTokenVerifier | None = Depends(get_token_verifier),
) -> dict[str, Any]:
    """
    Reject the request unless it carries a bearer token the auth service accepts.

    The specific failure reason is logged, never returned to the caller.
    """

    if verifier is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Configuration Error",
                "message": "Missing required environment variables: SUPABASE_URL and/or SUPABASE_ANON_KEY",
            },
        )

    try:
        return verifier.verify(extract_bearer_token(authorization))
    except AuthVerificationError as exc:
        logger.error("Request authentication failed context=authentication error=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Unauthorized",
                "message": "Authentication required. Please log in and try again.",
            },
        ) from exc
