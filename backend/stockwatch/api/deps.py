"""Shared FastAPI dependencies."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Request

from stockwatch.accounts import SessionManager
from stockwatch.errors import SessionError


def bearer_token(request: Request) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise SessionError("Missing or invalid Authorization header")
    return token.strip()


def current_user_dependency(sessions: SessionManager) -> Callable[[Request], str]:
    """Build a dependency that resolves the request's bearer token to a user id."""

    async def current_user_id(request: Request) -> str:
        return sessions.validate(bearer_token(request))

    return current_user_id
