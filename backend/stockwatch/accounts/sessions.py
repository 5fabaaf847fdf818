"""Server-side bearer token sessions."""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable
from threading import Lock

from stockwatch.errors import SessionError

from .models import Session

logger = logging.getLogger(__name__)

DEFAULT_TTL = 86400.0  # One day


class SessionManager:
    """Thread-safe in-memory table of issued tokens.

    Tokens are opaque random strings; nothing about the user is encoded in
    them. Sessions do not survive a restart.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.time) -> None:
        self._ttl = ttl
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = Lock()

    def issue(self, user_id: str) -> Session:
        now = self._clock()
        session = Session(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            issued_at=now,
            expires_at=now + self._ttl,
        )
        with self._lock:
            self._purge_expired(now)
            self._sessions[session.token] = session
        return session

    def validate(self, token: str) -> str:
        """Return the user id behind a token. Raises SessionError if unknown or expired."""
        now = self._clock()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                raise SessionError()
            if session.is_expired(now):
                del self._sessions[token]
                raise SessionError("Session expired, please log in again")
            return session.user_id

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def revoke_user(self, user_id: str) -> int:
        """Drop every session of a user. Returns how many were removed."""
        with self._lock:
            tokens = [t for t, s in self._sessions.items() if s.user_id == user_id]
            for token in tokens:
                del self._sessions[token]
        return len(tokens)

    def _purge_expired(self, now: float) -> None:
        expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug("Purged %d expired sessions", len(expired))

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
