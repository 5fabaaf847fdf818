"""Data models for user accounts and sessions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class UserAccount:
    id: str
    username: str
    password_digest: str
    created_at: str  # ISO-8601, UTC

    def to_public(self) -> dict:
        """Everything a client may see. The digest stays on the server."""
        return {"id": self.id, "username": self.username, "createdAt": self.created_at}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "password": self.password_digest,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserAccount:
        return cls(
            id=str(data["id"]),
            username=str(data["username"]),
            password_digest=str(data["password"]),
            created_at=str(data.get("createdAt", "")),
        )


@dataclass(frozen=True, slots=True)
class Session:
    token: str
    user_id: str
    issued_at: float  # Unix seconds
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
