"""bcrypt password hashing."""

from __future__ import annotations

import bcrypt

# bcrypt only looks at the first 72 bytes of the password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8")[:MAX_PASSWORD_BYTES], salt).decode("utf-8")

    def verify(self, password: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8")[:MAX_PASSWORD_BYTES], digest.encode("utf-8"))
        except ValueError:
            # Not a bcrypt digest
            return False
