"""Account registration and login."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from stockwatch.errors import AuthError, StorageError, UsernameTakenError, ValidationError
from stockwatch.storage import KeyValueStore

from .models import UserAccount
from .passwords import PasswordHasher

logger = logging.getLogger(__name__)

USERS_KEY = "users"
MAX_USERNAME_LENGTH = 64


class AccountService:
    """Users live in a single ``users`` document.

    Usernames are unique and case-sensitive. Accounts are never updated or
    deleted.
    """

    def __init__(self, store: KeyValueStore, hasher: PasswordHasher | None = None) -> None:
        self._store = store
        self._hasher = hasher or PasswordHasher()

    def register(self, username: str, password: str) -> UserAccount:
        username = _clean_username(username)
        if not password:
            raise ValidationError("Password is required")

        accounts = self._load()
        if any(a.username == username for a in accounts):
            raise UsernameTakenError()

        account = UserAccount(
            id=uuid.uuid4().hex,
            username=username,
            password_digest=self._hasher.hash(password),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        accounts.append(account)
        self._store.put(USERS_KEY, [a.to_dict() for a in accounts])
        logger.info("Registered user %s (%s)", username, account.id)
        return account

    def login(self, username: str, password: str) -> UserAccount:
        """Return the account for valid credentials, else raise AuthError.

        Unknown usernames and wrong passwords fail the same way. The username
        is stripped the same way registration strips it.
        """
        if isinstance(username, str):
            username = username.strip()
        account = self.find_by_username(username)
        if account is None or not password or not self._hasher.verify(password, account.password_digest):
            logger.info("Failed login for %r", username)
            raise AuthError()
        logger.info("User %s logged in", account.username)
        return account

    def get(self, user_id: str) -> UserAccount | None:
        for account in self._load():
            if account.id == user_id:
                return account
        return None

    def find_by_username(self, username: str) -> UserAccount | None:
        for account in self._load():
            if account.username == username:
                return account
        return None

    def _load(self) -> list[UserAccount]:
        raw = self._store.get(USERS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.error("Accounts document is not a list")
            raise StorageError()
        try:
            return [UserAccount.from_dict(item) for item in raw]
        except (KeyError, TypeError) as e:
            logger.error("Accounts document holds an invalid record: %s", e)
            raise StorageError() from e


def _clean_username(username: str) -> str:
    if not isinstance(username, str) or not username.strip():
        raise ValidationError("Username is required")
    username = username.strip()
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(f"Username must be at most {MAX_USERNAME_LENGTH} characters")
    return username
