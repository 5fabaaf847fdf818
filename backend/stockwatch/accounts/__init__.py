"""User accounts and login sessions.

Public API:
    UserAccount     - Stored account record (digest never leaves the server)
    AccountService  - register / login / lookup
    PasswordHasher  - bcrypt hash and verify
    SessionManager  - issue / validate / revoke bearer tokens
"""

from .models import Session, UserAccount
from .passwords import PasswordHasher
from .service import AccountService
from .sessions import SessionManager

__all__ = [
    "UserAccount",
    "Session",
    "AccountService",
    "PasswordHasher",
    "SessionManager",
]
