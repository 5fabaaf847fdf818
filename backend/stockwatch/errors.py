"""Error taxonomy shared by every StockWatch component.

Each error carries a ``kind`` (what category of failure the UI should render)
and a stable ``code`` (what exactly went wrong). The ``message`` is always a
safe, user-facing sentence; internal details go to the log, never the client.
"""

from __future__ import annotations


class StockwatchError(Exception):
    """Base class for all expected, user-visible failures."""

    kind: str = "internal"
    code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str = "Something went wrong") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"type": self.kind, "code": self.code, "message": self.message}


class UpstreamError(StockwatchError):
    """The market-data feed could not be reached or returned garbage."""

    kind = "upstream"
    code = "upstream_unavailable"
    status_code = 502

    def __init__(self, message: str = "Market data is currently unavailable") -> None:
        super().__init__(message)


class ValidationError(StockwatchError):
    kind = "validation"
    code = "invalid_input"
    status_code = 422


class DuplicateCodeError(ValidationError):
    code = "duplicate_code"
    status_code = 409

    def __init__(self, code: str) -> None:
        super().__init__(f"Stock {code} is already in the watchlist")
        self.stock_code = code


class AuthError(StockwatchError):
    kind = "auth"
    code = "invalid_credentials"
    status_code = 401

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)


class UsernameTakenError(AuthError):
    code = "username_taken"
    status_code = 409

    def __init__(self) -> None:
        super().__init__("Username already exists")


class SessionError(AuthError):
    code = "invalid_session"

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class StorageError(StockwatchError):
    """Reading or writing a persisted document failed."""

    kind = "storage"
    code = "storage_failure"
    status_code = 500

    def __init__(self, message: str = "Could not access stored data") -> None:
        super().__init__(message)
