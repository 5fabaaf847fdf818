"""Registration, login and session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from stockwatch.accounts import AccountService, SessionManager
from stockwatch.errors import SessionError

from .deps import bearer_token, current_user_dependency
from .schemas import Credentials


def create_auth_router(accounts: AccountService, sessions: SessionManager) -> APIRouter:
    router = APIRouter(prefix="/api/auth", tags=["auth"])
    current_user_id = current_user_dependency(sessions)

    # Plain def handlers run in the threadpool; bcrypt and store I/O block
    @router.post("/register", status_code=status.HTTP_201_CREATED)
    def register(body: Credentials) -> dict:
        account = accounts.register(body.username, body.password)
        session = sessions.issue(account.id)
        return {"user": account.to_public(), "token": session.token, "expiresAt": session.expires_at}

    @router.post("/login")
    def login(body: Credentials) -> dict:
        account = accounts.login(body.username, body.password)
        session = sessions.issue(account.id)
        return {"user": account.to_public(), "token": session.token, "expiresAt": session.expires_at}

    @router.post("/logout")
    def logout(request: Request) -> dict:
        return {"success": sessions.revoke(bearer_token(request))}

    @router.get("/me")
    def me(user_id: str = Depends(current_user_id)) -> dict:
        account = accounts.get(user_id)
        if account is None:
            # Token outlived its account (e.g. data directory was reset)
            sessions.revoke_user(user_id)
            raise SessionError()
        return {"user": account.to_public()}

    return router
