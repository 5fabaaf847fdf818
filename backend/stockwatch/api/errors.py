"""Map exceptions to structured JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stockwatch.errors import StockwatchError

logger = logging.getLogger(__name__)


def error_body(kind: str, code: str, message: str) -> dict:
    return {"error": {"type": kind, "code": code, "message": message}}


def install_error_handlers(app: FastAPI) -> None:
    """Every failure leaves the API as {"error": {"type", "code", "message"}}."""

    @app.exception_handler(StockwatchError)
    async def handle_stockwatch_error(request: Request, exc: StockwatchError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()} - {""})
        message = f"Invalid value for: {', '.join(fields)}" if fields else "Invalid request"
        return JSONResponse(status_code=422, content=error_body("validation", "invalid_input", message))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_body("internal", "internal_error", "Something went wrong"),
        )
