"""Runtime configuration read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_UPSTREAM_URL = (
    "https://pasardana.id/api/StockSearchResult/GetAll"
    "?pageBegin=0&pageLength=1000&sortField=Code&sortOrder=ASC"
)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    """All tunables for one StockWatch process.

    - STOCKWATCH_DATA_DIR        directory for the JSON documents
    - STOCKWATCH_QUOTE_MAX_AGE   seconds a cached quote batch stays fresh
    - STOCKWATCH_QUOTE_SOURCE    "pasardana" (real feed) or "simulator"
    - STOCKWATCH_UPSTREAM_URL    stock summary endpoint
    - STOCKWATCH_UPSTREAM_TIMEOUT  seconds before an upstream call is abandoned
    - STOCKWATCH_SESSION_TTL     seconds a login token stays valid
    - STOCKWATCH_BCRYPT_ROUNDS   bcrypt cost factor
    - STOCKWATCH_CORS_ORIGINS    comma separated allowed origins
    - LOG_LEVEL                  root logging level
    """

    data_dir: Path = Path("data")
    quote_max_age: float = 3600.0
    quote_source: str = "pasardana"
    upstream_url: str = DEFAULT_UPSTREAM_URL
    upstream_timeout: float = 10.0
    session_ttl: float = 86400.0
    bcrypt_rounds: int = 12
    cors_origins: tuple[str, ...] = field(default=("*",))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        origins = os.environ.get("STOCKWATCH_CORS_ORIGINS", "*")
        return cls(
            data_dir=Path(os.environ.get("STOCKWATCH_DATA_DIR", "data").strip() or "data"),
            quote_max_age=_env_float("STOCKWATCH_QUOTE_MAX_AGE", 3600.0),
            quote_source=os.environ.get("STOCKWATCH_QUOTE_SOURCE", "pasardana").strip().lower()
            or "pasardana",
            upstream_url=os.environ.get("STOCKWATCH_UPSTREAM_URL", "").strip() or DEFAULT_UPSTREAM_URL,
            upstream_timeout=_env_float("STOCKWATCH_UPSTREAM_TIMEOUT", 10.0),
            session_ttl=_env_float("STOCKWATCH_SESSION_TTL", 86400.0),
            bcrypt_rounds=_env_int("STOCKWATCH_BCRYPT_ROUNDS", 12),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
            log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
