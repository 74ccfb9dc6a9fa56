"""Shared runtime settings for the catalog client, CLI and reference server.

Settings are resolved from the process environment. Frontends load ``.env``
with python-dotenv before the first call to :func:`get_settings`.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_BASE_URL = "http://localhost:5108/api"


@dataclass(frozen=True)
class Settings:
    app_name: str
    api_base_url: str
    request_timeout: float
    http_retries: int
    currency: str
    debug: bool
    log_verbosity: str
    cors_allow_origins: tuple[str, ...]


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_number(name: str, default: float, *, minimum: float = 0) -> float:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        parsed = float(val.strip())
    except ValueError:
        return default
    if parsed < minimum:
        return default
    return parsed


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return Settings(
        app_name=os.getenv("APP_NAME", "Catalog Desk"),
        api_base_url=(os.getenv("CATALOG_API_BASE_URL") or DEFAULT_API_BASE_URL).strip().rstrip("/"),
        request_timeout=_env_number("CATALOG_HTTP_TIMEOUT", 20.0, minimum=0.1),
        http_retries=int(_env_number("CATALOG_HTTP_RETRIES", 0)),
        currency=(os.getenv("CATALOG_CURRENCY") or "USD").strip().upper(),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        cors_allow_origins=origins or ("*",),
    )


__all__ = ["DEFAULT_API_BASE_URL", "Settings", "get_settings"]
