"""FastAPI reference server for the products collection.

Serves the same ``/api/products`` contract the catalog client talks to, backed
by an in-memory repository. Intended for local development and demos.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env before importing modules that may resolve/capture settings.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(ROOT_DIR / ".env")

from ..config import get_settings
from ..core.canonical import Product
from .repository import ProductRepository
from .routers import api

DEFAULT_PORT = 5108

settings = get_settings()
logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)


def create_app(products: Iterable[Product] = ()) -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="In-memory products collection for the catalog client",
        version="1.0.0",
    )
    fastapi_app.state.repository = ProductRepository(products)

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run(host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> None:
    import uvicorn

    uvicorn.run("catalogdesk.server.main:app", host=host, port=port, reload=settings.debug)


__all__ = ["DEFAULT_PORT", "app", "create_app", "logger", "run", "settings"]
