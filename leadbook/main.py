"""Application entrypoint for the Leadbook API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from leadbook.api.v1._authz import request_validation_handler
from leadbook.api.v1.router import get_api_router
from leadbook.core.config import get_config
from leadbook.core.startup import bootstrap


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    bootstrap()
    yield


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn leadbook.main:app`.
app = create_app()


def main() -> None:
    cfg = get_config()
    uvicorn.run("leadbook.main:app", host=cfg.API_HOST, port=cfg.API_PORT)


if __name__ == "__main__":
    main()
