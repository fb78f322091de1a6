"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from joshbank.api.routes import approvals, health
from joshbank.approval.reference import pipeline_from_settings
from joshbank.core.config import AppSettings
from joshbank.core.logger import setup_logging


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The approval chain is built once during startup; a ``ConfigurationError``
    there aborts startup rather than serving a broken chain.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = settings or AppSettings()
        setup_logging(app_settings)
        app.state.settings = app_settings
        app.state.pipeline = pipeline_from_settings(app_settings)
        yield

    app = FastAPI(
        title="JoshBank Transaction Approval",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(approvals.router, prefix="/approvals")
    return app
