"""
FastAPI application with assembled routers.

The lifespan starts the refresh driver (startup refresh plus the periodic
job) and shuts it down together with the HTTP client and worker pools.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..bootstrap import AppState, build_state
from ..logging_conf import component_logger
from .errors import register_exception_handlers
from .routers import health_router, partners_router


def create_app(state: AppState | None = None, manage_refresh: bool = True) -> FastAPI:
    """Create the API application around an existing or freshly built state."""

    state = state or build_state()
    logger = component_logger("api")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if manage_refresh:
            state.driver.start()
            logger.info("refresh_driver_started")
        yield
        if manage_refresh:
            state.driver.shutdown()
            state.close()
            logger.info("refresh_driver_stopped")

    app = FastAPI(
        title="Partner Directory API",
        description="Partners joined with their marketplace solutions",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.partner_directory = state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=state.settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(partners_router, prefix="/api")
    app.include_router(health_router, prefix="/api")
    return app


__all__ = ["create_app"]
