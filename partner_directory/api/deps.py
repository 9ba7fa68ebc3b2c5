"""FastAPI dependency providers backed by the application state."""

from __future__ import annotations

from fastapi import Request

from ..bootstrap import AppState
from ..service import QueryService


def get_state(request: Request) -> AppState:
    return request.app.state.partner_directory


def get_query_service(request: Request) -> QueryService:
    return get_state(request).queries


__all__ = ["get_query_service", "get_state"]
