"""Exception handlers producing the ``{timestamp, status, message, details}`` body."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..logging_conf import component_logger
from .schemas import ErrorOut

logger = component_logger("api")


def _error_response(message: str, status: int, details: Any) -> JSONResponse:
    body = ErrorOut(timestamp=datetime.now(), status=status, message=message, details=details)
    return JSONResponse(status_code=status, content=jsonable_encoder(body))


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("invalid_request", path=request.url.path, errors=str(exc.errors()))
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return _error_response("Invalid input", 400, details)


async def _value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("invalid_argument", path=request.url.path, error=str(exc))
    return _error_response("Invalid input", 400, str(exc))


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unexpected_error", path=request.url.path, error=str(exc), exc_info=exc)
    return _error_response("Internal server error", 500, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(ValueError, _value_error)
    app.add_exception_handler(Exception, _unexpected_error)


__all__ = ["register_exception_handlers"]
