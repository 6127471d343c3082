"""Renders every failure as ``{success: false, error: {code, message, details}}``."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace.schemas.response import ErrorBody, ErrorResponse
from marketplace.utils.exceptions import MarketplaceError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, code: str, message: str, details: Any = None
) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        400, "VALIDATION_ERROR", "Validation failed", jsonable_encoder(exc.errors())
    )


async def _marketplace_error(request: Request, exc: MarketplaceError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    return error_response(exc.status_code, code, str(exc.detail))


async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    pgcode = None
    if isinstance(exc, DBAPIError):
        pgcode = getattr(exc.orig, "pgcode", None)
    logger.error(
        "Database error on %s %s: %s (code=%s)",
        request.method,
        request.url.path,
        exc,
        pgcode,
        exc_info=exc,
    )
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(MarketplaceError, _marketplace_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(SQLAlchemyError, _database_error)
    app.add_exception_handler(Exception, _unhandled_error)
