"""
FastAPI exception handlers wiring the error translation pipeline into the app.

How to use:
    - Call `register_exception_handlers(app)` from the app factory.
    - Services and repositories raise game_reviews.exceptions.base.* errors or let
      SQLAlchemy errors propagate; every one of them ends up in `translate_error`.
    - Unknown paths and unsupported methods never reach a route: Starlette raises an
      HTTPException, mapped here to the route-not-found body.

Client bodies are always {"message": "..."} (plus "status" for route-not-found).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from game_reviews.exceptions.base import AppError, INVALID_BODY_MESSAGE
from game_reviews.exceptions.pipeline import ErrorResponse, translate_error, route_not_found

logger = logging.getLogger(__name__)

# Starlette answers both with its own 404/405 before any route runs.
ROUTE_MISS_STATUSES = {404, 405}


def _respond(request: Request, response: ErrorResponse) -> JSONResponse:
    if response.status_code < 500:
        logger.info(
            "http.error.client",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "classifier": response.classifier,
            },
        )
    return JSONResponse(status_code=response.status_code, content=response.body)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _respond(request, translate_error(exc))


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Type mismatch -> 400, missing FK target -> 404, anything else -> 500."""
    return _respond(request, translate_error(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in ROUTE_MISS_STATUSES:
        return _respond(request, route_not_found())
    return _respond(request, ErrorResponse(exc.status_code, {"message": str(exc.detail)}, "http_exception"))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable or wrongly shaped JSON body."""
    logger.debug("http.request.invalid", extra={"errors": exc.errors()})
    return _respond(request, ErrorResponse(400, {"message": INVALID_BODY_MESSAGE}, "request_validation"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: the pipeline logs the traceback and returns a fixed 500 body."""
    return _respond(request, translate_error(exc))


# Helper to register all handlers on an app (call this from your app factory)
def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
