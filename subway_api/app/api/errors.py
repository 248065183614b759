"""
Translation of domain errors to HTTP responses.

``ERROR_STATUS`` is the single lookup from error class to status code.
Lookup walks the exception's MRO so subclasses inherit the status of
their base class (e.g. every ``NotFoundError`` becomes 404).  Malformed
request bodies are reported as 400 rather than FastAPI's default 422.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from subway_api.app.core.errors import (
    DuplicateLineNameError,
    InvalidLineError,
    NotFoundError,
    StationInUseError,
    SubwayError,
)

logger = logging.getLogger(__name__)


ERROR_STATUS: dict[type, int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateLineNameError: status.HTTP_400_BAD_REQUEST,
    InvalidLineError: status.HTTP_400_BAD_REQUEST,
    StationInUseError: status.HTTP_409_CONFLICT,
}


def status_for(exc: SubwayError) -> int:
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return status.HTTP_400_BAD_REQUEST


async def handle_subway_error(request: Request, exc: SubwayError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400: malformed request", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SubwayError, handle_subway_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
