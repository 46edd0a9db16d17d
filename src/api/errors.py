"""Translate domain errors raised by services into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.model.errors import AuthError, DomainError

logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log("Request failed", extra={
        "path": request.url.path,
        "statusCode": exc.status_code,
        "error": exc.message,
    })
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": exc.message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
